"""Catalog model, canonical serialization and storage."""

from .model import Catalog, Translations
from .serializer import parse, serialize
from .storage import load_catalog_if_exists, load_if_exists, save

__all__ = [
    "Catalog",
    "Translations",
    "parse",
    "serialize",
    "load_catalog_if_exists",
    "load_if_exists",
    "save",
]
