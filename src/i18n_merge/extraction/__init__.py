"""Pluggable extraction collaborators that write the source catalog."""

from .base import ExtractionRequest, ExtractionResult, Extractor
from .registry import (
    available_extractors,
    get_extractor,
    register_extractor,
    unregister_extractor,
)

__all__ = [
    "ExtractionRequest",
    "ExtractionResult",
    "Extractor",
    "available_extractors",
    "get_extractor",
    "register_extractor",
    "unregister_extractor",
]
