"""
Canonical JSON encoding of translation catalogs.

Two catalogs with the same content always serialize to byte-identical text:
top-level keys are ``locale`` then ``translations``, translation keys are
sorted ascending, indentation is two spaces and non-ASCII text is written
literally.

Usage Examples:
    >>> from i18n_merge.catalog.model import Catalog
    >>> print(serialize(Catalog(locale="fr", translations={"b": "B", "a": "A"})))
    {
      "locale": "fr",
      "translations": {
        "a": "A",
        "b": "B"
      }
    }
"""

from __future__ import annotations

import json

from pydantic import ValidationError

from ..utils.exceptions import CatalogFormatError
from .model import Catalog

INDENT = 2


def serialize(catalog: Catalog) -> str:
    """
    Encode a catalog in its canonical text form.

    Args:
        catalog: Catalog to encode

    Returns:
        JSON text without a trailing newline
    """
    document: dict[str, object] = {}
    if catalog.locale is not None:
        document["locale"] = catalog.locale
    document["translations"] = {
        message_id: catalog.translations[message_id]
        for message_id in catalog.sorted_ids()
    }
    return json.dumps(document, indent=INDENT, ensure_ascii=False)


def parse(text: str, origin: str | None = None) -> Catalog:
    """
    Decode catalog text.

    Args:
        text: JSON document to decode
        origin: Where the text came from, used in error messages

    Returns:
        The decoded catalog

    Raises:
        CatalogFormatError: If the text is not a JSON object of the catalog shape
    """
    try:
        raw: object = json.loads(text)  # pyright: ignore[reportAny]
    except json.JSONDecodeError as e:
        raise CatalogFormatError(f"invalid JSON: {e}", path=origin) from e

    if not isinstance(raw, dict):
        raise CatalogFormatError(
            f"catalog must be a JSON object, got {type(raw).__name__}", path=origin
        )

    try:
        return Catalog.model_validate(raw)
    except ValidationError as e:
        raise CatalogFormatError(
            f"unexpected catalog structure: {e.error_count()} error(s)",
            path=origin,
            context=e.errors(),
        ) from e
