"""
Optional clean-up applied to the source catalog before merging.

All hooks are off by default. They only ever touch the source catalog, so
existing target translations stay exactly as their authors wrote them.
"""

from __future__ import annotations

import logging
import re

from ..catalog.model import Catalog
from .reconcile import MergeOptions

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_text(text: str, options: MergeOptions) -> str:
    """Apply whitespace collapsing and trimming to one source text."""
    if options.collapse_whitespace:
        text = _WHITESPACE_RUN.sub(" ", text)
    if options.trim:
        text = text.strip()
    return text


def normalize_source(source: Catalog, options: MergeOptions) -> Catalog:
    """
    Return the source catalog with the configured hooks applied.

    Args:
        source: Catalog produced by the extraction step
        options: Merge options carrying the hook switches

    Returns:
        The same catalog if no hook is enabled, otherwise a new catalog
    """
    prefixes = options.remove_ids_with_prefix
    if not (prefixes or options.collapse_whitespace or options.trim):
        return source

    translations: dict[str, str] = {}
    removed = 0
    for message_id, text in source.translations.items():
        if prefixes and message_id.startswith(prefixes):
            removed += 1
            continue
        translations[message_id] = normalize_text(text, options)

    if removed:
        logger.info(f"Removed {removed} message(s) with prefixes {list(prefixes)}")

    return Catalog(locale=source.locale, translations=translations)
