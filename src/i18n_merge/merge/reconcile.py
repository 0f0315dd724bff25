"""
Reconciliation of a freshly extracted source catalog with a target catalog.

The merge keeps human translations, fabricates a marked placeholder for every
new message-id and drops every id that no longer exists in the source.

Usage Examples:
    >>> from i18n_merge.catalog.model import Catalog
    >>> source = Catalog(translations={"banana": "Banana", "apple": "Apple"})
    >>> target = Catalog(translations={"banana": "Banane"})
    >>> merged = reconcile(source, target, "fr", MergeOptions(new_prefix="@new"))
    >>> merged.translations
    {'apple': '@new Apple', 'banana': 'Banane'}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing_extensions import override

from ..catalog.model import Catalog, Translations


@dataclass(frozen=True)
class MergeOptions:
    """Options that influence how new entries are created."""

    new_prefix: str
    source_language_target_locale: str | None = None
    collapse_whitespace: bool = False
    trim: bool = False
    remove_ids_with_prefix: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class MergeSummary:
    """Counts describing what a merge did to one target catalog."""

    locale: str
    added: int
    kept: int
    removed: int

    @property
    def total(self) -> int:
        """Number of entries in the merged catalog."""
        return self.added + self.kept

    @override
    def __str__(self) -> str:
        return (
            f"{self.locale}: {self.added} new, "
            f"{self.kept} kept, "
            f"{self.removed} removed"
        )


def new_translation(source_text: str, locale: str, options: MergeOptions) -> str:
    """Placeholder translation for a message-id the target has never seen."""
    if options.source_language_target_locale == locale:
        return source_text
    return f"{options.new_prefix} {source_text}"


def reconcile(
    source: Catalog, target: Catalog | None, locale: str, options: MergeOptions
) -> Catalog:
    """
    Merge a source catalog into a target catalog for one locale.

    Args:
        source: Catalog produced by the extraction step
        target: Existing target catalog, or None if there is none yet
        locale: Locale of the target catalog
        options: Merge options

    Returns:
        A new catalog for ``locale`` holding exactly the source's message-ids,
        in ascending id order
    """
    existing: Translations = target.translations if target is not None else {}

    translations: Translations = {}
    for message_id in source.sorted_ids():
        if message_id in existing:
            translations[message_id] = existing[message_id]
        else:
            translations[message_id] = new_translation(
                source.translations[message_id], locale, options
            )

    return Catalog(locale=locale, translations=translations)


def summarize_merge(prior: Catalog | None, merged: Catalog) -> MergeSummary:
    """
    Compare a target catalog before and after a merge.

    Args:
        prior: Target catalog before the merge, or None if there was none
        merged: Result of ``reconcile``

    Returns:
        Per-locale counts of new, kept and removed entries
    """
    before = set(prior.translations) if prior is not None else set[str]()
    after = set(merged.translations)
    return MergeSummary(
        locale=merged.locale or "",
        added=len(after - before),
        kept=len(after & before),
        removed=len(before - after),
    )
