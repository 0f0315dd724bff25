"""Tests for the catalog model."""

from __future__ import annotations

from i18n_merge.catalog.model import Catalog


class TestCatalog:
    """Test cases for Catalog construction and equality."""

    def test_defaults(self) -> None:
        """A catalog without arguments has no locale and no entries."""
        catalog = Catalog()

        assert catalog.locale is None
        assert catalog.translations == {}

    def test_empty_shell(self) -> None:
        """The empty shell is stamped with the given locale."""
        catalog = Catalog.empty("fr-FR")

        assert catalog.locale == "fr-FR"
        assert catalog.translations == {}

    def test_null_translations_are_normalized(self) -> None:
        """An explicit null translations value becomes an empty mapping."""
        catalog = Catalog.model_validate({"locale": "fr", "translations": None})

        assert catalog.translations == {}

    def test_missing_translations_are_normalized(self) -> None:
        """A document without translations becomes an empty catalog."""
        catalog = Catalog.model_validate({"locale": "fr"})

        assert catalog.translations == {}

    def test_equality_ignores_entry_order(self) -> None:
        """Catalogs with the same pairs in a different order are equal."""
        first = Catalog(locale="fr", translations={"a": "A", "b": "B"})
        second = Catalog(locale="fr", translations={"b": "B", "a": "A"})

        assert first == second

    def test_equality_considers_locale(self) -> None:
        """Catalogs for different locales are not equal."""
        first = Catalog(locale="fr", translations={"a": "A"})
        second = Catalog(locale="de", translations={"a": "A"})

        assert first != second

    def test_sorted_ids(self) -> None:
        """Message-ids are listed in ascending order."""
        catalog = Catalog(translations={"banana": "", "apple": "", "Zebra": ""})

        assert catalog.sorted_ids() == ["Zebra", "apple", "banana"]
