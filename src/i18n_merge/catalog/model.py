"""In-memory representation of a translation catalog."""

from __future__ import annotations

from typing import ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

Translations = dict[str, str]


class Catalog(BaseModel):
    """
    A locale-tagged collection of message-id to translated-text pairs.

    The ``translations`` mapping keeps insertion order, but equality between
    two catalogs only looks at the locale and the id/text pairs.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="ignore")

    locale: str | None = Field(
        default=None,
        description="Locale tag of the catalog; optional on load",
    )
    translations: Translations = Field(
        default_factory=dict,
        description="Mapping of message-id to translated text",
    )

    @field_validator("translations", mode="before")
    @classmethod
    def normalize_missing_translations(cls, v: object) -> object:
        """Treat an explicit ``null`` translations value as empty."""
        return {} if v is None else v

    @classmethod
    def empty(cls, locale: str | None = None) -> Self:
        """Create an empty catalog shell, optionally stamped with a locale."""
        return cls(locale=locale, translations={})

    def sorted_ids(self) -> list[str]:
        """Message-ids in ascending lexicographic order."""
        return sorted(self.translations)
