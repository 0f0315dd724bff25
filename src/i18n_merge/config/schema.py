"""Configuration schema for i18n-merge using nested Pydantic models."""

from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..merge.reconcile import MergeOptions

DEFAULT_SOURCE_FILE = "messages.json"
DEFAULT_EXTRACTOR = "python-ast"
DEFAULT_NEW_PREFIX = "@new"


class ExtractorConfig(BaseModel):
    """Selection and options of the extraction collaborator."""

    name: str = Field(
        default=DEFAULT_EXTRACTOR,
        description="Identifier of the extraction implementation to run",
        min_length=1,
    )
    source_dir: str = Field(
        default=".",
        description="Root of the application source scanned by python-ast",
    )
    source_locale: str = Field(
        default="en-US",
        description="Locale written into the extracted source catalog",
    )
    exclude: list[str] = Field(
        default_factory=list,
        description="Extra directory names skipped while scanning",
    )
    command: list[str] = Field(
        default_factory=list,
        description=(
            "Program and arguments run by the command extractor; "
            "{output_path}, {out_file} and {format} are substituted"
        ),
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")


class I18nMergeConfig(BaseModel):
    """
    Main configuration model for i18n-merge.

    Paths in ``target_files`` and ``source_file`` are relative to
    ``output_path``.
    """

    output_path: str = Field(
        default=".",
        description="Directory holding the source catalog and all target catalogs",
    )
    source_file: str = Field(
        default=DEFAULT_SOURCE_FILE,
        description="Filename of the extracted source catalog",
        min_length=1,
    )
    target_files: dict[str, str] = Field(
        ...,
        description="Mapping of locale to target catalog filename",
    )
    source_language_target_locale: str | None = Field(
        default=None,
        description="Target locale that is written in the source language",
    )
    new_prefix: str = Field(
        ...,
        description="Marker prepended to the source text of new entries",
        min_length=1,
    )
    remove_ids_with_prefix: list[str] = Field(
        default_factory=list,
        description="Drop source message-ids starting with any of these prefixes",
    )
    collapse_whitespace: bool = Field(
        default=False,
        description="Collapse whitespace runs in source texts to one space",
    )
    trim: bool = Field(
        default=False,
        description="Strip leading and trailing whitespace from source texts",
    )
    verbose: bool = Field(
        default=False,
        description="Enable debug output, including from the extractor",
    )
    extractor: ExtractorConfig = Field(default_factory=ExtractorConfig)

    model_config: ClassVar[ConfigDict] = ConfigDict(
        validate_assignment=True,
        extra="forbid",
    )

    @field_validator("output_path", mode="before")
    @classmethod
    def default_output_path(cls, v: object) -> object:
        """An empty or null output path means the current directory."""
        return v or "."

    @field_validator("source_file", mode="before")
    @classmethod
    def default_source_file(cls, v: object) -> object:
        """A null source file means the default filename."""
        return DEFAULT_SOURCE_FILE if v is None else v

    @field_validator("target_files")
    @classmethod
    def validate_target_files(cls, v: dict[str, str]) -> dict[str, str]:
        """Every locale needs a non-empty filename."""
        for locale, filename in v.items():
            if not locale.strip():
                raise ValueError("Target locale must not be empty")
            if not filename.strip():
                raise ValueError(f"Target file for locale {locale!r} must not be empty")
        return v

    @property
    def source_path(self) -> Path:
        """Full path of the extracted source catalog."""
        return Path(self.output_path) / self.source_file

    def target_path(self, locale: str) -> Path:
        """Full path of the target catalog for ``locale``."""
        return Path(self.output_path) / self.target_files[locale]

    def sorted_locales(self) -> list[str]:
        """Configured target locales in ascending order."""
        return sorted(self.target_files)

    def merge_options(self) -> MergeOptions:
        """Options handed to the reconciliation engine."""
        return MergeOptions(
            new_prefix=self.new_prefix,
            source_language_target_locale=self.source_language_target_locale,
            collapse_whitespace=self.collapse_whitespace,
            trim=self.trim,
            remove_ids_with_prefix=tuple(self.remove_ids_with_prefix),
        )
