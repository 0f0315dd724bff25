"""
Test helper utilities for i18n-merge tests.

This module provides helpers for writing and reading catalog files, temporary
configuration files, and a stub extraction collaborator.
"""

from __future__ import annotations

import json
import tempfile
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

import yaml

from i18n_merge.catalog.model import Catalog
from i18n_merge.catalog.serializer import serialize
from i18n_merge.extraction.base import ExtractionRequest, ExtractionResult

__all__ = [
    "StubExtractor",
    "create_temp_config_file",
    "read_translations",
    "write_catalog",
]


def write_catalog(
    path: Path, translations: dict[str, str], locale: str | None = "en-US"
) -> str:
    """
    Write a catalog file in canonical form.

    Args:
        path: Destination file
        translations: Message-id to text mapping
        locale: Locale of the catalog

    Returns:
        str: The text that was written
    """
    text = serialize(Catalog(locale=locale, translations=translations))
    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text(text, encoding="utf-8")
    return text


def read_translations(path: Path) -> dict[str, str]:
    """
    Read the translations of a catalog file, keeping the on-disk key order.

    Args:
        path: Catalog file

    Returns:
        dict[str, str]: The translations object of the file
    """
    document: dict[str, object] = json.loads(path.read_text(encoding="utf-8"))
    translations = document["translations"]
    assert isinstance(translations, dict)
    return translations  # pyright: ignore[reportUnknownVariableType]


@contextmanager
def create_temp_config_file(config_data: dict[str, object]) -> Generator[Path]:
    """
    Create a temporary YAML configuration file.

    Args:
        config_data: Configuration content

    Yields:
        Path: Location of the temporary file, removed afterwards
    """
    with tempfile.NamedTemporaryFile(
        mode="w", suffix=".yml", delete=False, encoding="utf-8"
    ) as f:
        yaml.dump(config_data, f, default_flow_style=False)
        config_path = Path(f.name)

    try:
        yield config_path
    finally:
        config_path.unlink(missing_ok=True)


class StubExtractor:
    """
    Extraction double.

    On success it writes ``messages`` as the source catalog (unless None) and
    records every request it receives.
    """

    name: str = "stub"

    def __init__(
        self,
        messages: dict[str, str] | None = None,
        success: bool = True,
        error: str | None = None,
        locale: str = "en-US",
    ) -> None:
        self.messages: dict[str, str] | None = messages
        self.success: bool = success
        self.error: str | None = error
        self.locale: str = locale
        self.requests: list[ExtractionRequest] = []

    async def extract(self, request: ExtractionRequest) -> ExtractionResult:
        self.requests.append(request)
        if not self.success:
            return ExtractionResult(success=False, error=self.error)
        if self.messages is not None:
            _ = write_catalog(request.output_file, self.messages, self.locale)
        return ExtractionResult(success=True)
