"""Tests for catalog file access."""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from i18n_merge.catalog.model import Catalog
from i18n_merge.catalog.storage import load_catalog_if_exists, load_if_exists, save
from i18n_merge.utils.exceptions import CatalogFormatError


class TestLoadIfExists:
    """Test cases for load_if_exists."""

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file is reported as None."""
        assert load_if_exists(tmp_path / "missing.json") is None

    def test_existing_file(self, tmp_path: Path) -> None:
        """An existing file is returned as text."""
        path = tmp_path / "messages.json"
        _ = path.write_text("Étiqueter", encoding="utf-8")

        assert load_if_exists(path) == "Étiqueter"


class TestSave:
    """Test cases for save."""

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        """Missing parent directories are created."""
        path = tmp_path / "nested" / "dir" / "messages.json"

        save(path, "{}")

        assert path.read_text(encoding="utf-8") == "{}"

    def test_overwrites_and_leaves_no_temp_files(self, tmp_path: Path) -> None:
        """An existing file is replaced and no temporary file remains."""
        path = tmp_path / "messages.json"
        _ = path.write_text("old", encoding="utf-8")

        save(path, "new")

        assert path.read_text(encoding="utf-8") == "new"
        assert [p.name for p in tmp_path.iterdir()] == ["messages.json"]

    def test_keeps_existing_mode(self, tmp_path: Path) -> None:
        """Rewriting a file does not change its permission bits."""
        path = tmp_path / "messages.fr.json"
        _ = path.write_text("old", encoding="utf-8")
        path.chmod(0o644)

        save(path, "new")

        assert stat.S_IMODE(path.stat().st_mode) == 0o644

    def test_new_file_follows_umask(self, tmp_path: Path) -> None:
        """A new file gets the usual mode for the current umask."""
        path = tmp_path / "messages.json"
        previous = os.umask(0o027)
        try:
            save(path, "{}")
        finally:
            _ = os.umask(previous)

        assert stat.S_IMODE(path.stat().st_mode) == 0o640

    def test_write_failure(self, tmp_path: Path) -> None:
        """Writing onto a directory raises OSError."""
        target = tmp_path / "occupied"
        target.mkdir()

        with pytest.raises(OSError):
            save(target, "text")


class TestLoadCatalogIfExists:
    """Test cases for load_catalog_if_exists."""

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing catalog is None."""
        assert load_catalog_if_exists(tmp_path / "messages.fr.json") is None

    def test_empty_file(self, tmp_path: Path) -> None:
        """An empty catalog file counts as absent."""
        path = tmp_path / "messages.fr.json"
        _ = path.write_text("  \n", encoding="utf-8")

        assert load_catalog_if_exists(path) is None

    def test_valid_file(self, tmp_path: Path) -> None:
        """A valid file is parsed."""
        path = tmp_path / "messages.fr.json"
        _ = path.write_text('{"locale": "fr", "translations": {"a": "A"}}', encoding="utf-8")

        assert load_catalog_if_exists(path) == Catalog(locale="fr", translations={"a": "A"})

    def test_malformed_file(self, tmp_path: Path) -> None:
        """A malformed file raises CatalogFormatError naming the file."""
        path = tmp_path / "messages.fr.json"
        _ = path.write_text("{broken", encoding="utf-8")

        with pytest.raises(CatalogFormatError) as exc_info:
            _ = load_catalog_if_exists(path)

        assert exc_info.value.path == str(path)
