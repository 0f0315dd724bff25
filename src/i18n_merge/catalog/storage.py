"""
File access for persisted catalogs.

A missing file is a normal outcome here: it is reported as ``None`` so that a
first run without any prior catalog looks the same as a steady-state run.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path

from .model import Catalog
from .serializer import parse

logger = logging.getLogger(__name__)


def load_if_exists(path: Path) -> str | None:
    """
    Read a text file if it exists.

    Args:
        path: File to read

    Returns:
        The file content, or None if the file does not exist
    """
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug(f"No file at {path}")
        return None


def file_mode(path: Path) -> int:
    """
    Permission bits a rewritten file should get.

    An existing file keeps its mode; a new file gets the default mode for the
    current umask, as if it had been created with ``open``.
    """
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        _ = os.umask(umask)
        return 0o666 & ~umask


def save(path: Path, text: str) -> None:
    """
    Write text to a file atomically.

    The content goes to a temporary file in the destination directory which
    then replaces the destination, so readers never see a half-written file.
    The destination's permission bits are kept.

    Args:
        path: Destination file
        text: Content to write

    Raises:
        OSError: If the file cannot be written
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_file = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as temp_file:
            _ = temp_file.write(text)
            temp_file.flush()
            temp_path = Path(temp_file.name)

        os.chmod(temp_path, file_mode(path))
        _ = temp_path.replace(path)
        logger.debug(f"Wrote {len(text)} characters to {path}")

    except Exception as e:
        if temp_file and Path(temp_file.name).exists():
            Path(temp_file.name).unlink(missing_ok=True)
        raise OSError(f"Failed to write {path}: {e}") from e


def load_catalog_if_exists(path: Path) -> Catalog | None:
    """
    Load and parse a catalog file, treating a missing or empty file as absent.

    Raises:
        CatalogFormatError: If the file exists but is not a valid catalog
    """
    content = load_if_exists(path)
    if content is None or not content.strip():
        return None
    return parse(content, origin=str(path))
