"""
Version information for i18n-merge.

The version is read from the installed package metadata, falling back to
pyproject.toml when running from a source checkout.
"""

import logging
import tomllib
from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

logger = logging.getLogger(__name__)

DISTRIBUTION_NAME = "i18n-merge"
UNKNOWN_VERSION = "0.0.0+unknown"


@lru_cache(maxsize=1)
def get_version() -> str:
    """
    Get the project version.

    Returns:
        Version string (e.g., "1.0.0")
    """
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        logger.debug("Package metadata not found, falling back to pyproject.toml")

    pyproject = Path(__file__).resolve().parents[3] / "pyproject.toml"
    try:
        with pyproject.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.debug(f"Could not read {pyproject}: {e}")
        return UNKNOWN_VERSION

    project = data.get("project", {})
    return str(project.get("version", UNKNOWN_VERSION))
