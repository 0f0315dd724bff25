"""
Global test configuration fixtures for i18n-merge tests.

This module provides reusable pytest fixtures for configuration objects,
catalog directories and stub extractors.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from i18n_merge.config.schema import ExtractorConfig, I18nMergeConfig
from i18n_merge.merge.reconcile import MergeOptions


@pytest.fixture
def locales_dir(tmp_path: Path) -> Path:
    """
    Directory holding the source and target catalogs of a test.

    Returns:
        Path: Existing, empty directory
    """
    directory = tmp_path / "locales"
    directory.mkdir()
    return directory


@pytest.fixture
def base_config(locales_dir: Path) -> I18nMergeConfig:
    """
    Configuration with a single French target catalog.

    Returns:
        I18nMergeConfig: Configuration writing into ``locales_dir``
    """
    return I18nMergeConfig(
        output_path=str(locales_dir),
        target_files={"fr-FR": "messages.fr.json"},
        new_prefix="@new",
    )


@pytest.fixture
def multi_locale_config(locales_dir: Path) -> I18nMergeConfig:
    """
    Configuration with three target catalogs listed out of locale order.

    Returns:
        I18nMergeConfig: Configuration writing into ``locales_dir``
    """
    return I18nMergeConfig(
        output_path=str(locales_dir),
        target_files={
            "fr-FR": "messages.fr.json",
            "de-DE": "messages.de.json",
            "en-US": "messages.en.json",
        },
        source_language_target_locale="en-US",
        new_prefix="@new",
    )


@pytest.fixture
def python_source_config(tmp_path: Path, locales_dir: Path) -> I18nMergeConfig:
    """
    Configuration using the python-ast extractor on ``tmp_path / "app"``.

    Returns:
        I18nMergeConfig: Configuration with an existing, empty source directory
    """
    source_dir = tmp_path / "app"
    source_dir.mkdir()
    return I18nMergeConfig(
        output_path=str(locales_dir),
        target_files={"fr-FR": "messages.fr.json"},
        new_prefix="@new",
        extractor=ExtractorConfig(source_dir=str(source_dir)),
    )


@pytest.fixture
def merge_options() -> MergeOptions:
    """Default merge options with the ``@new`` marker."""
    return MergeOptions(new_prefix="@new")
