"""
Extraction and merge pass for one invocation.

The pass runs the extraction collaborator, then merges the extracted source
catalog into every configured target catalog in ascending locale order, and
finally rewrites the source catalog in canonical form.

A failing extraction aborts the pass before anything is written. Once the
source catalog has been read, every target is written as soon as it has been
merged, so an error part way through leaves the earlier locales updated.

Usage Examples:
    >>> import asyncio
    >>> from i18n_merge.config.schema import I18nMergeConfig
    >>> config = I18nMergeConfig(
    ...     output_path="src/locales",
    ...     target_files={"fr-FR": "messages.fr.json"},
    ...     new_prefix="@new",
    ... )
    >>> result = asyncio.run(run_extraction_merge(config))
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .catalog.model import Catalog
from .catalog.serializer import serialize
from .catalog.storage import load_catalog_if_exists, save
from .config.schema import I18nMergeConfig
from .extraction.base import ExtractionRequest, Extractor
from .extraction.registry import get_extractor
from .merge.normalize import normalize_source
from .merge.reconcile import MergeOptions, MergeSummary, reconcile, summarize_merge
from .utils.exceptions import CatalogFormatError

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Overall outcome of an extraction and merge pass."""

    success: bool
    error: str | None = None
    source_path: Path | None = None
    locales: list[MergeSummary] = field(default_factory=list)


def build_extraction_request(config: I18nMergeConfig) -> ExtractionRequest:
    """Describe where the extractor has to write the source catalog."""
    source_path = config.source_path
    return ExtractionRequest(
        output_directory=source_path.parent,
        output_filename=source_path.name,
        progress=False,
        verbose=config.verbose,
        options=config.extractor,
    )


def load_source_catalog(source_path: Path) -> Catalog:
    """
    Read the catalog the extractor has just written.

    Raises:
        CatalogFormatError: If the file is missing, empty or malformed
    """
    source = load_catalog_if_exists(source_path)
    if source is None:
        raise CatalogFormatError(
            "source catalog was not written by the extractor", path=str(source_path)
        )
    return source


def merge_locale(
    source: Catalog, locale: str, target_path: Path, options: MergeOptions
) -> MergeSummary:
    """
    Merge the source catalog into one target catalog and write it.

    Args:
        source: Normalized source catalog
        locale: Target locale
        target_path: Location of the target catalog
        options: Merge options

    Returns:
        Counts of new, kept and removed entries
    """
    logger.info(f"merge and normalize {target_path} ...")
    prior = load_catalog_if_exists(target_path)
    merged = reconcile(source, prior, locale, options)
    save(target_path, serialize(merged))

    summary = summarize_merge(prior, merged)
    logger.info(str(summary))
    return summary


async def run_extraction_merge(
    config: I18nMergeConfig, extractor: Extractor | None = None
) -> RunResult:
    """
    Run the extraction collaborator and merge its output into all targets.

    Args:
        config: Validated configuration
        extractor: Extractor to use instead of the one named in the configuration

    Returns:
        RunResult; ``success`` is False only when extraction failed

    Raises:
        CatalogFormatError: If the source or a target catalog is malformed
        ConfigurationError: If the configured extractor is unknown
        OSError: If a catalog cannot be read or written
    """
    if extractor is None:
        extractor = get_extractor(config.extractor.name)
    logger.debug(f"options: {config.model_dump_json()}")

    request = build_extraction_request(config)
    source_path = request.output_file

    logger.info(f'running "extract-i18n" with {extractor.name} ...')
    extraction = await extractor.extract(request)
    if not extraction.success:
        logger.error(f"Extraction failed: {extraction.error}")
        return RunResult(
            success=False,
            error=f"extraction failed: {extraction.error}",
            source_path=source_path,
        )
    logger.info("extracted translations successfully")

    logger.info(f"normalize {source_path} ...")
    options = config.merge_options()
    source = normalize_source(load_source_catalog(source_path), options)

    summaries: list[MergeSummary] = []
    for locale in config.sorted_locales():
        summaries.append(
            merge_locale(source, locale, config.target_path(locale), options)
        )

    save(source_path, serialize(source))

    logger.info("finished i18n merging and normalizing")
    return RunResult(success=True, source_path=source_path, locales=summaries)
