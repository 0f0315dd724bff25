"""
i18n-merge - extract translatable strings and keep per-locale JSON catalogs in sync.
"""

from .catalog.model import Catalog
from .merge.reconcile import MergeOptions, reconcile
from .orchestrator import RunResult, run_extraction_merge

__all__ = ["Catalog", "MergeOptions", "RunResult", "reconcile", "run_extraction_merge"]
