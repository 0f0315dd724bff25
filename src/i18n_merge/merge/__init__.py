"""Reconciliation engine and source normalization hooks."""

from .normalize import normalize_source
from .reconcile import MergeOptions, MergeSummary, reconcile, summarize_merge

__all__ = [
    "MergeOptions",
    "MergeSummary",
    "normalize_source",
    "reconcile",
    "summarize_merge",
]
