"""
Interface between the orchestrator and extraction implementations.

An extractor produces the source catalog file for a given output location and
reports success or failure; it never raises for ordinary failures.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from ..config.schema import ExtractorConfig

EXTRACTION_FORMAT = "json"


@dataclass(frozen=True)
class ExtractionRequest:
    """Everything an extractor needs to write the source catalog."""

    output_directory: Path
    output_filename: str
    format: str = EXTRACTION_FORMAT
    progress: bool = False
    verbose: bool = False
    options: ExtractorConfig = field(default_factory=ExtractorConfig)

    @property
    def output_file(self) -> Path:
        """Full path of the catalog the extractor must write."""
        return self.output_directory / self.output_filename


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome reported by an extractor."""

    success: bool
    error: str | None = None


class Extractor(Protocol):
    """Capability of producing a source catalog file."""

    name: str

    async def extract(self, request: ExtractionRequest) -> ExtractionResult:
        """Write the source catalog described by ``request``."""
        ...


def extractor_logger(name: str, verbose: bool) -> logging.Logger:
    """
    Child logger for an extractor.

    Debug output from extractors is only let through when the run is verbose.
    """
    child = logging.getLogger(__name__.rsplit(".", 1)[0]).getChild(name)
    child.setLevel(logging.DEBUG if verbose else logging.INFO)
    return child
