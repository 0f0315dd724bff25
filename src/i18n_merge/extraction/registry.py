"""Lookup of extraction implementations by identifier."""

from __future__ import annotations

from collections.abc import Callable

from ..utils.exceptions import ConfigurationError
from .base import Extractor
from .command import CommandExtractor
from .python_ast import PythonAstExtractor

_factories: dict[str, Callable[[], Extractor]] = {
    PythonAstExtractor.name: PythonAstExtractor,
    CommandExtractor.name: CommandExtractor,
}


def register_extractor(name: str, factory: Callable[[], Extractor]) -> None:
    """Make an extractor available under ``name``, replacing any previous one."""
    _factories[name] = factory


def unregister_extractor(name: str) -> None:
    """Remove a registered extractor; unknown names are ignored."""
    _ = _factories.pop(name, None)


def available_extractors() -> list[str]:
    """Registered extractor identifiers in sorted order."""
    return sorted(_factories)


def get_extractor(name: str) -> Extractor:
    """
    Create the extractor registered under ``name``.

    Raises:
        ConfigurationError: If no extractor has that name
    """
    try:
        factory = _factories[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown extractor {name!r}, available: {', '.join(available_extractors())}"
        ) from None
    return factory()
