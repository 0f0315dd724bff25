"""
Extraction of translatable strings from Python source code.

Calls to the translation functions below are collected with an AST visitor.
The first string literal argument is the source text; the message-id is the
literal ``id=`` keyword when present and the text itself otherwise.

Usage Examples:
    Mark strings in application code:
        >>> _("Hello, world!")
        >>> translate("Settings", id="menu.settings")
"""

from __future__ import annotations

import ast
import asyncio
import logging
from pathlib import Path
from typing_extensions import override

from ..catalog.model import Catalog
from ..catalog.serializer import serialize
from ..catalog.storage import save
from ..utils.exceptions import ExtractionError
from .base import ExtractionRequest, ExtractionResult, extractor_logger

logger = logging.getLogger(__name__)

# Translation function patterns to search for
TRANSLATION_FUNCTIONS = {
    "_",           # Standard gettext function
    "gettext",
    "translate",
    "t",           # Alias for translate
}

# Directories to exclude from extraction
EXCLUDED_DIRS = {
    "__pycache__",
    ".git",
    ".pytest_cache",
    ".mypy_cache",
    "htmlcov",
    "node_modules",
    "venv",
    "env",
    ".venv",
    ".env",
}

ID_KEYWORD = "id"


class StringExtractor(ast.NodeVisitor):
    """AST visitor to extract translatable strings from Python source code."""

    def __init__(self, filename: str) -> None:
        """
        Initialize the string extractor.

        Args:
            filename: Name of the file being processed (for context)
        """
        self.filename: str = filename
        self.messages: list[tuple[str, str, int]] = []

    @override
    def visit_Call(self, node: ast.Call) -> None:
        """
        Visit function call nodes to find translation function calls.

        Args:
            node: AST Call node to examine
        """
        if self._get_function_name(node.func) in TRANSLATION_FUNCTIONS and node.args:
            first = node.args[0]
            if isinstance(first, ast.Constant) and isinstance(first.value, str):
                text = first.value
                message_id = self._extract_id(node) or text
                self.messages.append((message_id, text, node.lineno))

        self.generic_visit(node)

    def _get_function_name(self, func_node: ast.AST) -> str | None:
        """
        Extract function name from various AST node types.

        Args:
            func_node: AST node representing the function being called

        Returns:
            Function name if extractable, None otherwise
        """
        if isinstance(func_node, ast.Name):
            return func_node.id
        elif isinstance(func_node, ast.Attribute):
            return func_node.attr
        return None

    def _extract_id(self, node: ast.Call) -> str | None:
        """Literal value of the ``id=`` keyword, if any."""
        for keyword in node.keywords:
            if keyword.arg == ID_KEYWORD and isinstance(keyword.value, ast.Constant):
                value: object = keyword.value.value
                if isinstance(value, str) and value:
                    return value
        return None


def extract_messages_from_file(filepath: Path) -> list[tuple[str, str, int]]:
    """
    Extract translatable messages from a single Python file.

    Args:
        filepath: Path to the Python file to process

    Returns:
        List of tuples containing (message_id, text, line_number)

    Raises:
        FileNotFoundError: If the file doesn't exist
        SyntaxError: If the file contains invalid Python syntax
    """
    content = filepath.read_text(encoding="utf-8")
    tree = ast.parse(content, filename=str(filepath))

    extractor = StringExtractor(str(filepath))
    extractor.visit(tree)
    return extractor.messages


def scan_directory(
    directory: Path,
    exclude_dirs: set[str] | None = None,
    log: logging.Logger = logger,
) -> dict[str, str]:
    """
    Scan a directory recursively for translatable strings in Python files.

    Files are visited in sorted order. When the same message-id is used with
    different texts, the first occurrence wins and a warning is logged.

    Args:
        directory: Root directory to scan
        exclude_dirs: Set of directory names to exclude from scanning
        log: Logger receiving progress and debug output

    Returns:
        Mapping of message-id to source text
    """
    if exclude_dirs is None:
        exclude_dirs = EXCLUDED_DIRS

    translations: dict[str, str] = {}
    origins: dict[str, str] = {}
    scanned_files = 0

    for filepath in sorted(directory.rglob("*.py")):
        relative = filepath.relative_to(directory)
        if any(part in exclude_dirs for part in relative.parts[:-1]):
            continue

        try:
            messages = extract_messages_from_file(filepath)
        except (SyntaxError, UnicodeDecodeError) as e:
            log.warning(f"Skipping {filepath} due to error: {e}")
            continue

        scanned_files += 1
        for message_id, text, line_number in messages:
            location = f"{relative}:{line_number}"
            log.debug(f"Found translatable string {message_id!r} at {location}")
            if message_id not in translations:
                translations[message_id] = text
                origins[message_id] = location
            elif translations[message_id] != text:
                log.warning(
                    f"Message {message_id!r} at {location} differs from {origins[message_id]}, keeping the first text"
                )

    log.info(
        f"Scanned {scanned_files} files, found {len(translations)} translatable strings"
    )
    return translations


class PythonAstExtractor:
    """Default extractor: scans a Python source tree and writes the catalog."""

    name: str = "python-ast"

    async def extract(self, request: ExtractionRequest) -> ExtractionResult:
        """Scan ``request.options.source_dir`` and write the source catalog."""
        log = extractor_logger(self.name, request.verbose)
        if request.format != "json":
            return ExtractionResult(
                success=False, error=f"unsupported format: {request.format}"
            )

        try:
            await asyncio.to_thread(self._extract_sync, request, log)
        except (ExtractionError, OSError) as e:
            log.error(f"Extraction failed: {e}")
            return ExtractionResult(success=False, error=str(e))

        return ExtractionResult(success=True)

    def _extract_sync(self, request: ExtractionRequest, log: logging.Logger) -> None:
        source_dir = Path(request.options.source_dir)
        if not source_dir.is_dir():
            raise ExtractionError(f"Source directory does not exist: {source_dir}")

        exclude_dirs = EXCLUDED_DIRS | set(request.options.exclude)
        log.debug(f"Scanning {source_dir}, excluding {', '.join(sorted(exclude_dirs))}")

        translations = scan_directory(source_dir, exclude_dirs, log)
        catalog = Catalog(locale=request.options.source_locale, translations=translations)
        save(request.output_file, serialize(catalog))
        log.info(f"Wrote {len(translations)} messages to {request.output_file}")
