"""
Basic exception classes for i18n-merge.

This module contains the exception hierarchy shared by the catalog, extraction,
configuration and setup layers without creating import cycles.
"""

from __future__ import annotations

from enum import Enum


class ErrorSeverity(Enum):
    """Error severity levels for classification and handling."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Categories of errors for appropriate handling strategies."""

    VALIDATION = "validation"
    EXTRACTION = "extraction"
    CONFIGURATION = "configuration"
    STORAGE = "storage"
    UNKNOWN = "unknown"


class I18nMergeError(Exception):
    """Base exception class for i18n-merge specific errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        context: object | None = None,
        recoverable: bool = False,
    ) -> None:
        super().__init__(message)
        self.category: ErrorCategory = category
        self.severity: ErrorSeverity = severity
        self.context: object | None = context
        self.recoverable: bool = recoverable


class CatalogFormatError(I18nMergeError):
    """A persisted catalog is missing or does not have the expected shape."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        context: object | None = None,
    ) -> None:
        super().__init__(
            f"{path}: {message}" if path else message,
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.HIGH,
            context=context,
        )
        self.path: str | None = path


class ExtractionError(I18nMergeError):
    """The extraction collaborator could not produce a source catalog."""

    def __init__(self, message: str, context: object | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.EXTRACTION,
            severity=ErrorSeverity.HIGH,
            context=context,
        )


class ConfigurationError(I18nMergeError):
    """Configuration-related errors."""

    def __init__(self, message: str, context: object | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.HIGH,
            context=context,
        )
