"""
Structured error types for cupslog.

Errors carry a category and a structured context so the CLI can map them to
exit codes and log them as key/value pairs instead of bare strings.

Hierarchy::

    CupsLogError
    ├── SourceError          (SOURCE)
    │   └── UnreadableLogError
    └── ConfigError          (CONFIG)
        └── InvalidFormatError

Malformed log lines are never errors: they degrade to an empty date.
A missing log directory is not an error either: it yields an empty scan.

Examples:
    >>> err = UnreadableLogError("/var/log/cups/error_log", cause=PermissionError(13, "denied"))
    >>> err.category.value
    'SOURCE'
    >>> err.context.path
    '/var/log/cups/error_log'

Tags:
    error-handling, exception-hierarchy, error-context
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Error categories used for classification and exit-code mapping."""

    SOURCE = "SOURCE"  # log file or directory problems
    CONFIG = "CONFIG"  # bad options or settings
    INTERNAL = "INTERNAL"  # bugs, unexpected state


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Attributes:
        path: File or directory involved
        log_dir: Resolved CUPS log directory
        option: Name of the offending option
        metadata: Additional key-value pairs
    """

    path: str | None = None
    log_dir: str | None = None
    option: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["path", "log_dir", "option"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class CupsLogError(Exception):
    """Base exception for all cupslog errors."""

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> CupsLogError:
        """
        Add context to this error (fluent API).

        Usage:
            raise SourceError("Failed").with_context(log_dir="/var/log/cups")
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# SOURCE ERRORS
# =============================================================================


class SourceError(CupsLogError):
    """Problem with a log file or directory."""

    default_category = ErrorCategory.SOURCE


class UnreadableLogError(SourceError):
    """A selected log file could not be opened or read."""

    def __init__(self, path: str, *, cause: Exception | None = None):
        reason = f": {cause}" if cause is not None else ""
        super().__init__(
            f"Cannot read log file {path}{reason}",
            context=ErrorContext(path=path),
            cause=cause,
        )
        self.path = path


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigError(CupsLogError):
    """Invalid option or setting."""

    default_category = ErrorCategory.CONFIG


class InvalidFormatError(ConfigError):
    """Output format is not one of the supported formats."""

    def __init__(self, value: str):
        super().__init__(
            f"Unknown output format {value!r}, choose 'csv' or 'json'",
            context=ErrorContext(option="format", metadata={"value": value}),
        )
        self.value = value
