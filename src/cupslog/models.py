"""
Domain types for CUPS log collection.

A scan produces an ordered list of :class:`Record` objects, one per log line.
File-type dispatch is a closed enumeration: every selectable basename is a
:class:`LogKind`, and every kind carries the :class:`DateStyle` used to pull
the timestamp out of its lines.

Tags:
    models, records, enums, cups
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class DateStyle(str, Enum):
    """How a timestamp is embedded in a log line."""

    BRACKETED = "bracketed"  # [17/May/2025:17:41:16]
    TIMESTAMP_PREFIX = "timestamp_prefix"  # 2025-05-01 10:59:10 ...
    NONE = "none"


class LogKind(str, Enum):
    """
    CUPS log files selected by the collector.

    The enum value is the exact basename on disk.
    """

    ACCESS = "access_log"
    ERROR = "error_log"
    PAGE = "page_log"

    @property
    def date_style(self) -> DateStyle:
        if self is LogKind.PAGE:
            return DateStyle.TIMESTAMP_PREFIX
        return DateStyle.BRACKETED

    @classmethod
    def from_basename(cls, name: str) -> LogKind | None:
        """Return the kind for an exact basename, or None if not a CUPS log."""
        try:
            return cls(name)
        except ValueError:
            return None


LOG_BASENAMES: frozenset[str] = frozenset(kind.value for kind in LogKind)


class OutputFormat(str, Enum):
    """Serialization formats."""

    CSV = "csv"
    JSON = "json"


@dataclass(frozen=True)
class Record:
    """One log line with its source file and extracted date."""

    source_path: str
    date: str
    content: str


@dataclass
class ScanResult:
    """
    Outcome of one collection run.

    Attributes:
        log_dir: Located log directory, or None when it does not exist
        records: Records in traversal order, then line order
        files: Log files that were read
        skipped: Log files that could not be read (skip policy only)
    """

    log_dir: str | None = None
    records: list[Record] = field(default_factory=list)
    files: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.records

    def to_summary(self) -> dict[str, object]:
        """Counters for logging."""
        return {
            "log_dir": self.log_dir,
            "files": len(self.files),
            "skipped": len(self.skipped),
            "records": len(self.records),
        }
