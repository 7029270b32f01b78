"""
Timestamp extraction for CUPS log lines.

Each :class:`~cupslog.models.LogKind` maps to one :class:`~cupslog.models.DateStyle`:

- ``access_log`` / ``error_log``: text between the first ``[`` and the first
  ``]`` after it, e.g. ``[17/May/2025:17:41:16]``.
- ``page_log``: a leading ``YYYY-MM-DD HH:MM:SS`` prefix, checked by the
  position of its separators only.

The date is returned as the raw substring. Lines that do not match yield an
empty string; extraction never raises.
"""

from __future__ import annotations

from collections.abc import Callable

from cupslog.models import DateStyle, LogKind

PAGE_TIMESTAMP_LENGTH = 19


def extract_bracketed(line: str) -> str:
    start = line.find("[")
    if start == -1:
        return ""
    end = line.find("]", start)
    if end == -1:
        return ""
    return line[start + 1 : end]


def extract_timestamp_prefix(line: str) -> str:
    if len(line) < PAGE_TIMESTAMP_LENGTH:
        return ""
    if (
        line[4] == "-"
        and line[7] == "-"
        and line[10] == " "
        and line[13] == ":"
        and line[16] == ":"
    ):
        return line[:PAGE_TIMESTAMP_LENGTH]
    return ""


def _no_date(line: str) -> str:
    return ""


_EXTRACTORS: dict[DateStyle, Callable[[str], str]] = {
    DateStyle.BRACKETED: extract_bracketed,
    DateStyle.TIMESTAMP_PREFIX: extract_timestamp_prefix,
    DateStyle.NONE: _no_date,
}


def date_style_for(basename: str) -> DateStyle:
    """Return the date style for a file basename; unknown names get NONE."""
    kind = LogKind.from_basename(basename)
    return kind.date_style if kind is not None else DateStyle.NONE


def extract_date(basename: str, line: str) -> str:
    """
    Extract the raw date string from ``line`` of a file named ``basename``.

    Args:
        basename: Final path component of the source file
        line: Log line without its newline

    Returns:
        The date substring, or ``""`` when it cannot be found
    """
    return _EXTRACTORS[date_style_for(basename)](line)
