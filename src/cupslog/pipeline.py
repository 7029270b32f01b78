"""
End-to-end pipeline: locate, collect, render.

Usage:
    from cupslog.pipeline import parse_cups_logs

    text = parse_cups_logs("/", "csv")
    if not text:
        ...  # no CUPS log data under /var/log/cups

An absent log directory and a directory with no matching lines are the same
outcome to the caller: an empty :class:`~cupslog.models.ScanResult`, and an
empty string from :func:`parse_cups_logs`.
"""

from __future__ import annotations

import os

from cupslog.collector import UnreadablePolicy, collect
from cupslog.formatters import coerce_format, render
from cupslog.locator import locate_log_dir
from cupslog.logging import get_logger
from cupslog.models import OutputFormat, ScanResult

log = get_logger(__name__)


def scan(
    root: str | os.PathLike[str],
    *,
    sort: bool = True,
    on_unreadable: UnreadablePolicy = "skip",
) -> ScanResult:
    """Locate ``<root>/var/log/cups`` and collect its records."""
    log_dir = locate_log_dir(root)
    if log_dir is None:
        return ScanResult()

    result = collect(log_dir, sort=sort, on_unreadable=on_unreadable)
    log.info("pipeline.scanned", **result.to_summary())
    return result


def parse_cups_logs(
    root: str | os.PathLike[str],
    fmt: OutputFormat | str,
    *,
    sort: bool = True,
    on_unreadable: UnreadablePolicy = "skip",
) -> str:
    """
    Run the whole pipeline and return the rendered document.

    Args:
        root: System root under which ``var/log/cups`` is resolved
        fmt: ``csv`` or ``json``
        sort: Walk in sorted path order
        on_unreadable: ``skip`` or ``fail`` when a file cannot be read

    Returns:
        The CSV or JSON document, or ``""`` when no records were found

    Raises:
        InvalidFormatError: ``fmt`` is not a supported format
        UnreadableLogError: A file could not be read and the policy is ``fail``
    """
    output_format = coerce_format(fmt)
    result = scan(root, sort=sort, on_unreadable=on_unreadable)
    if result.is_empty:
        return ""
    return render(result.records, output_format)
