"""
cupslog - collect CUPS printing logs as CSV or JSON.

Pipeline::

    locate_log_dir(root)  ->  collect(log_dir)  ->  render(records, fmt)

Usage:
    from cupslog import parse_cups_logs

    print(parse_cups_logs("/", "json"))
"""

__version__ = "0.1.0"

from cupslog.collector import collect, iter_log_files, read_lines
from cupslog.errors import CupsLogError, InvalidFormatError, UnreadableLogError
from cupslog.extract import extract_date
from cupslog.formatters import render, to_csv, to_json
from cupslog.locator import cups_log_dir, locate_log_dir
from cupslog.models import DateStyle, LogKind, OutputFormat, Record, ScanResult
from cupslog.pipeline import parse_cups_logs, scan

__all__ = [
    "CupsLogError",
    "DateStyle",
    "InvalidFormatError",
    "LogKind",
    "OutputFormat",
    "Record",
    "ScanResult",
    "UnreadableLogError",
    "__version__",
    "collect",
    "cups_log_dir",
    "extract_date",
    "iter_log_files",
    "locate_log_dir",
    "parse_cups_logs",
    "read_lines",
    "render",
    "scan",
    "to_csv",
    "to_json",
]
