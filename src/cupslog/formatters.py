"""
CSV and JSON rendering of collected records.

Both encoders are deliberately narrow and must stay byte-compatible with
existing consumers:

CSV
    Header ``File,Date,Content``, one ``\\n``-terminated row per record. A field
    is quoted only when it contains ``"`` or ``,``; embedded newlines are not
    quoted.

JSON
    A two-space indented array of ``{"file", "date", "content"}`` objects.
    Only quote, backslash and the ``\\b \\f \\n \\r \\t`` controls are escaped;
    every other character is written as-is.

Usage:
    text = render(records, OutputFormat.JSON)
"""

from __future__ import annotations

from collections.abc import Sequence

from cupslog.errors import InvalidFormatError
from cupslog.models import OutputFormat, Record

CSV_HEADER = "File,Date,Content"

_JSON_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}
_JSON_TRANSLATION = str.maketrans(_JSON_ESCAPES)


# ── CSV ──────────────────────────────────────────────────────────────────


def escape_csv(value: str) -> str:
    """Quote ``value`` if it contains a double quote or a comma."""
    if '"' not in value and "," not in value:
        return value
    return '"' + value.replace('"', '""') + '"'


def to_csv(records: Sequence[Record]) -> str:
    rows = [CSV_HEADER]
    for rec in records:
        rows.append(",".join(escape_csv(v) for v in (rec.source_path, rec.date, rec.content)))
    return "\n".join(rows) + "\n"


# ── JSON ─────────────────────────────────────────────────────────────────


def escape_json(value: str) -> str:
    """Escape quote, backslash and the short-form control characters."""
    return value.translate(_JSON_TRANSLATION)


def _json_object(rec: Record) -> str:
    return (
        "  {\n"
        f'    "file": "{escape_json(rec.source_path)}",\n'
        f'    "date": "{escape_json(rec.date)}",\n'
        f'    "content": "{escape_json(rec.content)}"\n'
        "  }"
    )


def to_json(records: Sequence[Record]) -> str:
    parts = ["[\n"]
    for i, rec in enumerate(records):
        parts.append(_json_object(rec))
        if i + 1 < len(records):
            parts.append(",")
        parts.append("\n")
    parts.append("]")
    return "".join(parts)


# ── Dispatch ─────────────────────────────────────────────────────────────


def coerce_format(fmt: OutputFormat | str) -> OutputFormat:
    """Accept an OutputFormat or its string value."""
    if isinstance(fmt, OutputFormat):
        return fmt
    try:
        return OutputFormat(fmt)
    except ValueError:
        raise InvalidFormatError(str(fmt)) from None


def render(records: Sequence[Record], fmt: OutputFormat | str) -> str:
    """Serialize ``records`` in the requested format."""
    if coerce_format(fmt) is OutputFormat.JSON:
        return to_json(records)
    return to_csv(records)
