"""Tests for CSV and JSON rendering."""

import csv
import io
import json

import pytest

from cupslog.errors import InvalidFormatError
from cupslog.formatters import (
    CSV_HEADER,
    coerce_format,
    escape_csv,
    escape_json,
    render,
    to_csv,
    to_json,
)
from cupslog.models import OutputFormat, Record


@pytest.fixture
def records():
    return [
        Record("/var/log/cups/access_log", "17/May/2025:17:41:16", "[17/May/2025:17:41:16] GET /job"),
        Record("/var/log/cups/error_log", "", 'say "hi", now'),
        Record("/var/log/cups/page_log", "2025-05-01 10:59:10", "2025-05-01 10:59:10 job\tcompleted \\o/"),
    ]


class TestEscapeCsv:
    def test_plain_field_unchanged(self):
        assert escape_csv("GET /job 200") == "GET /job 200"

    def test_comma_and_quote(self):
        assert escape_csv('say "hi", now') == '"say ""hi"", now"'

    def test_comma_only(self):
        assert escape_csv("a,b") == '"a,b"'

    def test_quote_only(self):
        assert escape_csv('a"b') == '"a""b"'

    def test_newline_is_not_quoted(self):
        assert escape_csv("line\r") == "line\r"
        assert escape_csv("two\nlines") == "two\nlines"

    def test_empty(self):
        assert escape_csv("") == ""


class TestToCsv:
    def test_layout(self, records):
        text = to_csv(records)
        lines = text.split("\n")
        assert lines[0] == CSV_HEADER == "File,Date,Content"
        assert lines[1] == "/var/log/cups/access_log,17/May/2025:17:41:16,[17/May/2025:17:41:16] GET /job"
        assert lines[2] == '/var/log/cups/error_log,,"say ""hi"", now"'
        assert text.endswith("\n")
        assert len(lines) == len(records) + 2  # header + rows + trailing empty

    def test_header_only_when_empty(self):
        assert to_csv([]) == "File,Date,Content\n"

    def test_reader_recovers_fields(self, records):
        rows = list(csv.reader(io.StringIO(to_csv(records))))
        assert rows[0] == ["File", "Date", "Content"]
        assert [tuple(r) for r in rows[1:]] == [(r.source_path, r.date, r.content) for r in records]


class TestEscapeJson:
    @pytest.mark.parametrize(
        "raw,escaped",
        [
            ('"', '\\"'),
            ("\\", "\\\\"),
            ("\b", "\\b"),
            ("\f", "\\f"),
            ("\n", "\\n"),
            ("\r", "\\r"),
            ("\t", "\\t"),
        ],
    )
    def test_short_escapes(self, raw, escaped):
        assert escape_json(raw) == escaped

    def test_other_characters_pass_through(self):
        assert escape_json("café ünïcode / <tag>") == "café ünïcode / <tag>"

    def test_other_controls_are_not_escaped(self):
        assert escape_json("\x01\x1b") == "\x01\x1b"


class TestToJson:
    def test_exact_layout(self):
        text = to_json([Record("f1", "d1", "c1"), Record("f2", "", "c2")])
        assert text == (
            "[\n"
            "  {\n"
            '    "file": "f1",\n'
            '    "date": "d1",\n'
            '    "content": "c1"\n'
            "  },\n"
            "  {\n"
            '    "file": "f2",\n'
            '    "date": "",\n'
            '    "content": "c2"\n'
            "  }\n"
            "]"
        )

    def test_empty(self):
        assert to_json([]) == "[\n]"

    def test_parses_as_json(self, records):
        data = json.loads(to_json(records))
        assert [list(obj) for obj in data] == [["file", "date", "content"]] * len(records)
        assert [(o["file"], o["date"], o["content"]) for o in data] == [
            (r.source_path, r.date, r.content) for r in records
        ]

    def test_escaped_controls_parse(self):
        content = 'a"b\\c\bd\fe\nf\rg\th'
        data = json.loads(to_json([Record("f", "", content)]))
        assert data[0]["content"] == content


class TestRender:
    def test_dispatch_by_enum(self, records):
        assert render(records, OutputFormat.CSV) == to_csv(records)
        assert render(records, OutputFormat.JSON) == to_json(records)

    def test_dispatch_by_string(self, records):
        assert render(records, "json") == to_json(records)
        assert render(records, "csv") == to_csv(records)

    def test_unknown_format(self, records):
        with pytest.raises(InvalidFormatError) as exc_info:
            render(records, "xml")
        assert exc_info.value.value == "xml"

    def test_coerce_format(self):
        assert coerce_format("csv") is OutputFormat.CSV
        assert coerce_format(OutputFormat.JSON) is OutputFormat.JSON
