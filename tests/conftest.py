"""
Shared pytest fixtures for cupslog tests.

This module provides:
- Logging configured per test (stderr, WARNING)
- Settings isolation from CUPSLOG_* environment variables
- ``cups_root``: a fake system root with a ``var/log/cups`` tree builder

Usage:
    def test_something(cups_root):
        cups_root.write("access_log", "[17/May/2025:17:41:16] GET /job\\n")
        text = parse_cups_logs(cups_root.root, "csv")
"""

from collections.abc import Generator
from pathlib import Path

import pytest

from cupslog.config import reset_settings
from cupslog.logging import configure_logging


@pytest.fixture(autouse=True)
def configure_test_logging() -> None:
    """Route logs to the current stderr; CLI tests swap the stream per invoke."""
    configure_logging(level="WARNING", format="console", force=True)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None, None, None]:
    """Drop CUPSLOG_* variables and any .env file from the working directory."""
    for key in ["CUPSLOG_LOG_LEVEL", "CUPSLOG_LOG_FORMAT"]:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


class CupsTree:
    """Builds files under ``<root>/var/log/cups``."""

    def __init__(self, root: Path):
        self.root = root
        self.log_dir = root / "var" / "log" / "cups"

    def mkdir(self) -> Path:
        self.log_dir.mkdir(parents=True, exist_ok=True)
        return self.log_dir

    def write(self, relpath: str, text: str) -> Path:
        path = self.log_dir / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(text.encode("utf-8"))
        return path

    def write_bytes(self, relpath: str, data: bytes) -> Path:
        path = self.log_dir / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path


@pytest.fixture
def cups_root(tmp_path: Path) -> CupsTree:
    """Fake system root; nothing under var/log/cups is created until written."""
    root = tmp_path / "sysroot"
    root.mkdir()
    return CupsTree(root)


@pytest.fixture
def sample_tree(cups_root: CupsTree) -> CupsTree:
    """A populated tree with one file of each kind plus noise."""
    cups_root.write(
        "access_log",
        "localhost - - [17/May/2025:17:41:16 +0300] \"POST / HTTP/1.1\" 200 182\n"
        "no bracket here\n",
    )
    cups_root.write(
        "error_log",
        "E [17/May/2025:17:41:20 +0300] Unable to open \"printers.conf\", retrying\n",
    )
    cups_root.write(
        "page_log",
        "2025-05-01 10:59:10 job completed\n"
        "PDF 12 root 1 [01/May/2025:10:59:10 +0300] total 1\n",
    )
    cups_root.write("access_log.1", "[01/Jan/2025:00:00:00] rotated\n")
    cups_root.write("notes.txt", "ignored\n")
    return cups_root
