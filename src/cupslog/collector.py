"""
Collect records from CUPS log files.

The collector walks a located log directory, selects files whose basename is
one of ``access_log``, ``error_log`` or ``page_log``, and turns every line of
those files into a :class:`~cupslog.models.Record`.

Line splitting follows ``\\n`` only. Carriage returns and trailing whitespace
stay in the content, and a trailing newline does not add an empty line.
Undecodable bytes are kept as surrogate escapes so the output can write them
back unchanged.

Unreadable files are handled by policy:

- ``skip``: log a warning, remember the path, keep going
- ``fail``: raise :class:`~cupslog.errors.UnreadableLogError`

Files are decoded as UTF-8. Record paths are ``directory`` as given joined
with each file's path relative to it, so a relative root stays relative.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path
from typing import Literal

from cupslog.errors import UnreadableLogError
from cupslog.extract import extract_date
from cupslog.logging import get_logger, log_step
from cupslog.models import LOG_BASENAMES, Record, ScanResult

log = get_logger(__name__)

UnreadablePolicy = Literal["skip", "fail"]

ENCODING = "utf-8"
DECODE_ERRORS = "surrogateescape"


def iter_log_files(directory: str | os.PathLike[str], *, sort: bool = True) -> Iterator[Path]:
    """
    Yield CUPS log files anywhere beneath ``directory``.

    Args:
        directory: Directory to walk (no depth limit)
        sort: Visit paths in sorted order for reproducible output; when False
            the filesystem walk order is used
    """
    entries = Path(directory).rglob("*")
    if sort:
        entries = iter(sorted(entries))
    for path in entries:
        if path.name in LOG_BASENAMES and path.is_file():
            yield path


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Read ``path`` and split it into lines on ``\\n``."""
    with open(path, encoding=ENCODING, errors=DECODE_ERRORS, newline="") as f:
        text = f.read()
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def records_from_file(source: str, lines: list[str]) -> list[Record]:
    basename = os.path.basename(source)
    return [Record(source_path=source, date=extract_date(basename, line), content=line) for line in lines]


def collect(
    directory: str | os.PathLike[str],
    *,
    sort: bool = True,
    on_unreadable: UnreadablePolicy = "skip",
) -> ScanResult:
    """
    Collect records from every CUPS log file under ``directory``.

    Args:
        directory: Located CUPS log directory
        sort: Walk in sorted path order
        on_unreadable: ``skip`` or ``fail`` when a file cannot be read

    Returns:
        ScanResult with records in traversal order, then line order

    Raises:
        UnreadableLogError: A file could not be read and the policy is ``fail``
    """
    base = os.fspath(directory)
    walk_root = Path(base)
    result = ScanResult(log_dir=base)

    with log_step("collector.collect", log_dir=base) as timer:
        for path in iter_log_files(walk_root, sort=sort):
            source = os.path.join(base, str(path.relative_to(walk_root)))
            try:
                lines = read_lines(path)
            except OSError as e:
                if on_unreadable == "fail":
                    raise UnreadableLogError(source, cause=e) from e
                log.warning("collector.unreadable", path=source, error=str(e))
                result.skipped.append(path)
                continue

            result.files.append(path)
            result.records.extend(records_from_file(source, lines))
            log.debug("collector.file_read", path=source, lines=len(lines))

        timer.add_metric("files", len(result.files))
        timer.add_metric("skipped", len(result.skipped))
        timer.add_metric("records", len(result.records))

    return result
