"""
Root Typer application for the cupslog CLI.

Exit codes:
    0  document written
    1  unrecognized or incomplete argument
    2  output format not specified
    3  no CUPS log data under ``<root>/var/log/cups``
    4  a log file could not be read (``--on-unreadable fail``)
    5  invalid ``CUPSLOG_LOG_LEVEL`` / ``CUPSLOG_LOG_FORMAT`` value
    6  the ``--output`` file could not be written
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

import click
import typer
from pydantic import ValidationError

from cupslog import __version__
from cupslog.cli.console import err_console, print_error, print_usage_error
from cupslog.config import get_settings
from cupslog.errors import UnreadableLogError
from cupslog.locator import cups_log_dir
from cupslog.logging import configure_logging, get_logger
from cupslog.models import OutputFormat
from cupslog.pipeline import parse_cups_logs

log = get_logger(__name__)

EXIT_OK = 0
EXIT_BAD_ARGUMENT = 1
EXIT_NO_FORMAT = 2
EXIT_NO_DATA = 3
EXIT_UNREADABLE = 4
EXIT_SETTINGS = 5
EXIT_WRITE = 6

DEFAULT_ROOT = "/"

FORMAT_TOKENS = {f.value for f in OutputFormat}


class LogLevel(str, Enum):
    """Log level options."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LogFormat(str, Enum):
    """Log format options."""

    CONSOLE = "console"
    JSON = "json"


class Unreadable(str, Enum):
    """What to do with a log file that cannot be read."""

    SKIP = "skip"
    FAIL = "fail"


app = typer.Typer(
    name="cupslog",
    help="Collect CUPS access, error and page logs as CSV or JSON.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"cupslog {__version__}")
        raise typer.Exit()


def _select_format(tokens: list[str]) -> str | None:
    """Return the last format token; any other token is a usage error."""
    selected = None
    for token in tokens:
        if token not in FORMAT_TOKENS:
            print_usage_error(token)
            raise typer.Exit(code=EXIT_BAD_ARGUMENT)
        selected = token
    return selected


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def main(
    ctx: typer.Context,
    fmt: str | None = typer.Argument(None, metavar="FORMAT", help="Output format: csv or json.", show_default=False),
    path: str | None = typer.Option(None, "--path", "-p", help="System root; logs are read from ROOT/var/log/cups."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the document to a file instead of stdout."),
    sort: bool | None = typer.Option(None, "--sort/--no-sort", help="Visit log files in sorted path order."),
    on_unreadable: Unreadable | None = typer.Option(None, "--on-unreadable", help="Skip or fail on unreadable files."),
    log_level: LogLevel | None = typer.Option(None, "--log-level", help="Diagnostics level (stderr)."),
    log_format: LogFormat | None = typer.Option(None, "--log-format", help="Diagnostics format."),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Scan ROOT/var/log/cups and print its log lines as CSV or JSON."""
    try:
        settings = get_settings()
    except ValidationError as e:
        for err in e.errors():
            name = "CUPSLOG_" + "_".join(map(str, err["loc"])).upper()
            print_error(f"invalid setting {name}: {err['msg']}")
        raise typer.Exit(code=EXIT_SETTINGS)
    configure_logging(
        level=log_level.value if log_level else settings.log_level,
        format=log_format.value if log_format else settings.log_format,
        force=True,
    )

    tokens = ([fmt] if fmt is not None else []) + list(ctx.args)
    selected = _select_format(tokens)
    if selected is None:
        print_error("output format not specified, choose 'csv' or 'json'")
        raise typer.Exit(code=EXIT_NO_FORMAT)

    root = path if path is not None else DEFAULT_ROOT

    try:
        document = parse_cups_logs(
            root,
            selected,
            sort=True if sort is None else sort,
            on_unreadable=on_unreadable.value if on_unreadable else Unreadable.SKIP.value,
        )
    except UnreadableLogError as e:
        log.error("cli.unreadable", **e.to_dict())
        print_error(e.message)
        raise typer.Exit(code=EXIT_UNREADABLE)

    if not document:
        err_console.print(f"CUPS log files not found in directory: {cups_log_dir(root)}", markup=False)
        raise typer.Exit(code=EXIT_NO_DATA)

    data = document.encode("utf-8", "surrogateescape")
    if output is not None:
        try:
            output.write_bytes(data)
        except OSError as e:
            log.error("cli.write_failed", path=str(output), error=str(e))
            print_error(f"cannot write {output}: {e.strerror or e}")
            raise typer.Exit(code=EXIT_WRITE)
        log.info("cli.written", path=str(output), bytes=len(data))
    else:
        typer.echo(data, nl=False)


def run(argv: list[str] | None = None) -> int:
    """
    Console-script entry point.

    Click reports its own parse errors (e.g. ``-p`` without a value) as usage
    errors; they are mapped to the same exit code as unknown arguments.
    """
    try:
        rv = app(args=argv, prog_name="cupslog", standalone_mode=False)
    except click.UsageError as e:
        print_usage_error(e.format_message())
        return EXIT_BAD_ARGUMENT
    return rv if isinstance(rv, int) else EXIT_OK


if __name__ == "__main__":
    raise SystemExit(run())
