"""
CLI output helpers.

The rendered document is written as bytes to stdout; every message for the
user goes through ``err_console`` on stderr.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

err_console = Console(stderr=True, highlight=False, soft_wrap=True)

USAGE = "Usage:\n  cupslog [csv|json] [-p|--path <system_root>]"


def print_error(message: str) -> None:
    """Print ``message`` as an error on stderr."""
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_usage_error(token: str) -> None:
    """Report an unrecognized or incomplete argument, followed by usage."""
    err_console.print(f"[bold red]Unknown or incomplete argument:[/bold red] {escape(token)}")
    err_console.print(escape(USAGE))
