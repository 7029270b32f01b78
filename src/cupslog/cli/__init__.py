"""
CLI layer for cupslog.

Provides a single Typer command that runs the scan pipeline
(``cupslog.pipeline``). This package handles only terminal transport:
argument parsing, exit codes and stderr messages.

Entry point::

    cupslog json -p /mnt/sysroot
"""

from cupslog.cli.app import app, run

__all__ = ["app", "run"]
