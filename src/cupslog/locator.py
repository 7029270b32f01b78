"""Resolve the CUPS log directory under a system root."""

from __future__ import annotations

import os

from cupslog.logging import get_logger

log = get_logger(__name__)

CUPS_LOG_SUBPATH = ("var", "log", "cups")


def cups_log_dir(root: str | os.PathLike[str]) -> str:
    """
    Return ``<root>/var/log/cups`` without touching the filesystem.

    The root is joined as given, so ``.`` yields ``./var/log/cups`` and record
    paths keep the spelling the caller used.
    """
    return os.path.join(os.fspath(root), *CUPS_LOG_SUBPATH)


def locate_log_dir(root: str | os.PathLike[str]) -> str | None:
    """
    Locate the CUPS log directory under ``root``.

    Returns None when the path is missing or is not a directory.
    """
    log_dir = cups_log_dir(root)
    if not os.path.isdir(log_dir):
        log.debug("locator.not_found", log_dir=log_dir)
        return None
    return log_dir
