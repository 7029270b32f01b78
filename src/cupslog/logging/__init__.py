"""
Structured logging for cupslog.

Usage:
    from cupslog.logging import configure_logging, get_logger, log_step

    # Configure once at startup
    configure_logging(level="INFO")

    log = get_logger(__name__)

    with log_step("collector.collect") as timer:
        records = collect(log_dir)
        timer.add_metric("records", len(records))

All log output goes to stderr; stdout is reserved for the rendered document.
Before configure_logging() runs, events go through stdlib logging, so only
warnings and errors are printed (to stderr).
"""

from cupslog.logging.config import configure_logging, get_logger, is_configured
from cupslog.logging.timing import TimingResult, log_step

__all__ = [
    "configure_logging",
    "get_logger",
    "is_configured",
    "log_step",
    "TimingResult",
]
