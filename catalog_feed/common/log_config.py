"""
Logging Configuration

Short level labels on stderr, keeping stdout free for the catalog
summary, JSON dump and validation report. Row-quality counts from the
parser (short rows padded, amounts coerced to zero) are DEBUG records,
so they only appear with --verbose, where the emitting module is shown
as well.
"""

import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "catalog_feed"

LEVEL_LABELS = {
    logging.DEBUG: "DEBUG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERROR",
    logging.CRITICAL: "FATAL",
}


class FeedLogFormatter(logging.Formatter):
    """Formats records as `LABEL message`, or `LABEL module: message` in verbose mode."""

    def __init__(self, show_names: bool = False):
        super().__init__()
        self.show_names = show_names

    def format(self, record: logging.LogRecord) -> str:
        label = LEVEL_LABELS.get(record.levelno, record.levelname)
        message = record.getMessage()
        if self.show_names:
            message = f"{record.name}: {message}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return f"{label:<5} {message}"


def setup_logging(
    verbose: bool = False, quiet: bool = False, stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Configure the catalog_feed logger.

    Args:
        verbose: DEBUG level, module names in every line
        quiet: WARNING level (errors reading or writing files still show)
        stream: Output stream (default: sys.stderr)

    Returns:
        The configured package logger
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(FeedLogFormatter(show_names=verbose))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Repeated CLI invocations in one process reuse the logger
    logger.handlers.clear()
    logger.addHandler(handler)
    return logger
