"""
Logging utilities for the command line runner.

Standard output carries the quiz dialogue, so log records go to stderr
and, optionally, to a log file.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

PACKAGE_LOGGER = "quiz_toolkit"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(threadName)s %(name)s: %(message)s"


def console_level(verbosity: int) -> int:
    """Map -v count to a console log level (0=WARNING, 1=INFO, 2+=DEBUG)."""
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def configure_logging(
    verbosity: int = 0,
    log_file: Optional[Path] = None,
    *,
    stream: Optional[TextIO] = None,
) -> List[logging.Handler]:
    """
    Attach console (and file) handlers to the package logger.

    Replaces handlers installed by an earlier call, so repeated calls
    (tests, re-entrant CLI runs) do not duplicate output.

    Args:
        verbosity: Number of -v flags
        log_file: Optional file receiving DEBUG and above
        stream: Console stream (default sys.stderr)

    Returns:
        The attached handlers (for later removal).
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(stream or sys.stderr)
    console.setLevel(console_level(verbosity))
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    handlers: List[logging.Handler] = [console]

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        handlers.append(file_handler)

    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return handlers


def detach_handlers(handlers: List[logging.Handler]) -> None:
    """Remove and close handlers returned by configure_logging()."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in handlers:
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
