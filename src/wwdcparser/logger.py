"""Logging utilities for wwdcparser."""

import logging
import sys
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler

FILE_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _console_handler(stream: TextIO) -> logging.Handler:
    # Page text can contain square brackets, so rich markup stays off
    return RichHandler(
        console=Console(file=stream),
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )


def _file_handler(log_file: str) -> logging.Handler:
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
    return handler


def setup_logger(
    name: str = "wwdcparser",
    level: int = logging.INFO,
    log_file: str | None = None,
    file_stream: TextIO | None = None,
) -> logging.Logger:
    """Configure the package logger for a CLI run.

    Only the named logger is touched; the root logger and the loggers of
    libraries such as httpx keep their own configuration. Calling this again
    replaces the handlers from the previous call.

    Args:
        name: The name of the logger.
        level: The logging level.
        log_file: Optional file path to also write logs to.
        file_stream: Optional stream for console output (defaults to stderr).

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(name)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_console_handler(file_stream or sys.stderr))
    if log_file:
        logger.addHandler(_file_handler(log_file))

    logger.setLevel(level)
    logger.propagate = False
    return logger
