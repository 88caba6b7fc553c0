"""Logging utilities for doyoumarkdown."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "doyoumarkdown"
_CONSOLE_FORMAT = "[doyoumarkdown] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# In-memory text has no path to show.
UNNAMED_SOURCE = "<text>"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the doyoumarkdown hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def describe_source(source: str | None) -> str:
    return source or UNNAMED_SOURCE


def log_detector_matches(name: str, count: int, source: str | None) -> None:
    """Record how many constructs one detector kept; visible with ``--verbose``."""
    get_logger("detectors").debug(
        "%s found %d match(es) in %s", name, count, describe_source(source)
    )


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Configure the package logger.

    Findings go to stdout, so the console handler only carries diagnostics:
    warnings by default (failed detectors, unreadable files) and per-detector
    match counts when ``verbose`` is set.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Repeated CLI invocations in one process must not stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


__all__ = [
    "UNNAMED_SOURCE",
    "configure_logging",
    "describe_source",
    "get_logger",
    "log_detector_matches",
]
