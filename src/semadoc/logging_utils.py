#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semadoc/logging_utils.py
"""Logging setup for the semadoc command line.

Library modules only create ``logging.getLogger(__name__)`` loggers and never
configure handlers. ``configure_logging`` is called once by the CLI to route
those records to standard error and, optionally, to a log file.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "semadoc"

# Third-party loggers that log every request at INFO level
_NOISY_LOGGERS = ("httpx", "httpcore")

_PLAIN_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
_TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(log_level: int | str) -> int:
    """Return a numeric level for ``log_level``; unknown names map to INFO."""
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).strip().upper())
    return level if isinstance(level, int) else logging.INFO


def _make_formatter(trace_mode: bool) -> logging.Formatter:
    if trace_mode:
        return logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT)
    return logging.Formatter(_PLAIN_FORMAT)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Install the CLI handlers on the root logger.

    Existing root handlers are removed first, so repeated calls do not
    duplicate output.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g. ``"INFO"``)
    log_file : str, optional
        Also append log records to this file
    trace_mode : bool, default False
        Use the verbose format with timestamps and logger names, and let
        httpx log its requests

    Returns
    -------
    logging.Logger
        The root logger

    """
    level = resolve_log_level(log_level)
    formatter = _make_formatter(trace_mode)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: Optional[OSError] = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            file_error = exc

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.NOTSET)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if trace_mode else max(level, logging.WARNING))

    if file_error is not None:
        root_logger.warning("Could not open log file %s: %s", log_file, file_error)
    elif log_file:
        root_logger.info("Logging to file: %s", log_file)

    return root_logger


__all__ = ["configure_logging", "resolve_log_level"]
