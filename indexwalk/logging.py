"""Logging for indexwalk.

All package loggers are children of ``indexwalk``. Traversals report through
two of them:

* ``indexwalk.traversal``: start and element count of every eager traversal,
  deferral of lazy calls, and per-delivery trace lines when tracing is on.
* ``indexwalk.enumerator``: exhaustion or early close of pull iterators.

Everything is emitted at DEBUG, so nothing shows at the default INFO level
until :func:`trace_traversals` or :func:`set_global_log_level` lowers it.
"""

import logging
import sys
from typing import Optional

from indexwalk.config import TRAVERSAL_CONFIG

ROOT_LOGGER_NAME = "indexwalk"

_DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """Install the single handler of the ``indexwalk`` logger.

    Later calls leave an existing setup alone until :func:`reset_logging`.

    Args:
        level: Level for the package root logger.
        format_string: Record format; defaults to time, name, level, message.
        handler: Destination; defaults to stdout.

    Returns:
        The ``indexwalk`` logger.
    """
    global _configured

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _configured:
        return root_logger

    handler = handler or logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or _DEFAULT_FORMAT))
    root_logger.handlers[:] = [handler]
    root_logger.setLevel(level)
    # Records still reach the root logger, where pytest's caplog listens
    root_logger.propagate = True

    _configured = True
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for an indexwalk module (pass ``__name__``)."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``indexwalk`` logger and its handlers."""
    root_logger = setup_root_logger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def trace_traversals(enabled: bool = True) -> None:
    """Switch delivery tracing and DEBUG output on or off together.

    With tracing on, ``indexwalk.traversal`` logs one line per delivered
    element in addition to its start/finish summary.
    """
    TRAVERSAL_CONFIG.trace_deliveries = enabled
    set_global_log_level(logging.DEBUG if enabled else logging.INFO)


def reset_logging() -> None:
    """Drop the package handler and level; used between tests."""
    global _configured
    _configured = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
