"""Centralized logging configuration for spgraph.

All package loggers are children of the ``spgraph`` logger, which gets one
handler the first time any logger is requested. The initial level can be set
with the ``SPGRAPH_LOG_LEVEL`` environment variable (a level name such as
``DEBUG`` or ``WARNING``); the default is WARNING so that a library import
stays quiet.
"""

import logging
import os
import sys
from typing import Optional

ROOT_LOGGER_NAME = "spgraph"
LOG_LEVEL_ENV = "SPGRAPH_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def _level_from_env(default: int) -> int:
    name = os.environ.get(LOG_LEVEL_ENV)
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else default


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the ``spgraph`` logger.

    Only the first call has an effect until `reset_logging` is called.

    Args:
        level: Logging level. Falls back to ``SPGRAPH_LOG_LEVEL``, then WARNING.
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stdout StreamHandler).
    """
    global _configured

    if _configured:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level if level is not None else _level_from_env(logging.WARNING))
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees records
    root_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a package logger, configuring the root on first use.

    Args:
        name: Logger name, normally ``__name__`` of the calling module.

    Returns:
        Logger inheriting level and handler from ``spgraph``.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``spgraph`` logger and its handlers."""
    setup_root_logger()
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Log everything, including per-query search details."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.WARNING)


def reset_logging() -> None:
    """Drop handlers and forget configuration (mainly for tests)."""
    global _configured
    _configured = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
