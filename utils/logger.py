"""
utils/logger.py
---------------
Centralized logging configuration.
All modules should use `get_logger(__name__)` to obtain a logger instance;
the shared stdout handler is installed on first use.
"""

import logging
import sys
from typing import Optional

from config import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_handler: Optional[logging.Handler] = None


def configure_logging(level: Optional[str] = None) -> None:
    """
    Install the stdout handler on the root logger and set its level.

    Calling it again only changes the level.

    Args:
        level: A level name such as ``"DEBUG"``. Defaults to ``LOG_LEVEL``.
    """
    global _handler
    root = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
        _handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
        root.addHandler(_handler)
    resolved = getattr(logging, (level or LOG_LEVEL).upper(), None)
    root.setLevel(resolved if isinstance(resolved, int) else logging.INFO)


def get_logger(name: str) -> logging.Logger:
    """Get a named logger, configuring the root logger on first call."""
    if _handler is None:
        configure_logging()
    return logging.getLogger(name)
