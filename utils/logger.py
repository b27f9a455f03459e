"""
utils/logger.py
---------------
Console logging for the API server.
Modules ask for a logger with `get_logger(__name__)`; the stdout handler and
the LOG_LEVEL from config.py are applied to the root logger on first use.
"""

import logging
import sys

from config import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_configured = False


def _configure_root() -> None:
    global _configured
    if _configured:
        return
    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger()
    root.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    root.addHandler(console)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Logger for `name`, with the server's console handler in place."""
    _configure_root()
    return logging.getLogger(name)
