"""Logging setup for gitact.

The interactive dashboard owns the terminal, so log records only go to a
file when one is configured. The one-shot report logs to stderr.
"""

import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logger(
    level: str = "WARNING",
    log_file: Optional[str] = None,
    *,
    interactive: bool = True,
    name: str = "gitact",
) -> logging.Logger:
    """Configure the package logger once and return it."""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False
    if logger.handlers:
        return logger

    handler: logging.Handler
    if log_file:
        handler = RotatingFileHandler(log_file, maxBytes=1_000_000, backupCount=3)
    elif interactive:
        handler = logging.NullHandler()
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
