"""
Logging bootstrap for command-line use. Library modules only create
module loggers under the ``noteline`` namespace and never add handlers.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "noteline"


def init_logger(level: int = logging.WARNING) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if logger.handlers:
        return logger
    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False
    return logger
