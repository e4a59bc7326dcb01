"""Console logging setup for the service."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s.%(msecs)03d | %(levelname)-7s | %(name)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Attach a single console handler to the package logger."""
    logger = logging.getLogger("fetshub")
    logger.handlers.clear()
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
