"""Logging configuration helpers."""

import logging
import sys


def configure_logging(level: str = "INFO") -> None:
    """Configure application logging with a single stderr handler.

    Stdout is left untouched so the stdio transport can use it.
    """
    logger = logging.getLogger("cn_food")
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
