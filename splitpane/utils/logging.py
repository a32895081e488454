"""Simple logging utilities for splitpane."""

import logging
import sys
from typing import Optional

from ..config.settings import get_log_level

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given module name."""
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(logging.INFO)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger


def setup_logging(verbose: bool = False, quiet: bool = False, level: Optional[str] = None) -> None:
    """Configure the ``splitpane`` logger hierarchy for CLI use.

    ``--verbose`` wins over SPLITPANE_LOG_LEVEL, ``--quiet`` limits output
    to errors.
    """
    if verbose:
        resolved = logging.DEBUG
    elif quiet:
        resolved = logging.ERROR
    else:
        resolved = logging.getLevelName(level or get_log_level())
        if not isinstance(resolved, int):
            resolved = logging.WARNING

    logger = get_logger("splitpane")
    logger.setLevel(resolved)
    for handler in logger.handlers:
        handler.setLevel(resolved)
