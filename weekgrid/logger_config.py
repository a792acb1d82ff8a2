"""
Logging setup for Weekgrid.

One stream handler on the package logger; modules call get_logger(__name__).
"""

import logging
import sys

PACKAGE_LOGGER = "weekgrid"
LOG_FORMAT = '[%(levelname)s] %(name)s - %(message)s'


def setup_logger(level: int = logging.WARNING) -> logging.Logger:
    """Attach a stderr handler to the package logger (once) and set its level."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Avoid duplicate handlers on repeated calls
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""
    return logging.getLogger(name)
