"""Logging configuration for bookmark-datesort.

The package is silent when used as a library (see ``__init__``); a host
turns its messages on by calling :func:`configure_logging`.
"""

import sys

from loguru import logger

PACKAGE = "bookmark_datesort"
LOG_FORMAT = "{level.icon} {message}"
VERBOSE_LOG_FORMAT = "{time:HH:mm:ss} {level.icon} {name}:{function} {message}"


def configure_logging(*, verbose: bool = False) -> None:
    """Send package log messages to stderr, with module names when verbose."""
    logger.remove()
    logger.enable(PACKAGE)
    if verbose:
        logger.add(sys.stderr, level="DEBUG", format=VERBOSE_LOG_FORMAT)
    else:
        logger.add(sys.stderr, level="INFO", format=LOG_FORMAT)
