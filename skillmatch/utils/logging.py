"""Logging setup for the skillmatch command line.

Package modules only create ``logging.getLogger(__name__)`` loggers and never
attach handlers. The CLI installs one stderr handler on the package logger,
so an application embedding the scoring services keeps full control of its
own logging.
"""

import logging
import sys

PACKAGE_LOGGER = "skillmatch"
HANDLER_NAME = "skillmatch-stderr"

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _cli_handler(logger: logging.Logger) -> logging.Handler | None:
    for handler in logger.handlers:
        if handler.get_name() == HANDLER_NAME:
            return handler
    return None


def configure_logging(level: str | None = None) -> logging.Logger:
    """Route package log records to stderr.

    Args:
        level: Level name such as DEBUG or warning. Defaults to INFO.

    Returns:
        The package logger. Calling again only changes the level.

    Raises:
        ValueError: If the level name is unknown.
    """
    log_level = logging.getLevelName((level or "INFO").upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(PACKAGE_LOGGER)
    handler = _cli_handler(logger)
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    handler.setLevel(log_level)
    logger.setLevel(log_level)
    return logger


def reset_logging() -> None:
    """Remove the CLI handler and restore the package logger defaults."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handler = _cli_handler(logger)
    if handler is not None:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
