"""
Logging utilities for RecordQuery.
"""

import logging
import sys
from typing import Optional


# Default format
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

PACKAGE_LOGGER = "recordquery"

# Loggers configured through setup_logger
_loggers: dict = {}


def setup_logger(
    name: str = PACKAGE_LOGGER,
    level: str = "WARNING",
    format_string: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Set up and configure a logger.

    Module loggers below ``recordquery`` propagate to the package logger,
    so configuring that one is usually enough.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string
        log_file: Optional file path for logging

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        format_string or DEFAULT_FORMAT,
        datefmt=DEFAULT_DATE_FORMAT,
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    _loggers[name] = logger

    return logger


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """
    Get a logger by name.

    The package logger is configured with defaults on first use; module
    loggers are returned as plain children of it.

    Args:
        name: Logger name, typically ``__name__``

    Returns:
        Logger instance
    """
    if PACKAGE_LOGGER not in _loggers:
        setup_logger(PACKAGE_LOGGER)
    if name in _loggers:
        return _loggers[name]
    return logging.getLogger(name)

