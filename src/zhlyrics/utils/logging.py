"""Logging configuration for zhlyrics."""

import logging
import sys
from pathlib import Path
from typing import Optional

LOGGER_NAME = "zhlyrics"

TERSE_FORMAT = "%(levelname)s: %(message)s"
VERBOSE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "INFO", log_file: Optional[Path] = None, verbose: bool = False
) -> logging.Logger:
    """Configure the package logger for a CLI run.

    Records go to stderr, and additionally to ``log_file`` when given.
    Calling this again replaces the handlers of the previous call.
    """
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    logger.handlers.clear()

    formatter = logging.Formatter(VERBOSE_FORMAT if verbose else TERSE_FORMAT)
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get logger instance."""
    return logging.getLogger(name)
