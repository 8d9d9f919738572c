"""Utility modules."""

from .logging import setup_logging, get_logger
from .validation import (
    validate_query,
    validate_language,
    validate_output_path,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "validate_query",
    "validate_language",
    "validate_output_path",
]
