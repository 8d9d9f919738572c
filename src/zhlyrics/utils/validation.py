"""Validation utilities."""

import logging
from pathlib import Path

from ..core.models import Language
from ..exceptions import ValidationError

logger = logging.getLogger(__name__)

MAX_QUERY_LENGTH = 200


def validate_query(query: str) -> str:
    """Validate and normalize a song search query."""
    cleaned = " ".join((query or "").split())
    if not cleaned:
        raise ValidationError("Song title is required")
    if len(cleaned) > MAX_QUERY_LENGTH:
        raise ValidationError(
            f"Song title must be at most {MAX_QUERY_LENGTH} characters"
        )
    return cleaned


def validate_language(language: str) -> Language:
    """Validate language name and return the matching Language."""
    return Language.parse(language)


def validate_output_path(path: str) -> Path:
    """Validate and normalize output path."""
    output_path = Path(path)

    # Check if parent directory exists or can be created
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ValidationError(f"Cannot create output directory: {e}")

    if output_path.exists() and output_path.is_dir():
        raise ValidationError(f"Output path is a directory: {output_path}")

    if output_path.suffix.lower() not in [".txt", ".json", ".md", ""]:
        raise ValidationError("Output file must have .txt, .json, or .md extension")

    logger.debug("Output path: %s", output_path)
    return output_path
