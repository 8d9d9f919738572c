"""Strip structural noise from raw lyrics text."""

import re
from typing import List

from ..utils.logging import get_logger

logger = get_logger(__name__)

# Section labels such as [Verse 1], [Chorus], [副歌]
SECTION_MARKER_RE = re.compile(r'^\[.*\]$')
ATTRIBUTION_RE = re.compile(r'^Written by:', re.IGNORECASE)
BLANK_RUN_RE = re.compile(r'\n{3,}')


def is_metadata_line(line: str) -> bool:
    """Check if a trimmed line is annotation rather than lyrics."""
    return bool(SECTION_MARKER_RE.match(line) or ATTRIBUTION_RE.match(line))


def clean_lyrics(raw: str) -> str:
    """
    Remove metadata, carriage returns and blank lines from raw lyrics.

    Args:
        raw: Lyrics text as delivered by a lyrics source

    Returns:
        Surviving lyric lines joined with single newlines, or an empty
        string when nothing but noise was present.
    """
    text = BLANK_RUN_RE.sub('\n\n', (raw or '').strip())
    text = text.replace('\r', '')

    kept: List[str] = []
    dropped = 0
    for line in text.split('\n'):
        trimmed = line.strip()
        if not trimmed:
            continue
        if is_metadata_line(trimmed):
            dropped += 1
            continue
        kept.append(line)

    if dropped:
        logger.debug(f"Dropped {dropped} metadata line(s)")
    return '\n'.join(kept)
