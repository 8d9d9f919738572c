"""Core lyrics processing modules.

Only the data models are imported eagerly; the pipeline stages pull in the
dictionary-backed converters and are imported from their own modules.
"""

from .models import Language, LyricsResult, LyricsSource, RomanizedLine, Transcript

__all__ = [
    "Language",
    "LyricsResult",
    "LyricsSource",
    "RomanizedLine",
    "Transcript",
]
