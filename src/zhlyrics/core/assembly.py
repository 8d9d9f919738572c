"""Interleave romanized lines with their source lines."""

from typing import Iterable, List, Optional

from .models import Language, RomanizedLine, Transcript
from .romanization import LineRomanizer


def romanize_lines(text: str, romanizer: LineRomanizer) -> List[Optional[RomanizedLine]]:
    """
    Romanize text line by line.

    Returns one entry per input line, in order; blank lines map to None so
    the caller can decide how to space stanzas.
    """
    entries: List[Optional[RomanizedLine]] = []
    for line in (text or "").split("\n"):
        trimmed = line.strip()
        if not trimmed:
            entries.append(None)
            continue
        entries.append(RomanizedLine(romanizer.romanize_line(trimmed), trimmed))
    return entries


def assemble_lines(entries: Iterable[Optional[RomanizedLine]]) -> List[str]:
    """
    Lay out romanized entries as romanization, text, blank separator.

    A blank entry adds a separator only if the previously emitted line is
    not already blank, and never at the very start.
    """
    output: List[str] = []
    last_blank = True
    for entry in entries:
        if entry is None:
            if not last_blank:
                output.append("")
                last_blank = True
            continue
        output.extend([entry.romanization, entry.text, ""])
        last_blank = True
    return output


def romanize(text: str, romanizer: LineRomanizer) -> str:
    """Return the full romanized transcript for text as a single string."""
    return build_transcript(text, romanizer).render()


def build_transcript(
    text: str,
    romanizer: LineRomanizer,
    language: Optional[Language] = None,
) -> Transcript:
    """Romanize text into a Transcript, keeping blank-line markers."""
    return Transcript(
        entries=tuple(romanize_lines(text, romanizer)),
        language=language or getattr(romanizer, "language", Language.MANDARIN),
    )
