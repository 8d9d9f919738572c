"""Data models for lyrics processing."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ..exceptions import ValidationError


class Language(str, Enum):
    """Chinese variety used to pick a romanization scheme."""

    MANDARIN = "mandarin"
    CANTONESE = "cantonese"

    @property
    def romanization_name(self) -> str:
        if self is Language.CANTONESE:
            return "Jyutping"
        return "Hanyu Pinyin"

    @classmethod
    def choices(cls) -> List[str]:
        return [member.value for member in cls]

    @classmethod
    def parse(cls, value: "str | Language") -> "Language":
        """Parse a language name, ignoring case and surrounding whitespace."""
        if isinstance(value, Language):
            return value
        normalized = (value or "").strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValidationError(
            f"Unsupported language: {value!r}. Use one of: {', '.join(cls.choices())}"
        )


@dataclass(frozen=True)
class RomanizedLine:
    """A source line paired with its phonetic transcription."""

    romanization: str
    text: str

    @property
    def syllables(self) -> List[str]:
        return self.romanization.split()


@dataclass(frozen=True)
class Transcript:
    """Romanized lines in source order.

    ``entries`` holds None where the source had a blank line, so rendering
    can reproduce stanza breaks.
    """

    entries: Tuple[Optional[RomanizedLine], ...] = ()
    language: Language = Language.MANDARIN

    @property
    def blocks(self) -> Tuple[RomanizedLine, ...]:
        return tuple(e for e in self.entries if e is not None)

    def __bool__(self) -> bool:
        return bool(self.blocks)

    def render(self) -> str:
        from .assembly import assemble_lines

        return "\n".join(assemble_lines(self.entries)).strip()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "language": self.language.value,
            "romanization": self.language.romanization_name,
            "blocks": [
                {"romanization": b.romanization, "text": b.text} for b in self.blocks
            ],
        }


@dataclass(frozen=True)
class LyricsSource:
    """Raw lyrics text as returned by a lyrics source."""

    lyrics: str
    url: str = ""


@dataclass
class LyricsResult:
    """Final transcript together with where it came from."""

    lyrics: str
    source: str = ""
    method: str = "local-text"
    language: Language = Language.MANDARIN
    transcript: Transcript = field(default_factory=Transcript)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lyrics": self.lyrics,
            "source": self.source,
            "method": self.method,
            "language": self.language.value,
        }
