"""Romanization strategies for Chinese lyrics lines."""

from typing import Dict, List, Optional, Protocol, Tuple, Type

import ToJyutping
from pypinyin import Style, lazy_pinyin

from ..utils.logging import get_logger
from .models import Language

logger = get_logger(__name__)


class LineRomanizer(Protocol):
    """Anything that turns one line of Chinese text into romanization."""

    language: Language

    def romanize_line(self, text: str) -> str:
        ...


class PinyinRomanizer:
    """Hanyu Pinyin with tone marks for Mandarin.

    The whole line goes to pypinyin at once so its phrase dictionary can
    pick readings for polyphonic characters from the surrounding words.
    The syllable count therefore need not match the character count:
    runs of Latin letters or digits come back as a single token.
    """

    language = Language.MANDARIN

    def __init__(self, style: Style = Style.TONE):
        self.style = style

    def romanize_line(self, text: str) -> str:
        tokens = lazy_pinyin(text.strip(), style=self.style)
        return " ".join(tok.strip() for tok in tokens if tok.strip())


class JyutpingRomanizer:
    """Jyutping for Cantonese, one token per character.

    Characters without a reading (punctuation, Latin letters, digits,
    emoji) are passed through as their own token, so the token count
    equals the number of non-whitespace characters in the line.
    """

    language = Language.CANTONESE

    def lookup(self, text: str) -> List[Tuple[str, Optional[str]]]:
        return ToJyutping.get_jyutping_list(text)

    def romanize_line(self, text: str) -> str:
        tokens: List[str] = []
        for char, jyutping in self.lookup(text.strip()):
            if char.isspace():
                continue
            if not jyutping:
                logger.debug(f"No Jyutping for {char!r}, keeping it as is")
                tokens.append(char)
            else:
                tokens.append(jyutping)
        return " ".join(tokens)


ROMANIZERS: Dict[Language, Type] = {
    Language.MANDARIN: PinyinRomanizer,
    Language.CANTONESE: JyutpingRomanizer,
}


def get_romanizer(language: "str | Language" = Language.MANDARIN) -> LineRomanizer:
    """Create the line romanizer for a language name."""
    return ROMANIZERS[Language.parse(language)]()
