"""Lyrics normalization and romanization pipeline.

Stages run in a fixed order:

1. clean the raw text (metadata, blank runs, carriage returns)
2. convert Traditional characters to Simplified
3. romanize each line (Pinyin or Jyutping)
4. interleave romanization and source lines into the transcript
"""

from typing import Optional

from ..utils.logging import get_logger
from .assembly import build_transcript
from .cleaning import clean_lyrics
from .models import Language, LyricsResult, LyricsSource, Transcript
from .romanization import LineRomanizer, get_romanizer
from .script import ScriptNormalizer, get_normalizer

logger = get_logger(__name__)


class LyricsPipeline:
    """Turn raw lyrics into a romanized transcript.

    The script normalizer and line romanizer are injected; when omitted the
    OpenCC Traditional-to-Simplified table and the romanizer for
    ``language`` are used.
    """

    def __init__(
        self,
        language: "str | Language" = Language.MANDARIN,
        normalizer: Optional[ScriptNormalizer] = None,
        romanizer: Optional[LineRomanizer] = None,
    ):
        self.language = Language.parse(language)
        self.normalizer = normalizer or get_normalizer()
        self.romanizer = romanizer or get_romanizer(self.language)

    def transcribe(self, raw: str) -> Transcript:
        name = self.language.romanization_name

        logger.info("[1/4] Cleaning lyrics text...")
        cleaned = clean_lyrics(raw)
        if not cleaned:
            logger.info("No lyric lines survived cleaning")
            return Transcript(language=self.language)

        logger.info("[2/4] Converting to Simplified Chinese...")
        simplified = self.normalizer.normalize(cleaned)

        logger.info(f"[3/4] Adding {name}...")
        transcript = build_transcript(simplified, self.romanizer, self.language)

        logger.info(f"[4/4] Assembled {len(transcript.blocks)} line(s)")
        return transcript

    def run(self, raw: str) -> str:
        return self.transcribe(raw).render()

    def process_source(self, source: LyricsSource, method: str) -> LyricsResult:
        """Run the pipeline over lyrics fetched from a lyrics source."""
        transcript = self.transcribe(source.lyrics)
        return LyricsResult(
            lyrics=transcript.render(),
            source=source.url,
            method=method,
            language=self.language,
            transcript=transcript,
        )


def process_lyrics(
    raw_text: str,
    language: "str | Language" = Language.MANDARIN,
    *,
    normalizer: Optional[ScriptNormalizer] = None,
    romanizer: Optional[LineRomanizer] = None,
) -> str:
    """
    Convert raw lyrics into a bilingual romanized transcript.

    Args:
        raw_text: Raw lyrics, possibly with section markers and credits
        language: "mandarin" (Hanyu Pinyin) or "cantonese" (Jyutping)
        normalizer: Traditional-to-Simplified converter to use
        romanizer: Line romanizer to use instead of the one for ``language``

    Returns:
        Blocks of romanization line, Chinese line and blank separator, or
        an empty string when no lyrics survived cleaning.

    Raises:
        ValidationError: If language is not a supported variety
    """
    pipeline = LyricsPipeline(language, normalizer=normalizer, romanizer=romanizer)
    return pipeline.run(raw_text)
