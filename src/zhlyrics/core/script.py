"""Traditional to Simplified Chinese script normalization."""

from functools import lru_cache
from typing import Optional

from opencc import OpenCC

from ..config import OPENCC_CONFIG
from ..utils.logging import get_logger

logger = get_logger(__name__)


class ScriptNormalizer:
    """Map Traditional characters to Simplified ones with an OpenCC table.

    The default table converts Taiwan-variant Traditional to Mainland
    Simplified. Characters without a mapping, including Latin text and
    punctuation, are returned unchanged.
    """

    def __init__(self, config: str = OPENCC_CONFIG):
        if not config.endswith(".json"):
            config = f"{config}.json"
        self.config = config
        self._converter = OpenCC(config)

    def normalize(self, text: str) -> str:
        if not text:
            return ""
        converted = self._converter.convert(text)
        if len(converted) != len(text):
            logger.debug(
                f"Script conversion changed length ({len(text)} -> {len(converted)})"
            )
        return converted

    __call__ = normalize

    def __repr__(self) -> str:
        return f"ScriptNormalizer(config={self.config!r})"


@lru_cache(maxsize=None)
def get_normalizer(config: str = OPENCC_CONFIG) -> ScriptNormalizer:
    """Return the shared normalizer for a conversion table."""
    return ScriptNormalizer(config)


def normalize(text: str, normalizer: Optional[ScriptNormalizer] = None) -> str:
    """Convert Traditional characters in text to Simplified."""
    return (normalizer or get_normalizer()).normalize(text)
