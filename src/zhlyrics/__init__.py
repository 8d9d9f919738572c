"""Chinese song lyrics with Hanyu Pinyin or Jyutping romanization."""

__version__ = "0.1.0"

from .core.pipeline import LyricsPipeline, process_lyrics

__all__ = ["__version__", "LyricsPipeline", "process_lyrics"]
