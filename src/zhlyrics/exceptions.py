"""Custom exceptions for zhlyrics."""

class ZhLyricsError(Exception):
    """Base exception for zhlyrics."""
    pass

class LyricsNotFoundError(ZhLyricsError):
    """The lyrics source could not produce any text for a query."""
    pass

class ValidationError(ZhLyricsError):
    """Invalid input parameters."""
    pass

class ConfigError(ZhLyricsError):
    """Invalid configuration values."""
    pass
