"""Configuration settings for zhlyrics."""

import os
from dataclasses import dataclass

from .core.models import Language
from .exceptions import ConfigError


def _env_int(name: str, default: int) -> int:
    """Read an integer setting from the environment."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {value!r}")


# Pipeline settings (can be overridden via environment variables)
DEFAULT_LANGUAGE = os.getenv("ZHLYRICS_LANGUAGE", Language.MANDARIN.value).strip().lower()
OPENCC_CONFIG = os.getenv("ZHLYRICS_OPENCC_CONFIG", "tw2s")

# Lyrics source settings
HTTP_TIMEOUT = _env_int("ZHLYRICS_HTTP_TIMEOUT", 10)
MAX_RETRIES = _env_int("ZHLYRICS_MAX_RETRIES", 3)
RETRY_SLEEP = 1.0
MAX_RETRY_SLEEP = 30.0

USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

GENIUS_BASE_URL = "https://genius.com"

# Server settings
SERVER_HOST = os.getenv("ZHLYRICS_HOST", "127.0.0.1")
SERVER_PORT = _env_int("ZHLYRICS_PORT", 3001)


@dataclass
class ServerConfig:
    """Settings for the HTTP server."""

    host: str = SERVER_HOST
    port: int = SERVER_PORT
    default_language: str = DEFAULT_LANGUAGE
    opencc_config: str = OPENCC_CONFIG
    timeout: int = HTTP_TIMEOUT
    max_retries: int = MAX_RETRIES
    cors_origins: tuple = ("*",)


def validate_config() -> None:
    """Validate configuration values."""
    if HTTP_TIMEOUT <= 0:
        raise ConfigError("Invalid HTTP timeout")

    if MAX_RETRIES < 0:
        raise ConfigError("Invalid retry count")

    if not 0 < SERVER_PORT < 65536:
        raise ConfigError("Invalid server port")

    if DEFAULT_LANGUAGE not in Language.choices():
        raise ConfigError(
            f"Invalid default language: {DEFAULT_LANGUAGE}. "
            f"Use one of: {', '.join(Language.choices())}"
        )


# Validate config on import
validate_config()
