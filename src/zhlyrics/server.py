"""HTTP API for fetching and romanizing lyrics."""

from __future__ import annotations

from typing import Any, Callable, Mapping

from fastapi import Body, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .config import ServerConfig
from .core.genius import METHOD as GENIUS_METHOD
from .core.genius import fetch_genius_lyrics
from .core.models import Language, LyricsSource
from .core.pipeline import LyricsPipeline
from .core.script import get_normalizer
from .exceptions import LyricsNotFoundError, ValidationError, ZhLyricsError
from .utils.logging import get_logger
from .utils.validation import validate_language, validate_query

logger = get_logger(__name__)

LyricsFetcher = Callable[..., LyricsSource]


def _error(status_code: int, message: str, details: str | None = None) -> JSONResponse:
    payload: dict[str, Any] = {"error": message}
    if details:
        payload["details"] = details
    return JSONResponse(status_code=status_code, content=payload)


def create_app(
    config: ServerConfig | None = None,
    fetch_lyrics: LyricsFetcher | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    ``fetch_lyrics`` is the lyrics source; it takes a query plus ``timeout``
    and ``max_retries`` keywords and returns a LyricsSource or raises
    LyricsNotFoundError.
    """
    config = config or ServerConfig()
    fetcher = fetch_lyrics or fetch_genius_lyrics
    normalizer = get_normalizer(config.opencc_config)

    app = FastAPI(title="zhlyrics", version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def _language(payload: Mapping[str, Any]) -> Language:
        return validate_language(payload.get("language") or config.default_language)

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": __version__}

    @app.post("/api/lyrics")
    def lyrics(payload: dict[str, Any] = Body(default=None)):
        payload = payload or {}
        raw_title = payload.get("songTitle")
        try:
            query = validate_query(raw_title if isinstance(raw_title, str) else "")
            language = _language(payload)
        except ValidationError as exc:
            return _error(400, str(exc))

        logger.info(f"Lyrics request: {query} ({language.romanization_name})")
        try:
            source = fetcher(query, timeout=config.timeout, max_retries=config.max_retries)
            pipeline = LyricsPipeline(language, normalizer=normalizer)
            result = pipeline.process_source(source, GENIUS_METHOD)
        except LyricsNotFoundError as exc:
            logger.warning(f"Lyrics not found: {exc}")
            return _error(404, "Could not retrieve lyrics", str(exc))
        except ZhLyricsError as exc:
            logger.error(f"Lyrics request failed: {exc}")
            return _error(500, "Failed to process lyrics", str(exc))
        return result.to_dict()

    @app.post("/api/convert")
    def convert(payload: dict[str, Any] = Body(default=None)):
        payload = payload or {}
        text = payload.get("lyrics")
        if not isinstance(text, str) or not text.strip():
            return _error(400, "Lyrics text is required")
        try:
            language = _language(payload)
        except ValidationError as exc:
            return _error(400, str(exc))

        pipeline = LyricsPipeline(language, normalizer=normalizer)
        result = pipeline.process_source(LyricsSource(lyrics=text), "local-text")
        body = result.to_dict()
        body["blocks"] = result.transcript.to_dict()["blocks"]
        return body

    return app
