"""Command-line interface using Click."""

import json
import sys
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .config import DEFAULT_LANGUAGE, SERVER_HOST, SERVER_PORT, ServerConfig
from .core.genius import METHOD as GENIUS_METHOD
from .core.genius import fetch_genius_lyrics
from .core.models import Language, LyricsResult, LyricsSource
from .core.pipeline import LyricsPipeline
from .exceptions import LyricsNotFoundError, ZhLyricsError
from .utils.logging import setup_logging
from .utils.validation import validate_language, validate_output_path, validate_query

LANGUAGE_OPTION = click.option(
    '--language', '-l',
    type=click.Choice(Language.choices(), case_sensitive=False),
    default=DEFAULT_LANGUAGE, show_default=True,
    help='Chinese variety: mandarin (Hanyu Pinyin) or cantonese (Jyutping)',
)


def _emit(result: LyricsResult, output: Optional[str], as_json: bool, logger) -> None:
    """Write a result to a file or stdout."""
    if as_json:
        payload = result.to_dict()
        payload["blocks"] = result.transcript.to_dict()["blocks"]
        text = json.dumps(payload, ensure_ascii=False, indent=2)
    else:
        text = result.lyrics

    if not result.lyrics:
        logger.warning("No lyrics survived cleaning")

    if output:
        path = validate_output_path(output)
        path.write_text(text + "\n", encoding="utf-8")
        logger.info(f"✅ Wrote {path}")
    else:
        click.echo(text)


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--log-file', type=click.Path(), help='Log to file')
@click.pass_context
def cli(ctx, verbose, log_file):
    """zhlyrics - Chinese song lyrics with Pinyin or Jyutping."""
    ctx.ensure_object(dict)
    logger = setup_logging(
        level="DEBUG" if verbose else "INFO",
        log_file=Path(log_file) if log_file else None,
        verbose=verbose
    )
    ctx.obj['logger'] = logger


@cli.command()
@click.argument('query')
@LANGUAGE_OPTION
@click.option('-o', '--output', help='Write the transcript to this file')
@click.option('--json', 'as_json', is_flag=True, help='Output JSON instead of text')
@click.pass_context
def fetch(ctx, query, language, output, as_json):
    """Look up a song on Genius and romanize its lyrics."""
    logger = ctx.obj['logger']
    try:
        query = validate_query(query)
        lang = validate_language(language)
        logger.info(f"Fetching lyrics for: {query} ({lang.romanization_name})")
        source = fetch_genius_lyrics(query)
        result = LyricsPipeline(lang).process_source(source, GENIUS_METHOD)
        _emit(result, output, as_json, logger)
    except LyricsNotFoundError as e:
        logger.error(f"❌ Could not retrieve lyrics: {e}")
        sys.exit(2)
    except ZhLyricsError as e:
        logger.error(f"❌ {e}")
        sys.exit(1)


@cli.command()
@click.argument('input_file', required=False, default='-', type=click.File('r', encoding='utf-8'))
@LANGUAGE_OPTION
@click.option('-o', '--output', help='Write the transcript to this file')
@click.option('--json', 'as_json', is_flag=True, help='Output JSON instead of text')
@click.pass_context
def convert(ctx, input_file, language, output, as_json):
    """Romanize lyrics read from a file or stdin."""
    logger = ctx.obj['logger']
    try:
        lang = validate_language(language)
        raw = input_file.read()
        result = LyricsPipeline(lang).process_source(LyricsSource(lyrics=raw), "local-text")
        _emit(result, output, as_json, logger)
    except ZhLyricsError as e:
        logger.error(f"❌ {e}")
        sys.exit(1)


@cli.command()
@click.option('--host', default=SERVER_HOST, show_default=True, help='Interface to bind')
@click.option('--port', type=int, default=SERVER_PORT, show_default=True, help='Port to listen on')
@click.pass_context
def serve(ctx, host, port):
    """Run the HTTP API."""
    import uvicorn

    from .server import create_app

    logger = ctx.obj['logger']
    config = ServerConfig(host=host, port=port)
    logger.info(f"Server running at http://{host}:{port}")
    uvicorn.run(create_app(config), host=host, port=port, log_level="info")


if __name__ == '__main__':
    cli()
