"""Genius lyrics fetching for Chinese songs."""

from typing import Optional
from urllib.parse import quote

from bs4 import BeautifulSoup

from ..config import GENIUS_BASE_URL, HTTP_TIMEOUT, MAX_RETRIES, USER_AGENT
from ..exceptions import LyricsNotFoundError
from ..utils.logging import get_logger
from .fetch import fetch_html, fetch_json
from .models import LyricsSource

logger = get_logger(__name__)

METHOD = "genius-direct-scrape"

SEARCH_HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "application/json",
}

PAGE_HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "zh-CN,zh;q=0.9,en;q=0.8",
}

# Class name fragments of elements inside lyrics containers that hold
# page metadata instead of lyrics
NON_LYRICS_CLASSES = ("LyricsHeader", "SongBioPreview", "ContributorsCredit")


def search_song_url(
    query: str,
    *,
    timeout: int = HTTP_TIMEOUT,
    max_retries: int = MAX_RETRIES,
) -> Optional[str]:
    """Return the URL of the first song hit for a Genius search."""
    api_url = f"{GENIUS_BASE_URL}/api/search/multi?q={quote(query)}"
    data = fetch_json(api_url, headers=SEARCH_HEADERS, timeout=timeout, max_retries=max_retries)
    if not data:
        return None

    sections = data.get("response", {}).get("sections", [])
    for section in sections:
        if section.get("type") != "song":
            continue
        hits = section.get("hits") or []
        if hits:
            url = hits[0].get("result", {}).get("url")
            if url:
                return url
    return None


def _is_non_lyrics_element(classes) -> bool:
    if not classes:
        return False
    if isinstance(classes, str):
        classes = [classes]
    joined = " ".join(classes)
    return any(pattern in joined for pattern in NON_LYRICS_CLASSES)


def extract_lyrics(html: str) -> str:
    """Extract the text of all lyrics containers on a Genius song page."""
    soup = BeautifulSoup(html, "html.parser")
    parts = []
    for container in soup.find_all(attrs={"data-lyrics-container": "true"}):
        for elem in container.find_all(["div", "span", "a"], class_=_is_non_lyrics_element):
            elem.decompose()
        for br in container.find_all("br"):
            br.replace_with("\n")
        for div in container.find_all("div"):
            div.append("\n")
        parts.append(container.get_text().strip() + "\n")
    return "".join(parts).strip()


def fetch_genius_lyrics(
    query: str,
    *,
    timeout: int = HTTP_TIMEOUT,
    max_retries: int = MAX_RETRIES,
) -> LyricsSource:
    """
    Find a song on Genius and scrape its raw lyrics.

    Args:
        query: Free-form search text (title, artist, year in any mix)

    Returns:
        LyricsSource with the raw lyrics and the song page URL

    Raises:
        LyricsNotFoundError: If no song matches or no lyrics could be read
    """
    logger.info(f"Searching Genius for: {query}")
    song_url = search_song_url(query, timeout=timeout, max_retries=max_retries)
    if not song_url:
        raise LyricsNotFoundError(f"Song not found on Genius: {query}")
    logger.info(f"Found song URL: {song_url}")

    html = fetch_html(song_url, headers=PAGE_HEADERS, timeout=timeout, max_retries=max_retries)
    if not html:
        raise LyricsNotFoundError(f"Could not load lyrics page: {song_url}")

    lyrics = extract_lyrics(html)
    if not lyrics:
        raise LyricsNotFoundError(f"Could not extract lyrics from page: {song_url}")

    logger.info(f"Extracted lyrics length: {len(lyrics)}")
    return LyricsSource(lyrics=lyrics, url=song_url)
