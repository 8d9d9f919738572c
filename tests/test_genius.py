import pytest

from zhlyrics.core import genius
from zhlyrics.exceptions import LyricsNotFoundError


def test_search_song_url_picks_first_song_hit(monkeypatch, genius_search_response):
    seen = {}

    def fake_fetch_json(url, headers=None, timeout=5, max_retries=3):
        seen["url"] = url
        seen["headers"] = headers
        return genius_search_response

    monkeypatch.setattr(genius, "fetch_json", fake_fetch_json)

    url = genius.search_song_url("月亮代表我的心 邓丽君")

    assert url == "https://genius.com/Teresa-teng-the-moon-represents-my-heart-lyrics"
    assert seen["url"].startswith("https://genius.com/api/search/multi?q=")
    assert "%E6%9C%88" in seen["url"]
    assert seen["headers"]["Accept"] == "application/json"


@pytest.mark.parametrize("payload", [
    None,
    {},
    {"response": {"sections": []}},
    {"response": {"sections": [{"type": "song", "hits": []}]}},
    {"response": {"sections": [{"type": "lyric", "hits": [{"result": {"url": "x"}}]}]}},
])
def test_search_song_url_returns_none_without_song_hit(monkeypatch, payload):
    monkeypatch.setattr(genius, "fetch_json", lambda *a, **k: payload)

    assert genius.search_song_url("nothing") is None


def test_extract_lyrics_reads_containers_and_drops_header(genius_song_html):
    lyrics = genius.extract_lyrics(genius_song_html)
    lines = [line.strip() for line in lyrics.split("\n") if line.strip()]

    assert lines == [
        "[Verse 1]",
        "你問我愛你有多深",
        "我愛你有幾分",
        "[Chorus]",
        "月亮代表我的心",
    ]
    assert "Contributors" not in lyrics


def test_extract_lyrics_without_containers_is_empty():
    assert genius.extract_lyrics("<html><body><p>No lyrics</p></body></html>") == ""


def test_fetch_genius_lyrics_returns_source(monkeypatch, genius_search_response, genius_song_html):
    pages = {}

    def fake_fetch_html(url, headers=None, timeout=5, max_retries=3):
        pages["url"] = url
        pages["headers"] = headers
        return genius_song_html

    monkeypatch.setattr(genius, "fetch_json", lambda *a, **k: genius_search_response)
    monkeypatch.setattr(genius, "fetch_html", fake_fetch_html)

    source = genius.fetch_genius_lyrics("月亮代表我的心")

    assert source.url == "https://genius.com/Teresa-teng-the-moon-represents-my-heart-lyrics"
    assert pages["url"] == source.url
    assert pages["headers"]["Accept-Language"].startswith("zh-CN")
    assert "我愛你有幾分" in source.lyrics


def test_fetch_genius_lyrics_raises_when_song_not_found(monkeypatch):
    monkeypatch.setattr(genius, "fetch_json", lambda *a, **k: None)

    with pytest.raises(LyricsNotFoundError, match="Song not found"):
        genius.fetch_genius_lyrics("unknown")


def test_fetch_genius_lyrics_raises_when_page_fails(monkeypatch, genius_search_response):
    monkeypatch.setattr(genius, "fetch_json", lambda *a, **k: genius_search_response)
    monkeypatch.setattr(genius, "fetch_html", lambda *a, **k: None)

    with pytest.raises(LyricsNotFoundError, match="Could not load"):
        genius.fetch_genius_lyrics("song")


def test_fetch_genius_lyrics_raises_when_page_has_no_lyrics(monkeypatch, genius_search_response):
    monkeypatch.setattr(genius, "fetch_json", lambda *a, **k: genius_search_response)
    monkeypatch.setattr(
        genius, "fetch_html", lambda *a, **k: '<div data-lyrics-container="true">  </div>'
    )

    with pytest.raises(LyricsNotFoundError, match="Could not extract"):
        genius.fetch_genius_lyrics("song")


@pytest.mark.network
def test_fetch_genius_lyrics_live():
    source = genius.fetch_genius_lyrics("月亮代表我的心 邓丽君")

    assert "genius.com" in source.url
    assert source.lyrics


def test_extract_lyrics_breaks_lines_at_nested_divs():
    html = """<div data-lyrics-container="true"><div>你问我爱你有多深</div><div>我爱你有几分</div>月亮代表我的心</div>"""

    lyrics = genius.extract_lyrics(html)

    assert lyrics.split("\n") == ["你问我爱你有多深", "我爱你有几分", "月亮代表我的心"]
