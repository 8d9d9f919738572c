"""Test configuration and fixtures.

Provides reusable fixtures for:
- Raw lyrics samples with Genius-style noise
- Fake script normalizers and line romanizers
- Genius search and page responses
"""

import os

import pytest

from zhlyrics.core.models import Language


def pytest_addoption(parser):
    parser.addoption(
        "--run-network",
        action="store_true",
        default=False,
        help="Run tests that require network access",
    )


def pytest_collection_modifyitems(config, items):
    run_network = config.getoption("--run-network") or os.getenv(
        "RUN_INTEGRATION_TESTS"
    ) == "1"
    if run_network:
        return

    skip_network = pytest.mark.skip(
        reason="requires network access (use --run-network or RUN_INTEGRATION_TESTS=1)"
    )
    for item in items:
        if "network" in item.keywords or "integration" in item.keywords:
            item.add_marker(skip_network)


# =============================================================================
# Pipeline collaborators
# =============================================================================


class UpperRomanizer:
    """Romanizer stand-in that records the lines it was given."""

    language = Language.MANDARIN

    def __init__(self):
        self.calls = []

    def romanize_line(self, text):
        self.calls.append(text)
        return " ".join(f"<{ch}>" for ch in text)


class RecordingNormalizer:
    """Normalizer stand-in that maps a few characters and records input."""

    TABLE = {"愛": "爱", "見": "见", "來": "来"}

    def __init__(self):
        self.calls = []

    def normalize(self, text):
        self.calls.append(text)
        return "".join(self.TABLE.get(ch, ch) for ch in text)


@pytest.fixture
def fake_romanizer():
    return UpperRomanizer()


@pytest.fixture
def fake_normalizer():
    return RecordingNormalizer()


# =============================================================================
# Lyrics samples
# =============================================================================


@pytest.fixture
def noisy_lyrics():
    """Raw lyrics as scraped from a Genius page."""
    return (
        "\r\n[Verse 1]\r\n"
        "你问我爱你有多深\r\n"
        "我爱你有几分\r\n"
        "\r\n\r\n\r\n"
        "[Chorus]\n"
        "月亮代表我的心\n"
        "Written by: 翁清溪\n"
    )


@pytest.fixture
def genius_song_html():
    """Minimal Genius song page with two lyrics containers."""
    return """
    <html><head><title>Teresa Teng - 月亮代表我的心 Lyrics | Genius Lyrics</title></head>
    <body>
      <div data-lyrics-container="true">
        <div class="LyricsHeader__Container-sc-1">12 Contributors 月亮代表我的心 Lyrics</div>
        [Verse 1]<br/>
        你問我愛你有多深<br/>
        我愛你有幾分
      </div>
      <div data-lyrics-container="true">
        [Chorus]<br/>
        <a href="/annotation"><span>月亮代表我的心</span></a>
      </div>
    </body></html>
    """


@pytest.fixture
def genius_search_response():
    """Genius multi-search response with a non-song section first."""
    return {
        "response": {
            "sections": [
                {"type": "top_hit", "hits": [{"result": {"url": "https://genius.com/artists/Teresa-teng"}}]},
                {
                    "type": "song",
                    "hits": [
                        {"result": {"url": "https://genius.com/Teresa-teng-the-moon-represents-my-heart-lyrics"}},
                        {"result": {"url": "https://genius.com/other-lyrics"}},
                    ],
                },
            ]
        }
    }
