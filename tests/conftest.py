"""Shared fixtures for all tests."""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

CONFIG_VARS = [
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "TRANSCRIPT_PROVIDER",
    "MAX_TRANSCRIPT_LENGTH",
    "TIMEOUT_SECONDS",
    "YOUTUBE_TRANSCRIPT_BASE_URL",
    "CAPTIONS_GRABBER_BASE_URL",
    "LOG_LEVEL",
]


def make_response(text, status_code=200):
    """Mock requests.Response carrying a text body."""
    response = MagicMock()
    response.text = text
    response.status_code = status_code
    response.raise_for_status = MagicMock()
    return response


# ── Configuration ──────────────────────────────────────────────────


@pytest.fixture
def make_config(monkeypatch):
    """Build a Config from a clean environment plus overrides."""

    def _make(**overrides):
        for name in CONFIG_VARS:
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setenv("OPENAI_API_KEY", "test-key-123")
        for name, value in overrides.items():
            monkeypatch.setenv(name, value)

        from videocheck.config import Config
        return Config(load_env_file=False)

    return _make


@pytest.fixture
def config(make_config):
    return make_config()


# ── Sample provider responses ──────────────────────────────────────


@pytest.fixture
def youtube_transcript_xml():
    """Pseudo-XML as served by youtubetranscript.com."""
    return (
        '<?xml version="1.0" encoding="utf-8" ?><transcript>'
        '<text start="0.5" dur="2.1">Hello &amp; welcome</text>'
        '<text start="2.6" dur="1.8">to the show</text>'
        "</transcript>"
    )


@pytest.fixture
def captions_grabber_html():
    """Captions page as served by captionsgrabber.com."""
    return (
        "<html><head><title>Captions</title></head><body>"
        '<div id="header">Get captions</div>'
        '<div id="text">Hello and\nwelcome to\r\nthe show</div>'
        "</body></html>"
    )
