"""Pytest configuration and shared fixtures."""

from collections.abc import Generator
from pathlib import Path

import pytest

from captionkit.utils.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Generator[None, None, None]:
    """Isolate every test from .env files and cached settings."""
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_vtt_content() -> str:
    """Return a well-formed two-cue VTT document."""
    return (
        "WEBVTT\n\n"
        "00:00:00.000 --> 00:00:02.500\nHello world\n\n"
        "00:00:02.500 --> 00:00:05.000\nSecond line"
    )


@pytest.fixture
def numbered_vtt_content() -> str:
    """Return a VTT document with SRT-style cue numbers and metadata."""
    return """WEBVTT
Kind: captions
Language: en

1
00:00:01.000 --> 00:00:04.000
Hello, this is a test.

2
00:00:05.000 --> 00:00:08.000
This is the second subtitle.

3
00:00:09.000 --> 00:00:12.000
And this is the third one.
"""
