"""Pytest configuration and shared fixtures for integration tests."""

from collections.abc import Mapping
from typing import Any

import pytest

# ---------------------------------------------------------------------------
# Transcription result fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def whisper_vtt_result() -> str:
    """Return VTT text as produced by a well-behaved speech-to-text model."""
    return (
        "WEBVTT\n\n"
        "00:00:00.000 --> 00:00:03.200\nWelcome to the show.\n\n"
        "00:00:03.200 --> 00:00:07.900\nToday we talk about\ncaption formats.\n\n"
        "00:00:07.900 --> 00:00:10.000\nLet's begin.\n"
    )


@pytest.fixture
def sloppy_model_result() -> str:
    """Return near-VTT text from a model that dropped cue framing."""
    return (
        "WEBVTT\n"
        "Welcome to the show.\n"
        "Today we talk about caption formats.\n"
        "\n"
        "Let's begin.\n"
    )


@pytest.fixture
def prose_model_result() -> str:
    """Return prose from a model that ignored the caption format."""
    return "Welcome to the show. Today we talk about caption formats. Let's begin"


@pytest.fixture
def job_result(whisper_vtt_result: str) -> Mapping[str, Any]:
    """Return a transcription job result object."""
    return {
        "model": "openai",
        "status": "completed",
        "vttContent": whisper_vtt_result,
    }
