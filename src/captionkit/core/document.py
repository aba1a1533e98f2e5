"""Transcription results resolved into caption documents.

A transcription result reaches the engine in one of three shapes: WebVTT
text, raw prose from a model that ignored the caption format, or a job
result object carrying a ``vttContent`` field. ``resolve_document`` decides
the shape once so callers never re-check string contents themselves.
"""

import json
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from captionkit.core.recovery import DEFAULT_STEP_SECONDS
from captionkit.core.segment import (
    HEADER,
    TIMING_ARROW,
    seconds_to_timestamp,
)

_SENTENCE_PATTERN = re.compile(r"[^.!?]+[.!?]+")


@dataclass(frozen=True)
class VttDocument:
    """Text already in (near-)WebVTT form."""

    text: str

    def to_vtt(self) -> str:
        return self.text


@dataclass(frozen=True)
class RawProse:
    """Plain transcript text without cue timings."""

    text: str
    step_seconds: int = DEFAULT_STEP_SECONDS

    def to_vtt(self) -> str:
        return prose_to_vtt(self.text, step_seconds=self.step_seconds)


@dataclass(frozen=True)
class StructuredResult:
    """Job result object exposing the caption text under ``vttContent``."""

    payload: Mapping[str, Any] = field(default_factory=dict)

    def to_vtt(self) -> str:
        value = self.payload.get("vttContent")
        return value if isinstance(value, str) else ""


CaptionSource = VttDocument | RawProse | StructuredResult


def split_sentences(text: str) -> list[str]:
    """Split prose into sentences ending in ``.``, ``!`` or ``?``.

    Trailing text without terminal punctuation becomes its own sentence.
    """
    sentences = []
    consumed = 0
    for match in _SENTENCE_PATTERN.finditer(text):
        sentences.append(match.group().strip())
        consumed = match.end()
    remainder = text[consumed:].strip()
    if remainder:
        sentences.append(remainder)
    return [sentence for sentence in sentences if sentence]


def prose_to_vtt(text: str, *, step_seconds: int = DEFAULT_STEP_SECONDS) -> str:
    """Wrap prose into synthetic WebVTT, one cue per sentence.

    Args:
        text: Plain transcript text
        step_seconds: Duration given to each sentence cue

    Returns:
        WebVTT document; only the header when text is blank
    """
    content = f"{HEADER}\n\n"
    for index, sentence in enumerate(split_sentences(text)):
        start = seconds_to_timestamp(index * step_seconds)
        end = seconds_to_timestamp((index + 1) * step_seconds)
        content += f"{start} {TIMING_ARROW} {end}\n{sentence}\n\n"
    return content


def _load_json(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        return None


def resolve_document(
    raw: Any, *, step_seconds: int = DEFAULT_STEP_SECONDS
) -> CaptionSource:
    """Classify a transcription result into a caption source.

    Args:
        raw: VTT text, prose, JSON object text, or a result mapping
        step_seconds: Cue length used when wrapping prose

    Returns:
        The matching caption source variant. Values that carry no caption
        text (None, JSON arrays, other types) resolve to an empty VttDocument.
    """
    if isinstance(raw, Mapping):
        return StructuredResult(payload=raw)
    if not isinstance(raw, str):
        return VttDocument(text="")

    stripped = raw.strip()
    if stripped.startswith(("{", "[")):
        loaded = _load_json(stripped)
        if isinstance(loaded, dict):
            return StructuredResult(payload=loaded)
        if isinstance(loaded, list):
            return VttDocument(text="")

    if not stripped or stripped.startswith(HEADER) or TIMING_ARROW in stripped:
        return VttDocument(text=raw)
    return RawProse(text=raw, step_seconds=step_seconds)
