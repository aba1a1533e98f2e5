"""Transcription export to downloadable caption files."""

import json
import re
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum

from captionkit.core.segment import CaptionSegment
from captionkit.engine import parse, to_plain_text, to_srt


class ExportFormat(StrEnum):
    """Formats a transcription can be exported to."""

    VTT = "vtt"
    SRT = "srt"
    TEXT = "text"
    JSON = "json"


class EmptyTranscriptionError(ValueError):
    """Raised when exporting a transcription without content."""


_EXTENSIONS = {
    ExportFormat.VTT: "vtt",
    ExportFormat.SRT: "srt",
    ExportFormat.TEXT: "txt",
    ExportFormat.JSON: "json",
}

_MEDIA_TYPES = {
    ExportFormat.VTT: "text/vtt",
    ExportFormat.SRT: "text/plain",
    ExportFormat.TEXT: "text/plain",
    ExportFormat.JSON: "application/json",
}

_MODEL_DISPLAY_NAMES = {
    "openai": "OpenAI Whisper",
    "gemini-2.0-flash": "Gemini 2.0 Flash",
    "phi4": "Microsoft Phi-4",
}

_NON_WORD_PATTERN = re.compile(r"[^\w]")


@dataclass(frozen=True)
class ExportedFile:
    """Export payload ready to be written or streamed to a client."""

    filename: str
    content: str
    media_type: str


def model_display_name(model: str) -> str:
    """Return the human-readable name of a transcription model."""
    return _MODEL_DISPLAY_NAMES.get(model, model)


def segments_to_json(segments: Iterable[CaptionSegment]) -> str:
    """Serialize segments as a JSON array of exchange-shape objects."""
    return json.dumps(
        [segment.to_dict() for segment in segments], indent=2, ensure_ascii=False
    )


def convert_document(vtt_content: str, fmt: ExportFormat) -> str:
    """Convert a WebVTT document to the requested format.

    VTT is returned unchanged; JSON is the parsed segment array.
    """
    if fmt is ExportFormat.SRT:
        return to_srt(vtt_content)
    if fmt is ExportFormat.TEXT:
        return to_plain_text(vtt_content)
    if fmt is ExportFormat.JSON:
        return segments_to_json(parse(vtt_content))
    return vtt_content or ""


def export_filename(model: str, fmt: ExportFormat, created: datetime) -> str:
    """Build ``transcription_<model>_<YYYY-MM-DD>.<ext>``."""
    slug = _NON_WORD_PATTERN.sub("_", model).lower()
    return f"transcription_{slug}_{created.date().isoformat()}.{_EXTENSIONS[fmt]}"


def export_transcription(
    vtt_content: str,
    fmt: ExportFormat,
    *,
    model: str,
    created: datetime | None = None,
) -> ExportedFile:
    """Export a transcription in the requested format.

    Args:
        vtt_content: WebVTT transcription text
        fmt: Target export format
        model: Identifier of the model that produced the transcription
        created: Export timestamp; defaults to now (UTC)

    Returns:
        ExportedFile with filename, content and media type

    Raises:
        EmptyTranscriptionError: If there is no transcription content
    """
    if not vtt_content or not vtt_content.strip():
        raise EmptyTranscriptionError("No transcription selected to export")

    created = created or datetime.now(UTC)

    if fmt is ExportFormat.JSON:
        content = json.dumps(
            {
                "model": model,
                "modelName": model_display_name(model),
                "created": created.isoformat(),
                "transcription": to_plain_text(vtt_content),
                "vtt": vtt_content,
            },
            indent=2,
            ensure_ascii=False,
        )
    else:
        content = convert_document(vtt_content, fmt)

    return ExportedFile(
        filename=export_filename(model, fmt, created),
        content=content,
        media_type=_MEDIA_TYPES[fmt],
    )
