"""WebVTT parser and serializer."""

import re
from collections.abc import Iterable

import structlog

from captionkit.core.segment import (
    HEADER,
    CaptionSegment,
    clean_text_line,
    ensure_header,
    is_header_line,
    is_timing_line,
    split_timing_line,
)

logger = structlog.get_logger()

_HEADER_FILE_PATTERN = re.compile(r"^(\s*)WEBVTT[ \t]*FILE", re.IGNORECASE)
_CUE_ID_PATTERN = re.compile(r"^\d+$")


class VTTParseError(Exception):
    """Exception raised when VTT parsing fails."""


def _is_note_line(line: str) -> bool:
    return line == "NOTE" or line.startswith(("NOTE ", "NOTE\t"))


def _prepare_lines(content: str) -> list[str]:
    """Normalize a document and return its stripped body lines.

    Drops the header block (``WEBVTT`` plus metadata such as ``Kind:`` up to
    the first blank or timing line) and ``NOTE`` comment blocks.
    """
    content = content.lstrip("\ufeff").replace("\r\n", "\n").replace("\r", "\n")
    content = _HEADER_FILE_PATTERN.sub(rf"\g<1>{HEADER}", content, count=1)
    content = ensure_header(content)
    lines = [line.strip() for line in content.split("\n")]

    # Header block
    i = 0
    while i < len(lines) and not lines[i]:
        i += 1
    if i < len(lines) and is_header_line(lines[i]):
        i += 1
        while i < len(lines) and lines[i] and not is_timing_line(lines[i]):
            i += 1

    body: list[str] = []
    in_note = False
    at_block_start = True
    for line in lines[i:]:
        if not line:
            in_note = False
            at_block_start = True
            body.append(line)
            continue
        if at_block_start and _is_note_line(line):
            in_note = True
        at_block_start = False
        if not in_note:
            body.append(line)
    return body


def _parse_lines(lines: list[str]) -> list[CaptionSegment]:
    segments: list[CaptionSegment] = []
    timing: tuple[str, str] | None = None
    text_parts: list[str] = []

    def flush() -> None:
        nonlocal timing, text_parts
        if timing is not None and text_parts:
            segments.append(
                CaptionSegment(
                    start_time=timing[0],
                    end_time=timing[1],
                    text=" ".join(text_parts),
                )
            )
        timing = None
        text_parts = []

    for i, line in enumerate(lines):
        if not line:
            flush()
            continue
        if line == HEADER:
            continue
        if is_timing_line(line):
            flush()
            timing = split_timing_line(line)
            continue
        if timing is None:
            # Outside a cue: identifiers, stray metadata
            continue
        next_line = lines[i + 1] if i + 1 < len(lines) else ""
        if _CUE_ID_PATTERN.match(line) and is_timing_line(next_line):
            # Identifier of the next cue, no blank line before it
            continue
        cleaned = clean_text_line(line)
        if cleaned:
            text_parts.append(cleaned)

    flush()
    return segments


def parse_vtt_strict(content: str) -> list[CaptionSegment]:
    """Parse WebVTT content into caption segments.

    Cues are returned in document order. Multi-line cue text is joined with a
    single space; cues without text are dropped. Timings are not validated.

    Args:
        content: WebVTT document, header optional

    Returns:
        List of caption segments, possibly empty

    Raises:
        VTTParseError: If content is not a string or parsing fails unexpectedly
    """
    if not isinstance(content, str):
        raise VTTParseError(
            f"Content must be a string, got {type(content).__name__}"
        )
    if not content.strip():
        return []

    try:
        return _parse_lines(_prepare_lines(content))
    except Exception as e:
        raise VTTParseError(f"Failed to parse VTT content: {e}") from e


def parse_vtt(content: str) -> list[CaptionSegment]:
    """Parse WebVTT content, returning an empty list instead of raising."""
    if not content or not isinstance(content, str):
        return []
    try:
        segments = parse_vtt_strict(content)
    except VTTParseError as e:
        logger.warning("vtt_parse_failed", error=str(e))
        return []
    logger.debug("vtt_parsed", segments=len(segments))
    return segments


def serialize_vtt(segments: Iterable[CaptionSegment]) -> str:
    """Serialize caption segments to a WebVTT document.

    Args:
        segments: Caption segments in playback order

    Returns:
        WebVTT string starting with the ``WEBVTT`` header
    """
    blocks = [
        f"{segment.start_time} --> {segment.end_time}\n{segment.text}\n\n"
        for segment in segments
    ]
    return f"{HEADER}\n\n" + "".join(blocks)
