"""Fallback segment recovery for documents the VTT parser cannot read."""

import re
from collections.abc import Iterator

from captionkit.core.segment import (
    HEADER,
    CaptionSegment,
    clean_text_line,
    ensure_header,
    is_header_line,
    is_timing_line,
    seconds_to_timestamp,
    split_timing_line,
)

DEFAULT_STEP_SECONDS = 5
RECOVERY_WINDOW_START = "00:00:00.000"
RECOVERY_WINDOW_END = "00:05:00.000"
WHOLE_DOCUMENT_WINDOW_END = "00:10:00.000"

_WHITESPACE_PATTERN = re.compile(r"\s+")


def _body_lines(content: str) -> Iterator[str]:
    """Yield stripped lines with the header line removed.

    Only the first non-blank line may be a header carrying trailing text
    (``WEBVTT - Interview``). Later lines are dropped only when they are
    exactly ``WEBVTT``.
    """
    at_start = True
    for raw_line in content.lstrip("\ufeff").splitlines():
        line = raw_line.strip()
        if line and at_start:
            at_start = False
            if is_header_line(line):
                continue
        elif line == HEADER:
            continue
        yield line


def has_caption_text(content: str) -> bool:
    """Check whether a document has any non-blank, non-header line."""
    return any(_body_lines(content))


def recover_segments(
    content: str,
    *,
    step_seconds: int = DEFAULT_STEP_SECONDS,
    window_end: str = RECOVERY_WINDOW_END,
) -> list[CaptionSegment]:
    """Recover segments from near-VTT text with broken cue framing.

    Text lines are collected whether or not a timing line opened them, and a
    blank line closes the segment being built. Text is cleaned like cue text
    in the primary parser, so recovered segments re-parse unchanged. Timing
    lines, when present, set the timing of that segment. Segments after the
    first get synthetic timings advancing by ``step_seconds``.

    Args:
        content: Document text, header optional
        step_seconds: Length of each synthetic timing window
        window_end: End timestamp of the first segment when no timing line
            precedes it

    Returns:
        List of recovered segments, possibly empty
    """
    segments: list[CaptionSegment] = []
    start_time, end_time = RECOVERY_WINDOW_START, window_end
    text_parts: list[str] = []
    offset = 0

    for line in _body_lines(ensure_header(content)):
        if is_timing_line(line):
            start_time, end_time = split_timing_line(line)
            continue
        if not line:
            if text_parts:
                segments.append(
                    CaptionSegment(
                        start_time=start_time,
                        end_time=end_time,
                        text=" ".join(text_parts),
                    )
                )
                offset += step_seconds
                start_time = seconds_to_timestamp(offset)
                end_time = seconds_to_timestamp(offset + step_seconds)
                text_parts = []
            continue
        cleaned = clean_text_line(line)
        if cleaned:
            text_parts.append(cleaned)

    if text_parts:
        segments.append(
            CaptionSegment(
                start_time=start_time,
                end_time=end_time,
                text=" ".join(text_parts),
            )
        )
    return segments


def whole_document_segment(
    content: str,
    *,
    end_time: str = WHOLE_DOCUMENT_WINDOW_END,
) -> CaptionSegment | None:
    """Wrap the whole document text, header removed, in a single segment.

    Returns:
        Segment spanning ``00:00:00.000`` to ``end_time``, or None when the
        document has no text
    """
    text = content.replace(HEADER, "", 1)
    text = _WHITESPACE_PATTERN.sub(" ", text).strip()
    if not text:
        return None
    return CaptionSegment(
        start_time=RECOVERY_WINDOW_START,
        end_time=end_time,
        text=text,
    )
