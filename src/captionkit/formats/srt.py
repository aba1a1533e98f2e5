"""SRT conversion from WebVTT documents and caption segments."""

import re
from collections.abc import Iterable

from captionkit.core.segment import TIMING_ARROW, CaptionSegment

_HEADER_PATTERN = re.compile(r"^WEBVTT\s*")
_BLOCK_SEPARATOR_PATTERN = re.compile(r"\n\s*\n")


def _to_srt_timestamp(timestamp: str) -> str:
    """Swap the VTT millisecond separator for SRT's comma."""
    return timestamp.replace(".", ",", 1)


def _format_block(number: int, start: str, end: str, text: str) -> str:
    start_str = _to_srt_timestamp(start)
    end_str = _to_srt_timestamp(end)
    return f"{number}\n{start_str} {TIMING_ARROW} {end_str}\n{text}"


def vtt_to_srt(content: str) -> str:
    """Convert a WebVTT document to SRT format.

    Works on whole cue blocks separated by blank lines. Source cue numbers
    are ignored; output cues are numbered 1..N in document order.

    Args:
        content: WebVTT string, header optional

    Returns:
        SRT string, blocks separated by a blank line. Empty string when no
        cue could be converted.

    Notes:
        - Blocks with fewer than two non-blank lines are dropped
        - Blocks without a timing line or without text are dropped
        - Cue settings after the end timestamp are dropped
    """
    if not content or not isinstance(content, str):
        return ""

    body = content.replace("\r\n", "\n")
    body = _HEADER_PATTERN.sub("", body).strip()

    blocks = []
    for block in _BLOCK_SEPARATOR_PATTERN.split(body):
        lines = [line.strip() for line in block.split("\n") if line.strip()]
        if len(lines) < 2:
            continue

        timing_index = next(
            (i for i, line in enumerate(lines) if TIMING_ARROW in line), None
        )
        if timing_index is None:
            continue

        text_lines = lines[timing_index + 1 :]
        if not text_lines:
            continue

        parts = lines[timing_index].split(TIMING_ARROW)
        start = parts[0].strip()
        end_fields = parts[1].split()
        end = end_fields[0] if end_fields else ""

        blocks.append(
            _format_block(len(blocks) + 1, start, end, "\n".join(text_lines))
        )

    return "\n\n".join(blocks)


def serialize_srt(segments: Iterable[CaptionSegment]) -> str:
    """Serialize caption segments to SRT format string.

    Args:
        segments: Caption segments in playback order

    Returns:
        SRT string with every block terminated by a blank line
    """
    blocks = [
        _format_block(number, segment.start_time, segment.end_time, segment.text)
        + "\n\n"
        for number, segment in enumerate(segments, start=1)
    ]
    return "".join(blocks)
