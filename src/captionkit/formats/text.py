"""Plain-text extraction and word counting for WebVTT documents."""

import re

from captionkit.core.segment import HEADER, TIMING_ARROW, ensure_header

_HEADER_PATTERN = re.compile(r"^WEBVTT\s*")
_BLOCK_SEPARATOR_PATTERN = re.compile(r"\n\s*\n")
_CUE_NUMBER_PATTERN = re.compile(r"^\d+$")


def vtt_to_plain_text(content: str) -> str:
    """Extract caption text lines from a WebVTT document.

    Timing lines and bare cue numbers are dropped; every other non-blank
    line is kept in document order. No deduplication or reflow.

    Args:
        content: WebVTT string, header optional

    Returns:
        Caption text lines joined with newlines
    """
    if not content or not isinstance(content, str):
        return ""

    body = content.replace("\r\n", "\n")
    body = _HEADER_PATTERN.sub("", body).strip()

    text_lines: list[str] = []
    for block in _BLOCK_SEPARATOR_PATTERN.split(body):
        for raw_line in block.split("\n"):
            line = raw_line.strip()
            if not line or TIMING_ARROW in line or _CUE_NUMBER_PATTERN.match(line):
                continue
            text_lines.append(line)
    return "\n".join(text_lines)


def count_words(content: str) -> int:
    """Estimate the word count of a document.

    Counts whitespace-delimited tokens, excluding timing arrows and the
    ``WEBVTT`` header token. Cue numbers and stray punctuation are counted.
    """
    if not content or not isinstance(content, str):
        return 0
    return sum(
        1
        for token in ensure_header(content).split()
        if TIMING_ARROW not in token and token != HEADER
    )
