"""Caption segment domain models and cue-line primitives."""

import re
from dataclasses import dataclass
from enum import StrEnum

HEADER = "WEBVTT"
TIMING_ARROW = "-->"

_HEADER_PREFIX = f"{HEADER}\n\n"
_TIMESTAMP_PATTERN = re.compile(r"^\d+:\d{2}:\d{2}\.\d{3}$")
_EMBEDDED_TIMESTAMP_PATTERN = re.compile(r"\d{2}:\d{2}:\d{2}(?:\.\d{3})?")
_WHITESPACE_PATTERN = re.compile(r"\s+")
_BOM = "\ufeff"


@dataclass(frozen=True)
class CaptionSegment:
    """Single timed caption unit parsed from a cue."""

    start_time: str
    end_time: str
    text: str

    def to_dict(self) -> dict[str, str]:
        """Return the exchange shape consumed by caption renderers."""
        return {
            "startTime": self.start_time,
            "endTime": self.end_time,
            "text": self.text,
        }


class ParseStrategy(StrEnum):
    """Rung of the fallback ladder that produced a result."""

    PRIMARY = "primary"
    RECOVERED = "recovered"
    WHOLE_DOCUMENT = "whole_document"
    EMPTY = "empty"


@dataclass(frozen=True)
class ParseDiagnostic:
    """Notable event raised while parsing a document."""

    code: str
    message: str
    detail: str | None = None


@dataclass(frozen=True)
class ParseResult:
    """Segments parsed from a document together with its word count."""

    segments: tuple[CaptionSegment, ...] = ()
    word_count: int = 0
    strategy: ParseStrategy = ParseStrategy.EMPTY
    diagnostics: tuple[ParseDiagnostic, ...] = ()

    @property
    def recovered(self) -> bool:
        """True when timings may be synthetic rather than read from cues."""
        return self.strategy in (ParseStrategy.RECOVERED, ParseStrategy.WHOLE_DOCUMENT)

    def __len__(self) -> int:
        """Return number of segments."""
        return len(self.segments)

    def __iter__(self):
        """Iterate over segments."""
        return iter(self.segments)

    def __getitem__(self, index: int) -> CaptionSegment:
        """Get segment by position (0-based)."""
        return self.segments[index]


def is_timestamp(value: str) -> bool:
    """Check whether value is a full HH:MM:SS.mmm timestamp."""
    return bool(_TIMESTAMP_PATTERN.match(value))


def is_header_line(line: str) -> bool:
    """Check whether a stripped line is a WEBVTT header line.

    The header may carry trailing text after a space or tab,
    e.g. ``WEBVTT - Interview``.
    """
    if not line.startswith(HEADER):
        return False
    return len(line) == len(HEADER) or line[len(HEADER)] in " \t"


def is_timing_line(line: str) -> bool:
    """Check whether a line is a cue timing line."""
    return TIMING_ARROW in line


def ensure_header(content: str) -> str:
    """Prepend a WEBVTT header when the document does not start with one.

    A leading byte order mark is dropped first.
    """
    content = content.lstrip(_BOM)
    if content.strip().startswith(HEADER):
        return content
    return _HEADER_PREFIX + content


def clean_text_line(line: str) -> str:
    """Scrub full timestamps that leaked into cue text and collapse spaces."""
    cleaned = _EMBEDDED_TIMESTAMP_PATTERN.sub("", line)
    return _WHITESPACE_PATTERN.sub(" ", cleaned).strip()


def normalize_timestamp(value: str) -> str:
    """Pad a cue timestamp to HH:MM:SS.mmm.

    Adds the hour field to ``MM:SS`` values and ``.000`` when milliseconds
    are missing. Anything else is returned unchanged.
    """
    if not value:
        return value
    if "." not in value:
        value += ".000"
    if value.count(":") == 1:
        value = "00:" + value
    return value


def split_timing_line(line: str) -> tuple[str, str]:
    """Split a timing line into normalized start and end timestamps.

    Cue settings following the end timestamp (``align:start`` etc.)
    are dropped.

    Args:
        line: Line containing ``-->``

    Returns:
        Tuple of (start_time, end_time)
    """
    parts = line.split(TIMING_ARROW)
    start = parts[0].strip()
    end_fields = parts[1].split()
    end = end_fields[0] if end_fields else ""
    return normalize_timestamp(start), normalize_timestamp(end)


def seconds_to_timestamp(seconds: float) -> str:
    """Format seconds as HH:MM:SS.mmm.

    Example:
        >>> seconds_to_timestamp(90.5)
        '00:01:30.500'
    """
    total_ms = max(0, round(seconds * 1000))
    hours, remainder = divmod(total_ms, 3_600_000)
    minutes, remainder = divmod(remainder, 60_000)
    secs, millis = divmod(remainder, 1000)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}.{millis:03d}"
