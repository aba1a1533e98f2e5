"""captionkit - resilient WebVTT parsing and caption format conversion."""

from captionkit.core.segment import (
    CaptionSegment,
    ParseDiagnostic,
    ParseResult,
    ParseStrategy,
)
from captionkit.engine import (
    analyze,
    parse,
    parse_with_word_count,
    to_plain_text,
    to_srt,
)

__version__ = "0.1.0"

__all__ = [
    "CaptionSegment",
    "ParseDiagnostic",
    "ParseResult",
    "ParseStrategy",
    "__version__",
    "analyze",
    "parse",
    "parse_with_word_count",
    "to_plain_text",
    "to_srt",
]
