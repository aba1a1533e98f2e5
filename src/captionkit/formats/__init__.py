"""Caption format handlers."""

from captionkit.formats.srt import serialize_srt, vtt_to_srt
from captionkit.formats.text import count_words, vtt_to_plain_text
from captionkit.formats.vtt import (
    VTTParseError,
    parse_vtt,
    parse_vtt_strict,
    serialize_vtt,
)

__all__ = [
    "VTTParseError",
    "count_words",
    "parse_vtt",
    "parse_vtt_strict",
    "serialize_srt",
    "serialize_vtt",
    "vtt_to_plain_text",
    "vtt_to_srt",
]
