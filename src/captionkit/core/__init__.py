"""Core caption models and recovery logic."""

from captionkit.core.document import (
    CaptionSource,
    RawProse,
    StructuredResult,
    VttDocument,
    prose_to_vtt,
    resolve_document,
)
from captionkit.core.recovery import (
    has_caption_text,
    recover_segments,
    whole_document_segment,
)
from captionkit.core.segment import (
    CaptionSegment,
    ParseDiagnostic,
    ParseResult,
    ParseStrategy,
    seconds_to_timestamp,
)

__all__ = [
    "CaptionSegment",
    "CaptionSource",
    "ParseDiagnostic",
    "ParseResult",
    "ParseStrategy",
    "RawProse",
    "StructuredResult",
    "VttDocument",
    "has_caption_text",
    "prose_to_vtt",
    "recover_segments",
    "resolve_document",
    "seconds_to_timestamp",
    "whole_document_segment",
]
