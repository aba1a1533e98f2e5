"""Resilient caption parsing and conversion entry points.

Every public function here is total: for any input it returns a value and
never raises. ``analyze`` exposes how the result was obtained; the other
functions are thin façades for callers that only need the resilient output.
"""

from collections.abc import Callable

import structlog
from pydantic import ValidationError

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
    ensure_header,
)
from captionkit.formats.srt import vtt_to_srt
from captionkit.formats.text import count_words, vtt_to_plain_text
from captionkit.formats.vtt import VTTParseError, parse_vtt_strict
from captionkit.utils.config import Settings, get_settings
from captionkit.utils.logging import log_diagnostic

DiagnosticSink = Callable[[ParseDiagnostic], None]

logger = structlog.get_logger()


def _load_settings() -> Settings:
    """Return application settings, or defaults when the environment is invalid."""
    try:
        return get_settings()
    except ValidationError as e:
        logger.warning("settings_invalid_using_defaults", error=str(e))
        return Settings.model_construct()


def _emit(sink: DiagnosticSink, diagnostic: ParseDiagnostic) -> None:
    try:
        sink(diagnostic)
    except Exception:
        logger.warning("diagnostic_sink_failed", code=diagnostic.code, exc_info=True)


def analyze(
    document: str,
    *,
    sink: DiagnosticSink | None = None,
    settings: Settings | None = None,
    source: str | None = None,
) -> ParseResult:
    """Parse a document through the full fallback ladder.

    Steps: primary VTT parse -> line-based recovery -> single whole-document
    segment. The first rung producing segments wins.

    Args:
        document: Raw caption text
        sink: Callable receiving diagnostics; defaults to structlog output
        settings: Engine settings; defaults to the cached application settings
        source: Label for the producer of the document (e.g. a model name),
            added to diagnostic details

    Returns:
        ParseResult with segments, word count, strategy and diagnostics
    """
    if not document or not isinstance(document, str):
        return ParseResult()

    settings = settings or _load_settings()
    sink = sink or log_diagnostic
    diagnostics: list[ParseDiagnostic] = []
    preview = document[: settings.diagnostic_preview_chars]
    label = source or "unknown source"

    def record(code: str, message: str) -> None:
        diagnostic = ParseDiagnostic(code=code, message=message, detail=preview)
        diagnostics.append(diagnostic)
        _emit(sink, diagnostic)

    word_count = count_words(document)
    normalized = ensure_header(document)

    segments: list[CaptionSegment] = []
    try:
        segments = parse_vtt_strict(normalized)
    except VTTParseError as e:
        record("internal_error", f"Primary VTT parse failed for {label}: {e}")

    if segments:
        return _result(segments, word_count, ParseStrategy.PRIMARY, diagnostics)

    if not has_caption_text(normalized):
        return _result([], word_count, ParseStrategy.EMPTY, diagnostics)

    record(
        "no_segments_parsed",
        f"VTT parsing issue for {label}: content exists but no segments parsed",
    )
    try:
        segments = recover_segments(
            normalized,
            step_seconds=settings.fallback_step_seconds,
            window_end=settings.recovery_window_end,
        )
    except Exception as e:
        record("internal_error", f"Segment recovery failed for {label}: {e}")
        segments = []

    if segments:
        return _result(segments, word_count, ParseStrategy.RECOVERED, diagnostics)

    record(
        "whole_document_fallback",
        f"Fallback parsing failed for {label}: using a single segment",
    )
    segment = whole_document_segment(
        normalized, end_time=settings.whole_document_window_end
    )
    if segment is None:
        return _result([], word_count, ParseStrategy.EMPTY, diagnostics)
    return _result([segment], word_count, ParseStrategy.WHOLE_DOCUMENT, diagnostics)


def _result(
    segments: list[CaptionSegment],
    word_count: int,
    strategy: ParseStrategy,
    diagnostics: list[ParseDiagnostic],
) -> ParseResult:
    return ParseResult(
        segments=tuple(segments),
        word_count=word_count,
        strategy=strategy,
        diagnostics=tuple(diagnostics),
    )


def parse(document: str) -> list[CaptionSegment]:
    """Parse a document into caption segments, falling back as needed."""
    return list(analyze(document).segments)


def parse_with_word_count(document: str) -> ParseResult:
    """Parse a document and estimate its word count."""
    return analyze(document)


def to_srt(document: str) -> str:
    """Convert a WebVTT document to SRT, or an empty string on failure."""
    try:
        return vtt_to_srt(document)
    except Exception:
        logger.warning("srt_conversion_failed", exc_info=True)
        return ""


def to_plain_text(document: str) -> str:
    """Extract caption text from a WebVTT document, or empty on failure."""
    try:
        return vtt_to_plain_text(document)
    except Exception:
        logger.warning("text_conversion_failed", exc_info=True)
        return ""
