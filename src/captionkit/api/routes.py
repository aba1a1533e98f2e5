"""API route definitions."""

from __future__ import annotations

import structlog
from fastapi import APIRouter
from fastapi.responses import Response

from captionkit.api.errors import EmptyContentError
from captionkit.api.schemas import (
    ConvertRequest,
    ConvertResponse,
    DiagnosticSchema,
    ErrorDetail,
    ExportRequest,
    ParseRequest,
    ParseResponse,
    SegmentSchema,
)
from captionkit.core.document import resolve_document
from captionkit.engine import analyze
from captionkit.export import (
    EmptyTranscriptionError,
    convert_document,
    export_transcription,
)
from captionkit.utils.config import get_settings

router = APIRouter(prefix="/api")
logger = structlog.get_logger()


@router.post("/captions/parse", response_model=ParseResponse)
async def parse_captions(body: ParseRequest) -> ParseResponse:
    """Parse a transcription result into caption segments."""
    settings = get_settings()
    document = resolve_document(
        body.content, step_seconds=settings.fallback_step_seconds
    )
    result = analyze(document.to_vtt(), settings=settings, source=body.model)
    logger.info(
        "captions_parsed",
        model=body.model,
        document=type(document).__name__,
        strategy=str(result.strategy),
        segments=len(result),
    )
    return ParseResponse(
        segments=[SegmentSchema.from_segment(s) for s in result.segments],
        word_count=result.word_count,
        strategy=result.strategy,
        diagnostics=[DiagnosticSchema.from_diagnostic(d) for d in result.diagnostics],
    )


@router.post("/captions/convert", response_model=ConvertResponse)
async def convert_captions(body: ConvertRequest) -> ConvertResponse:
    """Convert a VTT document to another caption format."""
    return ConvertResponse(
        format=body.format,
        content=convert_document(body.content, body.format),
    )


@router.post("/captions/export", responses={422: {"model": ErrorDetail}})
async def export_captions(body: ExportRequest) -> Response:
    """Export a transcription as a downloadable file."""
    try:
        exported = export_transcription(body.content, body.format, model=body.model)
    except EmptyTranscriptionError as exc:
        raise EmptyContentError(
            "Export failed",
            detail=str(exc),
        ) from exc

    logger.info(
        "transcription_exported",
        format=str(body.format),
        model=body.model,
        filename=exported.filename,
    )
    return Response(
        content=exported.content,
        media_type=exported.media_type,
        headers={
            "Content-Disposition": f'attachment; filename="{exported.filename}"'
        },
    )


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}
