"""Pydantic v2 request/response schemas."""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field

from captionkit.api.constants import DEFAULT_EXPORT_MODEL, MAX_CONTENT_CHARS
from captionkit.core.segment import CaptionSegment, ParseDiagnostic, ParseStrategy
from captionkit.export import ExportFormat


class SegmentSchema(BaseModel):
    """Caption segment in the exchange shape used by caption renderers."""

    model_config = ConfigDict(populate_by_name=True)

    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")
    text: str

    @classmethod
    def from_segment(cls, segment: CaptionSegment) -> "SegmentSchema":
        return cls(
            start_time=segment.start_time,
            end_time=segment.end_time,
            text=segment.text,
        )


class DiagnosticSchema(BaseModel):
    """Structured parse diagnostic."""

    code: str
    message: str
    detail: str | None = None

    @classmethod
    def from_diagnostic(cls, diagnostic: ParseDiagnostic) -> "DiagnosticSchema":
        return cls(
            code=diagnostic.code,
            message=diagnostic.message,
            detail=diagnostic.detail,
        )


class ParseRequest(BaseModel):
    """Request body for parsing a transcription result.

    ``content`` may be VTT text, raw prose, or a job result object
    carrying ``vttContent``.
    """

    content: Annotated[str, Field(max_length=MAX_CONTENT_CHARS)] | dict[str, Any]
    model: str | None = None


class ParseResponse(BaseModel):
    """Parsed segments and how they were obtained."""

    segments: list[SegmentSchema]
    word_count: int
    strategy: ParseStrategy
    diagnostics: list[DiagnosticSchema] = []


class ConvertRequest(BaseModel):
    """Request body for converting a VTT document."""

    content: str = Field(max_length=MAX_CONTENT_CHARS)
    format: ExportFormat


class ConvertResponse(BaseModel):
    """Converted document."""

    format: ExportFormat
    content: str


class ExportRequest(BaseModel):
    """Request body for exporting a transcription as a file."""

    content: str = Field(max_length=MAX_CONTENT_CHARS)
    format: ExportFormat = ExportFormat.VTT
    model: str = Field(default=DEFAULT_EXPORT_MODEL, min_length=1)


class ErrorDetail(BaseModel):
    """Structured error information."""

    code: str
    message: str
    detail: str | None = None
