"""API error hierarchy."""


class ApiError(Exception):
    """Base API error with HTTP status code and structured detail."""

    def __init__(
        self,
        *,
        status_code: int,
        code: str,
        message: str,
        detail: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.code = code
        self.message = message
        self.detail = detail
        super().__init__(message)


class EmptyContentError(ApiError):
    """Raised when an export is requested for a transcription with no content."""

    def __init__(self, message: str, *, detail: str | None = None) -> None:
        super().__init__(
            status_code=422,
            code="empty_content",
            message=message,
            detail=detail,
        )
