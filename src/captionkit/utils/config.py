"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from captionkit.core.recovery import (
    DEFAULT_STEP_SECONDS,
    RECOVERY_WINDOW_END,
    WHOLE_DOCUMENT_WINDOW_END,
)
from captionkit.core.segment import is_timestamp


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Attributes:
        fallback_step_seconds: Length of each synthetic timing window used by
            segment recovery and prose wrapping
        recovery_window_end: End timestamp of the first recovered segment
        whole_document_window_end: End timestamp of the single segment built
            when recovery finds nothing
        diagnostic_preview_chars: Document characters quoted in diagnostics
        log_level: Minimum log level for structlog output
        json_logs: Render logs as JSON instead of console lines
    """

    fallback_step_seconds: int = Field(default=DEFAULT_STEP_SECONDS, gt=0)
    recovery_window_end: str = RECOVERY_WINDOW_END
    whole_document_window_end: str = WHOLE_DOCUMENT_WINDOW_END
    diagnostic_preview_chars: int = Field(default=200, ge=0)

    log_level: str = "INFO"
    json_logs: bool = False

    model_config = SettingsConfigDict(
        env_prefix="CAPTIONKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("recovery_window_end", "whole_document_window_end")
    @classmethod
    def validate_timestamp(cls, value: str) -> str:
        if not is_timestamp(value):
            raise ValueError(f"Expected HH:MM:SS.mmm timestamp, got {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Returns:
        Settings instance loaded from environment

    Note:
        Settings are cached for performance. Use get_settings.cache_clear()
        to reload settings in tests.
    """
    return Settings()
