"""structlog configuration and the default diagnostic sink."""

import logging
import sys

import structlog

from captionkit.core.segment import ParseDiagnostic

logger = structlog.get_logger()

_ERROR_CODES = frozenset({"internal_error"})


def setup_logging(level: str = "INFO", *, json_logs: bool = False) -> None:
    """Configure structlog and the standard library root logger.

    Args:
        level: Minimum log level name
        json_logs: Render JSON lines instead of the console renderer
    """
    log_level = logging.getLevelName(level.upper())
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)

    renderer: structlog.typing.Processor
    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def log_diagnostic(diagnostic: ParseDiagnostic) -> None:
    """Diagnostic sink that forwards parse events to structlog."""
    log = logger.error if diagnostic.code in _ERROR_CODES else logger.warning
    log(
        "caption_diagnostic",
        code=diagnostic.code,
        message=diagnostic.message,
        detail=diagnostic.detail,
    )
