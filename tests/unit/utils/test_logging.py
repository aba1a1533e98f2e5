"""Unit tests for logging setup and the diagnostic sink."""

import pytest
import structlog
from structlog.testing import capture_logs

from captionkit.core.segment import ParseDiagnostic
from captionkit.utils.logging import log_diagnostic, setup_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore the default structlog configuration after each test."""
    yield
    structlog.reset_defaults()


@pytest.mark.unit
class TestLogDiagnostic:
    """Test cases for the default diagnostic sink."""

    def test_fallback_logged_as_warning(self):
        """Should log fallback events at warning level."""
        diagnostic = ParseDiagnostic("no_segments_parsed", "no segments", "Hello")

        with capture_logs() as logs:
            log_diagnostic(diagnostic)

        assert logs == [
            {
                "event": "caption_diagnostic",
                "log_level": "warning",
                "code": "no_segments_parsed",
                "message": "no segments",
                "detail": "Hello",
            }
        ]

    def test_internal_error_logged_as_error(self):
        """Should log internal failures at error level."""
        diagnostic = ParseDiagnostic("internal_error", "boom")

        with capture_logs() as logs:
            log_diagnostic(diagnostic)

        assert logs[0]["log_level"] == "error"
        assert logs[0]["detail"] is None


@pytest.mark.unit
class TestSetupLogging:
    """Test cases for structlog configuration."""

    def test_json_logs(self, capsys):
        """Should render JSON lines when requested."""
        setup_logging("INFO", json_logs=True)

        structlog.get_logger().info("hello", answer=42)

        output = capsys.readouterr().out
        assert '"event": "hello"' in output
        assert '"answer": 42' in output

    def test_level_filters_events(self, capsys):
        """Should drop events below the configured level."""
        setup_logging("WARNING")

        structlog.get_logger().info("quiet")
        structlog.get_logger().warning("loud")

        output = capsys.readouterr().out
        assert "quiet" not in output
        assert "loud" in output
