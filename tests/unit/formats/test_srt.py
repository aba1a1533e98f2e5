"""Unit tests for SRT conversion."""

import pytest

from captionkit.core.segment import CaptionSegment
from captionkit.formats.srt import serialize_srt, vtt_to_srt


@pytest.mark.unit
class TestVttToSrt:
    """Test cases for VTT to SRT conversion."""

    def test_convert_two_cues(self, sample_vtt_content):
        """Test the canonical two-cue conversion."""
        result = vtt_to_srt(sample_vtt_content)

        assert result == (
            "1\n00:00:00,000 --> 00:00:02,500\nHello world\n\n"
            "2\n00:00:02,500 --> 00:00:05,000\nSecond line"
        )

    def test_convert_renumbers_cues(self, numbered_vtt_content):
        """Test that source numbering is discarded and regenerated."""
        content = numbered_vtt_content.replace("\n1\n", "\n7\n").replace(
            "\n2\n", "\n99\n"
        )

        result = vtt_to_srt(content)
        numbers = [block.split("\n")[0] for block in result.split("\n\n")]

        assert numbers == ["1", "2", "3"]

    def test_convert_keeps_multiline_text(self):
        """Test that multi-line cue text keeps its line breaks."""
        content = "WEBVTT\n\n00:00:01.000 --> 00:00:02.000\nLine one\nLine two\n"

        result = vtt_to_srt(content)

        assert result == "1\n00:00:01,000 --> 00:00:02,000\nLine one\nLine two"

    def test_convert_preserves_document_order(self):
        """Test that cues are not sorted by time."""
        content = (
            "WEBVTT\n\n"
            "00:00:09.000 --> 00:00:10.000\nLate\n\n"
            "00:00:01.000 --> 00:00:02.000\nEarly\n"
        )

        result = vtt_to_srt(content)

        assert result.index("Late") < result.index("Early")
        assert result.startswith("1\n00:00:09,000")

    def test_convert_normalizes_arrow_spacing(self):
        """Test that the arrow is always written as ' --> '."""
        content = "WEBVTT\n\n00:00:01.000-->00:00:02.000\nTight\n"

        result = vtt_to_srt(content)

        assert "00:00:01,000 --> 00:00:02,000" in result

    def test_convert_drops_cue_settings(self):
        """Test that positioning settings do not leak into SRT."""
        content = "WEBVTT\n\n00:00:01.000 --> 00:00:02.000 line:0 align:end\nHi\n"

        result = vtt_to_srt(content)

        assert result == "1\n00:00:01,000 --> 00:00:02,000\nHi"

    def test_convert_drops_invalid_blocks(self):
        """Test that blocks without timing or text are skipped silently."""
        content = (
            "WEBVTT\n\n"
            "lonely line\n\n"
            "no timing\nat all\n\n"
            "1\n00:00:01.000 --> 00:00:02.000\n\n"
            "00:00:03.000 --> 00:00:04.000\nKept\n"
        )

        result = vtt_to_srt(content)

        assert result == "1\n00:00:03,000 --> 00:00:04,000\nKept"

    def test_convert_without_header(self):
        """Test conversion of a headerless document."""
        result = vtt_to_srt("00:00:01.000 --> 00:00:02.000\nHi")

        assert result == "1\n00:00:01,000 --> 00:00:02,000\nHi"

    def test_convert_crlf(self):
        """Test conversion of a document with Windows line endings."""
        content = "WEBVTT\r\n\r\n00:00:01.000 --> 00:00:02.000\r\nHi\r\n"

        assert vtt_to_srt(content) == "1\n00:00:01,000 --> 00:00:02,000\nHi"

    @pytest.mark.parametrize("content", ["", None, 12, "WEBVTT", "WEBVTT\n\n"])
    def test_convert_empty(self, content):
        """Test that documents without cues convert to an empty string."""
        assert vtt_to_srt(content) == ""


@pytest.mark.unit
class TestSerializeSRT:
    """Test cases for SRT serialization of segments."""

    def test_serialize_segments(self):
        """Test that each block is terminated by a blank line."""
        segments = [
            CaptionSegment("00:00:01.000", "00:00:04.000", "Hello"),
            CaptionSegment("00:00:05.000", "00:00:08.000", "World"),
        ]

        result = serialize_srt(segments)

        assert result == (
            "1\n00:00:01,000 --> 00:00:04,000\nHello\n\n"
            "2\n00:00:05,000 --> 00:00:08,000\nWorld\n\n"
        )

    def test_serialize_empty(self):
        """Test that no segments serialize to an empty string."""
        assert serialize_srt([]) == ""
