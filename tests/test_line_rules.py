"""
Unit tests for the transcript line classifiers.
"""

import pytest

from ingestion.strategies.parsing import (
    is_attachment_line,
    is_author_line,
    is_system_line,
    is_thread_reply_line,
    is_time_line,
    match_time_line,
)


class TestAuthorLine:
    @pytest.mark.parametrize(
        "line", ["Jessica Booker", "O'Brien Smith", "Mary-Jane Watson", "Al"]
    )
    def test_accepts_names(self, line):
        assert is_author_line(line)

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "   ",
            "  Jessica Booker",
            "Pinned by Jessica Booker",
            "Canvas updated",
            "J",
            "R2D2 Unit",
            "Hello, world",
            "-Dash Start",
        ],
    )
    def test_rejects_non_names(self, line):
        assert not is_author_line(line)


class TestTimeLine:
    def test_extracts_timestamp_text(self):
        assert match_time_line("  11:13 AM") == "11:13 AM"

    def test_meridiem_without_space_and_lowercase(self):
        assert match_time_line("   9:05pm") == "9:05pm"

    def test_requires_two_leading_spaces(self):
        assert not is_time_line(" 11:13 AM")
        assert not is_time_line("11:13 AM")

    def test_requires_meridiem(self):
        assert not is_time_line("  11:13")

    def test_thread_reply_marker(self):
        line = "  6:36 AM  replied to a thread:"
        assert is_time_line(line)
        assert is_thread_reply_line(line)
        assert not is_thread_reply_line("  6:36 AM")


class TestSystemLine:
    @pytest.mark.parametrize(
        "line", ["Pinned by", "pinned by Jessica", "Canvas updated  7:51 AM", "  CANVAS UPDATED"]
    )
    def test_system_lines(self, line):
        assert is_system_line(line)

    def test_plain_text_is_not_system(self):
        assert not is_system_line("The canvas was updated")


class TestAttachmentLine:
    @pytest.mark.parametrize(
        "line",
        [
            "image.png",
            "  report.PDF",
            "data.csv",
            "notes.docx",
            "Screenshot 2024-01-15.png",
            "screenshot.png (1).jpg copy",
        ],
    )
    def test_attachments(self, line):
        assert is_attachment_line(line)

    def test_plain_text(self):
        assert not is_attachment_line("Just a normal message")

    def test_extension_must_end_line(self):
        assert not is_attachment_line("see image.png above")
