"""Tests for manifest line splitting and classification."""

import pytest

from src.m3u8.utils.line_classifier import (
    LineKind,
    classify_line,
    is_skippable,
    split_lines,
)


class TestSplitLines:
    """Tests for splitting manifest content into lines."""

    def test_lf_endings(self) -> None:
        """Bare LF separates lines."""
        assert split_lines("#EXTM3U\na.ts") == ["#EXTM3U", "a.ts"]

    def test_crlf_endings(self) -> None:
        """CR LF separates lines without leaving a trailing CR."""
        assert split_lines("#EXTM3U\r\na.ts") == ["#EXTM3U", "a.ts"]

    def test_mixed_endings(self) -> None:
        """LF and CR LF may be mixed within one document."""
        assert split_lines("a\r\nb\nc\r\nd") == ["a", "b", "c", "d"]

    def test_trailing_newline_gives_blank_line(self) -> None:
        """A trailing newline yields a final empty line."""
        assert split_lines("#EXTM3U\n") == ["#EXTM3U", ""]

    def test_lone_carriage_return_is_not_a_delimiter(self) -> None:
        """A CR not followed by LF stays part of the line."""
        assert split_lines("a\rb") == ["a\rb"]


class TestClassifyLine:
    """Tests for single line classification."""

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("", LineKind.BLANK),
            ("#", LineKind.COMMENT),
            ("# Created by encoder", LineKind.COMMENT),
            ("#EX-not-a-tag", LineKind.COMMENT),
            ("#EXTM3U", LineKind.DIRECTIVE),
            ("#EXTINF:5,", LineKind.DIRECTIVE),
            ("#EXT-X-VERSION:3", LineKind.DIRECTIVE),
            ("segment0.ts", LineKind.CONTENT),
            ("https://example.com/a.ts", LineKind.CONTENT),
            ("   ", LineKind.CONTENT),
        ],
    )
    def test_classification(self, line: str, expected: LineKind) -> None:
        """Each line maps to exactly one kind."""
        assert classify_line(line) == expected

    def test_prefix_is_case_sensitive(self) -> None:
        """Lowercase #ext is a plain comment, not a directive."""
        assert classify_line("#extinf:5,") == LineKind.COMMENT


class TestIsSkippable:
    """Tests for the skippable-line check."""

    def test_blank_and_comment_skippable(self) -> None:
        """Blank and comment lines are skipped."""
        assert is_skippable("")
        assert is_skippable("# comment")

    def test_directive_and_content_not_skippable(self) -> None:
        """Directives and content lines are significant."""
        assert not is_skippable("#EXT-X-ENDLIST")
        assert not is_skippable("a.ts")
