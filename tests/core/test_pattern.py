"""Tests for placeholder extraction and pattern building."""

import pytest

from strfparse.core.pattern import (
    build_pattern,
    escape_reserved_chars,
    extract_placeholders,
    extract_values,
)
from strfparse.exceptions import ErrorKind, InputFormatError


@pytest.mark.parametrize(
    "format_string,expected",
    [
        ("%m-%d-%Y", ["%m", "%d", "%Y"]),
        ("%Y-%m-%d %h:%M:%S.%L", ["%Y", "%m", "%d", "%h", "%M", "%S", "%L"]),
        ("%d/%d", ["%d", "%d"]),
        ("%Y-%Q-%d", ["%Y", "%Q", "%d"]),
        ("today", []),
        ("", []),
        ("100%", []),
        ("%%d", ["%d"]),
    ],
    ids=[
        "month_day_year",
        "all_directives",
        "duplicates",
        "unsupported",
        "no_directives",
        "empty",
        "trailing_percent",
        "double_percent",
    ],
)
def test_extract_placeholders(format_string, expected):
    """Test placeholders are returned in order of appearance."""
    assert extract_placeholders(format_string) == expected


class TestEscapeReservedChars:
    """Tests for escape_reserved_chars."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("-", r"\-"),
            (".", r"\."),
            (",", r"\,"),
            ("a b", r"a\ b"),
            ("[x]", r"\[x\]"),
            ("(x)", r"\(x\)"),
            ("{x}", r"\{x\}"),
            ("*+?", r"\*\+\?"),
            ("^$|#", r"\^\$\|\#"),
            ("\\", r"\\"),
        ],
    )
    def test_reserved_chars_are_escaped(self, text, expected):
        """Test each reserved character gets a backslash."""
        assert escape_reserved_chars(text) == expected

    def test_directives_and_plain_separators_untouched(self):
        """Test percent signs, letters, colons and slashes survive escaping."""
        assert escape_reserved_chars("%Y/%m:%d") == "%Y/%m:%d"


class TestBuildPattern:
    """Tests for build_pattern."""

    def test_dash_separated(self):
        """Test a dash separated format."""
        fmt = "%m-%d-%Y"
        pattern = build_pattern(fmt, extract_placeholders(fmt))
        assert pattern.pattern == r"(\d+)\-(\d+)\-(\d+)"

    def test_mixed_separators(self):
        """Test dots, spaces and colons in the format."""
        fmt = "%Y.%m.%d %h:%M"
        pattern = build_pattern(fmt, extract_placeholders(fmt))
        assert pattern.pattern == r"(\d+)\.(\d+)\.(\d+)\ (\d+):(\d+)"

    def test_literal_only_format(self):
        """Test a format without directives becomes a literal pattern."""
        pattern = build_pattern("today", [])
        assert pattern.pattern == "today"
        assert pattern.groups == 0

    def test_duplicate_directives_each_get_a_group(self):
        """Test repeated directives are substituted left to right."""
        fmt = "%d/%d"
        pattern = build_pattern(fmt, extract_placeholders(fmt))
        assert pattern.pattern == r"(\d+)/(\d+)"

    def test_unsupported_directive_still_captures(self):
        """Test unknown directives still consume digits."""
        fmt = "%Y-%Q"
        pattern = build_pattern(fmt, extract_placeholders(fmt))
        assert pattern.groups == 2

    def test_reserved_chars_match_literally(self):
        """Test escaped characters only match themselves."""
        fmt = "(%Y)"
        pattern = build_pattern(fmt, extract_placeholders(fmt))
        assert pattern.search("(2043)") is not None
        assert pattern.search("2043") is None


class TestExtractValues:
    """Tests for extract_values."""

    @pytest.fixture
    def pattern(self):
        """Return the pattern for a dash separated year-month-day format."""
        fmt = "%Y-%m-%d"
        return build_pattern(fmt, extract_placeholders(fmt))

    def test_returns_groups_in_order(self, pattern):
        """Test captured values come back in directive order."""
        assert extract_values("2043-12-01", pattern) == ["2043", "12", "01"]

    def test_match_is_not_anchored(self, pattern):
        """Test the pattern is found anywhere in the input."""
        assert extract_values("due on 2043-12-01!", pattern) == ["2043", "12", "01"]

    def test_no_match_raises(self, pattern):
        """Test non-conforming input raises InputFormatError."""
        with pytest.raises(InputFormatError) as exc_info:
            extract_values("2043/12/01", pattern)
        assert exc_info.value.kind == ErrorKind.PARSE_VALUE

    def test_non_ascii_digits_do_not_match(self, pattern):
        """Test only ASCII digits are captured."""
        with pytest.raises(InputFormatError):
            extract_values("٢٠٤٣-١٢-٠١", pattern)
