# FILE: tests/test_pattern_splinter.py
"""Tests for content pattern and filename filter compilation."""

import re

import pytest

from line_snipe.errors import InvalidFilterError, InvalidPatternError, SnipeError
from line_snipe.pattern_splinter import (
    accepts_name,
    compile_content_pattern,
    compile_filename_filter,
    glob_to_regex,
)


# =============================================================================
# Content pattern
# =============================================================================

class TestContentPattern:
    """Tests for compile_content_pattern."""

    def test_case_sensitive_by_default(self):
        """Without ignore_case the pattern is used verbatim."""
        pattern = compile_content_pattern("quick")

        assert pattern.pattern == "quick"
        assert pattern.search("the quick fox")
        assert pattern.search("the QUICK fox") is None

    def test_ignore_case_prepends_inline_flag(self):
        """Case folding is an inline (?i) in front of the user pattern."""
        pattern = compile_content_pattern("quick", ignore_case=True)

        assert pattern.pattern == "(?i)quick"
        assert pattern.search("the QUICK fox")
        assert pattern.flags & re.IGNORECASE

    def test_user_inline_flags_survive_case_folding(self):
        """A pattern starting with its own inline flags still compiles and keeps them."""
        pattern = compile_content_pattern("(?s)a.b", ignore_case=True)

        assert pattern.pattern == "(?i)(?s)a.b"
        assert pattern.search("A\nB")

    def test_invalid_pattern_raises(self):
        """Syntax errors surface as InvalidPatternError."""
        with pytest.raises(InvalidPatternError) as exc_info:
            compile_content_pattern("(unclosed")

        assert exc_info.value.pattern == "(unclosed"
        assert isinstance(exc_info.value, ValueError)
        assert isinstance(exc_info.value, SnipeError)


# =============================================================================
# Filename filters
# =============================================================================

class TestGlobToRegex:
    """Tests for the glob translation."""

    def test_star_and_dot(self):
        assert glob_to_regex("*.go") == "^.*\\.go$"

    def test_question_mark(self):
        assert glob_to_regex("test_?.py") == "^test_.\\.py$"


class TestFilenameFilter:
    """Tests for compile_filename_filter."""

    def test_empty_glob_is_no_filter(self):
        """Empty string means no filter at all."""
        assert compile_filename_filter("") is None

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("a.go", True),
            (".go", True),
            ("main_test.go", True),
            ("a.go.bak", False),
            ("ago", False),
            ("a.log", False),
        ],
    )
    def test_star_glob(self, name, expected):
        """'*.go' matches the whole name, dot is literal."""
        matches = compile_filename_filter("*.go")
        assert matches(name) is expected

    @pytest.mark.parametrize(
        "name, expected",
        [("ab.txt", True), ("a.txt", False), ("abc.txt", False)],
    )
    def test_question_mark_is_one_char(self, name, expected):
        matches = compile_filename_filter("a?.txt")
        assert matches(name) is expected

    def test_filter_is_pure(self):
        """Same answer every time, no state carried between calls."""
        matches = compile_filename_filter("*.py")
        assert [matches("x.py") for _ in range(3)] == [True, True, True]

    def test_malformed_glob_raises(self):
        """An unclosed bracket is rejected up front."""
        with pytest.raises(InvalidFilterError) as exc_info:
            compile_filename_filter("[ab.txt")

        assert exc_info.value.glob == "[ab.txt"


class TestAcceptsName:
    """Tests for the include/exclude decision."""

    def test_no_filters_accepts_everything(self):
        assert accepts_name("anything.bin", None, None)

    def test_include_only(self):
        include = compile_filename_filter("*.go")
        assert accepts_name("a.go", include, None)
        assert not accepts_name("b.log", include, None)

    def test_exclude_only(self):
        exclude = compile_filename_filter("*.log")
        assert accepts_name("a.go", None, exclude)
        assert not accepts_name("b.log", None, exclude)

    @pytest.mark.parametrize(
        "name",
        ["a.go", "a.log", "ab.go", "b.go", "readme", "a"],
    )
    def test_exclude_dominates_include(self, name):
        """Whenever exclude matches, the name is rejected whatever include says."""
        include = compile_filename_filter("*")
        exclude = compile_filename_filter("a*")

        if exclude(name):
            assert not accepts_name(name, include, exclude)
        else:
            assert accepts_name(name, include, exclude)
