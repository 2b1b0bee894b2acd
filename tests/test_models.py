# FILE: tests/test_models.py
"""Tests for SearchConfig construction and the record types."""

import dataclasses
from pathlib import Path

import pytest

from line_snipe.errors import InvalidFilterError, InvalidOptionError, InvalidPatternError
from line_snipe.models import (
    DEFAULT_CONTEXT_CHARS,
    DEFAULT_MAX_CHARS,
    READ_SIZE,
    MatchRecord,
    SearchConfig,
)


class TestSearchConfig:
    """Tests for SearchConfig.build."""

    def test_defaults(self):
        config = SearchConfig.build("x")

        assert config.recursive is True
        assert config.text_only is True
        assert config.max_chars == DEFAULT_MAX_CHARS == 200
        assert config.context_chars == DEFAULT_CONTEXT_CHARS == 20
        assert config.read_size == READ_SIZE
        assert config.include is None
        assert config.exclude is None

    def test_compiles_pattern_and_filters(self):
        config = SearchConfig.build("Err", ignore_case=True, include="*.go", exclude="*_test.go")

        assert config.pattern.search("ERROR")
        assert config.include("main.go")
        assert config.exclude("main_test.go")

    def test_term_keeps_raw_pattern(self):
        config = SearchConfig.build("Err", ignore_case=True)

        assert config.term == "Err"
        assert config.pattern.pattern != "Err"

    def test_frozen(self):
        config = SearchConfig.build("x")

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.max_chars = 10

    def test_bad_pattern(self):
        with pytest.raises(InvalidPatternError):
            SearchConfig.build("[")

    def test_bad_filter(self):
        with pytest.raises(InvalidFilterError):
            SearchConfig.build("x", exclude="[")

    @pytest.mark.parametrize(
        "kwargs",
        [{"max_chars": -1}, {"context_chars": -5}, {"read_size": 0}],
    )
    def test_bad_numbers(self, kwargs):
        with pytest.raises(InvalidOptionError):
            SearchConfig.build("x", **kwargs)


class TestMatchRecord:
    """Tests for MatchRecord."""

    def test_to_dict(self):
        record = MatchRecord(path=Path("a/b.txt"), line_number=3, excerpt="…hit…")

        assert record.to_dict() == {"path": "a/b.txt", "line_number": 3, "excerpt": "…hit…"}

    def test_immutable(self):
        record = MatchRecord(path=Path("a"), line_number=1, excerpt="x")

        with pytest.raises(dataclasses.FrozenInstanceError):
            record.line_number = 2
