#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for reading the written form of s-expressions."""

import sys

import pytest
from hypothesis import given
from hypothesis import strategies as st

from zettelsx.build import make_heading, make_para, make_soft, make_text
from zettelsx.exceptions import SxReadError
from zettelsx.options import ReaderOptions
from zettelsx.reader import read, read_all
from zettelsx.sx import cons, make_list, make_symbol, to_string


@pytest.mark.unit
class TestRead:
    """Test reading single values."""

    def test_atoms(self) -> None:
        """Test reading atoms."""
        assert read("42") == 42
        assert read("-7") == -7
        assert read('"hi"') == "hi"
        assert read("TEXT") is make_symbol("TEXT")
        assert read("()") is None

    def test_node(self) -> None:
        """Test reading a node tree."""
        node = read('(PARA (TEXT "Hello") (SOFT) (TEXT "world"))')
        assert node == make_para(make_text("Hello"), make_soft(), make_text("world"))

    def test_dotted_pair(self) -> None:
        """Test reading a dotted pair."""
        assert read('("class" . "note")') == cons("class", "note")

    def test_string_escapes(self) -> None:
        """Test reading escape sequences."""
        assert read(r'"a\"b\\c\nd\te"') == 'a"b\\c\nd\te'

    def test_comments_and_whitespace(self) -> None:
        """Test that comments are skipped."""
        assert read("; leading comment\n  (A ; inline\n B)\n") == make_list(make_symbol("A"), make_symbol("B"))

    def test_symbol_with_dot(self) -> None:
        """Test that a dot inside a token is part of a symbol."""
        assert read("(a .b)") == make_list(make_symbol("a"), make_symbol(".b"))

    def test_heading_round_trip(self) -> None:
        """Test that the written form of a heading reads back."""
        heading = make_heading(2, make_list(cons("-", "x")), make_list(make_text("T")), "t", "t")
        assert read(to_string(heading)) == heading


@pytest.mark.unit
class TestReadErrors:
    """Test malformed input."""

    @pytest.mark.parametrize(
        "text",
        ["", "(", ")", '"abc', "(a . )", "(. a)", "(a . b c)", "1 2", r'"\q"'],
    )
    def test_malformed(self, text: str) -> None:
        """Test that malformed input raises SxReadError."""
        with pytest.raises(SxReadError):
            read(text)

    def test_error_position(self) -> None:
        """Test that errors report their position."""
        with pytest.raises(SxReadError) as exc_info:
            read("(a b")
        assert exc_info.value.position == 0
        assert "position 0" in str(exc_info.value)

    @pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"), reason="No integer string conversion limit")
    @pytest.mark.parametrize("text,position", [("1" * 5000, 0), ("(A -" + "9" * 5000 + ")", 3)])
    def test_oversized_integer(self, text: str, position: int) -> None:
        """Test that integers beyond the conversion limit raise SxReadError."""
        with pytest.raises(SxReadError, match="Integer too large") as exc_info:
            read(text)
        assert isinstance(exc_info.value.original_error, ValueError)
        assert exc_info.value.position == position

    def test_nesting_limit(self) -> None:
        """Test that lists nested beyond the limit raise SxReadError."""
        options = ReaderOptions(max_depth=3)
        assert read("(((A)))", options) == make_list(make_list(make_list(make_symbol("A"))))
        with pytest.raises(SxReadError, match="nested deeper than 3") as exc_info:
            read("((((A))))", options)
        assert exc_info.value.position == 3

    def test_deep_nesting_default(self) -> None:
        """Test that very deep input fails cleanly with default options."""
        with pytest.raises(SxReadError, match="nested deeper"):
            read("(" * 100000 + ")" * 100000)
        with pytest.raises(SxReadError, match="nested deeper"):
            read_all("(" * 100000)


@pytest.mark.unit
class TestReadAll:
    """Test reading sequences of values."""

    def test_read_all(self) -> None:
        """Test reading several values."""
        assert read_all('1 "two" (THREE)') == [1, "two", make_list(make_symbol("THREE"))]

    def test_read_all_empty(self) -> None:
        """Test reading nothing."""
        assert read_all("  ; only a comment") == []


@pytest.mark.unit
@pytest.mark.fuzzing
class TestReaderFuzzing:
    """Property-based tests for the reader."""

    @given(st.text())
    def test_strings_read_back(self, value: str) -> None:
        """Property: every string written reads back unchanged."""
        assert read(to_string(make_list(make_symbol("TEXT"), value))) == make_list(make_symbol("TEXT"), value)

    @given(st.integers())
    def test_integers_read_back(self, value: int) -> None:
        """Property: every integer written reads back unchanged."""
        assert read(to_string(value)) == value
