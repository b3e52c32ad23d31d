#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for node kind symbols."""

import pytest

from zettelsx.build import make_text
from zettelsx.symbols import (
    ALL_KINDS,
    BLOCK_KINDS,
    FORMAT_KINDS,
    INLINE_KINDS,
    LIST_KINDS,
    SYM_EMBED_BLOB,
    SYM_LIST_QUOTE,
    SYM_TEXT,
    SYM_TRANSCLUDE,
    kind_of,
    py_value,
)
from zettelsx.sx import cons, make_list, make_symbol


@pytest.mark.unit
class TestSymbols:
    """Test kind symbols and families."""

    def test_names(self) -> None:
        """Test the written names of some kinds."""
        assert SYM_EMBED_BLOB.name == "EMBED-BLOB"
        assert SYM_LIST_QUOTE.name == "QUOTATION"
        assert make_symbol("TEXT") is SYM_TEXT

    def test_families(self) -> None:
        """Test family sizes and membership."""
        assert len(FORMAT_KINDS) == 9
        assert len(LIST_KINDS) == 3
        assert SYM_TEXT in INLINE_KINDS
        assert SYM_TEXT not in BLOCK_KINDS
        assert SYM_TRANSCLUDE in BLOCK_KINDS
        assert SYM_TRANSCLUDE in INLINE_KINDS
        assert BLOCK_KINDS | INLINE_KINDS <= ALL_KINDS

    def test_kind_of(self) -> None:
        """Test reading the kind of a node."""
        assert kind_of(make_text("x")) is SYM_TEXT
        assert kind_of(None) is None
        assert kind_of("TEXT") is None
        assert kind_of(make_list("TEXT")) is None

    def test_py_value(self) -> None:
        """Test conversion of atoms to Python strings."""
        assert py_value("x") == "x"
        assert py_value(make_symbol("y")) == "y"
        assert py_value(3) == "3"
        assert py_value(cons("a", "b")) == '("a" . "b")'
