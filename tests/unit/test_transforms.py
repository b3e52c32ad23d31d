#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for node tree transformations and extraction."""

from typing import Any, Optional

import pytest

from zettelsx.build import (
    get_heading,
    get_text,
    make_block,
    make_format,
    make_hard,
    make_heading,
    make_literal,
    make_para,
    make_soft,
    make_text,
)
from zettelsx.sx import Pair, make_list, to_string
from zettelsx.symbols import (
    FORMAT_KINDS,
    SYM_CELL,
    SYM_FORMAT_EMPH,
    SYM_FORMAT_STRONG,
    SYM_HEADING,
    SYM_LINK,
    SYM_LITERAL_CODE,
    SYM_TEXT,
    kind_of,
)
from zettelsx.transforms import (
    HeadingLevelTransformer,
    NodeCollector,
    NodeTransformer,
    extract_nodes,
    extract_text,
    filter_nodes,
    transform_nodes,
)
from zettelsx.walk import walk_it


def _heading(level: int, text: str) -> Pair:
    return make_heading(level, None, make_list(make_text(text)), text, text)


@pytest.mark.unit
class TestExtractNodes:
    """Test collecting nodes by kind."""

    def test_extract_headings(self, sample_zettel) -> None:
        """Test extracting headings."""
        headings = extract_nodes(sample_zettel, SYM_HEADING)
        assert len(headings) == 1
        assert get_heading(headings[0])[3] == "title"

    def test_extract_several_kinds(self, sample_zettel) -> None:
        """Test extracting more than one kind in document order."""
        nodes = extract_nodes(sample_zettel, SYM_LINK, *FORMAT_KINDS)
        assert [kind_of(n).name for n in nodes] == ["FORMAT-EMPH", "LINK"]

    def test_extract_all(self) -> None:
        """Test that no kinds means every node."""
        node = make_para(make_text("a"), make_soft())
        assert len(extract_nodes(node)) == 3

    def test_table_cells(self, sample_zettel) -> None:
        """Test that table cells are found."""
        assert len(extract_nodes(sample_zettel, SYM_CELL)) == 4

    def test_collector_predicate(self) -> None:
        """Test a collector with a custom predicate."""
        collector = NodeCollector(lambda n: kind_of(n) is SYM_TEXT and get_text(n).startswith("b"))
        walk_it(collector, make_para(make_text("a"), make_text("b1"), make_text("b2")))
        assert [get_text(n) for n in collector.collected] == ["b1", "b2"]


@pytest.mark.unit
class TestFilterNodes:
    """Test removing nodes."""

    def test_remove_kind(self) -> None:
        """Test removing formatting nodes with their content."""
        node = make_para(make_text("a"), make_format(SYM_FORMAT_STRONG, None, make_list(make_text("b"))))
        result = filter_nodes(node, lambda n: kind_of(n) is not SYM_FORMAT_STRONG)
        assert result == make_para(make_text("a"))
        assert len(list(node)) == 3

    def test_root_preserved(self) -> None:
        """Test that the root survives even if the predicate rejects it."""
        node = make_para(make_text("a"))
        assert filter_nodes(node, lambda n: False) == make_para()

    def test_keep_everything(self, sample_zettel) -> None:
        """Test that keeping every node returns the tree itself."""
        assert filter_nodes(sample_zettel, lambda n: True) is sample_zettel


@pytest.mark.unit
class TestTransformNodes:
    """Test applying transformations."""

    def test_function_transform(self) -> None:
        """Test transforming with a plain function."""
        node = make_para(make_text("a"), make_soft(), make_text("b"))

        def upper(n: Pair) -> Any:
            if kind_of(n) is SYM_TEXT:
                return make_text(get_text(n).upper())
            return n

        assert transform_nodes(node, upper) == make_para(make_text("A"), make_soft(), make_text("B"))
        assert to_string(node) == '(PARA (TEXT "a") (SOFT) (TEXT "b"))'

    def test_transformer_dispatch(self) -> None:
        """Test that visit methods are chosen by kind."""

        class EmphToStrong(NodeTransformer):
            def visit_format_emph(self, node: Pair, env: Optional[Pair]) -> Pair:
                return make_format(SYM_FORMAT_STRONG, None, node.cdr.cdr)

            def visit_literal_code(self, node: Pair, env: Optional[Pair]) -> None:
                return None

        node = make_para(
            make_format(SYM_FORMAT_EMPH, None, make_list(make_text("x"))),
            make_literal(SYM_LITERAL_CODE, None, "code"),
        )
        result = transform_nodes(node, EmphToStrong())
        assert result == make_para(make_format(SYM_FORMAT_STRONG, None, make_list(make_text("x"))))

    def test_unchanged_tree_is_shared(self, sample_zettel) -> None:
        """Test that a transformer without effect returns the original tree."""
        assert NodeTransformer().transform(sample_zettel) is sample_zettel


@pytest.mark.unit
class TestHeadingLevelTransformer:
    """Test shifting heading levels."""

    def test_offset(self) -> None:
        """Test increasing levels."""
        node = make_block(_heading(1, "a"), _heading(2, "b"))
        result = transform_nodes(node, HeadingLevelTransformer(offset=1))
        assert [get_heading(h)[0] for h in extract_nodes(result, SYM_HEADING)] == [2, 3]
        assert [get_heading(h)[0] for h in extract_nodes(node, SYM_HEADING)] == [1, 2]

    def test_clamping(self) -> None:
        """Test that levels stay within bounds."""
        node = make_block(_heading(1, "a"), _heading(6, "b"))
        up = transform_nodes(node, HeadingLevelTransformer(offset=3))
        down = transform_nodes(node, HeadingLevelTransformer(offset=-3))
        assert [get_heading(h)[0] for h in extract_nodes(up, SYM_HEADING)] == [4, 6]
        assert [get_heading(h)[0] for h in extract_nodes(down, SYM_HEADING)] == [1, 3]

    def test_fields_preserved(self) -> None:
        """Test that other heading fields are kept."""
        result = HeadingLevelTransformer(offset=1).transform(_heading(1, "t"))
        assert to_string(result) == '(HEADING 2 () "t" "t" (TEXT "t"))'


@pytest.mark.unit
class TestExtractText:
    """Test plain text extraction."""

    def test_breaks_become_spaces(self) -> None:
        """Test that line breaks become single spaces."""
        node = make_para(make_text("Hello"), make_soft(), make_text("world"), make_hard(), make_text("!"))
        assert extract_text(node) == "Hello world !"

    def test_nested_text(self, sample_zettel) -> None:
        """Test text from nested nodes."""
        para = sample_zettel.cdr.cdr.car
        assert extract_text(para) == "Hello worldlink"

    def test_joiner(self) -> None:
        """Test joining parts with a separator."""
        node = make_para(make_text("a"), make_text("b"))
        assert extract_text(node, "|") == "a|b"

    def test_nil(self) -> None:
        """Test that nil has no text."""
        assert extract_text(None) == ""
