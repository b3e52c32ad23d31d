#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/zettelsx/symbols.py
"""Symbols tagging every zettel node kind.

Every node is a list whose first element is one of the kind symbols defined
here. The symbols are grouped into families so that accessors and the walker
can check membership without listing kinds repeatedly.
"""

from __future__ import annotations

from typing import Any

from zettelsx.sx import Pair, Symbol, make_symbol, to_string

# =============================================================================
# Meta nodes
# =============================================================================

SYM_BLOCK = make_symbol("BLOCK")
SYM_INLINE = make_symbol("INLINE")

# =============================================================================
# Zettel node kinds
# =============================================================================

SYM_BLOB = make_symbol("BLOB")
SYM_CELL = make_symbol("CELL")
SYM_CITE = make_symbol("CITE")
SYM_DESCRIPTION = make_symbol("DESCRIPTION")
SYM_EMBED = make_symbol("EMBED")
SYM_EMBED_BLOB = make_symbol("EMBED-BLOB")
SYM_ENDNOTE = make_symbol("ENDNOTE")
SYM_FORMAT_EMPH = make_symbol("FORMAT-EMPH")
SYM_FORMAT_DELETE = make_symbol("FORMAT-DELETE")
SYM_FORMAT_INSERT = make_symbol("FORMAT-INSERT")
SYM_FORMAT_MARK = make_symbol("FORMAT-MARK")
SYM_FORMAT_QUOTE = make_symbol("FORMAT-QUOTE")
SYM_FORMAT_SPAN = make_symbol("FORMAT-SPAN")
SYM_FORMAT_SUB = make_symbol("FORMAT-SUB")
SYM_FORMAT_SUPER = make_symbol("FORMAT-SUPER")
SYM_FORMAT_STRONG = make_symbol("FORMAT-STRONG")
SYM_HARD = make_symbol("HARD")
SYM_HEADING = make_symbol("HEADING")
SYM_LINK = make_symbol("LINK")
SYM_LIST_ORDERED = make_symbol("ORDERED")
SYM_LIST_UNORDERED = make_symbol("UNORDERED")
SYM_LIST_QUOTE = make_symbol("QUOTATION")
SYM_LITERAL_CODE = make_symbol("LITERAL-CODE")
SYM_LITERAL_COMMENT = make_symbol("LITERAL-COMMENT")
SYM_LITERAL_INPUT = make_symbol("LITERAL-INPUT")
SYM_LITERAL_MATH = make_symbol("LITERAL-MATH")
SYM_LITERAL_OUTPUT = make_symbol("LITERAL-OUTPUT")
SYM_MARK = make_symbol("MARK")
SYM_PARA = make_symbol("PARA")
SYM_REGION_BLOCK = make_symbol("REGION-BLOCK")
SYM_REGION_QUOTE = make_symbol("REGION-QUOTE")
SYM_REGION_VERSE = make_symbol("REGION-VERSE")
SYM_SOFT = make_symbol("SOFT")
SYM_TABLE = make_symbol("TABLE")
SYM_TEXT = make_symbol("TEXT")
SYM_THEMATIC = make_symbol("THEMATIC")
SYM_TRANSCLUDE = make_symbol("TRANSCLUDE")
SYM_UNKNOWN = make_symbol("UNKNOWN")
SYM_VERBATIM_CODE = make_symbol("VERBATIM-CODE")
SYM_VERBATIM_COMMENT = make_symbol("VERBATIM-COMMENT")
SYM_VERBATIM_EVAL = make_symbol("VERBATIM-EVAL")
SYM_VERBATIM_HTML = make_symbol("VERBATIM-HTML")
SYM_VERBATIM_MATH = make_symbol("VERBATIM-MATH")
SYM_VERBATIM_ZETTEL = make_symbol("VERBATIM-ZETTEL")

# Children of a splice node replace it in the parent list during a walk.
SYM_SPECIAL_SPLICE = make_symbol("SPECIAL-SPLICE")

# =============================================================================
# Reference states
# =============================================================================

SYM_REFSTATE_EXTERNAL = make_symbol("EXTERNAL")  # e.g. https://t73f.de/links/software
SYM_REFSTATE_HOSTED = make_symbol("HOSTED")  # e.g. ./foo ../foo /foo /foo/bar
SYM_REFSTATE_INVALID = make_symbol("INVALID")  # e.g. :t73f.de/r/zsx
SYM_REFSTATE_SELF = make_symbol("SELF")  # e.g. . .#ext #ext

# =============================================================================
# Attributes and attribute values
# =============================================================================

SYM_ATTR_ALIGN = make_symbol("align")
ATTR_ALIGN_CENTER = "center"
ATTR_ALIGN_LEFT = "left"
ATTR_ALIGN_RIGHT = "right"

# =============================================================================
# Walker environment keys
# =============================================================================

SYM_WALK_POS = make_symbol("walk-pos")
SYM_WALK_LIST = make_symbol("walk-list")

# =============================================================================
# Families
# =============================================================================

REGION_KINDS = frozenset({SYM_REGION_BLOCK, SYM_REGION_QUOTE, SYM_REGION_VERSE})
LIST_KINDS = frozenset({SYM_LIST_ORDERED, SYM_LIST_UNORDERED, SYM_LIST_QUOTE})
FORMAT_KINDS = frozenset(
    {
        SYM_FORMAT_EMPH,
        SYM_FORMAT_DELETE,
        SYM_FORMAT_INSERT,
        SYM_FORMAT_MARK,
        SYM_FORMAT_QUOTE,
        SYM_FORMAT_SPAN,
        SYM_FORMAT_SUB,
        SYM_FORMAT_SUPER,
        SYM_FORMAT_STRONG,
    }
)
VERBATIM_KINDS = frozenset(
    {
        SYM_VERBATIM_CODE,
        SYM_VERBATIM_COMMENT,
        SYM_VERBATIM_EVAL,
        SYM_VERBATIM_HTML,
        SYM_VERBATIM_MATH,
        SYM_VERBATIM_ZETTEL,
    }
)
LITERAL_KINDS = frozenset(
    {SYM_LITERAL_CODE, SYM_LITERAL_COMMENT, SYM_LITERAL_INPUT, SYM_LITERAL_MATH, SYM_LITERAL_OUTPUT}
)
REFERENCE_STATES = frozenset({SYM_REFSTATE_EXTERNAL, SYM_REFSTATE_HOSTED, SYM_REFSTATE_INVALID, SYM_REFSTATE_SELF})

BLOCK_KINDS = (
    frozenset(
        {
            SYM_PARA,
            SYM_HEADING,
            SYM_DESCRIPTION,
            SYM_TABLE,
            SYM_CELL,
            SYM_TRANSCLUDE,
            SYM_BLOB,
            SYM_THEMATIC,
        }
    )
    | REGION_KINDS
    | LIST_KINDS
    | VERBATIM_KINDS
)
INLINE_KINDS = (
    frozenset(
        {
            SYM_TEXT,
            SYM_SOFT,
            SYM_HARD,
            SYM_LINK,
            SYM_EMBED,
            SYM_EMBED_BLOB,
            SYM_CITE,
            SYM_ENDNOTE,
            SYM_MARK,
            SYM_TRANSCLUDE,
        }
    )
    | FORMAT_KINDS
    | LITERAL_KINDS
)
META_KINDS = frozenset({SYM_BLOCK, SYM_INLINE})
ALL_KINDS = META_KINDS | BLOCK_KINDS | INLINE_KINDS


def kind_of(node: Any) -> Symbol | None:
    """Return the head symbol of a node, or None if it has none."""
    if isinstance(node, Pair) and isinstance(node.car, Symbol):
        return node.car
    return None


def py_value(obj: Any) -> str:
    """Return the string value of an object suitable for Python processing.

    Strings and symbols yield their text; any other object yields its written
    s-expression form.
    """
    if isinstance(obj, str):
        return obj
    if isinstance(obj, Symbol):
        return obj.name
    return to_string(obj)
