"""zettelsx - Zettel document trees as s-expressions.

zettelsx encodes the parsed form of a zettel (a note in a Zettelkasten) as a
tree of s-expression lists. Every node is a list whose first element is a
symbol naming its kind, followed by the fields of that kind in a fixed order.

The library provides the node taxonomy, constructors and accessors for every
node kind, attribute bags, BLOB payload encoding, and a visitor-driven walker
with pure, destructive and side-effect-only flavours.

Key Features
------------
- Interned symbols and mutable cons cells (:mod:`zettelsx.sx`)
- ``make_*`` / ``get_*`` functions for all node kinds (:mod:`zettelsx.build`)
- Attribute bags with multi-valued keys (:mod:`zettelsx.attrs`)
- Tree walking with list splicing (:mod:`zettelsx.walk`)
- Reading the written s-expression form back (:mod:`zettelsx.reader`)
- Extraction and transformation helpers (:mod:`zettelsx.transforms`)

Requirements
------------
- Python 3.10+

Examples
--------
Build a paragraph and print its written form:

    >>> from zettelsx import make_para, make_text, make_soft, to_string
    >>> to_string(make_para(make_text("Hello"), make_soft(), make_text("world")))
    '(PARA (TEXT "Hello") (SOFT) (TEXT "world"))'

Extract the text of a node tree:

    >>> from zettelsx import extract_text
    >>> extract_text(make_para(make_text("Hello"), make_soft(), make_text("world")))
    'Hello world'

See Also
--------
zettelsx.walk : Visitor-driven traversal
zettelsx.build : Node constructors and accessors

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "zettelsx requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from zettelsx.attrs import Attributes, get_attributes
from zettelsx.blob import decode_binary, encode_binary
from zettelsx.build import (
    get_blob,
    get_blob_string,
    get_block,
    get_cell,
    get_cite,
    get_description,
    get_embed,
    get_embed_blob,
    get_embed_blob_string,
    get_endnote,
    get_format,
    get_heading,
    get_inline,
    get_link,
    get_list_node,
    get_literal,
    get_mark,
    get_para,
    get_reference,
    get_region,
    get_table,
    get_text,
    get_thematic,
    get_transclusion,
    get_verbatim,
    make_blob,
    make_blob_string,
    make_block,
    make_block_list,
    make_cell,
    make_cite,
    make_description,
    make_embed,
    make_embed_blob,
    make_embed_blob_string,
    make_endnote,
    make_format,
    make_hard,
    make_heading,
    make_inline,
    make_inline_list,
    make_link,
    make_list_node,
    make_literal,
    make_mark,
    make_node_list,
    make_para,
    make_para_list,
    make_reference,
    make_region,
    make_soft,
    make_table,
    make_text,
    make_thematic,
    make_transclusion,
    make_verbatim,
)
from zettelsx.exceptions import SxReadError, ZettelSxError
from zettelsx.options import ReaderOptions
from zettelsx.reader import read, read_all
from zettelsx.sx import ListBuilder, Pair, Symbol, cons, make_list, make_symbol, to_string
from zettelsx.symbols import kind_of
from zettelsx.transforms import (
    HeadingLevelTransformer,
    NodeCollector,
    NodeTransformer,
    extract_nodes,
    extract_text,
    filter_nodes,
    transform_nodes,
)
from zettelsx.walk import (
    Visitor,
    VisitorIt,
    get_walk_list,
    get_walk_pos,
    walk,
    walk_bang,
    walk_it,
    walk_it_list,
)

__all__ = [
    "__version__",
    # s-expressions
    "Pair",
    "Symbol",
    "ListBuilder",
    "cons",
    "make_list",
    "make_symbol",
    "to_string",
    "read",
    "read_all",
    "ReaderOptions",
    "kind_of",
    # attributes and blobs
    "Attributes",
    "get_attributes",
    "encode_binary",
    "decode_binary",
    # constructors
    "make_block",
    "make_block_list",
    "make_inline",
    "make_inline_list",
    "make_para",
    "make_para_list",
    "make_region",
    "make_heading",
    "make_thematic",
    "make_list_node",
    "make_description",
    "make_table",
    "make_cell",
    "make_transclusion",
    "make_blob",
    "make_blob_string",
    "make_verbatim",
    "make_text",
    "make_soft",
    "make_hard",
    "make_link",
    "make_embed",
    "make_embed_blob",
    "make_embed_blob_string",
    "make_cite",
    "make_endnote",
    "make_mark",
    "make_format",
    "make_literal",
    "make_reference",
    "make_node_list",
    # accessors
    "get_block",
    "get_inline",
    "get_para",
    "get_region",
    "get_heading",
    "get_thematic",
    "get_list_node",
    "get_description",
    "get_table",
    "get_cell",
    "get_transclusion",
    "get_blob",
    "get_blob_string",
    "get_verbatim",
    "get_text",
    "get_link",
    "get_embed",
    "get_embed_blob",
    "get_embed_blob_string",
    "get_cite",
    "get_endnote",
    "get_mark",
    "get_format",
    "get_literal",
    "get_reference",
    # walking
    "Visitor",
    "VisitorIt",
    "walk",
    "walk_bang",
    "walk_it",
    "walk_it_list",
    "get_walk_pos",
    "get_walk_list",
    # transforms
    "NodeTransformer",
    "NodeCollector",
    "HeadingLevelTransformer",
    "extract_nodes",
    "filter_nodes",
    "transform_nodes",
    "extract_text",
    # exceptions
    "ZettelSxError",
    "SxReadError",
]
