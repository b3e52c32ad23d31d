#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/zettelsx/build.py
"""Constructors and accessors for zettel nodes.

Every node kind has a fixed positional layout. The ``make_*`` functions build
a node in that layout; the ``get_*`` functions take it apart again and return
the fields typed.

Layouts
-------
- ``(BLOCK block...)``, ``(INLINE inline...)``, ``(PARA inline...)``
- ``(HEADING level attrs slug fragment inline...)``
- ``(REGION-* attrs (block...) inline...)``
- ``(ORDERED|UNORDERED|QUOTATION attrs item...)``
- ``(DESCRIPTION attrs term values term values ...)``
- ``(TABLE attrs header row...)``
- ``(CELL attrs inline...)``
- ``(TRANSCLUDE attrs reference inline...)``, ``(LINK attrs reference inline...)``
- ``(EMBED attrs reference syntax inline...)``
- ``(BLOB attrs (inline...) syntax content)``
- ``(EMBED-BLOB attrs syntax content inline...)``
- ``(CITE attrs key inline...)``, ``(ENDNOTE attrs inline...)``
- ``(MARK mark slug fragment inline...)``
- ``(FORMAT-* attrs inline...)``
- ``(VERBATIM-* attrs text)``, ``(LITERAL-* attrs text)``
- ``(THEMATIC attrs)``, ``(TEXT text)``, ``(SOFT)``, ``(HARD)``
- references: ``(state value)``

Accessors never raise. If a node does not have the expected shape they
return an empty result: ``0`` for integers, ``None`` for lists and symbols,
``""`` for strings.

Examples
--------
    >>> heading = make_heading(2, None, make_list(make_text("Intro")), "intro", "intro")
    >>> get_heading(heading)[0]
    2

"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from zettelsx.blob import decode_binary, encode_binary
from zettelsx.symbols import (
    FORMAT_KINDS,
    LIST_KINDS,
    LITERAL_KINDS,
    REGION_KINDS,
    SYM_BLOB,
    SYM_BLOCK,
    SYM_CELL,
    SYM_CITE,
    SYM_DESCRIPTION,
    SYM_EMBED,
    SYM_EMBED_BLOB,
    SYM_ENDNOTE,
    SYM_HARD,
    SYM_HEADING,
    SYM_INLINE,
    SYM_LINK,
    SYM_MARK,
    SYM_PARA,
    SYM_SOFT,
    SYM_TABLE,
    SYM_TEXT,
    SYM_THEMATIC,
    SYM_TRANSCLUDE,
    VERBATIM_KINDS,
)
from zettelsx.sx import ListBuilder, Pair, Symbol, cons, get_number, get_string, make_list, tail

# ============================================================================
# Helpers
# ============================================================================


def _has_kind(node: Any, sym: Symbol) -> bool:
    return isinstance(node, Pair) and node.car is sym


def _family_kind(node: Any, family: frozenset[Symbol]) -> Optional[Symbol]:
    if isinstance(node, Pair) and isinstance(node.car, Symbol) and node.car in family:
        return node.car
    return None


def _list_field(obj: Any) -> Optional[Pair]:
    """Return ``obj`` if it may stand in a list slot (a pair or nil)."""
    return obj if isinstance(obj, Pair) else None


def _prepend(lst: Optional[Pair], *objs: Any) -> Pair:
    """Return ``lst`` with ``objs`` in front, in the given order."""
    result: Any = lst
    for obj in reversed(objs):
        result = cons(obj, result)
    return result


def _values(*objs: Any) -> Pair:
    lb = ListBuilder()
    lb.add_n(*objs)
    return lb.list()  # type: ignore[return-value]


# ============================================================================
# Meta nodes and paragraphs
# ============================================================================


def make_block(*blocks: Any) -> Pair:
    """Build a block node from the given block nodes."""
    return _values(SYM_BLOCK, *blocks)


def make_block_list(blocks: Optional[Pair]) -> Pair:
    """Build a block node from a list of block nodes."""
    return cons(SYM_BLOCK, blocks)


def get_block(node: Any) -> Optional[Pair]:
    """Return the list of block nodes of a block node."""
    return tail(node) if _has_kind(node, SYM_BLOCK) else None


def make_inline(*inlines: Any) -> Pair:
    """Build an inline node from the given inline nodes."""
    return _values(SYM_INLINE, *inlines)


def make_inline_list(inlines: Optional[Pair]) -> Pair:
    """Build an inline node from a list of inline nodes."""
    return cons(SYM_INLINE, inlines)


def get_inline(node: Any) -> Optional[Pair]:
    return tail(node) if _has_kind(node, SYM_INLINE) else None


def make_para(*inlines: Any) -> Pair:
    return _values(SYM_PARA, *inlines)


def make_para_list(inlines: Optional[Pair]) -> Pair:
    """Build a paragraph node from a list of inline nodes."""
    return cons(SYM_PARA, inlines)


def get_para(node: Any) -> Optional[Pair]:
    return tail(node) if _has_kind(node, SYM_PARA) else None


# ============================================================================
# Block nodes
# ============================================================================


def make_region(sym: Symbol, attrs: Optional[Pair], blocks: Optional[Pair], inlines: Optional[Pair]) -> Pair:
    """Build a region node.

    Parameters
    ----------
    sym : Symbol
        One of REGION-BLOCK, REGION-QUOTE, REGION-VERSE
    attrs : Pair or None
        Attribute association list
    blocks : Pair or None
        List of block nodes forming the region content
    inlines : Pair or None
        Inline nodes of the region citation

    Returns
    -------
    Pair
        The region node

    """
    return _prepend(inlines, sym, attrs, blocks)


def get_region(node: Any) -> tuple[Optional[Symbol], Optional[Pair], Optional[Pair], Optional[Pair]]:
    """Return ``(sym, attrs, blocks, inlines)`` of a region node."""
    sym = _family_kind(node, REGION_KINDS)
    if sym is not None:
        attrs_node = tail(node)
        blocks_node = tail(attrs_node)
        if blocks_node is not None:
            return sym, _list_field(attrs_node.car), _list_field(blocks_node.car), blocks_node.tail()
    return None, None, None, None


def make_heading(level: int, attrs: Optional[Pair], text: Optional[Pair], slug: str, fragment: str) -> Pair:
    """Build a heading node.

    Parameters
    ----------
    level : int
        Heading level
    attrs : Pair or None
        Attribute association list
    text : Pair or None
        Inline nodes of the heading text
    slug : str
        Slug derived from the heading text
    fragment : str
        Unique fragment identifier within the zettel

    Returns
    -------
    Pair
        The heading node

    """
    return _prepend(text, SYM_HEADING, level, attrs, slug, fragment)


def get_heading(node: Any) -> tuple[int, Optional[Pair], Optional[Pair], str, str]:
    """Return ``(level, attrs, text, slug, fragment)`` of a heading node."""
    if _has_kind(node, SYM_HEADING):
        level_node = tail(node)
        level, is_int = get_number(level_node.car if level_node else None)
        if is_int:
            attrs_node = tail(level_node)
            slug_node = tail(attrs_node)
            if attrs_node is not None and slug_node is not None:
                slug, is_slug = get_string(slug_node.car)
                fragment_node = slug_node.tail()
                if is_slug and fragment_node is not None:
                    fragment, is_fragment = get_string(fragment_node.car)
                    if is_fragment:
                        return level, _list_field(attrs_node.car), fragment_node.tail(), slug, fragment
    return 0, None, None, "", ""


def make_thematic(attrs: Optional[Pair]) -> Pair:
    """Build a node for a thematic break."""
    return make_list(SYM_THEMATIC, attrs)  # type: ignore[return-value]


def get_thematic(node: Any) -> Optional[Pair]:
    """Return the attributes of a thematic break node."""
    if _has_kind(node, SYM_THEMATIC):
        attrs_node = tail(node)
        if attrs_node is not None:
            return _list_field(attrs_node.car)
    return None


def make_list_node(sym: Symbol, attrs: Optional[Pair], items: Optional[Pair]) -> Pair:
    """Build an ORDERED, UNORDERED or QUOTATION list node."""
    return _prepend(items, sym, attrs)


def get_list_node(node: Any) -> tuple[Optional[Symbol], Optional[Pair], Optional[Pair]]:
    """Return ``(sym, attrs, items)`` of a list node."""
    sym = _family_kind(node, LIST_KINDS)
    if sym is not None:
        attrs_node = tail(node)
        if attrs_node is not None:
            return sym, _list_field(attrs_node.car), attrs_node.tail()
    return None, None, None


def make_description(attrs: Optional[Pair], *entries: tuple[Optional[Pair], Any]) -> Pair:
    """Build a description list node.

    Parameters
    ----------
    attrs : Pair or None
        Attribute association list
    *entries : tuple of (Pair or None, Any)
        ``(term, values)`` pairs; each term is a list of inline nodes, each
        values entry is a single node (usually a BLOCK node)

    Returns
    -------
    Pair
        The description node with terms and values alternating

    """
    lb = ListBuilder()
    lb.add_n(SYM_DESCRIPTION, attrs)
    for term, values in entries:
        lb.add_n(term, values)
    return lb.list()  # type: ignore[return-value]


def get_description(node: Any) -> tuple[Optional[Pair], list[tuple[Optional[Pair], Any]]]:
    """Return ``(attrs, entries)`` of a description node.

    A trailing term without values yields an entry whose values are None.
    """
    if _has_kind(node, SYM_DESCRIPTION):
        attrs_node = tail(node)
        if attrs_node is not None:
            entries: list[tuple[Optional[Pair], Any]] = []
            n = attrs_node.tail()
            while n is not None:
                term = _list_field(n.car)
                n = n.tail()
                if n is None:
                    entries.append((term, None))
                    break
                entries.append((term, n.car))
                n = n.tail()
            return _list_field(attrs_node.car), entries
    return None, []


def make_table(attrs: Optional[Pair], header: Optional[Pair], *rows: Optional[Pair]) -> Pair:
    """Build a table node.

    The header and each row are lists of CELL nodes.
    """
    return _values(SYM_TABLE, attrs, header, *rows)


def get_table(node: Any) -> tuple[Optional[Pair], Optional[Pair], Optional[Pair]]:
    """Return ``(attrs, header, rows)`` of a table node; rows is a list of row lists."""
    if _has_kind(node, SYM_TABLE):
        attrs_node = tail(node)
        header_node = tail(attrs_node)
        if attrs_node is not None and header_node is not None:
            return _list_field(attrs_node.car), _list_field(header_node.car), header_node.tail()
    return None, None, None


def make_cell(attrs: Optional[Pair], inlines: Optional[Pair]) -> Pair:
    """Build a table cell node."""
    return _prepend(inlines, SYM_CELL, attrs)


def get_cell(node: Any) -> tuple[Optional[Pair], Optional[Pair]]:
    if _has_kind(node, SYM_CELL):
        attrs_node = tail(node)
        if attrs_node is not None:
            return _list_field(attrs_node.car), attrs_node.tail()
    return None, None


def make_transclusion(attrs: Optional[Pair], ref: Any, text: Optional[Pair] = None) -> Pair:
    """Build a transclusion node.

    Without ``text`` the node only holds attributes and reference.
    """
    if text is None:
        return _values(SYM_TRANSCLUDE, attrs, ref)
    return _prepend(text, SYM_TRANSCLUDE, attrs, ref)


def get_transclusion(node: Any) -> tuple[Optional[Pair], Any, Optional[Pair]]:
    """Return ``(attrs, reference, text)`` of a transclusion node."""
    if _has_kind(node, SYM_TRANSCLUDE):
        attrs_node = tail(node)
        ref_node = tail(attrs_node)
        if attrs_node is not None and ref_node is not None:
            return _list_field(attrs_node.car), ref_node.car, ref_node.tail()
    return None, None, None


def make_blob_string(attrs: Optional[Pair], syntax: str, content: str, description: Optional[Pair]) -> Pair:
    """Build a block BLOB node from already encoded content."""
    return _values(SYM_BLOB, attrs, description, syntax, content)


def make_blob(attrs: Optional[Pair], syntax: str, data: bytes, description: Optional[Pair]) -> Pair:
    """Build a block BLOB node, encoding the binary payload.

    Parameters
    ----------
    attrs : Pair or None
        Attribute association list
    syntax : str
        Syntax of the payload (e.g. "png", "svg")
    data : bytes
        Binary payload
    description : Pair or None
        Inline nodes describing the BLOB

    Returns
    -------
    Pair
        The BLOB node

    """
    return make_blob_string(attrs, syntax, encode_binary(syntax, data), description)


def get_blob_string(node: Any) -> tuple[Optional[Pair], str, str, Optional[Pair]]:
    """Return ``(attrs, syntax, content, description)``, content still encoded."""
    if _has_kind(node, SYM_BLOB):
        attrs_node = tail(node)
        description_node = tail(attrs_node)
        syntax_node = tail(description_node)
        content_node = tail(syntax_node)
        if attrs_node is not None and description_node is not None and content_node is not None:
            syntax, is_syntax = get_string(syntax_node.car)  # type: ignore[union-attr]
            content, is_content = get_string(content_node.car)
            if is_syntax and is_content:
                return _list_field(attrs_node.car), syntax, content, _list_field(description_node.car)
    return None, "", "", None


def get_blob(node: Any) -> tuple[Optional[Pair], str, bytes, Optional[Pair]]:
    """Return ``(attrs, syntax, data, description)`` with the payload decoded."""
    attrs, syntax, content, description = get_blob_string(node)
    return attrs, syntax, decode_binary(syntax, content), description


def make_verbatim(sym: Symbol, attrs: Optional[Pair], content: str) -> Pair:
    """Build a node for verbatim text."""
    return _values(sym, attrs, content)


def get_verbatim(node: Any) -> tuple[Optional[Symbol], Optional[Pair], str]:
    """Return ``(sym, attrs, content)`` of a verbatim node."""
    return _get_symbol_attrs_text(node, VERBATIM_KINDS)


# ============================================================================
# Inline nodes
# ============================================================================


def make_text(text: str) -> Pair:
    return _values(SYM_TEXT, text)


def get_text(node: Any) -> str:
    """Return the text of a text node."""
    if _has_kind(node, SYM_TEXT):
        text_node = tail(node)
        if text_node is not None:
            text, _ = get_string(text_node.car)
            return text
    return ""


def make_soft() -> Pair:
    """Build a node for a soft line break."""
    return cons(SYM_SOFT)


def make_hard() -> Pair:
    """Build a node for a hard line break."""
    return cons(SYM_HARD)


def make_link(attrs: Optional[Pair], ref: Any, text: Optional[Pair]) -> Pair:
    return _prepend(text, SYM_LINK, attrs, ref)


def get_link(node: Any) -> tuple[Optional[Pair], Any, Optional[Pair]]:
    """Return ``(attrs, reference, text)`` of a link node."""
    if _has_kind(node, SYM_LINK):
        attrs_node = tail(node)
        ref_node = tail(attrs_node)
        if attrs_node is not None and ref_node is not None:
            return _list_field(attrs_node.car), ref_node.car, ref_node.tail()
    return None, None, None


def make_embed(attrs: Optional[Pair], ref: Any, syntax: str, text: Optional[Pair]) -> Pair:
    """Build an embed node.

    ``ref`` is usually a reference node, but any atom is accepted as well.
    """
    return _prepend(text, SYM_EMBED, attrs, ref, syntax)


def get_embed(node: Any) -> tuple[Optional[Pair], Any, str, Optional[Pair]]:
    """Return ``(attrs, reference, syntax, text)`` of an embed node.

    Unlike the other accessors, a node that ends right after the reference
    still yields its attributes and reference. A missing or non-string syntax
    is returned as an empty string.
    """
    if _has_kind(node, SYM_EMBED):
        attrs_node = tail(node)
        ref_node = tail(attrs_node)
        if attrs_node is not None and ref_node is not None:
            syntax_node = ref_node.tail()
            syntax, _ = get_string(syntax_node.car if syntax_node else None)
            return _list_field(attrs_node.car), ref_node.car, syntax, tail(syntax_node)
    return None, None, "", None


def make_embed_blob_string(attrs: Optional[Pair], syntax: str, content: str, inlines: Optional[Pair]) -> Pair:
    """Build an embedded inline BLOB node from already encoded content."""
    return _prepend(inlines, SYM_EMBED_BLOB, attrs, syntax, content)


def make_embed_blob(attrs: Optional[Pair], syntax: str, data: bytes, inlines: Optional[Pair]) -> Pair:
    """Build an embedded inline BLOB node, encoding the binary payload."""
    return make_embed_blob_string(attrs, syntax, encode_binary(syntax, data), inlines)


def get_embed_blob_string(node: Any) -> tuple[Optional[Pair], str, str, Optional[Pair]]:
    """Return ``(attrs, syntax, content, inlines)``, content still encoded."""
    if _has_kind(node, SYM_EMBED_BLOB):
        attrs_node = tail(node)
        syntax_node = tail(attrs_node)
        content_node = tail(syntax_node)
        if attrs_node is not None and syntax_node is not None and content_node is not None:
            syntax, is_syntax = get_string(syntax_node.car)
            content, is_content = get_string(content_node.car)
            if is_syntax and is_content:
                return _list_field(attrs_node.car), syntax, content, content_node.tail()
    return None, "", "", None


def get_embed_blob(node: Any) -> tuple[Optional[Pair], str, bytes, Optional[Pair]]:
    """Return ``(attrs, syntax, data, inlines)`` with the payload decoded."""
    attrs, syntax, content, inlines = get_embed_blob_string(node)
    return attrs, syntax, decode_binary(syntax, content), inlines


def make_cite(attrs: Optional[Pair], key: str, inlines: Optional[Pair]) -> Pair:
    """Build a node that specifies a citation."""
    return _prepend(inlines, SYM_CITE, attrs, key)


def get_cite(node: Any) -> tuple[Optional[Pair], str, Optional[Pair]]:
    """Return ``(attrs, key, inlines)`` of a citation node."""
    if _has_kind(node, SYM_CITE):
        attrs_node = tail(node)
        key_node = tail(attrs_node)
        if attrs_node is not None and key_node is not None:
            key, is_key = get_string(key_node.car)
            if is_key:
                return _list_field(attrs_node.car), key, key_node.tail()
    return None, "", None


def make_endnote(attrs: Optional[Pair], inlines: Optional[Pair]) -> Pair:
    return _prepend(inlines, SYM_ENDNOTE, attrs)


def get_endnote(node: Any) -> tuple[Optional[Pair], Optional[Pair]]:
    if _has_kind(node, SYM_ENDNOTE):
        attrs_node = tail(node)
        if attrs_node is not None:
            return _list_field(attrs_node.car), attrs_node.tail()
    return None, None


def make_mark(mark: str, slug: str, fragment: str, inlines: Optional[Pair]) -> Pair:
    """Build a mark node."""
    return _prepend(inlines, SYM_MARK, mark, slug, fragment)


def get_mark(node: Any) -> tuple[str, str, str, Optional[Pair]]:
    """Return ``(mark, slug, fragment, inlines)`` of a mark node."""
    if _has_kind(node, SYM_MARK):
        mark_node = tail(node)
        slug_node = tail(mark_node)
        fragment_node = tail(slug_node)
        if mark_node is not None and slug_node is not None and fragment_node is not None:
            mark, is_mark = get_string(mark_node.car)
            slug, is_slug = get_string(slug_node.car)
            fragment, is_fragment = get_string(fragment_node.car)
            if is_mark and is_slug and is_fragment:
                return mark, slug, fragment, fragment_node.tail()
    return "", "", "", None


def make_format(sym: Symbol, attrs: Optional[Pair], inlines: Optional[Pair]) -> Pair:
    """Build an inline formatting node."""
    return _prepend(inlines, sym, attrs)


def get_format(node: Any) -> tuple[Optional[Symbol], Optional[Pair], Optional[Pair]]:
    """Return ``(sym, attrs, inlines)`` of a formatting node."""
    sym = _family_kind(node, FORMAT_KINDS)
    if sym is not None:
        attrs_node = tail(node)
        if attrs_node is not None:
            return sym, _list_field(attrs_node.car), attrs_node.tail()
    return None, None, None


def make_literal(sym: Symbol, attrs: Optional[Pair], text: str) -> Pair:
    """Build an inline node with literal text."""
    return _values(sym, attrs, text)


def get_literal(node: Any) -> tuple[Optional[Symbol], Optional[Pair], str]:
    """Return ``(sym, attrs, text)`` of a literal node."""
    return _get_symbol_attrs_text(node, LITERAL_KINDS)


def _get_symbol_attrs_text(node: Any, family: frozenset[Symbol]) -> tuple[Optional[Symbol], Optional[Pair], str]:
    sym = _family_kind(node, family)
    if sym is not None:
        attrs_node = tail(node)
        text_node = tail(attrs_node)
        if attrs_node is not None and text_node is not None:
            text, is_string = get_string(text_node.car)
            if is_string:
                return sym, _list_field(attrs_node.car), text
    return None, None, ""


# ============================================================================
# References
# ============================================================================


def make_reference(sym: Symbol, value: str) -> Pair:
    """Build a reference node, e.g. ``(HOSTED "/foo")``."""
    return _values(sym, value)


def get_reference(ref: Any) -> tuple[Optional[Symbol], str]:
    """Return ``(state, value)`` of a reference node.

    Both ``(state "value")`` and the dotted ``(state . "value")`` are accepted.
    """
    if isinstance(ref, Pair) and isinstance(ref.car, Symbol):
        value, is_string = get_string(ref.cdr)
        if not is_string:
            value_node = ref.tail()
            value, is_string = get_string(value_node.car if value_node else None)
        if is_string:
            return ref.car, value
    return None, ""


def make_node_list(nodes: Iterable[Any]) -> Optional[Pair]:
    """Build a plain list of nodes, e.g. for inline or block list slots."""
    lb = ListBuilder()
    for node in nodes:
        lb.add(node)
    return lb.list()
