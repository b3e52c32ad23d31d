#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/zettelsx/walk.py
"""Visitor-driven traversal of zettel node trees.

A walk calls ``visit_before`` on a node, traverses the node's children
according to its kind, and then calls ``visit_after``. Three flavours exist:

- :func:`walk` never modifies the tree. Nodes whose children changed are
  rebuilt; unchanged subtrees are returned as they are.
- :func:`walk_bang` modifies the tree in place.
- :func:`walk_it` only produces side effects in the visitor.

If ``visit_before`` signals that it is done, neither the children nor
``visit_after`` are visited and the object it returned becomes the result of
that subtree.

Child results that are nil are dropped from their parent list. A child result
of the form ``(SPECIAL-SPLICE a b ...)`` is replaced by ``a b ...`` in the
parent list, nested splices included.

The environment passed to the visitor is an association list. While a child
of a list is visited, the environment holds its position (see
:func:`get_walk_pos`) and the cons cell holding it (see
:func:`get_walk_list`).

Examples
--------
Count text nodes:

    >>> class TextCounter(VisitorIt):
    ...     def __init__(self):
    ...         self.count = 0
    ...     def visit_before(self, node, env):
    ...         if node.car is SYM_TEXT:
    ...             self.count += 1
    ...         return False
    ...     def visit_after(self, node, env):
    ...         pass
    >>> counter = TextCounter()
    >>> walk_it(counter, make_block(make_para(make_text("a"), make_text("b"))))
    >>> counter.count
    2

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from zettelsx.constants import NO_WALK_POS
from zettelsx.symbols import (
    FORMAT_KINDS,
    LIST_KINDS,
    REGION_KINDS,
    SYM_BLOB,
    SYM_BLOCK,
    SYM_CELL,
    SYM_CITE,
    SYM_DESCRIPTION,
    SYM_EMBED,
    SYM_ENDNOTE,
    SYM_HEADING,
    SYM_INLINE,
    SYM_LINK,
    SYM_MARK,
    SYM_PARA,
    SYM_SPECIAL_SPLICE,
    SYM_TABLE,
    SYM_TRANSCLUDE,
    SYM_WALK_LIST,
    SYM_WALK_POS,
    kind_of,
)
from zettelsx.sx import ListBuilder, Pair, Symbol, assoc, cons, get_number, iter_pairs, iter_values


class Visitor(ABC):
    """Visitor for :func:`walk` and :func:`walk_bang`."""

    @abstractmethod
    def visit_before(self, node: Pair, env: Optional[Pair]) -> tuple[Any, bool]:
        """Visit a node before its children are traversed.

        Parameters
        ----------
        node : Pair
            The node to visit
        env : Pair or None
            Environment association list

        Returns
        -------
        tuple of (Any, bool)
            If the flag is True, the object is the result of walking this node
            and neither children nor ``visit_after`` are visited. Otherwise the
            object is ignored.

        """

    @abstractmethod
    def visit_after(self, node: Pair, env: Optional[Pair]) -> Any:
        """Visit a node after its children were traversed.

        Parameters
        ----------
        node : Pair
            The node, possibly rebuilt with walked children
        env : Pair or None
            Environment association list

        Returns
        -------
        Any
            Result of walking this node; nil removes it from its parent list

        """


class VisitorIt(ABC):
    """Visitor for :func:`walk_it`, working only through side effects."""

    @abstractmethod
    def visit_before(self, node: Pair, env: Optional[Pair]) -> bool:
        """Visit a node before its children; return True to skip them and ``visit_after``."""

    @abstractmethod
    def visit_after(self, node: Pair, env: Optional[Pair]) -> None:
        """Visit a node after all its children were visited."""


# ============================================================================
# Entry points
# ============================================================================


def walk(v: Visitor, node: Optional[Pair], env: Optional[Pair] = None) -> Any:
    """Walk a node tree without modifying it.

    Parameters
    ----------
    v : Visitor
        The visitor guiding the walk
    node : Pair or None
        Root of the tree
    env : Pair or None, default = None
        Environment association list handed to the visitor

    Returns
    -------
    Any
        Result of ``visit_after`` for the root (or the object ``visit_before``
        returned when it ended the walk); None for a nil node

    """
    if node is None:
        return None
    result, done = v.visit_before(node, env)
    if done:
        return result
    walk_children = _WALK_CHILDREN.get(kind_of(node))  # type: ignore[arg-type]
    if walk_children is not None:
        node = walk_children(v, node, env)
    return v.visit_after(node, env)


def walk_bang(v: Visitor, node: Optional[Pair], env: Optional[Pair] = None) -> Any:
    """Walk a node tree, letting the visitor results replace children in place."""
    if node is None:
        return None
    result, done = v.visit_before(node, env)
    if done:
        return result
    walk_children = _WALK_CHILDREN_BANG.get(kind_of(node))  # type: ignore[arg-type]
    if walk_children is not None:
        node = walk_children(v, node, env)
    return v.visit_after(node, env)


def walk_it(v: VisitorIt, node: Optional[Pair], env: Optional[Pair] = None) -> None:
    """Walk a node tree for the side effects of the visitor only."""
    if node is None:
        return
    if v.visit_before(node, env):
        return
    walk_children = _WALK_CHILDREN_IT.get(kind_of(node))  # type: ignore[arg-type]
    if walk_children is not None:
        walk_children(v, node, env)
    v.visit_after(node, env)


def walk_it_list(v: VisitorIt, lst: Optional[Pair], skip: int = 0, env: Optional[Pair] = None) -> None:
    """Call :func:`walk_it` for all elements of a list after skipping the first ``skip`` ones."""
    for _ in range(skip):
        lst = lst.tail() if lst is not None else None
    for pos, pair in enumerate(iter_pairs(lst)):
        walk_it(v, _as_node(pair.car), _child_env(env, pos, pair))


def get_walk_pos(env: Optional[Pair]) -> int:
    """Return the position of the current node in its parent list, or -1 if unknown."""
    pair = assoc(env, SYM_WALK_POS)
    if pair is not None:
        pos, is_int = get_number(pair.cdr)
        if is_int:
            return pos
    return NO_WALK_POS


def get_walk_list(env: Optional[Pair]) -> Optional[Pair]:
    """Return the cons cell of the parent list whose car is the current node."""
    pair = assoc(env, SYM_WALK_LIST)
    if pair is not None and isinstance(pair.cdr, Pair):
        return pair.cdr
    return None


def is_splice(obj: Any) -> bool:
    """Return True if ``obj`` is a SPECIAL-SPLICE node."""
    return isinstance(obj, Pair) and obj.car is SYM_SPECIAL_SPLICE


# ============================================================================
# List walking
# ============================================================================


def _as_node(obj: Any) -> Optional[Pair]:
    return obj if isinstance(obj, Pair) else None


def _child_env(env: Optional[Pair], pos: int, pair: Pair) -> Pair:
    # a fresh frame per child, so a frame seen by a visitor never changes later
    return cons(cons(SYM_WALK_LIST, pair), cons(cons(SYM_WALK_POS, pos), env))


def _collect(lb: ListBuilder, obj: Any) -> None:
    if obj is None:
        return
    if is_splice(obj):
        for child in iter_values(obj.cdr):
            _collect(lb, child)
        return
    lb.add(obj)


def _walk_list(v: Visitor, lst: Optional[Pair], env: Optional[Pair]) -> Optional[Pair]:
    """Walk all elements of a list; return the list itself if nothing changed."""
    lb = ListBuilder()
    changed = False
    for pos, pair in enumerate(iter_pairs(lst)):
        elem = pair.car
        obj = walk(v, _as_node(elem), _child_env(env, pos, pair))
        if obj is not elem or is_splice(obj):
            changed = True
        _collect(lb, obj)
    if not changed:
        return lst
    return lb.list()


def _collect_cells(cells: list[Pair], obj: Any, cell: Optional[Pair]) -> None:
    if obj is None:
        return
    if is_splice(obj):
        for child in list(iter_values(obj.cdr)):
            _collect_cells(cells, child, None)
        return
    cells.append(cell if cell is not None else Pair(obj))


def _walk_list_bang(v: Visitor, lst: Optional[Pair], env: Optional[Pair]) -> Optional[Pair]:
    """Walk all elements of a list, storing results in place.

    Returns the first cell of the resulting list, which differs from ``lst``
    if leading elements were removed or spliced.
    """
    cells = list(iter_pairs(lst))
    modified = False
    for pos, pair in enumerate(cells):
        obj = walk_bang(v, _as_node(pair.car), _child_env(env, pos, pair))
        pair.car = obj
        if obj is None or is_splice(obj):
            modified = True
    if not modified:
        return lst

    kept: list[Pair] = []
    for pair in cells:
        _collect_cells(kept, pair.car, pair)
    for current, following in zip(kept, kept[1:]):
        current.cdr = following
    if not kept:
        return None
    kept[-1].cdr = None
    return kept[0]


def _nth_cell(node: Pair, n: int) -> Optional[Pair]:
    cell: Optional[Pair] = node
    for _ in range(n):
        if cell is None:
            return None
        cell = cell.tail()
    return cell


def _rebuild(node: Pair, n: int, rest: Optional[Pair]) -> Pair:
    """Copy the first ``n`` elements of ``node`` in front of ``rest``."""
    lb = ListBuilder()
    for _, obj in zip(range(n), iter_values(node)):
        lb.add(obj)
    lb.extend_bang(rest)
    return lb.list()  # type: ignore[return-value]


# ============================================================================
# Per-kind child walkers
# ============================================================================

WalkChildrenFn = Callable[[Visitor, Pair, Optional[Pair]], Pair]
WalkChildrenItFn = Callable[[VisitorIt, Pair, Optional[Pair]], None]


def _walk_tail_after(skip: int) -> tuple[WalkChildrenFn, WalkChildrenFn, WalkChildrenItFn]:
    """Create child walkers for nodes whose children follow ``skip`` fixed fields."""

    def walk_children(v: Visitor, node: Pair, env: Optional[Pair]) -> Pair:
        last_field = _nth_cell(node, skip)
        if last_field is None:
            return node
        children = last_field.tail()
        new_children = _walk_list(v, children, env)
        if new_children is children:
            return node
        return _rebuild(node, skip + 1, new_children)

    def walk_children_bang(v: Visitor, node: Pair, env: Optional[Pair]) -> Pair:
        last_field = _nth_cell(node, skip)
        if last_field is not None:
            last_field.cdr = _walk_list_bang(v, last_field.tail(), env)
        return node

    def walk_children_it(v: VisitorIt, node: Pair, env: Optional[Pair]) -> None:
        walk_it_list(v, node, skip + 1, env)

    return walk_children, walk_children_bang, walk_children_it


def _walk_region(v: Visitor, node: Pair, env: Optional[Pair]) -> Pair:
    blocks_cell = _nth_cell(node, 2)
    if blocks_cell is None:
        return node
    blocks, inlines = _as_node(blocks_cell.car), blocks_cell.tail()
    new_blocks = _walk_list(v, blocks, env)
    new_inlines = _walk_list(v, inlines, env)
    if new_blocks is blocks and new_inlines is inlines:
        return node
    lb = ListBuilder()
    lb.add_n(node.car, node.tail().car, new_blocks)  # type: ignore[union-attr]
    lb.extend_bang(new_inlines)
    return lb.list()  # type: ignore[return-value]


def _walk_region_bang(v: Visitor, node: Pair, env: Optional[Pair]) -> Pair:
    blocks_cell = _nth_cell(node, 2)
    if blocks_cell is not None:
        blocks_cell.car = _walk_list_bang(v, _as_node(blocks_cell.car), env)
        blocks_cell.cdr = _walk_list_bang(v, blocks_cell.tail(), env)
    return node


def _walk_region_it(v: VisitorIt, node: Pair, env: Optional[Pair]) -> None:
    blocks_cell = _nth_cell(node, 2)
    if blocks_cell is not None:
        walk_it_list(v, _as_node(blocks_cell.car), 0, env)
        walk_it_list(v, blocks_cell.tail(), 0, env)


def _walk_description(v: Visitor, node: Pair, env: Optional[Pair]) -> Pair:
    attrs_cell = _nth_cell(node, 1)
    if attrs_cell is None:
        return node
    lb = ListBuilder()
    lb.add_n(node.car, attrs_cell.car)
    changed = False
    n = attrs_cell.tail()
    while n is not None:
        term = _as_node(n.car)
        new_term = _walk_list(v, term, env)
        changed = changed or new_term is not n.car
        lb.add(new_term)
        n = n.tail()
        if n is None:
            break
        values = walk(v, _as_node(n.car), env)
        changed = changed or values is not n.car
        lb.add(values)
        n = n.tail()
    if not changed:
        return node
    return lb.list()  # type: ignore[return-value]


def _walk_description_bang(v: Visitor, node: Pair, env: Optional[Pair]) -> Pair:
    n = _nth_cell(node, 2)
    while n is not None:
        n.car = _walk_list_bang(v, _as_node(n.car), env)
        n = n.tail()
        if n is None:
            break
        n.car = walk_bang(v, _as_node(n.car), env)
        n = n.tail()
    return node


def _walk_description_it(v: VisitorIt, node: Pair, env: Optional[Pair]) -> None:
    n = _nth_cell(node, 2)
    while n is not None:
        walk_it_list(v, _as_node(n.car), 0, env)
        n = n.tail()
        if n is None:
            break
        walk_it(v, _as_node(n.car), env)
        n = n.tail()


def _walk_table(v: Visitor, node: Pair, env: Optional[Pair]) -> Pair:
    attrs_cell = _nth_cell(node, 1)
    if attrs_cell is None:
        return node
    lb = ListBuilder()
    lb.add_n(node.car, attrs_cell.car)
    changed = False
    for row in iter_values(attrs_cell.tail()):
        new_row = _walk_list(v, _as_node(row), env)
        changed = changed or new_row is not row
        lb.add(new_row)
    if not changed:
        return node
    return lb.list()  # type: ignore[return-value]


def _walk_table_bang(v: Visitor, node: Pair, env: Optional[Pair]) -> Pair:
    for row in iter_pairs(_nth_cell(node, 2)):
        row.car = _walk_list_bang(v, _as_node(row.car), env)
    return node


def _walk_table_it(v: VisitorIt, node: Pair, env: Optional[Pair]) -> None:
    for row in iter_values(_nth_cell(node, 2)):
        walk_it_list(v, _as_node(row), 0, env)


def _walk_blob(v: Visitor, node: Pair, env: Optional[Pair]) -> Pair:
    description_cell = _nth_cell(node, 2)
    if description_cell is None:
        return node
    description = _as_node(description_cell.car)
    new_description = _walk_list(v, description, env)
    if new_description is description:
        return node
    lb = ListBuilder()
    lb.add_n(node.car, node.tail().car, new_description)  # type: ignore[union-attr]
    lb.extend(description_cell.tail())
    return lb.list()  # type: ignore[return-value]


def _walk_blob_bang(v: Visitor, node: Pair, env: Optional[Pair]) -> Pair:
    description_cell = _nth_cell(node, 2)
    if description_cell is not None:
        description_cell.car = _walk_list_bang(v, _as_node(description_cell.car), env)
    return node


def _walk_blob_it(v: VisitorIt, node: Pair, env: Optional[Pair]) -> None:
    description_cell = _nth_cell(node, 2)
    if description_cell is not None:
        walk_it_list(v, _as_node(description_cell.car), 0, env)


def _build_dispatch() -> tuple[
    dict[Symbol, WalkChildrenFn], dict[Symbol, WalkChildrenFn], dict[Symbol, WalkChildrenItFn]
]:
    # number of fixed fields between the kind symbol and the child list
    tail_kinds: dict[Symbol, int] = {
        SYM_BLOCK: 0,
        SYM_INLINE: 0,
        SYM_PARA: 0,
        SYM_HEADING: 4,
        SYM_CELL: 1,
        SYM_ENDNOTE: 1,
        SYM_TRANSCLUDE: 2,
        SYM_LINK: 2,
        SYM_CITE: 2,
        SYM_EMBED: 3,
        SYM_MARK: 3,
    }
    tail_kinds.update(dict.fromkeys(LIST_KINDS, 1))
    tail_kinds.update(dict.fromkeys(FORMAT_KINDS, 1))

    pure: dict[Symbol, WalkChildrenFn] = {}
    bang: dict[Symbol, WalkChildrenFn] = {}
    it: dict[Symbol, WalkChildrenItFn] = {}
    walkers: dict[int, tuple[WalkChildrenFn, WalkChildrenFn, WalkChildrenItFn]] = {}
    for sym, skip in tail_kinds.items():
        if skip not in walkers:
            walkers[skip] = _walk_tail_after(skip)
        pure[sym], bang[sym], it[sym] = walkers[skip]

    for sym in REGION_KINDS:
        pure[sym], bang[sym], it[sym] = _walk_region, _walk_region_bang, _walk_region_it
    pure[SYM_DESCRIPTION], bang[SYM_DESCRIPTION], it[SYM_DESCRIPTION] = (
        _walk_description,
        _walk_description_bang,
        _walk_description_it,
    )
    pure[SYM_TABLE], bang[SYM_TABLE], it[SYM_TABLE] = _walk_table, _walk_table_bang, _walk_table_it
    pure[SYM_BLOB], bang[SYM_BLOB], it[SYM_BLOB] = _walk_blob, _walk_blob_bang, _walk_blob_it
    return pure, bang, it


# Leaf kinds (TEXT, SOFT, HARD, THEMATIC, VERBATIM-*, LITERAL-*, EMBED-BLOB) have no entry.
_WALK_CHILDREN, _WALK_CHILDREN_BANG, _WALK_CHILDREN_IT = _build_dispatch()


def has_child_walker(sym: Symbol) -> bool:
    """Return True if nodes of kind ``sym`` have children that a walk traverses."""
    return sym in _WALK_CHILDREN


__all__ = [
    "Visitor",
    "VisitorIt",
    "walk",
    "walk_bang",
    "walk_it",
    "walk_it_list",
    "get_walk_pos",
    "get_walk_list",
    "is_splice",
    "has_child_walker",
]
