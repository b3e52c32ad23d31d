#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/zettelsx/transforms.py
"""Transformation and extraction utilities built on the node walker.

Examples
--------
Extract all headings from a zettel:

    >>> headings = extract_nodes(zettel, SYM_HEADING)
    >>> for heading in headings:
    ...     print(get_heading(heading)[0])

Remove all embedded content:

    >>> filtered = filter_nodes(zettel, lambda n: kind_of(n) is not SYM_EMBED)

Change heading levels:

    >>> new_zettel = transform_nodes(zettel, HeadingLevelTransformer(offset=1))

"""

from __future__ import annotations

from typing import Any, Callable, Optional, Union

from zettelsx.build import get_heading, get_text, make_heading
from zettelsx.constants import NO_WALK_POS
from zettelsx.symbols import SYM_HARD, SYM_SOFT, SYM_TEXT, kind_of
from zettelsx.sx import Pair, Symbol
from zettelsx.walk import Visitor, VisitorIt, get_walk_pos, walk, walk_it


class NodeTransformer(Visitor):
    """Base class for transforming node trees without modifying them.

    After the children of a node were transformed, the method
    ``visit_<kind>`` is called with the node, where ``<kind>`` is the lower
    case kind name with dashes replaced by underscores (``visit_heading``,
    ``visit_format_emph``, ...). It returns the replacement node, or None to
    remove the node from its parent list. Kinds without such a method are
    passed to :meth:`generic_visit`, which keeps the node.

    Examples
    --------
    >>> class UppercaseTransformer(NodeTransformer):
    ...     def visit_text(self, node, env):
    ...         return make_text(get_text(node).upper())
    >>>
    >>> new_zettel = UppercaseTransformer().transform(zettel)

    """

    def transform(self, node: Optional[Pair]) -> Any:
        """Transform a node tree.

        Parameters
        ----------
        node : Pair or None
            Root of the tree

        Returns
        -------
        Any
            Transformed tree; the original tree is left untouched

        """
        return walk(self, node)

    def visit_before(self, node: Pair, env: Optional[Pair]) -> tuple[Any, bool]:
        return None, False

    def visit_after(self, node: Pair, env: Optional[Pair]) -> Any:
        sym = kind_of(node)
        if sym is not None:
            method = getattr(self, _method_name(sym), None)
            if method is not None:
                return method(node, env)
        return self.generic_visit(node, env)

    def generic_visit(self, node: Pair, env: Optional[Pair]) -> Any:
        """Handle a node without a specific visit method."""
        return node


def _method_name(sym: Symbol) -> str:
    return "visit_" + sym.name.lower().replace("-", "_")


class NodeCollector(VisitorIt):
    """Visitor that collects nodes matching a condition.

    Parameters
    ----------
    predicate : callable or None, default = None
        Function that takes a node and returns True to collect it

    """

    def __init__(self, predicate: Callable[[Pair], bool] | None = None):
        """Initialize the collector with an optional predicate function."""
        self.predicate = predicate or (lambda n: True)
        self.collected: list[Pair] = []

    def visit_before(self, node: Pair, env: Optional[Pair]) -> bool:
        if self.predicate(node):
            self.collected.append(node)
        return False

    def visit_after(self, node: Pair, env: Optional[Pair]) -> None:
        pass


def extract_nodes(node: Optional[Pair], *kinds: Symbol) -> list[Pair]:
    """Extract all nodes of the given kinds from a tree, in document order.

    Parameters
    ----------
    node : Pair or None
        Root of the tree
    *kinds : Symbol
        Kinds to extract; without kinds every visited node is returned

    Returns
    -------
    list of Pair
        All matching nodes

    Examples
    --------
    >>> headings = extract_nodes(zettel, SYM_HEADING)
    >>> formats = extract_nodes(zettel, *FORMAT_KINDS)

    """
    wanted = frozenset(kinds)
    predicate = (lambda n: kind_of(n) in wanted) if wanted else None
    collector = NodeCollector(predicate=predicate)
    walk_it(collector, node)
    return collector.collected


class _FilterTransformer(NodeTransformer):
    def __init__(self, predicate: Callable[[Pair], bool]):
        self.predicate = predicate

    def visit_before(self, node: Pair, env: Optional[Pair]) -> tuple[Any, bool]:
        # the root has no position and is always kept
        if get_walk_pos(env) != NO_WALK_POS and not self.predicate(node):
            return None, True
        return None, False


def filter_nodes(node: Optional[Pair], predicate: Callable[[Pair], bool]) -> Any:
    """Remove all nodes for which ``predicate`` returns False.

    Parameters
    ----------
    node : Pair or None
        Root of the tree
    predicate : callable
        Function that takes a node and returns True to keep it

    Returns
    -------
    Pair or None
        New tree without the removed nodes and their subtrees

    Notes
    -----
    The root node is always preserved, regardless of the predicate.

    """
    return _FilterTransformer(predicate).transform(node)


class _FunctionTransformer(NodeTransformer):
    def __init__(self, fn: Callable[[Pair], Any]):
        self.fn = fn

    def generic_visit(self, node: Pair, env: Optional[Pair]) -> Any:
        return self.fn(node)


def transform_nodes(node: Optional[Pair], transformer: Union[NodeTransformer, Callable[[Pair], Any]]) -> Any:
    """Apply a transformation to every node of a tree, bottom up.

    Parameters
    ----------
    node : Pair or None
        Root of the tree
    transformer : NodeTransformer or callable
        Transformer to apply; a plain function receives each node after its
        children were transformed and returns the replacement

    Returns
    -------
    Any
        Transformed tree

    """
    if not isinstance(transformer, NodeTransformer):
        transformer = _FunctionTransformer(transformer)
    return transformer.transform(node)


class HeadingLevelTransformer(NodeTransformer):
    """Transformer that adjusts heading levels by an offset.

    Parameters
    ----------
    offset : int
        Amount to shift heading levels (can be negative)
    min_level : int, default = 1
        Minimum allowed heading level
    max_level : int, default = 6
        Maximum allowed heading level

    """

    def __init__(self, offset: int, min_level: int = 1, max_level: int = 6):
        """Initialize the transform with offset and level constraints."""
        self.offset = offset
        self.min_level = min_level
        self.max_level = max_level

    def visit_heading(self, node: Pair, env: Optional[Pair]) -> Pair:
        level, attrs, text, slug, fragment = get_heading(node)
        new_level = max(self.min_level, min(self.max_level, level + self.offset))
        if new_level == level:
            return node
        return make_heading(new_level, attrs, text, slug, fragment)


class _TextExtractor(VisitorIt):
    def __init__(self) -> None:
        self.parts: list[str] = []

    def visit_before(self, node: Pair, env: Optional[Pair]) -> bool:
        sym = kind_of(node)
        if sym is SYM_TEXT:
            self.parts.append(get_text(node))
        elif sym is SYM_SOFT or sym is SYM_HARD:
            self.parts.append(" ")
        return False

    def visit_after(self, node: Pair, env: Optional[Pair]) -> None:
        pass


def extract_text(node: Optional[Pair], joiner: str = "") -> str:
    """Extract the plain text of a node tree.

    Parameters
    ----------
    node : Pair or None
        Root of the tree
    joiner : str, default = ""
        String placed between the collected text parts

    Returns
    -------
    str
        Text of all TEXT nodes in document order; soft and hard line breaks
        contribute a single space

    Examples
    --------
    >>> extract_text(make_para(make_text("Hello"), make_soft(), make_text("world")))
    'Hello world'

    """
    extractor = _TextExtractor()
    walk_it(extractor, node)
    return joiner.join(extractor.parts)


__all__ = [
    "NodeTransformer",
    "NodeCollector",
    "HeadingLevelTransformer",
    "extract_nodes",
    "filter_nodes",
    "transform_nodes",
    "extract_text",
]
