#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/zettelsx/sx.py
"""S-expression value model used to encode zettel node trees.

This module provides the small cons-cell world every node is built from:

- nil is represented by ``None``
- ``Pair`` cells with ``car`` and ``cdr`` slots (mutable, for destructive walks)
- strings are plain ``str`` values
- integers are plain ``int`` values
- ``Symbol`` values are interned, so two symbols with the same name are the
  same object and compare by identity

The module level helpers (``car``, ``tail``, ``iter_pairs``, ...) accept any
object and treat everything that is not a pair as an empty list. Accessors in
:mod:`zettelsx.build` rely on that to stay total on malformed input.

Examples
--------
Build and print a small list:

    >>> from zettelsx.sx import make_list, make_symbol, to_string
    >>> to_string(make_list(make_symbol("TEXT"), "hello"))
    '(TEXT "hello")'

"""

from __future__ import annotations

from typing import Any, Iterator, Optional


class Symbol:
    """Interned symbol.

    Use :func:`make_symbol` (or ``Symbol(name)``) to obtain a symbol; both
    return the same instance for the same name.

    Parameters
    ----------
    name : str
        Name of the symbol

    """

    __slots__ = ("name",)

    _table: dict[str, "Symbol"] = {}

    def __new__(cls, name: str) -> "Symbol":
        sym = cls._table.get(name)
        if sym is None:
            sym = super().__new__(cls)
            sym.name = name
            cls._table[name] = sym
        return sym

    def __repr__(self) -> str:
        return f"Symbol({self.name!r})"

    def __str__(self) -> str:
        return self.name

    def __reduce__(self) -> tuple[Any, ...]:
        return (Symbol, (self.name,))

    def get_value(self) -> str:
        """Return the name of the symbol."""
        return self.name

    def is_equal(self, other: object) -> bool:
        """Return True if ``other`` is this symbol."""
        return self is other


def make_symbol(name: str) -> Symbol:
    """Return the interned symbol for ``name``."""
    return Symbol(name)


class Pair:
    """A cons cell.

    Parameters
    ----------
    car : Any
        First slot
    cdr : Any, default = None
        Second slot; ``None`` (nil) terminates a proper list

    Notes
    -----
    Equality is structural so that node trees can be compared in tests.
    Identity (``is``) is what the pure walker uses to detect unchanged lists.

    """

    __slots__ = ("car", "cdr")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, car: Any, cdr: Any = None):
        """Initialize the cell with its two slots."""
        self.car = car
        self.cdr = cdr

    def head(self) -> Optional["Pair"]:
        """Return the car if it is a pair, otherwise None."""
        return self.car if isinstance(self.car, Pair) else None

    def tail(self) -> Optional["Pair"]:
        """Return the cdr if it is a pair, otherwise None."""
        return self.cdr if isinstance(self.cdr, Pair) else None

    def set_car(self, obj: Any) -> None:
        self.car = obj

    def set_cdr(self, obj: Any) -> None:
        self.cdr = obj

    def cons(self, obj: Any) -> "Pair":
        """Return a new pair with ``obj`` in front of this list."""
        return Pair(obj, self)

    def pairs(self) -> Iterator["Pair"]:
        """Iterate over the cons cells of this list."""
        return iter_pairs(self)

    def values(self) -> Iterator[Any]:
        """Iterate over the elements of this list."""
        return iter_values(self)

    def assoc(self, key: Any) -> Optional["Pair"]:
        """Return the first pair element whose car equals ``key``."""
        return assoc(self, key)

    def last(self) -> "Pair":
        """Return the last cons cell of this list."""
        node = self
        while isinstance(node.cdr, Pair):
            node = node.cdr
        return node

    def length(self) -> int:
        return sum(1 for _ in iter_pairs(self))

    def __iter__(self) -> Iterator[Any]:
        return iter_values(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return is_equal(self, other)

    def __repr__(self) -> str:
        return to_string(self)


# ============================================================================
# Construction
# ============================================================================


def cons(car: Any, cdr: Any = None) -> Pair:
    """Build a new cons cell."""
    return Pair(car, cdr)


def make_list(*objs: Any) -> Optional[Pair]:
    """Build a proper list of the given objects; an empty call returns nil."""
    result = None
    for obj in reversed(objs):
        result = Pair(obj, result)
    return result


class ListBuilder:
    """Incrementally build a proper list by appending at the end.

    Examples
    --------
    >>> lb = ListBuilder()
    >>> lb.add_n(make_symbol("PARA"), "x")
    >>> to_string(lb.list())
    '(PARA "x")'

    """

    def __init__(self) -> None:
        """Initialize an empty builder."""
        self._first: Optional[Pair] = None
        self._last: Optional[Pair] = None

    def add(self, obj: Any) -> None:
        """Append one object."""
        cell = Pair(obj)
        if self._last is None:
            self._first = cell
        else:
            self._last.cdr = cell
        self._last = cell

    def add_n(self, *objs: Any) -> None:
        """Append all given objects."""
        for obj in objs:
            self.add(obj)

    def extend(self, lst: Optional[Pair]) -> None:
        """Append copies of the elements of ``lst``."""
        for obj in iter_values(lst):
            self.add(obj)

    def extend_bang(self, lst: Optional[Pair]) -> None:
        """Link ``lst`` to the end of the builder without copying it.

        The builder must not be used for further appends afterwards, except
        through another ``extend_bang``.
        """
        if not isinstance(lst, Pair):
            return
        if self._last is None:
            self._first = lst
        else:
            self._last.cdr = lst
        self._last = lst.last()

    def is_empty(self) -> bool:
        return self._first is None

    def list(self) -> Optional[Pair]:
        """Return the list built so far."""
        return self._first


# ============================================================================
# Tolerant accessors
# ============================================================================


def is_nil(obj: Any) -> bool:
    """Return True for nil (``None``)."""
    return obj is None


def is_atom(obj: Any) -> bool:
    """Return True if ``obj`` is not a cons cell (nil counts as an atom)."""
    return not isinstance(obj, Pair)


def car(obj: Any) -> Any:
    return obj.car if isinstance(obj, Pair) else None


def cdr(obj: Any) -> Any:
    return obj.cdr if isinstance(obj, Pair) else None


def head(obj: Any) -> Optional[Pair]:
    """Return the car of ``obj`` if it is a pair, otherwise None."""
    return obj.head() if isinstance(obj, Pair) else None


def tail(obj: Any) -> Optional[Pair]:
    """Return the cdr of ``obj`` if it is a pair, otherwise None."""
    return obj.tail() if isinstance(obj, Pair) else None


def get_pair(obj: Any) -> tuple[Optional[Pair], bool]:
    """Return ``(obj, True)`` for pairs and nil, ``(None, False)`` otherwise."""
    if obj is None or isinstance(obj, Pair):
        return obj, True
    return None, False


def get_symbol(obj: Any) -> tuple[Optional[Symbol], bool]:
    if isinstance(obj, Symbol):
        return obj, True
    return None, False


def get_string(obj: Any) -> tuple[str, bool]:
    if isinstance(obj, str):
        return obj, True
    return "", False


def get_number(obj: Any) -> tuple[int, bool]:
    # bool is an int subclass but never a number in this value model
    if isinstance(obj, int) and not isinstance(obj, bool):
        return obj, True
    return 0, False


def iter_pairs(lst: Any) -> Iterator[Pair]:
    """Iterate over the cons cells of a list.

    Iteration stops at the first cdr that is not a pair, so the final atom of
    a dotted list is not visited.
    """
    node = lst
    while isinstance(node, Pair):
        yield node
        node = node.cdr


def iter_values(lst: Any) -> Iterator[Any]:
    """Iterate over the elements of a list."""
    for pair in iter_pairs(lst):
        yield pair.car


def assoc(alist: Any, key: Any) -> Optional[Pair]:
    """Return the first pair element of ``alist`` whose car equals ``key``.

    Symbols are compared by identity, everything else by structural equality.
    """
    for elem in iter_values(alist):
        if isinstance(elem, Pair) and is_equal(elem.car, key):
            return elem
    return None


def is_equal(a: Any, b: Any) -> bool:
    """Structural equality on s-expression values."""
    while isinstance(a, Pair) and isinstance(b, Pair):
        if a is b:
            return True
        if not is_equal(a.car, b.car):
            return False
        a, b = a.cdr, b.cdr
    if isinstance(a, Pair) or isinstance(b, Pair):
        return False
    if isinstance(a, Symbol) or isinstance(b, Symbol):
        return a is b
    if type(a) is not type(b):
        return False
    return bool(a == b)


# ============================================================================
# Writer
# ============================================================================

_STRING_ESCAPES = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\t": "\\t", "\r": "\\r"}


def _quote(value: str) -> str:
    return '"' + "".join(_STRING_ESCAPES.get(ch, ch) for ch in value) + '"'


def to_string(obj: Any) -> str:
    """Return the written form of an s-expression value.

    Examples
    --------
    >>> to_string(make_list(make_symbol("A"), 1, "b"))
    '(A 1 "b")'
    >>> to_string(cons(make_symbol("k"), "v"))
    '(k . "v")'

    """
    if obj is None:
        return "()"
    if isinstance(obj, Symbol):
        return obj.name
    if isinstance(obj, str):
        return _quote(obj)
    if isinstance(obj, bool):
        return repr(obj)
    if isinstance(obj, int):
        return str(obj)
    if isinstance(obj, Pair):
        parts = []
        node: Any = obj
        while isinstance(node, Pair):
            parts.append(to_string(node.car))
            node = node.cdr
        if node is not None:
            parts.append(".")
            parts.append(to_string(node))
        return "(" + " ".join(parts) + ")"
    return repr(obj)


__all__ = [
    "Symbol",
    "Pair",
    "ListBuilder",
    "make_symbol",
    "cons",
    "make_list",
    "is_nil",
    "is_atom",
    "car",
    "cdr",
    "head",
    "tail",
    "get_pair",
    "get_symbol",
    "get_string",
    "get_number",
    "iter_pairs",
    "iter_values",
    "assoc",
    "is_equal",
    "to_string",
]
