#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/zettelsx/attrs.py
"""Attribute bags attached to zettel nodes.

Inside a node, attributes are an association list of ``(key . value)``
string pairs. :class:`Attributes` is the Python side of that list: a mapping
from string keys to string values, where a value may hold several
space-separated tokens (like the ``class`` attribute).

Examples
--------
    >>> a = Attributes().add_class("note").add_class("wide")
    >>> a.get_classes()
    ['note', 'wide']
    >>> get_attributes(a.as_assoc()) == a
    True

"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Mapping, Optional

from zettelsx.constants import CLASS_ATTRIBUTE, DEFAULT_ATTRIBUTE
from zettelsx.symbols import py_value
from zettelsx.sx import ListBuilder, Pair, cons, is_atom, iter_values

logger = logging.getLogger(__name__)


class Attributes:
    """Mapping of attribute keys to attribute values.

    Mutating operations change the bag in place and return it, so calls can
    be chained.

    Parameters
    ----------
    items : Mapping of str to str, optional
        Initial attributes

    """

    def __init__(self, items: Optional[Mapping[str, str]] = None):
        """Initialize the bag with optional initial attributes."""
        self._data: dict[str, str] = dict(items) if items else {}

    def is_empty(self) -> bool:
        """Return True if there are no attributes."""
        return not self._data

    def has_default(self) -> bool:
        """Return True if the default attribute "-" has been set."""
        return DEFAULT_ATTRIBUTE in self._data

    def remove_default(self) -> Attributes:
        """Remove the default attribute."""
        return self.remove(DEFAULT_ATTRIBUTE)

    def keys(self) -> list[str]:
        """Return the keys in lexicographic order."""
        return sorted(self._data)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return the value of ``key``, or ``default`` if it is not set."""
        return self._data.get(key, default)

    def clone(self) -> Attributes:
        return Attributes(self._data)

    def set(self, key: str, value: str) -> Attributes:
        """Set ``key`` to ``value``, replacing any previous value."""
        self._data[key] = value
        return self

    def remove(self, key: str) -> Attributes:
        self._data.pop(key, None)
        return self

    def add(self, key: str, value: str) -> Attributes:
        """Add ``value`` to the space-separated values of ``key``.

        Adding a value that is already present leaves the bag unchanged.
        Values keep the order in which they were first added.
        """
        values = self.values(key)
        if value not in values:
            values.append(value)
            self._data[key] = " ".join(values)
        return self

    def values(self, key: str) -> list[str]:
        """Return the whitespace-separated values of ``key``."""
        value = self._data.get(key)
        if value is None:
            return []
        return value.split()

    def has(self, key: str, value: str) -> bool:
        """Return True if ``value`` is one of the values of ``key``."""
        return value in self.values(key)

    def add_class(self, class_: str) -> Attributes:
        return self.add(CLASS_ATTRIBUTE, class_)

    def get_classes(self) -> list[str]:
        return self.values(CLASS_ATTRIBUTE)

    def has_class(self, class_: str) -> bool:
        return self.has(CLASS_ATTRIBUTE, class_)

    def as_assoc(self) -> Optional[Pair]:
        """Return the attributes as an association list of string pairs.

        The order of the pairs is unspecified.
        """
        lb = ListBuilder()
        for key, value in self._data.items():
            lb.add(cons(key, value))
        return lb.list()

    def as_dict(self) -> dict[str, str]:
        return dict(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Attributes):
            return self._data == other._data
        if isinstance(other, Mapping):
            return self._data == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Attributes({self._data!r})"


def get_attributes(seq: Any) -> Attributes:
    """Build an attribute bag from an association list.

    Parameters
    ----------
    seq : Pair or None
        Association list of ``(key . value)`` pairs

    Returns
    -------
    Attributes
        New attribute bag; empty if ``seq`` is nil

    Notes
    -----
    Entries that are not pairs, or whose key or value is not an atom, are
    skipped. A value written as a one-element list, ``(key value)``, is
    unwrapped to its element.

    """
    result = Attributes()
    for obj in iter_values(seq):
        if not isinstance(obj, Pair):
            logger.debug(f"Skipping attribute entry that is not a pair: {obj!r}")
            continue
        key = obj.car
        if not is_atom(key):
            logger.debug(f"Skipping attribute entry with non-atom key: {obj!r}")
            continue
        val = obj.cdr
        if isinstance(val, Pair):
            val = val.car
        if not is_atom(val):
            logger.debug(f"Skipping attribute entry with non-atom value: {obj!r}")
            continue
        result.set(py_value(key), py_value(val))
    return result
