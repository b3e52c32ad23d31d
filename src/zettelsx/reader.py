#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/zettelsx/reader.py
"""Reader for the written form of s-expression values.

This is the inverse of :func:`zettelsx.sx.to_string`: node trees exchanged as
text can be read back into cons cells.

Syntax
------
- ``()`` is nil, ``(a b c)`` a proper list, ``(a . b)`` a dotted pair
- ``"..."`` strings with ``\\\\``, ``\\"``, ``\\n``, ``\\t`` and ``\\r`` escapes
- optionally signed decimal integers
- everything else up to a delimiter is a symbol
- ``;`` starts a comment running to the end of the line

Examples
--------
    >>> from zettelsx.sx import to_string
    >>> to_string(read('(PARA (TEXT "hi") (SOFT))'))
    '(PARA (TEXT "hi") (SOFT))'

"""

from __future__ import annotations

import re
from typing import Any

from zettelsx.exceptions import SxReadError
from zettelsx.options import ReaderOptions
from zettelsx.sx import Pair, make_symbol

_INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+$")
_DELIMITERS = frozenset('()";') | frozenset(" \t\r\n\f\v")
_ESCAPES = {"\\": "\\", '"': '"', "n": "\n", "t": "\t", "r": "\r"}


class _Reader:
    def __init__(self, text: str, options: ReaderOptions):
        self.text = text
        self.pos = 0
        self.max_depth = options.max_depth
        self.depth = 0

    def skip_space(self) -> None:
        text = self.text
        while self.pos < len(text):
            ch = text[self.pos]
            if ch == ";":
                end = text.find("\n", self.pos)
                self.pos = len(text) if end < 0 else end + 1
            elif ch.isspace():
                self.pos += 1
            else:
                break

    def at_end(self) -> bool:
        self.skip_space()
        return self.pos >= len(self.text)

    def read_object(self) -> Any:
        self.skip_space()
        if self.pos >= len(self.text):
            raise SxReadError("Unexpected end of input", position=self.pos)
        ch = self.text[self.pos]
        if ch == "(":
            if self.depth >= self.max_depth:
                raise SxReadError(f"Lists nested deeper than {self.max_depth} levels", position=self.pos)
            self.pos += 1
            self.depth += 1
            try:
                return self.read_list()
            finally:
                self.depth -= 1
        if ch == ")":
            raise SxReadError("Unexpected ')'", position=self.pos)
        if ch == '"':
            self.pos += 1
            return self.read_string()
        return self.read_atom()

    def read_list(self) -> Any:
        start = self.pos - 1
        first: Pair | None = None
        last: Pair | None = None
        while True:
            self.skip_space()
            if self.pos >= len(self.text):
                raise SxReadError("Unterminated list", position=start)
            ch = self.text[self.pos]
            if ch == ")":
                self.pos += 1
                return first
            if ch == "." and self._is_lone_dot():
                if last is None:
                    raise SxReadError("Dot without preceding element", position=self.pos)
                self.pos += 1
                last.cdr = self.read_object()
                self.skip_space()
                if self.pos >= len(self.text) or self.text[self.pos] != ")":
                    raise SxReadError("Expected ')' after dotted tail", position=self.pos)
                self.pos += 1
                return first
            cell = Pair(self.read_object())
            if last is None:
                first = cell
            else:
                last.cdr = cell
            last = cell

    def _is_lone_dot(self) -> bool:
        following = self.pos + 1
        return following >= len(self.text) or self.text[following] in _DELIMITERS

    def read_string(self) -> str:
        start = self.pos - 1
        parts: list[str] = []
        text = self.text
        while self.pos < len(text):
            ch = text[self.pos]
            self.pos += 1
            if ch == '"':
                return "".join(parts)
            if ch == "\\":
                if self.pos >= len(text):
                    break
                esc = text[self.pos]
                self.pos += 1
                if esc not in _ESCAPES:
                    raise SxReadError(f"Unknown escape sequence '\\{esc}'", position=self.pos - 2)
                parts.append(_ESCAPES[esc])
            else:
                parts.append(ch)
        raise SxReadError("Unterminated string", position=start)

    def read_atom(self) -> Any:
        start = self.pos
        text = self.text
        while self.pos < len(text) and text[self.pos] not in _DELIMITERS:
            self.pos += 1
        token = text[start : self.pos]
        if _INTEGER_PATTERN.match(token):
            try:
                return int(token)
            except ValueError as e:
                raise SxReadError("Integer too large to read", position=start, original_error=e) from e
        return make_symbol(token)


def read(text: str, options: ReaderOptions | None = None) -> Any:
    """Read exactly one s-expression value from ``text``.

    Parameters
    ----------
    text : str
        Written form of the value
    options : ReaderOptions or None, default = None
        Limits applied while reading

    Returns
    -------
    Any
        The value: a Pair, None, str, int or Symbol

    Raises
    ------
    SxReadError
        If the text is malformed, empty, nested too deeply, or holds more
        than one value

    """
    reader = _Reader(text, options or ReaderOptions())
    obj = reader.read_object()
    if not reader.at_end():
        raise SxReadError("Unexpected data after value", position=reader.pos)
    return obj


def read_all(text: str, options: ReaderOptions | None = None) -> list[Any]:
    """Read all s-expression values from ``text``."""
    reader = _Reader(text, options or ReaderOptions())
    result = []
    while not reader.at_end():
        result.append(reader.read_object())
    return result
