#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/zettelsx/entity.py
"""Scanning of HTML character entities in zettel text.

Recognized forms are ``&name;`` (HTML5 named entities), ``&#ddd;`` and
``&#xhh;``. Numeric entities must denote a printable character.
"""

from __future__ import annotations

import unicodedata
from html.entities import html5

from zettelsx.input import EOS, Input

_MAX_CODE_POINT = 0x10FFFF
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# Most significant digits a code point up to U+10FFFF can have
_MAX_DIGITS = {10: 7, 16: 6}


def scan_entity(inp: Input) -> tuple[str, bool]:
    """Scan an entity at the current position of ``inp``.

    Parameters
    ----------
    inp : Input
        Input positioned at a ``&``

    Returns
    -------
    tuple of (str, bool)
        The decoded text and True on success. On failure, ``("", False)`` is
        returned and the position of ``inp`` is left unchanged.

    Examples
    --------
    >>> scan_entity(Input(b"&amp;"))
    ('&', True)
    >>> scan_entity(Input(b"&#x33;"))
    ('3', True)

    """
    if inp.ch != "&":
        return "", False
    pos = inp.pos
    inp.next()
    if inp.ch == "#":
        inp.next()
        if inp.ch in ("x", "X"):
            inp.next()
            result = _scan_numeric(inp, 16)
        else:
            result = _scan_numeric(inp, 10)
    else:
        result = _scan_named(inp)
    if result is None:
        inp.set_pos(pos)
        return "", False
    return result, True


def _scan_named(inp: Input) -> str | None:
    start = inp.pos
    while inp.ch != EOS and inp.ch.isascii() and inp.ch.isalnum():
        inp.next()
    if inp.pos == start or inp.ch != ";":
        return None
    name = inp.src[start : inp.pos + 1]
    inp.next()
    return html5.get(name)


def _scan_numeric(inp: Input, base: int) -> str | None:
    start = inp.pos
    while inp.ch != EOS and (inp.ch in _HEX_DIGITS if base == 16 else inp.ch in "0123456789"):
        inp.next()
    if inp.pos == start or inp.ch != ";":
        return None
    digits = inp.src[start : inp.pos].lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS[base]:
        return None
    code = int(digits, base)
    inp.next()
    if code > _MAX_CODE_POINT or 0xD800 <= code <= 0xDFFF:
        return None
    ch = chr(code)
    if unicodedata.category(ch) == "Cc":
        return None
    return ch
