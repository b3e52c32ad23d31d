#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/zettelsx/input.py
"""Character input for scanners working on zettel text.

:class:`Input` keeps a position into the source text and the character at
that position. At the end of the text the current character is :data:`EOS`.
"""

from __future__ import annotations

from typing import Union

# Current character once the input is exhausted
EOS = ""


def is_space(ch: str) -> bool:
    """Return True if ``ch`` is whitespace within a line.

    Space and tab are whitespace, line endings and EOS are not. Other
    characters follow Unicode.
    """
    if ch in (" ", "\t"):
        return True
    if ch in ("\n", "\r", EOS):
        return False
    return ch.isspace()


class Input:
    """Source text with a read position.

    Parameters
    ----------
    src : bytes or str
        Source text; bytes are decoded as UTF-8, invalid sequences become
        replacement characters

    Attributes
    ----------
    src : str
        The source text
    pos : int
        Position of the current character
    ch : str
        Current character, or EOS at the end of the text

    """

    def __init__(self, src: Union[bytes, str]):
        """Initialize the input at the first character of ``src``."""
        if isinstance(src, bytes):
            src = src.decode("utf-8", errors="replace")
        self.src = src
        self.pos = 0
        self.ch = src[0] if src else EOS

    def next(self) -> str:
        """Advance to the next character and return it."""
        if self.pos < len(self.src):
            self.pos += 1
        self.ch = self.src[self.pos] if self.pos < len(self.src) else EOS
        return self.ch

    def peek(self) -> str:
        """Return the character after the current one without advancing."""
        return self.peek_n(1)

    def peek_n(self, n: int) -> str:
        pos = self.pos + n
        return self.src[pos] if pos < len(self.src) else EOS

    def set_pos(self, pos: int) -> None:
        """Move the read position to ``pos``."""
        self.pos = min(max(pos, 0), len(self.src))
        self.ch = self.src[self.pos] if self.pos < len(self.src) else EOS

    def accept(self, s: str) -> bool:
        """Consume ``s`` if the input continues with it."""
        if s and self.src.startswith(s, self.pos):
            self.set_pos(self.pos + len(s))
            return True
        return False

    def is_space(self) -> bool:
        return is_space(self.ch)
