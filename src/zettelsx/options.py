#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/zettelsx/options.py
"""Options for reading the written form of node trees.

Options are frozen dataclasses. Use ``create_updated()`` to derive a
modified copy.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from zettelsx.constants import DEFAULT_READER_MAX_DEPTH


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class ReaderOptions(CloneFrozenMixin):
    """Options for reading s-expression text.

    Parameters
    ----------
    max_depth : int, default = 256
        Deepest list nesting accepted before reading fails

    Examples
    --------
    Accept deeper trees:
        >>> options = ReaderOptions(max_depth=400)

    """

    max_depth: int = field(
        default=DEFAULT_READER_MAX_DEPTH,
        metadata={"help": "Maximum list nesting depth", "type": int},
    )

    def __post_init__(self) -> None:
        """Validate the nesting limit."""
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
