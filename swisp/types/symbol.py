"""Symbols: identifiers read from source text.

A Symbol wraps its interned name, so two Symbols read from the same text
compare and hash like the underlying string.
"""

from __future__ import annotations

import sys


class Symbol:
    """An immutable identifier such as `square`, `+` or `set!`."""

    __slots__ = ("id",)

    def __init__(self, name: str):
        self.id: str = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        return self.id is other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Symbol({self.id!r})"

    def __str__(self) -> str:
        return self.id
