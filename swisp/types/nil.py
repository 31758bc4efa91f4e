from __future__ import annotations

from swisp import Expression


# The empty list doubles as nil and false. There is no separate boolean type.

def nil() -> list:
    return []


def is_false(value: Expression) -> bool:
    """Only the empty list is false; 0 and every other value are true."""
    return isinstance(value, list) and not value
