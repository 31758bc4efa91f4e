"""Procedure values.

Two kinds of procedure exist: `Native` wraps a host function and `Lambda`
(see swisp.types.lambda_fn) is created by evaluating a `lambda` form. Both
print as the opaque placeholder ``proc``.
"""

from __future__ import annotations

from swisp import Expression, NativeFn


class Procedure:
    """Base class for every callable Swisp value."""

    __slots__ = ()

    def __str__(self) -> str:
        return "proc"


class Native(Procedure):
    """A host-provided procedure.

    `fn` receives the already-evaluated arguments as a list and returns an
    Expression, raising a SwispError on failure.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: NativeFn):
        self.name = name
        self.fn = fn

    def __call__(self, args: list[Expression]) -> Expression:
        return self.fn(args)

    def __repr__(self) -> str:
        return f"<native {self.name}>"
