"""Runtime environment for Swisp.

An Environment is one frame of a singly linked scope chain: a mapping of
Symbols to evaluated values plus an optional `outer` frame. Frames are shared
by reference, so a closure keeps its defining frame alive for as long as the
closure itself is reachable.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional

from swisp import Expression
from swisp.errors import SwispTypeError, SwispUndefinedIdentifier
from swisp.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Swisp values."""

    __slots__ = ("vars", "outer")

    def __init__(
        self,
        outer: Optional[Environment] = None,
        bindings: Optional[Mapping[Symbol, Expression]] = None,
    ):
        self.vars: dict[Symbol, Expression] = {}
        self.outer: Environment | None = outer
        if bindings:
            self.update(bindings)

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Symbol) -> Optional[Expression]:
        """Return the value bound to `name`, or None if no frame binds it.

        None is never a Swisp value, so it is unambiguous as the miss marker.
        """
        env = self.find(name)
        if env is None:
            return None
        return env.vars[name]

    def lookup(self, name: Symbol) -> Expression:
        """Like `get`, but raises SwispUndefinedIdentifier on a miss."""
        env = self.find(name)
        if env is None:
            raise SwispUndefinedIdentifier(f"Undefined identifier: {name}")
        return env.vars[name]

    def set(self, name: Symbol, value: Expression) -> None:
        """Bind `name` to `value` in this frame.

        Always writes the local frame, never an outer one: a binding made here
        shadows any binding of the same name further out.
        """
        if not isinstance(name, Symbol):
            raise SwispTypeError(f"Cannot bind {name!r}: not a symbol")
        self.vars[name] = value

    def update(self, mapping: Mapping[Symbol, Expression]) -> None:
        """Bulk-set a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.set(k, v)

    def child(self, bindings: Optional[Mapping[Symbol, Expression]] = None) -> Environment:
        """Create a new frame whose outer frame is this one."""
        return Environment(outer=self, bindings=bindings)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env: Optional[Environment] = self
            first = True
            while env is not None:
                if not first:
                    buffer.write(" -> ")
                env._write_vars(buffer)
                first = False
                env = env.outer
            buffer.write(">")
            return buffer.getvalue()
