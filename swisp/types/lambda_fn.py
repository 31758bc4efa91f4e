"""Interpreted procedure representation and argument binding for Swisp."""

from __future__ import annotations

from io import StringIO

from swisp import Expression
from swisp.errors import SwispArityError
from swisp.types.environment import Environment
from swisp.types.procedure import Procedure
from swisp.types.symbol import Symbol


class Lambda(Procedure):
    """A first-class lambda with formal parameters, body, and closure env."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: Expression, env: Environment):
        self.formals: tuple[Symbol, ...] = tuple(formals)
        self.body: Expression = body
        self.env: Environment = env

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<lambda (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(")>")
            return buffer.getvalue()

    def extend_env(self, args: list[Expression]) -> Environment:
        """
        Bind the given argument values to this lambda's formal parameters and
        return a new Environment for evaluating the body. The new frame's
        outer is the closure environment, not the caller's.
        """
        if len(args) != len(self.formals):
            raise SwispArityError(
                f"Expected {len(self.formals)} argument(s) but got {len(args)}"
            )
        return self.env.child(dict(zip(self.formals, args)))
