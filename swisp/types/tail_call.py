from swisp import Expression
from swisp.types.environment import Environment


class TailCall:
    """Deferred step of the trampoline: evaluate `expr` in `env` next."""

    __slots__ = ("expr", "env")

    def __init__(self, expr: Expression, env: Environment):
        self.expr = expr
        self.env = env

    def __repr__(self) -> str:
        return f"TailCall({self.expr!r})"
