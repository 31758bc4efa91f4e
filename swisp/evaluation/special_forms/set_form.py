from swisp import EvaluatorFn
from swisp import Expression
from swisp.errors import SwispSyntaxError
from swisp.types.environment import Environment
from swisp.types.symbol import Symbol


def set_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """
    (set! name value)
    Binds name in the current frame exactly like define and then rejects the
    form with a SwispSyntaxError. The binding made before the error persists.
    """
    if len(tail) != 2:
        raise SwispSyntaxError("set! requires exactly 2 arguments: (set! name value)")

    name, val_expr = tail
    if isinstance(name, Symbol):
        env.set(name, evaluate_fn(val_expr, env))
    raise SwispSyntaxError("Bad syntax: set!")
