from swisp import EvaluatorFn
from swisp import Expression
from swisp.errors import SwispSyntaxError
from swisp.types.environment import Environment
from swisp.types.symbol import Symbol


def define_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """
    (define name value)
    Binds name in the current frame. The result is the value expression as
    written, not its evaluated value.
    """
    if len(tail) != 2:
        raise SwispSyntaxError("define requires exactly 2 arguments: (define name value)")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise SwispSyntaxError(f"define first argument must be a symbol, got {name}")
    env.set(name, evaluate_fn(val_expr, env))
    return val_expr
