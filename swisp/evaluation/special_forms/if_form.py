from swisp import EvaluatorFn
from swisp import Expression
from swisp.errors import SwispSyntaxError
from swisp.types.environment import Environment
from swisp.types.nil import is_false
from swisp.types.tail_call import TailCall


def if_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    if len(tail) != 3:
        raise SwispSyntaxError("if requires a test, a consequent and an alternative")

    test, conseq, alt = tail
    # Only the empty list is false
    if is_false(evaluate_fn(test, env)):
        return TailCall(alt, env)
    return TailCall(conseq, env)
