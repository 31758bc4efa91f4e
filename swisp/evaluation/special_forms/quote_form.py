from swisp import EvaluatorFn
from swisp import Expression
from swisp.types.environment import Environment


def quote_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """
    (quote datum...)
    Returns the quoted forms unevaluated, wrapped as a list:
    (quote a) => (a), (quote (1 2)) => ((1 2)).
    (quote ()) is the empty list itself, so it can serve as false.
    """
    if len(tail) == 1 and tail[0] == []:
        return []
    return list(tail)
