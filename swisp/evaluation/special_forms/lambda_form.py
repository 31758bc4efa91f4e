import logging

from swisp import EvaluatorFn
from swisp import Expression
from swisp.errors import SwispSyntaxError, SwispTypeError
from swisp.printer import to_string
from swisp.types.environment import Environment
from swisp.types.lambda_fn import Lambda
from swisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def lambda_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Lambda:
    # (lambda (params) body) takes a single body expression.
    # Further body forms are accepted but never evaluated.
    if not tail or not isinstance(tail[0], list):
        raise SwispSyntaxError("lambda requires a parameter list")

    params = tail[0]
    for param in params:
        if not isinstance(param, Symbol):
            raise SwispTypeError(f"Expected a symbol but got {to_string(param)}")

    body_forms = tail[1:]
    if not body_forms:
        raise SwispSyntaxError("lambda requires a body")
    if len(body_forms) > 1:
        logger.warning(
            "lambda body has %d forms; only the first is evaluated", len(body_forms)
        )

    return Lambda(params, body_forms[0], env)
