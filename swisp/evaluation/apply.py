"""Application engine for Swisp.

Centralizes the procedure invocation protocol:
- Native procedures are called synchronously on the evaluated arguments.
- Lambdas bind their formals in a fresh frame under the closure environment
  and hand the body back to the trampoline as a TailCall, so interpreted
  calls never grow the host stack.
"""

from __future__ import annotations

from swisp import Expression
from swisp.errors import SwispApplicationError
from swisp.printer import to_string
from swisp.types.lambda_fn import Lambda
from swisp.types.procedure import Native
from swisp.types.tail_call import TailCall


def apply_lambda(fn: Lambda, args: list[Expression]) -> TailCall:
    """Apply a Lambda value: the body runs in tail position."""
    return TailCall(fn.body, fn.extend_env(args))


def apply(head: Expression, args: list[Expression]) -> Expression | TailCall:
    """Apply either a Lambda or a Native procedure.

    - For Lambda, defer to apply_lambda.
    - For Native, invoke the host function on the list of args.
    - Otherwise, raise an application error.
    """
    if isinstance(head, Lambda):
        return apply_lambda(head, args)
    elif isinstance(head, Native):
        return head(args)
    else:
        raise SwispApplicationError(f"Not a procedure: {to_string(head)}")
