"""Core evaluator and trampoline for the Swisp interpreter.

Implements special-form dispatch and tail-call aware application via a simple
trampoline using TailCall objects. `evaluate0` performs one step and returns
either a final value or a TailCall; `evaluate` keeps stepping until a value
comes out. Errors propagate as SwispError exceptions.
"""

from __future__ import annotations

from swisp import Expression
from swisp.errors import SwispApplicationError
from swisp.evaluation.apply import apply
from swisp.evaluation.special_forms import SPECIAL_FORMS
from swisp.printer import to_string
from swisp.types.environment import Environment
from swisp.types.procedure import Procedure
from swisp.types.symbol import Symbol
from swisp.types.tail_call import TailCall


def evaluate(expr: Expression, env: Environment) -> Expression:
    """
    Trampoline evaluator: runs `expr` to completion in `env`.
    Host stack depth stays constant across tail calls.
    """
    result = evaluate0(expr, env)
    while isinstance(result, TailCall):
        result = evaluate0(result.expr, result.env)
    return result


def evaluate0(expr: Expression, env: Environment) -> Expression | TailCall:
    """
    Core evaluator: single-step evaluation.
    Returns either a value or a TailCall for the trampoline to continue.
    """
    match expr:
        case Symbol():
            return env.lookup(expr)

        case []:
            raise SwispApplicationError("Not a procedure: ()")

        case [head, *tail_args]:
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail_args, env, evaluate)

            # Non-tail: head and arguments run to completion, left to right.
            proc = evaluate(head, env)
            if not isinstance(proc, Procedure):
                raise SwispApplicationError(f"Not a procedure: {to_string(head)}")
            args = [evaluate(arg, env) for arg in tail_args]
            return apply(proc, args)

    # --- Numbers and procedures evaluate to themselves ---
    return expr
