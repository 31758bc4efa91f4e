"""Built-in procedures for the Swisp standard environment.

This module defines arithmetic, comparison and sequencing procedures and the
registration utilities that install them into a root Environment. Every
builtin follows the native procedure contract: it takes the list of evaluated
arguments and returns a single Expression.
"""
from __future__ import annotations

import operator
from decimal import Context, Decimal, DecimalException
from typing import Callable

from swisp import Expression
from swisp.config import get_decimal_precision
from swisp.errors import SwispArithmeticError, SwispArityError, SwispTypeError
from swisp.printer import to_string
from swisp.types.environment import Environment
from swisp.types.nil import nil
from swisp.types.procedure import Native
from swisp.types.symbol import Symbol

PI_DIGITS = "3.14159265358979323846264338327950288419716939937510582097494"


def make_context(precision: int | None = None) -> Context:
    """Decimal context for builtin arithmetic; the host's global context is left alone."""
    return Context(prec=precision if precision is not None else get_decimal_precision())


def as_numbers(args: list[Expression]) -> list[Decimal]:
    """Check every argument is a number; raise SwispTypeError otherwise."""
    for arg in args:
        if not isinstance(arg, Decimal):
            raise SwispTypeError(f"Expected a number but got {to_string(arg)}")
    return args


def _fold(ctx_op: Callable[[Decimal, Decimal], Decimal], initial: Decimal, numbers: list[Decimal]) -> Decimal:
    result = initial
    try:
        for x in numbers:
            result = ctx_op(result, x)
    except DecimalException as exc:
        raise SwispArithmeticError(f"Arithmetic error: {exc.__class__.__name__}") from exc
    return result


# -------------------------------
# Arithmetic
# -------------------------------
def make_arithmetic(ctx: Context) -> dict[str, Callable[[list[Expression]], Expression]]:
    """Build the four arithmetic builtins bound to one decimal context."""

    def add(args: list[Expression]) -> Expression:
        """Return the sum of all arguments; 0 with no arguments."""
        return _fold(ctx.add, Decimal(0), as_numbers(args))

    def sub(args: list[Expression]) -> Expression:
        """Subtract all subsequent numbers from the first; unary negation for one arg."""
        numbers = as_numbers(args)
        if not numbers:
            raise SwispArityError("- expected at least 1 argument")
        if len(numbers) == 1:
            return _fold(ctx.subtract, Decimal(0), numbers)
        return _fold(ctx.subtract, numbers[0], numbers[1:])

    def mul(args: list[Expression]) -> Expression:
        """Return the product of all arguments; 1 with no arguments."""
        return _fold(ctx.multiply, Decimal(1), as_numbers(args))

    def div(args: list[Expression]) -> Expression:
        """Divide left-to-right; with one arg returns the reciprocal."""
        numbers = as_numbers(args)
        if not numbers:
            raise SwispArityError("/ expected at least 1 argument")
        if len(numbers) == 1:
            return _fold(ctx.divide, Decimal(1), numbers)
        return _fold(ctx.divide, numbers[0], numbers[1:])

    return {"+": add, "-": sub, "*": mul, "/": div}


# -------------------------------
# Comparison
# -------------------------------
def comparison(name: str, compare: Callable[[Decimal, Decimal], bool]) -> Callable[[list[Expression]], Expression]:
    """Chain `compare` over adjacent pairs.

    Returns the last argument when every pair holds, else the empty list.
    """

    def chain(args: list[Expression]) -> Expression:
        numbers = as_numbers(args)
        if len(numbers) < 2:
            raise SwispArityError(f"{name} expected at least 2 arguments")
        if all(compare(a, b) for a, b in zip(numbers, numbers[1:])):
            return args[-1]
        return nil()

    return chain


COMPARISONS = {
    ">": operator.gt,
    "<": operator.lt,
    ">=": operator.ge,
    "<=": operator.le,
    "=": operator.eq,
}


# -------------------------------
# Sequencing
# -------------------------------
def begin(args: list[Expression]) -> Expression:
    """(begin a b c) => c. Arguments were already evaluated in order."""
    if not args:
        raise SwispArityError("begin expected at least 1 argument")
    return args[-1]


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment, precision: int | None = None) -> None:
    ctx = make_context(precision)
    bindings: dict[Symbol, Expression] = {
        Symbol(name): Native(name, fn) for name, fn in make_arithmetic(ctx).items()
    }
    bindings.update(
        {Symbol(name): Native(name, comparison(name, op)) for name, op in COMPARISONS.items()}
    )
    bindings[Symbol("begin")] = Native("begin", begin)
    bindings[Symbol("pi")] = ctx.create_decimal(PI_DIGITS)
    env.update(bindings)


def standard_environment(precision: int | None = None) -> Environment:
    """A fresh root environment holding the standard builtins."""
    env = Environment()
    register(env, precision)
    return env
