"""Canonical textual representation of Swisp values."""

from __future__ import annotations

from decimal import MAX_EMAX, MIN_EMIN, Context, Decimal

from swisp import Expression
from swisp.types.procedure import Procedure
from swisp.types.symbol import Symbol


def format_number(value: Decimal) -> str:
    # Plain decimal text: 100 not 1E+2, 0.5 not 5E-1
    if value.is_zero():
        return "0"
    # Strip trailing zeros without rounding: one digit of precision per
    # coefficient digit and an exponent range that cannot overflow.
    exact = Context(prec=len(value.as_tuple().digits), Emax=MAX_EMAX, Emin=MIN_EMIN)
    return format(value.normalize(exact), "f")


def to_string(expr: Expression) -> str:
    if isinstance(expr, Decimal):
        return format_number(expr)
    if isinstance(expr, Symbol):
        return str(expr)
    if isinstance(expr, list):
        return "(" + " ".join(to_string(e) for e in expr) + ")"
    if isinstance(expr, Procedure):
        return "proc"
    return str(expr)
