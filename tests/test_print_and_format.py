from decimal import Decimal

import pytest

from swisp.builtin.env_builtin import standard_environment
from swisp.evaluation.evaluator import evaluate
from swisp.printer import to_string
from swisp.reader.parser import parse
from swisp.types.environment import Environment
from swisp.types.lambda_fn import Lambda
from swisp.types.procedure import Native
from swisp.types.symbol import Symbol


@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal("25"), "25"),
        (Decimal("0.5"), "0.5"),
        (Decimal("-5"), "-5"),
        (Decimal("1E+2"), "100"),
        (Decimal("2.50"), "2.5"),
        (Decimal("0.000"), "0"),
        (Decimal("-0"), "0"),
        (Symbol("square"), "square"),
        ([], "()"),
        ([Symbol("a"), [Decimal(1), []], Symbol("b")], "(a (1 ()) b)"),
    ]
)
def test_to_string(value, expected):
    assert to_string(value) == expected


def test_procedures_print_as_placeholder():
    native = Native("+", lambda args: Decimal(0))
    lam = Lambda([Symbol("x")], Symbol("x"), Environment())
    assert to_string(native) == "proc"
    assert to_string(lam) == "proc"
    assert to_string([native, lam]) == "(proc proc)"


def test_parse_then_print_normalises_whitespace():
    assert to_string(parse("(  define   r  10 )")) == "(define r 10)"


@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal("1234567890123456789012345678901234"), "1234567890123456789012345678901234"),
        (Decimal("12345678901234567890123456789012345.6700"), "12345678901234567890123456789012345.67"),
        (Decimal("1.2345678901234567890123456789012345E+40"), "12345678901234567890123456789012345000000"),
    ]
)
def test_numbers_wider_than_default_context_print_exactly(value, expected):
    assert to_string(value) == expected


def test_huge_exponent_prints_without_raising():
    text = to_string(Decimal("1E+1000000"))
    assert text == "1" + "0" * 1000000


def test_arithmetic_results_print_at_full_precision():
    env = standard_environment()
    assert to_string(evaluate(parse("(+ 12345678901234567890123456789012 1)"), env)) == (
        "12345678901234567890123456789013"
    )
    assert to_string(env.lookup(Symbol("pi"))) == "3.1415926535897932384626433832795028842"
