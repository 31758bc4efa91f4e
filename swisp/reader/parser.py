"""
  Swisp Reader: tokenizer and recursive-descent parser

- Tokens are produced by padding parentheses with spaces and splitting on
  whitespace. There are no strings, comments or quote shorthand.
- Emits plain Python values:

    - numbers -> decimal.Decimal
    - lists   -> Python list
    - anything else -> Symbol
"""

from __future__ import annotations

import re
from collections import deque
from decimal import Decimal
from typing import MutableSequence

from swisp import Expression
from swisp.errors import SwispSyntaxError
from swisp.types.symbol import Symbol


NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

# Always symbols, even though a lenient number parser could accept them.
RESERVED_SYMBOLS = frozenset({"+", "-"})

# Largest decimal exponent a numeral may carry (decimal's default Emax).
MAX_EXPONENT = 999_999


def tokenize(chars: str) -> list[str]:
    """Convert a string of characters into a list of tokens."""
    return chars.replace("(", " ( ").replace(")", " ) ").split()


def atom(token: str) -> Expression:
    """Numbers become Decimals; every other token is a Symbol."""
    if token not in RESERVED_SYMBOLS and NUMBER_RE.fullmatch(token):
        value = Decimal(token)
        if not value.is_zero() and abs(value.adjusted()) > MAX_EXPONENT:
            raise SwispSyntaxError(f"numeral out of range: {token}")
        return value
    return Symbol(token)


def read_from(tokens: MutableSequence[str]) -> Expression:
    """Read one expression, consuming tokens from the front of `tokens`."""
    if not tokens:
        raise SwispSyntaxError("unexpected EOF while reading")
    token = tokens[0]
    del tokens[0]
    if token == "(":
        items: list[Expression] = []
        while True:
            if not tokens:
                raise SwispSyntaxError("unexpected EOF while reading")
            if tokens[0] == ")":
                del tokens[0]
                return items
            items.append(read_from(tokens))
    if token == ")":
        raise SwispSyntaxError("unexpected )")
    return atom(token)


def parse(program: str) -> Expression:
    """Read a single expression from a string; trailing tokens are ignored."""
    return read_from(deque(tokenize(program)))
