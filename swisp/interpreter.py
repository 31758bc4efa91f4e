from __future__ import annotations

import logging

from swisp import Expression
from swisp.builtin.env_builtin import standard_environment
from swisp.evaluation.evaluator import evaluate
from swisp.reader.parser import parse
from swisp.types.environment import Environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating Swisp code.
    Owns the root Environment, so definitions persist across calls and
    survive evaluations that fail part way through.
    """

    def __init__(self, env: Environment | None = None, precision: int | None = None):
        self.env: Environment = env if env is not None else standard_environment(precision)

    def eval(self, code: str) -> Expression:
        """Parse one top-level form from `code` and evaluate it in the root environment."""
        expr = parse(code)
        logger.debug("evaluating %r", code)
        return evaluate(expr, self.env)
