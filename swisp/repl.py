"""A prompt-read-eval-print loop."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from swisp.errors import SwispError
from swisp.interpreter import Interpreter
from swisp.printer import to_string

logger = logging.getLogger(__name__)


def repl(
    interp: Interpreter,
    prompt: str,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Read lines until end of input, printing each result or error."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            break
        if not line.strip():
            continue
        try:
            result = interp.eval(line)
        except (SwispError, RecursionError) as e:
            logger.debug("error evaluating %r", line, exc_info=True)
            stdout.write(f"swisp error: {e}\n")
        else:
            stdout.write(to_string(result) + "\n")
