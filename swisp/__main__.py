from __future__ import annotations

import argparse
import logging
import sys

from swisp import __version__
from swisp.config import get_decimal_precision, get_log_level, get_prompt
from swisp.errors import SwispError
from swisp.interpreter import Interpreter
from swisp.printer import to_string
from swisp.repl import repl


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="swisp", description="A minimal Lisp read-eval-print loop"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--prompt", default=None, help="REPL prompt (env: SWISP_PROMPT)")
    parser.add_argument(
        "--precision",
        type=int,
        default=None,
        help="significant digits for decimal arithmetic (env: SWISP_DECIMAL_PRECISION)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (env: SWISP_LOG_LEVEL)",
    )
    parser.add_argument(
        "-e", "--eval", dest="expr", default=None, help="evaluate one form, print it and exit"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    level = getattr(logging, args.log_level) if args.log_level else get_log_level()
    logging.basicConfig(
        level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s"
    )

    precision = args.precision if args.precision is not None else get_decimal_precision()
    interp = Interpreter(precision=precision)

    if args.expr is not None:
        try:
            print(to_string(interp.eval(args.expr)))
        except (SwispError, RecursionError) as e:
            print(f"swisp error: {e}", file=sys.stderr)
            return 1
        return 0

    repl(interp, args.prompt if args.prompt is not None else get_prompt())
    return 0


if __name__ == "__main__":
    sys.exit(main())
