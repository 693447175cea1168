"""Interactive shell for Minima.

Reads lines until the parentheses balance, evaluates what was read and
prints each result. An error is reported and the session carries on.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from minima import __version__
from minima import config
from minima.errors import MinimaError, MinimaLexicalError, MinimaSyntaxError
from minima.interpreter import Interpreter
from minima.debug_utils.pprint import pprint_expr

logger = logging.getLogger(__name__)

PROMPT = "λ> "


def read_balanced(stdin: TextIO) -> str | None:
    """Read lines until parens balance; None at end of input."""
    expr = ""
    balance = 0
    while True:
        line = stdin.readline()
        if not line:
            return None
        balance += line.count("(") - line.count(")")
        expr += line
        if balance <= 0:
            return expr


def run(stdin: TextIO, stdout: TextIO, interp: Interpreter | None = None, options: dict | None = None) -> None:
    if interp is None:
        interp = Interpreter(sugar=config.use_sugar())
    if options is None:
        options = config.get_pprint_options()

    stdout.write(f"Minima REPL v{__version__}. ^D to quit.\n")
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        expr = read_balanced(stdin)
        if expr is None:
            stdout.write("\nLeaving Minima REPL.\n")
            return
        if not expr.strip():
            continue
        try:
            result = interp.eval(expr)
        except (MinimaLexicalError, MinimaSyntaxError) as ex:
            stdout.write(f"parse error: {ex}\n")
            continue
        except MinimaError as ex:
            stdout.write(f"error: {ex}\n")
            continue
        except RecursionError:
            logger.debug("recursion limit hit evaluating %r", expr)
            stdout.write("error: recursion too deep\n")
            continue
        results = result if isinstance(result, list) else [result]
        for value in results:
            stdout.write(pprint_expr(value, options) + "\n")


def main() -> None:
    logging.basicConfig(level=config.get_log_level())
    options = config.get_pprint_options()
    if not sys.stdout.isatty():
        options = {**options, "color_atoms": False, "color_truth": False, "color_forms": False}
    run(sys.stdin, sys.stdout, options=options)


if __name__ == "__main__":
    main()
