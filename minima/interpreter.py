from __future__ import annotations

import logging

from minima import SExpression, LispValue
from minima.reader.desugar import desugar
from minima.reader.parser import lex, TokenStream
from minima.types.atom import NIL
from minima.types.environment import initial_environment
from minima.evaluation.evaluator import evaluate

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating Minima code.

    Holds only a base environment, which is never modified: every top-level
    expression is evaluated against it afresh, so no evaluation can observe
    bindings made by another.
    """

    def __init__(self, env: SExpression | None = None, sugar: bool = False):
        self.env: SExpression = env if env is not None else initial_environment()
        self.sugar = sugar

    def eval(self, code: str) -> LispValue | list[LispValue]:
        if self.sugar:
            code = desugar(code)
        logger.debug("eval %r", code)
        stream = TokenStream(lex(code))
        results: list[LispValue] = []
        for expr in stream.parse_all():
            results.append(evaluate(expr, self.env))
        if not results:
            return NIL
        if len(results) == 1:
            return results[0]
        return results
