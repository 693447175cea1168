"""Core evaluator for the Minima interpreter.

Case analysis on the shape of the expression, in this order:

1. an atom is looked up in the environment;
2. a pair with an atomic head is a primitive call, a bare label or lambda
   form (a procedure value, returned as is), or a call of whatever procedure
   the head atom is bound to;
3. a pair whose head is a pair applies that label or lambda form.

Evaluation is a pure function of (expression, environment).
"""

from __future__ import annotations

from minima import SExpression, LispValue
from minima.types.atom import Atom
from minima.types.environment import assoc, initial_environment
from minima.evaluation.apply import LABEL, LAMBDA, apply, procedure_value
from minima.evaluation.primitives import PRIMITIVES


def evaluate(expr: SExpression, env: SExpression | None = None) -> LispValue:
    """Evaluate `expr` in `env` (the truth bindings by default)."""
    if env is None:
        env = initial_environment()

    if isinstance(expr, Atom):
        return assoc(expr, env)

    head, tail = expr.car, expr.cdr
    if isinstance(head, Atom):
        handler = PRIMITIVES.get(head)
        if handler is not None:
            return handler(tail, env, evaluate)
        if head == LABEL or head == LAMBDA:
            return procedure_value(expr)
        return apply(assoc(head, env), tail, env, evaluate)

    return apply(head, tail, env, evaluate)
