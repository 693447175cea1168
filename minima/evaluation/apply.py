"""Application engine for Minima.

Procedures are plain expressions: a ``(lambda . (params . body))`` form or a
``(label . (name . procedure))`` form. Applying one never touches shared
state; new bindings are consed in front of the caller's environment and
passed down explicitly.

- label:  bind `name` to the labelled procedure, then evaluate
          ``(name . args)`` in that extended environment, so the body can
          call itself by name.
- lambda: evaluate the arguments left to right (applicative order), zip them
          with the parameters and evaluate the body with those bindings in
          front of the caller's environment.
"""

from __future__ import annotations

import logging

from minima import SExpression, LispValue, EvaluatorFn
from minima.errors import MinimaEvalError, MinimaTypeError
from minima.types.atom import Atom
from minima.types.environment import append, bind, pair_up
from minima.types.pair import Pair, cons, list_items, make_list
from minima.evaluation.primitives import PRIMITIVES

logger = logging.getLogger(__name__)

LABEL = Atom("label")
LAMBDA = Atom("lambda")


def evlis(args: SExpression, env: SExpression, evaluate_fn: EvaluatorFn) -> SExpression:
    """Evaluate every element of a nil-terminated argument list, in order."""
    return make_list([evaluate_fn(arg, env) for arg in list_items(args, "argument list")])


def _split(form: SExpression, what: str) -> tuple[SExpression, SExpression]:
    if not isinstance(form, Pair):
        raise MinimaTypeError(f"malformed {what}: {form}")
    return form.car, form.cdr


def _label_parts(rest: SExpression) -> tuple[Atom, SExpression]:
    name, procedure = _split(rest, "label")
    if not isinstance(name, Atom):
        raise MinimaTypeError(f"cannot use non-atom as label: {name}")
    if name in PRIMITIVES:
        raise MinimaTypeError(f"cannot label primitive {name}")
    return name, procedure


def procedure_value(form: Pair) -> LispValue:
    """A bare label or lambda form evaluates to itself, checked for shape."""
    if form.car == LABEL:
        _label_parts(form.cdr)
    else:
        _split(form.cdr, "lambda")
    return form


def apply_label(rest: SExpression, args: SExpression, env: SExpression, evaluate_fn: EvaluatorFn) -> LispValue:
    name, procedure = _label_parts(rest)
    logger.debug("label %s", name)
    return evaluate_fn(cons(name, args), bind(name, procedure, env))


def apply_lambda(rest: SExpression, args: SExpression, env: SExpression, evaluate_fn: EvaluatorFn) -> LispValue:
    params, body = _split(rest, "lambda")
    values = evlis(args, env, evaluate_fn)
    bindings = pair_up(params, values)
    logger.debug("lambda bindings %s", bindings)
    return evaluate_fn(body, append(bindings, env))


def apply(fn: LispValue, args: SExpression, env: SExpression, evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a procedure value to the unevaluated argument tail `args`.

    - An atom must name a primitive.
    - A pair must be a label or lambda form.
    """
    if isinstance(fn, Atom):
        handler = PRIMITIVES.get(fn)
        if handler is None:
            raise MinimaTypeError(f"not a function: {fn}")
        return handler(args, env, evaluate_fn)

    operator, rest = fn.car, fn.cdr
    if operator == LABEL:
        return apply_label(rest, args, env, evaluate_fn)
    if operator == LAMBDA:
        return apply_lambda(rest, args, env, evaluate_fn)
    raise MinimaEvalError(f"could not evaluate expression: {Pair(fn, args)}")
