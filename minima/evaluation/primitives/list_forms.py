from minima import SExpression, LispValue, EvaluatorFn
from minima.errors import MinimaTypeError
from minima.types.pair import Pair, cons
from minima.evaluation.primitives.predicate_forms import binary_operands


def _evaluate_pair(name: str, tail: SExpression, env: SExpression, evaluate_fn: EvaluatorFn) -> Pair:
    value = evaluate_fn(tail, env)
    if not isinstance(value, Pair):
        raise MinimaTypeError(f"{name}: not a list: {value}")
    return value


def car_form(tail: SExpression, env: SExpression, evaluate_fn: EvaluatorFn) -> LispValue:
    return _evaluate_pair("car", tail, env, evaluate_fn).car


def cdr_form(tail: SExpression, env: SExpression, evaluate_fn: EvaluatorFn) -> LispValue:
    return _evaluate_pair("cdr", tail, env, evaluate_fn).cdr


def cons_form(tail: SExpression, env: SExpression, evaluate_fn: EvaluatorFn) -> LispValue:
    head, rest = binary_operands("cons", tail)
    return cons(evaluate_fn(head, env), evaluate_fn(rest, env))
