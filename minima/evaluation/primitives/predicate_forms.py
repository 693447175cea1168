from minima import SExpression, LispValue, EvaluatorFn
from minima.errors import MinimaTypeError
from minima.types.atom import Atom, truth
from minima.types.pair import Pair


def binary_operands(name: str, tail: SExpression) -> tuple[SExpression, SExpression]:
    """Split the tail of a two-operand primitive into its operands."""
    if not isinstance(tail, Pair):
        raise MinimaTypeError(f"{name} expects a pair of operands, got {tail}")
    return tail.car, tail.cdr


def atom_form(tail: SExpression, env: SExpression, evaluate_fn: EvaluatorFn) -> LispValue:
    return truth(isinstance(evaluate_fn(tail, env), Atom))


def eq_form(tail: SExpression, env: SExpression, evaluate_fn: EvaluatorFn) -> LispValue:
    # Symbol equality only: a pair is never eq to anything.
    left, right = binary_operands("eq", tail)
    x = evaluate_fn(left, env)
    y = evaluate_fn(right, env)
    return truth(isinstance(x, Atom) and isinstance(y, Atom) and x == y)
