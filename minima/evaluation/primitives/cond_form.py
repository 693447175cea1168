from minima import SExpression, LispValue, EvaluatorFn
from minima.errors import MinimaTypeError
from minima.types.atom import NIL
from minima.types.pair import Pair, list_items


def cond_form(tail: SExpression, env: SExpression, evaluate_fn: EvaluatorFn) -> LispValue:
    """Evaluate the value of the first clause whose predicate is not nil.

    `tail` is a nil-terminated list of (predicate . value) clauses, checked
    like any other argument list before a predicate runs. No match yields nil.
    """
    for clause in list_items(tail, "cond clause list"):
        if not isinstance(clause, Pair):
            raise MinimaTypeError(f"cond: clause is not a list: {clause}")
        if evaluate_fn(clause.car, env) != NIL:
            return evaluate_fn(clause.cdr, env)
    return NIL
