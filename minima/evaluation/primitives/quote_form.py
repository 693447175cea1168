from minima import SExpression, LispValue, EvaluatorFn


def quote_form(tail: SExpression, env: SExpression, evaluate_fn: EvaluatorFn) -> LispValue:
    # (quote . X) -> X, unevaluated
    return tail
