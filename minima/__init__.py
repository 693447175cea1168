# Core type aliases for Minima's data model.
# Code and data share one representation: every S-expression is either an
# Atom or a Pair (see minima.types). There are no other shapes.
#
# Naming guidance:
# - SExpression: Use in reader/printer code to denote syntactic forms.
# - LispValue:  Use in evaluator code to denote evaluated values.
# Both aliases resolve to the same union; keeping two names documents intent.

from typing import Callable, Union

from minima.types.atom import Atom
from minima.types.pair import Pair

SExpression = Union[Atom, Pair]
LispValue = SExpression

# Evaluator function type: threaded through primitive handlers
EvaluatorFn = Callable[[SExpression, SExpression], LispValue]

__version__ = "0.3.0"
