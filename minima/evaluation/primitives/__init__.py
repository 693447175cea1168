"""Registry of primitives for the Minima evaluator.

Maps Atoms to handler functions. Each handler receives the unevaluated tail
of the form, the current environment and the evaluator, and decides for
itself which parts to evaluate. The table is read-only: evaluations share it
but can never change it.
"""

from types import MappingProxyType

from minima.types.atom import Atom
from minima.evaluation.primitives.quote_form import quote_form
from minima.evaluation.primitives.predicate_forms import atom_form, eq_form
from minima.evaluation.primitives.list_forms import car_form, cdr_form, cons_form
from minima.evaluation.primitives.cond_form import cond_form

PRIMITIVES = MappingProxyType({
    Atom("quote"): quote_form,
    Atom("atom"): atom_form,
    Atom("eq"): eq_form,
    Atom("car"): car_form,
    Atom("cdr"): cdr_form,
    Atom("cons"): cons_form,
    Atom("cond"): cond_form,
})
