"""Association-list environments for Minima.

An environment is an ordinary S-expression: a nil-terminated list of
bindings, each binding the pair ``(name . value)``. Lookup scans front to
back, so a binding shadows every later binding of the same name. Nothing
here mutates a list; extending an environment conses new cells in front of
the existing ones, which leaves the caller's environment untouched.
"""

from __future__ import annotations

from typing import Mapping

from minima import SExpression, LispValue
from minima.errors import MinimaArityError, MinimaTypeError, MinimaUnboundAtom
from minima.types.atom import Atom, NIL, T
from minima.types.pair import Pair, list_items, make_list

EMPTY: SExpression = NIL


def initial_environment() -> SExpression:
    """Environment with the truth atoms bound to themselves."""
    return make_list([Pair(T, T), Pair(NIL, NIL)])


def from_mapping(bindings: Mapping[str | Atom, LispValue], outer: SExpression = EMPTY) -> SExpression:
    """Build an environment from a mapping, placed in front of `outer`."""
    pairs = []
    for name, value in bindings.items():
        if not isinstance(name, Atom):
            name = Atom(name)
        pairs.append(Pair(name, value))
    return make_list(pairs, outer)


def assoc(name: Atom, env: SExpression) -> LispValue:
    """Look up the value bound to `name`.

    Raises MinimaUnboundAtom if the list is exhausted without a match, and
    MinimaTypeError if a node of the list is not a (name . value) pair.
    """
    node = env
    while isinstance(node, Pair):
        binding = node.car
        if not isinstance(binding, Pair):
            raise MinimaTypeError(f"malformed binding in environment: {binding}")
        if binding.car == name:
            return binding.cdr
        node = node.cdr
    raise MinimaUnboundAtom(f"undefined atom: {name}")


def bind(name: Atom, value: LispValue, env: SExpression) -> SExpression:
    """Return `env` extended by the single binding (name . value)."""
    if not isinstance(name, Atom):
        raise MinimaTypeError(f"cannot bind non-atom {name}")
    return Pair(Pair(name, value), env)


def append(front: SExpression, back: SExpression) -> SExpression:
    """Structural concatenation: the elements of `front` followed by `back`."""
    return make_list(list_items(front, "binding list"), back)


def pair_up(names: SExpression, values: SExpression) -> SExpression:
    """Zip parameter names with values into a list of (name . value) bindings.

    Both lists must be nil-terminated and of equal length.
    """
    name_items = list_items(names, "parameter list")
    value_items = list_items(values, "argument list")
    if len(name_items) != len(value_items):
        raise MinimaArityError(
            f"expected {len(name_items)} arguments, got {len(value_items)}"
        )
    bindings = []
    for name, value in zip(name_items, value_items):
        if not isinstance(name, Atom):
            raise MinimaTypeError(f"parameter is not an atom: {name}")
        bindings.append(Pair(name, value))
    return make_list(bindings)
