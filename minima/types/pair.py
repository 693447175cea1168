"""Pairs and the nil-terminated list helpers built on them.

A list is a chain of pairs ending in the atom ``nil``:
``(a.(b.(c.nil)))``. Traversals that need a proper list reject any other
terminator.
"""

from __future__ import annotations

from typing import Iterable, Union

from minima.errors import MinimaTypeError
from minima.types.atom import Atom, NIL


class Pair:
    """An immutable (car . cdr) cell."""

    __slots__ = ("car", "cdr")

    def __init__(self, car: Union[Atom, Pair], cdr: Union[Atom, Pair]):
        if not isinstance(car, (Atom, Pair)) or not isinstance(cdr, (Atom, Pair)):
            raise MinimaTypeError(f"cannot build a pair from {car!r} and {cdr!r}")
        object.__setattr__(self, "car", car)
        object.__setattr__(self, "cdr", cdr)

    def __setattr__(self, key, value):
        raise AttributeError("Pair is immutable")

    def __eq__(self, other: object) -> bool:
        # Structural, iterative along the cdr chain.
        a, b = self, other
        while isinstance(a, Pair):
            if not isinstance(b, Pair) or a.car != b.car:
                return False
            a, b = a.cdr, b.cdr
        return a == b

    def __hash__(self) -> int:
        h = 0
        expr = self
        while isinstance(expr, Pair):
            h = hash((h, expr.car))
            expr = expr.cdr
        return hash((h, expr))

    def __str__(self) -> str:
        from minima.debug_utils.pprint import to_canonical
        return to_canonical(self)

    def __repr__(self) -> str:
        return f"Pair({self.car!r}, {self.cdr!r})"


def cons(car: Union[Atom, Pair], cdr: Union[Atom, Pair]) -> Pair:
    return Pair(car, cdr)


def make_list(items: Iterable[Union[Atom, Pair]], tail: Union[Atom, Pair] = NIL) -> Union[Atom, Pair]:
    """Build ``(i1.(i2.(... . tail)))`` from a Python iterable."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def list_items(expr: Union[Atom, Pair], what: str = "list") -> list[Union[Atom, Pair]]:
    """Return the elements of a proper (nil-terminated) list.

    Raises MinimaTypeError if the chain ends in any atom other than nil.
    """
    items = []
    while isinstance(expr, Pair):
        items.append(expr.car)
        expr = expr.cdr
    if expr != NIL:
        raise MinimaTypeError(f"{what} is not nil-terminated: ends in {expr}")
    return items
