from __future__ import annotations
import sys

from minima.errors import MinimaLexicalError


class Atom:
    """An indivisible symbolic name made of letters only."""

    __slots__ = ("id",)

    def __init__(self, name: str):
        if not name or not name.isalpha():
            raise MinimaLexicalError(f"illegal atom {name!r}")
        # Intern to ensure fast equality/hash and reduce memory
        object.__setattr__(self, "id", sys.intern(name))

    def __setattr__(self, key, value):
        raise AttributeError("Atom is immutable")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Atom) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Atom({self.id!r})"

    def __str__(self):
        return self.id


T = Atom("t")
NIL = Atom("nil")


def truth(flag: bool) -> Atom:
    """Map a Python bool onto the truth atoms."""
    return T if flag else NIL
