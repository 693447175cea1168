"""
  Minima Reader, Lexer and Parser

- Streaming, lazy: `lex` is a generator, so the parser pulls one token at a
  time and a lexical error surfaces only when the parser reaches it.
- Canonical dotted-pair dialect only:

    - atoms -> Atom (a maximal run of letters)
    - (X.Y) -> Pair(X, Y)

  Whitespace separates tokens and is otherwise ignored. The looser list
  notation is handled by minima.reader.desugar before reading.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional

from minima import SExpression
from minima.errors import MinimaLexicalError, MinimaSyntaxError
from minima.types.atom import Atom
from minima.types.pair import Pair

logger = logging.getLogger(__name__)

TOKEN_RE = re.compile(
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<dot>\.)"  # pair separator
)


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        ch = source[pos]
        if ch.isspace():
            pos += 1
            continue
        if ch.isalpha():
            # Atoms are runs of str.isalpha characters, the same test Atom applies.
            end = pos + 1
            while end < n and source[end].isalpha():
                end += 1
            yield "atom", source[pos:end]
            pos = end
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise MinimaLexicalError(f"illegal character {source[pos]!r} at {pos}")
        yield m.lastgroup, m.group()
        pos = m.end()


def _describe(tok_type: Optional[str], tok_val: Optional[str]) -> str:
    if tok_type is None:
        return "end of input"
    return repr(tok_val)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def expect(self, tok_type: str, what: str) -> None:
        got_type, got_val = self.advance()
        if got_type != tok_type:
            raise MinimaSyntaxError(f"expected {what}, got {_describe(got_type, got_val)}")

    def parse_expr(self) -> SExpression:
        """Parse one expression without recursing on nesting depth.

        `pending` holds the open pairs: an empty frame is still waiting for
        its car, a one-element frame ``[car]`` has seen the dot and waits for
        its cdr.
        """
        pending: list[list[SExpression]] = []
        while True:
            tok_type, tok_val = self.advance()

            if tok_type is None:
                raise MinimaSyntaxError("unexpected end of input")

            if tok_type == "lparen":
                pending.append([])
                continue

            if tok_type != "atom":
                # rparen or dot where an expression must start
                raise MinimaSyntaxError(f"unexpected {tok_val}")

            value: SExpression = Atom(tok_val)
            while pending:
                frame = pending[-1]
                if not frame:
                    frame.append(value)
                    self.expect("dot", "'.'")
                    break
                self.expect("rparen", "')'")
                pending.pop()
                value = Pair(frame[0], value)
            else:
                return value

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read(source: str) -> SExpression:
    """Read exactly one expression from `source`."""
    stream = TokenStream(lex(source))
    expr = stream.parse_expr()
    tok_type, tok_val = stream.peek()
    if tok_type is not None:
        raise MinimaSyntaxError(f"unexpected {tok_val} after expression")
    logger.debug("read %s", expr)
    return expr


def read_all(source: str) -> Iterator[SExpression]:
    """Read every expression in `source`, one at a time."""
    return TokenStream(lex(source)).parse_all()
