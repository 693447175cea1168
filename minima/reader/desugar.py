"""Text-to-text rewrite of the loose list notation into dotted pairs.

Applied once, before reading:

    (a b c)    -> (a.(b.c))
    (a b . c)  -> (a.(b.c))
    (a . b)    -> (a.b)
    ()         -> nil

There is no implicit nil: write ``(a b nil)`` for a proper two-element list.
Input the rewrite cannot make sense of (unbalanced parens, a misplaced dot,
a one-element group) is handed on as-is so the reader reports the error.
"""

from __future__ import annotations

import re

SUGAR_TOKEN_RE = re.compile(r"\(|\)|\.|[^\s().]+")


class _Malformed(Exception):
    pass


def _nest(items: list[str], tail: str) -> str:
    result = tail
    for item in reversed(items):
        result = f"({item}.{result})"
    return result


def _group(tokens: list[str], pos: int) -> tuple[str, int]:
    tok = tokens[pos]
    if tok == ")" or tok == ".":
        raise _Malformed(tok)
    if tok != "(":
        return tok, pos + 1

    pos += 1
    items: list[str] = []
    tail = None
    while True:
        if pos >= len(tokens):
            raise _Malformed("unbalanced")
        tok = tokens[pos]
        if tok == ")":
            pos += 1
            break
        if tail is not None:
            raise _Malformed("item after dotted tail")
        if tok == ".":
            if not items:
                raise _Malformed("dot at start of list")
            tail, pos = _group(tokens, pos + 1)
            continue
        item, pos = _group(tokens, pos)
        items.append(item)

    if tail is not None:
        return _nest(items, tail), pos
    if not items:
        return "nil", pos
    if len(items) == 1:
        # Left for the reader to reject.
        return f"({items[0]})", pos
    return _nest(items[:-1], items[-1]), pos


def desugar(source: str) -> str:
    """Rewrite `source` into canonical dotted-pair text."""
    tokens = SUGAR_TOKEN_RE.findall(source)
    out = []
    pos = 0
    try:
        while pos < len(tokens):
            text, pos = _group(tokens, pos)
            out.append(text)
    except _Malformed:
        return source
    return " ".join(out)
