"""
  Lisp Reader: tokenizer and recursive-descent parser

Emits Python primitives instead of cons cells:

    - numbers -> float
    - symbols -> Symbol
    - lists -> Python list

There is no comment syntax, no string or character literals and no quote
shorthand: `(quote x)` is the only way to quote.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Iterator, Optional

from lispy import SExpression
from lispy.errors import LispySyntaxError
from lispy.types.symbol import Symbol

logger = logging.getLogger(__name__)

LPAREN = "("
RPAREN = ")"
NESTED_TOO_DEEPLY = "expression nested too deeply"

NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def tokenize(source: str) -> list[str]:
    """Split source text into tokens; parentheses always stand alone."""
    return source.replace(LPAREN, " ( ").replace(RPAREN, " ) ").split()


def atom(token: str) -> SExpression:
    """Numbers become floats; every other token is a Symbol, case preserved."""
    if NUMBER_RE.fullmatch(token):
        return float(token)
    return Symbol(token)


class TokenStream:
    def __init__(self, tokens: Iterable[str]):
        self.tokens = iter(tokens)
        self.buffer: list[str] = []

    def peek(self) -> Optional[str]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[str]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def parse_expr(self) -> SExpression:
        token = self.advance()
        if token is None:
            raise LispySyntaxError("unexpected end of input")

        if token == LPAREN:
            items = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise LispySyntaxError("unexpected end of input")
                if nxt == RPAREN:
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if token == RPAREN:
            raise LispySyntaxError("unmatched close")

        return atom(token)

    def parse_all(self) -> Iterator[SExpression]:
        while self.peek() is not None:
            yield self.parse_expr()


def parse(source: str) -> SExpression:
    """Read exactly one expression from `source`."""
    stream = TokenStream(tokenize(source))
    try:
        expr = stream.parse_expr()
    except RecursionError:
        raise LispySyntaxError(NESTED_TOO_DEEPLY) from None
    extra = stream.peek()
    if extra is not None:
        if extra == RPAREN:
            raise LispySyntaxError("unmatched close")
        raise LispySyntaxError(f"unexpected token after expression: {extra!r}")
    logger.debug("parsed %r", expr)
    return expr


def parse_all(source: str) -> Iterator[SExpression]:
    """Read every top-level expression in a program text, lazily."""
    stream = TokenStream(tokenize(source))
    try:
        yield from stream.parse_all()
    except RecursionError:
        raise LispySyntaxError(NESTED_TOO_DEEPLY) from None
