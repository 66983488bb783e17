"""
  minilisp lexer

- Parentheses are always tokens of their own; everything else is split on
  whitespace.
- Emits (kind, value) tuples:

    - ( )                  -> ("lparen", "("), ("rparen", ")")
    - + - * /              -> ("plus", "+"), ("minus", "-"), ("asterisk", "*"), ("slash", "/")
    - = /= < <= > >=       -> ("eq", "="), ("ne", "/="), ("lt", "<"), ("le", "<="), ("gt", ">"), ("ge", ">=")
    - if                   -> ("if", "if")
    - t / nil              -> ("number", 1) / ("number", 0)
    - int32 numerals       -> ("number", int)
    - anything else        -> ("symbol", str)

n.b. unbalanced parentheses are not reported here; the evaluator finds them
when (and if) it reaches them.
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple

from minilisp import INT32_MIN, INT32_MAX
from minilisp.reader.cursor import Cursor


class Token(NamedTuple):
    kind: str
    value: object

    def __repr__(self):
        if self.kind in ("number", "symbol"):
            return f"{self.kind.capitalize()}({self.value!r})"
        return self.kind.capitalize()


LPAREN = Token("lparen", "(")
RPAREN = Token("rparen", ")")

TOKEN_RE = re.compile(r"[()]|[^\s()]+")
NUMBER_RE = re.compile(r"[+-]?[0-9]+")

RESERVED: dict[str, Token] = {
    "(": LPAREN,
    ")": RPAREN,
    "+": Token("plus", "+"),
    "-": Token("minus", "-"),
    "*": Token("asterisk", "*"),
    "/": Token("slash", "/"),
    "=": Token("eq", "="),
    "/=": Token("ne", "/="),
    "<": Token("lt", "<"),
    "<=": Token("le", "<="),
    ">": Token("gt", ">"),
    ">=": Token("ge", ">="),
    "t": Token("number", 1),
    "nil": Token("number", 0),
    "if": Token("if", "if"),
}


def to_token(word: str) -> Token:
    """Classify one whitespace-delimited word."""
    reserved = RESERVED.get(word)
    if reserved is not None:
        return reserved
    if NUMBER_RE.fullmatch(word):
        num = int(word)
        # Out-of-range numerals do not parse as int32 and fall back to symbols
        if INT32_MIN <= num <= INT32_MAX:
            return Token("number", num)
    return Token("symbol", word)


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token(kind, value) tuples."""
    for match in TOKEN_RE.finditer(source):
        yield to_token(match.group())


def tokenize(source: str) -> Cursor:
    """Lex `source` and return a Cursor positioned at its first token."""
    return Cursor(lex(source))
