from __future__ import annotations

from typing import Iterable, Optional


class Cursor:
    """Read position over a fixed token sequence. Only moves forward."""

    __slots__ = ("tokens", "_pos")

    def __init__(self, tokens: Iterable, pos: int = 0):
        self.tokens: tuple = tuple(tokens)
        self._pos: int = pos

    @property
    def pos(self) -> int:
        return self._pos

    def eof(self) -> bool:
        return self._pos >= len(self.tokens)

    def peek(self) -> Optional[tuple]:
        if self._pos < len(self.tokens):
            return self.tokens[self._pos]
        return None

    def next(self) -> Optional[tuple]:
        tok = self.peek()
        if tok is not None:
            self._pos += 1
        return tok

    def consume(self) -> None:
        if self._pos < len(self.tokens):
            self._pos += 1

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Cursor)
            and self.tokens == other.tokens
            and self._pos == other._pos
        )

    def __repr__(self):
        return f"Cursor(pos={self._pos}, tokens={list(self.tokens)!r})"
