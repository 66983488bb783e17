"""User-defined function representation for minilisp."""

from __future__ import annotations

from io import StringIO

from minilisp import TokenSeq


class Function:
    """A named function: positional parameter names plus the body token slice.

    The body is kept exactly as written, wrapping parentheses included, and is
    re-read with a fresh Cursor on every call.
    """

    __slots__ = ("name", "params", "body")

    def __init__(self, name: str, params: list[str], body: TokenSeq):
        self.name: str = name
        self.params: tuple[str, ...] = tuple(params)
        self.body: TokenSeq = tuple(body)

    @property
    def arity(self) -> int:
        return len(self.params)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Function)
            and self.params == other.params
            and self.body == other.body
        )

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write(f"(defun {self.name} (")
            buffer.write(" ".join(self.params))
            buffer.write(") ")
            buffer.write(" ".join(str(tok[1]) for tok in self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Function {self.name}/{self.arity}>"
