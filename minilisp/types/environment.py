"""Runtime environment for minilisp.

An Environment holds two flat tables: variables (name -> int) and functions
(name -> Function). There is no `outer` chain. A function call gets a fresh
child whose variables are only the call's arguments and whose function table
is a copy of the caller's, so recursion and sibling calls work while caller
variables stay invisible.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from minilisp import LispValue
from minilisp.errors import UnboundIdentifierError
from minilisp.types.function import Function


class Environment:
    """Variable and function tables for one evaluation scope."""

    __slots__ = ("vars", "funs", "depth")

    def __init__(
        self,
        funs: Optional[dict[str, Function]] = None,
        depth: int = 0,
    ):
        self.vars: dict[str, LispValue] = {}
        self.funs: dict[str, Function] = dict(funs) if funs else {}
        self.depth: int = depth

    def child(self) -> Environment:
        """Environment for a call made from this one: empty vars, copied funs."""
        return Environment(self.funs, self.depth + 1)

    def set_var(self, name: str, value: LispValue) -> None:
        self.vars[name] = value

    def lookup_var(self, name: str) -> LispValue:
        """Look up a variable; raises UnboundIdentifierError if it is not bound."""
        try:
            return self.vars[name]
        except KeyError:
            raise UnboundIdentifierError(f"unbound variable: '{name}'") from None

    def define_function(self, fn: Function) -> None:
        self.funs[fn.name] = fn

    def get_function(self, name: str) -> Optional[Function]:
        return self.funs.get(name)

    def _write_table(self, buffer: StringIO, table: dict) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in table.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("vars=")
            self._write_table(buffer, self.vars)
            buffer.write(" funs=")
            self._write_table(buffer, self.funs)
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment depth={self.depth} {self}>"
