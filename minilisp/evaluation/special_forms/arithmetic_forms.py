"""Special forms: + - * /

Left fold over int32 operands with checked arithmetic. Division truncates
toward zero. Any overflow or division by zero fails the whole form.
"""

from __future__ import annotations

from typing import Callable, Optional

from minilisp import EvaluatorFn, LispValue, INT32_MIN, INT32_MAX
from minilisp.errors import ArithmeticFailure
from minilisp.evaluation.operands import read_operand
from minilisp.reader.cursor import Cursor
from minilisp.reader.lexer import RPAREN, Token
from minilisp.types.environment import Environment


def _in_range(value: int) -> Optional[int]:
    return value if INT32_MIN <= value <= INT32_MAX else None


def checked_add(a: int, b: int) -> Optional[int]:
    return _in_range(a + b)


def checked_sub(a: int, b: int) -> Optional[int]:
    return _in_range(a - b)


def checked_mul(a: int, b: int) -> Optional[int]:
    return _in_range(a * b)


def checked_div(a: int, b: int) -> Optional[int]:
    if b == 0:
        return None
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    # INT32_MIN / -1 is the only quotient that leaves the range
    return _in_range(q)


CHECKED_OPS: dict[str, Callable[[int, int], Optional[int]]] = {
    "plus": checked_add,
    "minus": checked_sub,
    "asterisk": checked_mul,
    "slash": checked_div,
}


def arithmetic_form(
    head: Token,
    cursor: Cursor,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    calc = CHECKED_OPS[head.kind]
    acc = read_operand(cursor, env, evaluate_fn)
    while (tok := cursor.peek()) is not None:
        if tok == RPAREN:
            cursor.consume()
            break
        num = read_operand(cursor, env, evaluate_fn)
        result = calc(acc, num)
        if result is None:
            raise ArithmeticFailure()
        acc = result
    return acc
