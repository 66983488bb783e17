from __future__ import annotations

import operator

from minilisp import EvaluatorFn, LispValue
from minilisp.evaluation.operands import read_operand
from minilisp.reader.cursor import Cursor
from minilisp.reader.lexer import RPAREN, Token
from minilisp.types.environment import Environment


COMPARATORS = {
    "eq": operator.eq,
    "ne": operator.ne,
    "lt": operator.lt,
    "le": operator.le,
    "gt": operator.gt,
    "ge": operator.ge,
}


def comparison_form(
    head: Token,
    cursor: Cursor,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (< a b c ...)
    Chains through the previous 0/1 result: (< 3 2 1) is (< (< 3 2) 1), i.e. 1.
    """
    compare = COMPARATORS[head.kind]
    target = read_operand(cursor, env, evaluate_fn)
    while (tok := cursor.peek()) is not None:
        if tok == RPAREN:
            cursor.consume()
            break
        num = read_operand(cursor, env, evaluate_fn)
        target = 1 if compare(target, num) else 0
    return target
