from minilisp import EvaluatorFn, LispValue
from minilisp.evaluation.operands import close_form, read_operand, skip_operand
from minilisp.reader.cursor import Cursor
from minilisp.reader.lexer import Token
from minilisp.types.environment import Environment


def if_form(
    head: Token,
    cursor: Cursor,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    cond = read_operand(cursor, env, evaluate_fn)

    # Any nonzero integer is true; only the chosen branch is evaluated
    if cond != 0:
        value = read_operand(cursor, env, evaluate_fn)
    else:
        skip_operand(cursor)
        value = read_operand(cursor, env, evaluate_fn)

    # Drop whatever is left (the else branch) along with the closing paren
    close_form(cursor)
    return value
