from minilisp import EvaluatorFn, LispValue
from minilisp.errors import MalformedDeclarationError
from minilisp.evaluation.operands import continue_program
from minilisp.reader.cursor import Cursor
from minilisp.reader.lexer import LPAREN, RPAREN, Token
from minilisp.types.environment import Environment


def setq_form(
    head: Token,
    cursor: Cursor,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (setq name value [name value ...])
    A value is a nested form or a literal number. setq has no value of its
    own; the result is that of the following form.
    """
    while (tok := cursor.peek()) is not None:
        if tok == RPAREN:
            cursor.consume()
            break
        name_tok = cursor.next()
        if name_tok.kind != "symbol":
            raise MalformedDeclarationError(f"setq expects a variable name, got {name_tok!r}")

        value_tok = cursor.peek()
        if value_tok == LPAREN:
            value = evaluate_fn(cursor, env)
        elif value_tok is not None and value_tok.kind == "number":
            cursor.consume()
            value = value_tok.value
        else:
            got = "end of input" if value_tok is None else repr(value_tok)
            raise MalformedDeclarationError(
                f"setq expects a value for '{name_tok.value}', got {got}"
            )
        env.set_var(name_tok.value, value)

    return continue_program(cursor, env, evaluate_fn)
