import logging

from minilisp import EvaluatorFn, LispValue
from minilisp.errors import MalformedDeclarationError, MiniLispSyntaxError
from minilisp.evaluation.operands import close_form, continue_program, expect
from minilisp.reader.cursor import Cursor
from minilisp.reader.lexer import LPAREN, RPAREN, Token
from minilisp.types.environment import Environment
from minilisp.types.function import Function

logger = logging.getLogger(__name__)


def defun_form(
    head: Token,
    cursor: Cursor,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (defun name (params...) (body))
    The body is stored as its balanced token slice, parentheses included.
    Redefinition overwrites. Like setq, the result is that of the following form.
    """
    name_tok = cursor.next()
    if name_tok is None or name_tok.kind != "symbol":
        raise MalformedDeclarationError(f"defun expects a function name, got {name_tok!r}")

    expect(cursor, LPAREN)
    params: list[str] = []
    while (tok := cursor.next()) != RPAREN:
        if tok is None:
            raise MiniLispSyntaxError(f"unterminated parameter list in defun {name_tok.value}")
        if tok.kind != "symbol":
            raise MalformedDeclarationError(f"invalid ident: {tok!r}")
        params.append(tok.value)

    start = cursor.pos
    expect(cursor, LPAREN)
    close_form(cursor, strict=True)
    body = cursor.tokens[start:cursor.pos]

    fn = Function(name_tok.value, params, body)
    env.define_function(fn)
    logger.debug("defined %s", fn)

    expect(cursor, RPAREN)
    return continue_program(cursor, env, evaluate_fn)
