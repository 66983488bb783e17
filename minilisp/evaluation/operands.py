"""Shared token-level helpers for the evaluator and the special forms.

Everything here works directly on the Cursor: reading one operand, skipping an
unevaluated operand, and running to the parenthesis that closes the current
form. The evaluator itself is passed in as `evaluate_fn` to avoid an import
cycle with the special-form registry.
"""

from __future__ import annotations

from minilisp import EvaluatorFn, LispValue
from minilisp.errors import MiniLispSyntaxError
from minilisp.reader.cursor import Cursor
from minilisp.reader.lexer import LPAREN, RPAREN, Token
from minilisp.types.environment import Environment


def read_operand(cursor: Cursor, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Evaluate one operand: a nested form, a literal number or a variable."""
    tok = cursor.peek()
    if tok is None:
        raise MiniLispSyntaxError("unexpected end of input")
    if tok == LPAREN:
        return evaluate_fn(cursor, env)
    if tok.kind == "number":
        cursor.consume()
        return tok.value
    if tok.kind == "symbol":
        cursor.consume()
        return env.lookup_var(tok.value)
    raise MiniLispSyntaxError(f"unexpected token: {tok!r}")


def close_form(cursor: Cursor, strict: bool = False) -> None:
    """Consume tokens up to and including the `)` closing the current form.

    Nested forms are skipped by depth counting. Running out of tokens is
    tolerated unless `strict` is set.
    """
    depth = 0
    while (tok := cursor.next()) is not None:
        if tok == RPAREN:
            if depth == 0:
                return
            depth -= 1
        elif tok == LPAREN:
            depth += 1
    if strict:
        raise MiniLispSyntaxError("unexpected end of input: unbalanced parentheses")


def skip_operand(cursor: Cursor) -> None:
    """Step over one operand without evaluating it."""
    tok = cursor.next()
    if tok is None:
        raise MiniLispSyntaxError("unexpected end of input")
    if tok == RPAREN:
        raise MiniLispSyntaxError(f"unexpected token: {tok!r}")
    if tok == LPAREN:
        close_form(cursor)


def expect(cursor: Cursor, expected: Token) -> None:
    tok = cursor.next()
    if tok != expected:
        got = "end of input" if tok is None else repr(tok)
        raise MiniLispSyntaxError(f"expect: '{expected.value}', but got: {got}")


def continue_program(cursor: Cursor, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Value of a form that has none of its own (setq, defun): the next form's, or 0."""
    if cursor.eof():
        return 0
    return evaluate_fn(cursor, env)
