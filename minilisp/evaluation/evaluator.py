"""Core evaluator for the minilisp interpreter.

Walks the token stream directly: each call reads one form from the Cursor,
dispatching special forms through SPECIAL_FORMS, resolving bare identifiers
to variables or function calls, and recursing for nested forms.
"""

from __future__ import annotations

from minilisp import LispValue
from minilisp.errors import MiniLispSyntaxError, UnboundIdentifierError
from minilisp.evaluation.apply import apply
from minilisp.evaluation.special_forms import SPECIAL_FORMS
from minilisp.reader.cursor import Cursor
from minilisp.reader.lexer import LPAREN, RPAREN
from minilisp.types.environment import Environment


def evaluate(cursor: Cursor, env: Environment) -> LispValue:
    """
    Evaluate the form at the cursor and return its int32 value.

    Raises a MiniLispError subclass on any failure. An exhausted cursor
    evaluates to 0.
    """
    tok = cursor.next()
    if tok is not None and tok != LPAREN:
        raise MiniLispSyntaxError(f"expect: '(', but got: {tok!r}")

    head = cursor.peek()
    if head is None:
        return 0

    handler = SPECIAL_FORMS.get(head)
    if handler is not None:
        cursor.consume()
        return handler(head, cursor, env, evaluate)

    match head.kind:
        case "symbol":
            return evaluate_identifier(head.value, cursor, env)
        case "number":
            cursor.consume()
            _close_bare_form(cursor)
            return head.value

    raise MiniLispSyntaxError(f"unexpected token: {head!r}")


def evaluate_identifier(name: str, cursor: Cursor, env: Environment) -> LispValue:
    """A bare identifier heads the form: a variable's value, or a function call."""
    if name in env.vars:
        cursor.consume()
        _close_bare_form(cursor)
        return env.vars[name]

    fn = env.get_function(name)
    if fn is not None:
        cursor.consume()
        return apply(fn, cursor, env, evaluate)

    raise UnboundIdentifierError(f"invalid ident: '{name}'")


def _close_bare_form(cursor: Cursor) -> None:
    # A bare value does not require its closing paren; take it only when it
    # comes next, leaving any other trailing tokens unread.
    if cursor.peek() == RPAREN:
        cursor.consume()
