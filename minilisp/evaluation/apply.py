"""Application engine for minilisp.

Function calls use dynamic, non-closing scope: the callee runs in a child
Environment that sees the caller's function table (copied at call time, so
recursion and sibling calls work) but none of the caller's variables. The
body is re-read from its stored tokens with a fresh Cursor.
"""

from __future__ import annotations

import logging

from minilisp import EvaluatorFn, LispValue
from minilisp.config import get_max_call_depth
from minilisp.errors import ArityError, CallDepthError
from minilisp.evaluation.operands import read_operand
from minilisp.reader.cursor import Cursor
from minilisp.reader.lexer import RPAREN
from minilisp.types.environment import Environment
from minilisp.types.function import Function

logger = logging.getLogger(__name__)


def bind_arguments(fn: Function, args: list[LispValue], caller_env: Environment) -> Environment:
    """Return the call Environment for `fn` with `args` bound positionally."""
    if len(args) != fn.arity:
        raise ArityError(
            f"{fn.name} expects {fn.arity} argument(s), got {len(args)}"
        )
    max_depth = get_max_call_depth()
    if caller_env.depth >= max_depth:
        raise CallDepthError(f"maximum call depth {max_depth} exceeded calling {fn.name}")

    call_env = caller_env.child()
    for name, value in zip(fn.params, args):
        call_env.set_var(name, value)
    return call_env


def apply(
    fn: Function,
    cursor: Cursor,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Evaluate the call's operands (up to and including `)`) in `env`, then run `fn`."""
    args: list[LispValue] = []
    while (tok := cursor.peek()) is not None:
        if tok == RPAREN:
            cursor.consume()
            break
        args.append(read_operand(cursor, env, evaluate_fn))

    call_env = bind_arguments(fn, args, env)
    logger.debug("call %s%r at depth %d", fn.name, tuple(args), call_env.depth)
    return evaluate_fn(Cursor(fn.body), call_env)
