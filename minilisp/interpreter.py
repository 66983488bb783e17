from __future__ import annotations

import logging
import sys

from minilisp import LispValue
from minilisp.config import get_max_call_depth
from minilisp.errors import CallDepthError
from minilisp.evaluation.evaluator import evaluate
from minilisp.reader.lexer import tokenize
from minilisp.types.environment import Environment

logger = logging.getLogger(__name__)

# Host frames used by one minilisp call nested inside `if` and arithmetic
# operands (evaluate -> handler -> read_operand -> ... -> apply).
FRAMES_PER_CALL = 24
FRAME_HEADROOM = 2000


def reserve_recursion_limit(max_call_depth: int) -> int:
    """
    Raise the host recursion limit so `max_call_depth` nested minilisp calls
    fit. The limit is never lowered. Returns the limit in effect.
    """
    needed = max_call_depth * FRAMES_PER_CALL + FRAME_HEADROOM
    if sys.getrecursionlimit() < needed:
        sys.setrecursionlimit(needed)
        logger.debug("recursion limit raised to %d", needed)
    return sys.getrecursionlimit()


class Interpreter:
    """
    Reads and evaluates minilisp code against one long-lived Environment.
    Variables and functions persist across calls to `eval`.
    """

    def __init__(self, prelude: str | None = None):
        self.env: Environment = Environment()
        if prelude:
            self.eval(prelude)

    def eval(self, code: str) -> LispValue:
        """Evaluate `code` and return the value of its first value-producing form."""
        reserve_recursion_limit(get_max_call_depth())
        cursor = tokenize(code)
        logger.debug("eval %d token(s)", len(cursor.tokens))
        try:
            return evaluate(cursor, self.env)
        except RecursionError as exc:
            raise CallDepthError("maximum nesting depth exceeded") from exc

    def reset(self) -> None:
        """Drop all variables and functions."""
        self.env = Environment()
