# Core type aliases for minilisp's data model.
# The language is integer-only: every evaluated value is a Python int kept
# inside the signed 32-bit range. Source is never turned into a tree; the
# evaluator walks the token stream directly.
#
# Naming guidance:
# - LispValue:   an evaluated value (always an int).
# - TokenSeq:    an immutable sequence of reader tokens (e.g. a function body).

from typing import Callable

LispValue = int
TokenSeq = tuple

# Evaluator function type handed to special forms: (cursor, env) -> value
EvaluatorFn = Callable[..., LispValue]

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
