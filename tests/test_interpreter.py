import sys

import pytest
from hypothesis import given, strategies as st

from minilisp.errors import CallDepthError, UnboundIdentifierError
from minilisp.interpreter import FRAME_HEADROOM, FRAMES_PER_CALL, Interpreter, reserve_recursion_limit


def test_session_state_persists_across_evals(interp):
    assert interp.eval("(setq x 10)") == 0
    assert interp.eval("(defun add (a b) (+ a b))") == 0
    assert interp.eval("(add x 5)") == 15


def test_reset_clears_session(interp):
    interp.eval("(setq x 10) (defun f () (+ 1 1))")
    interp.reset()
    assert interp.env.vars == {}
    assert interp.env.funs == {}
    with pytest.raises(UnboundIdentifierError):
        interp.eval("(f)")


def test_prelude_is_evaluated():
    interp = Interpreter(prelude="(defun sq (x) (* x x)) (setq two 2)")
    assert interp.eval("(sq two)") == 4


def test_deep_nesting_is_reported_not_crashed(interp):
    depth = 20000
    source = "(+ 1 " * depth + "1" + ")" * depth
    with pytest.raises(CallDepthError):
        interp.eval(source)


def test_evaluation_works_after_depth_error(interp):
    with pytest.raises(CallDepthError):
        interp.eval("(+ 1 " * 20000 + "1" + ")" * 20000)
    assert interp.eval("(+ 1 (+ 1 1))") == 3


def test_recursion_limit_is_raised_never_lowered(monkeypatch):
    limits = [100]
    monkeypatch.setattr(sys, "getrecursionlimit", lambda: limits[-1])
    monkeypatch.setattr(sys, "setrecursionlimit", limits.append)
    wanted = 10 * FRAMES_PER_CALL + FRAME_HEADROOM
    assert reserve_recursion_limit(10) == wanted
    assert reserve_recursion_limit(1) == wanted
    assert limits == [100, wanted]


programs = st.sampled_from([
    "(+ 1 2 (- 4 2))",
    "(setq x 3 y 6) (+ x y)",
    "(defun fib (x) (if (<= x 1) 1 (+ (fib (- x 1)) (fib (- x 2))))) (fib 9)",
    "(setq a 7) (defun f (n) (* n 2)) (if (> a 5) (f a) (f 1))",
    "(< 3 2 1)",
    "(/ -7 2)",
])


@given(programs)
def test_evaluation_is_deterministic(program):
    first = Interpreter().eval(program)
    second = Interpreter().eval(program)
    assert first == second


@given(st.lists(st.integers(min_value=-1000, max_value=1000), min_size=1, max_size=8))
def test_setq_then_sum_matches_python(values):
    names = [f"v{i}" for i in range(len(values))]
    pairs = " ".join(f"{n} {v}" for n, v in zip(names, values))
    program = f"(setq {pairs}) (+ {' '.join(names)})"
    assert Interpreter().eval(program) == sum(values)
