import pytest
from hypothesis import given, strategies as st

from minilisp import INT32_MAX, INT32_MIN
from minilisp.errors import ArithmeticFailure
from minilisp.evaluation.evaluator import evaluate
from minilisp.evaluation.special_forms.arithmetic_forms import checked_div
from minilisp.reader.lexer import tokenize
from minilisp.types.environment import Environment


def run(source, env):
    return evaluate(tokenize(source), env)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", 3),
        ("(+ 1 2 3)", 6),
        ("(- 3 2 1)", 0),
        ("(- 1 2 3)", -4),
        ("(* 1 2 3)", 6),
        ("(/ 8 4 2)", 1),
        ("(+ 5)", 5),
        ("(- 5)", 5),                       # a single operand is the result, not a negation
        ("(+ -1 5 -3)", 1),
        ("(* -2 3)", -6),
        ("(/ 7 2)", 3),
        ("(/ -7 2)", -3),                   # truncates toward zero
        ("(/ 7 -2)", -3),
        ("(/ -7 -2)", 3),
        ("(+ (* 5 3) 5)", 20),
        ("(+ (* 5 (- 4 2) 3) 5)", 35),
        ("(+ (* 5 3 (- 4 2)) 5)", 35),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),
        ("(+ t t nil)", 2),
        ("(+ 2147483646 1)", INT32_MAX),
        ("(- -2147483647 1)", INT32_MIN),
        ("(/ -2147483648 1)", INT32_MIN),
    ]
)
def test_arithmetic(env, source, expected):
    assert run(source, env) == expected


@pytest.mark.parametrize(
    "source",
    [
        "(/ 8 4 0)",
        "(/ 1 0)",
        "(/ 0 0)",
        "(+ 2147483647 1)",
        "(- -2147483648 1)",
        "(* 65536 65536)",
        "(* -2147483648 -1)",
        "(/ -2147483648 -1)",
        "(+ 1 (/ 1 0))",
        "(+ 2147483647 1 -5)",              # no recovery once the fold has failed
    ]
)
def test_failed_calculation(env, source):
    with pytest.raises(ArithmeticFailure, match="failed calculation"):
        run(source, env)


def test_failed_calculation_leaves_environment_unmodified(env):
    run("(setq x 1)", env)
    with pytest.raises(ArithmeticFailure):
        run("(/ 8 4 0)", env)
    assert env.vars == {"x": 1}
    assert env.funs == {}


def test_operands_may_be_variables(env):
    assert run("(setq x 42) (* x 2)", env) == 84


def test_fold_stops_at_closing_paren(env):
    assert run("(+ 1 2) (+ 100 100)", env) == 3


# -------------------------------
# Hypothesis tests
# -------------------------------

int32 = st.integers(min_value=INT32_MIN, max_value=INT32_MAX)


def _model_fold(op, values):
    acc = values[0]
    for v in values[1:]:
        acc = {"+": acc + v, "-": acc - v, "*": acc * v}[op]
        if not INT32_MIN <= acc <= INT32_MAX:
            return None
    return acc


@given(st.sampled_from(["+", "-", "*"]), st.lists(int32, min_size=1, max_size=6))
def test_fold_matches_checked_model(op, values):
    env = Environment()
    source = f"({op} {' '.join(map(str, values))})"
    expected = _model_fold(op, values)
    if expected is None:
        with pytest.raises(ArithmeticFailure):
            run(source, env)
    else:
        assert run(source, env) == expected


@given(int32, int32.filter(lambda b: b != 0))
def test_checked_div_truncates_toward_zero(a, b):
    q = checked_div(a, b)
    if a == INT32_MIN and b == -1:
        assert q is None
    else:
        assert q is not None
        assert abs(q) == abs(a) // abs(b)
        assert q * b + (a - q * b) == a
        assert abs(a - q * b) < abs(b)
        # remainder takes the sign of the dividend
        assert (a - q * b) == 0 or (a - q * b > 0) == (a > 0)
