import math

import pytest
from hypothesis import given, strategies as st

from lispy.builtin.env_builtin import make_root_environment
from lispy.errors import ErrorKind
from lispy.evaluation.evaluator import evaluate
from lispy.reader.read import read_str
from lispy.types.error import Error
from lispy.types.expressions import SExpr
from lispy.types.symbol import Symbol

finite = st.floats(allow_nan=False, allow_infinity=False)
nonzero = finite.filter(lambda b: b != 0)


def run(source, env):
    return evaluate(read_str(source), env)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(- 10 3 2)", 5),
        ("(* 2 3 4)", 24),
        ("(/ 12 3)", 4),
        ("(% 10 3)", 1),
        ("(% -7 3)", -1),  # fmod keeps the sign of the dividend
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (+ 20 10) (* 2 5))", 3),
        ("(- (+ 10 5) (* 2 3))", 9),
        ("(+ 1 2.5 3)", 6.5),
        ("(* 1 2 3 4 5 6)", 720),
        ("(+ -1 5 -3)", 1),
        ("(- -10 -5)", -5),
        ("(* -2 3)", -6),
        ("(/ -12 3)", -4),
        ("(/ 1 4)", 0.25),
        ("(- 5)", -5),
        ("(- -5)", 5),
        ("(+ 5)", 5),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),  # 1 + 2*(7*4)
        ("(/ (* (+ 8 2) 5) (- 20 10))", 5),
        ("+ 1 2", 3),  # a line is itself an S-expression
    ]
)
def test_lisp_arithmetic(env, source, expected):
    result = run(source, env)
    assert isinstance(result, float)
    assert result == expected


def test_division_by_zero_is_an_error_value(env):
    result = run("(/ 10 0)", env)
    assert isinstance(result, Error)
    assert result.kind is ErrorKind.DIVISION_BY_ZERO
    assert str(result) == "Error: Division by zero: 10 / 0"


def test_modulo_by_zero_is_an_error_value(env):
    result = run("(% 10 0)", env)
    assert isinstance(result, Error)
    assert result.kind is ErrorKind.MODULO_BY_ZERO


def test_division_by_zero_midway(env):
    result = run("(/ 10 2 0 5)", env)
    assert result.kind is ErrorKind.DIVISION_BY_ZERO


def test_non_number_argument(env):
    result = run("(+ 1 {2})", env)
    assert result == Error(ErrorKind.WRONG_TYPE, "Cannot apply + to a Q-expression.")


def test_non_number_symbol_argument(env):
    result = run("(* 2 head)", env)
    assert result.kind is ErrorKind.WRONG_TYPE
    assert "function" in result.message


def test_ieee_values_propagate(env):
    big = SExpr([Symbol("*"), 1e308, 10.0])
    assert math.isinf(evaluate(big, env))
    nan = evaluate(SExpr([Symbol("-"), math.inf, math.inf]), env)
    assert math.isnan(nan)


@given(finite, finite)
def test_addition_subtraction_multiplication(a, b):
    env = make_root_environment()
    assert evaluate(SExpr([Symbol("+"), a, b]), env) == a + b
    assert evaluate(SExpr([Symbol("-"), a, b]), env) == a - b
    assert evaluate(SExpr([Symbol("*"), a, b]), env) == a * b


@given(finite, nonzero)
def test_division(a, b):
    env = make_root_environment()
    assert evaluate(SExpr([Symbol("/"), a, b]), env) == a / b
    assert evaluate(SExpr([Symbol("%"), a, b]), env) == math.fmod(a, b)


decimal_text = st.builds(
    lambda sign, whole, frac: f"{sign}{whole}.{frac}",
    st.sampled_from(["", "-"]),
    st.integers(min_value=0, max_value=10**9),
    st.integers(min_value=0, max_value=10**6),
)


@given(decimal_text, decimal_text)
def test_arithmetic_on_decimal_source(x, y):
    env = make_root_environment()
    a, b = float(x), float(y)
    assert run(f"(+ {x} {y})", env) == a + b
    assert run(f"(- {x} {y})", env) == a - b
    assert run(f"(* {x} {y})", env) == a * b
    if b != 0:
        assert run(f"(/ {x} {y})", env) == a / b


@given(st.integers(min_value=-10**6, max_value=10**6))
def test_division_by_zero_never_raises(a):
    env = make_root_environment()
    assert run(f"(/ {a} 0)", env).kind is ErrorKind.DIVISION_BY_ZERO
    assert run(f"(% {a} 0)", env).kind is ErrorKind.MODULO_BY_ZERO
