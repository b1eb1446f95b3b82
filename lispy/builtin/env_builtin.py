"""Built-in functions for the Lispy runtime environment.

This module defines list processing, arithmetic, definition, lambda creation
and the nullary `env`/`exit` builtins, plus `register` which installs them as
locked bindings. Every builtin has the signature `(env, args) -> value` and
reports invalid input by raising a LispyError subclass.
"""
from __future__ import annotations

import logging
import math
from typing import Callable

from lispy.errors import (
    LispyArityError,
    LispyDefMismatch,
    LispyDivisionByZero,
    LispyEmptyList,
    LispyModuloByZero,
    LispyTypeError,
)
from lispy.evaluation.evaluator import evaluate
from lispy.types.builtin import Builtin
from lispy.types.environment import Environment
from lispy.types.expressions import QExpr, SExpr
from lispy.types.lambda_fn import Lambda
from lispy.types.symbol import REST_MARKERS, Symbol
from lispy.types.value import Number, Value, format_number, is_number, type_name

logger = logging.getLogger(__name__)


# -------------------------------
# Argument checks
# -------------------------------
def _expect_count(name: str, args: list[Value], count: int) -> None:
    if len(args) < count:
        raise LispyArityError(
            f"Function '{name}' passed too few arguments. Expected {count} but got {len(args)}."
        )
    if len(args) > count:
        raise LispyArityError(
            f"Function '{name}' passed too many arguments. Expected {count} but got {len(args)}."
        )


def _expect_qexpr(name: str, value: Value) -> QExpr:
    if not isinstance(value, QExpr):
        raise LispyTypeError(
            f"Function '{name}' passed incorrect type. Expected Q-expression but got {type_name(value)}."
        )
    return value


def _single_nonempty_list(name: str, args: list[Value]) -> QExpr:
    _expect_count(name, args, 1)
    q = _expect_qexpr(name, args[0])
    if not q:
        raise LispyEmptyList(f"Function '{name}' passed {{ }}.")
    return q


# -------------------------------
# List operations
# -------------------------------
def list_builtin(env: Environment, args: list[Value]) -> QExpr:
    """(list a b ...) => {a b ...}"""
    return QExpr(args)


def head(env: Environment, args: list[Value]) -> QExpr:
    """Q-expression holding only the first element."""
    return QExpr(_single_nonempty_list("head", args)[:1])


def tail(env: Environment, args: list[Value]) -> QExpr:
    """Q-expression with the first element removed."""
    return QExpr(_single_nonempty_list("tail", args)[1:])


def init(env: Environment, args: list[Value]) -> QExpr:
    """Q-expression with the last element removed."""
    return QExpr(_single_nonempty_list("init", args)[:-1])


def last(env: Environment, args: list[Value]) -> QExpr:
    """Q-expression holding only the last element."""
    return QExpr(_single_nonempty_list("last", args)[-1:])


def cons(env: Environment, args: list[Value]) -> QExpr:
    """(cons x {a b}) => {x a b}"""
    _expect_count("cons", args, 2)
    value, rest = args
    return QExpr([value, *_expect_qexpr("cons", rest)])


def length(env: Environment, args: list[Value]) -> Number:
    _expect_count("len", args, 1)
    return float(len(_expect_qexpr("len", args[0])))


def join(env: Environment, args: list[Value]) -> QExpr:
    """Concatenate any number of Q-expressions."""
    if not args:
        raise LispyArityError("Function 'join' passed too few arguments. Expected 1 but got 0.")
    joined = QExpr()
    for arg in args:
        joined.extend(_expect_qexpr("join", arg))
    return joined


def eval_builtin(env: Environment, args: list[Value]) -> Value:
    """Evaluate a Q-expression as if it were an S-expression."""
    _expect_count("eval", args, 1)
    return evaluate(SExpr(_expect_qexpr("eval", args[0])), env)


# -------------------------------
# Definitions and functions
# -------------------------------
def define(env: Environment, args: list[Value]) -> SExpr:
    """(def {a b} 1 2) binds a and b in the environment def runs in.

    Redefining a locked name is a soft failure: the binding is left alone and
    def still returns ().
    """
    if not args:
        raise LispyArityError("Function 'def' passed too few arguments. Expected 1 but got 0.")
    names = _expect_qexpr("def", args[0])
    for name in names:
        if not isinstance(name, Symbol):
            raise LispyTypeError(f"Function 'def' cannot define non-symbols (got a {type_name(name)}).")
    values = args[1:]
    if len(names) != len(values):
        raise LispyDefMismatch(
            f"Function 'def' cannot define mismatched numbers of symbols ({len(names)}) and values ({len(values)})."
        )
    for name, value in zip(names, values):
        env.define(name, value)
    return SExpr()


def lambda_builtin(env: Environment, args: list[Value]) -> Lambda:
    """(\\ {x y} {+ x y}) => closure over the current environment."""
    _expect_count("\\", args, 2)
    formals = _expect_qexpr("\\", args[0])
    body = _expect_qexpr("\\", args[1])
    for i, formal in enumerate(formals):
        if not isinstance(formal, Symbol):
            raise LispyTypeError(f"Cannot define non-symbol. Got {type_name(formal)}, Expected symbol.")
        if formal in REST_MARKERS and i != len(formals) - 2:
            raise LispyTypeError(
                f"Function format invalid. Symbol '{formal}' not followed by single symbol."
            )
    return Lambda(formals, SExpr(body), env)


# -------------------------------
# Nullary builtins
# -------------------------------
def env_builtin(env: Environment, args: list[Value]) -> QExpr:
    """Symbols bound in the current frame, in definition order."""
    return QExpr(env.symbols())


def exit_builtin(env: Environment, args: list[Value]) -> Value:
    logger.info("Exiting...")
    raise SystemExit(0)


# -------------------------------
# Arithmetic
# -------------------------------
def builtin_op(env: Environment, args: list[Value], op: str) -> Number:
    """Fold `op` over the arguments left to right.

    A single argument to `-` is negated. Division and modulo by zero raise
    the matching error instead of producing inf/nan.
    """
    if not args:
        raise LispyArityError(f"Function '{op}' passed too few arguments. Expected 1 but got 0.")
    for arg in args:
        if not is_number(arg):
            raise LispyTypeError(f"Cannot apply {op} to a {type_name(arg)}.")

    x = float(args[0])
    if op == "-" and len(args) == 1:
        return -x

    for y in args[1:]:
        y = float(y)
        if op == "+":
            x += y
        elif op == "-":
            x -= y
        elif op == "*":
            x *= y
        elif op == "/":
            if y == 0:
                raise LispyDivisionByZero(f"Division by zero: {format_number(x)} / {format_number(y)}")
            x /= y
        elif op == "%":
            if y == 0:
                raise LispyModuloByZero(f"Mod by zero: {format_number(x)} % {format_number(y)}")
            x = math.fmod(x, y)
    return x


def _arithmetic(op: str) -> Callable[[Environment, list[Value]], Number]:
    def fn(env: Environment, args: list[Value]) -> Number:
        return builtin_op(env, args, op)
    fn.__name__ = f"builtin_op_{op}"
    return fn


# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, Callable[[Environment, list[Value]], Value]] = {
    "list": list_builtin,
    "head": head,
    "tail": tail,
    "len": length,
    "cons": cons,
    "init": init,
    "last": last,
    "join": join,
    "eval": eval_builtin,
    "def": define,
    "\\": lambda_builtin,
    "env": env_builtin,
    "exit": exit_builtin,
    "+": _arithmetic("+"),
    "-": _arithmetic("-"),
    "*": _arithmetic("*"),
    "/": _arithmetic("/"),
    "%": _arithmetic("%"),
}

# Invoked as soon as the symbol is evaluated, without parentheses.
NULLARY_BUILTINS = frozenset({"env", "exit"})


def register(env: Environment) -> None:
    """Install every builtin into `env` as a locked binding."""
    for name, fn in BUILTINS.items():
        builtin = Builtin(name, fn, nullary=name in NULLARY_BUILTINS)
        env.define(Symbol(name), builtin, locked=True)


def make_root_environment() -> Environment:
    """Create a fresh root environment populated with the builtins."""
    env = Environment()
    register(env)
    return env
