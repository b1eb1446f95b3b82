"""The Value union and the helpers every part of the core shares.

A Value is exactly one of:

    Number   float (IEEE-754 double; NaN/Inf are ordinary numbers)
    Error    an error value that short-circuits evaluation
    Symbol   an identifier awaiting lookup
    Builtin  a native operation
    Lambda   a user-defined closure
    SExpr    a function call
    QExpr    quoted, inert data

Helpers here dispatch over every variant with `match` so that adding a
variant means revisiting each of them.
"""

from __future__ import annotations

import math
from typing import Union

from lispy.types.builtin import Builtin
from lispy.types.error import Error
from lispy.types.expressions import QExpr, SExpr
from lispy.types.lambda_fn import Lambda
from lispy.types.symbol import Symbol

Number = float
Value = Union[Number, Error, Symbol, Builtin, Lambda, SExpr, QExpr]


def is_number(v: object) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def type_name(v: Value) -> str:
    """Human-readable name of a value's variant, as used in error messages."""
    match v:
        case Error():
            return "error"
        case Symbol():
            return "symbol"
        case Builtin(nullary=True):
            return "nullary function"
        case Builtin() | Lambda():
            return "function"
        case SExpr():
            return "S-expression"
        case QExpr():
            return "Q-expression"
        case _ if is_number(v):
            return "number"
    raise TypeError(f"Not a lispy value: {v!r}")


def copy_value(v: Value) -> Value:
    """Deep copy of a value.

    Expression children are copied recursively. Closures copy their formals
    and body but share the captured environment. Numbers, symbols, errors and
    builtins are immutable and returned as-is.
    """
    match v:
        case SExpr() | QExpr():
            return type(v)(copy_value(child) for child in v)
        case Lambda():
            return v.copy()
        case _:
            return v


def values_equal(a: Value, b: Value) -> bool:
    """Structural equality.

    Numbers follow IEEE semantics, builtins compare by identity and closures
    by formals/body only (never by captured environment).
    """
    if is_number(a) or is_number(b):
        return is_number(a) and is_number(b) and a == b
    if type(a) is not type(b):
        return False
    match a:
        case SExpr() | QExpr():
            if len(a) != len(b):
                return False
            return all(values_equal(x, y) for x, y in zip(a, b))
        case Builtin():
            return a is b
        case _:
            return a == b


def format_number(n: Number) -> str:
    if math.isfinite(n) and float(n).is_integer():
        return str(int(n))
    return repr(float(n))


def to_string(v: Value) -> str:
    """Render a value the way the printer shows it."""
    if is_number(v):
        return format_number(v)
    return str(v)
