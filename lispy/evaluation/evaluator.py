"""Core evaluator for the Lispy interpreter.

Evaluation is a plain recursive walk over values with no state beyond the
Environment passed in. Symbols are looked up, S-expressions are evaluated
child by child and then applied, everything else evaluates to itself.

Failures never escape as exceptions: LispyError raised during lookup or
application is turned into an Error value here, and an Error among the
evaluated children of an S-expression replaces the whole expression.
Exhausting the Python stack (RecursionError) is fatal and is not caught.
"""

from __future__ import annotations

from lispy.errors import LispyError
from lispy.evaluation.apply import apply, apply_builtin
from lispy.types.builtin import Builtin
from lispy.types.environment import Environment
from lispy.types.error import Error
from lispy.types.expressions import SExpr
from lispy.types.symbol import Symbol
from lispy.types.value import Value


def evaluate(expr: Value, env: Environment) -> Value:
    """Evaluate `expr` in `env` and return the resulting value."""
    match expr:
        case Symbol():
            try:
                value = env.lookup(expr)
                # Nullary builtins (env, exit) run as soon as they are named.
                if isinstance(value, Builtin) and value.nullary:
                    return apply_builtin(value, [], env)
                return value
            except LispyError as exc:
                return Error.from_exception(exc)
        case SExpr():
            return evaluate_sexpr(expr, env)

    # --- Numbers, errors, functions and Q-expressions are self-evaluating ---
    return expr


def evaluate_sexpr(expr: SExpr, env: Environment) -> Value:
    """Evaluate every child, then apply the first to the rest."""
    cells = [evaluate(child, env) for child in expr]

    # All children are evaluated before the first Error is reported.
    for cell in cells:
        if isinstance(cell, Error):
            return cell

    if not cells:
        return SExpr()
    if len(cells) == 1:
        return cells[0]

    head, *args = cells
    try:
        return apply(head, args, env, evaluate)
    except LispyError as exc:
        return Error.from_exception(exc)
