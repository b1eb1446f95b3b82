"""Application engine for Lispy.

This module centralizes function application semantics:
- Builtins are called with the calling environment and the evaluated args.
- Lambdas bind their formals positionally in a fresh frame whose outer
  environment is the one the lambda captured.
- Supplying fewer arguments than formals returns a partially applied Lambda
  (currying); supplying more is an arity error unless the formals end in a
  variadic `&rest name`, which collects the remainder as a Q-expression.

Errors are raised as LispyError subclasses; the evaluator converts them to
Error values.
"""

from __future__ import annotations

from typing import Callable

from lispy.errors import LispyArityError, LispyNotCallable, LispyTypeError
from lispy.types.builtin import Builtin
from lispy.types.environment import Environment
from lispy.types.expressions import QExpr
from lispy.types.lambda_fn import Lambda
from lispy.types.symbol import REST_MARKERS
from lispy.types.value import Value, type_name

EvaluatorFn = Callable[[Value, Environment], Value]


def apply_builtin(fn: Builtin, args: list[Value], env: Environment) -> Value:
    """Invoke a native operation; it owns `args` and returns a new value."""
    return fn(env, args)


def apply_lambda(fn: Lambda, args: list[Value], evaluate_fn: EvaluatorFn) -> Value:
    """Apply a Lispy Lambda value.

    Parameters:
    - fn: The Lambda being applied.
    - args: The already-evaluated argument values.
    - evaluate_fn: Evaluator used for the body once every formal is bound.

    Behavior:
    - Formals are bound left to right into a new frame (outer = fn.env).
    - When a variadic marker is reached, the following name receives all
      remaining arguments (possibly none) as a Q-expression.
    - If formals remain unbound, return a new Lambda over the remaining
      formals whose environment is the partially filled frame.
    - Too many arguments raise LispyArityError.
    """
    formals = list(fn.formals)
    supplied = list(args)
    expected = len(formals)
    frame = Environment(outer=fn.env)

    while supplied:
        if not formals:
            raise LispyArityError(
                f"Function passed too many arguments. Expected {expected} but got {len(args)}."
            )
        formal = formals.pop(0)
        if formal in REST_MARKERS:
            frame.define(_rest_name(formal, formals), QExpr(supplied))
            formals = []
            supplied = []
            break
        frame.define(formal, supplied.pop(0))

    # Arguments ran out exactly at the variadic marker: bind it to {}.
    if formals and formals[0] in REST_MARKERS:
        marker = formals.pop(0)
        frame.define(_rest_name(marker, formals), QExpr())
        formals = []

    if formals:
        return Lambda(QExpr(formals), fn.body, frame)

    return evaluate_fn(fn.body, frame)


def _rest_name(marker, remaining: list) -> Value:
    if len(remaining) != 1:
        raise LispyTypeError(
            f"Function format invalid. Symbol '{marker}' not followed by single symbol."
        )
    return remaining.pop(0)


def apply(
    head: Value,
    args: list[Value],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """Apply either a Builtin or a Lambda.

    - For Lambda, defer to apply_lambda (handling partials and &rest).
    - For Builtin, invoke with the runtime env and list of args.
    - Otherwise, raise LispyNotCallable.
    """
    if isinstance(head, Lambda):
        return apply_lambda(head, args, evaluate_fn)
    elif isinstance(head, Builtin):
        return apply_builtin(head, args, env)
    raise LispyNotCallable(
        f"S-expression starts with a {type_name(head)} but must start with a function."
    )
