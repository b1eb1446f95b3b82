from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from lispy.types.environment import Environment

# Native operations receive the calling environment and the evaluated
# argument list, and return a new value.
BuiltinFn = Callable[["Environment", list[Any]], Any]


class Builtin:
    """Reference to a native operation.

    Builtins compare by identity. A nullary builtin is invoked as soon as the
    symbol naming it is evaluated, so `env` works without parentheses.
    """

    __slots__ = ("name", "fn", "nullary")

    def __init__(self, name: str, fn: BuiltinFn, nullary: bool = False):
        self.name = name
        self.fn = fn
        self.nullary = nullary

    def __call__(self, env: Environment, args: list[Any]) -> Any:
        return self.fn(env, args)

    def __repr__(self) -> str:
        kind = "nullary builtin" if self.nullary else "builtin"
        return f"<{kind} {self.name}>"

    def __str__(self) -> str:
        return f"<{self.name}>"
