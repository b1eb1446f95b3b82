"""User-defined closures."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from lispy.types.expressions import QExpr, SExpr

if TYPE_CHECKING:
    from lispy.types.environment import Environment


class Lambda:
    """A first-class closure with formal parameters, body, and captured env.

    `env` is shared, never duplicated: copies of a Lambda (and partially
    applied Lambdas derived from it) keep referring to the same scope chain.
    """

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: QExpr, body: SExpr, env: Environment):
        self.formals: QExpr = formals
        self.body: SExpr = body
        self.env: Environment = env

    def copy(self) -> Lambda:
        from lispy.types.value import copy_value
        return Lambda(copy_value(self.formals), copy_value(self.body), self.env)

    def __eq__(self, other: object) -> bool:
        # Captured environments are not compared.
        return (
            isinstance(other, Lambda)
            and self.formals == other.formals
            and self.body == other.body
        )

    def __ne__(self, other: object) -> bool:
        return not self == other

    __hash__ = None

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(\\ ")
            buffer.write(str(self.formals))
            buffer.write(" ")
            buffer.write(str(QExpr(self.body)))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the closure."""
        return str(self)
