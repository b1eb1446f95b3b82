"""S-expressions and Q-expressions.

Both are ordered sequences of values and share a representation; they differ
only in how the evaluator treats them. An SExpr is a function call, a QExpr is
inert data until converted with `eval` or taken apart with the list builtins.
"""

from __future__ import annotations


class _Expression(list):
    open_delim = ""
    close_delim = ""

    def __eq__(self, other: object) -> bool:
        from lispy.types.value import values_equal
        return values_equal(self, other)

    def __ne__(self, other: object) -> bool:
        return not self == other

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list.__repr__(self)})"

    def __str__(self) -> str:
        from lispy.types.value import to_string
        inner = " ".join(to_string(v) for v in self)
        return f"{self.open_delim}{inner}{self.close_delim}"


class SExpr(_Expression):
    open_delim = "("
    close_delim = ")"


class QExpr(_Expression):
    open_delim = "{"
    close_delim = "}"
