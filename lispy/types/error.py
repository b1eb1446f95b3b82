from __future__ import annotations

from lispy.errors import ErrorKind, LispyError


class Error:
    """An error value.

    Errors are ordinary first-class values: once produced they are never
    evaluated again, only propagated to the enclosing expression or stored.
    """

    __slots__ = ("kind", "message")

    def __init__(self, kind: ErrorKind, message: str):
        self.kind: ErrorKind = kind
        self.message: str = message

    @classmethod
    def from_exception(cls, exc: LispyError) -> Error:
        return cls(exc.kind, str(exc))

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Error)
            and self.kind is other.kind
            and self.message == other.message
        )

    def __ne__(self, other: object) -> bool:
        return not self == other

    __hash__ = None

    def __repr__(self) -> str:
        return f"Error({self.kind.value}, {self.message!r})"

    def __str__(self) -> str:
        return f"Error: {self.message}"
