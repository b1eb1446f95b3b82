from __future__ import annotations
import sys


class Symbol:
    """A bare identifier awaiting lookup in an Environment."""

    __slots__ = ("id",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __ne__(self, other: object) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id


# Variadic markers accepted in a formals list; `&` is the short alias.
REST = Symbol("&rest")
REST_ALIAS = Symbol("&")
REST_MARKERS = (REST, REST_ALIAS)
