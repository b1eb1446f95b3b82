"""Runtime environment for Lispy.

The Environment stores bindings of Symbols to values and supports nested
scopes via an `outer` link. Each binding carries its own `locked` flag:
builtins are installed locked and can never be redefined from Lispy code.

Environments are shared, not owned: a closure keeps its captured
environment (and therefore the whole `outer` chain) alive for as long as the
closure itself is reachable.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Iterator, Optional

from lispy.errors import LispyInvalidSymbol, LispyUnboundSymbol
from lispy.types.symbol import Symbol
from lispy.types.value import Value, copy_value, to_string

logger = logging.getLogger(__name__)


class Binding:
    """A single environment entry."""

    __slots__ = ("value", "locked")

    def __init__(self, value: Value, locked: bool = False):
        self.value: Value = value
        self.locked: bool = locked

    def __repr__(self) -> str:
        lock = " locked" if self.locked else ""
        return f"<Binding {to_string(self.value)}{lock}>"


class Environment:
    """Hierarchical, insertion-ordered mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, Binding] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: Value, locked: bool = False) -> bool:
        """Bind `name` to a copy of `value` in this frame.

        An existing binding keeps its position and has its value replaced,
        unless it is locked: then nothing changes, a warning is logged and
        False is returned. New bindings are appended.

        Raises LispyInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LispyInvalidSymbol(f"Cannot define {name} as a symbol")

        existing = self.vars.get(name)
        if existing is not None:
            if existing.locked:
                logger.warning("Cannot override builtin function <%s>", name)
                return False
            existing.value = copy_value(value)
            return True

        self.vars[name] = Binding(copy_value(value), locked)
        return True

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> Value:
        """Return a copy of the value bound to `name`.

        Searches this frame first, then each `outer` frame in turn.
        Raises LispyUnboundSymbol if not found.
        """
        env = self.find(name)
        if env is None:
            raise LispyUnboundSymbol(f"Unbound symbol '{name}'")
        return copy_value(env.vars[name].value)

    def symbols(self) -> Iterator[Symbol]:
        """Symbols bound in this frame only, in insertion order."""
        return iter(self.vars)

    def copy(self) -> Environment:
        """Deep-copy this frame's bindings; the outer chain is shared."""
        env = Environment(self.outer)
        for name, binding in self.vars.items():
            env.vars[name] = Binding(copy_value(binding.value), binding.locked)
        return env

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, b in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {to_string(b.value)}")
            first = False
        buffer.write("}")

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            chain = []
            while env is not None:
                env_buf = StringIO()
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
