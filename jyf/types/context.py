"""Scopes for jyf.

A Context stores name -> value bindings and an ordered list of parent
Contexts. Lookups search this Context first, then the parents depth-first in
listed order; the first parent whose chain contains the name wins. Function
calls rely on that order to put argument bindings ahead of the closure scope.

Every operation takes the name as an Atom or Binding so errors can point at
the source; plain strings are accepted for host-side registration.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional, Sequence

from jyf import JyfValue, CallStack
from jyf.errors import JyfRuntimeError
from jyf.types.nodes import Atom, Binding

Name = Atom | Binding | str


def _key(name: Name) -> str:
    return name if isinstance(name, str) else name.name


def _coords(name: Name):
    return None if isinstance(name, str) else name.coords


class Context:
    """Mutable scope with zero or more parents."""

    __slots__ = ("vars", "parents")

    def __init__(self, parents: Optional[Iterable[Context]] = None):
        self.vars: dict[str, JyfValue] = {}
        self.parents: tuple[Context, ...] = tuple(parents or ())

    def has(self, name: Name) -> bool:
        """True if `name` is declared directly in this Context."""
        return _key(name) in self.vars

    def contains(self, name: Name) -> bool:
        """True if `name` is declared here or in any ancestor."""
        return self.has(name) or any(p.contains(name) for p in self.parents)

    def find(self, callstack: CallStack, name: Name) -> Context:
        """Return the first parent whose chain declares `name`."""
        for parent in self.parents:
            if parent.contains(name):
                return parent
        raise JyfRuntimeError(f"{_key(name)} is not declared", _coords(name), callstack)

    def get(self, callstack: CallStack, name: Name) -> JyfValue:
        if self.has(name):
            return self.vars[_key(name)]
        return self.find(callstack, name).get(callstack, name)

    def declare(self, callstack: CallStack, name: Name) -> None:
        """Declare `name` here with no value; redeclaration is an error."""
        if self.has(name):
            raise JyfRuntimeError(f"{_key(name)} is already declared", _coords(name), callstack)
        self.vars[_key(name)] = None

    def undeclare(self, callstack: CallStack, name: Name) -> None:
        if self.has(name):
            del self.vars[_key(name)]
            return
        self.find(callstack, name).undeclare(callstack, name)

    def set(self, callstack: CallStack, name: Name, value: JyfValue) -> None:
        """Assign to the nearest declaration of `name`."""
        if self.has(name):
            self.vars[_key(name)] = value
            return
        self.find(callstack, name).set(callstack, name, value)

    def update(self, mapping: dict[str, JyfValue]) -> None:
        """Bulk-declare and assign host bindings in this Context."""
        for k, v in mapping.items():
            self.declare([], k)
            self.vars[k] = v

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.parents:
                buffer.write(f" -> ({len(self.parents)} parents)")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"


class ImmutableContext(Context):
    """Read-only scope layered over the library bindings.

    Lookups behave as in Context; declare, undeclare and set always fail.
    """

    __slots__ = ()

    def __init__(self, parents: Sequence[Context]):
        super().__init__(parents)

    def declare(self, callstack: CallStack, name: Name) -> None:
        raise JyfRuntimeError(
            "cannot declare binding in an immutable context", _coords(name), callstack
        )

    def undeclare(self, callstack: CallStack, name: Name) -> None:
        raise JyfRuntimeError(
            "cannot undeclare binding in an immutable context", _coords(name), callstack
        )

    def set(self, callstack: CallStack, name: Name, value: JyfValue) -> None:
        raise JyfRuntimeError(
            "cannot set binding in an immutable context", _coords(name), callstack
        )
