"""Runtime callables and the call-stack frame record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from jyf import JyfValue
from jyf.types.coordinates import Coordinates
from jyf.types.nodes import Atom, ListNode


class Function:
    """A user-defined function: parameter atoms, body list and closure Context.

    Arguments are evaluated before the call; see jyf.evaluation.apply for the
    binding protocol.
    """

    __slots__ = ("params", "body", "context")
    kind = "fun"

    def __init__(self, params: list[Atom], body: ListNode, context):
        self.params: list[Atom] = params
        self.body: ListNode = body
        self.context = context

    def __repr__(self) -> str:
        names = " ".join(f"'{p.name}" for p in self.params)
        return f"<fun ({names})>"


class Macro:
    """A callable receiving the call stack, the calling Context and the
    unevaluated argument list. It decides what to evaluate, and when.
    """

    __slots__ = ("transformer",)
    kind = "macro"

    def __init__(self, transformer: Callable[[list, object, ListNode], JyfValue]):
        self.transformer = transformer

    def __call__(self, callstack: list, context, args: ListNode) -> JyfValue:
        return self.transformer(callstack, context, args)

    def __repr__(self) -> str:
        return f"<macro {getattr(self.transformer, '__name__', '?')}>"


def macro(fn: Callable[[list, object, ListNode], JyfValue]) -> Macro:
    """Decorator: wrap a Python function as a Macro."""
    return Macro(fn)


@dataclass(frozen=True, slots=True)
class Frame:
    """Diagnostic record of a call in progress."""

    coords: Coordinates
    kind: str
    name: str

    def describe(self) -> str:
        return f"{self.name}() at {self.coords.describe()}"


def callable_kind(value: JyfValue) -> str:
    """Label for a call target: 'fun', 'macro' or 'py-<type name>'."""
    if isinstance(value, (Function, Macro)):
        return value.kind
    return f"py-{type(value).__name__}"
