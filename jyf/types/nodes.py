"""Abstract syntax tree produced by the parser.

String and number literals are not wrapped: the parser emits them as plain
Python values, which evaluate to themselves like any other non-node value.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from jyf import JyfNode
from jyf.types.coordinates import Coordinates, NATIVE


@dataclass(frozen=True, slots=True)
class Atom:
    """Self-evaluating symbolic constant, written 'name."""

    name: str
    coords: Coordinates = field(default=NATIVE, compare=False)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Binding:
    """Variable reference, resolved through the Context chain."""

    name: str
    coords: Coordinates = field(default=NATIVE, compare=False)

    def __str__(self) -> str:
        return self.name


@dataclass(slots=True)
class ListNode:
    """Parenthesized sequence of expressions.

    Evaluates every element in one fresh child scope and yields the list of
    results.
    """

    items: list[JyfNode]
    coords: Coordinates = field(default=NATIVE, compare=False)

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index):
        return self.items[index]


@dataclass(slots=True)
class FunCall:
    """Application of `target` to the argument list `args`: target(args...)."""

    target: JyfNode
    args: ListNode
    coords: Coordinates = field(default=NATIVE, compare=False)
