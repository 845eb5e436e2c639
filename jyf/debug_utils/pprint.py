"""Rendering of syntax and values for diagnostics and program output.

pretty()  - source-like rendering used for call-stack labels and messages.
display() - what `print` writes: like pretty() but strings unquoted.
"""

import json

from jyf import JyfValue
from jyf.types.callables import Function, Macro
from jyf.types.nodes import Atom, Binding, ListNode, FunCall


def _pretty_seq(items, render) -> str:
    return "(" + " ".join(render(e) for e in items) + ")"


def _number(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value)


def pretty(expr: JyfValue) -> str:
    match expr:
        case Atom():
            return f"'{expr.name}"
        case Binding():
            return expr.name
        case ListNode() | list():
            return _pretty_seq(expr, pretty)
        case FunCall():
            return pretty(expr.target) + pretty(expr.args)
        case Function():
            return "<fun>"
        case Macro():
            return "<macro>"
        case None:
            return "undefined"
        case bool():
            return "true" if expr else "false"
        case int() | float():
            return _number(expr)
        case str():
            return json.dumps(expr)
        case _ if callable(expr):
            return "<py-function>"
        case _:
            return repr(expr)


def display(value: JyfValue) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return _pretty_seq(value, display)
    return pretty(value)
