"""Built-in native functions for the jyf standard library.

This module defines arithmetic, comparison, boolean logic, indexing, output
and the program-level `do`. Natives receive already-evaluated arguments
positionally; they signal bad input with ordinary Python exceptions, which the
evaluator reports as runtime errors at the call site.
"""

from __future__ import annotations

import logging
import math
import operator
from functools import reduce

from jyf import JyfValue
from jyf.debug_utils.pprint import display
from jyf.types.context import Context

logger = logging.getLogger(__name__)


# -------------------------------
# Arithmetic
# -------------------------------
def add(*args: JyfValue) -> JyfValue:
    """Sum of all arguments; 0 with no arguments."""
    return reduce(operator.add, args[1:], args[0]) if args else 0


def sub(start: JyfValue, *args: JyfValue) -> JyfValue:
    """Subtract every following argument from the first."""
    return reduce(operator.sub, args, start)


def mul(*args: JyfValue) -> JyfValue:
    """Product of all arguments; 1 with no arguments."""
    return reduce(operator.mul, args, 1)


def div(start: JyfValue, *args: JyfValue) -> JyfValue:
    """Divide the first argument by every following one, left to right."""
    return reduce(operator.truediv, args, start)


def mod(a: JyfValue, b: JyfValue) -> JyfValue:
    return a % b


# -------------------------------
# Comparison and boolean logic
# -------------------------------
def same(a: JyfValue, b: JyfValue) -> bool:
    """Strict equality: a boolean is never equal to a number."""
    if isinstance(a, bool) != isinstance(b, bool):
        return False
    return a == b


def is_(*args: JyfValue) -> bool:
    """True if every argument equals the first; true for no arguments."""
    return all(same(args[0], o) for o in args[1:])


def and_(*args: JyfValue) -> bool:
    return all(args)


def or_(*args: JyfValue) -> bool:
    return any(args)


def xor(a: JyfValue, b: JyfValue) -> JyfValue:
    """The truthy operand when exactly one is truthy, otherwise false."""
    if bool(a) == bool(b):
        return False
    return a or b


def not_(value: JyfValue) -> bool:
    return not value


def _chain(op):
    def compare(*args: JyfValue) -> bool:
        return all(op(a, b) for a, b in zip(args, args[1:]))

    compare.__name__ = op.__name__
    return compare


lt = _chain(operator.lt)
gt = _chain(operator.gt)
lte = _chain(operator.le)
gte = _chain(operator.ge)


# -------------------------------
# Indexing
# -------------------------------
def length(obj: JyfValue) -> int:
    return len(obj)


def index(obj: JyfValue, i: JyfValue) -> JyfValue:
    return obj[i]


def append(xs: list, *items: JyfValue) -> None:
    """Append items to a list in place."""
    xs.extend(items)


def assign(obj: JyfValue, i: JyfValue, value: JyfValue) -> None:
    obj[i] = value


# -------------------------------
# Sequencing and output
# -------------------------------
def do(*args: JyfValue) -> JyfValue:
    """Value of the last argument, None without arguments.

    Every program is evaluated as one call to `do` over its top-level
    expressions.
    """
    return args[-1] if args else None


def print_builtin(*args: JyfValue) -> None:
    """Print space-separated display forms of args followed by newline."""
    print(" ".join(display(a) for a in args))


def register(context: Context) -> None:
    """Register all native functions and constants into the given Context."""
    natives = {
        "true": True,
        "false": False,
        "+": add,
        "-": sub,
        "*": mul,
        "/": div,
        "mod": mod,
        "pow": math.pow,
        "sqrt": math.sqrt,
        "is": is_,
        "and": and_,
        "or": or_,
        "xor": xor,
        "not": not_,
        "<": lt,
        ">": gt,
        "<=": lte,
        ">=": gte,
        "length": length,
        "index": index,
        "append": append,
        "assign": assign,
        "do": do,
        "print": print_builtin,
    }
    context.update(natives)
    logger.debug("registered %d native bindings", len(natives))
