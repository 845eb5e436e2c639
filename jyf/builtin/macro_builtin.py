"""Builtin macros for jyf (implemented in Python).

Macros receive the unevaluated argument ListNode and the calling Context, so
they choose what to evaluate and how often: control flow, declarations and
the function constructor live here.

In the name position of dec/def/inc a bare binding names itself, so
`dec(x 5)` and `dec('x 5)` both declare x. Any other expression is evaluated
and must produce an atom.
"""

from __future__ import annotations

import logging

from jyf import JyfValue, JyfNode, CallStack
from jyf.errors import JyfRuntimeError
from jyf.evaluation.evaluator import evaluate, evaluate_funcall
from jyf.types.callables import Function, Macro, macro
from jyf.types.context import Context
from jyf.types.coordinates import NATIVE
from jyf.types.nodes import Atom, Binding, ListNode, FunCall

logger = logging.getLogger(__name__)


def _fail(callstack: CallStack, message: str):
    """Raise a runtime error at the innermost call."""
    coords = callstack[-1].coords if callstack else None
    raise JyfRuntimeError(message, coords, callstack)


def _arity(callstack: CallStack, args: ListNode, n: int, usage: str) -> None:
    if len(args) < n:
        _fail(callstack, f"missing arguments: {usage}")


def _name(callstack: CallStack, context: Context, node: JyfNode) -> JyfValue:
    if isinstance(node, Binding):
        return Atom(node.name, node.coords)
    return evaluate(callstack, context, node)


def _entry(callstack: CallStack, context: Context, nodes: list[JyfNode]) -> list[JyfValue]:
    """[name, value...] for one declaration; [None] if the name is missing."""
    if not nodes:
        return [None]
    head, *rest = nodes
    return [_name(callstack, context, head)] + [evaluate(callstack, context, n) for n in rest]


def _entries(callstack: CallStack, context: Context, args: ListNode) -> list[list[JyfValue]]:
    """Declarations of `name [value]`, or of several `(name [value])` lists."""
    scope = Context([context])
    if args.items and all(isinstance(a, ListNode) for a in args):
        return [_entry(callstack, Context([scope]), a.items) for a in args]
    return [_entry(callstack, scope, args.items)]


# -------------------------------
# Control flow
# -------------------------------
@macro
def if_macro(callstack: CallStack, context: Context, args: ListNode) -> JyfValue:
    """if(cond then [else]): only the selected branch is evaluated."""
    _arity(callstack, args, 2, "if(condition then [else])")
    if evaluate(callstack, context, args[0]):
        return evaluate(callstack, context, args[1])
    if len(args) > 2:
        return evaluate(callstack, context, args[2])
    return None


@macro
def while_macro(callstack: CallStack, context: Context, args: ListNode) -> JyfValue:
    """while(cond body): value of the last iteration, None if it never ran."""
    _arity(callstack, args, 2, "while(condition body)")
    result = None
    while evaluate(callstack, context, args[0]):
        result = evaluate(callstack, context, args[1])
    return result


@macro
def for_macro(callstack: CallStack, context: Context, args: ListNode) -> JyfValue:
    """for((init cond step) body), all in one child scope of the caller."""
    header = args[0] if len(args) else None
    if not isinstance(header, ListNode) or len(header) != 3:
        _fail(callstack, "missing iteration list")
    _arity(callstack, args, 2, "for((init condition step) body)")

    scope = Context([context])
    init, cond, step = header.items
    evaluate(callstack, scope, init)
    result = None
    while evaluate(callstack, scope, cond):
        result = evaluate(callstack, scope, args[1])
        evaluate(callstack, scope, step)
    return result


# -------------------------------
# Variables
# -------------------------------
@macro
def dec_macro(callstack: CallStack, context: Context, args: ListNode) -> None:
    """Declare names in the calling scope, optionally with a value."""
    for name, *value in _entries(callstack, context, args):
        if not isinstance(name, Atom):
            _fail(callstack, "cannot declare non-atom")
        context.declare(callstack, name)
        if value:
            context.set(callstack, name, value[0])


@macro
def def_macro(callstack: CallStack, context: Context, args: ListNode) -> None:
    """Assign to names that are already declared."""
    for name, *value in _entries(callstack, context, args):
        if not isinstance(name, Atom):
            _fail(callstack, "cannot define non-atom")
        context.set(callstack, name, value[0] if value else None)


@macro
def inc_macro(callstack: CallStack, context: Context, args: ListNode) -> None:
    scope = Context([context])
    names = [_name(callstack, scope, a) for a in args]
    if not all(isinstance(n, Atom) for n in names):
        _fail(callstack, "cannot increment non-atom")
    for n in names:
        context.set(callstack, n, context.get(callstack, n) + 1)


# -------------------------------
# Functions
# -------------------------------
@macro
def function_macro(callstack: CallStack, context: Context, args: ListNode) -> Function:
    """function((params...) body...): a Function closing over the caller's scope."""
    if not len(args) or not isinstance(args[0], ListNode):
        _fail(callstack, "missing argument list")
    params = evaluate(callstack, context, args[0])
    if not all(isinstance(p, Atom) for p in params):
        _fail(callstack, "non-atom in argument list")
    return Function(params, ListNode(args.items[1:], args.coords), context)


def variadic(fn: JyfValue) -> Macro:
    """Wrap `fn` so it receives all call arguments as a single list."""

    @macro
    def call_with_list(callstack: CallStack, context: Context, args: ListNode) -> JyfValue:
        call = FunCall(fn, ListNode([args], NATIVE), NATIVE)
        return evaluate_funcall(callstack, context, call)

    return call_with_list


def register(context: Context) -> None:
    """Register builtin macros into the given Context."""
    macros = {
        "if": if_macro,
        "while": while_macro,
        "for": for_macro,
        "dec": dec_macro,
        "def": def_macro,
        "inc": inc_macro,
        "function": function_macro,
        "variadic": variadic,
    }
    context.update(macros)
    logger.debug("registered %d macro bindings", len(macros))
