"""Tree-walking evaluator for jyf.

Every function threads an explicit call stack (a list of Frame, innermost
last). It is only used for diagnostics: each FunCall pushes one frame and
pops it on every exit path.
"""

from __future__ import annotations

import logging

from jyf import JyfValue, JyfNode, CallStack
from jyf.debug_utils.pprint import pretty
from jyf.evaluation.apply import apply
from jyf.types.callables import Frame, callable_kind
from jyf.types.context import Context, ImmutableContext
from jyf.types.nodes import Binding, ListNode, FunCall

logger = logging.getLogger(__name__)


def evaluate(callstack: CallStack, context: Context, expr: JyfNode) -> JyfValue:
    """Evaluate one node; anything that is not a list, call or binding
    evaluates to itself."""
    match expr:
        case ListNode():
            return evaluate_list(callstack, context, expr)
        case FunCall():
            return evaluate_funcall(callstack, context, expr)
        case Binding():
            return evaluate_binding(callstack, context, expr)
    return expr


def evaluate_list(callstack: CallStack, context: Context, node: ListNode) -> list[JyfValue]:
    """Evaluate the elements in order in one fresh child scope.

    Declarations made by earlier elements are visible to later ones.
    """
    local = Context([context])
    return [evaluate(callstack, local, e) for e in node]


def evaluate_binding(callstack: CallStack, context: Context, binding: Binding) -> JyfValue:
    return context.get(callstack, binding)


def evaluate_funcall(callstack: CallStack, context: Context, call: FunCall) -> JyfValue:
    head = evaluate(callstack, context, call.target)
    frame = Frame(call.coords, callable_kind(head), pretty(call.target))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("%scall %s <%s> at %s", "  " * len(callstack), frame.name, frame.kind, frame.coords)

    callstack.append(frame)
    try:
        return apply(callstack, context, head, call.args, call.coords, evaluate)
    finally:
        callstack.pop()


def run_program(library: Context, program: FunCall) -> JyfValue:
    """Evaluate a parsed program in an immutable scope over `library`."""
    return evaluate([], ImmutableContext([library]), program)
