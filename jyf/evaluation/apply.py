"""Application engine for jyf.

Centralizes the call protocol used by the evaluator:
- Macro: invoked with the call stack, the calling Context and the
  unevaluated argument ListNode.
- Function: arguments are evaluated as a list first, then bound to the
  parameters in a fresh argument Context.
- Any other Python callable: arguments are evaluated the same way and passed
  positionally.
Domain errors raised by host code (bad operand types, division by zero, bad
index...) are reported as JyfRuntimeError at the call site.
"""

from __future__ import annotations

from jyf import JyfValue, CallStack
from jyf.errors import JyfRuntimeError
from jyf.types.callables import Function, Macro
from jyf.types.context import Context
from jyf.types.coordinates import Coordinates
from jyf.types.nodes import ListNode

HOST_ERRORS = (ArithmeticError, TypeError, LookupError, ValueError)


def apply_function(
    callstack: CallStack, fn: Function, args: list[JyfValue], evaluate_fn
) -> JyfValue:
    """Run a Function's body with `args` bound to its parameters.

    Parameters without a matching argument stay None; extra arguments are
    ignored. The body sees the argument bindings ahead of the closure scope.
    """
    arguments = Context()
    for i, param in enumerate(fn.params):
        arguments.declare(callstack, param)
        if i < len(args):
            arguments.set(callstack, param, args[i])

    results = evaluate_fn(callstack, Context([arguments, fn.context]), fn.body)
    return results[-1] if results else None


def apply(
    callstack: CallStack,
    context: Context,
    head: JyfValue,
    args: ListNode,
    coords: Coordinates,
    evaluate_fn,
) -> JyfValue:
    """Apply `head` to the argument list `args` of a call at `coords`."""
    if isinstance(head, Macro):
        try:
            return head(callstack, context, args)
        except HOST_ERRORS as exc:
            raise JyfRuntimeError(str(exc) or type(exc).__name__, coords, callstack) from exc
    if isinstance(head, Function):
        return apply_function(callstack, head, evaluate_fn(callstack, context, args), evaluate_fn)
    if callable(head):
        values = evaluate_fn(callstack, context, args)
        try:
            return head(*values)
        except HOST_ERRORS as exc:
            raise JyfRuntimeError(str(exc) or type(exc).__name__, coords, callstack) from exc
    raise JyfRuntimeError("cannot call non-function", coords, callstack)
