"""Diagnostics raised by the tokenizer, parser and evaluator."""

from __future__ import annotations

from typing import Optional, Sequence

from jyf.types.coordinates import Coordinates


class JyfError(Exception):
    """Base class for all jyf diagnostics.

    Carries the message, the source coordinates of the responsible token or
    node (if known) and a snapshot of the call stack at the failure point,
    innermost frame first.
    """

    kind = "Jyf"

    def __init__(
        self,
        message: str,
        coords: Optional[Coordinates] = None,
        callstack: Optional[Sequence] = None,
    ):
        super().__init__(f"{self.kind}Error: {message}")
        self.message = message
        self.coords = coords
        # Frames are popped as the error unwinds, so keep a copy
        self.callstack = tuple(reversed(callstack)) if callstack is not None else None


class JyfTokenizeError(JyfError):
    """Raised when no token pattern matches the remaining source text"""

    kind = "Tokenize"


class JyfParseError(JyfError):
    """Raised on an unexpected token or a premature end of file"""

    kind = "Parse"


class JyfRuntimeError(JyfError):
    """Raised by the evaluator, a Context or library code while running"""

    kind = "Runtime"
