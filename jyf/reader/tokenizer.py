"""
  jyf Tokenizer

- Ordered patterns, each anchored at the current position; the first pattern
  that matches wins (priority order, not longest match).
- Whitespace and comments are kept as 'whitespace' tokens: the parser uses
  them as mandatory separators, and joining every token's text gives back
  the source exactly.
- Every token records the Coordinates of its first character.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from jyf.errors import JyfTokenizeError
from jyf.types.coordinates import Coordinates, NATIVE

logger = logging.getLogger(__name__)

WHITESPACE = "whitespace"
STRING = "string"
NUMBER = "number"
PARENLEFT = "parenleft"
PARENRIGHT = "parenright"
ATOM = "atom"
BINDING = "binding"
EOF = "eof"

_SPACE = r"\f\n\r\t\v "

PATTERNS: list[tuple[re.Pattern, str]] = [
    (re.compile(r"#[^\n]*"), WHITESPACE),  # line comment
    (re.compile(rf"[{_SPACE}]+"), WHITESPACE),
    (re.compile(r'"(?:\\.|[^"\\])*"', re.DOTALL), STRING),
    (re.compile(r"\("), PARENLEFT),
    (re.compile(r"\)"), PARENRIGHT),
    (re.compile(r"[-+]?\d+(?:\.\d+)?"), NUMBER),
    (re.compile(rf"'[^(){_SPACE}]+"), ATOM),
    (re.compile(rf"[^(){_SPACE}]+"), BINDING),  # fallback
]


@dataclass(frozen=True, slots=True)
class Token:
    kind: str
    text: str
    coords: Coordinates = NATIVE


def tokenize(source: str, filename: str) -> list[Token]:
    """Split `source` into tokens, raising JyfTokenizeError on unmatched input."""
    tokens: list[Token] = []
    coords = Coordinates(filename, 1, 1)
    pos = 0
    n = len(source)

    while pos < n:
        for pattern, kind in PATTERNS:
            m = pattern.match(source, pos)
            if m:
                break
        else:
            raise JyfTokenizeError(f"cannot match {source[pos:]!r}", coords)

        text = m.group()
        tokens.append(Token(kind, text, coords))
        coords = coords.advance(text)
        pos = m.end()

    logger.debug("tokenized %s: %d tokens", filename, len(tokens))
    return tokens
