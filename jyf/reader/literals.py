"""Decoding of string and number token text into Python values."""

from __future__ import annotations

import re

from jyf.errors import JyfParseError
from jyf.reader.tokenizer import Token

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "f": "\f",
    "v": "\v",
    "b": "\b",
    "0": "\0",
    "\\": "\\",
    '"': '"',
    "'": "'",
}

_ESCAPE_RE = re.compile(r"\\(x[0-9A-Fa-f]{2}|u[0-9A-Fa-f]{4}|.)", re.DOTALL)
_NUMBER_RE = re.compile(r"[-+]?\d+(\.\d+)?")


def _unescape(m: re.Match) -> str:
    seq = m.group(1)
    if len(seq) > 1:  # \xHH or \uHHHH
        return chr(int(seq[1:], 16))
    # Unknown escapes stand for the character itself
    return ESCAPES.get(seq, seq)


def decode_string(token: Token) -> str:
    """Strip the quotes of a string token and translate its escapes."""
    text = token.text
    if len(text) < 2 or text[0] != '"' or text[-1] != '"':
        raise JyfParseError(f"malformed string literal {text}", token.coords)
    return _ESCAPE_RE.sub(_unescape, text[1:-1])


def decode_number(token: Token) -> int | float:
    """int for integer literals, float when a fractional part is present."""
    m = _NUMBER_RE.fullmatch(token.text)
    if m is None:
        raise JyfParseError(f"malformed number literal {token.text}", token.coords)
    if m.group(1):
        return float(token.text)
    return int(token.text)
