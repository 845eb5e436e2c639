"""
  jyf Parser

Recursive descent over the token list with one token of lookahead.

- strings/numbers -> Python str/int/float
- 'name           -> Atom
- name            -> Binding
- ( ... )         -> ListNode; elements must be separated by whitespace
- expr( ... )     -> FunCall; repeated argument lists chain to the left,
                     so f(a)(b) is FunCall(FunCall(f, (a)), (b))

A whole file parses to one FunCall of the binding `do` over every top-level
expression. Running a program is therefore a single call to whatever the
library binds to `do`.
"""

from __future__ import annotations

import logging
from typing import Iterable

from jyf import JyfNode
from jyf.errors import JyfParseError
from jyf.reader.literals import decode_number, decode_string
from jyf.reader.tokenizer import (
    Token,
    WHITESPACE,
    STRING,
    NUMBER,
    PARENLEFT,
    PARENRIGHT,
    ATOM,
    BINDING,
    EOF,
)
from jyf.types.coordinates import NATIVE
from jyf.types.nodes import Atom, Binding, ListNode, FunCall

logger = logging.getLogger(__name__)

PROGRAM_TARGET = "do"


class TokenStream:
    def __init__(self, tokens: Iterable[Token]):
        self.tokens: list[Token] = list(tokens)
        self.pos = 0
        if self.tokens:
            last = self.tokens[-1]
            self.eof = Token(EOF, "", last.coords.advance(last.text))
        else:
            self.eof = Token(EOF, "", NATIVE)

    def peek(self) -> Token:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return self.eof

    def advance(self) -> Token:
        tok = self.peek()
        if tok is not self.eof:
            self.pos += 1
        return tok

    def is_next(self, kind: str) -> bool:
        return self.peek().kind == kind

    def consume(self, kind: str) -> Token:
        """Consume a token of `kind` or raise a parse error."""
        tok = self.peek()
        if tok.kind == EOF and kind != EOF:
            raise JyfParseError("unexpected end of file", tok.coords)
        if tok.kind != kind:
            raise JyfParseError(f"expected token <{kind}>, found <{tok.kind}>", tok.coords)
        return self.advance()

    # --- grammar ---

    def parse_value(self) -> JyfNode:
        tok = self.peek()
        if tok.kind == STRING:
            return decode_string(self.consume(STRING))
        if tok.kind == NUMBER:
            return decode_number(self.consume(NUMBER))
        if tok.kind == ATOM:
            tok = self.consume(ATOM)
            return Atom(tok.text[1:], tok.coords)
        raise JyfParseError(
            f"expected <string | number | atom>, found <{tok.kind}>", tok.coords
        )

    def parse_binding(self) -> Binding:
        tok = self.consume(BINDING)
        return Binding(tok.text, tok.coords)

    def parse_expr(self) -> JyfNode:
        kind = self.peek().kind
        if kind in (STRING, NUMBER, ATOM):
            return self.parse_value()
        if kind == BINDING:
            return self.parse_binding()
        if kind == PARENLEFT:
            return self.parse_list()
        if kind == EOF:
            raise JyfParseError("unexpected end of file", self.peek().coords)
        raise JyfParseError(
            f"expected <string | number | atom | binding | parenleft>, found <{kind}>",
            self.peek().coords,
        )

    def _parse_sequence(self, items: list[JyfNode], end: str) -> None:
        """Fill `items` with whitespace-separated expressions up to `end`."""
        needs_whitespace = False
        while True:
            tok = self.peek()
            if tok.kind == end:
                self.consume(end)
                return
            if tok.kind == WHITESPACE:
                self.consume(WHITESPACE)
                needs_whitespace = False
            elif tok.kind == EOF:
                raise JyfParseError("unexpected end of file", tok.coords)
            else:
                if needs_whitespace:
                    raise JyfParseError(
                        f"expected <whitespace>, found <{tok.kind}>", tok.coords
                    )
                items.append(self.parse_expr_or_funcall())
                needs_whitespace = True

    def parse_list(self) -> ListNode:
        node = ListNode([], self.consume(PARENLEFT).coords)
        self._parse_sequence(node.items, PARENRIGHT)
        return node

    def parse_expr_or_funcall(self) -> JyfNode:
        expr = self.parse_expr()
        while self.is_next(PARENLEFT):
            args = self.parse_list()
            expr = FunCall(expr, args, args.coords)
        return expr

    def parse_program(self) -> FunCall:
        program = FunCall(Binding(PROGRAM_TARGET, NATIVE), ListNode([], NATIVE), NATIVE)
        self._parse_sequence(program.args.items, EOF)
        logger.debug("parsed program: %d top-level expressions", len(program.args))
        return program


def parse(tokens: Iterable[Token]) -> FunCall:
    """Parse a token sequence into the program-level `do` call."""
    return TokenStream(tokens).parse_program()
