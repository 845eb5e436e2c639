from __future__ import annotations

from jyf import JyfValue
from jyf.builtin.env_builtin import register
from jyf.builtin.macro_builtin import register as register_macros
from jyf.evaluation.evaluator import run_program
from jyf.reader.parser import parse
from jyf.reader.tokenizer import tokenize
from jyf.types.context import Context


def standard_library() -> Context:
    """A fresh Context holding the builtin natives and macros."""
    library = Context()
    register(library)
    register_macros(library)
    return library


def run(library: Context, source: str, filename: str = "<string>") -> JyfValue:
    """Tokenize, parse and evaluate `source` against `library`.

    Raises JyfTokenizeError, JyfParseError or JyfRuntimeError on bad input.
    """
    return run_program(library, parse(tokenize(source, filename)))


class Interpreter:
    """
    Runs jyf programs against one library Context.
    Each eval() is a separate program: top-level declarations do not carry
    over between calls.
    """

    def __init__(self, library: Context | None = None):
        self.library: Context = library if library is not None else standard_library()

    def eval(self, source: str, filename: str = "<string>") -> JyfValue:
        return run(self.library, source, filename)
