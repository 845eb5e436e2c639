import pytest

from jyf.interpreter import Interpreter, standard_library
from jyf.reader.parser import parse
from jyf.reader.tokenizer import tokenize


# Shared fixtures: a fresh standard library per test so that host-side
# registrations made by one test never leak into another.


@pytest.fixture
def library():
    return standard_library()


@pytest.fixture
def interp(library):
    return Interpreter(library)


@pytest.fixture
def parse_one():
    """Parse `source` and return its first top-level expression."""

    def _parse_one(source, filename="test.jyf"):
        return parse(tokenize(source, filename)).args[0]

    return _parse_one
