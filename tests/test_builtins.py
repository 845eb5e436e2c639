import math

import pytest

from jyf.builtin import env_builtin
from jyf.errors import JyfRuntimeError
from jyf.types.context import Context
from jyf.types.nodes import Atom


@pytest.fixture
def natives():
    ctx = Context()
    env_builtin.register(ctx)
    return ctx


def test_register_declares_natives(natives):
    assert natives.get([], "true") is True
    assert natives.get([], "false") is False
    assert natives.get([], "do") is env_builtin.do
    assert natives.get([], "sqrt") is math.sqrt


@pytest.mark.parametrize(
    "source,expected",
    [
        ("+()", 0),
        ("+(1 2 3)", 6),
        ('+("a" "b")', "ab"),
        ("-(10 1 2)", 7),
        ("-(5)", 5),
        ("*()", 1),
        ("*(2 3 4)", 24),
        ("/(12 2 3)", 2.0),
        ("/(1 4)", 0.25),
        ("mod(7 3)", 1),
        ("pow(2 10)", 1024.0),
        ("sqrt(9)", 3.0),
        ("is(1 1 1)", True),
        ("is(1 1 2)", False),
        ("is('a 'a)", True),
        ("is(true 1)", False),
        ("is()", True),
        ("is(7)", True),
        ("and(true 1 'x)", True),
        ("and(true 0)", False),
        ("or(false 0 \"\")", False),
        ("or(false 2)", True),
        ("xor(true false)", True),
        ("xor(true true)", False),
        ("xor(5 0)", 5),
        ("xor(0 'b)", Atom("b")),
        ("xor(1 2)", False),
        ("xor(0 \"\")", False),
        ("not(false)", True),
        ("<(1 2 3)", True),
        ("<(1 3 2)", False),
        (">(3 2 1)", True),
        ("<=(1 1 2)", True),
        (">=(2 2 3)", False),
        ("length((1 2 3))", 3),
        ('length("abcd")', 4),
        ("index((1 2 3) 1)", 2),
        ('index("abc" 0)', "a"),
        ("do()", None),
        ("do(1 2 3)", 3),
    ],
)
def test_natives(interp, source, expected):
    result = interp.eval(source)
    assert result == expected
    assert type(result) is type(expected)


def test_append_and_assign_mutate_lists(interp):
    source = """
        dec(xs (1 2))
        append(xs 3 4)
        assign(xs 0 'first)
        xs
    """
    assert interp.eval(source) == [Atom("first"), 2, 3, 4]


def test_append_returns_none(interp):
    assert interp.eval("append((1) 2)") is None


@pytest.mark.parametrize(
    "source,message",
    [
        ("/(1 0)", "division by zero"),
        ("index((1 2) 5)", "list index out of range"),
    ],
)
def test_native_domain_errors(interp, source, message):
    with pytest.raises(JyfRuntimeError) as exc:
        interp.eval(source)
    assert exc.value.message == message


def test_native_type_errors_are_runtime_errors(interp):
    with pytest.raises(JyfRuntimeError) as exc:
        interp.eval('-("a" 1)')
    assert isinstance(exc.value.__cause__, TypeError)
    assert exc.value.callstack[0].name == "-"
    assert exc.value.callstack[0].kind == "py-function"


def test_print_outputs_and_returns_none(interp, capsys):
    assert interp.eval("print(\"alpha\" 42 'beta 2.0 1.5 true (1 \"s\") do())") is None
    assert capsys.readouterr().out == 'alpha 42 \'beta 2 1.5 true (1 s) undefined\n'


def test_print_without_arguments(interp, capsys):
    interp.eval("print()")
    assert capsys.readouterr().out == "\n"


def test_library_is_read_only_to_programs(interp, library):
    interp.eval("dec(true false) true")
    assert library.get([], "true") is True
