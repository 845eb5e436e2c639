import pytest

from jyf.errors import JyfRuntimeError
from jyf.types.callables import Frame
from jyf.types.context import Context, ImmutableContext
from jyf.types.coordinates import Coordinates
from jyf.types.nodes import Atom, Binding

AT = Coordinates("scope.jyf", 3, 7)


def name(n):
    return Atom(n, AT)


@pytest.fixture
def root():
    ctx = Context()
    ctx.declare([], name("x"))
    ctx.set([], name("x"), "root-x")
    return ctx


def test_declare_without_value_is_none():
    ctx = Context()
    ctx.declare([], name("a"))
    assert ctx.has(name("a"))
    assert ctx.get([], name("a")) is None


def test_has_is_local_contains_is_chained(root):
    child = Context([root])
    assert not child.has(name("x"))
    assert child.contains(name("x"))
    assert not child.contains(name("y"))


def test_binding_and_string_names_share_keys(root):
    assert root.get([], Binding("x")) == "root-x"
    assert root.get([], "x") == "root-x"


def test_get_missing_reports_coordinates_and_stack():
    frame = Frame(AT, "fun", "f")
    with pytest.raises(JyfRuntimeError) as exc:
        Context().get([frame], Binding("nope", AT))
    err = exc.value
    assert err.message == "nope is not declared"
    assert err.coords == AT
    assert err.callstack == (frame,)


def test_redeclaration_fails(root):
    with pytest.raises(JyfRuntimeError, match="x is already declared"):
        root.declare([], name("x"))


def test_shadowing_and_undeclare(root):
    child = Context([root])
    child.declare([], name("x"))
    child.set([], name("x"), "child-x")
    assert child.get([], name("x")) == "child-x"
    assert root.get([], name("x")) == "root-x"

    child.undeclare([], name("x"))
    assert child.get([], name("x")) == "root-x"


def test_set_and_undeclare_delegate_to_declaring_scope(root):
    child = Context([Context([root])])
    child.set([], name("x"), 10)
    assert root.get([], name("x")) == 10

    child.undeclare([], name("x"))
    assert not root.has(name("x"))


def test_set_undeclared_fails(root):
    with pytest.raises(JyfRuntimeError, match="y is not declared"):
        Context([root]).set([], name("y"), 1)


def test_undeclare_missing_fails():
    with pytest.raises(JyfRuntimeError, match="y is not declared"):
        Context().undeclare([], name("y"))


def test_parents_searched_in_order():
    first, second = Context(), Context()
    for ctx, value in ((first, 1), (second, 2)):
        ctx.declare([], name("v"))
        ctx.set([], name("v"), value)
    assert Context([first, second]).get([], name("v")) == 1
    assert Context([second, first]).get([], name("v")) == 2


def test_parent_search_is_depth_first():
    deep = Context()
    deep.update({"v": "deep"})
    shallow = Context()
    shallow.update({"v": "shallow"})
    # First parent's whole chain is searched before the second parent.
    ctx = Context([Context([deep]), shallow])
    assert ctx.get([], name("v")) == "deep"


def test_update_declares_host_bindings():
    ctx = Context()
    ctx.update({"a": 1, "b": 2})
    assert ctx.get([], "b") == 2
    with pytest.raises(JyfRuntimeError):
        ctx.update({"a": 3})


class TestImmutableContext:
    def test_reads_pass_through(self, root):
        frozen = ImmutableContext([root])
        assert frozen.get([], name("x")) == "root-x"
        assert frozen.contains(name("x"))

    @pytest.mark.parametrize(
        "op,message",
        [
            (lambda c: c.declare([], name("z")), "cannot declare binding in an immutable context"),
            (lambda c: c.undeclare([], name("x")), "cannot undeclare binding in an immutable context"),
            (lambda c: c.set([], name("x"), 1), "cannot set binding in an immutable context"),
        ],
    )
    def test_mutation_fails(self, root, op, message):
        frozen = ImmutableContext([root])
        with pytest.raises(JyfRuntimeError) as exc:
            op(frozen)
        assert exc.value.kind == "Runtime"
        assert exc.value.message == message
        assert exc.value.coords == AT
        assert root.get([], name("x")) == "root-x"

    def test_children_cannot_assign_through_it(self, root):
        child = Context([ImmutableContext([root])])
        with pytest.raises(JyfRuntimeError, match="immutable"):
            child.set([], name("x"), 1)

    def test_children_may_shadow(self, root):
        child = Context([ImmutableContext([root])])
        child.declare([], name("x"))
        child.set([], name("x"), "mine")
        assert child.get([], name("x")) == "mine"
