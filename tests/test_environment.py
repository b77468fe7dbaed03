import pytest

from lispy.errors import LispyArityError, LispySyntaxError, LispyUnboundVariable
from lispy.types.environment import Environment
from lispy.types.symbol import Symbol


def test_params_bound_positionally():
    env = Environment([Symbol("a"), Symbol("b")], [1.0, 2.0])
    assert env.lookup(Symbol("a")) == 1.0
    assert env.lookup(Symbol("b")) == 2.0


@pytest.mark.parametrize("args", [[], [1.0], [1.0, 2.0, 3.0]])
def test_arity_mismatch_raises(args):
    with pytest.raises(LispyArityError):
        Environment([Symbol("a"), Symbol("b")], args)


def test_lookup_walks_outward():
    root = Environment()
    root.define(Symbol("x"), 1.0)
    child = Environment([Symbol("y")], [2.0], root)
    grandchild = Environment(outer=child)
    assert grandchild.lookup(Symbol("x")) == 1.0
    assert grandchild.lookup(Symbol("y")) == 2.0


def test_inner_binding_shadows_outer():
    root = Environment()
    root.define(Symbol("x"), 1.0)
    child = Environment([Symbol("x")], [2.0], root)
    assert child.lookup(Symbol("x")) == 2.0
    assert root.lookup(Symbol("x")) == 1.0


def test_lookup_unbound_raises():
    env = Environment(outer=Environment())
    with pytest.raises(LispyUnboundVariable, match="nope"):
        env.lookup(Symbol("nope"))


def test_define_writes_innermost_frame_only():
    root = Environment()
    root.define(Symbol("x"), 1.0)
    child = Environment(outer=root)
    child.define(Symbol("x"), 2.0)
    assert child.vars == {Symbol("x"): 2.0}
    assert root.lookup(Symbol("x")) == 1.0


def test_define_overwrites_in_same_frame():
    env = Environment()
    env.define(Symbol("x"), 1.0)
    env.define(Symbol("x"), 2.0)
    assert env.lookup(Symbol("x")) == 2.0
    assert len(env.vars) == 1


def test_define_rejects_non_symbol():
    with pytest.raises(LispySyntaxError):
        Environment().define("x", 1.0)


def test_update_bulk_inserts():
    env = Environment()
    env.update({Symbol("a"): 1.0, Symbol("b"): 2.0})
    assert env.lookup(Symbol("a")) == 1.0
    assert env.lookup(Symbol("b")) == 2.0


def test_find_and_is_bound():
    root = Environment()
    root.define(Symbol("x"), 1.0)
    child = Environment(outer=root)
    assert child.find(Symbol("x")) is root
    assert child.find(Symbol("y")) is None
    assert child.is_bound(Symbol("x"))
    assert not root.is_bound(Symbol("y"))


def test_frames_innermost_first():
    root = Environment()
    child = Environment(outer=root)
    assert list(child.frames()) == [child, root]



def test_repr_reports_bindings_and_depth():
    root = Environment()
    root.define(Symbol("x"), 1.0)
    child = Environment([Symbol("a"), Symbol("b")], [1.0, 2.0], root)
    assert repr(root) == "<Environment 1 binding(s), depth 1>"
    assert repr(child) == "<Environment 2 binding(s), depth 2>"
