from bgcheck.composite import Parallel, Regions
from bgcheck.subtree import (
    HOLE_LABEL,
    format_ports,
    ordered_string,
    preorder_string,
)
from bgcheck.terms import Control, Hole, Nil, Num, Prefix

A = Control("a", True, 0)
B = Control("b", True, 0)
L = Control("l", True, 2)


def _node(control, suffix=None):
    return Prefix(control, (), suffix or Nil())


def test_format_ports_empty():
    assert format_ports([]) == "[]"


def test_format_ports_names():
    assert format_ports(["x", "y"]) == "[x,y]"


def test_nil_is_empty():
    assert ordered_string(Nil()) == ""
    assert preorder_string(Nil()) == []


def test_prefix_string():
    assert ordered_string(_node(A)) == "a[] 0"


def test_prefix_elements_bracketed():
    p = _node(A, _node(B))
    elems = preorder_string(p)
    assert elems[0].term is p
    assert elems[-1].term is None and elems[-1].name == "0"
    assert len(elems) == 4


def test_parallel_order_is_canonical():
    left = Parallel([_node(A), _node(B)])
    right = Parallel([_node(B), _node(A)])
    assert ordered_string(left) == ordered_string(right)
    names = [e.name for e in preorder_string(right)]
    assert names[0] == _node(A).control.name + format_ports(())


def test_hole_sorts_last():
    p = Parallel([Hole(0), _node(B)])
    assert ordered_string(p).endswith(HOLE_LABEL)


def test_num_uses_its_string():
    n = Num(5)
    assert ordered_string(n) == n.to_string()


def test_ports_in_label():
    p = Prefix(L, ("x", "y"), Nil())
    assert preorder_string(p)[0].name == "l" + format_ports(("x", "y"))


def test_different_terms_differ():
    assert ordered_string(_node(A, _node(B))) != ordered_string(
        Parallel([_node(A), _node(B)])
    )


def test_regions_yield_nothing():
    assert preorder_string(Regions([_node(A)])) == []