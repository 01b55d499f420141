from types import SimpleNamespace

import pytest

from bgcheck.composite import WIDE_CONTEXT_PARAM, Parallel, Regions
from bgcheck.terms import (
    ConsistencyVisitor,
    Control,
    Hole,
    Nil,
    Prefix,
    TermError,
    TermVisitor,
)

A = Control("a", True, 0)
B = Control("b", True, 0)
C = Control("c", True, 0)
PASSIVE = Control("p", False, 0)


class _Match:
    def __init__(self, root=None, reactum=None, params=None):
        self.root = root
        self.rule = SimpleNamespace(reactum=reactum)
        self.params = params or {}

    def get_param(self, index):
        return self.params.get(index)

    def get_name(self, port):
        return port


class _Recorder(TermVisitor):
    def __init__(self):
        self.seen = []

    def visit(self, term):
        self.seen.append(term)


def _node(control):
    return Prefix(control, (), Nil())


def test_children_get_parent():
    a, b = _node(A), _node(B)
    p = Parallel([a, b])
    assert all(child.parent is p for child in p.children())


def test_duplicates_are_ignored():
    a = _node(A)
    p = Parallel([a, a])
    assert len(p.children()) == 1


def test_to_string_joins_children():
    a, b = _node(A), _node(B)
    p = Parallel([a, b])
    assert p.to_string() == "(" + a.to_string() + " | " + b.to_string() + ")"


def test_size_is_sum_of_children():
    a, b = _node(A), Prefix(B, (), _node(C))
    p = Parallel([a, b])
    assert p.size() == a.size() + b.size()


def test_empty_parallel_has_no_size():
    assert Parallel([Nil()]).size() == 0


def test_flatten_drops_nil_and_splices():
    a, b, c = _node(A), _node(B), _node(C)
    p = Parallel([a, Parallel([b, c]), Nil()])
    flat = p.flatten()
    assert {id(t) for t in flat} == {id(a), id(b), id(c)}
    assert all(t.parent is p for t in p.children())


def test_active_context_follows_enclosing_prefix():
    a = _node(A)
    Prefix(PASSIVE, (), Parallel([a]))
    assert a.active_context() is False
    b = _node(B)
    Parallel([b])
    assert b.active_context() is True


def test_instantiate_copies_with_new_id():
    a, b = _node(A), _node(B)
    p = Parallel([a, b])
    copy = p.instantiate(None)
    assert copy.id != p.id
    assert copy.to_string() == p.to_string()
    assert not any(c is a or c is b for c in copy.children())


def test_instantiate_merges_nested_parallel():
    p = Parallel([_node(A), Parallel([_node(B), _node(C)])])
    copy = p.instantiate(None)
    assert len(copy.children()) == 3


def test_apply_match_elsewhere_keeps_id():
    a = _node(A)
    p = Parallel([a, _node(B)])
    other = _node(C)
    result = p.apply_match(_Match(root=other, reactum=Nil()))
    assert result.id == p.id
    assert result.to_string() == p.to_string()


def test_apply_match_at_site_returns_reactum():
    p = Parallel([_node(A), _node(B)])
    reactum = _node(C)
    result = p.apply_match(_Match(root=p, reactum=reactum))
    assert result.to_string() == reactum.to_string()


def test_apply_match_adds_wide_context():
    p = Parallel([_node(A), _node(B)])
    reactum = Parallel([_node(A), _node(B)])
    extra = _node(C)
    match = _Match(root=p, reactum=reactum, params={WIDE_CONTEXT_PARAM: extra})
    result = p.apply_match(match)
    assert isinstance(result, Parallel)
    assert sorted(t.to_string() for t in result.children()) == sorted(
        [_node(A).to_string(), _node(B).to_string(), extra.to_string()]
    )


def test_apply_match_nil_context_leaves_reactum():
    p = Parallel([_node(A)])
    reactum = Parallel([_node(B), _node(C)])
    match = _Match(root=p, reactum=reactum, params={WIDE_CONTEXT_PARAM: Nil()})
    result = p.apply_match(match)
    assert len(result.children()) == 2


def test_accept_visits_children_first():
    a, b = _node(A), _node(B)
    p = Parallel([a, b])
    rec = _Recorder()
    p.accept(rec)
    assert rec.seen[-1] is p
    assert len(rec.seen) == 5


def test_consistency_visitor_detects_sharing():
    shared = _node(A)
    wrapper = Prefix(B, (), shared)
    p = Parallel([wrapper])
    p.terms.append(shared)
    with pytest.raises(TermError):
        p.accept(ConsistencyVisitor())


def test_walk_reaches_every_term():
    a, b = _node(A), _node(B)
    p = Parallel([a, b])
    walked = list(p.walk())
    assert walked[0] is p
    assert len(walked) == 5


def test_regions_to_string_and_order():
    a, b = _node(A), _node(B)
    r = Regions([a, b])
    assert r.to_string() == a.to_string() + " || " + b.to_string()
    assert r.children() == (a, b)
    assert a.parent is r


def test_regions_size_and_flatten():
    a, b = _node(A), Prefix(B, (), _node(C))
    r = Regions([a, b])
    assert r.size() == a.size() + b.size()
    assert r.flatten() == [r]


def test_regions_instantiate_and_apply():
    a = _node(A)
    r = Regions([a, Parallel([_node(B), Hole(0)])])
    other = _node(C)
    applied = Regions([a]).apply_match(_Match(root=other))
    assert applied.to_string() == a.to_string()
    copy = Regions([_node(A), _node(B)])
    inst = copy.instantiate(None)
    assert inst.id != copy.id
    assert inst.to_string() == copy.to_string()
    site = r.apply_match(_Match(root=r, reactum=_node(C)))
    assert site.to_string() == _node(C).to_string()