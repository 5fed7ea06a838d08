"""Tests for facetingtools.abstract module."""
import numpy as np
import pytest

from facetingtools.abstract.ranks import (
    Element,
    dyad_ranks,
    point_fragment,
    relabel_vertices,
    sort_strong,
    ranks_key,
)
from facetingtools.abstract.builder import AbstractBuilder, is_dyadic
from facetingtools.abstract.polytope import ConcretePolytope, untangle_faces


def _polygon_ranks(edges, n):
    """Helper: nullitope, n vertices, the given edges, one body."""
    return [
        [Element(())],
        [Element((0,)) for _ in range(n)],
        [Element(tuple(e)) for e in edges],
        [Element(tuple(range(len(edges))))],
    ]


def _build(ranks):
    b = AbstractBuilder()
    b.push_ranks(ranks)
    return b.finalize_or_reject()


# --- ranks ---

def test_dyad_ranks():
    r = dyad_ranks()
    assert [len(x) for x in r] == [1, 2, 1]
    assert r[2][0].subs == (0, 1)


def test_point_fragment():
    assert point_fragment(3)[2][0].subs == (3,)


def test_relabel_vertices():
    r = relabel_vertices(dyad_ranks(), [5, 7])
    assert r[2][0].subs == (5, 7)
    assert dyad_ranks()[2][0].subs == (0, 1)


def test_sort_strong_sibling_invariance():
    # Triangle with edges listed in two different orders
    a = [[], [], [Element((0, 1)), Element((1, 2)), Element((0, 2))], [Element((0, 1, 2))]]
    b = [[], [], [Element((2, 1)), Element((2, 0)), Element((1, 0))], [Element((2, 0, 1))]]
    assert ranks_key(sort_strong(a)) == ranks_key(sort_strong(b))


def test_sort_strong_distinguishes():
    a = [[], [], [Element((0, 1)), Element((1, 2)), Element((0, 2))], [Element((0, 1, 2))]]
    b = [[], [], [Element((0, 1)), Element((1, 3)), Element((0, 3))], [Element((0, 1, 2))]]
    assert ranks_key(sort_strong(a)) != ranks_key(sort_strong(b))


def test_sort_strong_remaps_upper_rank():
    r = [[], [], [Element((2, 3)), Element((0, 1))], [Element((0,))]]
    s = sort_strong(r)
    assert s[2] == [Element((0, 1)), Element((2, 3))]
    # The face pointed at edge (2, 3), which is now at position 1
    assert s[3] == [Element((1,))]


# --- dyadic check and builder ---

def test_is_dyadic_square():
    assert is_dyadic(_polygon_ranks([(0, 1), (1, 2), (2, 3), (0, 3)], 4))


def test_is_dyadic_open_path():
    assert not is_dyadic(_polygon_ranks([(0, 1), (1, 2), (2, 3)], 4))


def test_is_dyadic_unused_vertex():
    # Triangle on vertices 0,1,2 with vertex 3 left over
    assert is_dyadic(_polygon_ranks([(0, 1), (1, 2), (0, 2)], 4))


def test_builder_fills_superelements():
    abs_ = _build(_polygon_ranks([(0, 1), (1, 2), (0, 2)], 3))
    assert abs_ is not None
    assert abs_.rank == 3
    assert abs_.element_counts() == [1, 3, 3, 1]
    assert sorted(abs_.ranks[1][0].sups) == [0, 2]
    assert abs_.ranks[2][1].sups == (0,)
    assert len(abs_.facets()) == 3


def test_builder_rejects_non_dyadic():
    assert _build(_polygon_ranks([(0, 1), (1, 2)], 3)) is None


def test_builder_push_before_rank():
    b = AbstractBuilder()
    with pytest.raises(RuntimeError):
        b.push_subs([0])


def test_builder_out_of_range():
    b = AbstractBuilder()
    b.push_empty()
    b.push_subs([])
    b.push_empty()
    with pytest.raises(RuntimeError):
        b.push_subs([1])


# --- untangle ---

def test_untangle_faces_cycle_order():
    edges = [(0, 1), (2, 3), (1, 2), (0, 3)]
    abs_ = _build(_polygon_ranks(edges, 4))
    poly = ConcretePolytope(np.zeros((4, 2)), abs_)
    untangle_faces(poly)
    order = poly.abstract.ranks[3][0].subs
    for a, b in zip(order, order[1:] + order[:1]):
        assert set(edges[a]) & set(edges[b])
    cycles = poly.face_vertex_cycles()
    assert len(cycles) == 1 and len(cycles[0]) == 1
    assert sorted(cycles[0][0]) == [0, 1, 2, 3]


def test_untangle_faces_compound():
    # Two disjoint triangles in one face
    edges = [(0, 1), (3, 4), (1, 2), (4, 5), (0, 2), (3, 5)]
    abs_ = _build(_polygon_ranks(edges, 6))
    poly = ConcretePolytope(np.zeros((6, 2)), abs_)
    untangle_faces(poly)
    cycles = poly.face_vertex_cycles()[0]
    assert sorted(sorted(c) for c in cycles) == [[0, 1, 2], [3, 4, 5]]
