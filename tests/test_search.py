"""Tests for the facet combination search and the ridge registry."""
import pytest

from facetingtools.abstract.ranks import dyad_ranks, point_fragment
from facetingtools.faceting.ridges import RidgeOrbitRegistry
from facetingtools.faceting.search import (
    CoverageTable,
    FacetCandidate,
    classify_coverage,
    ridge_coverage,
    search_facet_combinations,
)


def _candidate(ridge_keys):
    """Helper: a candidate whose ranks do not matter for the search."""
    return FacetCandidate(dyad_ranks(), dyad_ranks(), list(ridge_keys))


def _square_like_table():
    """Two hyperplane orbits sharing one ridge orbit of size 4.

    Orbit 0 (sides, 4 members) covers the ridges twice, orbit 1 (diagonals,
    2 members) once.
    """
    candidates = [[_candidate([(0, 0)])], [_candidate([(0, 0)])]]
    table = CoverageTable(
        facet_orbit_sizes=[4, 2],
        ridge_orbit_ids=[[[0]], [[0]]],
        ridge_local_counts=[[2], [2]],
        ridge_orbit_sizes=[4],
    )
    return candidates, table


# --- classification ---

def test_classify_valid():
    assert classify_coverage([2, 0, 2]) == "valid"


def test_classify_exotic():
    assert classify_coverage([1, 3]) == "exotic"


def test_classify_incomplete():
    assert classify_coverage([2, 1, 0]) == "incomplete"


# --- coverage ---

def test_multiplicity():
    _, table = _square_like_table()
    assert table.multiplicity(0, (0, 0)) == (0, 2)
    assert table.multiplicity(1, (0, 0)) == (0, 1)


def test_multiplicity_fractional_raises():
    table = CoverageTable([3], [[[0]]], [[1]], [2])
    with pytest.raises(RuntimeError):
        table.multiplicity(0, (0, 0))


def test_ridge_coverage_stops_above_two():
    candidates, table = _square_like_table()
    assert ridge_coverage([(0, 0)], candidates, table) == [2]
    assert ridge_coverage([(0, 0), (1, 0)], candidates, table) == [3]


# --- search ---

def test_search_square_like():
    candidates, table = _square_like_table()
    assert search_facet_combinations(candidates, table) == [[(0, 0)]]


def test_search_empty():
    table = CoverageTable([], [], [], [])
    assert search_facet_combinations([], table) == []


def test_search_pairs_incomplete_orbits():
    # Three orbits each covering the ridge once: any two of them are valid
    candidates = [[_candidate([(0, 0)])] for _ in range(3)]
    table = CoverageTable([1, 1, 1], [[[0]]] * 3, [[1]] * 3, [1])
    assert search_facet_combinations(candidates, table) == [
        [(0, 0), (1, 0)],
        [(0, 0), (2, 0)],
        [(1, 0), (2, 0)],
    ]


def test_search_noble_caps_depth():
    candidates = [[_candidate([(0, 0)])] for _ in range(3)]
    table = CoverageTable([1, 1, 1], [[[0]]] * 3, [[1]] * 3, [1])
    assert search_facet_combinations(candidates, table, noble=1) == []


def test_search_irc_extends_valid():
    # Orbit 0 covers ridge 0 twice; orbit 1 covers ridge 1 twice
    candidates = [[_candidate([(0, 0)])], [_candidate([(1, 0)])]]
    table = CoverageTable([2, 2], [[[0], [1]], [[0], [1]]], [[1, 1], [1, 1]], [1, 1])
    assert search_facet_combinations(candidates, table) == [[(0, 0)], [(1, 0)]]
    assert search_facet_combinations(candidates, table, irc=True) == [
        [(0, 0)],
        [(0, 0), (1, 0)],
        [(1, 0)],
    ]
    assert search_facet_combinations(candidates, table, irc=True, noble=1) == [
        [(0, 0)],
        [(1, 0)],
    ]


def test_search_skips_orbits_without_candidates():
    candidates = [[], [_candidate([(0, 0)])]]
    table = CoverageTable([0, 2], [[], [[0]]], [[], [1]], [1])
    assert search_facet_combinations(candidates, table) == [[(1, 0)]]


# --- ridge registry ---

def test_registry_orbit_sizes():
    vmap = [[0, 1, 2, 3], [1, 2, 3, 0], [2, 3, 0, 1], [3, 0, 1, 2]]
    reg = RidgeOrbitRegistry(vmap)
    a = reg.register(point_fragment(0))
    b = reg.register(point_fragment(2))
    assert a == b == 0
    assert reg.sizes == [4]


def test_registry_distinguishes_orbits():
    vmap = [[0, 1, 2, 3], [1, 0, 3, 2]]
    reg = RidgeOrbitRegistry(vmap)
    assert reg.register(point_fragment(0)) == 0
    assert reg.register(point_fragment(2)) == 1
    assert reg.register(point_fragment(1)) == 0
    assert reg.sizes == [2, 2]
    assert len(reg) == 2
