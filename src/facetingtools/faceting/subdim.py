"""Recursive faceting of a point set inside one hyperplane."""
from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from facetingtools.abstract.builder import Abstract, AbstractBuilder
from facetingtools.abstract.ranks import Ranks, dyad_ranks, point_fragment, relabel_vertices
from facetingtools.faceting.assemble import build_faceting
from facetingtools.faceting.hyperplanes import enumerate_hyperplanes
from facetingtools.faceting.ridges import RidgeOrbitRegistry
from facetingtools.faceting.search import (
    CoverageTable,
    FacetCandidate,
    FacetType,
    search_facet_combinations,
)
from facetingtools.geometry.subspace import Subspace
from facetingtools.symmetry.orbits import VertexMap, pair_orbits, stabilizer


@dataclass
class Faceting:
    """A validated faceting and the facet types it was built from."""

    abstract: Abstract
    facet_types: List[FacetType]


@dataclass
class SubFaceting:
    """Result of faceting_subdim.

    facetings   : valid facetings of the point set
    orbit_sizes : size of each hyperplane orbit (vertex orbit for a dyad)
    ridges      : per hyperplane orbit, its candidate facets in the caller's
                  numbering of the points; these are ridges one rank up
    """

    facetings: List[Faceting]
    orbit_sizes: List[int]
    ridges: List[List[Ranks]]


def _dyad() -> Abstract:
    builder = AbstractBuilder()
    builder.push_ranks(dyad_ranks())
    abstract = builder.finalize_or_reject()
    assert abstract is not None
    return abstract


def _dyad_faceting(vertex_map: VertexMap) -> SubFaceting:
    """The only faceting of a dyad is itself.

    The edge is snub when no row swaps its endpoints; its two vertices then
    form two orbits instead of one.
    """
    snub = not any(row[0] == 1 for row in vertex_map)
    if snub:
        return SubFaceting(
            [Faceting(_dyad(), [(0, 0), (1, 0)])],
            [1, 1],
            [[point_fragment(0)], [point_fragment(1)]],
        )
    return SubFaceting(
        [Faceting(_dyad(), [(0, 0)])],
        [2],
        [[point_fragment(0)]],
    )


def faceting_subdim(
    rank: int,
    plane: Subspace,
    points: Sequence[Sequence[float]],
    vertex_map: VertexMap,
    edge_length: Optional[float] = None,
    irc: bool = False,
    *,
    noble: Optional[int] = None,
    verbose: bool = False,
) -> SubFaceting:
    """Facet the points lying in `plane`, one rank below the caller.

    Parameters
    ----------
    rank : int
        Rank of the facetings to produce (2 for a dyad, 3 for a polygon, ...).
    plane : Subspace
        Flat containing the points; its dimension is rank - 1.
    points : sequence of points
        Coordinates in the caller's frame.
    vertex_map : list of rows
        Permutations of range(len(points)), identity first.
    edge_length : float, optional
        Only use vertex pairs at this distance as edges.
    irc : bool
        Passed to the combination search.
    noble : int, optional
        Maximum number of facet orbits; only meaningful at the top level.
    verbose : bool
        Print progress to stderr.
    """
    if rank < 2:
        raise ValueError(f"faceting needs rank >= 2, got {rank}.")
    if rank == 2:
        return _dyad_faceting(vertex_map)

    flat = np.array([plane.flatten(p) for p in points])
    n = len(flat)

    pair_reps = [orbit[0] for orbit in pair_orbits(flat, vertex_map, edge_length)]
    hyperplanes = enumerate_hyperplanes(rank, flat, pair_reps, vertex_map, edge_length)
    if verbose:
        print(
            f"Found {sum(hp.size for hp in hyperplanes)} hyperplanes "
            f"in {len(hyperplanes)} orbits",
            file=sys.stderr,
        )
        print("Faceting hyperplanes...", file=sys.stderr)

    registry = RidgeOrbitRegistry(vertex_map)
    candidates: List[List[FacetCandidate]] = []
    local_counts: List[List[int]] = []
    ridge_ids: List[List[List[int]]] = []

    for i, hp in enumerate(hyperplanes):
        sub = faceting_subdim(
            rank - 1,
            hp.subspace,
            flat[list(hp.vertices)],
            stabilizer(vertex_map, hp.vertices),
            edge_length,
            irc,
        )
        candidates.append([
            FacetCandidate(
                f.abstract.ranks,
                relabel_vertices(f.abstract.ranks, hp.vertices),
                list(f.facet_types),
            )
            for f in sub.facetings
        ])
        local_counts.append(sub.orbit_sizes)
        ridge_ids.append([
            [registry.register(relabel_vertices(ridge, hp.vertices)) for ridge in orbit_ridges]
            for orbit_ridges in sub.ridges
        ])
        if verbose:
            print(f"{i + 1}/{len(hyperplanes)}", file=sys.stderr)

    table = CoverageTable(
        facet_orbit_sizes=[hp.size for hp in hyperplanes],
        ridge_orbit_ids=ridge_ids,
        ridge_local_counts=local_counts,
        ridge_orbit_sizes=registry.sizes,
    )

    if verbose:
        print("Combining...", file=sys.stderr)
    facetings: List[Faceting] = []
    for stack in search_facet_combinations(candidates, table, noble=noble, irc=irc):
        abstract = build_faceting(stack, candidates, vertex_map, n, rank)
        if abstract is None:
            if verbose:
                print(f"Rejected non-dyadic combination {stack}", file=sys.stderr)
            continue
        if verbose:
            print("Faceting found", file=sys.stderr)
        facetings.append(Faceting(abstract, stack))

    return SubFaceting(
        facetings,
        table.facet_orbit_sizes,
        [[c.lifted for c in row] for row in candidates],
    )
