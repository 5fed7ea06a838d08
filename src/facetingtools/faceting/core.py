from __future__ import annotations

import sys
from typing import List, Optional, Sequence

import numpy as np

from facetingtools.abstract.polytope import ConcretePolytope, untangle_faces
from facetingtools.faceting.subdim import faceting_subdim
from facetingtools.geometry.subspace import Subspace
from facetingtools.symmetry.vertex_map import SymmetryInput, resolve_vertex_map


def faceting(
    vertices: Sequence[Sequence[float]],
    symmetry: SymmetryInput = "full",
    *,
    edge_length: Optional[float] = None,
    noble: Optional[int] = None,
    irc: bool = False,
    verbose: bool = False,
) -> List[ConcretePolytope]:
    """Enumerate the facetings of a convex polytope.

    Parameters
    ----------
    vertices : sequence of points
        Vertices of the polytope. Its rank is one more than the dimension of
        their affine hull.
    symmetry : "full", "rotation" or list of rows
        Group to facet under: the full symmetry group, its rotation subgroup,
        or an explicit vertex map (every group element, identity first).
    edge_length : float, optional
        Only allow edges of this length.
    noble : int, optional
        Maximum number of facet orbits.
    irc : bool
        Keep extending accepted combinations to find larger facetings that
        contain them.
    verbose : bool
        Print progress to stderr.

    Returns
    -------
    list[ConcretePolytope]
        One realized polytope per faceting, up to the symmetry. Every one
        keeps the full input vertex list.
    """
    pts = np.asarray(vertices, dtype=float)
    if pts.ndim != 2 or len(pts) < 3:
        raise ValueError("faceting needs at least 3 vertices given as an (n, d) array.")
    if noble is not None and noble < 1:
        raise ValueError(f"noble must be a positive facet count, got {noble}.")

    hull = Subspace.from_points(pts)
    if hull.rank < 2:
        raise ValueError("vertices must span at least a plane.")
    rank = hull.rank + 1

    if verbose:
        print("Computing vertex map...", file=sys.stderr)
    vertex_map = resolve_vertex_map(pts, symmetry)
    if verbose:
        print(f"Symmetry order {len(vertex_map)}", file=sys.stderr)
        print("Enumerating hyperplanes...", file=sys.stderr)

    result = faceting_subdim(
        rank, hull, pts, vertex_map, edge_length, irc, noble=noble, verbose=verbose
    )

    out: List[ConcretePolytope] = []
    for f in result.facetings:
        poly = ConcretePolytope(pts.copy(), f.abstract)
        untangle_faces(poly)
        out.append(poly)

    if verbose:
        print(f"Found {len(out)} facetings", file=sys.stderr)
    return out
