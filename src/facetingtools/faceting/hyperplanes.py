"""Hyperplane enumeration over vertex-pair orbits."""
from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import List, Optional, Sequence, Set, Tuple

import numpy as np

from facetingtools.geometry.points import EPS
from facetingtools.geometry.subspace import Subspace
from facetingtools.symmetry.orbits import VertexMap


@dataclass
class HyperplaneOrbit:
    """One orbit of hyperplanes under the vertex map.

    subspace : representative hyperplane
    vertices : sorted indices of the vertices on it (the dedup key)
    size     : number of distinct hyperplanes in the orbit
    """

    subspace: Subspace
    vertices: Tuple[int, ...]
    size: int


def enumerate_hyperplanes(
    rank: int,
    points: np.ndarray,
    pair_reps: Sequence[Tuple[int, int]],
    vertex_map: VertexMap,
    edge_length: Optional[float] = None,
) -> List[HyperplaneOrbit]:
    """Find one representative per orbit of vertex-spanned hyperplanes.

    Each pair is extended by rank - 3 further vertices (in increasing index
    order) to get rank - 1 points, which span a hyperplane of the
    (rank - 1)-dimensional ambient space when in general position.
    """
    n = len(points)
    seen: Set[Tuple[int, ...]] = set()
    orbits: List[HyperplaneOrbit] = []

    for pair in pair_reps:
        base = points[pair[0]]
        for extra in combinations(range(n), rank - 3):
            if edge_length is not None and any(
                abs(float(np.linalg.norm(points[v] - base)) - edge_length) > EPS
                for v in extra
            ):
                continue

            hp = Subspace.from_points(points[list(pair + extra)])
            if not hp.is_hyperplane():
                continue

            incident = tuple(int(i) for i in np.flatnonzero(hp.distances(points) < EPS))
            if incident not in seen:
                size = 0
                for row in vertex_map:
                    image = tuple(sorted(row[v] for v in incident))
                    if image not in seen:
                        seen.add(image)
                        size += 1
                orbits.append(
                    HyperplaneOrbit(Subspace.from_points(points[list(incident)]), incident, size)
                )

            # A pair already spans the hyperplane of a polygon.
            if rank <= 3:
                break

    return orbits
