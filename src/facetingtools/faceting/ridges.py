from __future__ import annotations

from typing import Dict, List

from facetingtools.abstract.ranks import Ranks, RanksKey, ranks_key, relabel_vertices, sort_strong
from facetingtools.symmetry.orbits import VertexMap


def canonical_key(ridge: Ranks) -> RanksKey:
    return ranks_key(sort_strong(ridge))


class RidgeOrbitRegistry:
    """Assigns orbit ids to ridges and records each orbit's size.

    Ridges must already carry vertex indices of the current level. Every image
    of a newly seen ridge under the vertex map is registered at once, so two
    ridges related by a row get the same id.
    """

    def __init__(self, vertex_map: VertexMap):
        self.vertex_map = vertex_map
        self._orbit_of: Dict[RanksKey, int] = {}
        self.sizes: List[int] = []

    def __len__(self) -> int:
        return len(self.sizes)

    def register(self, ridge: Ranks) -> int:
        key = canonical_key(ridge)
        if key in self._orbit_of:
            return self._orbit_of[key]

        orbit_id = len(self.sizes)
        count = 0
        for row in self.vertex_map:
            image = canonical_key(relabel_vertices(ridge, row))
            if image not in self._orbit_of:
                self._orbit_of[image] = orbit_id
                count += 1
        self.sizes.append(count)
        return orbit_id
