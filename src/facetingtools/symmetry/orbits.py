"""Orbits of vertices and vertex pairs under a vertex map.

A vertex map is a table of rows, each a permutation of 0..n-1. Orbits are
found by applying every row to a representative, so the table must list the
whole group, not just generators.
"""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np

from facetingtools.geometry.points import EPS

VertexMap = List[List[int]]


def check_vertex_map(vertex_map: Sequence[Sequence[int]], n: int) -> VertexMap:
    """Validate row lengths and return the table as lists."""
    rows = [list(row) for row in vertex_map]
    if not rows:
        raise ValueError("vertex map has no rows; pass at least the identity.")
    for i, row in enumerate(rows):
        if len(row) != n:
            raise ValueError(f"vertex map row {i} has length {len(row)}, expected {n}.")
    return rows


def vertex_orbits(n: int, vertex_map: VertexMap) -> List[List[int]]:
    """Partition 0..n-1 into orbits, in order of their smallest member."""
    checked = [False] * n
    orbits: List[List[int]] = []
    for v in range(n):
        if checked[v]:
            continue
        orbit = []
        for row in vertex_map:
            c = row[v]
            if not checked[c]:
                checked[c] = True
                orbit.append(c)
        orbits.append(orbit)
    return orbits


def pair_orbits(
    points: np.ndarray,
    vertex_map: VertexMap,
    edge_length: Optional[float] = None,
) -> List[List[Tuple[int, int]]]:
    """Orbits of unordered vertex pairs.

    One representative per vertex orbit is paired with every other vertex.
    With `edge_length` set, pairs at any other distance never form an orbit.
    The first pair of each orbit is (representative, partner).
    """
    n = len(points)
    checked = [[False] * n for _ in range(n)]
    orbits: List[List[Tuple[int, int]]] = []

    for v_orbit in vertex_orbits(n, vertex_map):
        rep = v_orbit[0]
        for vertex in range(n):
            if vertex == rep or checked[rep][vertex]:
                continue
            if edge_length is not None:
                d = float(np.linalg.norm(points[vertex] - points[rep]))
                if abs(d - edge_length) > EPS:
                    continue
            orbit = []
            for row in vertex_map:
                c1, c2 = row[rep], row[vertex]
                if not checked[c1][c2]:
                    checked[c1][c2] = True
                    checked[c2][c1] = True
                    orbit.append((c1, c2))
            orbits.append(orbit)
    return orbits


def stabilizer(vertex_map: VertexMap, vertices: Sequence[int]) -> VertexMap:
    """Rows fixing `vertices` setwise, rewritten in local indices.

    `vertices` must be sorted; local index i stands for vertices[i].
    """
    target = list(vertices)
    local = {v: i for i, v in enumerate(target)}
    rows: VertexMap = []
    for row in vertex_map:
        image = [row[v] for v in target]
        if sorted(image) == target:
            rows.append([local[c] for c in image])
    return rows
