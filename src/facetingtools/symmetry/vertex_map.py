"""Vertex maps from symmetry groups.

The symmetry group of a convex polytope acts faithfully on its vertices, and
a vertex permutation is a symmetry iff it preserves all pairwise distances.
The full group is therefore the automorphism group of the complete graph on
the vertices with edges labelled by distance class.
"""
from __future__ import annotations

from typing import List, Sequence, Union

import networkx as nx
import numpy as np
from networkx.algorithms.isomorphism import GraphMatcher

from facetingtools.geometry.points import EPS, PointIndex
from facetingtools.geometry.subspace import Subspace
from facetingtools.symmetry.orbits import VertexMap, check_vertex_map

SymmetryInput = Union[str, Sequence[Sequence[int]]]


def _distance_classes(values: np.ndarray) -> np.ndarray:
    """Integer class per value; values within EPS of their neighbour share a class."""
    flat = values.ravel()
    order = np.argsort(flat, kind="stable")
    classes = np.empty(len(flat), dtype=int)
    cls = 0
    prev = None
    for i in order:
        if prev is not None and flat[i] - prev > EPS:
            cls += 1
        classes[i] = cls
        prev = flat[i]
    return classes.reshape(values.shape)


def distance_graph(vertices: np.ndarray) -> nx.Graph:
    """Complete graph on the vertices, edge attribute "d" = distance class.

    Node attribute "r" is the class of the distance to the centroid.
    """
    pts = np.asarray(vertices, dtype=float)
    n = len(pts)
    diff = pts[:, None, :] - pts[None, :, :]
    dist = np.linalg.norm(diff, axis=2)
    radii = np.linalg.norm(pts - pts.mean(axis=0), axis=1)

    all_classes = _distance_classes(np.concatenate([dist.ravel(), radii]))
    d_cls = all_classes[: n * n].reshape(n, n)
    r_cls = all_classes[n * n:]

    G = nx.Graph()
    for i in range(n):
        G.add_node(i, r=int(r_cls[i]))
    for i in range(n):
        for j in range(i + 1, n):
            G.add_edge(i, j, d=int(d_cls[i, j]))
    return G


def vertex_map_full(vertices: Sequence[Sequence[float]]) -> VertexMap:
    """All distance-preserving vertex permutations, identity first."""
    pts = np.asarray(vertices, dtype=float)
    n = len(pts)
    if n == 0:
        return []
    G = distance_graph(pts)
    gm = GraphMatcher(
        G,
        G,
        node_match=lambda a, b: a["r"] == b["r"],
        edge_match=lambda a, b: a["d"] == b["d"],
    )
    rows = {tuple(m[i] for i in range(n)) for m in gm.isomorphisms_iter()}
    return [list(r) for r in sorted(rows)]


def _row_determinant(centred: np.ndarray, row: Sequence[int]) -> float:
    """Determinant of the linear map sending centred[i] to centred[row[i]]."""
    M, *_ = np.linalg.lstsq(centred, centred[list(row)], rcond=None)
    return float(np.linalg.det(M))


def vertex_map_rotation(vertices: Sequence[Sequence[float]]) -> VertexMap:
    """Rows of the full vertex map that come from rotations."""
    pts = np.asarray(vertices, dtype=float)
    hull = Subspace.from_points(pts)
    flat = np.array([hull.flatten(p) for p in pts])
    centred = flat - flat.mean(axis=0)
    return [row for row in vertex_map_full(pts) if _row_determinant(centred, row) > 0]


def vertex_map_from_matrices(
    vertices: Sequence[Sequence[float]],
    matrices: Sequence[np.ndarray],
) -> VertexMap:
    """Vertex permutations induced by a group of linear maps.

    Each matrix acts on column vectors. Raises ValueError if a matrix sends a
    vertex outside the vertex set.
    """
    pts = np.asarray(vertices, dtype=float)
    index = PointIndex(pts)
    n = len(pts)
    rows = set()
    for k, m in enumerate(matrices):
        images = pts @ np.asarray(m, dtype=float).T
        try:
            rows.add(tuple(index.index_of(p) for p in images))
        except KeyError as exc:
            raise ValueError(f"matrix {k} does not map the vertex set to itself.") from exc
    identity = tuple(range(n))
    rows.discard(identity)
    return [list(identity)] + [list(r) for r in sorted(rows)]


def resolve_vertex_map(vertices: np.ndarray, symmetry: SymmetryInput) -> VertexMap:
    """Turn the `symmetry` argument of faceting() into a vertex map.

    "full" and "rotation" compute the group from the vertices; anything else
    is taken as an explicit table of rows.
    """
    n = len(vertices)
    if isinstance(symmetry, str):
        if symmetry == "full":
            rows = vertex_map_full(vertices)
        elif symmetry == "rotation":
            rows = vertex_map_rotation(vertices)
        else:
            raise ValueError(
                f"unknown symmetry {symmetry!r}; use 'full', 'rotation' "
                "or an explicit vertex map."
            )
    else:
        rows = list(symmetry)
    return check_vertex_map(rows, n)
