from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from facetingtools.abstract.builder import Abstract
from facetingtools.abstract.ranks import Element


@dataclass
class ConcretePolytope:
    """An abstract polytope paired with vertex coordinates."""

    vertices: np.ndarray
    abstract: Abstract

    @property
    def rank(self) -> int:
        return self.abstract.rank

    def edges(self) -> List[Tuple[int, int]]:
        return [tuple(el.subs) for el in self.abstract.ranks[2]]  # type: ignore[misc]

    def face_vertex_cycles(self) -> List[List[List[int]]]:
        """Vertex sequences of every 2-face, one list per closed cycle.

        Assumes the face's edge list is in cycle order (see untangle_faces).
        """
        if self.rank < 3:
            return []
        edges = self.abstract.ranks[2]
        out: List[List[List[int]]] = []
        for face in self.abstract.ranks[3]:
            cycles: List[List[int]] = []
            cur: List[int] = []
            start = None
            for e in face.subs:
                a, b = edges[e].subs
                if not cur:
                    start = a
                    cur = [a, b]
                elif cur[-1] == a:
                    cur.append(b)
                else:
                    cur.append(a)
                if cur[-1] == start:
                    cur.pop()
                    cycles.append(cur)
                    cur = []
            if cur:
                cycles.append(cur)
            out.append(cycles)
        return out


def _cycle_order(edge_ids: Tuple[int, ...], edges: List[Element]) -> List[int]:
    """Order edge ids so consecutive edges share a vertex, cycle by cycle."""
    remaining = list(edge_ids)
    ordered: List[int] = []
    while remaining:
        first = remaining.pop(0)
        ordered.append(first)
        start, cur = edges[first].subs
        while cur != start:
            for k, e in enumerate(remaining):
                a, b = edges[e].subs
                if cur in (a, b):
                    remaining.pop(k)
                    ordered.append(e)
                    cur = b if cur == a else a
                    break
            else:
                break
    return ordered


def untangle_faces(polytope: ConcretePolytope) -> None:
    """Reorder the edges of every 2-face into cyclic order, in place."""
    ranks = polytope.abstract.ranks
    if len(ranks) < 4:
        return
    edges = ranks[2]
    ranks[3] = [
        Element(tuple(_cycle_order(face.subs, edges)), face.sups)
        for face in ranks[3]
    ]
