"""Rank-indexed incidence structures.

Index 0 of a Ranks list holds the nullitope (rank -1), index 1 the vertices,
index 2 the edges, and so on up to the body. In facet and ridge fragments the
subelements at index 2 are vertex indices and index 1 is only a placeholder.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple


@dataclass(frozen=True)
class Element:
    subs: Tuple[int, ...]
    sups: Tuple[int, ...] = ()


Ranks = List[List[Element]]
RanksKey = Tuple[Tuple[Tuple[int, ...], ...], ...]


def dyad_ranks() -> Ranks:
    """The segment: nullitope, two vertices, one edge."""
    return [
        [Element(())],
        [Element((0,)), Element((0,))],
        [Element((0, 1))],
    ]


def point_fragment(v: int) -> Ranks:
    """A single vertex as a ridge fragment of a dyad."""
    return [[], [Element((0,))], [Element((v,))]]


def relabel_vertices(ranks: Ranks, mapping: Sequence[int]) -> Ranks:
    """Copy of `ranks` with the vertex references at index 2 mapped."""
    out = [list(r) for r in ranks]
    out[2] = [Element(tuple(mapping[s] for s in el.subs)) for el in ranks[2]]
    return out


def sort_strong(ranks: Ranks) -> Ranks:
    """Canonical form, invariant under relabelling of same-rank siblings.

    Bottom-up from index 2: sort every element's subelements, sort the rank
    by subelements, then rewrite the next rank through the new positions.
    Superelements are dropped.
    """
    out: Ranks = [list(r) for r in ranks[:2]]
    remap: Dict[int, int] | None = None
    for r in range(2, len(ranks)):
        if remap is None:
            subs_list = [tuple(sorted(el.subs)) for el in ranks[r]]
        else:
            subs_list = [tuple(sorted(remap[s] for s in el.subs)) for el in ranks[r]]
        order = sorted(range(len(subs_list)), key=lambda i: subs_list[i])
        remap = {old: new for new, old in enumerate(order)}
        out.append([Element(subs_list[i]) for i in order])
    return out


def ranks_key(ranks: Ranks) -> RanksKey:
    """Hashable key of a canonical fragment (indices 2 and up)."""
    return tuple(tuple(el.subs for el in rank) for rank in ranks[2:])
