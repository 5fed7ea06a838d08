"""Backtracking search over combinations of facet types.

A facet type is a pair (h, f): hyperplane orbit h and the f-th faceting of
that hyperplane. A combination is accepted when, after expanding every chosen
facet over its whole orbit, each ridge orbit would be covered 0 or 2 times.
The coverage is computed from orbit sizes alone, without expanding anything.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from facetingtools.abstract.ranks import Ranks

FacetType = Tuple[int, int]

VALID = "valid"
EXOTIC = "exotic"
INCOMPLETE = "incomplete"


@dataclass
class FacetCandidate:
    """A faceting of one hyperplane, usable as a facet one rank up.

    local      : ranks in the hyperplane's own vertex numbering
    lifted     : same ranks with vertex indices of the current level
    ridge_keys : facet types (sub-orbit, sub-faceting) the faceting was built from
    """

    local: Ranks
    lifted: Ranks
    ridge_keys: List[FacetType]


@dataclass
class CoverageTable:
    """Orbit bookkeeping for the coverage arithmetic.

    facet_orbit_sizes[h]      : size of hyperplane orbit h
    ridge_orbit_ids[h][j][k]  : ridge orbit of the k-th faceting of sub-orbit j of h
    ridge_local_counts[h][j]  : size of sub-orbit j under the stabilizer of h
    ridge_orbit_sizes[r]      : size of ridge orbit r
    """

    facet_orbit_sizes: List[int]
    ridge_orbit_ids: List[List[List[int]]]
    ridge_local_counts: List[List[int]]
    ridge_orbit_sizes: List[int]

    def multiplicity(self, h: int, ridge_key: FacetType) -> Tuple[int, int]:
        """(ridge orbit, times it is covered by the orbit of a facet in h)."""
        j, k = ridge_key
        orbit = self.ridge_orbit_ids[h][j][k]
        total = self.facet_orbit_sizes[h] * self.ridge_local_counts[h][j]
        mul, rem = divmod(total, self.ridge_orbit_sizes[orbit])
        if rem:
            raise RuntimeError(
                f"fractional ridge multiplicity {total}/{self.ridge_orbit_sizes[orbit]} "
                f"for hyperplane orbit {h}, ridge orbit {orbit}; "
                "the vertex map is probably not a complete group."
            )
        return orbit, mul


def ridge_coverage(
    stack: Sequence[FacetType],
    candidates: Sequence[Sequence[FacetCandidate]],
    table: CoverageTable,
) -> List[int]:
    """Coverage of every ridge orbit; stops adding once an entry exceeds 2."""
    cover = [0] * len(table.ridge_orbit_sizes)
    for h, f in stack:
        for key in candidates[h][f].ridge_keys:
            orbit, mul = table.multiplicity(h, key)
            cover[orbit] += mul
            if cover[orbit] > 2:
                return cover
    return cover


def classify_coverage(cover: Sequence[int]) -> str:
    if any(c > 2 for c in cover):
        return EXOTIC
    if any(c == 1 for c in cover):
        return INCOMPLETE
    return VALID


def _advance(stack: List[FacetType], candidates: Sequence[Sequence[FacetCandidate]]) -> None:
    """Move the top frame to the next facet type."""
    h, f = stack[-1]
    if f + 1 >= len(candidates[h]):
        stack[-1] = (h + 1, 0)
    else:
        stack[-1] = (h, f + 1)


def _normalize(stack: List[FacetType], candidates: Sequence[Sequence[FacetCandidate]]) -> bool:
    """Carry exhausted frames down the stack. False once the search is over."""
    while stack:
        h, f = stack[-1]
        if h >= len(candidates):
            stack.pop()
            if stack:
                _advance(stack, candidates)
        elif f >= len(candidates[h]):
            stack[-1] = (h + 1, 0)
        else:
            return True
    return False


def search_facet_combinations(
    candidates: Sequence[Sequence[FacetCandidate]],
    table: CoverageTable,
    *,
    noble: Optional[int] = None,
    irc: bool = False,
) -> List[List[FacetType]]:
    """Enumerate facet-type combinations that cover every ridge orbit twice.

    Parameters
    ----------
    candidates : candidates[h] lists the facetings of hyperplane orbit h.
    table : orbit sizes for the coverage arithmetic.
    noble : maximum number of facet types in a combination.
    irc : after accepting a combination, keep extending it instead of
        moving on, so larger combinations with the same prefix are found.

    Returns
    -------
    Accepted stacks, in search order. Hyperplane orbits strictly increase
    along each stack.
    """
    accepted: List[List[FacetType]] = []
    stack: List[FacetType] = [(0, 0)]

    while _normalize(stack, candidates):
        state = classify_coverage(ridge_coverage(stack, candidates, table))
        can_extend = noble is None or len(stack) < noble

        if state == VALID:
            accepted.append(list(stack))
            extend = irc and can_extend
        elif state == INCOMPLETE:
            extend = can_extend
        else:
            extend = False

        if extend:
            stack.append((stack[-1][0] + 1, 0))
        else:
            _advance(stack, candidates)

    return accepted
