"""Expansion of accepted facet-type combinations into full incidence structures."""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from facetingtools.abstract.builder import Abstract, AbstractBuilder
from facetingtools.abstract.ranks import Element, Ranks, RanksKey, ranks_key, relabel_vertices, sort_strong
from facetingtools.faceting.search import FacetCandidate, FacetType
from facetingtools.symmetry.orbits import VertexMap


def expand_facets(
    stack: Sequence[FacetType],
    candidates: Sequence[Sequence[FacetCandidate]],
    vertex_map: VertexMap,
) -> List[Ranks]:
    """Every image of every chosen facet type under the vertex map, deduplicated."""
    facets: Dict[RanksKey, Ranks] = {}
    for h, f in stack:
        lifted = candidates[h][f].lifted
        for row in vertex_map:
            image = sort_strong(relabel_vertices(lifted, row))
            facets.setdefault(ranks_key(image), image)
    return list(facets.values())


def assemble_ranks(facets: Sequence[Ranks], vertex_count: int, rank: int) -> Ranks:
    """Glue facets into one Ranks list, merging elements with equal subelements.

    Facets carry vertex indices at index 2 and facet-local indices above it.
    """
    facets = [[list(r) for r in facet] for facet in facets]
    ranks: Ranks = [
        [Element(())],
        [Element((0,)) for _ in range(vertex_count)],
    ]

    for r in range(2, rank - 1):
        subs_to_idx: Dict[Tuple[int, ...], int] = {}
        new_rank: List[Element] = []
        for facet in facets:
            for el in facet[r]:
                key = tuple(sorted(el.subs))
                if key not in subs_to_idx:
                    subs_to_idx[key] = len(new_rank)
                    new_rank.append(Element(key))

        for facet in facets:
            facet[r + 1] = [
                Element(tuple(sorted(
                    subs_to_idx[tuple(sorted(facet[r][s].subs))] for s in el.subs
                )))
                for el in facet[r + 1]
            ]
        ranks.append(new_rank)

    seen = set()
    facet_rank: List[Element] = []
    for facet in facets:
        subs = tuple(sorted(facet[rank - 1][0].subs))
        if subs not in seen:
            seen.add(subs)
            facet_rank.append(Element(subs))
    ranks.append(facet_rank)
    ranks.append([Element(tuple(range(len(facet_rank))))])
    return ranks


def build_faceting(
    stack: Sequence[FacetType],
    candidates: Sequence[Sequence[FacetCandidate]],
    vertex_map: VertexMap,
    vertex_count: int,
    rank: int,
) -> Optional[Abstract]:
    """Assemble and validate one accepted combination; None if not dyadic."""
    facets = expand_facets(stack, candidates, vertex_map)
    builder = AbstractBuilder()
    builder.push_ranks(assemble_ranks(facets, vertex_count, rank))
    return builder.finalize_or_reject()
