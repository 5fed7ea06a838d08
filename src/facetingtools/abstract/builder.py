from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Optional

from facetingtools.abstract.ranks import Element, Ranks


def is_dyadic(ranks: Ranks) -> bool:
    """Diamond condition: every section of height 2 has exactly 2 middle elements.

    For every element at index >= 2 and every element two ranks below it that
    it contains, exactly two elements of the rank in between lie between them.
    """
    for r in range(2, len(ranks)):
        below = ranks[r - 1]
        for el in ranks[r]:
            cnt: Counter[int] = Counter()
            for s in el.subs:
                for ss in below[s].subs:
                    cnt[ss] += 1
            if any(c != 2 for c in cnt.values()):
                return False
    return True


@dataclass(frozen=True)
class Abstract:
    """A finalized incidence structure with superelements filled in."""

    ranks: Ranks

    @property
    def rank(self) -> int:
        """Index of the body (a polygon has rank 3, a polyhedron rank 4)."""
        return len(self.ranks) - 1

    def element_counts(self) -> List[int]:
        return [len(r) for r in self.ranks]

    def facets(self) -> List[Element]:
        return list(self.ranks[-2])


class AbstractBuilder:
    """Accumulates ranks bottom-up; validity is checked only on finalize.

    Intermediate states may violate the dyadic property.
    """

    def __init__(self) -> None:
        self._ranks: Ranks = []

    @property
    def ranks(self) -> Ranks:
        return self._ranks

    def push_empty(self) -> None:
        """Start a new, empty rank."""
        self._ranks.append([])

    def push_subs(self, subs: Iterable[int]) -> None:
        """Append an element to the current top rank."""
        if not self._ranks:
            raise RuntimeError("push_subs called before any rank was started.")
        subs = tuple(subs)
        if len(self._ranks) > 1:
            n_below = len(self._ranks[-2])
            for s in subs:
                if not 0 <= s < n_below:
                    raise RuntimeError(
                        f"subelement {s} out of range for rank index "
                        f"{len(self._ranks) - 1} ({n_below} elements below)"
                    )
        self._ranks[-1].append(Element(subs))

    def push_ranks(self, ranks: Ranks) -> None:
        for rank in ranks:
            self.push_empty()
            for el in rank:
                self.push_subs(el.subs)

    def is_dyadic(self) -> bool:
        return is_dyadic(self._ranks)

    def finalize_or_reject(self) -> Optional[Abstract]:
        """Return the finalized structure, or None if it is not dyadic."""
        if not self.is_dyadic():
            return None

        sups: List[List[List[int]]] = [[[] for _ in rank] for rank in self._ranks]
        for r in range(1, len(self._ranks)):
            for i, el in enumerate(self._ranks[r]):
                for s in el.subs:
                    sups[r - 1][s].append(i)

        ranks = [
            [Element(el.subs, tuple(sups[r][i])) for i, el in enumerate(rank)]
            for r, rank in enumerate(self._ranks)
        ]
        return Abstract(ranks)
