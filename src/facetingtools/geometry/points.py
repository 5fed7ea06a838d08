from __future__ import annotations

import functools
import os
from bisect import bisect_left
from typing import Iterable, List, Sequence

import numpy as np


# Shared tolerance for every geometric comparison in the package.
EPS = float(os.environ.get("FACETINGTOOLS_EPS", "1e-9"))


@functools.total_ordering
class PointOrd:
    """Point with a total order tolerant to floating-point noise.

    Coordinates are compared lexicographically; two coordinates closer than
    EPS count as equal. Not hashable: use PointIndex for lookups.
    """

    __slots__ = ("coords",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, coords: Iterable[float]):
        self.coords = np.asarray(list(coords), dtype=float)

    def _cmp(self, other: "PointOrd") -> int:
        if len(self.coords) != len(other.coords):
            return -1 if len(self.coords) < len(other.coords) else 1
        for a, b in zip(self.coords, other.coords):
            if abs(a - b) > EPS:
                return -1 if a < b else 1
        return 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PointOrd):
            return NotImplemented
        return self._cmp(other) == 0

    def __lt__(self, other: "PointOrd") -> bool:
        return self._cmp(other) < 0

    def __repr__(self) -> str:
        return f"PointOrd({self.coords.tolist()})"


class PointIndex:
    """Sorted lookup table from points to their position in the input."""

    def __init__(self, points: Sequence[Sequence[float]]):
        entries = sorted(
            ((PointOrd(p), i) for i, p in enumerate(points)),
            key=lambda e: e[0],
        )
        self._keys: List[PointOrd] = [k for k, _ in entries]
        self._idx: List[int] = [i for _, i in entries]

    def __len__(self) -> int:
        return len(self._keys)

    def index_of(self, point: Sequence[float]) -> int:
        key = PointOrd(point)
        pos = bisect_left(self._keys, key)
        if pos < len(self._keys) and self._keys[pos] == key:
            return self._idx[pos]
        raise KeyError(f"point {key.coords.tolist()} is not in the index")
