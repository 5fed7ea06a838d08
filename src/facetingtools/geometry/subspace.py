"""Affine flats spanned by point sets."""
from __future__ import annotations

from typing import Iterable, List, Sequence

import numpy as np

from facetingtools.geometry.points import EPS


class Subspace:
    """An affine flat: an offset plus an orthonormal basis.

    Parameters
    ----------
    offset : array-like
        A point on the flat.
    basis : list of array-like
        Orthonormal direction vectors; may be empty (a single point).
    """

    def __init__(self, offset: Sequence[float], basis: List[np.ndarray]):
        self.offset = np.asarray(offset, dtype=float)
        self.basis = [np.asarray(b, dtype=float) for b in basis]

    @classmethod
    def from_points(cls, points: Iterable[Sequence[float]]) -> "Subspace":
        """Flat spanned by the points, via Gram-Schmidt on p_i - p_0.

        Directions whose residual norm is at most EPS are dropped, so
        (nearly) dependent points do not raise the dimension.
        """
        pts = [np.asarray(p, dtype=float) for p in points]
        if not pts:
            raise ValueError("Subspace.from_points needs at least one point.")

        offset = pts[0]
        basis: List[np.ndarray] = []
        for p in pts[1:]:
            v = p - offset
            for b in basis:
                v = v - np.dot(v, b) * b
            norm = float(np.linalg.norm(v))
            if norm > EPS:
                basis.append(v / norm)
        return cls(offset, basis)

    @property
    def ambient_dim(self) -> int:
        return len(self.offset)

    @property
    def rank(self) -> int:
        """Dimension of the flat."""
        return len(self.basis)

    @property
    def corank(self) -> int:
        return self.ambient_dim - self.rank

    def is_hyperplane(self) -> bool:
        return self.corank == 1

    def project(self, p: Sequence[float]) -> np.ndarray:
        """Closest point of the flat to p."""
        v = np.asarray(p, dtype=float) - self.offset
        out = self.offset.copy()
        for b in self.basis:
            out += np.dot(v, b) * b
        return out

    def distance(self, p: Sequence[float]) -> float:
        return float(np.linalg.norm(np.asarray(p, dtype=float) - self.project(p)))

    def distances(self, points: np.ndarray) -> np.ndarray:
        """Distance of every row of `points` to the flat."""
        v = np.asarray(points, dtype=float) - self.offset
        if self.basis:
            B = np.vstack(self.basis)
            v = v - (v @ B.T) @ B
        return np.linalg.norm(v, axis=1)

    def flatten(self, p: Sequence[float]) -> np.ndarray:
        """Coordinates of p in the flat's local orthonormal frame."""
        v = np.asarray(p, dtype=float) - self.offset
        return np.array([np.dot(v, b) for b in self.basis], dtype=float)

    def __repr__(self) -> str:
        return f"Subspace(rank={self.rank}, ambient_dim={self.ambient_dim})"
