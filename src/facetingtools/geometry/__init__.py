from .points import EPS, PointOrd, PointIndex
from .subspace import Subspace

__all__ = [
    "EPS",
    "PointOrd",
    "PointIndex",
    "Subspace",
]
