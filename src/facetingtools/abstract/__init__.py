from .ranks import (
    Element,
    Ranks,
    RanksKey,
    dyad_ranks,
    point_fragment,
    relabel_vertices,
    sort_strong,
    ranks_key,
)
from .builder import Abstract, AbstractBuilder, is_dyadic
from .polytope import ConcretePolytope, untangle_faces

__all__ = [
    "Element",
    "Ranks",
    "RanksKey",
    "dyad_ranks",
    "point_fragment",
    "relabel_vertices",
    "sort_strong",
    "ranks_key",
    "Abstract",
    "AbstractBuilder",
    "is_dyadic",
    "ConcretePolytope",
    "untangle_faces",
]
