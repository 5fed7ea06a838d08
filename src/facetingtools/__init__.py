"""
facetingtools: enumeration of the facetings of convex polytopes under a
symmetry group or an arbitrary vertex-permutation table.
"""

from .faceting.core import faceting
from .faceting.subdim import Faceting, SubFaceting, faceting_subdim
from .abstract.polytope import ConcretePolytope, untangle_faces
from .abstract.builder import Abstract, AbstractBuilder, is_dyadic
from .geometry.points import EPS, PointOrd, PointIndex
from .geometry.subspace import Subspace
from .io.off import to_off, write_off
from .viz.draw import draw_faceting, draw_facetings

# Symmetry
from .symmetry.orbits import vertex_orbits, pair_orbits, stabilizer
from .symmetry.vertex_map import (
    vertex_map_full,
    vertex_map_rotation,
    vertex_map_from_matrices,
)

__all__ = [
    # Faceting
    "faceting",
    "faceting_subdim",
    "Faceting",
    "SubFaceting",
    # Polytopes
    "ConcretePolytope",
    "untangle_faces",
    "Abstract",
    "AbstractBuilder",
    "is_dyadic",
    # Geometry
    "EPS",
    "PointOrd",
    "PointIndex",
    "Subspace",
    # IO
    "to_off",
    "write_off",
    # Viz
    "draw_faceting",
    "draw_facetings",
    # Symmetry
    "vertex_orbits",
    "pair_orbits",
    "stabilizer",
    "vertex_map_full",
    "vertex_map_rotation",
    "vertex_map_from_matrices",
]
