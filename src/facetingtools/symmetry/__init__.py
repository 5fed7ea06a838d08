from .orbits import (
    VertexMap,
    check_vertex_map,
    vertex_orbits,
    pair_orbits,
    stabilizer,
)
from .vertex_map import (
    SymmetryInput,
    distance_graph,
    vertex_map_full,
    vertex_map_rotation,
    vertex_map_from_matrices,
    resolve_vertex_map,
)

__all__ = [
    "VertexMap",
    "check_vertex_map",
    "vertex_orbits",
    "pair_orbits",
    "stabilizer",
    "SymmetryInput",
    "distance_graph",
    "vertex_map_full",
    "vertex_map_rotation",
    "vertex_map_from_matrices",
    "resolve_vertex_map",
]
