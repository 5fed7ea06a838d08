from __future__ import annotations

from typing import List

from facetingtools.abstract.polytope import ConcretePolytope


def _fmt(x: float) -> str:
    s = f"{x:.10g}"
    return "0" if s == "-0" else s


def to_off(polytope: ConcretePolytope) -> str:
    """
    Serialize a realized polytope of rank >= 3 as OFF text.

    The header is "OFF" for 3D coordinates and "<d>OFF" otherwise. Each
    2-face is written as one vertex cycle per line; a compound face gives
    several lines.
    """
    if polytope.rank < 3:
        raise ValueError(f"OFF export needs rank >= 3, got {polytope.rank}.")

    verts = polytope.vertices
    dim = verts.shape[1]
    cycles: List[List[int]] = [c for face in polytope.face_vertex_cycles() for c in face]

    lines = ["OFF" if dim == 3 else f"{dim}OFF"]
    lines.append(f"{len(verts)} {len(cycles)} {len(polytope.edges())}")
    for p in verts:
        lines.append(" ".join(_fmt(float(x)) for x in p))
    for c in cycles:
        lines.append(" ".join([str(len(c))] + [str(v) for v in c]))
    return "\n".join(lines) + "\n"


def write_off(polytope: ConcretePolytope, path: str) -> None:
    with open(path, "w", encoding="ascii") as fh:
        fh.write(to_off(polytope))
