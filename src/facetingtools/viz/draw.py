from __future__ import annotations

import math
from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np

from facetingtools.abstract.polytope import ConcretePolytope


def _coords3(vertices: np.ndarray) -> np.ndarray:
    """Pad or truncate coordinates to three columns."""
    d = vertices.shape[1]
    if d >= 3:
        return vertices[:, :3]
    return np.hstack([vertices, np.zeros((len(vertices), 3 - d))])


def draw_faceting(
    polytope: ConcretePolytope,
    *,
    ax=None,
    title: str | None = None,
    edge_color: str = "tab:blue",
    edge_width: float = 1.2,
    vertex_size: int = 20,
):
    """
    Draw the edge skeleton of a realized faceting.

    2D realizations are drawn in the plane, everything else in 3D using the
    first three coordinates. Vertices not on any edge are drawn hollow.
    """
    verts = polytope.vertices
    planar = verts.shape[1] == 2

    if ax is None:
        fig = plt.figure(figsize=(5, 5))
        ax = fig.add_subplot(111) if planar else fig.add_subplot(111, projection="3d")

    on_edges = {v for e in polytope.edges() for v in e}
    used = sorted(on_edges)
    unused = [v for v in range(len(verts)) if v not in on_edges]

    if planar:
        for a, b in polytope.edges():
            ax.plot(*zip(verts[a], verts[b]), color=edge_color, linewidth=edge_width)
        ax.scatter(verts[used, 0], verts[used, 1], s=vertex_size, color="black")
        if unused:
            ax.scatter(verts[unused, 0], verts[unused, 1], s=vertex_size,
                       facecolors="none", edgecolors="gray")
        ax.set_aspect("equal")
    else:
        p3 = _coords3(verts)
        for a, b in polytope.edges():
            ax.plot(*zip(p3[a], p3[b]), color=edge_color, linewidth=edge_width)
        ax.scatter(p3[used, 0], p3[used, 1], p3[used, 2], s=vertex_size, color="black")
        if unused:
            ax.scatter(p3[unused, 0], p3[unused, 1], p3[unused, 2], s=vertex_size,
                       facecolors="none", edgecolors="gray")

    ax.set_axis_off()
    if title is None:
        counts = polytope.abstract.element_counts()
        title = f"facets={counts[-2]}  edges={counts[2]}"
    ax.set_title(title)
    return ax


def draw_facetings(
    polytopes: Sequence[ConcretePolytope],
    *,
    ncols: int = 3,
    save_path: str | None = None,
):
    """
    Draw several facetings in a grid.

    If save_path is set the figure is saved as PNG, otherwise shown.
    """
    if not polytopes:
        raise ValueError("nothing to draw")

    planar = polytopes[0].vertices.shape[1] == 2
    nrows = math.ceil(len(polytopes) / ncols)
    fig = plt.figure(figsize=(4 * ncols, 4 * nrows))
    for i, poly in enumerate(polytopes):
        if planar:
            ax = fig.add_subplot(nrows, ncols, i + 1)
        else:
            ax = fig.add_subplot(nrows, ncols, i + 1, projection="3d")
        draw_faceting(poly, ax=ax, title=f"#{i}")

    plt.tight_layout()
    if save_path:
        plt.savefig(save_path, dpi=200)
        plt.close(fig)
    else:
        plt.show()
    return fig
