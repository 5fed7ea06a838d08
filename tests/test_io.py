"""Tests for OFF export and drawing."""
import itertools

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from facetingtools.faceting.core import faceting
from facetingtools.io.off import to_off, write_off
from facetingtools.viz.draw import draw_faceting, draw_facetings


SQUARE = np.array([(1.0, 0.0), (0.0, 1.0), (-1.0, 0.0), (0.0, -1.0)])
CUBE = np.array(list(itertools.product([-1.0, 1.0], repeat=3)))


def _cube_by_faces():
    """Helper: the faceting of the cube whose facets are its squares."""
    for poly in faceting(CUBE, "full"):
        if poly.abstract.element_counts()[3] == 6:
            return poly
    raise AssertionError("cube not found among its facetings")


# --- OFF ---

def test_off_square():
    lines = to_off(faceting(SQUARE, "full")[0]).splitlines()
    assert lines[0] == "2OFF"
    assert lines[1] == "4 1 4"
    assert lines[2] == "1 0"
    face = [int(x) for x in lines[-1].split()]
    assert face[0] == 4
    assert sorted(face[1:]) == [0, 1, 2, 3]


def test_off_cube():
    lines = to_off(_cube_by_faces()).splitlines()
    assert lines[0] == "OFF"
    assert lines[1] == "8 6 12"
    assert lines[2] == "-1 -1 -1"
    faces = lines[2 + 8:]
    assert len(faces) == 6
    assert all(f.split()[0] == "4" for f in faces)


def test_off_faces_are_cycles():
    poly = _cube_by_faces()
    edges = {frozenset(e) for e in poly.edges()}
    for line in to_off(poly).splitlines()[10:]:
        vs = [int(x) for x in line.split()[1:]]
        for a, b in zip(vs, vs[1:] + vs[:1]):
            assert frozenset((a, b)) in edges


def test_off_hexagram_has_two_cycles():
    hexagon = np.array([
        (np.cos(k * np.pi / 3), np.sin(k * np.pi / 3)) for k in range(6)
    ])
    star = [p for p in faceting(hexagon, "full")
            if abs(np.linalg.norm(p.vertices[p.edges()[0][0]] - p.vertices[p.edges()[0][1]]) - 1.0) > 1e-6]
    assert len(star) == 1
    lines = to_off(star[0]).splitlines()
    assert lines[1] == "6 2 6"
    assert [l.split()[0] for l in lines[-2:]] == ["3", "3"]


def test_write_off(tmp_path):
    path = tmp_path / "square.off"
    poly = faceting(SQUARE, "full")[0]
    write_off(poly, str(path))
    assert path.read_text() == to_off(poly)


# --- drawing ---

def test_draw_faceting_planar():
    ax = draw_faceting(faceting(SQUARE, "full")[0])
    assert ax.get_title() == "facets=4  edges=4"


def test_draw_facetings_saves(tmp_path):
    path = tmp_path / "cube.png"
    draw_facetings(faceting(CUBE, "full"), save_path=str(path))
    assert path.exists()


def test_draw_facetings_empty():
    with pytest.raises(ValueError):
        draw_facetings([])
