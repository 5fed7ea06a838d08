#!/usr/bin/env python3
"""
Facetings of the regular n-gon: the star polygons {n/k} and their compounds.

Usage: python3 polygon_facetings.py [n] [plot.png]
"""

import math
import sys

from facetingtools import draw_facetings, faceting


n = int(sys.argv[1]) if len(sys.argv) > 1 else 8
save_path = sys.argv[2] if len(sys.argv) > 2 else None

ngon = [(math.cos(2 * math.pi * k / n), math.sin(2 * math.pi * k / n)) for k in range(n)]

for symmetry in ("full", "rotation"):
    results = faceting(ngon, symmetry)
    print(f"{symmetry}: {len(results)} facetings")

results = faceting(ngon, "full")
for i, poly in enumerate(results):
    a, b = poly.edges()[0]
    length = math.dist(poly.vertices[a], poly.vertices[b])
    print(f"#{i}: edge length {length:.4f}, {len(poly.face_vertex_cycles()[0])} cycle(s)")

draw_facetings(results, ncols=4, save_path=save_path)
