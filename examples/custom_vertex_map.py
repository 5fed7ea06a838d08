"""Facet a triangular prism under a subgroup given as matrices."""
import numpy as np

from facetingtools import faceting, to_off, vertex_map_from_matrices

h = 1.0
tri = [(np.cos(2 * np.pi * k / 3), np.sin(2 * np.pi * k / 3)) for k in range(3)]
prism = np.array([(x, y, z) for z in (-h, h) for x, y in tri])

# Rotations about the z axis and the half turns swapping the two triangles
c, s = np.cos(2 * np.pi / 3), np.sin(2 * np.pi / 3)
rz = np.array([[c, -s, 0], [s, c, 0], [0, 0, 1]])
flip = np.diag([1.0, -1.0, -1.0])
mats = [np.linalg.matrix_power(rz, k) @ m for k in range(3) for m in (np.eye(3), flip)]

vmap = vertex_map_from_matrices(prism, mats)
print("Group order:", len(vmap))

for poly in faceting(prism, vmap):
    print(to_off(poly))
