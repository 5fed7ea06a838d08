#!/usr/bin/env python3
"""
Enumerate the facetings of the cube and write each one as an OFF file.

Usage: python3 facet_cube.py [out_dir] [--irc] [--rotation]
"""

import os
import sys
from itertools import product

from facetingtools import faceting, write_off


def main():
    args = [a for a in sys.argv[1:] if not a.startswith("--")]
    out_dir = args[0] if args else "cube_facetings"
    irc = "--irc" in sys.argv
    symmetry = "rotation" if "--rotation" in sys.argv else "full"

    cube = list(product([-1.0, 1.0], repeat=3))
    results = faceting(cube, symmetry, irc=irc, verbose=True)

    os.makedirs(out_dir, exist_ok=True)
    for i, poly in enumerate(results):
        counts = poly.abstract.element_counts()
        print(f"#{i}: {counts[3]} faces, {counts[2]} edges")
        write_off(poly, os.path.join(out_dir, f"cube_{i}.off"))


if __name__ == "__main__":
    main()
