#!/usr/bin/env python3
"""
Icosasphere Tables Summary
==========================

Build an icosasphere for a vertex target, build its vertex-indexed tables
and print what a solver would be handed:

    - V, E, F, χ and the number of subdivision rounds
    - degree histogram (12 degree-5 vertices, the rest degree 6)
    - edge length / half-edge length ranges
    - Σ areas against 4πr² and against the convex hull area

Usage:
    cd src
    python scripts/01_icosasphere_tables.py --min-vertices 642
    python scripts/01_icosasphere_tables.py --min-vertices 2562 --radius 6371 -v
"""

import sys
import logging
from collections import Counter
from pathlib import Path

import numpy as np

# Add src/ to path
src_root = Path(__file__).parent.parent.resolve()
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from mesh_core.builders import build_icosasphere, subdivisions_required
from mesh_core.operators import build_vertex_indexed_tables
from mesh_core.analysis import verify_closed_surface, area_conservation, max_radius_deviation


def summarize(min_vertices: int, radius: float) -> dict:
    mesh = build_icosasphere(min_vertices, radius=radius)
    tables = build_vertex_indexed_tables(mesh)

    n_rounds = subdivisions_required(min_vertices)
    topology = verify_closed_surface(mesh.to_mesh_dict(name="icosasphere", n_subdivisions=n_rounds))
    conservation = area_conservation(mesh, tables.areas, radius=radius)

    distances = np.concatenate(tables.distances)
    half_lengths = np.concatenate(tables.half_edge_lengths)

    print("=" * 60)
    print(f"ICOSASPHERE  target={min_vertices}  radius={radius}")
    print("=" * 60)
    print(f"  rounds = {n_rounds}")
    print(f"  V={mesh.n_vertices}, E={mesh.n_edges}, F={mesh.n_faces}, χ={mesh.euler_characteristic}")
    print(f"  closed manifold: {topology['is_closed_manifold']}, "
          f"oriented: {topology['is_consistently_oriented']}, sphere: {topology['is_sphere']}")
    print(f"  max |‖p‖ - r| = {max_radius_deviation(mesh, radius):.2e}")
    print(f"  degrees: {dict(sorted(Counter(tables.degrees().tolist()).items()))}")
    print(f"  edge length (arc): {distances.min():.6g} .. {distances.max():.6g}")
    print(f"  half-edge length:  {half_lengths.min():.6g} .. {half_lengths.max():.6g}")
    print(f"  Σ areas = {conservation['total_area']:.6g}")
    print(f"    vs 4πr² = {conservation['sphere_area']:.6g}  "
          f"(rel. err {conservation['relative_error_sphere']:.2e})")
    print(f"    vs hull = {conservation['hull_area']:.6g}  "
          f"(rel. err {conservation['relative_error_hull']:.2e})")

    return {'mesh': mesh, 'tables': tables, 'topology': topology, 'conservation': conservation}


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Build an icosasphere and summarize its vertex tables")
    parser.add_argument("--min-vertices", type=int, default=642, help="Minimum number of vertices")
    parser.add_argument("--radius", type=float, default=1.0, help="Sphere radius")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each subdivision round")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    summarize(args.min_vertices, args.radius)
