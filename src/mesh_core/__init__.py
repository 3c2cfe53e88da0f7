"""
MESH_CORE - Icosasphere geometry and topology
=============================================

NO solver. NO rendering. NO config files.

Structure:
    spec/       - Vertex/Edge/Face, constants, mesh dict contract
    builders/   - Topology builder, Polyhedron, base solids, subdivision
    operators/  - Angular ordering, vertex-indexed tables, incidence
    analysis/   - Closed-surface and area verification

Typical use:
    mesh = build_icosasphere(minimum_vertices=642)
    tables = build_vertex_indexed_tables(mesh)
    tables.neighbours[i], tables.areas[i], ...
"""

import sys

import numpy as np
import scipy


def _version_tuple(version: str) -> tuple:
    """Leading (major, minor) of a version string, '1.11.0rc1' -> (1, 11)."""
    return tuple(int(p) for p in version.split('.')[:2] if p.isdigit())


if sys.version_info < (3, 9):
    raise ImportError(f"mesh_core requires Python >= 3.9, got {sys.version}")

# ConvexHull.area and csgraph behaviour relied on by analysis/
if _version_tuple(scipy.__version__) < (1, 11):
    raise ImportError(f"mesh_core requires scipy >= 1.11, got {scipy.__version__}")

if _version_tuple(np.__version__) < (1, 20):
    raise ImportError(f"mesh_core requires numpy >= 1.20, got {np.__version__}")

from . import spec
from . import builders
from . import operators
from . import analysis

from .builders import Polyhedron, build_icosasphere
from .operators import build_vertex_indexed_tables
