"""
Mesh builders - topology construction, base solids, subdivision.

EXPORTS:
- Polyhedron: assembled mesh with adjacency and index maps
- Topology builder functions: see builders/topology.py (imported as a module)
- Base solids: build_icosahedron, build_tetrahedron, build_cube, build_octahedron
- Icosasphere: build_icosasphere, subdivide, project_onto_sphere, subdivisions_required
"""

from . import topology
from .polyhedron import Polyhedron

# === Base solids (return Polyhedron) ===
from .polyhedra import (
    build_icosahedron,
    build_tetrahedron,
    build_cube,
    build_octahedron,
    is_outward_wound,
)

# === Subdivision ===
from .icosasphere import (
    build_icosasphere,
    subdivide,
    project_onto_sphere,
    subdivisions_required,
)
