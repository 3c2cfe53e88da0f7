"""Entities, constants and the mesh dict contract."""

from .constants import (
    EPS_ZERO,
    EPS_CLOSE,
    SPHERE_TOL,
    DEFAULT_RADIUS,
    COMPLEX_SURFACE,
    FACES_PER_EDGE,
)
from .primitives import Vertex, Edge, Face, MeshTopologyError, at_cyclic_index
from .structures import MeshContract, validate_mesh, create_mesh
