r"""
Icosasphere Construction
========================

Recursive 1-to-4 subdivision of the icosahedron, re-projected onto the sphere.

ONE ROUND (triangle v0 v1 v2, edge midpoints m01 m12 m20):

            v2
           /  \
        m20 -- m12
        /  \  /  \
      v0 -- m01 -- v1

    corner faces  (v0, m01, m20)  (v1, m12, m01)  (v2, m20, m12)
    central face  (m01, m12, m20)

    All four keep the parent's anticlockwise winding. Every vertex of the
    new mesh is a new Vertex at unit distance (× radius) from the origin.

GROWTH PER ROUND:
    V' = V + E
    E' = 2E + 3F
    F' = 4F

The number of rounds needed for a vertex target is computed from this
recurrence alone, so no intermediate mesh is built just to measure it.
"""

import logging
import numpy as np

from .polyhedra import build_icosahedron
from .polyhedron import Polyhedron
from ..spec.primitives import Vertex, MeshTopologyError, at_cyclic_index
from ..spec.constants import DEFAULT_RADIUS, ICOSAHEDRON_V, ICOSAHEDRON_E, ICOSAHEDRON_F

logger = logging.getLogger(__name__)


def subdivisions_required(minimum_vertices: int) -> int:
    """
    Fewest subdivision rounds after which the icosasphere has at least
    `minimum_vertices` vertices.

    Example:
        >>> subdivisions_required(12), subdivisions_required(13), subdivisions_required(642)
        (0, 1, 3)
    """
    if minimum_vertices < 1:
        raise ValueError(f"minimum_vertices must be a positive integer, got {minimum_vertices}")

    vertices, edges, faces = ICOSAHEDRON_V, ICOSAHEDRON_E, ICOSAHEDRON_F

    subdivisions = 0
    while vertices < minimum_vertices:
        vertices = vertices + edges
        edges = 2 * edges + 3 * faces
        faces = 4 * faces
        subdivisions += 1

    return subdivisions


def _on_sphere(position: np.ndarray, radius: float) -> Vertex:
    return Vertex(position / np.linalg.norm(position) * radius)


def subdivide(polyhedron: Polyhedron, radius: float = DEFAULT_RADIUS) -> Polyhedron:
    """
    Split every triangle into four and project onto the sphere.

    The input is not modified; the result shares no entity with it.

    Raises:
        MeshTopologyError: if a face is not a triangle
    """
    new_vertex = {vertex: _on_sphere(vertex.position, radius) for vertex in polyhedron.vertices}
    midpoint_vertex = {edge: _on_sphere(edge.bisection_point(), radius) for edge in polyhedron.edges}

    new_faces = []
    for face in polyhedron.faces:
        if len(face) != 3:
            raise MeshTopologyError(f"Only triangles can be subdivided, got a {len(face)}-gon")
        # edge k joins face vertex k to vertex k+1
        midpoints = [midpoint_vertex[edge] for edge in polyhedron.edges_of(face)]
        for k, vertex in enumerate(face.vertices):
            new_faces.append([new_vertex[vertex], midpoints[k], at_cyclic_index(midpoints, k - 1)])
        new_faces.append(midpoints)

    return Polyhedron(new_faces)


def project_onto_sphere(polyhedron: Polyhedron, radius: float = DEFAULT_RADIUS) -> Polyhedron:
    """Same topology, every vertex replaced by a new one pushed onto the sphere."""
    new_vertex = {vertex: _on_sphere(vertex.position, radius) for vertex in polyhedron.vertices}
    return Polyhedron([[new_vertex[v] for v in face] for face in polyhedron.faces])


def build_icosasphere(minimum_vertices: int, radius: float = DEFAULT_RADIUS) -> Polyhedron:
    """
    Icosasphere with the fewest vertices that is at least `minimum_vertices`.

    Args:
        minimum_vertices: positive vertex target
        radius: sphere radius

    Returns:
        Polyhedron: 10·4ⁿ + 2 vertices for n = subdivisions_required(minimum_vertices)
    """
    n_subdivisions = subdivisions_required(minimum_vertices)
    mesh = build_icosahedron(radius)
    logger.info("Building icosasphere: target=%d vertices, %d subdivision round(s)",
                minimum_vertices, n_subdivisions)

    for round_idx in range(n_subdivisions):
        mesh = subdivide(mesh, radius)
        logger.info("Subdivision %d/%d: %r", round_idx + 1, n_subdivisions, mesh)

    return mesh


# Self-test
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    for target in [12, 13, 42, 43, 642]:
        mesh = build_icosasphere(target)
        print(f"target={target:4d}  rounds={subdivisions_required(target)}  {mesh}")
