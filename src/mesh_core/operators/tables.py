"""
Vertex-Indexed Tables
=====================

Flatten a Polyhedron's adjacency maps into arrays indexed by dense vertex
index, for constant-time access while a solver steps.

For vertex v with index i, degree d, edges e_0..e_{d-1} (anticlockwise),
neighbours q_k across e_k and faces f_k between e_{k-1} and e_k:

    neighbours[i]        (d,)   int    index of q_k
    edge_normals[i]      (d, 3) float  normalize(p × (q_k - p))
    half_edge_lengths[i] (d,)   float  ‖q_k - bisection(e_k)‖
    distances[i]         (d,)   float  e_k.length()  (arc length)
    faces[i]             (d,)   int    index of f_k
    normals              (V, 3) float  p / ‖p‖
    area_in_each_face[i] (d,)   float  share of f_k in the cell of v
    areas                (V,)   float  Σ_k area_in_each_face[i][k]

NOTE: half_edge_lengths is measured from the NEIGHBOUR to the bisection point
and is a planar distance, not a geodesic one.

No table revalidates the mesh. Build meshes with Polyhedron / icosasphere.
"""

import logging
import numpy as np
from dataclasses import dataclass
from typing import TYPE_CHECKING, List

from ..spec.primitives import at_cyclic_index

if TYPE_CHECKING:
    from ..builders.polyhedron import Polyhedron

logger = logging.getLogger(__name__)


def neighbours(surface: "Polyhedron") -> List[np.ndarray]:
    table = [None] * surface.n_vertices
    for vertex in surface.vertices:
        table[surface.index_of(vertex)] = np.array(
            [surface.index_of(neighbour) for neighbour in surface.neighbours_of(vertex)], dtype=int)
    return table


def edge_normals(surface: "Polyhedron") -> List[np.ndarray]:
    """
    Unit vectors perpendicular to each vertex and to each of its edges.

    Normals point anticlockwise around the vertex.
    """
    table = [None] * surface.n_vertices
    for vertex in surface.vertices:
        p = vertex.position
        edge_vectors = np.array([q.position - p for q in surface.neighbours_of(vertex)])
        crossed = np.cross(p, edge_vectors)
        table[surface.index_of(vertex)] = crossed / np.linalg.norm(crossed, axis=1, keepdims=True)
    return table


def half_edge_lengths(surface: "Polyhedron") -> List[np.ndarray]:
    table = [None] * surface.n_vertices
    for vertex in surface.vertices:
        lengths = []
        for edge in surface.edges_of(vertex):
            neighbour = edge.other(vertex)
            # planar distance, not geodesic
            lengths.append(np.linalg.norm(neighbour.position - surface.bisection_point(edge)))
        table[surface.index_of(vertex)] = np.array(lengths)
    return table


def distances(surface: "Polyhedron") -> List[np.ndarray]:
    """Spherical distance from each vertex to each neighbour."""
    table = [None] * surface.n_vertices
    for vertex in surface.vertices:
        table[surface.index_of(vertex)] = np.array(
            [edge.length() for edge in surface.edges_of(vertex)])
    return table


def faces(surface: "Polyhedron") -> List[np.ndarray]:
    """
    Faces around each vertex. The ith edge of surface.edges_of is
    anticlockwise of the ith face.
    """
    table = [None] * surface.n_vertices
    for vertex in surface.vertices:
        table[surface.index_of(vertex)] = np.array(
            [surface.index_of(face) for face in surface.faces_of(vertex)], dtype=int)
    return table


def normals(surface: "Polyhedron") -> np.ndarray:
    positions = surface.positions
    return positions / np.linalg.norm(positions, axis=1, keepdims=True)


def area_in_each_face(surface: "Polyhedron") -> List[np.ndarray]:
    """
    Area shared by each vertex and each face around it.

    The share of face f_k is the quadrilateral
        (bisection of e_{k-1}, v, center of f_k, bisection of e_k)
    split at v into two triangles, each measured as half the cross product of
    its two edge vectors from v, projected onto the unit face-center direction.
    """
    table = [None] * surface.n_vertices
    for vertex in surface.vertices:
        edges = surface.edges_of(vertex)
        faces_around = surface.faces_of(vertex)
        table[surface.index_of(vertex)] = np.array(
            [area_shared_by_vertex_and_face(vertex, edges, faces_around, k)
             for k in range(len(faces_around))])
    return table


def area_shared_by_vertex_and_face(vertex, edges, faces_around, index: int) -> float:
    """
    Share of faces_around[index] in the cell of `vertex`.

    `edges` and `faces_around` are the vertex's aligned lists from
    Polyhedron.edges_of / faces_of, fetched once per vertex.
    """
    p = vertex.position

    face_center = faces_around[index].center()
    direction = face_center / np.linalg.norm(face_center)

    previous_midpoint = at_cyclic_index(edges, index - 1).bisection_point()
    next_midpoint = at_cyclic_index(edges, index).bisection_point()

    first = np.dot(np.cross(previous_midpoint - p, face_center - p), direction) / 2
    second = np.dot(np.cross(face_center - p, next_midpoint - p), direction) / 2

    return float(first + second)


def areas(surface: "Polyhedron") -> np.ndarray:
    """Total cell area assigned to each vertex."""
    return np.array([shares.sum() for shares in area_in_each_face(surface)])


@dataclass(frozen=True)
class VertexIndexedTables:
    """All vertex-indexed tables of one mesh, read-only by convention."""
    neighbours: List[np.ndarray]
    edge_normals: List[np.ndarray]
    half_edge_lengths: List[np.ndarray]
    distances: List[np.ndarray]
    faces: List[np.ndarray]
    normals: np.ndarray
    area_in_each_face: List[np.ndarray]
    areas: np.ndarray

    @property
    def n_vertices(self) -> int:
        return len(self.neighbours)

    def degrees(self) -> np.ndarray:
        return np.array([len(n) for n in self.neighbours], dtype=int)


def build_vertex_indexed_tables(surface: "Polyhedron") -> VertexIndexedTables:
    shares = area_in_each_face(surface)
    tables = VertexIndexedTables(
        neighbours=neighbours(surface),
        edge_normals=edge_normals(surface),
        half_edge_lengths=half_edge_lengths(surface),
        distances=distances(surface),
        faces=faces(surface),
        normals=normals(surface),
        area_in_each_face=shares,
        areas=np.array([s.sum() for s in shares]),
    )
    logger.debug("Built vertex-indexed tables for %r", surface)
    return tables
