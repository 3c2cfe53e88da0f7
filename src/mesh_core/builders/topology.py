"""
Mesh Topology Builder
=====================

From an unordered collection of faces (each an anticlockwise vertex cycle)
derive the unique edges and every adjacency map a Polyhedron needs.

MAPS:
    vertex → edges   sorted anticlockwise about the vertex position
    vertex → faces   aligned with the edges: faces[i] between edges[i-1], edges[i]
    face   → edges   one per boundary pair, closing pair last
    edge   → faces   exactly two for a closed 2-manifold

FAIL-FAST:
    Any lookup that must have exactly one answer and does not raises
    MeshTopologyError. Nothing partially built is returned.

All maps are dicts keyed by entity identity (Edge by unordered endpoints).
"""

import numpy as np
from typing import Callable, Dict, Iterable, List, Sequence, TypeVar

from ..spec.primitives import Vertex, Edge, Face, MeshTopologyError, at_cyclic_index
from ..operators.angular import anticlockwise_order

T = TypeVar("T")


def vertices_of(vertex_lists: Iterable[Iterable[Vertex]]) -> List[Vertex]:
    """Every vertex appearing in any face, once each, in first-seen order."""
    return list(dict.fromkeys(v for vertex_list in vertex_lists for v in vertex_list))


def faces_of(vertex_lists: Iterable[Iterable[Vertex]]) -> List[Face]:
    return [Face(vertex_list) for vertex_list in vertex_lists]


def edges_around_face(face: Face) -> List[Edge]:
    return [Edge(a, b) for a, b in face.boundary_pairs()]


def edges_of(faces: Iterable[Face]) -> List[Edge]:
    """
    Boundary edges of all faces, deduplicated.

    Two faces sharing a boundary produce Edge(a, b) and Edge(b, a); these
    compare equal, so the shared boundary appears once.
    """
    return list(dict.fromkeys(edge for face in faces for edge in edges_around_face(face)))


def vertex_to_edges(vertices: Sequence[Vertex],
                    edges: Iterable[Edge]) -> Dict[Vertex, List[Edge]]:
    """
    Edges touching each vertex, sorted anticlockwise about its position.

    Each edge is placed by the direction of its spherical center as seen
    from the vertex.
    """
    vertex_edges = {vertex: [] for vertex in vertices}
    for edge in edges:
        vertex_edges[edge.a].append(edge)
        vertex_edges[edge.b].append(edge)

    for vertex in vertices:
        incident = vertex_edges[vertex]
        if not incident:
            raise MeshTopologyError(f"{vertex} has no incident edges")
        directions = np.array([edge.spherical_center() for edge in incident])
        order = anticlockwise_order(vertex.position, directions)
        vertex_edges[vertex] = [incident[k] for k in order]

    return vertex_edges


def vertex_to_faces(vertices: Sequence[Vertex],
                    faces: Iterable[Face],
                    vertex_edges: Dict[Vertex, List[Edge]]) -> Dict[Vertex, List[Face]]:
    """
    Faces around each vertex, in the order of its edges.

    faces[i] is the face holding both the neighbour across edges[i] and the
    neighbour across edges[i-1], i.e. the face anticlockwise-between them.
    """
    vertex_faces = {vertex: [] for vertex in vertices}
    for face in faces:
        for vertex in face:
            vertex_faces[vertex].append(face)

    for vertex in vertices:
        vertex_faces[vertex] = sort_faces_to_match_edge_order(
            vertex, vertex_edges[vertex], vertex_faces[vertex])

    return vertex_faces


def sort_faces_to_match_edge_order(vertex: Vertex,
                                   edges: Sequence[Edge],
                                   faces: Sequence[Face]) -> List[Face]:
    ordered_faces = []
    for index in range(len(edges)):
        this_neighbour = at_cyclic_index(edges, index).other(vertex)
        previous_neighbour = at_cyclic_index(edges, index - 1).other(vertex)

        between = [face for face in faces
                   if this_neighbour in face and previous_neighbour in face]
        if len(between) != 1:
            raise MeshTopologyError(
                f"Expected exactly one face around {vertex} between edges "
                f"{index - 1} and {index}, found {len(between)}")
        ordered_faces.append(between[0])

    return ordered_faces


def face_to_edges(faces: Iterable[Face],
                  edges_of_vertex: Callable[[Vertex], List[Edge]]) -> Dict[Face, List[Edge]]:
    return {face: edges_of_face(face, edges_of_vertex) for face in faces}


def edges_of_face(face: Face, edges_of_vertex: Callable[[Vertex], List[Edge]]) -> List[Edge]:
    """The edge joining each boundary pair, found by intersecting edge lists."""
    edges = []
    for a, b in face.boundary_pairs():
        common = [edge for edge in edges_of_vertex(a) if edge.has(b)]
        if len(common) != 1:
            raise MeshTopologyError(
                f"Expected exactly one edge joining {a} and {b}, found {len(common)}")
        edges.append(common[0])
    return edges


def edge_to_faces(edges: Iterable[Edge],
                  faces: Iterable[Face],
                  edges_of_face: Callable[[Face], List[Edge]]) -> Dict[Edge, List[Face]]:
    """
    Faces bounded by each edge.

    FAIL-FAST:
        Raises MeshTopologyError for an edge with other than two faces
        (open boundary or non-manifold junction).
    """
    edge_faces = {edge: [] for edge in edges}
    for face in faces:
        for edge in edges_of_face(face):
            edge_faces[edge].append(face)

    for edge, incident in edge_faces.items():
        if len(incident) != 2:
            raise MeshTopologyError(f"{edge} bounds {len(incident)} faces, expected 2")

    return edge_faces


def index_of(items: Iterable[T]) -> Dict[T, int]:
    """Dense zero-based index of each item, in iteration order."""
    return {item: i for i, item in enumerate(items)}
