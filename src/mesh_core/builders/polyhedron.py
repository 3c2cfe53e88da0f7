"""
Polyhedron
==========

The assembled mesh: entities, adjacency maps and dense indices.

Built once from a list of faces (anticlockwise vertex cycles) and never
modified. Every query is a dict lookup over maps computed at construction.

    >>> mesh = Polyhedron(vertex_lists)
    >>> for vertex in mesh.vertices:
    ...     mesh.neighbours_of(vertex)      # anticlockwise
    ...     mesh.faces_of(vertex)           # faces[i] between edges[i-1], edges[i]
"""

import numpy as np
from typing import Dict, Iterable, List, Tuple, Union

from . import topology
from ..spec.primitives import Vertex, Edge, Face
from ..spec.structures import create_mesh


class Polyhedron:

    def __init__(self, vertex_lists: Iterable[Iterable[Vertex]]):
        vertex_lists = [list(vertex_list) for vertex_list in vertex_lists]

        self.faces: Tuple[Face, ...] = tuple(topology.faces_of(vertex_lists))
        self.vertices: Tuple[Vertex, ...] = tuple(topology.vertices_of(vertex_lists))
        self.edges: Tuple[Edge, ...] = tuple(topology.edges_of(self.faces))

        self._vertex_edges = topology.vertex_to_edges(self.vertices, self.edges)
        self._vertex_faces = topology.vertex_to_faces(self.vertices, self.faces, self._vertex_edges)
        self._face_edges = topology.face_to_edges(self.faces, self._vertex_edges.__getitem__)
        self._edge_faces = topology.edge_to_faces(self.edges, self.faces, self._face_edges.__getitem__)

        self._vertex_index = topology.index_of(self.vertices)
        self._edge_index = topology.index_of(self.edges)
        self._face_index = topology.index_of(self.faces)

    def __repr__(self) -> str:
        return f"Polyhedron(V={self.n_vertices}, E={self.n_edges}, F={self.n_faces})"

    # -------------------------------------------------------------------------
    # Sizes
    # -------------------------------------------------------------------------

    @property
    def n_vertices(self) -> int:
        return len(self.vertices)

    @property
    def n_edges(self) -> int:
        return len(self.edges)

    @property
    def n_faces(self) -> int:
        return len(self.faces)

    @property
    def euler_characteristic(self) -> int:
        return self.n_vertices - self.n_edges + self.n_faces

    # -------------------------------------------------------------------------
    # Adjacency queries
    # -------------------------------------------------------------------------

    def neighbours_of(self, vertex: Vertex) -> List[Vertex]:
        """Far endpoints of the edges of `vertex`, anticlockwise."""
        return [edge.other(vertex) for edge in self._vertex_edges[vertex]]

    def edges_of(self, entity: Union[Vertex, Face]) -> List[Edge]:
        """
        Edges around a vertex (anticlockwise) or around a face (boundary order,
        edge k joins face vertex k to vertex k+1).
        """
        if isinstance(entity, Vertex):
            return list(self._vertex_edges[entity])
        if isinstance(entity, Face):
            return list(self._face_edges[entity])
        raise TypeError(f"edges_of expects a Vertex or Face, got {type(entity).__name__}")

    def faces_of(self, entity: Union[Vertex, Edge]) -> List[Face]:
        """Faces around a vertex (aligned with edges_of) or the two faces of an edge."""
        if isinstance(entity, Vertex):
            return list(self._vertex_faces[entity])
        if isinstance(entity, Edge):
            return list(self._edge_faces[entity])
        raise TypeError(f"faces_of expects a Vertex or Edge, got {type(entity).__name__}")

    def index_of(self, entity: Union[Vertex, Edge, Face]) -> int:
        if isinstance(entity, Vertex):
            return self._vertex_index[entity]
        if isinstance(entity, Edge):
            return self._edge_index[entity]
        if isinstance(entity, Face):
            return self._face_index[entity]
        raise TypeError(f"index_of expects a Vertex, Edge or Face, got {type(entity).__name__}")

    def bisection_point(self, edge: Edge) -> np.ndarray:
        return edge.bisection_point()

    # -------------------------------------------------------------------------
    # Index-based views
    # -------------------------------------------------------------------------

    @property
    def positions(self) -> np.ndarray:
        """(V, 3) array, row i = position of the vertex with dense index i."""
        return np.array([vertex.position for vertex in self.vertices])

    def edge_indices(self) -> List[Tuple[int, int]]:
        """Edges as (i, j) vertex index pairs with i < j, in dense edge order."""
        pairs = []
        for edge in self.edges:
            i, j = self._vertex_index[edge.a], self._vertex_index[edge.b]
            pairs.append((min(i, j), max(i, j)))
        return pairs

    def face_indices(self) -> List[List[int]]:
        """Faces as anticlockwise cycles of vertex indices, in dense face order."""
        return [[self._vertex_index[v] for v in face] for face in self.faces]

    def to_mesh_dict(self, name: str = "polyhedron", n_subdivisions: int = 0) -> Dict:
        """Contract-compliant mesh dict (see spec/structures.py)."""
        return create_mesh(self.positions, self.edge_indices(), self.face_indices(),
                           name=name, n_subdivisions=n_subdivisions)
