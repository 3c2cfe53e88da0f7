"""
Base Polyhedra
==============

Closed convex solids centred at the origin, returned as Polyhedron objects.

POLYHEDRA INCLUDED:
    - Icosahedron (V=12, E=30, F=20)  - seed of every icosasphere
    - Tetrahedron (V=4,  E=6,  F=4)
    - Cube        (V=8,  E=12, F=6)
    - Octahedron  (V=6,  E=12, F=8)

All vertices lie on the sphere of the requested radius. Faces are wound
anticlockwise seen from outside: every face cycle is ordered by angle about
its outward normal (the face centroid direction for these solids).

The tetrahedron and cube are degree-3 everywhere and are the small meshes
the area tables are checked against.
"""

import numpy as np
from itertools import product
from typing import List, Sequence

from .polyhedron import Polyhedron
from ..spec.primitives import Vertex
from ..spec.constants import DEFAULT_RADIUS, GOLDEN_RATIO, EPS_CLOSE
from ..operators.angular import anticlockwise_order


def _on_sphere(coords: np.ndarray, radius: float) -> np.ndarray:
    coords = np.asarray(coords, dtype=float)
    return coords / np.linalg.norm(coords, axis=1, keepdims=True) * radius


def _wind_outward(face_idx: Sequence[int], coords: np.ndarray) -> List[int]:
    """Order a convex face's vertex indices anticlockwise about its outward normal."""
    face_coords = coords[list(face_idx)]
    centroid = face_coords.mean(axis=0)
    order = anticlockwise_order(centroid, face_coords - centroid)
    return [face_idx[o] for o in order]


def _polyhedron_from_indices(coords: np.ndarray, faces: Sequence[Sequence[int]]) -> Polyhedron:
    vertices = [Vertex(p) for p in coords]
    return Polyhedron([[vertices[i] for i in face] for face in faces])


def build_icosahedron(radius: float = DEFAULT_RADIUS) -> Polyhedron:
    """
    Build a regular icosahedron inscribed in the sphere of `radius`.

    CONSTRUCTION:
        Vertices are the cyclic permutations of (±1, ±φ, 0), φ the golden ratio.
        The face list is the standard one (anticlockwise from outside).

    TOPOLOGY:
        V = 12, E = 30, F = 20, χ = 2. Every vertex has degree 5.
    """
    r = GOLDEN_RATIO
    coords = np.array([
        [-1.0,   r, 0.0], [ 1.0,   r, 0.0], [-1.0,  -r, 0.0], [ 1.0,  -r, 0.0],
        [0.0, -1.0,   r], [0.0,  1.0,   r], [0.0, -1.0,  -r], [0.0,  1.0,  -r],
        [  r, 0.0, -1.0], [  r, 0.0,  1.0], [ -r, 0.0, -1.0], [ -r, 0.0,  1.0],
    ])
    faces = [
        [0, 11, 5], [0, 5, 1], [0, 1, 7], [0, 7, 10], [0, 10, 11],
        [1, 5, 9], [5, 11, 4], [11, 10, 2], [10, 7, 6], [7, 1, 8],
        [3, 9, 4], [3, 4, 2], [3, 2, 6], [3, 6, 8], [3, 8, 9],
        [5, 4, 9], [2, 4, 11], [6, 2, 10], [8, 6, 7], [9, 8, 1],
    ]
    return _polyhedron_from_indices(_on_sphere(coords, radius), faces)


def build_tetrahedron(radius: float = DEFAULT_RADIUS) -> Polyhedron:
    """
    Build a regular tetrahedron (alternating corners of the cube).

    TOPOLOGY:
        V = 4, E = 6, F = 4, χ = 2. Degree 3, every pair of vertices is an edge.
    """
    coords = _on_sphere([(1, 1, 1), (1, -1, -1), (-1, 1, -1), (-1, -1, 1)], radius)
    faces = [[0, 1, 2], [0, 1, 3], [0, 2, 3], [1, 2, 3]]
    return _polyhedron_from_indices(coords, [_wind_outward(f, coords) for f in faces])


def build_cube(radius: float = DEFAULT_RADIUS) -> Polyhedron:
    """
    Build a cube with corners at (±1, ±1, ±1), scaled onto the sphere.

    TOPOLOGY:
        V = 8, E = 12, F = 6 (squares), χ = 2. Degree 3.
    """
    corners = sorted(product([-1, 1], repeat=3))
    coords = _on_sphere(corners, radius)

    faces = []
    for axis in range(3):
        for sign in [-1, 1]:
            face_idx = [i for i, v in enumerate(corners) if v[axis] == sign]
            faces.append(_wind_outward(face_idx, coords))

    if len(faces) != 6:
        raise ValueError(f"Expected 6 faces, got {len(faces)}")

    return _polyhedron_from_indices(coords, faces)


def build_octahedron(radius: float = DEFAULT_RADIUS) -> Polyhedron:
    """
    Build a regular octahedron with vertices on the coordinate axes.

    TOPOLOGY:
        V = 6, E = 12, F = 8 (one triangle per octant), χ = 2. Degree 4.
    """
    axes = [(1, 0, 0), (-1, 0, 0), (0, 1, 0), (0, -1, 0), (0, 0, 1), (0, 0, -1)]
    coords = _on_sphere(axes, radius)

    faces = []
    for octant in product([-1, 1], repeat=3):
        # A vertex is on the octant's face if its nonzero coordinate has the octant's sign
        face_idx = [i for i, v in enumerate(axes)
                    if all(c == 0 or c == s for c, s in zip(v, octant))]
        faces.append(_wind_outward(face_idx, coords))

    if any(len(face) != 3 for face in faces):
        raise ValueError("Octahedron faces must be triangles")

    return _polyhedron_from_indices(coords, faces)


def is_outward_wound(polyhedron: Polyhedron) -> bool:
    """True if every face's first-corner normal points away from the origin."""
    for face in polyhedron.faces:
        p0, p1, p2 = (v.position for v in face.vertices[:3])
        if np.dot(np.cross(p1 - p0, p2 - p0), face.center()) <= EPS_CLOSE:
            return False
    return True


# Self-test
if __name__ == "__main__":
    print("=" * 60)
    print("BASE POLYHEDRA")
    print("=" * 60)

    for name, builder in [("Icosahedron", build_icosahedron),
                          ("Tetrahedron", build_tetrahedron),
                          ("Cube", build_cube),
                          ("Octahedron", build_octahedron)]:
        mesh = builder()
        print(f"\n{name}:")
        print(f"  V={mesh.n_vertices}, E={mesh.n_edges}, F={mesh.n_faces}, χ={mesh.euler_characteristic}")
        print(f"  outward wound: {is_outward_wound(mesh)}")
