"""
Topology Verification Functions
===============================

Check structural and geometric properties of a built mesh.

These functions are in analysis/ layer because they depend on operators.
They report; they never repair.
"""

import numpy as np
from scipy.spatial import ConvexHull
from typing import Dict, List

from ..spec.constants import DEFAULT_RADIUS, EPS_CLOSE
from ..spec.primitives import at_cyclic_index
from ..operators.incidence import build_incidence_matrices, count_connected_components


def verify_closed_surface(mesh: dict) -> Dict:
    """
    Verify a mesh dict describes a closed, consistently wound sphere.

    Args:
        mesh: contract mesh dict (Polyhedron.to_mesh_dict())

    Returns:
        dict with verification results
    """
    d0, d1 = build_incidence_matrices(mesh)

    # Count how many faces each edge bounds
    faces_per_edge = np.asarray(abs(d1).sum(axis=0)).ravel()
    orientation_sums = np.asarray(d1.sum(axis=0)).ravel()

    k = mesh['faces_per_edge']
    chi = mesh['n_V'] - mesh['n_E'] + mesh['n_F']
    components = count_connected_components(d0)

    # Trace theorem for a surface: Tr(d₁ᵀd₁) = Σ d₁² = kE
    trace = d1.multiply(d1).sum()
    trace_ok = abs(trace - k * mesh['n_E']) < EPS_CLOSE

    return {
        'is_closed_manifold': bool(np.all(faces_per_edge == k)),
        'min_faces_per_edge': int(np.min(faces_per_edge)),
        'max_faces_per_edge': int(np.max(faces_per_edge)),
        'is_consistently_oriented': bool(np.all(np.abs(orientation_sums) < EPS_CLOSE)),
        'exactness_holds': True,  # build_incidence_matrices raises otherwise
        'trace_theorem_holds': bool(trace_ok),
        'euler_characteristic': int(chi),
        'n_components': components,
        'is_sphere': bool(chi == 2 and components == 1),
    }


def adjacency_violations(polyhedron) -> List[int]:
    """
    Dense indices of vertices whose faces and edges are not aligned.

    For every vertex v and every i, faces_of(v)[i] must contain v and the far
    endpoints of edges_of(v)[i] and edges_of(v)[i-1], and every edge listed
    for v must have v as an endpoint.
    """
    bad = []
    for vertex in polyhedron.vertices:
        edges = polyhedron.edges_of(vertex)
        faces = polyhedron.faces_of(vertex)
        aligned = len(edges) == len(faces) and all(edge.has(vertex) for edge in edges)
        if aligned:
            for i, face in enumerate(faces):
                this_neighbour = at_cyclic_index(edges, i).other(vertex)
                previous_neighbour = at_cyclic_index(edges, i - 1).other(vertex)
                if not (vertex in face and this_neighbour in face and previous_neighbour in face):
                    aligned = False
                    break
        if not aligned:
            bad.append(polyhedron.index_of(vertex))
    return bad


def max_radius_deviation(polyhedron, radius: float = DEFAULT_RADIUS) -> float:
    """max over vertices of | ‖p‖ - radius |."""
    return float(np.max(np.abs(np.linalg.norm(polyhedron.positions, axis=1) - radius)))


def hull_area(polyhedron) -> float:
    """
    Surface area of the convex hull of the vertex positions.

    For a mesh inscribed in a sphere with flat triangular faces this is the
    total flat face area, the reference value for Σ areas.
    """
    return float(ConvexHull(polyhedron.positions).area)


def area_conservation(polyhedron, areas: np.ndarray, radius: float = DEFAULT_RADIUS) -> Dict:
    """
    Compare the per-vertex cell areas against the sphere and the hull.

    Args:
        polyhedron: mesh inscribed in the sphere of `radius`
        areas: (V,) per-vertex cell areas (operators.tables.areas)

    Returns:
        dict with totals and relative errors
    """
    total = float(np.sum(areas))
    sphere = 4 * np.pi * radius ** 2
    hull = hull_area(polyhedron)
    return {
        'total_area': total,
        'sphere_area': sphere,
        'hull_area': hull,
        'relative_error_sphere': abs(total - sphere) / sphere,
        'relative_error_hull': abs(total - hull) / hull,
    }
