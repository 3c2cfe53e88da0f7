"""
Incidence Matrices
==================

Oriented incidence of a mesh dict (see spec/structures.py), as sparse CSR.

    d₀ : E × V   row e = (edge (i, j)):  -1 at i, +1 at j     (i < j)
    d₁ : F × E   row f = (face cycle):   ±1 per boundary edge, + when the
                 cycle walks the edge from i to j

WHAT analysis/verify_topology.py READS FROM THEM:
    d₁d₀ = 0             every face boundary is a closed walk
    Σ_f |d₁[f, e]|       faces bounded by edge e (2 on a closed surface)
    Σ_f  d₁[f, e]        0 iff the two faces of e wind consistently
    graph of d₀          connected components of the edge graph
"""

import numpy as np
from scipy.sparse import csr_matrix, lil_matrix
from scipy.sparse.csgraph import connected_components
from typing import Dict, List, Sequence, Tuple

from ..spec.constants import EPS_CLOSE


def _edge_lookup(edges: Sequence[Tuple[int, int]]) -> Dict[Tuple[int, int], Tuple[int, int]]:
    """(v1, v2) -> (edge index, sign of walking v1 → v2 along it)."""
    lookup = {}
    for e_idx, (i, j) in enumerate(edges):
        lookup[(i, j)] = (e_idx, +1)
        lookup[(j, i)] = (e_idx, -1)
    return lookup


def build_d0(vertices: np.ndarray, edges: List[Tuple[int, int]]) -> csr_matrix:
    """
    Edge-vertex incidence, source -1 and target +1.

    Only len(vertices) is used.
    """
    d0 = lil_matrix((len(edges), len(vertices)))
    for e_idx, (i, j) in enumerate(edges):
        d0[e_idx, i] = -1
        d0[e_idx, j] = +1
    return d0.tocsr()


def build_d1(vertices: np.ndarray,
             edges: List[Tuple[int, int]],
             faces: List[List[int]]) -> csr_matrix:
    """
    Face-edge incidence, signed by the direction each face cycle walks an edge.

    FAIL-FAST:
        ValueError if a face walks a segment that is not an edge, or walks
        the same edge twice.
    """
    lookup = _edge_lookup(edges)
    d1 = lil_matrix((len(faces), len(edges)))

    for f_idx, face in enumerate(faces):
        seen = set()
        for v1, v2 in zip(face, list(face[1:]) + [face[0]]):
            if (v1, v2) not in lookup:
                raise ValueError(f"Face {f_idx} uses segment ({v1},{v2}) which is not in edge list "
                                 f"(face {list(face)})")
            e_idx, sign = lookup[(v1, v2)]
            if e_idx in seen:
                raise ValueError(f"Face {f_idx} uses edge {e_idx} twice (face {list(face)})")
            seen.add(e_idx)
            d1[f_idx, e_idx] = sign

    return d1.tocsr()


def build_incidence_matrices(mesh: dict) -> Tuple[csr_matrix, csr_matrix]:
    """
    d₀ and d₁ of a mesh dict.

    Raises:
        ValueError: if d₁d₀ ≠ 0
    """
    d0 = build_d0(mesh['V'], mesh['E'])
    d1 = build_d1(mesh['V'], mesh['E'], mesh['F'])

    residual = abs(d1 @ d0).max() if d1.nnz else 0.0
    if residual > EPS_CLOSE:
        raise ValueError(f"Exactness failed: max |d₁d₀| = {residual}")

    return d0, d1


def count_connected_components(d0: csr_matrix) -> int:
    """Connected components of the edge graph (vertex adjacency = |d₀|ᵀ|d₀|)."""
    adjacency = abs(d0).T @ abs(d0)
    n_components, _ = connected_components(adjacency, directed=False)
    return int(n_components)
