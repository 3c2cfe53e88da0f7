"""
Guard and Edge Case Tests for mesh_core
=======================================

Tests for boundary conditions, guards, and edge cases.
Separated from the builder/table suites to keep those focused on invariants.

Run: python -m pytest tests/core/test_guards.py -v
"""

import warnings
from pathlib import Path

import pytest
import numpy as np

import mesh_core
from mesh_core.spec import Vertex, Edge, Face, MeshTopologyError
from mesh_core.spec.structures import create_mesh, validate_mesh
from mesh_core.builders import (
    Polyhedron,
    build_cube,
    build_tetrahedron,
    build_icosasphere,
    subdivide,
    subdivisions_required,
)
from mesh_core.operators.incidence import build_d1


# =============================================================================
# P1: CRITICAL - Degenerate entities
# =============================================================================

def test_edge_self_loop_raises():
    """P1.1: An edge from a vertex to itself has no direction."""
    v = Vertex([1, 0, 0])
    with pytest.raises(MeshTopologyError, match="distinct"):
        Edge(v, v)


def test_face_with_two_vertices_raises():
    """P1.2: Faces need at least 3 vertices."""
    with pytest.raises(MeshTopologyError, match="at least 3"):
        Face([Vertex([1, 0, 0]), Vertex([0, 1, 0])])


def test_face_with_repeated_vertex_raises():
    """P1.3: A cycle that revisits a vertex is not a face."""
    a, b = Vertex([1, 0, 0]), Vertex([0, 1, 0])
    with pytest.raises(MeshTopologyError, match="repeated"):
        Face([a, b, a])


def test_topology_error_is_value_error():
    """P1.4: Callers catching ValueError see topology failures too."""
    assert issubclass(MeshTopologyError, ValueError)


# =============================================================================
# P2: IMPORTANT - Builder guards
# =============================================================================

@pytest.mark.parametrize("bad", [0, -5])
def test_subdivisions_required_rejects_non_positive(bad):
    """P2.1: A mesh with fewer than one vertex is meaningless."""
    with pytest.raises(ValueError, match="positive"):
        subdivisions_required(bad)


def test_build_icosasphere_rejects_zero():
    with pytest.raises(ValueError):
        build_icosasphere(0)


def test_subdivide_rejects_quads():
    """P2.2: Subdivision splits triangles only."""
    with pytest.raises(MeshTopologyError, match="triangles"):
        subdivide(build_cube())


# =============================================================================
# P3: IMPORTANT - Non-closed input
# =============================================================================

def test_open_tetrahedron_raises():
    """P3.1: Removing one face leaves a vertex without a face between two edges."""
    a, b, c, d = (Vertex(p) for p in [[1, 1, 1], [1, -1, -1], [-1, 1, -1], [-1, -1, 1]])
    closed = [[a, b, c], [a, c, d], [a, d, b], [b, d, c]]

    Polyhedron(closed)
    with pytest.raises(MeshTopologyError):
        Polyhedron(closed[:-1])


def test_single_triangle_raises():
    """P3.2: Every edge of a lone triangle bounds one face, not two."""
    a, b, c = Vertex([1, 0, 0]), Vertex([0, 1, 0]), Vertex([0, 0, 1])
    with pytest.raises(MeshTopologyError, match="expected 2"):
        Polyhedron([[a, b, c]])


def test_duplicated_face_raises():
    """P3.3: Two faces between the same pair of edges make the face lookup ambiguous."""
    a, b, c, d = (Vertex(p) for p in [[1, 1, 1], [1, -1, -1], [-1, 1, -1], [-1, -1, 1]])
    closed = [[a, b, c], [a, c, d], [a, d, b], [b, d, c]]

    with pytest.raises(MeshTopologyError, match="found 2"):
        Polyhedron(closed + [[a, b, c]])


def test_vertex_at_origin_raises():
    """P3.4: Angular order about a zero vector is undefined."""
    origin = Vertex([0, 0, 0])
    a, b, c = Vertex([1, 0, 0]), Vertex([0, 1, 0]), Vertex([0, 0, 1])
    faces = [[origin, b, a], [origin, a, c], [origin, c, b], [a, b, c]]
    with pytest.raises(ValueError, match="zero-length axis"):
        Polyhedron(faces)


# =============================================================================
# P4: Query guards
# =============================================================================

def test_edges_of_edge_is_type_error():
    mesh = build_tetrahedron()
    with pytest.raises(TypeError, match="Vertex or Face"):
        mesh.edges_of(mesh.edges[0])


def test_faces_of_face_is_type_error():
    mesh = build_tetrahedron()
    with pytest.raises(TypeError, match="Vertex or Edge"):
        mesh.faces_of(mesh.faces[0])


def test_index_of_foreign_vertex_raises():
    """P4.1: Dense indices belong to one mesh; a same-position vertex is not in it."""
    mesh = build_tetrahedron()
    stranger = Vertex(mesh.vertices[0].position)
    with pytest.raises(KeyError):
        mesh.index_of(stranger)


def test_indices_do_not_transfer_between_meshes():
    first, second = build_tetrahedron(), build_tetrahedron()
    with pytest.raises(KeyError):
        second.index_of(first.faces[0])


# =============================================================================
# P5: Mesh contract
# =============================================================================

def _triangle_mesh(**overrides):
    mesh = create_mesh(np.eye(3), [(0, 1), (1, 2), (0, 2)], [[0, 1, 2]])
    mesh.update(overrides)
    return mesh


def test_create_mesh_is_always_a_surface():
    mesh = _triangle_mesh()
    assert mesh['complex_type'] == "surface"
    assert mesh['faces_per_edge'] == 2


def test_validate_mesh_rejects_unknown_complex_type():
    with pytest.raises(ValueError, match="Invalid complex_type"):
        validate_mesh(_triangle_mesh(complex_type="foam"))


def test_validate_mesh_rejects_wrong_faces_per_edge():
    is_valid, errors = validate_mesh(_triangle_mesh(faces_per_edge=3), strict=False)
    assert not is_valid
    assert any("faces_per_edge=2" in e for e in errors)


def test_create_mesh_rejects_unsorted_edge():
    with pytest.raises(ValueError, match="i<j"):
        create_mesh(np.eye(3), [(1, 0), (1, 2), (0, 2)], [[0, 1, 2]])


def test_create_mesh_rejects_face_segment_missing_from_edges():
    with pytest.raises(ValueError, match="not in edge list"):
        create_mesh(np.eye(3), [(0, 1), (1, 2)], [[0, 1, 2]])


def test_validate_mesh_non_strict_collects_errors():
    is_valid, errors = validate_mesh({'V': np.eye(3)}, strict=False)
    assert not is_valid
    assert any("Missing required field" in e for e in errors)


def test_build_d1_missing_segment_raises():
    with pytest.raises(ValueError, match="not in edge list"):
        build_d1(np.eye(3), [(0, 1), (1, 2)], [[0, 1, 2]])


# =============================================================================
# P6: Package hygiene
# =============================================================================

def test_sources_compile_without_warnings():
    """P6.1: ASCII diagrams in docstrings must not contain invalid escapes."""
    package_root = Path(mesh_core.__file__).parent
    sources = sorted(package_root.rglob("*.py"))
    assert any(path.name == "icosasphere.py" for path in sources)

    for path in sources:
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            compile(path.read_text(encoding="utf-8"), str(path), "exec")


@pytest.mark.parametrize("version,expected", [
    ("1.11.0", (1, 11)), ("1.11.0rc1", (1, 11)), ("2.0", (2, 0)), ("1.26.4", (1, 26)),
])
def test_version_tuple(version, expected):
    """P6.2: Version gates compare (major, minor) only."""
    assert mesh_core._version_tuple(version) == expected
