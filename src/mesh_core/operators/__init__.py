"""Operators - angular ordering, vertex-indexed tables, incidence matrices."""

from .angular import (
    tangent_frame,
    anticlockwise_angles,
    anticlockwise_order,
    anticlockwise_key,
)

from .tables import (
    neighbours,
    edge_normals,
    half_edge_lengths,
    distances,
    faces,
    normals,
    area_in_each_face,
    areas,
    VertexIndexedTables,
    build_vertex_indexed_tables,
)

from .incidence import (
    build_d0,
    build_d1,
    build_incidence_matrices,
    count_connected_components,
)
