"""
Global constants for mesh_core
==============================

All tolerances and magic numbers in ONE place.
"""

import math

# Numerical tolerances
EPS_ZERO = 1e-12       # For "is this zero?" (vector norms, projected baselines)
EPS_CLOSE = 1e-10      # For "are these equal?" (exact combinatorics, integer-derived)
SPHERE_TOL = 1e-9      # |‖p‖ - r| after projection onto the sphere

# Tangent frame fallback (angular sort)
# If |axis_x| < FRAME_SWITCH the zero direction is axis × x̂, otherwise axis × ŷ.
FRAME_SWITCH = 0.9

# Sphere
DEFAULT_RADIUS = 1.0
GOLDEN_RATIO = (1.0 + math.sqrt(5.0)) / 2.0

# Base icosahedron counts (start of the closed-form subdivision recurrence)
ICOSAHEDRON_V = 12
ICOSAHEDRON_E = 30
ICOSAHEDRON_F = 20

# Only closed 2-manifold surfaces are built here
COMPLEX_SURFACE = "surface"
FACES_PER_EDGE = 2

# =============================================================================
# ORIENTATION CONVENTIONS
# =============================================================================
#
# FACES:
#   Vertex cycles are anticlockwise seen from outside the solid, i.e.
#   (v1 - v0) × (v2 - v0) points away from the origin.
#
# AROUND A VERTEX:
#   edges_of(v) is sorted anticlockwise (right-hand rule) about the outward
#   position of v. faces_of(v)[i] is the face between edges_of(v)[i-1] and
#   edges_of(v)[i] (cyclic).
#
# INCIDENCE:
#   d₀[e, v] = -1 at source, +1 at target, edge (i, j) with i < j.
#   d₁[f, e] = +1 if face f traverses e from i to j, -1 if from j to i.
#   A consistently oriented closed surface has every d₁ column summing to 0.
#
