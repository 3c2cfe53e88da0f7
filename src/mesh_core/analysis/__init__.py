"""
Analysis functions - depend on operators layer.

Separated from builders to maintain clean layering:
    builders → operators → spec
    analysis → operators → spec

Includes:
- verify_topology: closed-surface checks, adjacency alignment, area conservation
"""

from .verify_topology import (
    verify_closed_surface,
    adjacency_violations,
    max_radius_deviation,
    hull_area,
    area_conservation,
)
