# MIT License (see LICENSE)
"""
Shape geometries and the support-point capability they share.

This subpackage provides:
    - Geometry: Abstract capability (aabb, farthest hull/core point).
    - NullGeometry: Zero-extent shape.
    - Circle, Box, ConvexPolygon: Concrete shapes with optional rounding.

Typical usage:
    from physics_geom.geometry import ConvexPolygon

    poly = ConvexPolygon([(0, 0), (0, 2), (2, 2), (2, 0)], radius=0.1)
    box = poly.aabb()
    p = poly.farthest_hull_point((1.0, 1.0))
"""
from .base import Geometry, NullGeometry
from .shapes import Circle, Box, ConvexPolygon

__all__ = [
    # Capability
    "Geometry",
    "NullGeometry",
    # Shapes
    "Circle",
    "Box",
    "ConvexPolygon",
]
