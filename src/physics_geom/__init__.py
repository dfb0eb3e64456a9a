# MIT License (see LICENSE)
"""
physics_geom - 2D polygon geometry kernel for a rigid body physics engine.

This package provides the geometric queries that collision detection and
mass-property code are built on. Hulls are ordered point sequences wound
clockwise and implicitly closed.

Main entry points:
    - is_convex: Convexity test.
    - signed_area, centroid: Shoelace area and area-weighted centroid.
    - moment_of_inertia: Unit-mass inertia about the local origin.
    - contains_point: Point-in-polygon test.
    - Geometry: Support-point / bounding box capability of a shape.

Submodules:
    - polygon: The hull algorithms.
    - geometry: Circle, Box and ConvexPolygon shapes.
    - util: 2D vector helpers.

Example:
    from physics_geom import signed_area, centroid

    square = [(0, 0), (0, 1), (1, 1), (1, 0)]
    signed_area(square)   # 1.0
    centroid(square)      # array([0.5, 0.5])
"""
from .polygon import (
    is_convex,
    is_clockwise,
    moment_of_inertia,
    contains_point,
    signed_area,
    centroid,
    translate,
)
from .types import AABB, as_hull
from .errors import GeometryError, DegeneratePolygonError
from .geometry import Geometry, NullGeometry, Circle, Box, ConvexPolygon

__all__ = [
    # Polygon kernel
    "is_convex",
    "is_clockwise",
    "moment_of_inertia",
    "contains_point",
    "signed_area",
    "centroid",
    "translate",
    # Types
    "AABB",
    "as_hull",
    # Errors
    "GeometryError",
    "DegeneratePolygonError",
    # Shapes
    "Geometry",
    "NullGeometry",
    "Circle",
    "Box",
    "ConvexPolygon",
]
