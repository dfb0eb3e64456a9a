# MIT License (see LICENSE)
"""
Geometry capability: the queries every shape answers for collision code.

A shape is described by a core, its unrounded boundary, and a rounding
radius. The hull is the core grown by the radius in every direction, which
is how rounded rectangles and circles are expressed. Margin-based narrow
phase algorithms query the core; everything else queries the hull.

All points are in local (body) coordinates. Queries never modify the shape.

Usage:
    poly = ConvexPolygon([(0, 0), (0, 1), (1, 1), (1, 0)])
    p = poly.farthest_hull_point((1.0, 0.2))

    # reuse an output buffer
    out = np.zeros(2)
    poly.farthest_hull_point(direction, out)
"""
from __future__ import annotations
from abc import ABC, abstractmethod

import numpy as np

from ..types import AABB, Vec2
from ..util import f64, unit


def store(result: Vec2 | None, x: float, y: float) -> Vec2:
    """
    Write (x, y) into result and return it, or return a new vector.

    result must be a writable float array of shape (2,).
    """
    if result is None:
        return np.array([x, y], dtype=np.float64)
    result[0] = x
    result[1] = y
    return result


class Geometry(ABC):
    """
    Abstract base class for shape geometries.

    Subclasses implement aabb() and farthest_core_point(). The hull support
    function is derived from the core one and the rounding radius, so it is
    exact for any rounded convex shape.

    The abstract methods carry a stub body (zero box, origin) that subclasses
    with no extent can reach through super().

    Attributes:
        radius: Rounding radius added around the core. 0 for sharp shapes.
    """
    radius: float

    @abstractmethod
    def aabb(self, angle: float = 0.0) -> AABB:
        """
        Axis-aligned bounding box of the hull in local coordinates.

        Args:
            angle: Rotation of the shape about its local origin, in radians.
                The box is aligned with the unrotated axes.
        """
        return AABB(0.0, 0.0)

    @abstractmethod
    def farthest_core_point(self, direction, result: Vec2 | None = None) -> Vec2:
        """
        Farthest point of the core along direction.

        Args:
            direction: Direction to look (need not be normalized).
            result: Optional vector to write the point into.

        Returns:
            The point maximizing dot(point, direction), in local coordinates.
            result itself when it was given.
        """
        return store(result, 0.0, 0.0)

    def farthest_hull_point(self, direction, result: Vec2 | None = None) -> Vec2:
        """
        Farthest point of the hull along direction.

        Same contract as farthest_core_point(), measured on the rounded
        boundary: the core point pushed out by radius along direction.
        """
        d = f64(direction)
        core = self.farthest_core_point(d)
        if self.radius > 0:
            core += unit(d) * self.radius
        return store(result, core[0], core[1])


class NullGeometry(Geometry):
    """
    Geometry of a shape with no extent, such as a point mass.

    Its box has zero size and every support query returns the origin.
    """
    radius = 0.0

    def aabb(self, angle: float = 0.0) -> AABB:
        return super().aabb(angle)

    def farthest_core_point(self, direction, result: Vec2 | None = None) -> Vec2:
        return super().farthest_core_point(direction, result)
