# MIT License (see LICENSE)
"""
Concrete shape geometries: Circle, Box and ConvexPolygon.

Each shape implements the Geometry capability (bounding box and support
points) and reports its own mass properties. Box and ConvexPolygon take an
optional rounding radius; a Circle is a point core rounded by its radius.

Mass properties (area, inertia) describe the core only; the rounding skin
is treated as massless.
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from .. import polygon
from ..types import AABB, Hull, Vec2, as_hull
from ..util import f64
from .base import Geometry, store


def _check_radius(radius: float) -> None:
    if radius < 0:
        raise ValueError(f"Rounding radius must be non-negative, got {radius}")


@dataclass(frozen=True)
class Circle(Geometry):
    """
    Circular shape defined by radius.

    The core is the centre point, so farthest_core_point() is always the
    origin and the hull point lies radius away along the direction.

    Attributes:
        radius: Distance from center to edge.
    """
    radius: float

    def __post_init__(self) -> None:
        _check_radius(self.radius)

    def aabb(self, angle: float = 0.0) -> AABB:
        # rotation-invariant
        return AABB(self.radius, self.radius)

    def farthest_core_point(self, direction, result: Vec2 | None = None) -> Vec2:
        return store(result, 0.0, 0.0)

    @property
    def area(self) -> float:
        return float(np.pi * self.radius * self.radius)

    def inertia(self, mass: float) -> float:
        """I = (1/2) m r²"""
        return 0.5 * mass * self.radius * self.radius


@dataclass(frozen=True)
class Box(Geometry):
    """
    Rectangle centred on the origin, optionally with rounded corners.

    The full width is 2*hx and full height is 2*hy. With radius > 0 the hull
    is a rounded rectangle of size 2*(hx + radius) by 2*(hy + radius).

    Attributes:
        half_extents: Tuple (hx, hy) of the core rectangle.
        radius: Corner rounding radius.
    """
    half_extents: tuple[float, float]
    radius: float = 0.0

    def __post_init__(self) -> None:
        hx, hy = self.half_extents
        if hx < 0 or hy < 0:
            raise ValueError(f"Box extents must be non-negative, got ({hx}, {hy})")
        _check_radius(self.radius)

    def aabb(self, angle: float = 0.0) -> AABB:
        # Standard OBB extents:
        # ex = |c*hx| + |s*hy|
        # ey = |s*hx| + |c*hy|
        hx, hy = self.half_extents
        c = float(np.cos(angle))
        s = float(np.sin(angle))
        ex = abs(c * hx) + abs(s * hy) + self.radius
        ey = abs(s * hx) + abs(c * hy) + self.radius
        return AABB(ex, ey)

    def farthest_core_point(self, direction, result: Vec2 | None = None) -> Vec2:
        # Pick the corner on the direction's side of each axis
        hx, hy = self.half_extents
        d = f64(direction)
        x = hx if d[0] >= 0 else -hx
        y = hy if d[1] >= 0 else -hy
        return store(result, x, y)

    @property
    def vertices(self) -> Hull:
        """Core corners in clockwise order."""
        hx, hy = self.half_extents
        return as_hull([(-hx, -hy), (-hx, hy), (hx, hy), (hx, -hy)])

    @property
    def area(self) -> float:
        hx, hy = self.half_extents
        return 4.0 * hx * hy

    def inertia(self, mass: float) -> float:
        """I = (1/12) m (w² + h²)  where w=2*hx, h=2*hy"""
        hx, hy = self.half_extents
        w, h = 2 * hx, 2 * hy
        return (1 / 12) * mass * (w * w + h * h)


@dataclass(frozen=True, eq=False)
class ConvexPolygon(Geometry):
    """
    General convex polygon defined by vertices, optionally rounded.

    Attributes:
        vertices: Array of vertices [N, 2] in local space, ordered clockwise.
                  Counter-clockwise input is accepted but yields a negative
                  signed_area. Stored as a read-only float64 array.
        radius: Rounding radius around the polygon.

    Raises:
        ValueError: If there are no vertices or the vertices are not convex.
    """
    vertices: Hull
    radius: float = 0.0

    def __post_init__(self) -> None:
        verts = as_hull(self.vertices)
        if len(verts) == 0:
            raise ValueError("Polygon must have at least 1 vertex")
        if not polygon.is_convex(verts):
            raise ValueError("Polygon vertices are not convex")
        _check_radius(self.radius)
        verts.setflags(write=False)
        object.__setattr__(self, "vertices", verts)

    def aabb(self, angle: float = 0.0) -> AABB:
        # Rotation matrix R = [[c, -s], [s, c]]
        c = float(np.cos(angle))
        s = float(np.sin(angle))
        vx = self.vertices[:, 0]
        vy = self.vertices[:, 1]
        wx = vx * c - vy * s
        wy = vx * s + vy * c
        r = self.radius
        return AABB.from_bounds(
            float(np.min(wx)) - r,
            float(np.min(wy)) - r,
            float(np.max(wx)) + r,
            float(np.max(wy)) + r,
        )

    def farthest_core_point(self, direction, result: Vec2 | None = None) -> Vec2:
        # argmax returns the first maximum, so ties go to the lowest index.
        # For very large polygons, hill-climbing would be O(log N).
        dots = self.vertices @ f64(direction)
        x, y = self.vertices[int(np.argmax(dots))]
        return store(result, x, y)

    @property
    def signed_area(self) -> float:
        return polygon.signed_area(self.vertices)

    @property
    def area(self) -> float:
        return abs(self.signed_area)

    @property
    def centroid(self) -> Vec2:
        return polygon.centroid(self.vertices)

    def inertia(self, mass: float) -> float:
        """
        Moment of inertia about the centroid.

        The vertices are shifted to the centroid and the full fan, closing
        edge included, gives the unit-mass value, which is then scaled by
        mass.

        Raises:
            DegeneratePolygonError: For collinear vertices.
        """
        centred = polygon.translate(self.vertices, -self.centroid)
        return mass * polygon.moment_of_inertia(centred, closed=True)
