# MIT License (see LICENSE)
"""
Polygon kernel: convexity, area, centroid, inertia and containment.

All functions take a hull, an ordered and implicitly closed sequence of 2D
points wound clockwise, and return plain numbers, booleans or fresh vectors.
Nothing here mutates its input.

Degenerate hulls are handled by length:
    0 or 1 points: a point
    2 points:      a line segment
    3+ points:     a simple polygon (not checked)

Sign convention: shoelace terms are taken as next x prev, so the area is
positive for clockwise winding with the y axis up. Reversing the winding flips
the sign of the area and of every cross product used below, but not the
centroid or the inertia.

Reference: https://en.wikipedia.org/wiki/Polygon#Area_and_centroid
"""
from __future__ import annotations
import logging

import numpy as np

from .constants import COLLINEAR_EPS, DEGENERATE_AREA_EPS
from .errors import DegeneratePolygonError
from .types import Hull, Vec2, as_hull
from .util import f64, norm2, dot, cross2, dist2, angle_between

logger = logging.getLogger(__name__)


def is_convex(hull, *, eps: float = COLLINEAR_EPS) -> bool:
    """
    Check whether a polygon is convex.

    Walks the edges e_i = hull[i] - hull[i-1] once around the polygon and
    compares the turn direction cross(e_{i-1}, e_i) at every vertex. Any
    change of turn direction marks a reflex vertex.

    Collinear edges (|cross| <= eps) carry no turn direction: they neither
    fix the sign nor break it. So a midpoint on an edge is allowed in either
    winding, and a fully collinear hull counts as convex, like a segment.

    Args:
        hull: Polygon vertices.
        eps: Cross products at or below this magnitude are collinear.

    Returns:
        True for points, segments and convex polygons of either winding.
    """
    hull = as_hull(hull)
    l = len(hull)
    if l < 3:
        # a point or a line
        return True

    sign = 0
    prev = hull[0] - hull[l - 1]
    for i in range(1, l + 1):
        nxt = hull[i % l] - hull[i - 1]
        c = cross2(prev, nxt)
        prev = nxt

        if abs(c) <= eps:
            continue
        turn = 1 if c > 0 else -1
        if sign == 0:
            sign = turn
        elif turn != sign:
            return False

    return True


def is_clockwise(hull) -> bool:
    """True if the hull winds clockwise (positive signed area)."""
    return signed_area(hull) > 0


def moment_of_inertia(hull, *, closed: bool = False, eps: float = DEGENERATE_AREA_EPS) -> float:
    """
    Moment of inertia of a unit-mass polygonal lamina.

    The rotation axis is the local origin, not the centroid. To get the
    centroidal value, shift the hull by -centroid(hull) first.

    The polygon is split into triangles fanned from the origin over the
    l - 1 consecutive vertex pairs starting at vertex 0:
        I = sum(|p_i x p_{i-1}| * (|p_i|^2 + p_i.p_{i-1} + |p_{i-1}|^2))
            / (6 * sum(|p_i x p_{i-1}|))
    The closing pair (last, first) is not part of the sum unless closed is
    set. Without it the result is exact only when every fan triangle is
    congruent, as for centred regular polygons; pass closed=True for the
    full lamina.

    Degenerate cases:
        point:   0
        segment: length^2 / 12

    Reference: https://en.wikipedia.org/wiki/List_of_moments_of_inertia

    Args:
        hull: Polygon vertices.
        closed: Include the closing pair (last, first) in the fan.
        eps: Polygons with zero fan area or |signed area| at or below this
            are rejected.

    Raises:
        DegeneratePolygonError: If every fan triangle has zero area, or the
            polygon itself has zero area (collinear vertices).
    """
    hull = as_hull(hull)
    l = len(hull)
    if l < 2:
        return 0.0

    if l == 2:
        return dist2(hull[1], hull[0]) / 12

    num = 0.0
    denom = 0.0
    start = 0 if closed else 1
    prev = hull[start - 1]
    for i in range(start, l):
        nxt = hull[i]
        c = abs(cross2(nxt, prev))
        num += c * (norm2(nxt) + dot(nxt, prev) + norm2(prev))
        denom += c
        prev = nxt

    if denom <= eps:
        logger.debug("moment_of_inertia: zero fan area for %d-vertex hull", l)
        raise DegeneratePolygonError(hull, "inertia denominator is zero")

    area = signed_area(hull)
    if abs(area) <= eps:
        logger.debug("moment_of_inertia: area %.3g below tolerance for %d-vertex hull", area, l)
        raise DegeneratePolygonError(hull, f"signed area {area!r} is zero")

    return num / (6 * denom)


def contains_point(point, hull, *, eps: float = COLLINEAR_EPS) -> bool:
    """
    Check if a point is inside a polygon hull.

    Points on the boundary (edges and vertices) count as inside. For
    polygons the test is the winding number: the signed angles subtended at
    the point by each edge add up to about +-2pi inside and about 0 outside,
    so the point is inside when the magnitude exceeds pi. Works for either
    winding.

    Degenerate hulls:
        empty:   never contains anything
        point:   exact equality
        segment: the point lies on the closed segment

    Args:
        point: Query point.
        hull: Polygon vertices.
        eps: Cross products at or below this magnitude are collinear.
    """
    pt = f64(point)
    hull = as_hull(hull)
    l = len(hull)
    if l == 0:
        return False

    if l == 1:
        return bool(np.array_equal(pt, hull[0]))

    if l == 2:
        return _on_segment(pt, hull[0], hull[1], eps)

    for i in range(l):
        if _on_segment(pt, hull[i - 1], hull[i], eps):
            return True

    ang = 0.0
    prev = hull[0] - pt
    for i in range(1, l + 1):
        nxt = hull[i % l] - pt
        ang += angle_between(prev, nxt)
        prev = nxt

    return bool(abs(ang) > np.pi)


def _on_segment(pt: Vec2, a: Vec2, b: Vec2, eps: float) -> bool:
    """
    True if pt lies on the closed segment ab.

    Seen from pt, the endpoints must be collinear and on opposite sides
    (subtended angle of pi), or pt must coincide with one of them.
    """
    da = a - pt
    db = b - pt
    return abs(cross2(da, db)) <= eps and dot(da, db) <= 0


def signed_area(hull) -> float:
    """
    Signed area of a polygon by the shoelace formula.

    Returns:
        Area, positive for clockwise ordering. 0 for points and segments.
    """
    hull = as_hull(hull)
    l = len(hull)
    if l < 3:
        return 0.0

    ret = 0.0
    prev = hull[l - 1]
    for i in range(l):
        nxt = hull[i]
        ret += cross2(nxt, prev)
        prev = nxt

    return ret / 2


def centroid(hull, *, eps: float = DEGENERATE_AREA_EPS) -> Vec2:
    """
    Area-weighted centroid of a polygon.

    Degenerate cases:
        point:   the point itself
        segment: its midpoint

    Args:
        hull: Polygon vertices.
        eps: Polygons with |signed area| at or below this are rejected.

    Returns:
        Centroid as a new [x, y] array.

    Raises:
        DegeneratePolygonError: For an empty hull, or a polygon with
            (near) zero area such as three collinear points.
    """
    hull = as_hull(hull)
    l = len(hull)
    if l == 0:
        logger.debug("centroid: empty hull")
        raise DegeneratePolygonError(hull, "hull is empty")

    if l == 1:
        return hull[0].copy()

    if l == 2:
        return 0.5 * (hull[0] + hull[1])

    area = signed_area(hull)
    if abs(area) <= eps:
        logger.debug("centroid: area %.3g below tolerance for %d-vertex hull", area, l)
        raise DegeneratePolygonError(hull, f"signed area {area!r} is zero")

    ret = np.zeros(2, dtype=np.float64)
    prev = hull[l - 1]
    for i in range(l):
        nxt = hull[i]
        ret += cross2(nxt, prev) * (prev + nxt)
        prev = nxt

    return ret * (1 / (6 * area))


def translate(hull, offset) -> Hull:
    """
    Return a copy of the hull shifted by offset.

    Use translate(hull, -centroid(hull)) to re-express a polygon about its
    centroid before calling moment_of_inertia.
    """
    return as_hull(hull) + f64(offset)
