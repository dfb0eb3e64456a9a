# MIT License (see LICENSE)
"""
Core type definitions for the polygon kernel.

Defines the fundamental data structures:
- Vec2 / Hull: numpy array aliases for points and point sequences.
- AABB: half-extents (and centre) of an axis-aligned bounding box.

A hull is an ordered, implicitly closed sequence of points: the last point
connects back to the first. Hulls are wound clockwise, which makes the
shoelace area positive.
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from .util import f64

# Type aliases for clarity
Vec2 = np.ndarray  # Shape (2,), dtype float64
Hull = np.ndarray  # Shape (N, 2), dtype float64


def as_hull(points) -> Hull:
    """
    Convert a sequence of points to an (N, 2) float64 array.

    Accepts lists of tuples, lists of arrays or an existing array. An empty
    sequence yields an array of shape (0, 2).

    Raises:
        ValueError: If the input cannot be read as a list of 2D points.
    """
    hull = f64(points)
    if hull.size == 0:
        return hull.reshape(0, 2)
    if hull.ndim != 2 or hull.shape[1] != 2:
        raise ValueError(f"Hull must have shape (N, 2), got {hull.shape}")
    return hull


@dataclass(frozen=True)
class AABB:
    """
    Axis-aligned bounding box in local coordinates.

    Attributes:
        half_width: Half of the box extent along x.
        half_height: Half of the box extent along y.
        x: Box centre x. Zero for shapes symmetric about their origin.
        y: Box centre y.
    """
    half_width: float
    half_height: float
    x: float = 0.0
    y: float = 0.0

    @property
    def min_x(self) -> float:
        return self.x - self.half_width

    @property
    def min_y(self) -> float:
        return self.y - self.half_height

    @property
    def max_x(self) -> float:
        return self.x + self.half_width

    @property
    def max_y(self) -> float:
        return self.y + self.half_height

    @classmethod
    def from_bounds(cls, min_x: float, min_y: float, max_x: float, max_y: float) -> AABB:
        """Build a box from (min_x, min_y, max_x, max_y) bounds."""
        return cls(
            half_width=0.5 * (max_x - min_x),
            half_height=0.5 * (max_y - min_y),
            x=0.5 * (max_x + min_x),
            y=0.5 * (max_y + min_y),
        )
