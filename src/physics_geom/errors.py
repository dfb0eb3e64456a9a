# MIT License (see LICENSE)
"""
Exceptions raised by the geometry kernel.

Degenerate input is the only failure mode: every operation is a
deterministic pure function, so there is nothing to retry.
"""
from __future__ import annotations

import numpy as np


class GeometryError(Exception):
    """Base class for geometry kernel errors."""


class DegeneratePolygonError(GeometryError, ValueError):
    """
    Raised when a polygon has no usable area.

    Centroid and moment of inertia both divide by a quantity proportional to
    the polygon area. For collinear or otherwise zero-area hulls that
    quantity vanishes and the result would be non-finite.

    Attributes:
        hull: The offending hull as an (N, 2) float64 array.
        reason: Short description of which quantity vanished.
    """

    def __init__(self, hull: np.ndarray, reason: str) -> None:
        self.hull = hull
        self.reason = reason
        super().__init__(f"Degenerate polygon with {len(hull)} vertices: {reason}")
