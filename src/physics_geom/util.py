# MIT License (see LICENSE)
"""
Utility functions for 2D vector math.

Provides the low-level vector operations used by the polygon kernel and the
shape support functions. All functions operate on 2D vectors represented as
numpy arrays of shape (2,), but accept any array-like input.
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Always returns a new array, so callers may mutate the result freely
    without touching the input.
    """
    return np.array(x, dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 2D vector. Avoids sqrt for performance."""
    return float(v[0] * v[0] + v[1] * v[1])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 2D vector."""
    return float(np.sqrt(norm2(v)))


def unit(v: np.ndarray, eps: float = 1e-12) -> np.ndarray:
    """
    Return a unit (normalized) vector in the same direction as v.

    Returns zero vector if |v| < eps to avoid division by zero.
    """
    n = norm(v)
    if n < eps:
        return np.zeros(2, dtype=np.float64)
    return f64(v) / n


def dot(a: np.ndarray, b: np.ndarray) -> float:
    """Dot product of two 2D vectors as a Python float."""
    return float(a[0] * b[0] + a[1] * b[1])


def cross2(a: np.ndarray, b: np.ndarray) -> float:
    """
    2D cross product (scalar result): a × b = ax*by - ay*bx.

    In 2D, the cross product yields a scalar representing the
    z-component of the 3D cross product (a, 0) × (b, 0).
    Positive result means b is counterclockwise from a.
    """
    return float(a[0] * b[1] - a[1] * b[0])


def dist2(a: np.ndarray, b: np.ndarray) -> float:
    """Squared distance between two points."""
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return float(dx * dx + dy * dy)


def angle_between(a: np.ndarray, b: np.ndarray) -> float:
    """
    Signed angle in radians that rotates a onto b, in (-pi, pi].

    Positive means b is counterclockwise from a. Returns 0 if either
    vector has zero length.
    """
    return float(np.arctan2(cross2(a, b), dot(a, b)))
