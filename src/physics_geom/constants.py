# MIT License (see LICENSE)
"""
Numeric tolerances used by the polygon kernel.

Defaults can be overridden through environment variables, read once at
import time:
    PHYSICS_GEOM_COLLINEAR_EPS  -> COLLINEAR_EPS
    PHYSICS_GEOM_AREA_EPS       -> DEGENERATE_AREA_EPS
Every function that uses a tolerance also takes an explicit ``eps=`` keyword.
"""
from __future__ import annotations
import os


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a float, got {raw!r}") from None


# Largest |cross product| for which two consecutive edges count as collinear.
# Exact zero by default: hulls built from integer or grid coordinates stay exact.
COLLINEAR_EPS: float = _env_float("PHYSICS_GEOM_COLLINEAR_EPS", 0.0)

# Largest |signed area| (or inertia denominator) for which a polygon is
# treated as degenerate. Dividing by anything smaller is rejected.
DEGENERATE_AREA_EPS: float = _env_float("PHYSICS_GEOM_AREA_EPS", 1e-12)
