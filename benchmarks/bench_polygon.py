"""
Microbenchmark: time per kernel call vs hull size.
Run:
  python benchmarks/bench_polygon.py
"""
import time
import numpy as np
from physics_geom import is_convex, signed_area, centroid, moment_of_inertia, contains_point, ConvexPolygon


def regular_hull(n: int) -> np.ndarray:
    # clockwise
    ang = -np.linspace(0, 2 * np.pi, n + 1)[:-1]
    return np.stack([np.cos(ang), np.sin(ang)], axis=1)


def run(n: int, calls: int = 200) -> dict[str, float]:
    hull = regular_hull(n)
    poly = ConvexPolygon(hull)
    rng = np.random.default_rng(12345)  # determinism
    dirs = rng.normal(size=(calls, 2))

    cases = {
        "is_convex": lambda i: is_convex(hull),
        "signed_area": lambda i: signed_area(hull),
        "centroid": lambda i: centroid(hull),
        "moment_of_inertia": lambda i: moment_of_inertia(hull),
        "contains_point": lambda i: contains_point(0.5 * dirs[i], hull),
        "support": lambda i: poly.farthest_hull_point(dirs[i]),
    }

    out = {}
    for name, fn in cases.items():
        # warmup
        for i in range(10):
            fn(i)
        t0 = time.perf_counter()
        for i in range(calls):
            fn(i)
        out[name] = (time.perf_counter() - t0) / calls
    return out


if __name__ == "__main__":
    for n in [4, 16, 64, 256]:
        results = run(n)
        print(f"N={n:4d}")
        for name, per_call in results.items():
            print(f"  {name:18s} {1e6*per_call:9.2f} us")
        print()
