# examples/mass_properties.py
import numpy as np

from physics_geom import ConvexPolygon, DegeneratePolygonError, centroid, translate, moment_of_inertia

# Clockwise trapezoid
hull = [(0.0, 0.0), (0.5, 2.0), (1.5, 2.0), (2.0, 0.0)]

poly = ConvexPolygon(hull)
mass = 3.0

c = poly.centroid
print("area:", poly.area)
print("centroid:", c)
print("inertia about centroid:", poly.inertia(mass))
print("inertia about origin:", mass * moment_of_inertia(hull))
print("aabb:", poly.aabb())
print("aabb at 30 deg:", poly.aabb(np.pi / 6))

for d in [(1.0, 0.0), (0.0, 1.0), (-1.0, -1.0)]:
    print("support", d, "->", poly.farthest_hull_point(d))

try:
    centroid([(0.0, 0.0), (1.0, 1.0), (2.0, 2.0)])
except DegeneratePolygonError as e:
    print("rejected:", e)

print("recentred:", translate(hull, -c))
