# MIT License (see LICENSE)
import pytest
from physics_geom.polygon import is_convex

SQUARE = [(0, 0), (0, 1), (1, 1), (1, 0)]
# Square with a notch cut into the top edge; (1, 1) is reflex
ARROW = [(0, 0), (0, 2), (1, 1), (2, 2), (2, 0)]


@pytest.mark.parametrize("hull", [
    [],
    [(1, 1)],
    [(0, 0), (3, 4)],
])
def test_points_and_segments_are_convex(hull):
    assert is_convex(hull)


@pytest.mark.parametrize("hull", [
    [(0, 0), (0, 1), (1, 0)],
    [(0, 0), (1, 0), (0, 1)],
    [(-3, 2), (5, 7), (4, -1)],
])
def test_triangles_are_convex(hull):
    """Any triangle is convex, whatever its winding."""
    assert is_convex(hull)


def test_square_both_windings():
    assert is_convex(SQUARE)
    assert is_convex(SQUARE[::-1])


def test_reflex_vertex_is_not_convex():
    assert not is_convex(ARROW)
    assert not is_convex(ARROW[::-1])


def test_collinear_midpoint_is_convex_in_both_windings():
    """A vertex in the middle of an edge neither sets nor breaks the turn sign."""
    hull = [(0, 0), (0, 1), (0, 2), (2, 2), (2, 0)]
    assert is_convex(hull)
    assert is_convex(hull[::-1])


def test_collinear_first_turn_does_not_fix_sign():
    # the first vertex visited is the collinear one
    hull = [(1, 0), (0, 0), (0, 1), (1, 1), (2, 1), (2, 0)]
    assert is_convex(hull)
    assert is_convex(hull[::-1])


def test_fully_collinear_hull_is_convex():
    assert is_convex([(0, 0), (1, 0), (2, 0)])


def test_eps_absorbs_tiny_dent():
    """A dent of 1e-12 is reflex at eps=0 but collinear at eps=1e-9."""
    hull = [(0, 0), (0, 1), (1, 1), (1, 0), (0.5, 1e-12)]
    assert not is_convex(hull)
    assert is_convex(hull, eps=1e-9)
