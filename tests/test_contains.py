# MIT License (see LICENSE)
import numpy as np
import pytest
from physics_geom.polygon import contains_point

SQUARE = [(0, 0), (0, 1), (1, 1), (1, 0)]
# Square with a notch cut into the top edge
ARROW = [(0, 0), (0, 2), (1, 1), (2, 2), (2, 0)]


def test_empty_hull_contains_nothing():
    assert not contains_point((0, 0), [])


def test_single_point_hull():
    assert contains_point((1, 2), [(1, 2)])
    assert not contains_point((1, 2.5), [(1, 2)])


@pytest.mark.parametrize("point, expected", [
    ((1, 0), True),
    ((0, 0), True),
    ((2, 0), True),
    ((1, 1), False),
    ((3, 0), False),
    ((-1, 0), False),
])
def test_segment(point, expected):
    """Only points on the closed segment are contained."""
    assert contains_point(point, [(0, 0), (2, 0)]) is expected


@pytest.mark.parametrize("point, expected", [
    ((0.5, 0.5), True),
    ((0.01, 0.99), True),
    ((1.5, 0.5), False),
    ((0.5, -0.5), False),
    ((100.0, 100.0), False),
])
def test_square_interior(point, expected):
    assert contains_point(point, SQUARE) is expected
    assert contains_point(point, SQUARE[::-1]) is expected


@pytest.mark.parametrize("point", [(0, 0.5), (0.5, 1), (1, 1), (0, 0)])
def test_square_boundary_is_inside(point):
    assert contains_point(point, SQUARE)
    assert contains_point(point, SQUARE[::-1])


def test_concave_notch_is_outside():
    assert contains_point((1.0, 0.5), ARROW)
    assert not contains_point((1.0, 1.5), ARROW)
    # on the notch edges
    assert contains_point((0.5, 1.5), ARROW)


def test_point_near_boundary():
    eps = 1e-9
    assert contains_point((0.5, 1 - eps), SQUARE)
    assert not contains_point((0.5, 1 + eps), SQUARE)


def test_accepts_numpy_point():
    assert contains_point(np.array([0.25, 0.75]), np.array(SQUARE, dtype=np.float64))
