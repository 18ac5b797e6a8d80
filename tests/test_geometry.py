import math

import pytest

from minekit.geometry import Point

COORDS = [
    (1.0, 1.0),
    (1.0, 8.0),
    (2.0, 2.0),
    (2.0, 5.0),
    (3.0, 1.0),
    (4.0, 3.0),
    (5.0, 2.0),
    (6.0, 1.0),
    (6.0, 8.0),
    (8.0, 6.0),
]


def test_distance_of_right_triangle():
    assert Point(0.0, 0.0).distance(Point(3.0, 4.0)) == pytest.approx(5.0)


def test_manhattan_distance_of_right_triangle():
    assert Point(0.0, 0.0).manhattan_distance(Point(3.0, 4.0)) == pytest.approx(7.0)


@pytest.mark.parametrize("a_xy", COORDS[:4])
@pytest.mark.parametrize("b_xy", COORDS[4:])
def test_distances_are_symmetric(a_xy, b_xy):
    a = Point(*a_xy)
    b = Point(*b_xy)
    assert Point.distance(a, b) == Point.distance(b, a)
    assert Point.manhattan_distance(a, b) == Point.manhattan_distance(b, a)


@pytest.mark.parametrize("xy", COORDS)
def test_distance_to_self_is_zero(xy):
    p = Point(*xy)
    assert Point.distance(p, Point(*xy)) == 0.0
    assert Point.manhattan_distance(p, Point(*xy)) == 0.0


@pytest.mark.parametrize("a_xy", COORDS)
@pytest.mark.parametrize("b_xy", COORDS[::3])
def test_euclidean_never_exceeds_manhattan(a_xy, b_xy):
    a = Point(*a_xy)
    b = Point(*b_xy)
    assert Point.distance(a, b) <= Point.manhattan_distance(a, b) + 1e-12


def test_addition_is_commutative():
    p, q = Point(1.5, -2.0), Point(0.25, 7.0)
    assert p + q == q + p


def test_scale_by_two_equals_self_addition():
    p = Point(1.5, -2.0)
    assert p.scale(2.0) == p + p


def test_scale_by_one_is_identity():
    p = Point(3.25, 9.5)
    assert p.scale(1.0) == p


def test_scaling_scales_distance_from_origin():
    origin = Point(0.0, 0.0)
    p = Point(3.0, 4.0)
    assert origin.distance(p.scale(3.0)) == pytest.approx(3.0 * origin.distance(p))


def test_adding_non_point_raises():
    with pytest.raises(TypeError):
        Point(1.0, 2.0) + (1.0, 2.0)


def test_points_are_immutable():
    p = Point(1.0, 2.0)
    with pytest.raises(AttributeError):
        p.x = 5.0  # type: ignore[misc]
    assert math.isclose(p.x, 1.0)