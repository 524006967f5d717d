import math

import pytest

from linkcross.geometry import Circle, Point, Vector


def test_from_points_classic_triangle():
    v = Vector.from_points(Point(1, 1), Point(4, 5))
    assert v.x == 3
    assert v.y == 4
    assert v.norm == pytest.approx(5.0)


def test_from_points_angle_straight_up():
    v = Vector.from_points(Point(0, 0), Point(0, 2))
    assert v.angle == pytest.approx(math.pi / 2)


def test_default_vector_is_zero():
    v = Vector()
    assert (v.x, v.y, v.norm) == (0.0, 0.0, 0.0)


def test_polar_round_trip():
    origin = Point(2, -3)
    v = Vector.polar(origin, 2.0, 0.7)
    back = Vector.from_points(v.start, v.end)
    assert back.norm == pytest.approx(2.0)
    assert back.angle == pytest.approx(0.7)
    assert v.start == origin


def test_polar_end_matches_components_for_large_angle():
    v = Vector.polar(Point(1, 1), 1.5, 4.0)
    assert -math.pi <= v.angle <= math.pi
    assert v.end.x == pytest.approx(v.start.x + v.x)
    assert v.end.y == pytest.approx(v.start.y + v.y)
    assert math.hypot(v.x, v.y) == pytest.approx(1.5)


def test_polar_negative_norm_rejected():
    with pytest.raises(ValueError):
        Vector.polar(Point(), -1.0, 0.0)


def test_reflect_reverses_radial_motion():
    v = Vector.from_points(Point(0, 0), Point(1, 0))
    r = v.reflect(Point(10, 0))
    assert r.x == pytest.approx(-1.0)
    assert r.y == pytest.approx(0.0)
    assert r.start == Point(10, 0)


def test_reflect_keeps_tangential_motion():
    v = Vector.from_points(Point(0, 0), Point(0, 1))
    r = v.reflect(Point(10, 0))
    assert r.x == pytest.approx(0.0)
    assert r.y == pytest.approx(1.0)


def test_reflect_preserves_norm():
    v = Vector.polar(Point(), 2.0, 1.1)
    r = v.reflect(Point(30, 40))
    assert r.norm == pytest.approx(v.norm)


def test_includes_is_strict():
    arena = Circle(Point(0, 0), 10)
    assert arena.includes(Circle(Point(5, 0), 0))
    assert not arena.includes(Circle(Point(10, 0), 0))


def test_includes_tolerance_shrinks_area():
    arena = Circle(Point(0, 0), 10)
    inner = Circle(Point(9.8, 0), 0)
    assert arena.includes(inner)
    assert not arena.includes(inner, 0.5)


def test_includes_accounts_for_radius():
    arena = Circle(Point(0, 0), 10)
    assert not arena.includes(Circle(Point(8, 0), 3))


def test_intrudes_is_strict_and_symmetric():
    a = Circle(Point(0, 0), 1)
    assert not a.intrudes(Circle(Point(2, 0), 1))
    b = Circle(Point(1.9, 0), 1)
    assert a.intrudes(b)
    assert b.intrudes(a)


def test_intrudes_tolerance_widens():
    a = Circle(Point(0, 0), 1)
    b = Circle(Point(2.3, 0), 1)
    assert not a.intrudes(b)
    assert a.intrudes(b, 0.5)