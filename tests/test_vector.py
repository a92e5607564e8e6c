import pytest

from enginecore.vector import Point, Rect, Vector, Vector2D, Vector4


def approx_vec(v):
    return pytest.approx(tuple(v))


def test_zero_and_one():
    assert Vector.zero() == Vector(0.0, 0.0, 0.0)
    assert Vector.one() == Vector(1.0, 1.0, 1.0)


def test_length_of_pythagorean_vector():
    assert Vector(3.0, 4.0, 0.0).length() == pytest.approx(5.0)


def test_length_squared_matches_length():
    v = Vector(1.5, -2.0, 0.5)
    assert v.length() ** 2 == pytest.approx(v.length_squared())


def test_distance_is_symmetric_and_matches_difference():
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(-4.0, 0.5, 7.0)
    assert a.distance(b) == pytest.approx(b.distance(a))
    assert a.distance(b) == pytest.approx((b - a).length())


def test_normalize_in_place():
    v = Vector(2.0, -3.0, 6.0)
    assert v.normalize() is True
    assert v.length() == pytest.approx(1.0)


def test_normalize_too_short_leaves_vector():
    v = Vector(1e-5, 0.0, 0.0)
    assert v.normalize() is False
    assert v == Vector(1e-5, 0.0, 0.0)


def test_safe_normal_has_unit_length():
    n = Vector(0.3, 0.4, -1.2).get_safe_normal()
    assert n.length() == pytest.approx(1.0)


def test_safe_normal_of_tiny_vector_is_zero():
    assert Vector(1e-6, 0.0, 0.0).get_safe_normal() == Vector.zero()


def test_safe_normal_of_unit_vector_returns_equal_copy():
    v = Vector(0.0, 1.0, 0.0)
    n = v.get_safe_normal()
    assert n == v
    assert n is not v


def test_unsafe_normal_matches_safe_normal():
    v = Vector(5.0, -1.0, 2.0)
    assert tuple(v.get_unsafe_normal()) == approx_vec(v.get_safe_normal())


def test_unsafe_normal_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector.zero().get_unsafe_normal()


def test_cross_of_axes():
    x = Vector(1.0, 0.0, 0.0)
    y = Vector(0.0, 1.0, 0.0)
    z = Vector(0.0, 0.0, 1.0)
    assert x.cross(y) == z
    assert y.cross(x) == -z


def test_cross_is_orthogonal():
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(-2.0, 0.5, 4.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)


def test_dot_with_self_is_length_squared():
    v = Vector(2.0, -1.0, 3.0)
    assert v.dot(v) == pytest.approx(v.length_squared())


@pytest.mark.parametrize("index,component", [(0, "x"), (1, "y"), (2, "z")])
def test_replicate(index, component):
    v = Vector(1.0, 2.0, 3.0)
    value = getattr(v, component)
    assert v.replicate(index) == Vector(value, value, value)


def test_replicate_out_of_range_is_zero():
    assert Vector(1.0, 2.0, 3.0).replicate(5) == Vector.zero()


def test_add_sub_round_trip():
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(0.5, -4.0, 8.0)
    assert tuple((a + b) - b) == approx_vec(a)


def test_scalar_and_componentwise_multiplication():
    a = Vector(1.0, 2.0, 3.0)
    assert a * 2.0 == a + a
    assert 2.0 * a == a * 2.0
    assert a * Vector(2.0, 2.0, 2.0) == a * 2.0


def test_division_undoes_multiplication():
    a = Vector(1.0, -2.0, 3.0)
    b = Vector(4.0, 5.0, -6.0)
    assert tuple((a * b) / b) == approx_vec(a)
    assert tuple((a * 3.0) / 3.0) == approx_vec(a)


def test_negation_and_abs():
    a = Vector(1.0, -2.0, 3.0)
    assert -(-a) == a
    assert abs(a) == Vector(1.0, 2.0, 3.0)


def test_in_place_add_rebinds():
    a = Vector(1.0, 1.0, 1.0)
    a += Vector(1.0, 2.0, 3.0)
    assert a == Vector(2.0, 3.0, 4.0)


def test_vector4_defaults_and_iteration():
    v = Vector4(1.0, 2.0, 3.0)
    assert v.w == 0.0
    assert tuple(Vector4(1.0, 2.0, 3.0, 4.0)) == (1.0, 2.0, 3.0, 4.0)


def test_vector4_arithmetic_yields_vector():
    v = Vector4(1.0, 2.0, 3.0, 9.0) - Vector(1.0, 1.0, 1.0)
    assert v == Vector(0.0, 1.0, 2.0)


def test_vector2d_defaults():
    assert Vector2D() == Vector2D(0.0, 0.0)


def test_rect_contains_inside_and_edges():
    r = Rect(10.0, 20.0, 30.0, 40.0)
    assert r.contains(Point(15.0, 25.0))
    assert r.contains(Point(10.0, 20.0))
    assert r.contains(Point(40.0, 60.0))


def test_rect_excludes_outside():
    r = Rect(10.0, 20.0, 30.0, 40.0)
    assert not r.contains(Point(9.9, 25.0))
    assert not r.contains(Point(15.0, 60.1))


def test_rect_corners():
    r = Rect(10.0, 20.0, 30.0, 40.0)
    assert r.min_corner() == Vector2D(10.0, 20.0)
    assert r.max_corner() == Vector2D(10.0 + 30.0, 20.0 + 40.0)