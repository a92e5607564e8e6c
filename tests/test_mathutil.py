import math

import pytest

from enginecore.mathutil import (
    clamp,
    degrees_to_radians,
    inv_sqrt,
    lerp,
    radians_to_degrees,
    square,
)


@pytest.mark.parametrize("value", [-5, 0, 3, 10, 42])
def test_clamp_stays_within_bounds(value):
    result = clamp(value, 0, 10)
    assert 0 <= result <= 10


def test_clamp_passes_inner_value_through():
    assert clamp(5, 0, 10) == 5


def test_clamp_limits_low_and_high():
    assert clamp(-1, 0, 10) == 0
    assert clamp(11, 0, 10) == 10


def test_clamp_with_crossed_bounds_returns_min_value():
    assert clamp(5, 10, 0) == 10


def test_lerp_endpoints():
    assert lerp(2.0, 4.0, 0.0) == 2.0
    assert lerp(2.0, 4.0, 1.0) == 4.0


def test_lerp_midpoint():
    assert lerp(2.0, 4.0, 0.5) == pytest.approx(3.0)


def test_radians_to_degrees_of_pi():
    assert radians_to_degrees(math.pi) == pytest.approx(180.0)


@pytest.mark.parametrize("degrees", [-270.0, -45.0, 0.0, 30.0, 90.0, 360.0])
def test_degree_radian_round_trip(degrees):
    assert radians_to_degrees(degrees_to_radians(degrees)) == pytest.approx(degrees)


@pytest.mark.parametrize("value", [0.25, 1.0, 2.0, 9.0, 1000.0])
def test_inv_sqrt_invariant(value):
    result = inv_sqrt(value)
    assert result * result * value == pytest.approx(1.0)


def test_inv_sqrt_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        inv_sqrt(0.0)


@pytest.mark.parametrize("value", [-3.5, -2, 0, 1.5, 7])
def test_square_properties(value):
    result = square(value)
    assert result >= 0
    assert square(-value) == result
    assert math.sqrt(result) == pytest.approx(abs(value))