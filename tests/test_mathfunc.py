import math

import pytest

from fourws_tracking.mathfunc import arctan, factorial, power, sec


@pytest.mark.parametrize("x", [0.0, 0.3, -1.2, 2.5])
def test_sec_is_reciprocal_of_cos(x):
    assert sec(x) * math.cos(x) == pytest.approx(1.0)


def test_sec_at_zero():
    assert sec(0.0) == 1.0


def test_arctan_argument_order():
    assert arctan(1.0, 0.0) == pytest.approx(0.0)
    assert arctan(0.0, 1.0) == pytest.approx(math.pi / 2)
    assert arctan(-1.0, 0.0) == pytest.approx(math.pi)


@pytest.mark.parametrize("angle", [-2.0, -0.5, 0.1, 1.4, 3.0])
def test_arctan_recovers_angle(angle):
    assert arctan(math.cos(angle), math.sin(angle)) == pytest.approx(angle)


def test_power_matches_square_root():
    assert power(9.0, 0.5) == pytest.approx(3.0)
    assert power(2.0, 10.0) == 1024.0


def test_power_returns_float():
    assert power(3, 2) == 9.0
    assert isinstance(power(3, 2), float)


@pytest.mark.parametrize("n", range(0, 16))
def test_factorial_matches_stdlib(n):
    assert factorial(n) == math.factorial(n)


@pytest.mark.parametrize("n", [-3, -1, 0, 1, 1.9])
def test_factorial_small_values_are_one(n):
    assert factorial(n) == 1


def test_factorial_accepts_float():
    assert factorial(5.0) == factorial(5)
    assert factorial(5.7) == factorial(5)


@pytest.mark.parametrize("n", range(2, 12))
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)