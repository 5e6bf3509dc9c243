import math

import pytest

from fourws_tracking.bezier import BezierCurve, bernstein_derivative

BX = (-6.5, 3.0, -3.0, 6.5)
BY = (-1.0, -1.0, 1.0, 1.0)
BX15 = (-7.0, -7.0, -7.0, -7.0, -7.0, -5.5, -4.0, -2.5, -1.0, 0.5, 2.0, -1.0, 0.5, 2.0, 3.5, 5.0)
BY15 = (0.0, -1.0, -2.0, -3.0, -7.0, -7.0, -7.0, -7.0, -7.0, -7.0, -7.0, 2.0, 2.0, 2.0, 2.0, 2.0)


@pytest.fixture
def curve():
    return BezierCurve(BX, BY)


def test_endpoints_are_first_and_last_control_points(curve):
    assert curve.position(0.0) == pytest.approx((BX[0], BY[0]))
    assert curve.position(1.0) == pytest.approx((BX[-1], BY[-1]))


def test_endpoints_of_high_order_curve():
    curve = BezierCurve(BX15, BY15)
    assert curve.degree == 15
    assert curve.position(0.0) == pytest.approx((BX15[0], BY15[0]))
    assert curve.position(1.0) == pytest.approx((BX15[-1], BY15[-1]))


@pytest.mark.parametrize("t", [0.0, 0.1, 0.37, 0.5, 0.8, 1.0])
def test_default_curve_is_point_symmetric(curve, t):
    x, y = curve.position(t)
    xr, yr = curve.position(1.0 - t)
    assert x == pytest.approx(-xr)
    assert y == pytest.approx(-yr)


def test_constant_coefficients_give_constant_curve():
    assert bernstein_derivative([2.5, 2.5, 2.5, 2.5], 0.3, 0) == pytest.approx(2.5)
    assert bernstein_derivative([2.5, 2.5, 2.5, 2.5], 0.3, 1) == pytest.approx(0.0)


@pytest.mark.parametrize("order", [1, 2, 3])
@pytest.mark.parametrize("t", [0.2, 0.5, 0.7])
def test_derivative_matches_finite_difference(order, t):
    step = 1e-5
    ahead = bernstein_derivative(BX15, t + step, order - 1)
    behind = bernstein_derivative(BX15, t - step, order - 1)
    numeric = (ahead - behind) / (2 * step)
    assert bernstein_derivative(BX15, t, order) == pytest.approx(numeric, rel=1e-4, abs=1e-3)


@pytest.mark.parametrize("order", [4, 5, 6])
def test_derivatives_above_degree_vanish(curve, order):
    assert curve.derivative(0.4, order) == (0.0, 0.0)


def test_third_derivative_of_cubic_is_constant(curve):
    assert curve.derivative(0.1, 3) == pytest.approx(curve.derivative(0.9, 3))


@pytest.mark.parametrize("t", [0.0, 0.25, 0.5, 1.0])
def test_tangent_norm_is_length_of_first_derivative(curve, t):
    dx, dy = curve.derivative(t, 1)
    assert curve.tangent_norm(t) == pytest.approx(math.hypot(dx, dy))


def test_derivative_default_order_is_first(curve):
    assert curve.derivative(0.3) == curve.derivative(0.3, 1)


def test_negative_order_rejected():
    with pytest.raises(ValueError):
        bernstein_derivative(BX, 0.5, -1)


def test_empty_coefficients_rejected():
    with pytest.raises(ValueError):
        bernstein_derivative([], 0.5, 0)


def test_mismatched_coefficients_rejected():
    with pytest.raises(ValueError):
        BezierCurve((0.0, 1.0), (0.0, 1.0, 2.0))


def test_coefficients_are_stored_as_float_tuples():
    curve = BezierCurve([0, 1], [2, 3])
    assert curve.x_coefficients == (0.0, 1.0)
    assert curve.y_coefficients == (2.0, 3.0)