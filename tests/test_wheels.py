import math

import pytest

from fourws_tracking.wheels import (
    compute_front_wheel_torque,
    compute_rear_wheel_omegas,
    compute_rear_wheel_torque,
    forward_speed_command,
)


def test_straight_driving_gives_equal_omegas():
    left, right = compute_rear_wheel_omegas(2.0, 0.0, wheelbase=1.0, wheel_radius=0.5)
    assert left == pytest.approx(2.0 / 0.5)
    assert right == left


def test_tiny_steering_treated_as_straight():
    left, right = compute_rear_wheel_omegas(1.0, 1e-7)
    assert left == right


def test_turn_keeps_mean_omega_and_inner_is_slower():
    speed, radius = 1.5, 0.2
    left, right = compute_rear_wheel_omegas(speed, 0.3, wheelbase=1.0, wheel_radius=radius)
    assert left + right == pytest.approx(2 * speed / radius)
    assert left < right


def test_opposite_turn_swaps_omegas():
    left, right = compute_rear_wheel_omegas(1.0, 0.25)
    mirrored = compute_rear_wheel_omegas(1.0, -0.25)
    assert mirrored == pytest.approx((right, left))


@pytest.mark.parametrize("split", [compute_front_wheel_torque, compute_rear_wheel_torque])
def test_equal_tangents_split_evenly(split):
    assert split(10.0, 0.2, 0.2) == pytest.approx((5.0, 5.0))


@pytest.mark.parametrize("split", [compute_front_wheel_torque, compute_rear_wheel_torque])
@pytest.mark.parametrize("angles", [(0.3, 0.0), (-0.2, 0.1), (0.05, -0.4)])
def test_torque_sum_preserved(split, angles):
    left, right = split(7.0, *angles)
    assert left + right == pytest.approx(7.0)


def test_left_turn_gives_left_more_rear_torque():
    left, right = compute_rear_wheel_torque(10.0, 0.3, 0.0)
    assert left > right


def test_forward_speed_on_path_equals_w1():
    assert forward_speed_command(0.0, 0.5, 0.0, 0.0, 0.1) == pytest.approx(0.1)


def test_forward_speed_zero_at_curvature_centre():
    assert forward_speed_command(2.0, 0.5, 0.2, 0.1, 0.1) == pytest.approx(0.0)


def test_forward_speed_even_in_angle():
    a = forward_speed_command(0.3, 0.2, 0.4, 0.1, 0.1)
    b = forward_speed_command(0.3, 0.2, -0.4, -0.1, 0.1)
    assert a == pytest.approx(b)
    assert a == pytest.approx((1 - 0.3 * 0.2) * 0.1 / math.cos(0.5))