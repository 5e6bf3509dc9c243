"""Wheel speed and torque distribution between the left and right wheels."""

from __future__ import annotations

import math

TREAD = 0.05
DEFAULT_WHEELBASE = 1.0
DEFAULT_WHEEL_RADIUS = 0.153


def compute_rear_wheel_omegas(
    speed: float,
    steering_angle: float,
    wheelbase: float = DEFAULT_WHEELBASE,
    wheel_radius: float = DEFAULT_WHEEL_RADIUS,
) -> tuple[float, float]:
    """Return the (left, right) rear wheel angular velocities for a turn."""
    if abs(steering_angle) < 1e-6:
        omega = speed / wheel_radius
        return (omega, omega)
    radius = wheelbase / math.tan(abs(steering_angle))
    omega_in = speed * ((radius - TREAD / 2.0) / radius) / wheel_radius
    omega_out = speed * ((radius + TREAD / 2.0) / radius) / wheel_radius
    if steering_angle > 0:
        return (omega_in, omega_out)
    return (omega_out, omega_in)


def _split_torque(q: float, center_radius: float, tan_diff: float) -> tuple[float, float]:
    radius = abs(center_radius)
    inner = radius - TREAD / 2.0
    outer = radius + TREAD / 2.0
    total = inner + outer
    t_in = q * (outer / total)
    t_out = q * (inner / total)
    if tan_diff > 0:
        return (t_in, t_out)
    return (t_out, t_in)


def compute_front_wheel_torque(
    qf: float,
    steering_front: float,
    steering_rear: float,
    wheelbase: float = DEFAULT_WHEELBASE,
) -> tuple[float, float]:
    """Split the front axle torque ``qf`` into (left, right) wheel torques."""
    tan_diff = math.tan(steering_front) - math.tan(steering_rear)
    if abs(tan_diff) < 1e-9:
        return (qf * 0.5, qf * 0.5)
    rear_center = wheelbase / tan_diff
    return _split_torque(qf, rear_center - wheelbase, tan_diff)


def compute_rear_wheel_torque(
    qr: float,
    steering_front: float,
    steering_rear: float,
    wheelbase: float = DEFAULT_WHEELBASE,
) -> tuple[float, float]:
    """Split the rear axle torque ``qr`` into (left, right) wheel torques."""
    tan_diff = math.tan(steering_front) - math.tan(steering_rear)
    if abs(tan_diff) < 1e-9:
        return (qr * 0.5, qr * 0.5)
    return _split_torque(qr, wheelbase / tan_diff, tan_diff)


def forward_speed_command(
    d: float, cs: float, thetap: float, steering: float, w1: float
) -> float:
    """Return the forward speed that moves the foot point at rate ``w1``."""
    return ((1.0 - d * cs) / math.cos(thetap + steering)) * w1