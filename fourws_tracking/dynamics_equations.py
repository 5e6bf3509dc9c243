"""Right-hand sides of the kinematic model and its time derivative."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

STATE_SIZE = 6


@dataclass(frozen=True)
class KinematicInputs:
    """Control inputs: forward speed and rear and front steering rates."""

    u1: float
    u2: float
    u3: float
    wheelbase: float = 1.0
    u1_dot: float = 0.0
    u2_dot: float = 0.0
    u3_dot: float = 0.0


def _check(name: str, values: Sequence[float]) -> None:
    if len(values) < STATE_SIZE:
        raise ValueError(
            f"{name} needs {STATE_SIZE} components, got {len(values)}"
        )


def state_derivative(x: Sequence[float], inputs: KinematicInputs) -> tuple[float, ...]:
    """Return the time derivative of ``(t, x, y, theta, phi_r, phi_f)``."""
    _check("state", x)
    theta, phi1, phi2 = x[3], x[4], x[5]
    u1 = inputs.u1
    return (
        1.0,
        u1 * math.cos(theta + phi1),
        u1 * math.sin(theta + phi1),
        u1 * (-math.sin(phi2 - phi1) / (inputs.wheelbase * math.cos(phi1))),
        inputs.u2,
        inputs.u3,
    )


def state_second_derivative(
    x: Sequence[float],
    x_d: Sequence[float],
    inputs: KinematicInputs,
) -> tuple[float, ...]:
    """Return the second-order rates used to integrate the state velocities."""
    _check("state", x)
    _check("state rate", x_d)
    theta, phi1, phi2 = x[3], x[4], x[5]
    theta_d, phi1_d, phi2_d = x_d[3], x_d[4], x_d[5]
    u1, u1_dot, lv = inputs.u1, inputs.u1_dot, inputs.wheelbase
    heading = theta + phi1

    xdd = u1_dot * math.cos(heading) - u1 * math.sin(heading) * theta_d * phi1_d
    ydd = u1_dot * math.sin(heading) + u1 * math.cos(heading) * theta_d * phi1_d
    thetadd = u1_dot * (-math.sin(phi2 - phi1) / (lv * math.cos(phi1))) + (u1 / lv) * (
        (math.cos(phi2 - phi1) * (phi2_d - phi1_d)) / math.cos(phi1)
        + (math.sin(phi2 - phi1) * math.sin(phi1) * phi1_d) / math.cos(phi1) ** 2
    )
    return (1.0, xdd, ydd, thetadd, inputs.u2_dot, inputs.u3_dot)