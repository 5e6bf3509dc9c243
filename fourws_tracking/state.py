"""Vehicle state assembled from joint-state and odometry measurements."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

STEERING_JOINTS = (
    "front_left_steering",
    "front_right_steering",
    "rear_left_steering",
    "rear_right_steering",
)
WHEEL_JOINTS = (
    "front_left_wheel",
    "front_right_wheel",
    "rear_left_wheel",
    "rear_right_wheel",
)


def quaternion_to_yaw(x: float, y: float, z: float, w: float) -> float:
    """Return the yaw angle of the rotation given by a quaternion.

    The quaternion need not be normalised. At the pitch singularity the yaw
    is reported as 0. A zero quaternion raises ValueError.
    """
    norm_sq = x * x + y * y + z * z + w * w
    if norm_sq == 0.0:
        raise ValueError("a zero quaternion has no orientation")
    s = 2.0 / norm_sq
    m00 = 1.0 - (y * y + z * z) * s
    m10 = (x * y + w * z) * s
    m20 = (x * z - w * y) * s
    if abs(m20) >= 1.0:
        return 0.0
    return math.atan2(m10, m00)


def _mean(a: float, b: float) -> float:
    return (a + b) / 2.0


@dataclass
class VehicleState:
    """The measured state of the vehicle, updated from incoming messages.

    ``x_old`` and ``x_d`` hold ``(t, x, y, theta, phi_r, phi_f)`` and its
    rates; ``q_twist`` and ``qdot_twist`` hold the generalised coordinates
    ``(x, y, theta, phi_r, varphi_r, phi_f, varphi_f)`` and their rates.
    The position is that of the rear axle, half a wheelbase behind the body.
    """

    wheelbase: float = 1.0
    x_old: list[float] = field(default_factory=lambda: [0.0] * 6)
    x_d: list[float] = field(default_factory=lambda: [0.0] * 6)
    q_twist: list[float] = field(default_factory=lambda: [0.0] * 7)
    qdot_twist: list[float] = field(default_factory=lambda: [0.0] * 7)
    phi_r_dot: float = 0.0
    phi_f_dot: float = 0.0
    true_body_pos: tuple[float, float] = (0.0, 0.0)
    true_body_yaw: float = 0.0
    true_steering: float = 0.0
    got_body_pose: bool = False
    got_steering_pose: bool = False
    joint_positions: dict[str, float] = field(default_factory=dict)
    joint_velocities: dict[str, float] = field(default_factory=dict)

    @property
    def ready(self) -> bool:
        """Whether both the body pose and the steering pose have been received."""
        return self.got_body_pose and self.got_steering_pose

    def update_from_joint_states(
        self,
        names: Sequence[str],
        positions: Sequence[float],
        velocities: Sequence[float],
    ) -> None:
        """Record joint readings and average each axle's left and right joints.

        Joints missing from the message keep their last known value.
        """
        if not len(names) == len(positions) == len(velocities):
            raise ValueError(
                "joint names, positions and velocities differ in length: "
                f"{len(names)}, {len(positions)}, {len(velocities)}"
            )
        for name, pos, vel in zip(names, positions, velocities):
            self.joint_positions[name] = float(pos)
            self.joint_velocities[name] = float(vel)

        pos = {n: self.joint_positions.get(n, 0.0) for n in STEERING_JOINTS + WHEEL_JOINTS}
        vel = {n: self.joint_velocities.get(n, 0.0) for n in STEERING_JOINTS + WHEEL_JOINTS}

        steer_r = _mean(pos["rear_left_steering"], pos["rear_right_steering"])
        steer_f = _mean(pos["front_left_steering"], pos["front_right_steering"])
        steer_r_dot = _mean(vel["rear_left_steering"], vel["rear_right_steering"])
        steer_f_dot = _mean(vel["front_left_steering"], vel["front_right_steering"])
        wheel_r = _mean(pos["rear_left_wheel"], pos["rear_right_wheel"])
        wheel_f = _mean(pos["front_left_wheel"], pos["front_right_wheel"])
        wheel_r_dot = _mean(vel["rear_left_wheel"], vel["rear_right_wheel"])
        wheel_f_dot = _mean(vel["front_left_wheel"], vel["front_right_wheel"])

        self.x_old[4] = steer_r
        self.x_old[5] = steer_f
        self.x_d[4] = steer_r_dot
        self.x_d[5] = steer_f_dot
        self.phi_r_dot = steer_r_dot
        self.phi_f_dot = steer_f_dot

        self.q_twist[3:7] = [steer_r, wheel_r, steer_f, wheel_f]
        self.qdot_twist[3:7] = [steer_r_dot, wheel_r_dot, steer_f_dot, wheel_f_dot]

    def update_from_body_odometry(
        self,
        position: Sequence[float],
        orientation: Sequence[float],
        linear: Sequence[float],
        angular_z: float,
    ) -> float:
        """Update the pose and velocities from body odometry; return the yaw.

        ``orientation`` is the quaternion ``(x, y, z, w)``.
        """
        px, py = float(position[0]), float(position[1])
        vx, vy = float(linear[0]), float(linear[1])
        yaw = quaternion_to_yaw(*orientation)
        half = self.wheelbase / 2.0

        self.true_body_pos = (px, py)
        self.true_body_yaw = yaw
        rear_x = px - math.cos(yaw) * half
        rear_y = py - math.sin(yaw) * half
        self.x_old[1] = rear_x
        self.x_old[2] = rear_y
        self.x_old[3] = yaw
        self.q_twist[0] = rear_x
        self.q_twist[1] = rear_y
        self.q_twist[2] = yaw
        self.got_body_pose = True

        wz = float(angular_z)
        self.qdot_twist[2] = wz
        self.qdot_twist[0] = vx + wz * math.sin(yaw) * half
        self.qdot_twist[1] = vy - wz * math.cos(yaw) * half
        self.x_d[1] = self.qdot_twist[0]
        self.x_d[2] = self.qdot_twist[1]
        self.x_d[3] = self.qdot_twist[2]
        return yaw

    def update_from_steering_odometry(self, orientation: Sequence[float]) -> float:
        """Record the steering link's yaw from its quaternion and return it."""
        self.true_steering = quaternion_to_yaw(*orientation)
        self.got_steering_pose = True
        return self.true_steering