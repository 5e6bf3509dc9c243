"""Vehicle parameters, controller gains and simulation settings."""

from __future__ import annotations

from dataclasses import dataclass, field

from .bezier import BezierCurve

GRAVITY = 9.80665
VEHICLE_INERTIA_COEF = 0.14824039
STATE_DIM = 5

DEFAULT_BEZIER_X = (-6.5, 3.0, -3.0, 6.5)
DEFAULT_BEZIER_Y = (-1.0, -1.0, 1.0, 1.0)


@dataclass(frozen=True)
class VehicleParameters:
    """Geometry and mass properties of the four-wheel-steering vehicle."""

    wheelbase: float = 1.0
    wheel_radius: float = 0.153
    m_wheel: float = 4.63972
    m_hinge: float = 4.884144703315957
    body_mass: float = 376.64 + 2 * 12.646385127140846
    yaw_inertia: float = VEHICLE_INERTIA_COEF * 418.647558 + 2 * 0.755318
    wheel_inertia: float = 0.029034
    hinge_inertia: float = 0.021551
    wheel_spin_inertia: float = 2 * 0.053334
    gravity: float = GRAVITY
    slope: float = 0.0

    @property
    def wheel_pair_mass(self) -> float:
        """Mass of one axle's wheels and hinges."""
        return 2 * (self.m_wheel + self.m_hinge)

    @property
    def steering_inertia(self) -> float:
        """Inertia about the steering axis of one axle."""
        return 2 * (self.wheel_inertia + self.hinge_inertia)


@dataclass(frozen=True)
class ControlGains:
    """Feedback gains and the reference forward speed of the controller."""

    k1: float = 4.0
    k2: float = 4.0
    k3: float = 4.0
    k4: float = 4.0
    a0: float = 0.1
    a0_dot: float = 0.0
    velocity_gain: float = 12.0

    @property
    def w1(self) -> float:
        """First chained-form input, equal to the reference speed."""
        return self.a0


@dataclass(frozen=True)
class SimulationSettings:
    """Time span, step and path sampling of a run."""

    t_max: float = 66.8
    dt: float = 0.01
    samples: int = 100001
    sample_step: float = 0.00001
    search_window: int = 300
    vehicle: VehicleParameters = field(default_factory=VehicleParameters)
    gains: ControlGains = field(default_factory=ControlGains)

    def __post_init__(self) -> None:
        if self.dt <= 0:
            raise ValueError(f"time step must be positive, got {self.dt}")
        if self.samples < 2:
            raise ValueError(f"at least two path samples are needed, got {self.samples}")
        if self.search_window < 1:
            raise ValueError(f"search window must be positive, got {self.search_window}")


def default_settings() -> SimulationSettings:
    """Return the settings used by the tracking controller."""
    return SimulationSettings()


def default_curve() -> BezierCurve:
    """Return the cubic reference path."""
    return BezierCurve(DEFAULT_BEZIER_X, DEFAULT_BEZIER_Y)