"""Path following of a kinematic car along a Bezier path, with CSV output."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Callable, Iterable, Iterator, Optional, Sequence, TextIO

from .bezier import BezierCurve
from .integrator import GillIntegrator
from .path import PathPoint, SampledPath

EX9_BEZIER_X = (
    -7.0, -7.0, -7.0, -7.0, -7.0, -5.5, -4.0, -2.5,
    -1.0, 0.5, 2.0, -1.0, 0.5, 2.0, 3.5, 5.0,
)
EX9_BEZIER_Y = (
    0.0, -1.0, -2.0, -3.0, -7.0, -7.0, -7.0, -7.0,
    -7.0, -7.0, -7.0, 2.0, 2.0, 2.0, 2.0, 2.0,
)
PI_APPROX = 3.14159
DEFAULT_START = (-6.001, 1.0, -PI_APPROX / 2.0, -PI_APPROX / 4.0)
DEFAULT_T_MAX = 50.0
DEFAULT_DT = 0.01
DEFAULT_U1 = 0.5
DEFAULT_POLE = -1.5
DEFAULT_WINDOW = 400
DEFAULT_SAMPLES = 100001
DEFAULT_STEP = 0.00001
STATE_SIZE = 5

Row = tuple[tuple[float, ...], PathPoint]


def forward_speed(point: PathPoint, heading: float, tangent_angle: float, u1: float) -> float:
    """Return the vehicle speed that moves the foot point along the path at ``u1``."""
    return ((1.0 - point.d * point.cs) / math.cos(heading - tangent_angle)) * u1


def steering_rate(
    point: PathPoint,
    heading: float,
    steering: float,
    tangent_angle: float,
    u1: float,
    wheelbase: float = 1.0,
    pole: float = DEFAULT_POLE,
) -> float:
    """Return the steering rate of the chained-form feedback law.

    The closed loop has a triple pole at ``pole``.
    """
    if u1 == 0.0:
        raise ValueError("the path speed u1 must be non-zero")
    d, cs, cs1, cs2 = point.d, point.cs, point.cs1, point.cs2
    lv = wheelbase
    thp = heading - tangent_angle
    s = 1.0 - d * cs
    cth = math.cos(thp)
    sth = math.sin(thp)
    tth = math.tan(thp)
    tphi = math.tan(steering)
    cphi = math.cos(steering)
    shape = (1.0 + sth ** 2) / cth ** 2

    z1 = -cs1 * d * tth - cs * s * shape + s ** 2 * tphi / (lv * cth ** 3)
    z2 = s * tth / u1
    z3 = d / u1 ** 2

    p1 = 3.0 * pole
    p2 = -3.0 * pole * pole
    p3 = pole ** 3
    u2 = p1 * z1 + p2 * z2 + p3 * z3

    dx2ds = (
        -cs2 * d * tth
        - cs1 * s * shape
        + d * cs * cs1 * shape
        - d * cs1 * (2.0 * s * tphi) / (lv * cth ** 3)
    )
    dx2dd = -cs1 * tth + cs * cs * shape - (2.0 * s * tphi * cs) / (lv * cth ** 3)
    dx2dthp = (
        -cs1 * d / cth ** 2
        - cs * s * 4.0 * sth / cth ** 3
        + 3.0 * (s ** 2 * tphi * sth) / (lv * cth ** 4)
    )

    a1 = dx2ds + dx2dd * s * tth + dx2dthp * ((tphi * s) / (lv * cth) - cs)
    a2 = (lv * cth ** 3 * cphi ** 2) / s ** 2
    return a2 * (u2 - a1 * u1)


def _kinematics(v1: float, v2: float) -> Callable[[Sequence[float]], tuple[float, ...]]:
    def rate(x: Sequence[float]) -> tuple[float, ...]:
        return (1.0, v1 * math.cos(x[3]), v1 * math.sin(x[3]), v1 * math.tan(x[4]), v2)

    return rate


class PathFollowingSimulation:
    """Simulates the car-like vehicle ``(t, x, y, theta, phi)`` following a path."""

    def __init__(
        self,
        path: SampledPath,
        initial_state: Sequence[float],
        t_max: float = DEFAULT_T_MAX,
        dt: float = DEFAULT_DT,
        u1: float = DEFAULT_U1,
        wheelbase: float = 1.0,
        pole: float = DEFAULT_POLE,
        window: int = DEFAULT_WINDOW,
    ) -> None:
        if len(initial_state) != STATE_SIZE:
            raise ValueError(
                f"initial state needs {STATE_SIZE} components, got {len(initial_state)}"
            )
        if dt <= 0:
            raise ValueError(f"time step must be positive, got {dt}")
        if t_max < 0:
            raise ValueError(f"end time must not be negative, got {t_max}")
        self.path = path
        self.initial_state = tuple(float(v) for v in initial_state)
        self.t_max = t_max
        self.dt = dt
        self.u1 = u1
        self.wheelbase = wheelbase
        self.pole = pole
        self.window = window

    @property
    def steps(self) -> int:
        """Number of rows a run produces, the initial one included."""
        return int(self.t_max / self.dt) + 1

    def run(self) -> Iterator[Row]:
        """Yield ``(state, foot_point)`` for the start and after every step.

        Raises LookupError when the start has no foot point on the path.
        """
        integrator = GillIntegrator(self.dt, dim=STATE_SIZE)
        state = self.initial_state
        point = self.path.search(state[1], state[2])
        yield state, point
        for _ in range(1, self.steps):
            tangent = self.path.tangent_angle(point.index)
            v1 = forward_speed(point, state[3], tangent, self.u1)
            v2 = steering_rate(
                point, state[3], state[4], tangent, self.u1, self.wheelbase, self.pole
            )
            rate = _kinematics(v1, v2)
            state = integrator.step(state, rate(state), rate)
            yield state, point
            point = self.path.search_near(state[1], state[2], point, self.window)


def write_path_csv(path: SampledPath, stream: TextIO) -> None:
    """Write one ``parameter,x,y,`` line for every sample of ``path``."""
    for t, (x, y) in zip(path.parameters, path.positions):
        stream.write(f"{t:1.7f},{x:1.7f},{y:1.7f},\n")


def write_trajectory_csv(rows: Iterable[Row], stream: TextIO) -> None:
    """Write the state, foot point, lateral offset and sample index of each row."""
    for state, point in rows:
        fields = [f"{v:10.7f}," for v in (*state, point.psx, point.psy, point.d)]
        fields.append(f"{point.index:10d},")
        stream.write("".join(fields) + "\n")


def _with_progress(rows: Iterable[Row], out: TextIO) -> Iterator[Row]:
    for j, row in enumerate(rows):
        if j and j % 100 == 0:
            print(j, file=out)
        yield row


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Sample the reference path, run the simulation and write both CSV files."""
    parser = argparse.ArgumentParser(description="Simulate path following of a car-like vehicle.")
    parser.add_argument("--t-max", type=float, default=DEFAULT_T_MAX)
    parser.add_argument("--dt", type=float, default=DEFAULT_DT)
    parser.add_argument("--samples", type=int, default=DEFAULT_SAMPLES)
    parser.add_argument("--step", type=float, default=DEFAULT_STEP)
    parser.add_argument(
        "--start",
        type=float,
        nargs=4,
        metavar=("X", "Y", "THETA", "PHI"),
        default=list(DEFAULT_START),
    )
    parser.add_argument("--path-csv", default="ex9cs.csv")
    parser.add_argument("--output", default="ex9.csv")
    args = parser.parse_args(argv)

    curve = BezierCurve(EX9_BEZIER_X, EX9_BEZIER_Y)
    try:
        path = SampledPath(curve, args.samples, args.step)
        simulation = PathFollowingSimulation(
            path, (0.0, *args.start), t_max=args.t_max, dt=args.dt
        )
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    with open(args.path_csv, "w", encoding="utf-8") as stream:
        write_path_csv(path, stream)

    try:
        with open(args.output, "w", encoding="utf-8") as stream:
            write_trajectory_csv(_with_progress(simulation.run(), sys.stdout), stream)
    except LookupError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0