# fourws_tracking

Path-following tools for a car-like or four-wheel-steering vehicle that tracks
a planar Bezier curve. It uses only the Python standard library.

## Modules

- `fourws_tracking.mathfunc` – small helpers: `sec`, `arctan(x, y)` (angle of
  the vector `(x, y)`), `power`, `factorial`.
- `fourws_tracking.bezier` – `bernstein_derivative(coefficients, t, order)` and
  the frozen dataclass `BezierCurve` with `position(t)`, `derivative(t, order)`,
  `tangent_norm(t)` and the `degree` property.
- `fourws_tracking.params` – `VehicleParameters`, `ControlGains` and
  `SimulationSettings` dataclasses with their defaults, `default_settings()` and
  `default_curve()` (the cubic reference path).
- `fourws_tracking.path` – `curvature_derivatives(curve, t)` (curvature and its
  first two arc-length derivatives), `PathPoint`, and `SampledPath`, which
  samples a curve and finds the foot point of a position with `search(x, y)`
  (all samples; raises `LookupError` when none fits) or
  `search_near(x, y, previous, window)` (a window around the previous index;
  returns `previous` when none fits). `tangent_angle(index)` gives the tangent
  direction of a sample.
- `fourws_tracking.dynamics_equations` – `KinematicInputs`,
  `state_derivative(x, inputs)` and `state_second_derivative(x, x_d, inputs)`
  for the state `(t, x, y, theta, phi_r, phi_f)`.
- `fourws_tracking.integrator` – `GillIntegrator`, one Runge–Kutta–Gill step
  with a round-off carry kept between steps: `step`, `step_with_time` (component
  0 is time) and `reset`.
- `fourws_tracking.wheels` – `compute_rear_wheel_omegas`,
  `compute_front_wheel_torque`, `compute_rear_wheel_torque` (left/right split of
  an axle's speed or torque in a turn) and `forward_speed_command`.
- `fourws_tracking.pid` – `PIDGains(kp, ki, kd)` and `PIDTorque(gains, dt)` with
  `compute(u, u_act)`.
- `fourws_tracking.tracking` – the steering feedback law (`forward_speed`,
  `steering_rate`), `PathFollowingSimulation` whose `run()` yields
  `(state, foot_point)` rows, `write_path_csv`, `write_trajectory_csv` and the
  command's `main`.
- `fourws_tracking.logger` – `LogRecord`, `CSVLogger` and `make_timestamp`.
- `fourws_tracking.state` – `quaternion_to_yaw` and `VehicleState`, which is
  updated from joint readings and body/steering odometry values.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## The command

```
fourws-tracking
```

It samples a degree-15 Bezier path, runs the path-following simulation of the
car-like model `(t, x, y, theta, phi)` and writes two CSV files:

- the sampled path, one `parameter,x,y,` line per sample (`--path-csv`,
  default `ex9cs.csv`);
- the trajectory: state, foot point, lateral offset and sample index for every
  step (`--output`, default `ex9.csv`).

Progress is printed every 100 steps. Other options:

- `--t-max` end time (default 50.0)
- `--dt` time step (default 0.01)
- `--samples` number of path samples (default 100001)
- `--step` parameter spacing of the samples (default 0.00001)
- `--start X Y THETA PHI` initial pose and steering angle

It exits with 2 on invalid settings and 1 when the start has no foot point on
the path. With the default sampling the run takes a while.

## Using the library

```python
from fourws_tracking.params import default_curve
from fourws_tracking.path import SampledPath
from fourws_tracking.wheels import compute_rear_wheel_torque

curve = default_curve()
print(curve.position(0.5), curve.derivative(0.5, 1))

path = SampledPath(curve, samples=1001, step=0.001)
point = path.search(0.0, 0.5)
print(point.index, point.d, point.cs)

left, right = compute_rear_wheel_torque(10.0, 0.2, -0.1, 1.0)
```

The PID controller keeps its integral and previous error between calls:

```python
from fourws_tracking.pid import PIDGains, PIDTorque

pid = PIDTorque(PIDGains(kp=1.0, ki=0.1, kd=0.01), 0.01)
torque = pid.compute(1.0, 0.8)
```

`CSVLogger(directory)` writes `data_log_<YYYYMMDD_HHMMSS>.csv` in `directory`,
starting with a header line; `log_data(record)` appends one `LogRecord` and
closes the file once a record's `sr_j` equals `close_threshold`. It can be used
as a context manager.

## What the package does not do

It does not connect to a simulator or to a real vehicle: there is no message
subscription and no publishing of steering or wheel commands. `VehicleState`
only takes plain values that the caller passes in. The constrained dynamics
that turn desired accelerations into axle torques are not included; the wheel
functions split a given axle torque but do not compute it.