"""A PID controller producing a torque from a velocity error."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PIDGains:
    """Proportional, integral and derivative gains."""

    kp: float
    ki: float
    kd: float


@dataclass
class PIDTorque:
    """Discrete PID controller with a fixed time step.

    On the first call the integral term is ``ki * e`` and the derivative
    term ``kd * e``; afterwards the usual rectangle and difference rules apply.
    """

    gains: PIDGains
    dt: float
    _prev_error: float = field(default=0.0, init=False, repr=False)
    _integral: float = field(default=0.0, init=False, repr=False)
    _first_step: bool = field(default=True, init=False, repr=False)

    def compute(self, u: float, u_act: float) -> float:
        """Return the control output for target ``u`` and measured ``u_act``."""
        error = u - u_act
        if self._first_step:
            self._integral = self.gains.ki * error
            derivative = self.gains.kd * error
            self._first_step = False
        else:
            self._integral += self.gains.ki * error * self.dt
            derivative = self.gains.kd * (error - self._prev_error) / self.dt
        self._prev_error = error
        return self.gains.kp * error + self._integral + derivative