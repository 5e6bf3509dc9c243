"""Runge-Kutta-Gill integration step with round-off carry."""

from __future__ import annotations

import math
from typing import Callable, Sequence

RateFunction = Callable[[Sequence[float]], Sequence[float]]

_A = 1.0 - math.sqrt(0.5)
_B = 1.0 + math.sqrt(0.5)


class GillIntegrator:
    """Advances a state vector by one step of the Runge-Kutta-Gill scheme.

    The first stage uses the supplied initial rate; the remaining stages
    evaluate ``rate`` at the first intermediate state. The round-off carry
    is kept between steps until :meth:`reset` is called.
    """

    def __init__(self, h: float, dim: int = 6) -> None:
        if h <= 0:
            raise ValueError(f"step size must be positive, got {h}")
        if dim < 1:
            raise ValueError(f"dimension must be positive, got {dim}")
        self.h = h
        self.dim = dim
        self._carry = [0.0] * dim

    @property
    def carry(self) -> tuple[float, ...]:
        """The round-off carry left by the last step."""
        return tuple(self._carry)

    def reset(self) -> None:
        """Clear the round-off carry."""
        self._carry = [0.0] * self.dim

    def _check(self, name: str, values: Sequence[float]) -> None:
        if len(values) != self.dim:
            raise ValueError(f"{name} has {len(values)} components, expected {self.dim}")

    def step(
        self,
        state: Sequence[float],
        initial_rate: Sequence[float],
        rate: RateFunction,
    ) -> tuple[float, ...]:
        """Return the state after one step; every component is integrated."""
        self._check("state", state)
        self._check("initial rate", initial_rate)
        h = self.h
        carry = self._carry

        k1 = [h * float(v) for v in initial_rate]
        r1 = [(k - 2.0 * c) / 2.0 for k, c in zip(k1, carry)]
        x0 = [float(s) + r for s, r in zip(state, r1)]
        q0 = [c + 3.0 * r - k / 2.0 for c, r, k in zip(carry, r1, k1)]

        evaluated = rate(tuple(x0))
        self._check("rate", evaluated)
        slope = [h * float(v) for v in evaluated]

        r2 = [_A * (k - q) for k, q in zip(slope, q0)]
        x1 = [x + r for x, r in zip(x0, r2)]
        q1 = [q + 3.0 * r - _A * k for q, r, k in zip(q0, r2, slope)]

        r3 = [_B * (k - q) for k, q in zip(slope, q1)]
        x2 = [x + r for x, r in zip(x1, r3)]
        q2 = [q + 3.0 * r - _B * k for q, r, k in zip(q1, r3, slope)]

        r4 = [(k - 2.0 * q) / 6.0 for k, q in zip(slope, q2)]
        new_state = [x + r for x, r in zip(x2, r4)]
        self._carry = [q + 3.0 * r - k / 2.0 for q, r, k in zip(q2, r4, slope)]
        return tuple(new_state)

    def step_with_time(
        self,
        state: Sequence[float],
        initial_rate: Sequence[float],
        rate: RateFunction,
    ) -> tuple[float, ...]:
        """Like :meth:`step`, but component 0 is time and advances by ``h``."""
        new_state = self.step(state, initial_rate, rate)
        return (float(state[0]) + self.h, *new_state[1:])