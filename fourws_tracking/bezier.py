"""Bezier curves in the plane and their derivatives."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence


def _forward_difference(coefficients: Sequence[float], index: int, order: int) -> float:
    """Return the ``order``-th backward-looking difference ending at ``index``."""
    return sum(
        (-1) ** m * math.comb(order, m) * coefficients[index - m]
        for m in range(order + 1)
    )


def bernstein_derivative(coefficients: Sequence[float], t: float, order: int = 0) -> float:
    """Return the ``order``-th derivative of a one-dimensional Bezier curve at ``t``.

    Order 0 gives the curve value itself. Orders above the curve degree give 0.
    """
    if order < 0:
        raise ValueError(f"derivative order must be non-negative, got {order}")
    coeffs = tuple(float(c) for c in coefficients)
    if not coeffs:
        raise ValueError("a Bezier curve needs at least one control coefficient")
    degree = len(coeffs) - 1
    total = 0.0
    for i in range(order, degree + 1):
        total += (
            _forward_difference(coeffs, i, order)
            * math.comb(degree, i)
            * math.perm(i, order)
            * t ** (i - order)
            * (1.0 - t) ** (degree - i)
        )
    return total


@dataclass(frozen=True)
class BezierCurve:
    """A planar Bezier curve given by its x and y control coefficients."""

    x_coefficients: tuple[float, ...]
    y_coefficients: tuple[float, ...]

    def __post_init__(self) -> None:
        xs = tuple(float(c) for c in self.x_coefficients)
        ys = tuple(float(c) for c in self.y_coefficients)
        if not xs:
            raise ValueError("a Bezier curve needs at least one control point")
        if len(xs) != len(ys):
            raise ValueError(
                f"x and y coefficient counts differ: {len(xs)} != {len(ys)}"
            )
        object.__setattr__(self, "x_coefficients", xs)
        object.__setattr__(self, "y_coefficients", ys)

    @property
    def degree(self) -> int:
        """The polynomial degree of the curve."""
        return len(self.x_coefficients) - 1

    def position(self, t: float) -> tuple[float, float]:
        """Return the point of the curve at parameter ``t``."""
        return self.derivative(t, 0)

    def derivative(self, t: float, order: int = 1) -> tuple[float, float]:
        """Return the ``order``-th derivative with respect to ``t``."""
        return (
            bernstein_derivative(self.x_coefficients, t, order),
            bernstein_derivative(self.y_coefficients, t, order),
        )

    def tangent_norm(self, t: float) -> float:
        """Return the length of the first derivative at ``t``."""
        dx, dy = self.derivative(t, 1)
        return math.sqrt(dx * dx + dy * dy)