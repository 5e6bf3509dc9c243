"""A reference path sampled from a Bezier curve, with foot-point search."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import accumulate, repeat
from typing import Iterable, Optional

from .bezier import BezierCurve

DOT_TOLERANCE = 1e-4
DEFAULT_SAMPLES = 100001
DEFAULT_STEP = 0.00001
DEFAULT_WINDOW = 300


@dataclass(frozen=True)
class PathPoint:
    """The foot point of the vehicle on the path and the local path data."""

    index: int
    psx: float
    psy: float
    d: float
    cs: float
    cs1: float
    cs2: float


def curvature_derivatives(curve: BezierCurve, t: float) -> tuple[float, float, float]:
    """Return the curvature and its first two arc-length derivatives at ``t``.

    Where the tangent vanishes the values are not defined and NaN is returned.
    """
    x1, y1 = curve.derivative(t, 1)
    x2, y2 = curve.derivative(t, 2)
    x3, y3 = curve.derivative(t, 3)
    x4, y4 = curve.derivative(t, 4)
    n = x1 * x1 + y1 * y1
    if n == 0.0:
        return (math.nan, math.nan, math.nan)

    cs0 = (-(y1 * x2) + x1 * y2) / n ** 1.5

    cs1 = (
        y1 ** 2 * (3 * x2 * y2 - y1 * x3)
        - x1 ** 2 * (3 * x2 * y2 + y1 * x3)
        + x1 ** 3 * y3
        + x1 * y1 * (3 * x2 ** 2 - 3 * y2 ** 2 + y1 * y3)
    ) / n ** 3

    cs2 = (
        -(x1 ** 4 * (4 * y2 * x3 + 6 * x2 * y3 + y1 * x4))
        + x1 ** 2 * y1 * (
            -15 * x2 ** 3
            + x2 * (39 * y2 ** 2 - 2 * y1 * y3)
            + 2 * y1 * (y2 * x3 - y1 * x4)
        )
        + y1 ** 3 * (
            3 * x2 ** 3
            + x2 * (-15 * y2 ** 2 + 4 * y1 * y3)
            + y1 * (6 * y2 * x3 - y1 * x4)
        )
        + x1 ** 5 * y4
        + x1 * y1 ** 2 * (
            -39 * x2 ** 2 * y2
            + 15 * y2 ** 3
            + 10 * y1 * x2 * x3
            - 10 * y1 * y2 * y3
            + y1 ** 2 * y4
        )
        + x1 ** 3 * (
            15 * x2 ** 2 * y2
            - 3 * y2 ** 3
            + 10 * y1 * x2 * x3
            - 10 * y1 * y2 * y3
            + 2 * y1 ** 2 * y4
        )
    ) / n ** 4.5

    return (cs0, cs1, cs2)


class SampledPath:
    """A Bezier curve sampled at evenly spaced parameters.

    The parameters are built by repeated addition of ``step`` starting at 0.
    """

    def __init__(
        self,
        curve: BezierCurve,
        samples: int = DEFAULT_SAMPLES,
        step: float = DEFAULT_STEP,
    ) -> None:
        if samples < 1:
            raise ValueError(f"at least one sample is needed, got {samples}")
        if step <= 0:
            raise ValueError(f"sample step must be positive, got {step}")
        self.curve = curve
        self.parameters: tuple[float, ...] = tuple(
            accumulate(repeat(step, samples - 1), initial=0.0)
        )
        self.positions = tuple(curve.position(t) for t in self.parameters)
        self.tangents = tuple(curve.derivative(t, 1) for t in self.parameters)
        self.curvatures = tuple(
            curvature_derivatives(curve, t) for t in self.parameters
        )
        self._unit_tangents = tuple(
            (tx / norm, ty / norm) if (norm := math.hypot(tx, ty)) > 0.0 else None
            for tx, ty in self.tangents
        )

    def __len__(self) -> int:
        return len(self.parameters)

    def tangent_angle(self, index: int) -> float:
        """Return the direction of the path tangent at sample ``index``."""
        tx, ty = self.tangents[index]
        return math.atan2(ty, tx)

    def _best(self, x: float, y: float, indices: Iterable[int]) -> Optional[PathPoint]:
        best: Optional[PathPoint] = None
        best_dist = math.inf
        for i in indices:
            unit = self._unit_tangents[i]
            if unit is None:
                continue
            ux, uy = unit
            px, py = self.positions[i]
            dx, dy = x - px, y - py
            dot = dx * ux + dy * uy
            if not -DOT_TOLERANCE < dot < DOT_TOLERANCE:
                continue
            dist = math.hypot(dx, dy)
            if dist < best_dist:
                best_dist = dist
                cs0, cs1, cs2 = self.curvatures[i]
                best = PathPoint(
                    index=i,
                    psx=px,
                    psy=py,
                    d=dx * (-uy) + dy * ux,
                    cs=cs0,
                    cs1=cs1,
                    cs2=cs2,
                )
        return best

    def search(self, x: float, y: float) -> PathPoint:
        """Search every sample for the nearest foot point of ``(x, y)``.

        Raises LookupError when no sample is perpendicular to the point.
        """
        found = self._best(x, y, range(len(self)))
        if found is None:
            raise LookupError(f"no foot point on the path for ({x}, {y})")
        return found

    def search_near(
        self,
        x: float,
        y: float,
        previous: PathPoint,
        window: int = DEFAULT_WINDOW,
    ) -> PathPoint:
        """Search a window of samples around ``previous`` for the foot point.

        Returns ``previous`` unchanged when no sample in the window qualifies.
        """
        if window < 1:
            raise ValueError(f"search window must be positive, got {window}")
        n = len(self)
        j = previous.index
        if j < window:
            lo, hi = 0, j + window
        elif j > n - window:
            lo, hi = j - window, n
        else:
            lo, hi = j - window, j + window
        lo, hi = max(lo, 0), min(hi, n)
        found = self._best(x, y, range(lo, hi))
        return previous if found is None else found