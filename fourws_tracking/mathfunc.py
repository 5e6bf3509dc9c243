"""Small numeric helpers used by the path and control code."""

from __future__ import annotations

import math


def sec(x: float) -> float:
    """Return the secant of ``x``."""
    return 1.0 / math.cos(x)


def arctan(x: float, y: float) -> float:
    """Return the angle of the vector ``(x, y)``; note the argument order."""
    return math.atan2(y, x)


def power(x: float, y: float) -> float:
    """Return ``x`` raised to ``y`` as a float."""
    return math.pow(x, y)


def factorial(n: float) -> int:
    """Return the product of the integers from 2 up to ``n``.

    ``n`` may be a float; values below 2 give 1.
    """
    result = 1
    for i in range(2, math.floor(n) + 1):
        result *= i
    return result