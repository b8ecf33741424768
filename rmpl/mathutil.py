"""Angle, distance and numerical integration helpers."""

from __future__ import annotations

import math
from collections.abc import Callable

_TAU = 2.0 * math.pi


def wrap(a: float) -> float:
    """Normalise an angle to the range [-pi, pi]."""
    out = a
    while out > math.pi:
        out -= _TAU
    while out < -math.pi:
        out += _TAU
    return out


def signed_angle_diff(actual: float, desired: float) -> float:
    """Smallest signed turn from ``actual`` to ``desired``, treating headings as lines."""
    direct = wrap(desired - actual)
    flipped = wrap(desired - actual + math.pi)
    return direct if abs(direct) < abs(flipped) else flipped


def euclidean(a: float, b: float) -> float:
    """Length of the vector ``(a, b)``."""
    return math.sqrt(a * a + b * b)


def angular(a: float, b: float) -> float:
    """Unsigned angular distance between two headings."""
    return abs(signed_angle_diff(a, b))


def trapezoidal(f: Callable[[float], float], a: float, b: float, n: int) -> float:
    """Integrate ``f`` over ``[a, b]`` with the composite trapezoidal rule on ``n`` intervals."""
    if n < 1:
        raise ValueError(f"number of intervals must be at least 1, got {n}")
    h = (b - a) / n
    total = 0.5 * (f(a) + f(b)) + sum(f(a + i * h) for i in range(1, n))
    return total * h