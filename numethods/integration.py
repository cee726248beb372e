"""Numerical integration by the trapezoidal rule and Simpson's 3/8 rule."""

from __future__ import annotations

from collections.abc import Callable

Function = Callable[[float], float]


def _step(a: float, b: float, intervals: int) -> float:
    if intervals < 1:
        raise ValueError("intervals must be at least 1")
    return (b - a) / intervals


def trapezoidal(f: Function, a: float, b: float, intervals: int) -> float:
    """Integrate ``f`` over ``[a, b]`` with the composite trapezoidal rule."""
    h = _step(a, b, intervals)
    inner = sum(f(a + k * h) for k in range(1, intervals))
    return h * (f(a) + f(b) + 2 * inner) / 2


def simpson_three_eighths(f: Function, a: float, b: float, intervals: int) -> float:
    """Integrate ``f`` over ``[a, b]`` with Simpson's 3/8 rule.

    Interior points at positions divisible by three get weight 2, the others
    weight 3.
    """
    h = _step(a, b, intervals)
    total = f(a) + f(b)
    for k in range(1, intervals):
        weight = 2 if k % 3 == 0 else 3
        total += weight * f(a + k * h)
    return 3 * h / 8 * total