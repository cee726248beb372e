"""Root finding for functions of one real variable.

Bracketing methods (bisection, regula falsi) and the Newton-Raphson method
first check that the function changes sign over the starting interval.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from numethods.linear import MethodNotApplicableError

EPSILON = 0.0001
FIXED_POINT_EPSILON = 0.001

Function = Callable[[float], float]


class InvalidBracketError(ValueError):
    """Raised when a function has the same sign at both ends of an interval."""


@dataclass(frozen=True)
class RootResult:
    """Outcome of a root-finding method.

    ``history`` holds the approximation reported at each iteration and
    ``converged`` tells whether the tolerance test stopped the iteration.
    """

    root: float
    iterations: int
    converged: bool
    history: tuple[float, ...]


def _check_iterations(max_iterations: int) -> None:
    if max_iterations < 1:
        raise ValueError("max_iterations must be at least 1")


def check_bracket(f: Function, x1: float, x2: float) -> tuple[float, float]:
    """Return the interval if ``f`` does not keep one sign over it.

    Raises InvalidBracketError when ``f(x1)`` and ``f(x2)`` have the same sign.
    """
    if f(x1) * f(x2) > 0:
        raise InvalidBracketError(f"no root is bracketed by {x1} and {x2}")
    return x1, x2


def _midpoint(f: Function, x1: float, x2: float) -> float:
    return (x1 + x2) / 2


def _false_position(f: Function, x1: float, x2: float) -> float:
    f1, f2 = f(x1), f(x2)
    if f2 == f1:
        raise ZeroDivisionError(f"f has the same value at {x1} and {x2}")
    return (x1 * f2 - x2 * f1) / (f2 - f1)


def _bracketing(
    f: Function,
    x1: float,
    x2: float,
    max_iterations: int,
    tolerance: float,
    next_point: Callable[[Function, float, float], float],
) -> RootResult:
    history: list[float] = []
    x = next_point(f, x1, x2)
    for iteration in range(1, max_iterations + 1):
        if f(x) * f(x1) < 0:
            x2 = x
        else:
            x1 = x
        history.append(x)
        following = next_point(f, x1, x2)
        if abs(following - x) < tolerance:
            return RootResult(x, iteration, True, tuple(history))
        x = following
    return RootResult(x, max_iterations, False, tuple(history))


def bisection(
    f: Function,
    x1: float,
    x2: float,
    max_iterations: int,
    tolerance: float | None = EPSILON,
) -> RootResult:
    """Find a root of ``f`` between ``x1`` and ``x2`` by halving the interval.

    With ``tolerance`` set to None the interval is halved exactly
    ``max_iterations`` times; otherwise iteration stops once two successive
    midpoints differ by less than ``tolerance``.
    """
    _check_iterations(max_iterations)
    check_bracket(f, x1, x2)
    if tolerance is not None:
        return _bracketing(f, x1, x2, max_iterations, tolerance, _midpoint)
    history: list[float] = []
    x = x1
    for _ in range(max_iterations):
        x = (x1 + x2) / 2
        fx = f(x)
        if fx * f(x1) < 0:
            x2 = x
        elif fx * f(x2) < 0:
            x1 = x
        history.append(x)
    return RootResult(x, max_iterations, False, tuple(history))


def regula_falsi(
    f: Function,
    x1: float,
    x2: float,
    max_iterations: int,
    tolerance: float = EPSILON,
) -> RootResult:
    """Find a root of ``f`` between ``x1`` and ``x2`` by false position."""
    _check_iterations(max_iterations)
    check_bracket(f, x1, x2)
    return _bracketing(f, x1, x2, max_iterations, tolerance, _false_position)


def secant(
    f: Function,
    x1: float,
    x2: float,
    max_iterations: int,
    tolerance: float = EPSILON,
) -> RootResult:
    """Find a root of ``f`` by the secant method from two starting points.

    The reported iteration count includes the final secant step, so it is
    one more than the number of entries in ``history``.
    """
    _check_iterations(max_iterations)
    history: list[float] = []
    x = _false_position(f, x1, x2)
    for iteration in range(1, max_iterations + 1):
        x1, x2 = x2, x
        history.append(x)
        x = _false_position(f, x1, x2)
        if abs(x - x2) < tolerance:
            return RootResult(x, iteration + 1, True, tuple(history))
    return RootResult(x, max_iterations + 1, False, tuple(history))


def newton_raphson(
    f: Function,
    df: Function,
    x1: float,
    x2: float,
    max_iterations: int,
    tolerance: float = EPSILON,
) -> RootResult:
    """Find a root of ``f`` by Newton-Raphson iteration.

    The iteration starts from whichever end of the bracket has the smaller
    ``|f|``; ``df`` is the derivative of ``f``.
    """
    _check_iterations(max_iterations)
    check_bracket(f, x1, x2)
    x0 = x1 if abs(f(x1)) < abs(f(x2)) else x2
    history: list[float] = []
    x = x0
    for iteration in range(1, max_iterations + 1):
        slope = df(x0)
        if slope == 0:
            raise ZeroDivisionError(f"the derivative vanishes at {x0}")
        x = x0 - f(x0) / slope
        history.append(x)
        if abs(x - x0) < tolerance:
            return RootResult(x, iteration, True, tuple(history))
        x0 = x
    return RootResult(x, max_iterations, False, tuple(history))


def fixed_point(
    f: Function,
    g: Function,
    dg: Function,
    a: float,
    b: float,
    max_iterations: int,
    tolerance: float = FIXED_POINT_EPSILON,
) -> RootResult:
    """Find a root of ``f`` by successive approximation ``x = g(x)``.

    The iteration starts from the midpoint of ``[a, b]`` and is applied only
    when ``|g'(x0)| < 1`` there; otherwise MethodNotApplicableError is raised.
    """
    _check_iterations(max_iterations)
    check_bracket(f, a, b)
    x0 = (a + b) / 2
    if abs(dg(x0)) >= 1:
        raise MethodNotApplicableError(
            "function form is not correct: |g'(x0)| must be below 1"
        )
    history: list[float] = []
    x = x0
    for iteration in range(1, max_iterations + 1):
        x = g(x0)
        history.append(x)
        if abs(x - x0) < tolerance:
            return RootResult(x, iteration, True, tuple(history))
        x0 = x
    return RootResult(x, max_iterations, False, tuple(history))