"""Least-squares fitting of a straight line and a parabola to points."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from numethods.linear import gauss_elimination


@dataclass(frozen=True)
class LineFit:
    """The line ``y = intercept + slope * x``."""

    intercept: float
    slope: float

    def __call__(self, x: float) -> float:
        return self.intercept + self.slope * x

    def __str__(self) -> str:
        return f"y= {self.intercept:.2f} + {self.slope:.2f}x"


@dataclass(frozen=True)
class ParabolaFit:
    """The parabola ``y = a * x**2 + b * x + c``."""

    a: float
    b: float
    c: float

    def __call__(self, x: float) -> float:
        return self.a * x * x + self.b * x + self.c

    def __str__(self) -> str:
        return f"y= {self.a:.2f}x^2 + {self.b:.2f}x + {self.c:.2f}"


def _points(
    xs: Iterable[float], ys: Iterable[float], distinct: int
) -> tuple[list[float], list[float]]:
    xs = [float(x) for x in xs]
    ys = [float(y) for y in ys]
    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length")
    if len(set(xs)) < distinct:
        raise ValueError(f"at least {distinct} distinct x values are needed")
    return xs, ys


def fit_line(xs: Iterable[float], ys: Iterable[float]) -> LineFit:
    """Fit a straight line to the points by least squares."""
    xs, ys = _points(xs, ys, 2)
    n = len(xs)
    sx = sum(xs)
    sy = sum(ys)
    sxy = sum(x * y for x, y in zip(xs, ys))
    sxx = sum(x * x for x in xs)
    intercept, slope = gauss_elimination([[n, sx, sy], [sx, sxx, sxy]])
    return LineFit(intercept, slope)


def fit_parabola(xs: Iterable[float], ys: Iterable[float]) -> ParabolaFit:
    """Fit a second degree parabola to the points by least squares."""
    xs, ys = _points(xs, ys, 3)
    n = len(xs)
    sx = sum(xs)
    sy = sum(ys)
    sxy = sum(x * y for x, y in zip(xs, ys))
    sx2y = sum(x * x * y for x, y in zip(xs, ys))
    sx2 = sum(x**2 for x in xs)
    sx3 = sum(x**3 for x in xs)
    sx4 = sum(x**4 for x in xs)
    augmented = [
        [sx2, sx, n, sy],
        [sx3, sx2, sx, sxy],
        [sx4, sx3, sx2, sx2y],
    ]
    try:
        a, b, c = gauss_elimination(augmented)
    except ZeroDivisionError as exc:
        raise ValueError("the points do not determine a parabola") from exc
    return ParabolaFit(a, b, c)