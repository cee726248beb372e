"""Lagrange and Newton (forward and backward) interpolation."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _points(
    xs: Iterable[float], ys: Iterable[float], minimum: int
) -> tuple[list[float], list[float]]:
    xs = [float(x) for x in xs]
    ys = [float(y) for y in ys]
    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length")
    if len(xs) < minimum:
        raise ValueError(f"at least {minimum} points are needed")
    return xs, ys


def lagrange(xs: Iterable[float], ys: Iterable[float], x: float) -> float:
    """Evaluate the Lagrange interpolating polynomial through the points at x."""
    xs, ys = _points(xs, ys, 1)
    if len(set(xs)) != len(xs):
        raise ValueError("the x values must be distinct")
    total = 0.0
    for i, (xi, yi) in enumerate(zip(xs, ys)):
        term = 1.0
        for j, xj in enumerate(xs):
            if j != i:
                term *= (x - xj) / (xi - xj)
        total += term * yi
    return total


def difference_table(ys: Iterable[float]) -> list[list[float]]:
    """Return the columns of the difference table of ``ys``.

    The first column is ``ys`` itself; each following column holds the
    differences of the one before and is one entry shorter.
    """
    column = [float(y) for y in ys]
    if not column:
        raise ValueError("at least one value is needed")
    table = [column]
    while len(column) > 1:
        column = [b - a for a, b in zip(column, column[1:])]
        table.append(column)
    return table


def _step(xs: Sequence[float]) -> float:
    h = xs[1] - xs[0]
    if h == 0:
        raise ValueError("the x values must be distinct")
    return h


def newton_forward(xs: Iterable[float], ys: Iterable[float], x: float) -> float:
    """Interpolate at x with Newton's forward difference formula.

    The x values are taken to be equally spaced.
    """
    xs, ys = _points(xs, ys, 2)
    u = (x - xs[0]) / _step(xs)
    table = difference_table(ys)
    y = table[0][0]
    product = 1.0
    factorial = 1
    for k, column in enumerate(table[1:], start=1):
        product *= u - (k - 1)
        factorial *= k
        y += product * column[0] / factorial
    return y


def newton_backward(xs: Iterable[float], ys: Iterable[float], x: float) -> float:
    """Interpolate at x with Newton's backward difference formula.

    The x values are taken to be equally spaced.
    """
    xs, ys = _points(xs, ys, 2)
    u = (x - xs[-1]) / _step(xs)
    table = difference_table(ys)
    y = table[0][-1]
    product = 1.0
    factorial = 1
    for k, column in enumerate(table[1:], start=1):
        product *= u + (k - 1)
        factorial *= k
        y += product * column[-1] / factorial
    return y