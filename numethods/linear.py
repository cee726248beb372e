"""Direct and iterative solvers for systems of linear equations.

Every system is given as an augmented matrix: ``n`` rows of ``n + 1``
numbers, the last column holding the right-hand side.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

EPSILON = 0.001

Matrix = list[list[float]]


class MethodNotApplicableError(ValueError):
    """Raised when an iterative method cannot be applied to a system."""


@dataclass(frozen=True)
class IterationResult:
    """Outcome of an iterative solver."""

    values: tuple[float, ...]
    iterations: int
    converged: bool
    history: tuple[tuple[float, ...], ...]


def _augmented_copy(augmented: Iterable[Sequence[float]]) -> Matrix:
    rows = [[float(v) for v in row] for row in augmented]
    if not rows:
        raise ValueError("the augmented matrix has no rows")
    width = len(rows) + 1
    for number, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(
                f"row {number} has {len(row)} entries, expected {width}"
            )
    return rows


def _ratio(value: float, pivot: float, index: int) -> float:
    if pivot == 0:
        raise ZeroDivisionError(f"zero pivot in row {index}")
    return value / pivot


def to_upper_triangular(augmented: Iterable[Sequence[float]]) -> Matrix:
    """Return an upper triangular copy of the augmented matrix."""
    rows = _augmented_copy(augmented)
    for i, pivot_row in enumerate(rows):
        for row in rows[i + 1:]:
            ratio = _ratio(row[i], pivot_row[i], i)
            row[:] = [v - ratio * p for v, p in zip(row, pivot_row)]
    return rows


def back_substitute(upper: Iterable[Sequence[float]]) -> list[float]:
    """Solve an upper triangular augmented system from the last row up."""
    rows = _augmented_copy(upper)
    n = len(rows)
    values = [0.0] * n
    for i in reversed(range(n)):
        row = rows[i]
        known = sum(c * v for c, v in zip(row[i + 1:n], values[i + 1:]))
        if row[i] == 0:
            raise ZeroDivisionError(f"zero pivot in row {i}")
        values[i] = (row[n] - known) / row[i]
    return values


def gauss_elimination(augmented: Iterable[Sequence[float]]) -> list[float]:
    """Solve the system by Gauss elimination and back substitution."""
    return back_substitute(to_upper_triangular(augmented))


def to_diagonal(augmented: Iterable[Sequence[float]]) -> Matrix:
    """Return a copy of the augmented matrix reduced to diagonal form."""
    rows = _augmented_copy(augmented)
    for i, pivot_row in enumerate(rows):
        for j, row in enumerate(rows):
            if j == i:
                continue
            ratio = _ratio(row[i], pivot_row[i], i)
            row[:] = [v - ratio * p for v, p in zip(row, pivot_row)]
    return rows


def gauss_jordan(augmented: Iterable[Sequence[float]]) -> list[float]:
    """Solve the system by Gauss-Jordan reduction."""
    rows = to_diagonal(augmented)
    n = len(rows)
    return [row[n] / row[i] for i, row in enumerate(rows)]


def is_diagonally_dominant(augmented: Iterable[Sequence[float]]) -> bool:
    """Tell whether each |a[i][i]| exceeds the sum of the other coefficients.

    The off-diagonal coefficients are summed as they stand, with their signs.
    """
    rows = _augmented_copy(augmented)
    n = len(rows)
    return all(
        abs(row[i]) > sum(c for j, c in enumerate(row[:n]) if j != i)
        for i, row in enumerate(rows)
    )


def _prepare_iterative(augmented, max_iterations, method: str) -> Matrix:
    rows = _augmented_copy(augmented)
    if max_iterations < 1:
        raise ValueError("max_iterations must be at least 1")
    if not is_diagonally_dominant(rows):
        raise MethodNotApplicableError(f"{method} method can't be applied")
    return rows


def _converged(old: Sequence[float], new: Sequence[float], tolerance: float) -> bool:
    return all(abs(o - v) < tolerance for o, v in zip(old, new))


def gauss_jacobi(
    augmented: Iterable[Sequence[float]],
    max_iterations: int,
    tolerance: float = EPSILON,
) -> IterationResult:
    """Solve the system by Jacobi iteration, starting from zeros."""
    rows = _prepare_iterative(augmented, max_iterations, "Gauss Jacobi")
    n = len(rows)
    old = [0.0] * n
    history: list[tuple[float, ...]] = []
    new = old
    for iteration in range(1, max_iterations + 1):
        new = [
            (row[n] - sum(c * v for j, (c, v) in enumerate(zip(row[:n], old)) if j != i))
            / row[i]
            for i, row in enumerate(rows)
        ]
        history.append(tuple(new))
        if _converged(old, new, tolerance):
            return IterationResult(tuple(new), iteration, True, tuple(history))
        old = new
    return IterationResult(tuple(new), max_iterations, False, tuple(history))


def gauss_seidel(
    augmented: Iterable[Sequence[float]],
    max_iterations: int,
    tolerance: float = EPSILON,
) -> IterationResult:
    """Solve the system by Gauss-Seidel iteration, starting from zeros."""
    rows = _prepare_iterative(augmented, max_iterations, "Gauss Seidel")
    n = len(rows)
    values = [0.0] * n
    history: list[tuple[float, ...]] = []
    for iteration in range(1, max_iterations + 1):
        previous = tuple(values)
        for i, row in enumerate(rows):
            others = sum(c * v for j, (c, v) in enumerate(zip(row[:n], values)) if j != i)
            values[i] = (row[n] - others) / row[i]
        current = tuple(values)
        history.append(current)
        if _converged(previous, current, tolerance):
            return IterationResult(current, iteration, True, tuple(history))
    return IterationResult(tuple(values), max_iterations, False, tuple(history))


def random_dominant_matrix(n: int, rng: random.Random | None = None) -> Matrix:
    """Build a random strictly diagonally dominant augmented matrix.

    Off-diagonal coefficients lie in [-1, 1]; each diagonal entry exceeds the
    sum of the absolute off-diagonal values of its row by between 1 and 6;
    the right-hand side lies in [1, 11].
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    rng = rng if rng is not None else random.Random()
    matrix: Matrix = []
    for i in range(n):
        row = [0.0] * (n + 1)
        row_sum = 0.0
        for j in range(n):
            if j != i:
                row[j] = rng.random() * 2.0 - 1.0
                row_sum += abs(row[j])
        row[i] = row_sum + rng.random() * 5.0 + 1.0
        row[n] = rng.random() * 10.0 + 1.0
        matrix.append(row)
    return matrix