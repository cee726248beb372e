"""Command-line front end for a few of the numerical methods.

Subcommands:

* ``seidel N [MAX_ITERATIONS]`` solves a random diagonally dominant system
  of ``N`` unknowns by Gauss-Seidel iteration.
* ``bisection X1 X2 MAX_ITERATIONS`` finds a root of ``x**3 - 2x - 5``.
* ``newton X1 X2 MAX_ITERATIONS`` finds a root of ``x**3 - 3x - 5``.
* ``trapezoidal A B INTERVALS`` integrates ``x**3`` over ``[A, B]``.
"""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence

from numethods.integration import trapezoidal
from numethods.linear import (
    MethodNotApplicableError,
    gauss_seidel,
    is_diagonally_dominant,
    random_dominant_matrix,
)
from numethods.roots import (
    EPSILON,
    InvalidBracketError,
    RootResult,
    bisection,
    newton_raphson,
)

SEIDEL_EPSILON = 0.000000001
SEIDEL_DEFAULT_ITERATIONS = 10000
MATRIX_WIDTH = 12


def bisection_function(x: float) -> float:
    """The function whose root the bisection command looks for."""
    return x * x * x - 2 * x - 5


def newton_function(x: float) -> float:
    """The function whose root the newton command looks for."""
    return x * x * x - 3 * x - 5


def newton_derivative(x: float) -> float:
    """Derivative of :func:`newton_function`."""
    return 3 * x * x - 3


def integrand(x: float) -> float:
    """The function the trapezoidal command integrates."""
    return x * x * x


def _print_history(result: RootResult, label: str) -> None:
    for iteration, value in enumerate(result.history, start=1):
        print(f"Iterations={iteration}  {label}={value:f}")


def _run_seidel(args: argparse.Namespace) -> int:
    rng = random.Random(args.seed)
    matrix = random_dominant_matrix(args.n, rng)
    n = args.n
    print(f"\nThe Augmented Matrix ({n}x{n})")
    for row in matrix:
        print("".join(f"{value:{MATRIX_WIDTH}.5f}" for value in row[:n]))
    if not is_diagonally_dominant(matrix):
        print("\nGauss Seidel Method can't be applied")
        return 0
    result = gauss_seidel(matrix, args.max_iterations, SEIDEL_EPSILON)
    total = result.iterations if result.converged else result.iterations + 1
    print(f"Tot number of iterations: {total}")
    return 0


def _run_bisection(args: argparse.Namespace) -> int:
    tolerance = None if args.fixed else args.tolerance
    result = bisection(
        bisection_function, args.x1, args.x2, args.max_iterations, tolerance
    )
    print(f"Roots Lie between {args.x1:f} and {args.x2:f}")
    _print_history(result, "Roots")
    print(f"Root={result.root:f}  Total Iterations={result.iterations}")
    return 0


def _run_newton(args: argparse.Namespace) -> int:
    result = newton_raphson(
        newton_function,
        newton_derivative,
        args.x1,
        args.x2,
        args.max_iterations,
        args.tolerance,
    )
    print(f"Roots Lie between {args.x1:f} and {args.x2:f}")
    history = result.history[:-1] if result.converged else result.history
    for iteration, value in enumerate(history, start=1):
        print(f"Iterations={iteration}  Roots={value:f}")
    if result.converged:
        print(f"Iterations={result.iterations}  Final Root={result.root:f}")
    else:
        print(f"Root={result.root:f}  Total Iterations={result.iterations}")
    return 0


def _run_trapezoidal(args: argparse.Namespace) -> int:
    value = trapezoidal(integrand, args.a, args.b, args.intervals)
    print(f"\nValue of The integral  = {value:f}")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numethods", description="Run a numerical method."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    seidel = commands.add_parser(
        "seidel", help="solve a random dominant system by Gauss-Seidel"
    )
    seidel.add_argument("n", type=int, help="number of unknowns")
    seidel.add_argument(
        "max_iterations",
        type=int,
        nargs="?",
        default=SEIDEL_DEFAULT_ITERATIONS,
        help="iteration limit",
    )
    seidel.add_argument("--seed", type=int, default=None, help="random seed")
    seidel.set_defaults(run=_run_seidel)

    bisect = commands.add_parser("bisection", help="root of x^3 - 2x - 5")
    bisect.add_argument("x1", type=float)
    bisect.add_argument("x2", type=float)
    bisect.add_argument("max_iterations", type=int)
    bisect.add_argument("--tolerance", type=float, default=EPSILON)
    bisect.add_argument(
        "--fixed",
        action="store_true",
        help="halve the interval exactly MAX_ITERATIONS times",
    )
    bisect.set_defaults(run=_run_bisection)

    newton = commands.add_parser("newton", help="root of x^3 - 3x - 5")
    newton.add_argument("x1", type=float)
    newton.add_argument("x2", type=float)
    newton.add_argument("max_iterations", type=int)
    newton.add_argument("--tolerance", type=float, default=EPSILON)
    newton.set_defaults(run=_run_newton)

    trap = commands.add_parser("trapezoidal", help="integral of x^3 over [a, b]")
    trap.add_argument("a", type=float)
    trap.add_argument("b", type=float)
    trap.add_argument("intervals", type=int)
    trap.set_defaults(run=_run_trapezoidal)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments, run the chosen method and return an exit status."""
    args = _build_parser().parse_args(argv)
    try:
        return args.run(args)
    except InvalidBracketError:
        print("Roots are Invalid", file=sys.stderr)
        return 1
    except MethodNotApplicableError as exc:
        print(exc, file=sys.stderr)
        return 1
    except (ValueError, ZeroDivisionError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())