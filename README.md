# numethods

Textbook numerical methods in plain Python, with no third-party dependencies.

- **Linear systems** (`numethods.linear`): Gauss elimination, Gauss–Jordan,
  and the iterative Gauss–Jacobi and Gauss–Seidel methods. There is also a
  diagonal-dominance check and a generator for random diagonally dominant
  systems.
- **Root finding** (`numethods.roots`): bisection, regula falsi, secant,
  Newton–Raphson and fixed-point iteration.
- **Curve fitting** (`numethods.curve_fit`): least-squares straight line and
  second-degree parabola.
- **Interpolation** (`numethods.interpolation`): Lagrange, plus Newton forward
  and Newton backward differences.
- **Integration** (`numethods.integration`): trapezoidal rule and Simpson's
  3/8 rule.
- **Command line** (`numethods.cli`): a `numethods` command that runs a few of
  the methods on built-in functions.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Linear systems

A system is given as an augmented matrix. Each row is one equation, and the
constant term comes last in the row.

```python
from numethods.linear import gauss_elimination, gauss_jordan, gauss_seidel

system = [
    [2.0, 1.0, -1.0, 8.0],
    [-3.0, -1.0, 2.0, -11.0],
    [-2.0, 1.0, 2.0, -3.0],
]
print(gauss_elimination(system))
print(gauss_jordan(system))

dominant = [
    [10.0, 1.0, 1.0, 12.0],
    [2.0, 10.0, 1.0, 13.0],
    [2.0, 2.0, 10.0, 14.0],
]
result = gauss_seidel(dominant, 100, 0.001)
print(result.values, result.iterations, result.converged)
```

**Direct methods**

- `to_upper_triangular` returns a reduced copy of the matrix.
- `to_diagonal` returns a reduced copy of the matrix.
- `back_substitute` solves an upper triangular system.
- The elimination does no pivoting. A zero pivot raises `ZeroDivisionError`.
- A row of the wrong length raises `ValueError`.

**Iterative methods**

- `gauss_jacobi` and `gauss_seidel` start from zeros.
- They stop once every unknown changes by less than the tolerance (default
  `0.001`) between iterations.
- Each returns an `IterationResult` with these fields:
  - `values`
  - `iterations`
  - `converged`
  - `history`, which holds the values after each iteration.
- Both raise `MethodNotApplicableError` unless `is_diagonally_dominant` holds.
  That check tests whether `|a[i][i]|` exceeds the signed sum of the other
  coefficients in row `i`.

**Random systems**

`random_dominant_matrix(n, rng)` builds a random strictly diagonally dominant
system. The `rng` argument is an optional `random.Random`.

## Root finding

Each finder returns a `RootResult` with these fields:

- `root`
- `iterations`
- `converged`
- `history`, which holds the approximation after each iteration.

```python
from numethods.roots import bisection, newton_raphson, regula_falsi, secant

def f(x):
    return x**3 - 2 * x - 5

print(bisection(f, 2.0, 3.0, 50, 0.0001))
print(regula_falsi(f, 2.0, 3.0, 50))
print(secant(f, 2.0, 3.0, 50))

def g(x):
    return x**3 - 3 * x - 5

def dg(x):
    return 3 * x**2 - 3

print(newton_raphson(g, dg, 2.0, 3.0, 50))
```

**Brackets**

- `bisection`, `regula_falsi`, `newton_raphson` and `fixed_point` first call
  `check_bracket`.
- `check_bracket` raises `InvalidBracketError` when the function has the same
  sign at both ends of the interval.

**Per-method details**

- `bisection` with `tolerance=None` halves the interval exactly
  `max_iterations` times.
- `newton_raphson` starts from the end of the bracket where `|f|` is smaller.
- `secant` needs no bracket. Its reported iteration count includes the final
  step, so it is one more than the length of `history`.
- `fixed_point(f, g, dg, a, b, max_iterations)` iterates `x = g(x)` from the
  midpoint of `[a, b]`. The default tolerance is `0.001`. It raises
  `MethodNotApplicableError` when `|g'(x0)| >= 1`.

## Curve fitting, interpolation and integration

```python
from numethods.curve_fit import fit_line, fit_parabola
from numethods.integration import simpson_three_eighths, trapezoidal
from numethods.interpolation import (
    difference_table,
    lagrange,
    newton_backward,
    newton_forward,
)

line = fit_line([1, 2, 3, 4], [3, 5, 7, 9])
print(line, line(5))
print(fit_parabola([0, 1, 2, 3], [1, 2, 5, 10]))

print(lagrange([1, 2, 4], [1, 4, 16], 3))
print(difference_table([1, 8, 27, 64]))
print(newton_forward([1, 2, 3, 4], [1, 8, 27, 64], 2.5))
print(newton_backward([1, 2, 3, 4], [1, 8, 27, 64], 3.5))

print(trapezoidal(lambda x: x**3, 0.0, 1.0, 10))
print(simpson_three_eighths(lambda x: 1 / (1 + x * x), 0.0, 6.0, 6))
```

**Curve fitting**

- `LineFit` has the fields `intercept` and `slope`.
- `ParabolaFit` has the fields `a`, `b` and `c`.
- Both can be called with an `x` value to evaluate the curve.
- Both print as an equation with two decimal places.

**Interpolation**

The Newton formulas assume equally spaced `x` values.

## Command line

The package installs a `numethods` command:

```
numethods --help
```

| Subcommand | What it does |
| --- | --- |
| `numethods seidel N [MAX_ITERATIONS] [--seed SEED]` | Generates a random diagonally dominant system of `N` unknowns and prints its coefficients. It then runs Gauss–Seidel with tolerance `1e-9`; `MAX_ITERATIONS` defaults to 10000. It prints the total number of iterations. |
| `numethods bisection X1 X2 MAX_ITERATIONS [--tolerance T] [--fixed]` | Finds a root of `x**3 - 2x - 5` and prints each iteration. `--fixed` halves the interval exactly `MAX_ITERATIONS` times. |
| `numethods newton X1 X2 MAX_ITERATIONS [--tolerance T]` | Finds a root of `x**3 - 3x - 5` by Newton–Raphson. |
| `numethods trapezoidal A B INTERVALS` | Integrates `x**3` over `[A, B]`. |

If the bracket is invalid, the command prints `Roots are Invalid` on standard
error. The same exit status 1 is returned for other input errors.

### What the command does not do

- It works only on the fixed functions listed above.
- It does not accept a user-supplied function or matrix.
- The `seidel` subcommand prints the iteration count but not the solution
  values.
- Gauss elimination, Gauss–Jordan, Gauss–Jacobi, regula falsi, secant,
  fixed-point iteration, curve fitting, interpolation and Simpson's rule are
  available only from Python, not from the command line.