import random

import pytest

from numethods.cli import main, newton_function
from numethods.integration import trapezoidal
from numethods.linear import gauss_seidel, random_dominant_matrix
from numethods.roots import bisection


def _last_line(text: str) -> str:
    return text.strip().splitlines()[-1]


def test_trapezoidal_prints_package_value(capsys):
    assert main(["trapezoidal", "0", "1", "4"]) == 0
    out = capsys.readouterr().out
    expected = trapezoidal(lambda x: x**3, 0.0, 1.0, 4)
    assert _last_line(out) == f"Value of The integral  = {expected:f}"


def test_trapezoidal_rejects_zero_intervals(capsys):
    assert main(["trapezoidal", "0", "1", "0"]) == 1
    assert "intervals" in capsys.readouterr().err


def test_bisection_finds_root(capsys):
    assert main(["bisection", "2", "3", "50"]) == 0
    out = capsys.readouterr().out
    line = _last_line(out)
    assert line.startswith("Root=")
    root = float(line.split()[0].split("=")[1])
    assert root == pytest.approx(2.0946, abs=1e-3)


def test_bisection_matches_library_iterations(capsys):
    main(["bisection", "2", "3", "50"])
    out = capsys.readouterr().out
    result = bisection(lambda x: x**3 - 2 * x - 5, 2.0, 3.0, 50)
    assert _last_line(out).endswith(f"Total Iterations={result.iterations}")
    assert out.count("Roots=") == len(result.history)


def test_bisection_fixed_runs_every_iteration(capsys):
    main(["bisection", "2", "3", "7", "--fixed"])
    out = capsys.readouterr().out
    assert out.count("Roots=") == 7
    assert _last_line(out).endswith("Total Iterations=7")


def test_bisection_invalid_bracket(capsys):
    assert main(["bisection", "3", "4", "10"]) == 1
    assert "Roots are Invalid" in capsys.readouterr().err


def test_newton_converges(capsys):
    assert main(["newton", "2", "3", "20"]) == 0
    line = _last_line(capsys.readouterr().out)
    assert "Final Root=" in line
    root = float(line.split("Final Root=")[1])
    assert abs(newton_function(root)) < 1e-3


def test_newton_invalid_bracket(capsys):
    assert main(["newton", "-1", "0", "20"]) == 1
    assert "Roots are Invalid" in capsys.readouterr().err


def test_seidel_with_seed_matches_library(capsys):
    assert main(["seidel", "4", "500", "--seed", "7"]) == 0
    out = capsys.readouterr().out
    lines = out.strip().splitlines()
    assert lines[0] == "The Augmented Matrix (4x4)"
    assert len(lines) == 1 + 4 + 1
    matrix = random_dominant_matrix(4, random.Random(7))
    result = gauss_seidel(matrix, 500, 0.000000001)
    assert lines[-1] == f"Tot number of iterations: {result.iterations}"
    assert float(lines[1].split()[0]) == pytest.approx(matrix[0][0], abs=1e-5)


def test_seidel_rejects_zero_unknowns(capsys):
    assert main(["seidel", "0"]) == 1
    assert "error" in capsys.readouterr().err


def test_missing_command_exits_with_usage():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2