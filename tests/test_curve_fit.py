import pytest

from numethods.curve_fit import LineFit, ParabolaFit, fit_line, fit_parabola


def test_fit_line_exact_points():
    xs = [0, 1, 2, 3, 4]
    ys = [2 + 3 * x for x in xs]
    fit = fit_line(xs, ys)
    assert fit.intercept == pytest.approx(2)
    assert fit.slope == pytest.approx(3)


def test_fit_line_residuals_satisfy_normal_equations():
    xs = [1, 2, 3, 4, 5, 6]
    ys = [1.2, 1.9, 3.4, 3.8, 5.3, 5.9]
    fit = fit_line(xs, ys)
    residuals = [y - fit(x) for x, y in zip(xs, ys)]
    assert sum(residuals) == pytest.approx(0, abs=1e-9)
    assert sum(x * r for x, r in zip(xs, residuals)) == pytest.approx(0, abs=1e-9)


def test_line_fit_call_and_str():
    fit = LineFit(1.5, -2.0)
    assert fit(2) == pytest.approx(-2.5)
    assert str(fit) == "y= 1.50 + -2.00x"


def test_fit_line_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        fit_line([1, 2, 3], [1, 2])


def test_fit_line_rejects_single_x():
    with pytest.raises(ValueError):
        fit_line([1.1, 1.1, 1.1], [1, 2, 3])


def test_fit_parabola_exact_points():
    xs = [-2, -1, 0, 1, 2, 3]
    ys = [x * x - 2 * x + 1 for x in xs]
    fit = fit_parabola(xs, ys)
    assert fit.a == pytest.approx(1)
    assert fit.b == pytest.approx(-2)
    assert fit.c == pytest.approx(1)


def test_fit_parabola_residuals_satisfy_normal_equations():
    xs = [0, 1, 2, 3, 4, 5]
    ys = [1.1, 1.8, 5.2, 9.7, 17.1, 26.0]
    fit = fit_parabola(xs, ys)
    residuals = [y - fit(x) for x, y in zip(xs, ys)]
    for power in range(3):
        weighted = sum(x**power * r for x, r in zip(xs, residuals))
        assert weighted == pytest.approx(0, abs=1e-7)


def test_parabola_fit_call_and_str():
    fit = ParabolaFit(2.0, 0.0, -1.0)
    assert fit(3) == pytest.approx(17)
    assert str(fit) == "y= 2.00x^2 + 0.00x + -1.00"


def test_fit_parabola_needs_three_distinct_x():
    with pytest.raises(ValueError):
        fit_parabola([1, 2, 1, 2], [1, 2, 3, 4])


def test_fit_parabola_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        fit_parabola([1, 2, 3], [1, 2, 3, 4])