import pytest

from numethods.interpolation import (
    difference_table,
    lagrange,
    newton_backward,
    newton_forward,
)


def quadratic(x):
    return 2 * x * x - 3 * x + 4


XS = [0, 1, 2, 3, 4]
YS = [quadratic(x) for x in XS]


def test_difference_table_squares():
    assert difference_table([1, 4, 9, 16]) == [[1, 4, 9, 16], [3, 5, 7], [2, 2], [0]]


def test_difference_table_shape():
    table = difference_table(range(6))
    assert [len(column) for column in table] == [6, 5, 4, 3, 2, 1]


def test_difference_table_rejects_empty():
    with pytest.raises(ValueError):
        difference_table([])


@pytest.mark.parametrize("x", [0.5, 1.25, 2.5, 3.75])
def test_lagrange_reproduces_polynomial(x):
    assert lagrange(XS, YS, x) == pytest.approx(quadratic(x))


def test_lagrange_at_nodes():
    for x, y in zip(XS, YS):
        assert lagrange(XS, YS, x) == pytest.approx(y)


def test_lagrange_rejects_duplicate_x():
    with pytest.raises(ValueError):
        lagrange([1, 1, 2], [1, 2, 3], 1.5)


def test_lagrange_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        lagrange([1, 2, 3], [1, 2], 1.5)


@pytest.mark.parametrize("x", [0.5, 1.25, 2.5, 3.75])
def test_newton_forward_reproduces_polynomial(x):
    assert newton_forward(XS, YS, x) == pytest.approx(quadratic(x))


@pytest.mark.parametrize("x", [0.5, 1.25, 2.5, 3.75])
def test_newton_backward_reproduces_polynomial(x):
    assert newton_backward(XS, YS, x) == pytest.approx(quadratic(x))


def test_newton_methods_agree_with_lagrange():
    xs = [1.0, 1.5, 2.0, 2.5, 3.0]
    ys = [0.3, 1.7, 1.1, 2.9, 2.2]
    for x in (1.2, 1.8, 2.7):
        expected = lagrange(xs, ys, x)
        assert newton_forward(xs, ys, x) == pytest.approx(expected)
        assert newton_backward(xs, ys, x) == pytest.approx(expected)


def test_newton_forward_needs_two_points():
    with pytest.raises(ValueError):
        newton_forward([1], [2], 1.5)


def test_newton_backward_rejects_zero_step():
    with pytest.raises(ValueError):
        newton_backward([1, 1, 2], [1, 2, 3], 1.5)