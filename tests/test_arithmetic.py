"""Tests for arithmetic operators and scalar comparisons."""

from __future__ import annotations

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

from matrixlab import (
    DimensionMismatchError,
    Matrix,
    NullOperandError,
    add,
    divide,
    divide_scalar,
    equal_to,
    greater_equal,
    greater_than,
    less_equal,
    less_than,
    matmul,
    negate,
    not_equal_to,
    scale,
    subtract,
    to_numpy,
)


@pytest.fixture
def a() -> Matrix:
    return Matrix.from_rows([[1, 2], [3, 4]])


@pytest.fixture
def b() -> Matrix:
    return Matrix.from_rows([[5, 6], [7, 8]])


class TestAddSubtract:
    def test_matrix_plus_matrix(self, a: Matrix, b: Matrix) -> None:
        assert add(a, b).to_rows() == [[6, 8], [10, 12]]
        assert (a + b) == add(a, b)

    def test_matrix_minus_matrix(self, a: Matrix, b: Matrix) -> None:
        assert (b - a).to_rows() == [[4, 4], [4, 4]]

    def test_shape_mismatch(self, a: Matrix) -> None:
        with pytest.raises(DimensionMismatchError):
            add(a, Matrix(2, 3))
        with pytest.raises(DimensionMismatchError):
            a - Matrix(3, 2)

    def test_scalar_add_is_commutative(self, a: Matrix) -> None:
        assert (a + 1) == (1 + a)
        assert add(2, a).to_rows() == [[3, 4], [5, 6]]

    def test_scalar_first_subtraction_negates(self, a: Matrix) -> None:
        assert (10 - a).to_rows() == [[9, 8], [7, 6]]
        assert (10 - a) == -(a - 10)

    def test_none_operand(self, a: Matrix) -> None:
        with pytest.raises(NullOperandError):
            add(a, None)

    def test_inputs_are_not_aliased(self, a: Matrix, b: Matrix) -> None:
        result = a + b
        result[0, 0] = 100
        assert a[0, 0] == 1.0 and b[0, 0] == 5.0

    def test_shape_law(self) -> None:
        x = Matrix.rand(3, 4, seed=1)
        y = Matrix.rand(3, 4, seed=2)
        assert (x + y).dimensions == (3, 4)


def test_negate(a: Matrix) -> None:
    assert negate(a).to_rows() == [[-1, -2], [-3, -4]]
    assert -a == negate(a)


class TestMultiply:
    def test_matches_numpy(self) -> None:
        x = Matrix.rand(4, 3, seed=3)
        y = Matrix.rand(3, 5, seed=4)
        product = matmul(x, y)
        assert product.dimensions == (4, 5)
        assert_allclose(to_numpy(product), to_numpy(x) @ to_numpy(y))

    def test_star_and_at_are_the_matrix_product(self, a: Matrix, b: Matrix) -> None:
        expected = [[19, 22], [43, 50]]
        assert (a * b).to_rows() == expected
        assert (a @ b).to_rows() == expected

    def test_inner_dimensions_must_agree(self) -> None:
        with pytest.raises(DimensionMismatchError):
            matmul(Matrix(2, 3), Matrix(2, 3))

    def test_scalar_scale_is_commutative(self, a: Matrix) -> None:
        assert (a * 2) == (2 * a) == scale(a, 2)
        assert scale(a, 0.5).to_rows() == [[0.5, 1], [1.5, 2]]

    def test_parallel_rows_match_serial(self, parallel_rows: None) -> None:
        x = Matrix.rand(12, 7, seed=5)
        y = Matrix.rand(7, 9, seed=6)
        assert_allclose(to_numpy(x * y), to_numpy(x) @ to_numpy(y))
        assert_allclose(to_numpy(x * 3), to_numpy(x) * 3)

    def test_serial_configuration(self, serial_rows: None) -> None:
        x = Matrix.rand(80, 3, seed=9)
        assert_allclose(to_numpy(x * 2.0), to_numpy(x) * 2.0)


class TestDivide:
    def test_matrix_by_scalar(self, a: Matrix) -> None:
        assert divide(a, 2).to_rows() == [[0.5, 1], [1.5, 2]]
        assert (a / 2) == divide(a, 2)

    def test_scalar_by_matrix_divides_the_scalar(self, a: Matrix) -> None:
        assert_allclose(to_numpy(12 / a), [[12, 6], [4, 3]])
        assert divide_scalar(12, a) == 12 / a

    def test_division_by_zero_follows_ieee(self) -> None:
        m = Matrix.from_rows([[1, -1, 0]])
        result = divide(m, 0)
        assert result[0, 0] == math.inf
        assert result[0, 1] == -math.inf
        assert math.isnan(result[0, 2])
        assert (1 / Matrix.from_rows([[0]]))[0, 0] == math.inf


class TestComparisons:
    @pytest.fixture
    def m(self) -> Matrix:
        return Matrix.from_rows([[1, 2, 3], [4, 5, 6]])

    def test_truth_tables(self, m: Matrix) -> None:
        assert equal_to(m, 3).to_rows() == [[0, 0, 1], [0, 0, 0]]
        assert not_equal_to(m, 3).to_rows() == [[1, 1, 0], [1, 1, 1]]
        assert less_than(m, 3).to_rows() == [[1, 1, 0], [0, 0, 0]]
        assert greater_than(m, 3).to_rows() == [[0, 0, 0], [1, 1, 1]]
        assert less_equal(m, 3).to_rows() == [[1, 1, 1], [0, 0, 0]]
        assert greater_equal(m, 3).to_rows() == [[0, 0, 1], [1, 1, 1]]

    def test_operators_against_scalars(self, m: Matrix) -> None:
        assert (m == 3) == equal_to(m, 3)
        assert (m != 3) == not_equal_to(m, 3)
        assert (m < 3) == less_than(m, 3)
        assert (m > 3) == greater_than(m, 3)
        assert (m <= 3) == less_equal(m, 3)
        assert (m >= 3) == greater_equal(m, 3)

    def test_reflected_comparison(self, m: Matrix) -> None:
        # 3 < m is evaluated as m > 3.
        assert (3 < m) == greater_than(m, 3)

    def test_truth_table_in_parallel(self, parallel_rows: None) -> None:
        m = Matrix.rand(10, 4, seed=11)
        assert_allclose(to_numpy(m > 0.5), (to_numpy(m) > 0.5).astype(float))

    def test_numpy_scalars_are_accepted(self, m: Matrix) -> None:
        assert (m * np.float64(2.0))[1, 2] == 12.0
