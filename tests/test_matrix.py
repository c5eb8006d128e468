"""Tests for matrix storage, factories, indexing, equality and rendering."""

from __future__ import annotations

import pytest

from matrixlab import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidDimensionError,
    Matrix,
    NullOperandError,
)


class TestConstruction:
    def test_zero_filled_by_default(self) -> None:
        m = Matrix(2, 3)
        assert m.dimensions == (2, 3)
        assert list(m) == [0.0] * 6

    def test_square_when_columns_omitted(self) -> None:
        m = Matrix(3)
        assert m.dimensions == (3, 3)
        assert m.is_square

    @pytest.mark.parametrize("rows, columns", [(0, 1), (1, 0), (-1, 2)])
    def test_rejects_empty_dimensions(self, rows: int, columns: int) -> None:
        with pytest.raises(InvalidDimensionError):
            Matrix(rows, columns)

    def test_from_rows_is_row_major(self) -> None:
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        assert list(m) == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
        assert m[1, 2] == 6.0

    def test_from_rows_rejects_ragged_input(self) -> None:
        with pytest.raises(DimensionMismatchError):
            Matrix.from_rows([[1, 2], [3]])

    def test_from_rows_rejects_none_and_empty(self) -> None:
        with pytest.raises(NullOperandError):
            Matrix.from_rows(None)
        with pytest.raises(InvalidDimensionError):
            Matrix.from_rows([])

    def test_from_flat_checks_length(self) -> None:
        assert Matrix.from_flat(2, 2, [1, 2, 3, 4]) == Matrix.from_rows([[1, 2], [3, 4]])
        with pytest.raises(DimensionMismatchError):
            Matrix.from_flat(2, 2, [1, 2, 3])

    def test_copy_of_does_not_alias(self) -> None:
        original = Matrix.from_rows([[1, 2]])
        clone = Matrix.copy_of(original)
        clone[0, 0] = 9
        assert original[0, 0] == 1.0
        assert clone.copy() == clone

    def test_named_factories(self) -> None:
        assert list(Matrix.ones(2, 2)) == [1.0] * 4
        assert list(Matrix.zeros(1, 3)) == [0.0] * 3
        assert Matrix.identity(3).to_rows() == [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
        assert Matrix.magic(3).to_rows() == [[8, 1, 6], [3, 5, 7], [4, 9, 2]]

    def test_rand_is_uniform_and_reproducible(self) -> None:
        first = Matrix.rand(4, 5, seed=7)
        second = Matrix.rand(4, 5, seed=7)
        assert first == second
        assert all(0.0 <= value < 1.0 for value in first)


class TestIndexing:
    def test_round_trip_assignment(self) -> None:
        m = Matrix(2, 2)
        m[0, 1] = 5
        assert m[0, 1] == 5.0
        assert list(m) == [0.0, 5.0, 0.0, 0.0]

    @pytest.mark.parametrize("key", [(2, 0), (0, 2), (-1, 0)])
    def test_out_of_range(self, key: tuple[int, int]) -> None:
        m = Matrix(2, 2)
        with pytest.raises(IndexOutOfRangeError):
            m[key]
        with pytest.raises(IndexError):
            m[key] = 1.0

    def test_index_must_be_a_pair(self) -> None:
        with pytest.raises(TypeError):
            Matrix(2, 2)[0]

    def test_shape_queries(self) -> None:
        m = Matrix(1, 4)
        assert m.rows == 1
        assert m.columns == 4
        assert m.is_vector
        assert not m.is_square


class TestMutation:
    def test_fill(self) -> None:
        m = Matrix(2, 3)
        m.fill(2.5)
        assert list(m) == [2.5] * 6

    def test_swap_rows(self) -> None:
        m = Matrix.from_rows([[1, 2], [3, 4], [5, 6]])
        m.swap_rows(0, 2)
        assert m.to_rows() == [[5, 6], [3, 4], [1, 2]]

    def test_set_row_copies_the_shorter_width(self) -> None:
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        m.set_row(1, Matrix.from_rows([[9, 8]]))
        assert m.to_rows() == [[1, 2, 3], [9, 8, 6]]


class TestEquality:
    def test_value_equality(self) -> None:
        assert Matrix.from_rows([[1, 2]]) == Matrix.from_rows([[1.0, 2.0]])
        assert Matrix.from_rows([[1, 2]]) != Matrix.from_rows([[1, 3]])

    def test_different_shapes_are_never_equal(self) -> None:
        row = Matrix.from_rows([[1, 2]])
        column = Matrix.from_rows([[1], [2]])
        assert row != column
        assert not row == column

    def test_equal_matrices_hash_alike(self) -> None:
        a = Matrix.from_rows([[1, 2], [3, 4]])
        b = Matrix.copy_of(a)
        assert hash(a) == hash(b)
        assert len({a, b}) == 1


class TestRendering:
    def test_str_uses_two_decimals_per_row(self) -> None:
        m = Matrix.from_rows([[1, 2.346], [-3, 0]])
        assert str(m) == "1.00 2.35 \n-3.00 0.00 \n"

    def test_repr_round_trips_through_from_rows(self) -> None:
        m = Matrix.from_rows([[1.5, 2], [3, 4]])
        assert repr(m) == "Matrix.from_rows([[1.5, 2.0], [3.0, 4.0]])"

    def test_sum_all_elements(self) -> None:
        assert Matrix.magic(4).sum_all_elements() == pytest.approx(136.0)
