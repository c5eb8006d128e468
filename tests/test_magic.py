"""Tests for magic square construction and validation."""

from __future__ import annotations

import logging

import pytest

from matrixlab import InvalidDimensionError, Matrix, is_magic, magic, magic_constant


@pytest.mark.parametrize("order", [1, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 14, 16, 18])
def test_generated_squares_are_magic(order: int) -> None:
    square = magic(order)
    assert square.dimensions == (order, order)
    assert is_magic(square)
    assert sum(square.get_row(0)) == magic_constant(order)


def test_order_one_is_identity() -> None:
    assert magic(1) == Matrix.identity(1)


@pytest.mark.parametrize("order", [2, 0, -3])
def test_impossible_orders(order: int) -> None:
    with pytest.raises(InvalidDimensionError):
        magic(order)


def test_odd_order_layout() -> None:
    assert magic(5).to_rows()[0] == [17, 24, 1, 8, 15]


def test_doubly_even_layout() -> None:
    assert magic(4).to_rows() == [
        [1, 15, 14, 4],
        [12, 6, 7, 9],
        [8, 10, 11, 5],
        [13, 3, 2, 16],
    ]


def test_singly_even_layout() -> None:
    assert magic(6).to_rows() == [
        [35, 1, 6, 26, 19, 24],
        [3, 32, 7, 21, 23, 25],
        [31, 9, 2, 22, 27, 20],
        [8, 28, 33, 17, 10, 15],
        [30, 5, 34, 12, 14, 16],
        [4, 36, 29, 13, 18, 11],
    ]


def test_dispatch_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="matrixlab.magic"):
        magic(6)
    assert "singly-even" in caplog.text


class TestIsMagic:
    def test_rejects_non_square(self) -> None:
        assert not is_magic(Matrix(2, 3))

    def test_rejects_order_two(self) -> None:
        assert not is_magic(Matrix.from_rows([[1, 2], [3, 4]]))

    def test_rejects_repeated_values(self) -> None:
        assert not is_magic(Matrix.ones(3, 3))

    def test_rejects_values_outside_one_to_n_squared(self) -> None:
        shifted = Matrix.magic(3) + 1
        assert not is_magic(shifted)

    def test_rejects_broken_diagonal(self) -> None:
        # Swapping two rows keeps row and column sums but breaks the diagonals.
        square = Matrix.magic(3)
        square.swap_rows(0, 1)
        assert not is_magic(square)

    def test_method_form(self) -> None:
        assert Matrix.magic(5).is_magic()
