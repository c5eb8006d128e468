"""Magic square construction and validation.

Three constructions cover every order except 2:

* odd orders use the Siamese (diagonal stepping) method,
* orders divisible by four use the doubly-even diagonal pattern,
* the remaining even orders use Strachey's method, built from four shifted
  odd squares of half the order.
"""

from __future__ import annotations

import logging
from typing import List

from .arithmetic import add
from .errors import InvalidDimensionError
from .matrix import Dimension, Matrix, require_matrix
from .structural import join

LOGGER = logging.getLogger(__name__)


def magic_constant(order: int) -> int:
    """Common row, column and diagonal sum of an ``order x order`` square.

    >>> magic_constant(3)
    15
    """

    return order * (order * order + 1) // 2


def _odd(order: int) -> Matrix:
    square = Matrix(order)
    data = square._data
    row, column = 0, order // 2
    for value in range(1, order * order + 1):
        data[row * order + column] = float(value)
        up, right = (row - 1) % order, (column + 1) % order
        if data[up * order + right]:
            # Occupied: drop straight down from the cell just filled.
            while data[row * order + column] and value < order * order:
                row = (row + 1) % order
        else:
            row, column = up, right
    return square


def _doubly_even(order: int) -> Matrix:
    square = Matrix(order)
    data = square._data
    value = 1
    for i in range(order):
        for j in range(order):
            a, b = i % 4, j % 4
            if a == b or a + b + 1 == 4:
                data[i * order + j] = float(value)
            else:
                data[(order - 1 - i) * order + (order - 1 - j)] = float(value)
            value += 1
    return square


def _swap_columns(first: Matrix, second: Matrix, columns: range) -> None:
    width = first.columns
    for row in range(first.rows):
        for column in columns:
            index = row * width + column
            first._data[index], second._data[index] = second._data[index], first._data[index]


def _singly_even(order: int) -> Matrix:
    half = order // 2
    shift = half * half
    a = _odd(half)
    b = add(a, shift)
    c = add(b, shift)
    d = add(c, shift)

    k = order // 4
    _swap_columns(a, d, range(k))
    _swap_columns(b, c, range(half - k + 1, half))

    middle = half // 2
    for column in (0, middle):
        index = middle * half + column
        a._data[index], d._data[index] = d._data[index], a._data[index]

    top = join(a, c, Dimension.COLUMNS)
    bottom = join(d, b, Dimension.COLUMNS)
    return join(top, bottom, Dimension.ROWS)


def magic(order: int) -> Matrix:
    """Build a magic square of the given order.

    Parameters
    ----------
    order:
        Side length. ``1`` gives ``[[1]]``; ``2`` (or anything below ``1``)
        raises :class:`~matrixlab.errors.InvalidDimensionError` because no such
        square exists.

    >>> magic(3).to_rows()
    [[8.0, 1.0, 6.0], [3.0, 5.0, 7.0], [4.0, 9.0, 2.0]]
    """

    if order < 1 or order == 2:
        raise InvalidDimensionError(f"No magic square exists of order {order}")
    if order == 1:
        return Matrix.identity(1)
    if order % 2:
        LOGGER.debug("Building odd magic square of order %d", order)
        return _odd(order)
    if order % 4 == 0:
        LOGGER.debug("Building doubly-even magic square of order %d", order)
        return _doubly_even(order)
    LOGGER.debug("Building singly-even magic square of order %d (Strachey)", order)
    return _singly_even(order)


def is_magic(matrix: Matrix) -> bool:
    """True when ``matrix`` is a magic square.

    The matrix must be square (and not of order 2), contain each integer
    ``1..n²`` exactly once, and have every row, column and both diagonals sum
    to the first row's total.
    """

    matrix = require_matrix(matrix)
    if not matrix.is_square or matrix.rows == 2:
        return False
    order = matrix.rows
    rows: List[List[float]] = matrix.to_rows()
    if sorted(matrix._data) != [float(value) for value in range(1, order * order + 1)]:
        return False
    target = sum(rows[0])
    if any(sum(row) != target for row in rows):
        return False
    if any(sum(row[column] for row in rows) != target for column in range(order)):
        return False
    diagonal = sum(rows[index][index] for index in range(order))
    anti_diagonal = sum(rows[index][order - 1 - index] for index in range(order))
    return diagonal == target and anti_diagonal == target


__all__ = ["is_magic", "magic", "magic_constant"]
