"""Dimension reduction and statistical summaries of matrices.

Two frameworks collapse a matrix along one dimension:

* :func:`reduce_dimension` folds a binary accumulator over each row or
  column, seeded at zero (used for :func:`total`).
* :func:`statistical_reduce` hands each whole row or column to a vector
  function from :mod:`matrixlab.stats`, so order-sensitive statistics such
  as the median work.

With :attr:`Dimension.AUTO`, a row or column vector collapses to a ``1x1``
matrix; anything else is reduced column by column into a ``1 x columns`` row.
"""

from __future__ import annotations

from typing import Callable, List, Sequence

from . import stats
from .matrix import Dimension, Matrix, require_matrix

Accumulator = Callable[[float, float], float]
VectorFunction = Callable[[Sequence[float]], float]


def _resolve(matrix: Matrix, dimension: Dimension) -> Dimension:
    if not isinstance(dimension, Dimension):
        raise TypeError(f"dimension must be a Dimension, got {dimension!r}")
    if dimension is Dimension.AUTO and not matrix.is_vector:
        return Dimension.COLUMNS
    return dimension


def _columns_of(matrix: Matrix) -> List[List[float]]:
    width = matrix.columns
    return [matrix._data[column::width] for column in range(width)]


def reduce_dimension(
    matrix: Matrix, dimension: Dimension, operation: Accumulator
) -> Matrix:
    """Fold ``operation`` over every row or column, starting from ``0.0``.

    Parameters
    ----------
    matrix:
        Input matrix.
    dimension:
        ``ROWS`` gives an ``rows x 1`` result, ``COLUMNS`` a ``1 x columns``
        result and ``AUTO`` either a ``1x1`` (vector input) or ``COLUMNS``.
    operation:
        Binary accumulator ``operation(running, element)``.
    """

    matrix = require_matrix(matrix)
    dimension = _resolve(matrix, dimension)

    def fold(values: Sequence[float]) -> float:
        running = 0.0
        for value in values:
            running = operation(running, value)
        return running

    if dimension is Dimension.AUTO:
        return Matrix._wrap(1, 1, [fold(matrix._data)])
    if dimension is Dimension.COLUMNS:
        return Matrix._wrap(1, matrix.columns, [fold(column) for column in _columns_of(matrix)])
    return Matrix._wrap(matrix.rows, 1, [fold(row) for row in matrix.to_rows()])


def statistical_reduce(
    matrix: Matrix, dimension: Dimension, function: VectorFunction
) -> Matrix:
    """Apply a whole-vector ``function`` to every row or column."""

    matrix = require_matrix(matrix)
    dimension = _resolve(matrix, dimension)
    if dimension is Dimension.AUTO:
        return Matrix._wrap(1, 1, [float(function(matrix._data))])
    if dimension is Dimension.COLUMNS:
        values = [float(function(column)) for column in _columns_of(matrix)]
        return Matrix._wrap(1, matrix.columns, values)
    return Matrix._wrap(matrix.rows, 1, [float(function(row)) for row in matrix.to_rows()])


def total(matrix: Matrix, dimension: Dimension = Dimension.AUTO) -> Matrix:
    """Sum along ``dimension``.

    >>> total(Matrix.from_rows([[1, 2], [3, 4]])).to_rows()
    [[4.0, 6.0]]
    """

    return reduce_dimension(matrix, dimension, lambda running, value: running + value)


def mean(matrix: Matrix, dimension: Dimension = Dimension.AUTO) -> Matrix:
    return statistical_reduce(matrix, dimension, stats.mean)


def mean_square(matrix: Matrix, dimension: Dimension = Dimension.AUTO) -> Matrix:
    return statistical_reduce(matrix, dimension, stats.mean_square)


def maximum(matrix: Matrix, dimension: Dimension = Dimension.AUTO) -> Matrix:
    return statistical_reduce(matrix, dimension, stats.maximum)


def minimum(matrix: Matrix, dimension: Dimension = Dimension.AUTO) -> Matrix:
    return statistical_reduce(matrix, dimension, stats.minimum)


def max_index(matrix: Matrix, dimension: Dimension = Dimension.AUTO) -> Matrix:
    """Zero-based position of the first maximum, stored as a float."""

    return statistical_reduce(matrix, dimension, stats.max_index)


def min_index(matrix: Matrix, dimension: Dimension = Dimension.AUTO) -> Matrix:
    return statistical_reduce(matrix, dimension, stats.min_index)


def value_range(matrix: Matrix, dimension: Dimension = Dimension.AUTO) -> Matrix:
    return statistical_reduce(matrix, dimension, stats.value_range)


def quartile1(matrix: Matrix, dimension: Dimension = Dimension.AUTO) -> Matrix:
    return statistical_reduce(matrix, dimension, stats.quartile1)


def quartile3(matrix: Matrix, dimension: Dimension = Dimension.AUTO) -> Matrix:
    return statistical_reduce(matrix, dimension, stats.quartile3)


def iqr(matrix: Matrix, dimension: Dimension = Dimension.AUTO) -> Matrix:
    return statistical_reduce(matrix, dimension, stats.iqr)


def median(matrix: Matrix, dimension: Dimension = Dimension.AUTO) -> Matrix:
    return statistical_reduce(matrix, dimension, stats.median)


def mode(matrix: Matrix, dimension: Dimension = Dimension.AUTO) -> Matrix:
    return statistical_reduce(matrix, dimension, stats.mode)


def variance(matrix: Matrix, dimension: Dimension = Dimension.AUTO) -> Matrix:
    """Sample variance along ``dimension``."""

    return statistical_reduce(matrix, dimension, stats.variance)


def standard_deviation(matrix: Matrix, dimension: Dimension = Dimension.AUTO) -> Matrix:
    return statistical_reduce(matrix, dimension, stats.standard_deviation)


__all__ = [
    "iqr",
    "max_index",
    "maximum",
    "mean",
    "mean_square",
    "median",
    "min_index",
    "minimum",
    "mode",
    "quartile1",
    "quartile3",
    "reduce_dimension",
    "standard_deviation",
    "statistical_reduce",
    "total",
    "value_range",
    "variance",
]
