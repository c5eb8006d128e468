"""Gauss-Jordan inversion.

Elimination runs on a working copy of the input and an identity matrix in
lockstep. Rows are combined by cross-multiplication
(``row * pivot - pivot_row * row[d]``) so nothing is divided by a pivot until
a single normalisation pass at the end. Each updated row is rescaled by its
largest magnitude to keep the products finite; the final pass divides a
result row by the same row's diagonal, so any per-row factor cancels.
"""

from __future__ import annotations

import logging
from typing import List

from .errors import NonInvertibleError, NotSquareError
from .matrix import Matrix, require_matrix

LOGGER = logging.getLogger(__name__)


def _swap(data: List[float], width: int, first: int, second: int) -> None:
    a, b = first * width, second * width
    data[a : a + width], data[b : b + width] = data[b : b + width], data[a : a + width]


def _ensure_pivot(work: List[float], result: List[float], order: int, diagonal: int) -> float:
    """Return a non-zero pivot for ``diagonal``, swapping rows if needed.

    A replacement row ``i`` must have non-zero entries at both ``(i, d)`` and
    ``(d, i)``; the same swap is applied to ``result``.
    """

    pivot = work[diagonal * order + diagonal]
    if pivot != 0:
        return pivot
    for candidate in range(order):
        if (
            candidate != diagonal
            and work[candidate * order + diagonal] != 0
            and work[diagonal * order + candidate] != 0
        ):
            LOGGER.debug("Zero pivot at %d; swapping rows %d and %d", diagonal, diagonal, candidate)
            _swap(work, order, diagonal, candidate)
            _swap(result, order, diagonal, candidate)
            return work[diagonal * order + diagonal]
    raise NonInvertibleError(f"Matrix is not invertible: no usable pivot for column {diagonal}")


def _rescale(work: List[float], result: List[float], start: int, width: int) -> None:
    peak = max(
        max(abs(value) for value in work[start : start + width]),
        max(abs(value) for value in result[start : start + width]),
    )
    if peak == 0 or peak == 1:
        return
    for column in range(start, start + width):
        work[column] /= peak
        result[column] /= peak


def inverse(matrix: Matrix) -> Matrix:
    """Return the inverse of a square matrix.

    The input is never modified.

    Raises
    ------
    NotSquareError
        If ``matrix`` is not square.
    NonInvertibleError
        If a zero pivot cannot be replaced by a row swap.
    """

    matrix = require_matrix(matrix)
    if not matrix.is_square:
        raise NotSquareError(
            f"Inverse requires a square Matrix, got {matrix.rows}x{matrix.columns}"
        )
    order = matrix.rows
    work = list(matrix._data)
    result = Matrix.identity(order)._data

    for diagonal in range(order):
        pivot = _ensure_pivot(work, result, order, diagonal)
        base = diagonal * order
        for row in range(order):
            if row == diagonal:
                continue
            start = row * order
            line = work[start + diagonal]
            for column in range(order):
                work[start + column] = work[start + column] * pivot - work[base + column] * line
                result[start + column] = result[start + column] * pivot - result[base + column] * line
            _rescale(work, result, start, order)

    for row in range(order):
        divisor = work[row * order + row]
        start = row * order
        for column in range(order):
            result[start + column] /= divisor
    return Matrix._wrap(order, order, result)


__all__ = ["inverse"]
