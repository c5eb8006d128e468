"""Row and column surgery: extraction, replacement, joins and reshaping."""

from __future__ import annotations

from typing import List

from ._floats import ieee_pow
from .errors import DimensionMismatchError, InvalidDimensionError
from .matrix import Dimension, Matrix, check_index, require_matrix


def get_row(matrix: Matrix, row: int) -> Matrix:
    """Copy of ``row`` as a ``1 x columns`` matrix."""

    matrix = require_matrix(matrix)
    row = check_index(row, matrix.rows, "row")
    start = row * matrix.columns
    return Matrix._wrap(1, matrix.columns, matrix._data[start : start + matrix.columns])


def get_column(matrix: Matrix, column: int) -> Matrix:
    """Copy of ``column`` as a ``rows x 1`` matrix."""

    matrix = require_matrix(matrix)
    column = check_index(column, matrix.columns, "column")
    return Matrix._wrap(matrix.rows, 1, matrix._data[column :: matrix.columns])


def set_row(matrix: Matrix, row: int, source: Matrix) -> None:
    """Overwrite ``row`` in place with the leading values of ``source``.

    Only ``min(matrix.columns, source.columns)`` values are copied; the rest
    of the row is left untouched.
    """

    matrix = require_matrix(matrix)
    source = require_matrix(source, "source")
    row = check_index(row, matrix.rows, "row")
    count = min(matrix.columns, source.columns)
    start = row * matrix.columns
    matrix._data[start : start + count] = source._data[:count]


def swap_rows(matrix: Matrix, row1: int, row2: int) -> None:
    """Exchange two rows in place."""

    matrix = require_matrix(matrix)
    row1 = check_index(row1, matrix.rows, "row")
    row2 = check_index(row2, matrix.rows, "row")
    if row1 == row2:
        return
    width = matrix.columns
    data = matrix._data
    a, b = row1 * width, row2 * width
    data[a : a + width], data[b : b + width] = data[b : b + width], data[a : a + width]


def remove_column(matrix: Matrix, column: int = 0) -> Matrix:
    matrix = require_matrix(matrix)
    column = check_index(column, matrix.columns, "column")
    if matrix.columns == 1:
        raise InvalidDimensionError("Cannot remove the only column of a Matrix")
    data: List[float] = []
    for row in matrix.to_rows():
        del row[column]
        data.extend(row)
    return Matrix._wrap(matrix.rows, matrix.columns - 1, data)


def join(first: Matrix, second: Matrix, dimension: Dimension = Dimension.AUTO) -> Matrix:
    """Concatenate two matrices.

    ``COLUMNS`` places ``second`` to the right of ``first`` (row counts must
    match); ``ROWS`` stacks it below (column counts must match). ``AUTO``
    picks ``COLUMNS`` when the row counts agree and ``ROWS`` otherwise.

    >>> join(Matrix.ones(1, 3), Matrix.zeros(2, 3)).dimensions
    (3, 3)
    """

    first = require_matrix(first, "first")
    second = require_matrix(second, "second")
    if not isinstance(dimension, Dimension):
        raise TypeError(f"dimension must be a Dimension, got {dimension!r}")
    if dimension is Dimension.AUTO:
        dimension = Dimension.COLUMNS if first.rows == second.rows else Dimension.ROWS

    if dimension is Dimension.COLUMNS:
        if first.rows != second.rows:
            raise DimensionMismatchError(
                f"Cannot join side by side: {first.rows} rows versus {second.rows} rows"
            )
        data: List[float] = []
        for left, right in zip(first.to_rows(), second.to_rows()):
            data.extend(left)
            data.extend(right)
        return Matrix._wrap(first.rows, first.columns + second.columns, data)

    if first.columns != second.columns:
        raise DimensionMismatchError(
            f"Cannot stack: {first.columns} columns versus {second.columns} columns"
        )
    return Matrix._wrap(first.rows + second.rows, first.columns, first._data + second._data)


def add_identity_column(matrix: Matrix, value: float = 1.0) -> Matrix:
    """Prepend a column filled with ``value`` (the intercept column)."""

    matrix = require_matrix(matrix)
    data: List[float] = []
    for row in matrix.to_rows():
        data.append(float(value))
        data.extend(row)
    return Matrix._wrap(matrix.rows, matrix.columns + 1, data)


def expand_polynomials(matrix: Matrix, column1: int, column2: int, degree: int) -> Matrix:
    """Replace two feature columns by all their monomials up to ``degree``.

    For ``0 <= j <= i <= degree`` the term ``x1 ** (i - j) * x2 ** j`` is
    written, in that order, where ``column1`` used to be. ``column2`` is dropped
    and every other column keeps its relative position. The result has
    ``(degree + 1) * (degree + 2) / 2 + columns - 2`` columns.
    """

    matrix = require_matrix(matrix)
    column1 = check_index(column1, matrix.columns, "column")
    column2 = check_index(column2, matrix.columns, "column")
    if column1 == column2:
        raise InvalidDimensionError("expand_polynomials needs two distinct columns")
    if degree < 0:
        raise InvalidDimensionError(f"degree must be non-negative, got {degree}")

    width = (degree + 1) * (degree + 2) // 2 + matrix.columns - 2
    data: List[float] = []
    for row in matrix.to_rows():
        x1, x2 = row[column1], row[column2]
        for column, value in enumerate(row):
            if column == column1:
                data.extend(
                    ieee_pow(x1, i - j) * ieee_pow(x2, j)
                    for i in range(degree + 1)
                    for j in range(i + 1)
                )
            elif column != column2:
                data.append(value)
    return Matrix._wrap(matrix.rows, width, data)


def reshape(matrix: Matrix, start: int, rows: int, columns: int) -> Matrix:
    """Read ``rows * columns`` values from offset ``start``, filling column-major.

    Values run down the first destination column, then the second, and so on.
    """

    matrix = require_matrix(matrix)
    if rows < 1 or columns < 1:
        raise InvalidDimensionError(f"Cannot reshape into a {rows}x{columns} Matrix")
    if start < 0:
        raise DimensionMismatchError(f"Reshape offset must be non-negative, got {start}")
    needed = rows * columns
    if start + needed > len(matrix._data):
        raise DimensionMismatchError(
            f"Not enough elements to reshape: need {needed} from offset {start}, "
            f"have {len(matrix._data) - start}"
        )
    source = matrix._data[start : start + needed]
    # source[column * rows + row] lands at (row, column).
    data = [source[column * rows + row] for row in range(rows) for column in range(columns)]
    return Matrix._wrap(rows, columns, data)


__all__ = [
    "add_identity_column",
    "expand_polynomials",
    "get_column",
    "get_row",
    "join",
    "remove_column",
    "reshape",
    "set_row",
    "swap_rows",
]
