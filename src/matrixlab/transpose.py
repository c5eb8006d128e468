"""Transpose and fused transpose products.

``multiply_by_transpose(A, B)`` is ``A · Bᵗ`` and ``multiply_transpose_by(A, B)``
is ``Aᵗ · B``; neither materialises the transposed operand. Both compute one
output row per task, like :func:`matrixlab.arithmetic.matmul`.
"""

from __future__ import annotations

from ._parallel import for_each_row
from .errors import DimensionMismatchError
from .matrix import Matrix, require_matrix


def transpose(matrix: Matrix) -> Matrix:
    """Swap rows and columns.

    >>> transpose(Matrix.from_rows([[1, 2, 3]])).dimensions
    (3, 1)
    """

    matrix = require_matrix(matrix)
    rows, columns = matrix.rows, matrix.columns
    data = matrix._data
    # Destination is columns x rows; walk it in row-major order.
    output = [data[columns * (index % rows) + index // rows] for index in range(rows * columns)]
    return Matrix._wrap(columns, rows, output)


def unrolled(matrix: Matrix) -> Matrix:
    """Column-major flattening into a ``(rows * columns) x 1`` column."""

    flipped = transpose(matrix)
    return Matrix._wrap(len(flipped._data), 1, flipped._data)


def multiply_by_transpose(a: Matrix, b: Matrix | None = None) -> Matrix:
    """Return ``a · bᵗ``; with one operand, ``a · aᵗ``.

    Requires ``a.columns == b.columns``.
    """

    a = require_matrix(a, "a")
    b = a if b is None else require_matrix(b, "b")
    if a.columns != b.columns:
        raise DimensionMismatchError(
            f"Cannot multiply a {a.rows}x{a.columns} Matrix by the transpose "
            f"of a {b.rows}x{b.columns} Matrix"
        )
    rows_a = a.to_rows()
    rows_b = b.to_rows()
    width = b.rows
    output = [0.0] * (a.rows * width)

    def compute(row: int) -> None:
        left = rows_a[row]
        output[row * width : (row + 1) * width] = [
            sum(x * y for x, y in zip(left, right)) for right in rows_b
        ]

    for_each_row(a.rows, compute)
    return Matrix._wrap(a.rows, width, output)


def multiply_transpose_by(a: Matrix, b: Matrix | None = None) -> Matrix:
    """Return ``aᵗ · b``; with one operand, ``aᵗ · a``.

    Requires ``a.rows == b.rows``. This is the ``Xᵗ · X`` and ``Xᵗ · r``
    shape that regression code needs.
    """

    a = require_matrix(a, "a")
    b = a if b is None else require_matrix(b, "b")
    if a.rows != b.rows:
        raise DimensionMismatchError(
            f"Cannot multiply the transpose of a {a.rows}x{a.columns} Matrix "
            f"by a {b.rows}x{b.columns} Matrix"
        )
    columns_a = [a._data[column :: a.columns] for column in range(a.columns)]
    columns_b = [b._data[column :: b.columns] for column in range(b.columns)]
    width = b.columns
    output = [0.0] * (a.columns * width)

    def compute(row: int) -> None:
        left = columns_a[row]
        output[row * width : (row + 1) * width] = [
            sum(x * y for x, y in zip(left, right)) for right in columns_b
        ]

    for_each_row(a.columns, compute)
    return Matrix._wrap(a.columns, width, output)


__all__ = ["multiply_by_transpose", "multiply_transpose_by", "transpose", "unrolled"]
