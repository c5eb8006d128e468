"""Arithmetic and comparison operators.

Every function returns a freshly allocated :class:`~matrixlab.matrix.Matrix`.
Products, scalar scaling, both division directions and the relational
comparisons compute one destination row per task through
:func:`matrixlab._parallel.for_each_row`.
"""

from __future__ import annotations

import operator
from numbers import Real
from typing import Any, Callable, List

from ._floats import ieee_divide
from ._parallel import for_each_row
from .errors import DimensionMismatchError, NullOperandError
from .matrix import Matrix, require_matrix

RowKernel = Callable[[List[float]], List[float]]


def _require_scalar(value: Any, name: str) -> float:
    if value is None:
        raise NullOperandError(f"{name} must not be None")
    if not isinstance(value, Real):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")
    return float(value)


def _require_same_shape(a: Matrix, b: Matrix, operation: str) -> None:
    if not a.has_same_dimensions(b):
        raise DimensionMismatchError(
            f"Cannot {operation} a {a.rows}x{a.columns} Matrix and a {b.rows}x{b.columns} Matrix"
        )


def _map_rows(matrix: Matrix, kernel: RowKernel) -> Matrix:
    """Apply ``kernel`` to each row of ``matrix`` as an independent task."""

    rows, columns = matrix.rows, matrix.columns
    source = matrix._data
    output = [0.0] * (rows * columns)

    def compute(row: int) -> None:
        start = row * columns
        output[start : start + columns] = kernel(source[start : start + columns])

    for_each_row(rows, compute)
    return Matrix._wrap(rows, columns, output)


def _combine(a: Any, b: Any, op: Callable[[float, float], float], verb: str) -> Matrix:
    if a is None or b is None:
        raise NullOperandError(f"Cannot {verb} a None operand")
    if isinstance(a, Matrix) and isinstance(b, Matrix):
        _require_same_shape(a, b, verb)
        return Matrix._wrap(a.rows, a.columns, [op(x, y) for x, y in zip(a._data, b._data)])
    if isinstance(a, Matrix):
        scalar = _require_scalar(b, "scalar")
        return Matrix._wrap(a.rows, a.columns, [op(x, scalar) for x in a._data])
    if isinstance(b, Matrix):
        scalar = _require_scalar(a, "scalar")
        return Matrix._wrap(b.rows, b.columns, [op(scalar, x) for x in b._data])
    raise TypeError(f"Cannot {verb} without a Matrix operand")


def add(a: Matrix | Real, b: Matrix | Real) -> Matrix:
    """Element-wise sum of two same-shape matrices, or a matrix and a scalar.

    The scalar may be on either side; the result is the same.
    """

    return _combine(a, b, operator.add, "add")


def subtract(a: Matrix | Real, b: Matrix | Real) -> Matrix:
    """Element-wise difference.

    ``subtract(5, m)`` computes ``5 - m[i]`` for every element, the negation of
    ``subtract(m, 5)``.
    """

    return _combine(a, b, operator.sub, "subtract")


def negate(matrix: Matrix) -> Matrix:
    matrix = require_matrix(matrix)
    return Matrix._wrap(matrix.rows, matrix.columns, [-value for value in matrix._data])


def matmul(a: Matrix, b: Matrix) -> Matrix:
    """Standard matrix product ``a · b``.

    Parameters
    ----------
    a, b:
        Operands with ``a.columns == b.rows``.

    Returns
    -------
    Matrix
        An ``a.rows x b.columns`` matrix; each output row is computed as an
        independent task.
    """

    a = require_matrix(a, "a")
    b = require_matrix(b, "b")
    if a.columns != b.rows:
        raise DimensionMismatchError(
            f"Cannot multiply a {a.rows}x{a.columns} Matrix by a {b.rows}x{b.columns} Matrix"
        )
    inner, width = a.columns, b.columns
    b_columns = [b._data[column::width] for column in range(width)]
    a_data = a._data
    output = [0.0] * (a.rows * width)

    def compute(row: int) -> None:
        a_row = a_data[row * inner : (row + 1) * inner]
        output[row * width : (row + 1) * width] = [
            sum(x * y for x, y in zip(a_row, column)) for column in b_columns
        ]

    for_each_row(a.rows, compute)
    return Matrix._wrap(a.rows, width, output)


def scale(matrix: Matrix, scalar: Real) -> Matrix:
    matrix = require_matrix(matrix)
    factor = _require_scalar(scalar, "scalar")
    return _map_rows(matrix, lambda row: [value * factor for value in row])


def divide(matrix: Matrix, scalar: Real) -> Matrix:
    """Divide every element by ``scalar``. Division by zero yields ``±inf``/``nan``."""

    matrix = require_matrix(matrix)
    divisor = _require_scalar(scalar, "scalar")
    return _map_rows(matrix, lambda row: [ieee_divide(value, divisor) for value in row])


def divide_scalar(scalar: Real, matrix: Matrix) -> Matrix:
    """Divide ``scalar`` by every element of ``matrix``."""

    matrix = require_matrix(matrix)
    dividend = _require_scalar(scalar, "scalar")
    return _map_rows(matrix, lambda row: [ieee_divide(dividend, value) for value in row])


def _truth_table(matrix: Matrix, scalar: Real, test: Callable[[float, float], bool]) -> Matrix:
    matrix = require_matrix(matrix)
    threshold = _require_scalar(scalar, "scalar")
    return _map_rows(
        matrix, lambda row: [1.0 if test(value, threshold) else 0.0 for value in row]
    )


def equal_to(matrix: Matrix, scalar: Real) -> Matrix:
    """1.0 where an element equals ``scalar``, 0.0 elsewhere."""

    return _truth_table(matrix, scalar, operator.eq)


def not_equal_to(matrix: Matrix, scalar: Real) -> Matrix:
    return _truth_table(matrix, scalar, operator.ne)


def less_than(matrix: Matrix, scalar: Real) -> Matrix:
    return _truth_table(matrix, scalar, operator.lt)


def greater_than(matrix: Matrix, scalar: Real) -> Matrix:
    return _truth_table(matrix, scalar, operator.gt)


def less_equal(matrix: Matrix, scalar: Real) -> Matrix:
    return _truth_table(matrix, scalar, operator.le)


def greater_equal(matrix: Matrix, scalar: Real) -> Matrix:
    return _truth_table(matrix, scalar, operator.ge)


__all__ = [
    "add",
    "divide",
    "divide_scalar",
    "equal_to",
    "greater_equal",
    "greater_than",
    "less_equal",
    "less_than",
    "matmul",
    "negate",
    "not_equal_to",
    "scale",
    "subtract",
]
