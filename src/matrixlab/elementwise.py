"""Element-wise framework with vector broadcasting.

:func:`element_operation` applies a binary function to every element of a
matrix against either a scalar or a second matrix. A second matrix may be

* the same shape (element by element),
* a single row with matching column count (reused for every row), or
* a single column with matching row count (one value per destination row).

Any other combination raises :class:`~matrixlab.errors.DimensionMismatchError`.
"""

from __future__ import annotations

import logging
import operator
from numbers import Real
from typing import Callable

from ._floats import ieee_divide, ieee_exp, ieee_log, ieee_pow, ieee_sqrt
from .errors import DimensionMismatchError, NullOperandError
from .matrix import Matrix, require_matrix

LOGGER = logging.getLogger(__name__)

BinaryFunction = Callable[[float, float], float]
UnaryFunction = Callable[[float], float]


def _broadcast(matrix: Matrix, other: Matrix, operation: BinaryFunction) -> Matrix:
    data, values = matrix._data, other._data
    columns = matrix.columns
    if matrix.has_same_dimensions(other):
        result = [operation(x, y) for x, y in zip(data, values)]
    elif other.rows == 1 and other.columns == columns:
        LOGGER.debug("Broadcasting 1x%d row vector over %d rows", columns, matrix.rows)
        result = [operation(x, values[index % columns]) for index, x in enumerate(data)]
    elif other.columns == 1 and other.rows == matrix.rows:
        LOGGER.debug("Broadcasting %dx1 column vector over %d columns", other.rows, columns)
        result = [operation(x, values[index // columns]) for index, x in enumerate(data)]
    else:
        raise DimensionMismatchError(
            f"Cannot broadcast a {other.rows}x{other.columns} Matrix "
            f"against a {matrix.rows}x{columns} Matrix"
        )
    return Matrix._wrap(matrix.rows, columns, result)


def element_operation(
    matrix: Matrix, operand: Matrix | Real, operation: BinaryFunction
) -> Matrix:
    """Apply ``operation(element, operand)`` across ``matrix``.

    Parameters
    ----------
    matrix:
        Left-hand operand; the result has its shape.
    operand:
        A scalar, a matrix of the same shape, or a row/column vector that
        broadcasts against ``matrix``.
    operation:
        Binary numeric function.
    """

    matrix = require_matrix(matrix)
    if operand is None:
        raise NullOperandError("operand must not be None")
    if isinstance(operand, Matrix):
        return _broadcast(matrix, operand, operation)
    if not isinstance(operand, Real):
        raise TypeError(f"operand must be a Matrix or a real number, got {type(operand).__name__}")
    scalar = float(operand)
    return Matrix._wrap(matrix.rows, matrix.columns, [operation(x, scalar) for x in matrix._data])


def element_map(matrix: Matrix, function: UnaryFunction) -> Matrix:
    """Apply a unary ``function`` to every element."""

    matrix = require_matrix(matrix)
    return Matrix._wrap(matrix.rows, matrix.columns, [function(x) for x in matrix._data])


def element_add(matrix: Matrix, operand: Matrix | Real) -> Matrix:
    return element_operation(matrix, operand, operator.add)


def element_subtract(matrix: Matrix, operand: Matrix | Real) -> Matrix:
    return element_operation(matrix, operand, operator.sub)


def element_multiply(matrix: Matrix, operand: Matrix | Real) -> Matrix:
    """Hadamard product (or scaling, for a scalar operand)."""

    return element_operation(matrix, operand, operator.mul)


def element_divide(matrix: Matrix, operand: Matrix | Real) -> Matrix:
    return element_operation(matrix, operand, ieee_divide)


def element_power(matrix: Matrix, exponent: Matrix | Real) -> Matrix:
    return element_operation(matrix, exponent, ieee_pow)


def element_sqrt(matrix: Matrix) -> Matrix:
    return element_map(matrix, ieee_sqrt)


def element_abs(matrix: Matrix) -> Matrix:
    return element_map(matrix, abs)


def element_exp(matrix: Matrix) -> Matrix:
    return element_map(matrix, ieee_exp)


def element_log(matrix: Matrix) -> Matrix:
    """Natural logarithm; ``log(0)`` is ``-inf`` and negatives give ``nan``."""

    return element_map(matrix, ieee_log)


__all__ = [
    "element_abs",
    "element_add",
    "element_divide",
    "element_exp",
    "element_log",
    "element_map",
    "element_multiply",
    "element_operation",
    "element_power",
    "element_sqrt",
    "element_subtract",
]
