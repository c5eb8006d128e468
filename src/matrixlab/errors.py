"""Exception hierarchy raised by the matrix engine.

Every failure is local and synchronous: operations validate their operands
before allocating output, so an exception never leaves a half-written result
behind.
"""

from __future__ import annotations


class MatrixError(RuntimeError):
    """Base class for all matrix engine failures."""


class DimensionMismatchError(MatrixError):
    """Raised when operand shapes violate an operation's shape contract."""


class IndexOutOfRangeError(MatrixError, IndexError):
    """Raised when a row or column index falls outside ``[0, count)``."""


class NotSquareError(DimensionMismatchError):
    """Raised when an operation requires a square matrix."""


class NonInvertibleError(MatrixError):
    """Raised when Gauss-Jordan elimination cannot find a usable pivot."""


class InvalidDimensionError(MatrixError, ValueError):
    """Raised for impossible sizes such as a magic square of order 2."""


class NullOperandError(MatrixError, TypeError):
    """Raised when a required matrix argument is ``None``."""


__all__ = [
    "DimensionMismatchError",
    "IndexOutOfRangeError",
    "InvalidDimensionError",
    "MatrixError",
    "NonInvertibleError",
    "NotSquareError",
    "NullOperandError",
]
