"""Dense, row-major matrix storage.

A :class:`Matrix` owns a flat list of ``rows * columns`` floats. The element at
``(r, c)`` lives at offset ``r * columns + c``. Arithmetic never aliases input
storage; only :meth:`Matrix.fill`, :meth:`Matrix.swap_rows`,
:meth:`Matrix.set_row` and item assignment mutate in place.

The heavy lifting lives in sibling modules (:mod:`matrixlab.arithmetic`,
:mod:`matrixlab.transpose`, ...). The operator overloads and convenience
methods here delegate to them.
"""

from __future__ import annotations

import enum
import operator
import random
from numbers import Real
from typing import Any, Iterable, Iterator, List, Tuple

from .errors import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidDimensionError,
    NullOperandError,
)


class Dimension(enum.Enum):
    """Selector for the axis an operation collapses, joins or extracts along."""

    AUTO = "auto"
    ROWS = "rows"
    COLUMNS = "columns"


def _check_shape(rows: int, columns: int) -> None:
    if rows < 1 or columns < 1:
        raise InvalidDimensionError(
            f"A Matrix needs at least one row and one column, got {rows}x{columns}"
        )


def check_index(index: Any, count: int, label: str) -> int:
    """Return ``index`` as an ``int`` or raise if outside ``[0, count)``."""

    try:
        value = operator.index(index)
    except TypeError:
        raise TypeError(f"{label} index must be an integer, got {index!r}") from None
    if not 0 <= value < count:
        raise IndexOutOfRangeError(f"{label} index {value} is out of range [0, {count})")
    return value


def require_matrix(value: Any, name: str = "matrix") -> "Matrix":
    """Return ``value`` if it is a :class:`Matrix`, raising otherwise."""

    if value is None:
        raise NullOperandError(f"{name} must not be None")
    if not isinstance(value, Matrix):
        raise TypeError(f"{name} must be a Matrix, got {type(value).__name__}")
    return value


class Matrix:
    """A dense matrix of floats stored in row-major order.

    ``Matrix(rows, columns)`` allocates a zero-filled matrix; omit ``columns``
    for a square one. Use :meth:`from_rows` to build one from a literal 2-D
    array.

    >>> m = Matrix.from_rows([[1, 2], [3, 4]])
    >>> m[1, 0]
    3.0
    >>> m.dimensions
    (2, 2)
    """

    __slots__ = ("_rows", "_columns", "_data")

    def __init__(self, rows: int, columns: int | None = None) -> None:
        if columns is None:
            columns = rows
        _check_shape(rows, columns)
        self._rows = rows
        self._columns = columns
        self._data: List[float] = [0.0] * (rows * columns)

    @classmethod
    def _wrap(cls, rows: int, columns: int, data: List[float]) -> "Matrix":
        # Adopts ``data`` without copying; callers hand over a fresh list.
        instance = cls.__new__(cls)
        instance._rows = rows
        instance._columns = columns
        instance._data = data
        return instance

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Real]]) -> "Matrix":
        """Build a matrix from a literal 2-D array (a sequence of rows)."""

        if rows is None:
            raise NullOperandError("rows must not be None")
        materialised = [[float(value) for value in row] for row in rows]
        if not materialised or not materialised[0]:
            raise InvalidDimensionError("A Matrix needs at least one row and one column")
        width = len(materialised[0])
        data: List[float] = []
        for index, row in enumerate(materialised):
            if len(row) != width:
                raise DimensionMismatchError(
                    f"Row {index} has {len(row)} values; expected {width}"
                )
            data.extend(row)
        return cls._wrap(len(materialised), width, data)

    @classmethod
    def from_flat(cls, rows: int, columns: int, values: Iterable[Real]) -> "Matrix":
        """Build a matrix from ``rows * columns`` values in row-major order."""

        _check_shape(rows, columns)
        data = [float(value) for value in values]
        if len(data) != rows * columns:
            raise DimensionMismatchError(
                f"Expected {rows * columns} values for a {rows}x{columns} Matrix, got {len(data)}"
            )
        return cls._wrap(rows, columns, data)

    @classmethod
    def copy_of(cls, other: "Matrix") -> "Matrix":
        other = require_matrix(other, "other")
        return cls._wrap(other._rows, other._columns, list(other._data))

    @classmethod
    def zeros(cls, rows: int, columns: int | None = None) -> "Matrix":
        return cls(rows, columns)

    @classmethod
    def ones(cls, rows: int, columns: int | None = None) -> "Matrix":
        result = cls(rows, columns)
        result.fill(1.0)
        return result

    @classmethod
    def identity(cls, dimension: int) -> "Matrix":
        """Square matrix with ones on the main diagonal."""

        result = cls(dimension, dimension)
        for index in range(0, dimension * dimension, dimension + 1):
            result._data[index] = 1.0
        return result

    @classmethod
    def rand(cls, rows: int, columns: int | None = None, *, seed: int | None = None) -> "Matrix":
        """Matrix of uniform random numbers in ``[0, 1)``.

        Passing ``seed`` makes the output reproducible.
        """

        result = cls(rows, columns)
        rng = random.Random(seed)
        result._data = [rng.random() for _ in range(len(result._data))]
        return result

    @classmethod
    def magic(cls, dimension: int) -> "Matrix":
        from .magic import magic

        return magic(dimension)

    # ------------------------------------------------------------------
    # Shape and indexing
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def dimensions(self) -> Tuple[int, int]:
        """``(rows, columns)``."""

        return (self._rows, self._columns)

    @property
    def is_square(self) -> bool:
        return self._rows == self._columns

    @property
    def is_vector(self) -> bool:
        """True for a single row or a single column."""

        return self._rows == 1 or self._columns == 1

    @property
    def values(self) -> Tuple[float, ...]:
        """Snapshot of the row-major storage."""

        return tuple(self._data)

    def has_same_dimensions(self, other: "Matrix") -> bool:
        other = require_matrix(other, "other")
        return self._rows == other._rows and self._columns == other._columns

    def _offset(self, key: Any) -> int:
        try:
            row, column = key
        except (TypeError, ValueError):
            raise TypeError("Matrix indices must be a (row, column) pair") from None
        row = check_index(row, self._rows, "row")
        column = check_index(column, self._columns, "column")
        return row * self._columns + column

    def __getitem__(self, key: Tuple[int, int]) -> float:
        return self._data[self._offset(key)]

    def __setitem__(self, key: Tuple[int, int], value: Real) -> None:
        self._data[self._offset(key)] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def to_rows(self) -> List[List[float]]:
        columns = self._columns
        return [self._data[start : start + columns] for start in range(0, len(self._data), columns)]

    # ------------------------------------------------------------------
    # In-place mutation
    # ------------------------------------------------------------------

    def fill(self, value: Real) -> None:
        """Overwrite every element with ``value``."""

        self._data = [float(value)] * len(self._data)

    def swap_rows(self, row1: int, row2: int) -> None:
        from .structural import swap_rows

        swap_rows(self, row1, row2)

    def set_row(self, row: int, source: "Matrix") -> None:
        from .structural import set_row

        set_row(self, row, source)

    # ------------------------------------------------------------------
    # Convenience wrappers around the operation modules
    # ------------------------------------------------------------------

    def copy(self) -> "Matrix":
        return Matrix.copy_of(self)

    def get_row(self, row: int) -> "Matrix":
        from .structural import get_row

        return get_row(self, row)

    def get_column(self, column: int) -> "Matrix":
        from .structural import get_column

        return get_column(self, column)

    def remove_column(self, column: int = 0) -> "Matrix":
        from .structural import remove_column

        return remove_column(self, column)

    def expand_polynomials(self, column1: int, column2: int, degree: int) -> "Matrix":
        from .structural import expand_polynomials

        return expand_polynomials(self, column1, column2, degree)

    def transpose(self) -> "Matrix":
        from .transpose import transpose

        return transpose(self)

    @property
    def T(self) -> "Matrix":
        return self.transpose()

    def unrolled(self) -> "Matrix":
        from .transpose import unrolled

        return unrolled(self)

    def inverse(self) -> "Matrix":
        from .inversion import inverse

        return inverse(self)

    def is_magic(self) -> bool:
        from .magic import is_magic

        return is_magic(self)

    def sum_all_elements(self) -> float:
        return float(sum(self._data))

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other: Any) -> "Matrix":
        if isinstance(other, (Matrix, Real)):
            from .arithmetic import add

            return add(self, other)
        return NotImplemented

    def __radd__(self, other: Any) -> "Matrix":
        if isinstance(other, Real):
            from .arithmetic import add

            return add(other, self)
        return NotImplemented

    def __sub__(self, other: Any) -> "Matrix":
        if isinstance(other, (Matrix, Real)):
            from .arithmetic import subtract

            return subtract(self, other)
        return NotImplemented

    def __rsub__(self, other: Any) -> "Matrix":
        if isinstance(other, Real):
            from .arithmetic import subtract

            return subtract(other, self)
        return NotImplemented

    def __neg__(self) -> "Matrix":
        from .arithmetic import negate

        return negate(self)

    def __pos__(self) -> "Matrix":
        return self.copy()

    def __mul__(self, other: Any) -> "Matrix":
        # Matrix * Matrix is the matrix product, as with ``numpy.matrix``.
        if isinstance(other, Matrix):
            from .arithmetic import matmul

            return matmul(self, other)
        if isinstance(other, Real):
            from .arithmetic import scale

            return scale(self, other)
        return NotImplemented

    def __rmul__(self, other: Any) -> "Matrix":
        if isinstance(other, Real):
            from .arithmetic import scale

            return scale(self, other)
        return NotImplemented

    def __matmul__(self, other: Any) -> "Matrix":
        if isinstance(other, Matrix):
            from .arithmetic import matmul

            return matmul(self, other)
        return NotImplemented

    def __truediv__(self, other: Any) -> "Matrix":
        if isinstance(other, Real):
            from .arithmetic import divide

            return divide(self, other)
        return NotImplemented

    def __rtruediv__(self, other: Any) -> "Matrix":
        if isinstance(other, Real):
            from .arithmetic import divide_scalar

            return divide_scalar(other, self)
        return NotImplemented

    def __eq__(self, other: Any) -> Any:
        if isinstance(other, Matrix):
            if other is self:
                return True
            return self.has_same_dimensions(other) and self._data == other._data
        if isinstance(other, Real):
            from .arithmetic import equal_to

            return equal_to(self, other)
        return NotImplemented

    def __ne__(self, other: Any) -> Any:
        if isinstance(other, Matrix):
            return not self.__eq__(other)
        if isinstance(other, Real):
            from .arithmetic import not_equal_to

            return not_equal_to(self, other)
        return NotImplemented

    def __hash__(self) -> int:
        # Consistent with value equality: equal matrices share a shape.
        return hash((self._rows, self._columns))

    def __lt__(self, other: Any) -> "Matrix":
        if isinstance(other, Real):
            from .arithmetic import less_than

            return less_than(self, other)
        return NotImplemented

    def __gt__(self, other: Any) -> "Matrix":
        if isinstance(other, Real):
            from .arithmetic import greater_than

            return greater_than(self, other)
        return NotImplemented

    def __le__(self, other: Any) -> "Matrix":
        if isinstance(other, Real):
            from .arithmetic import less_equal

            return less_equal(self, other)
        return NotImplemented

    def __ge__(self, other: Any) -> "Matrix":
        if isinstance(other, Real):
            from .arithmetic import greater_equal

            return greater_equal(self, other)
        return NotImplemented

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        """Two-decimal, row-per-line rendering used for diagnostics."""

        lines = []
        for row in self.to_rows():
            lines.append("".join(f"{value:.2f} " for value in row) + "\n")
        return "".join(lines)

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self.to_rows()!r})"
