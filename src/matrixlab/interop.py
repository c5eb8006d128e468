"""Conversion between :class:`~matrixlab.matrix.Matrix` and numpy / pandas."""

from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd

from .errors import InvalidDimensionError
from .matrix import Matrix, require_matrix


def to_numpy(matrix: Matrix) -> np.ndarray:
    """Return a fresh ``float64`` array of shape ``(rows, columns)``."""

    matrix = require_matrix(matrix)
    return np.asarray(matrix.values, dtype=float).reshape(matrix.rows, matrix.columns)


def from_numpy(array: np.ndarray) -> Matrix:
    """Build a matrix from a 1-D (treated as one row) or 2-D array."""

    values = np.asarray(array, dtype=float)
    if values.ndim == 1:
        values = values.reshape(1, -1)
    if values.ndim != 2 or values.size == 0:
        raise InvalidDimensionError(
            f"Expected a non-empty 1-D or 2-D array, got shape {values.shape}"
        )
    rows, columns = values.shape
    return Matrix.from_flat(rows, columns, values.ravel().tolist())


def to_frame(
    matrix: Matrix,
    columns: Sequence[str] | None = None,
    index: Sequence[object] | None = None,
) -> pd.DataFrame:
    """Wrap ``matrix`` in a :class:`pandas.DataFrame`.

    Column labels default to ``0..columns-1``.
    """

    matrix = require_matrix(matrix)
    return pd.DataFrame(to_numpy(matrix), columns=columns, index=index)


__all__ = ["from_numpy", "to_frame", "to_numpy"]
