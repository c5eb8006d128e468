from __future__ import annotations

import pytest

from matrixlab import Matrix
from matrixlab.config import MAX_WORKERS_ENV, MIN_PARALLEL_ROWS_ENV


@pytest.fixture
def design_a() -> Matrix:
    """Four samples with three features, shared by the regression fixtures."""
    return Matrix.from_rows([[2, 1, 3], [7, 1, 9], [1, 8, 1], [3, 7, 4]])


@pytest.fixture
def targets_a() -> Matrix:
    return Matrix.from_rows([[2], [5], [5], [6]])


@pytest.fixture
def square() -> Matrix:
    return Matrix.from_rows([[4, 7, 2], [3, 6, 1], [2, 5, 3]])


@pytest.fixture
def parallel_rows(monkeypatch: pytest.MonkeyPatch) -> None:
    """Force row-parallel operations onto the thread pool for any size."""
    monkeypatch.setenv(MAX_WORKERS_ENV, "4")
    monkeypatch.setenv(MIN_PARALLEL_ROWS_ENV, "1")


@pytest.fixture
def serial_rows(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(MAX_WORKERS_ENV, "1")
