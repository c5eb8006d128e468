"""Configuration helpers for the matrix engine.

The module centralises the defaults that govern row-parallel scheduling so the
engine, the CLI and the tests agree on them.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

DEFAULT_MIN_PARALLEL_ROWS = 64
MAX_WORKERS_ENV = "MATRIXLAB_MAX_WORKERS"
MIN_PARALLEL_ROWS_ENV = "MATRIXLAB_MIN_PARALLEL_ROWS"


def default_max_workers() -> int:
    return min(32, os.cpu_count() or 1)


@dataclass(frozen=True, slots=True)
class ParallelSettings:
    """Scheduling parameters for row-parallel operations.

    Parameters
    ----------
    max_workers:
        Upper bound on the number of worker threads. ``1`` forces serial
        execution.
    min_parallel_rows:
        Matrices with fewer rows than this are processed serially; spinning up
        a pool costs more than it saves on small inputs.
    """

    max_workers: int
    min_parallel_rows: int

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
        if self.min_parallel_rows < 1:
            raise ValueError(f"min_parallel_rows must be >= 1, got {self.min_parallel_rows}")

    def describe(self) -> str:
        """Return a human readable description.

        >>> ParallelSettings(4, 64).describe()
        'max_workers=4 min_parallel_rows=64'
        """

        return f"max_workers={self.max_workers} min_parallel_rows={self.min_parallel_rows}"

    def is_parallel(self, rows: int) -> bool:
        return self.max_workers > 1 and rows >= self.min_parallel_rows


def _read_positive_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
    if value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value}")
    return value


def load_parallel_settings(environ: Mapping[str, str] | None = None) -> ParallelSettings:
    """Build :class:`ParallelSettings` from environment variables.

    ``MATRIXLAB_MAX_WORKERS`` and ``MATRIXLAB_MIN_PARALLEL_ROWS`` override the
    defaults when set.
    """

    env = os.environ if environ is None else environ
    return ParallelSettings(
        max_workers=_read_positive_int(env, MAX_WORKERS_ENV, default_max_workers()),
        min_parallel_rows=_read_positive_int(env, MIN_PARALLEL_ROWS_ENV, DEFAULT_MIN_PARALLEL_ROWS),
    )
