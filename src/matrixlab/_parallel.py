"""Fork-join scheduling over matrix rows.

Each task owns exactly one destination row and reads only from fully populated
inputs, so no locking is needed.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable

from .config import ParallelSettings, load_parallel_settings

LOGGER = logging.getLogger(__name__)


def for_each_row(
    rows: int,
    task: Callable[[int], None],
    *,
    settings: ParallelSettings | None = None,
) -> None:
    """Run ``task(row)`` for every row index, in parallel when worthwhile.

    Exceptions raised by any task propagate to the caller once all submitted
    rows have been scheduled.
    """

    settings = settings or load_parallel_settings()
    if not settings.is_parallel(rows):
        for row in range(rows):
            task(row)
        return
    workers = min(settings.max_workers, rows)
    LOGGER.debug("Scheduling %d rows across %d worker threads", rows, workers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        # Draining the iterator re-raises the first task failure.
        for _ in pool.map(task, range(rows)):
            pass
