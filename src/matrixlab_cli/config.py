"""Defaults for the ``matrixlab`` command-line demo.

Kept in one place so the CLI, the demo runner and the tests agree on them.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_MAGIC_ORDER = 4
DEFAULT_PRECISION = 4


@dataclass(frozen=True, slots=True)
class DemoSettings:
    """Presentation options for demo output.

    Parameters
    ----------
    precision:
        Number of decimals shown for computed values.
    log_level:
        Name of the root logging level configured by the CLI.
    """

    precision: int = DEFAULT_PRECISION
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if self.precision < 0:
            raise ValueError(f"precision must be >= 0, got {self.precision}")

    def describe(self) -> str:
        """Return a human readable description.

        >>> DemoSettings(2, "INFO").describe()
        'precision=2 log_level=INFO'
        """

        return f"precision={self.precision} log_level={self.log_level}"
