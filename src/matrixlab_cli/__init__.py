"""Top-level package for the matrixlab demo CLI."""

from .config import DEFAULT_LOG_LEVEL, DEFAULT_MAGIC_ORDER, DemoSettings
from .demo import DemoCase, DemoResult, regression_cases, run_cases

__all__ = [
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_MAGIC_ORDER",
    "DemoCase",
    "DemoResult",
    "DemoSettings",
    "regression_cases",
    "run_cases",
]
