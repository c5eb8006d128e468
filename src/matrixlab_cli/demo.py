"""Fixture scenarios exercised by ``matrixlab regression``.

Each :class:`DemoCase` pairs a literal computation with the value it is
expected to produce, so the CLI can print target and actual side by side.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Sequence, Union

import pandas as pd

from matrixlab import (
    Dimension,
    Matrix,
    compute_cost,
    feature_normalization,
    gradient_descent,
    join,
    normal_equation,
)

Outcome = Union[Matrix, float]


@dataclass(frozen=True, slots=True)
class DemoCase:
    """A named computation and its expected result."""

    section: str
    name: str
    target: str
    run: Callable[[], Outcome]


@dataclass(frozen=True, slots=True)
class DemoResult:
    section: str
    name: str
    target: str
    actual: Outcome


def format_outcome(value: Outcome, precision: int) -> str:
    """Render a scalar, or a matrix as ``"a b; c d;"`` rows."""

    if isinstance(value, Matrix):
        rows = [" ".join(f"{item:.{precision}f}" for item in row) for row in value.to_rows()]
        return "; ".join(rows) + ";"
    return f"{value:.{precision}f}"


def _design_a() -> Matrix:
    return Matrix.from_rows([[2, 1, 3], [7, 1, 9], [1, 8, 1], [3, 7, 4]])


def _targets_a() -> Matrix:
    return Matrix.from_rows([[2], [5], [5], [6]])


def _cost_cases() -> List[DemoCase]:
    targets = Matrix.from_rows([[7], [6], [5], [4]])
    return [
        DemoCase(
            "Cost function",
            "A",
            "5.295",
            lambda: compute_cost(_design_a(), _targets_a(), Matrix.from_rows([[0.4], [0.6], [0.8]])),
        ),
        DemoCase(
            "Cost function",
            "B",
            "11.945",
            lambda: compute_cost(
                Matrix.from_rows([[1, 2], [1, 3], [1, 4], [1, 5]]),
                targets,
                Matrix.from_rows([[0.1], [0.2]]),
            ),
        ),
        DemoCase(
            "Cost function",
            "C",
            "7.0175",
            lambda: compute_cost(
                Matrix.from_rows([[1, 2, 3], [1, 3, 4], [1, 4, 5], [1, 5, 6]]),
                targets,
                Matrix.from_rows([[0.1], [0.2], [0.3]]),
            ),
        ),
    ]


def _gradient_cases() -> List[DemoCase]:
    return [
        DemoCase(
            "Gradient descent",
            "A",
            "0.23; 0.56; 0.31;",
            lambda: gradient_descent(_design_a(), _targets_a(), Matrix(3, 1), 0.01, 100),
        ),
        DemoCase(
            "Gradient descent",
            "B",
            "5.2; -0.57;",
            lambda: gradient_descent(
                Matrix.from_rows([[1, 5], [1, 2], [1, 4], [1, 5]]),
                Matrix.from_rows([[1], [6], [4], [2]]),
                Matrix(2, 1),
                0.01,
                1000,
            ),
        ),
        DemoCase(
            "Gradient descent",
            "C (non-zero start)",
            "1.7; 0.19;",
            lambda: gradient_descent(
                Matrix.from_rows([[1, 5], [1, 2]]),
                Matrix.from_rows([[1], [6]]),
                Matrix.from_rows([[0.5], [0.5]]),
                0.1,
                10,
            ),
        ),
    ]


def _normalization_cases() -> List[DemoCase]:
    def padded_magic() -> Matrix:
        return join(Matrix.ones(1, 3) * -1, Matrix.magic(3), Dimension.ROWS)

    return [
        DemoCase(
            "Feature normalization",
            "A",
            "-1.0; 0.0; 1.0;",
            lambda: feature_normalization(Matrix.from_rows([[1], [2], [3]])).normalized,
        ),
        DemoCase(
            "Feature normalization",
            "B",
            "1.13 -1.00 0.38; -0.76 0.00 0.76; -0.38 1.00 -1.13;",
            lambda: feature_normalization(Matrix.magic(3)).normalized,
        ),
        DemoCase(
            "Feature normalization",
            "C",
            "-1.21 -1.01 -1.21; 1.21 -0.56 0.67; -0.14 0.34 0.95; 0.14 1.24 -0.41;",
            lambda: feature_normalization(padded_magic()).normalized,
        ),
    ]


def regression_cases() -> List[DemoCase]:
    """All fixture scenarios, in presentation order."""

    cases = _cost_cases() + _gradient_cases() + _normalization_cases()
    cases.append(
        DemoCase(
            "Normal equation",
            "A",
            "0.008; 0.568; 0.486;",
            lambda: normal_equation(_design_a(), _targets_a()),
        )
    )
    return cases


def run_cases(cases: Sequence[DemoCase]) -> List[DemoResult]:
    return [DemoResult(case.section, case.name, case.target, case.run()) for case in cases]


def results_frame(results: Sequence[DemoResult], precision: int) -> pd.DataFrame:
    """Tabulate results with one row per case."""

    return pd.DataFrame(
        {
            "section": [result.section for result in results],
            "case": [result.name for result in results],
            "target": [result.target for result in results],
            "actual": [format_outcome(result.actual, precision) for result in results],
        }
    )
