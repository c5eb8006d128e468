"""Statistics over a single vector of floats.

These functions take any sequence of numbers (a matrix row or column once
extracted) and return one float. :mod:`matrixlab.reduction` lifts them to
whole matrices.
"""

from __future__ import annotations

import math
from collections import Counter
from typing import List, Sequence

from ._floats import ieee_divide, ieee_sqrt


def _sorted(values: Sequence[float]) -> List[float]:
    if len(values) == 0:
        raise ValueError("Statistics require at least one value")
    return sorted(values)


def mean(values: Sequence[float]) -> float:
    return math.fsum(values) / len(values)


def mean_square(values: Sequence[float]) -> float:
    """Mean of the squared values."""

    return math.fsum(value * value for value in values) / len(values)


def maximum(values: Sequence[float]) -> float:
    return max(values)


def minimum(values: Sequence[float]) -> float:
    return min(values)


def max_index(values: Sequence[float]) -> int:
    """Index of the first occurrence of the largest value."""

    best = 0
    for index, value in enumerate(values):
        if value > values[best]:
            best = index
    return best


def min_index(values: Sequence[float]) -> int:
    """Index of the first occurrence of the smallest value."""

    best = 0
    for index, value in enumerate(values):
        if value < values[best]:
            best = index
    return best


def value_range(values: Sequence[float]) -> float:
    return max(values) - min(values)


def median(values: Sequence[float]) -> float:
    """Middle value, or the mean of the two central values for an even count.

    >>> median([3.0, 1.0, 2.0])
    2.0
    >>> median([4.0, 1.0, 3.0, 2.0])
    2.5
    """

    data = _sorted(values)
    middle = len(data) // 2
    if len(data) % 2:
        return data[middle]
    return (data[middle - 1] + data[middle]) / 2


def quartile1(values: Sequence[float]) -> float:
    """First quartile.

    Even counts take the median of the lower half. Counts of the form
    ``4k + 1`` and ``4k + 3`` blend the two neighbouring order statistics with
    0.25/0.75 weights.
    """

    data = _sorted(values)
    count = len(data)
    if count == 1:
        return data[0]
    if count % 2 == 0:
        half = count // 2
        index = half // 2
        if half % 2:
            return data[index]
        return (data[index - 1] + data[index]) / 2
    k = count // 4
    if count % 4 == 1:
        return data[k - 1] * 0.25 + data[k] * 0.75
    return data[k] * 0.75 + data[k + 1] * 0.25


def quartile3(values: Sequence[float]) -> float:
    """Third quartile, mirroring :func:`quartile1` on the upper half."""

    data = _sorted(values)
    count = len(data)
    if count == 1:
        return data[0]
    if count % 2 == 0:
        half = count // 2
        index = half // 2 + half
        if half % 2:
            return data[index]
        return (data[index - 1] + data[index]) / 2
    index = 3 * (count // 4)
    if count % 4 == 1:
        return data[index] * 0.75 + data[index + 1] * 0.25
    return data[index + 1] * 0.25 + data[index + 2] * 0.75


def iqr(values: Sequence[float]) -> float:
    return quartile3(values) - quartile1(values)


def mode(values: Sequence[float]) -> float:
    """Most frequent value; ties resolve to the smallest candidate.

    >>> mode([1.0, 1.0, 2.0, 3.0])
    1.0
    >>> mode([3.0, 2.0, 3.0, 2.0])
    2.0
    """

    counts = Counter(_sorted(values))
    highest = max(counts.values())
    return min(value for value, count in counts.items() if count == highest)


def variance(values: Sequence[float]) -> float:
    """Sample variance (divisor ``n - 1``); a single value gives ``nan``."""

    centre = mean(values)
    squares = math.fsum((value - centre) ** 2 for value in values)
    return ieee_divide(squares, len(values) - 1)


def standard_deviation(values: Sequence[float]) -> float:
    return ieee_sqrt(variance(values))


__all__ = [
    "iqr",
    "max_index",
    "maximum",
    "mean",
    "mean_square",
    "median",
    "min_index",
    "minimum",
    "mode",
    "quartile1",
    "quartile3",
    "standard_deviation",
    "value_range",
    "variance",
]
