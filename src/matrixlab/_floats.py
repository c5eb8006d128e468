"""IEEE-754 flavoured scalar primitives.

Python's :mod:`math` raises where hardware floats would return ``inf`` or
``nan``. Element-wise matrix operations must never stop half way through a
buffer, so these wrappers map the domain errors back onto IEEE results.
"""

from __future__ import annotations

import math

INF = math.inf
NAN = math.nan


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide, returning ``±inf`` or ``nan`` on a zero denominator.

    >>> ieee_divide(1.0, 0.0)
    inf
    >>> ieee_divide(-1.0, 0.0)
    -inf
    >>> math.isnan(ieee_divide(0.0, 0.0))
    True
    """

    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return NAN
        # Signed zero in the denominator flips the sign of the infinity.
        sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
        return math.copysign(INF, sign)
    return numerator / denominator


def _odd_integer(value: float) -> bool:
    return float(value).is_integer() and int(value) % 2 == 1


def ieee_pow(base: float, exponent: float) -> float:
    """Raise ``base`` to ``exponent`` without raising.

    >>> ieee_pow(0.0, -1.0)
    inf
    >>> ieee_pow(-0.0, -3.0)
    -inf
    """

    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _odd_integer(exponent):
            return -INF
        return INF
    except ValueError:
        # Negative base with a fractional exponent, or 0 ** negative.
        if base == 0:
            return math.copysign(INF, base) if _odd_integer(exponent) else INF
        return NAN


def ieee_sqrt(value: float) -> float:
    if value < 0:
        return NAN
    return math.sqrt(value)


def ieee_exp(value: float) -> float:
    try:
        return math.exp(value)
    except OverflowError:
        return INF


def ieee_log(value: float) -> float:
    if value == 0:
        return -INF
    if value < 0:
        return NAN
    return math.log(value)
