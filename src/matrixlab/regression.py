"""Linear and logistic regression helpers built from matrix operations."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from numbers import Real

from .arithmetic import add, divide_scalar, matmul, negate, scale, subtract
from .elementwise import element_divide, element_exp, element_power, element_subtract
from .errors import DimensionMismatchError, NullOperandError
from .inversion import inverse
from .matrix import Dimension, Matrix, require_matrix
from .reduction import mean, standard_deviation, total
from .transpose import multiply_transpose_by

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FeatureScaling:
    """Result of :func:`feature_normalization`.

    ``mu`` and ``sigma`` are ``1 x features`` rows so new samples can be scaled
    with the same parameters.
    """

    normalized: Matrix
    mu: Matrix
    sigma: Matrix

    def describe(self) -> str:
        rows, columns = self.normalized.dimensions
        return f"{rows} samples x {columns} features"


def _check_samples(operation: str, X: Matrix, y: Matrix) -> None:
    if X is None or y is None:
        raise NullOperandError(f"{operation} requires non-null matrices")
    require_matrix(X, "X")
    require_matrix(y, "y")
    if X.rows != y.rows:
        raise DimensionMismatchError(f"{operation}: X has {X.rows} rows but y has {y.rows}")


def _check_design(operation: str, X: Matrix, y: Matrix, theta: Matrix) -> None:
    _check_samples(operation, X, y)
    if theta is None:
        raise NullOperandError(f"{operation} requires non-null matrices")
    require_matrix(theta, "theta")
    if X.columns != theta.rows:
        raise DimensionMismatchError(
            f"{operation}: X has {X.columns} columns but theta has {theta.rows} rows"
        )


def compute_cost(X: Matrix, y: Matrix, theta: Matrix) -> float:
    """Squared-error cost ``1/(2m) * Σ (Xθ - y)²`` for ``m`` samples."""

    _check_design("compute_cost", X, y, theta)
    errors = subtract(matmul(X, theta), y)
    squared = total(element_power(errors, 2))
    return squared[0, 0] / (2.0 * y.rows)


def gradient_descent(
    X: Matrix, y: Matrix, theta: Matrix, alpha: float, iterations: int
) -> Matrix:
    """Run batch gradient descent and return the fitted coefficients.

    Parameters
    ----------
    X:
        ``m x n`` design matrix.
    y:
        ``m x 1`` targets.
    theta:
        ``n x 1`` starting coefficients. It is not modified.
    alpha:
        Learning rate.
    iterations:
        Number of update steps.
    """

    _check_design("gradient_descent", X, y, theta)
    if not isinstance(alpha, Real):
        raise TypeError(f"alpha must be a real number, got {type(alpha).__name__}")
    if iterations < 0:
        raise ValueError(f"iterations must be non-negative, got {iterations}")

    samples = y.rows
    initial_cost = compute_cost(X, y, theta)
    LOGGER.debug("Gradient descent: %d iterations, alpha=%s, cost=%.6f", iterations, alpha, initial_cost)
    for _ in range(iterations):
        errors = subtract(matmul(X, theta), y)
        step = scale(multiply_transpose_by(X, errors), alpha / samples)
        theta = subtract(theta, step)

    final_cost = compute_cost(X, y, theta)
    if final_cost > initial_cost:
        LOGGER.warning(
            "Gradient descent diverged: cost rose from %.6f to %.6f (alpha=%s)",
            initial_cost,
            final_cost,
            alpha,
        )
    else:
        LOGGER.debug("Gradient descent finished with cost %.6f", final_cost)
    return theta


def sigmoid(z: Matrix) -> Matrix:
    """Logistic function ``1 / (1 + e^-z)`` applied element-wise."""

    if z is None:
        raise NullOperandError("sigmoid requires a non-null matrix")
    return divide_scalar(1.0, add(1.0, element_exp(negate(z))))


def feature_normalization(X: Matrix) -> FeatureScaling:
    """Scale every column to zero mean and unit sample standard deviation.

    A constant column has a standard deviation of zero and normalises to
    ``nan``.
    """

    if X is None:
        raise NullOperandError("feature_normalization requires a non-null matrix")
    mu = mean(X, Dimension.COLUMNS)
    sigma = standard_deviation(X, Dimension.COLUMNS)
    normalized = element_divide(element_subtract(X, mu), sigma)
    return FeatureScaling(normalized=normalized, mu=mu, sigma=sigma)


def normal_equation(X: Matrix, y: Matrix) -> Matrix:
    """Closed-form least squares ``θ = (XᵗX)⁻¹ Xᵗy``."""

    _check_samples("normal_equation", X, y)
    return matmul(inverse(multiply_transpose_by(X)), multiply_transpose_by(X, y))


__all__ = [
    "FeatureScaling",
    "compute_cost",
    "feature_normalization",
    "gradient_descent",
    "normal_equation",
    "sigmoid",
]
