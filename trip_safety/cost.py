from __future__ import annotations

"""
L2-regularized logistic regression cost and gradient.
"""

import numpy as np

from .array2d import Array2D
from .errors import DimensionMismatch
from .sigmoid import sigmoid


def logreg_cost_grad(
    theta: np.ndarray, X: Array2D, y: np.ndarray, C: float
) -> tuple[float, np.ndarray]:
    """
    Cross-entropy cost plus sum(theta[1:]**2) / (2*C*m), and its gradient.

    The intercept weight theta[0] is not regularized. Hypotheses are not
    clamped, so a saturated sigmoid gives an infinite or NaN cost.
    """
    theta = np.asarray(theta, dtype=float)
    y = np.asarray(y, dtype=float)
    m, n = X.shape

    if theta.shape != (n,):
        raise DimensionMismatch(f"theta has length {theta.size}, expected {n}")
    if y.shape != (m,):
        raise DimensionMismatch(f"y has length {y.size}, expected {m}")

    H = sigmoid(X.matvec(theta))

    grad = theta / C
    grad[0] = 0.0

    with np.errstate(divide="ignore", invalid="ignore"):
        sigma = -np.sum(y * np.log(H)) - np.sum((1.0 - y) * np.log(1.0 - H))
        cost = np.sum(theta[1:] ** 2) / (2.0 * C * m) + sigma / m

    grad += X.rmatvec(H - y)
    grad /= m
    return float(cost), grad
