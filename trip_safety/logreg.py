from __future__ import annotations

"""
Regularized logistic regression fitted with the conjugate gradient minimizer.
The design matrix is expected to carry its own intercept column of ones.
"""

import numpy as np

from .array2d import Array2D
from .cost import logreg_cost_grad
from .errors import DimensionMismatch
from .fmincg import MinimizeResult, minimize_cg
from .sigmoid import sigmoid


def as_array2d(X) -> Array2D:
    """Copy `X` (Array2D, 2-D array or nested rows) into a new Array2D."""
    if isinstance(X, Array2D):
        return X.copy()
    return Array2D.from_rows(X)


class LogisticRegressionCG:
    """
    Logistic regression with an L2 penalty of strength 1/C on every weight but
    the intercept. All inputs are copied at construction, so `fit` can be called
    any number of times and always gives the same coefficients.
    """

    def __init__(
        self,
        X,
        y,
        theta0=None,
        C: float = 1.0,
        max_iter: int = 200,
        verbose: bool = False,
    ):
        self._X = as_array2d(X)
        self._y = np.array(y, dtype=float)
        n_features = self._X.cols
        if theta0 is not None and np.size(theta0) == n_features:
            self._theta0 = np.array(theta0, dtype=float)
        else:
            self._theta0 = np.zeros(n_features)
        self._C = float(C)
        self._max_iter = int(max_iter)
        self.verbose = verbose

        if self._y.shape != (self._X.rows,):
            raise DimensionMismatch(
                f"y has length {self._y.size}, expected {self._X.rows}"
            )

    @property
    def C(self) -> float:
        return self._C

    @property
    def max_iter(self) -> int:
        return self._max_iter

    @staticmethod
    def _clip_labels(y: np.ndarray) -> np.ndarray:
        # event counts above one still mean "at least one event"
        return np.minimum(y, 1.0)

    def _cost_grad_fn(self):
        X, y, C = self._X, self._clip_labels(self._y), self._C

        def cost_grad(theta: np.ndarray) -> tuple[float, np.ndarray]:
            return logreg_cost_grad(theta, X, y, C)

        return cost_grad

    def fit_result(self) -> MinimizeResult:
        """Run the minimizer and return theta with the cost history."""
        return minimize_cg(
            self._cost_grad_fn(),
            self._theta0,
            self._max_iter,
            verbose=self.verbose,
        )

    def fit(self) -> np.ndarray:
        """Return fitted coefficients, intercept first."""
        return self.fit_result().theta

    def predict(self, X, theta, round: bool = True) -> np.ndarray:
        """sigmoid(X @ theta), rounded half away from zero to 0/1 if `round`."""
        X = X if isinstance(X, Array2D) else Array2D.from_rows(X)
        theta = np.asarray(theta, dtype=float)
        if theta.shape != (X.cols,):
            raise DimensionMismatch(
                f"theta has length {theta.size}, matrix has {X.cols} column(s)"
            )
        H = np.atleast_1d(sigmoid(X.matvec(theta)))
        if round:
            return np.floor(H + 0.5)
        return H

    def predict_proba(self, X, theta) -> np.ndarray:
        return self.predict(X, theta, round=False)
