"""
Trip safety risk ranking with regularized logistic regression.

This package contains a small numpy-backed matrix with views, a conjugate
gradient minimizer, the logistic regression model built on top of it, and the
data preparation, ranking and evaluation helpers used by main.py.
"""

from .array2d import Array2D, Axis, GSlice, Slice, ones, zeros
from .constants import FEATURE_COLUMNS, LABEL_COLUMN, TEST_COLUMNS, TRAIN_COLUMNS
from .cost import logreg_cost_grad
from .data_prep import (
    build_design_matrices,
    density_remap,
    load_trips,
    shuffle_split,
    split_features_labels,
)
from .errors import DimensionMismatch, IndexOutOfRange, ShapeMismatch, TripSafetyError
from .fmincg import MinimizeResult, fmincg, minimize_cg
from .logreg import LogisticRegressionCG
from .metrics import compute_classification_metrics, summarize_coefficients
from .ranking import rank_order, rank_positions
from .sigmoid import sigmoid

__all__ = [
    "Array2D",
    "Axis",
    "GSlice",
    "Slice",
    "ones",
    "zeros",
    "FEATURE_COLUMNS",
    "LABEL_COLUMN",
    "TEST_COLUMNS",
    "TRAIN_COLUMNS",
    "logreg_cost_grad",
    "build_design_matrices",
    "density_remap",
    "load_trips",
    "shuffle_split",
    "split_features_labels",
    "DimensionMismatch",
    "IndexOutOfRange",
    "ShapeMismatch",
    "TripSafetyError",
    "MinimizeResult",
    "fmincg",
    "minimize_cg",
    "LogisticRegressionCG",
    "compute_classification_metrics",
    "summarize_coefficients",
    "rank_order",
    "rank_positions",
    "sigmoid",
]
