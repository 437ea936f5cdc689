from __future__ import annotations

"""
Data preparation for the trip-safety experiment: CSV loading, train/test split,
event-density remapping and design-matrix construction.
"""

import io
from pathlib import Path
from typing import Iterable, Sequence

import numpy as np
import pandas as pd
from sklearn.model_selection import train_test_split

from .array2d import Array2D, ones
from .constants import (
    FEATURE_COLUMNS,
    LABEL_COLUMN,
    TEST_COLUMNS,
    TIME_COLUMN,
    TRAIN_COLUMNS,
)
from .log import get_logger

logger = get_logger(__name__)


def parse_start_time(text: str) -> float:
    """'H:MM' -> minutes after midnight; a bare hour is read as H:00."""
    hours, _, minutes = str(text).strip().partition(":")
    total = int(hours or 0) * 60
    if minutes:
        total += int(minutes)
    return float(total)


def load_trips(source: Path | str | Iterable[str]) -> pd.DataFrame:
    """
    Read a headerless trip CSV (training rows carry 34 columns, test rows 29).

    `source` is a path or an iterable of CSV lines.
    """
    if isinstance(source, (str, Path)):
        handle, origin = source, str(source)
    else:
        origin = "input lines"
        handle = io.StringIO("\n".join(line.rstrip("\n") for line in source))

    try:
        df = pd.read_csv(handle, header=None, skip_blank_lines=True)
    except pd.errors.EmptyDataError as exc:
        raise ValueError(f"No trips to read from {origin}") from exc

    if df.shape[1] == len(TRAIN_COLUMNS):
        df.columns = TRAIN_COLUMNS
    elif df.shape[1] == len(TEST_COLUMNS):
        df.columns = TEST_COLUMNS
    else:
        raise ValueError(
            f"Expected {len(TRAIN_COLUMNS)} or {len(TEST_COLUMNS)} columns, got {df.shape[1]}"
        )

    df[TIME_COLUMN] = df[TIME_COLUMN].map(parse_start_time)

    logger.debug("Loaded trips with shape %s", df.shape)
    return df.astype(float)


def shuffle_split(
    df: pd.DataFrame,
    test_size: float = 0.33,
    random_state: int | None = 1,
) -> tuple[pd.DataFrame, pd.DataFrame]:
    """Shuffled row-level split; both parts keep their original index."""
    train_df, test_df = train_test_split(
        df, test_size=test_size, random_state=random_state, shuffle=True
    )
    return train_df, test_df


def split_features_labels(df: pd.DataFrame) -> tuple[pd.DataFrame, pd.Series | None]:
    """Features SOURCE..TRAF4 and the EVT_CNT label (None for test files)."""
    X = df[FEATURE_COLUMNS]
    y = df[LABEL_COLUMN] if LABEL_COLUMN in df.columns else None
    return X, y


def density_remap(
    X_train: pd.DataFrame,
    y_train: pd.Series,
    X_test: pd.DataFrame,
    columns: Sequence[str],
) -> tuple[pd.DataFrame, pd.DataFrame]:
    """
    Replace categorical columns by the training event rate of each value.

    Rates come from training rows only. Test values never seen in training get
    the overall training event rate.
    """
    y_clipped = pd.Series(np.minimum(np.asarray(y_train, dtype=float), 1.0), index=X_train.index)
    global_rate = float(y_clipped.mean()) if len(y_clipped) else float("nan")

    X_train = X_train.copy()
    X_test = X_test.copy()
    for col in columns:
        if col not in X_train.columns:
            raise ValueError(f"Unknown column for density remapping: {col}")
        table = y_clipped.groupby(X_train[col]).mean()
        X_train[col] = X_train[col].map(table)
        X_test[col] = X_test[col].map(table).fillna(global_rate)
    return X_train, X_test


def add_intercept(X: pd.DataFrame | np.ndarray) -> Array2D:
    """Copy feature values into columns 1.. of a matrix whose column 0 is ones."""
    values = np.asarray(X, dtype=float)
    n_rows, n_feat = values.shape
    design = ones((n_rows, n_feat + 1))
    if n_feat:
        design[design.columns(1, -1)] = values.ravel()
    return design


def standardize_columns(
    X_train: Array2D, X_test: Array2D
) -> tuple[np.ndarray, np.ndarray]:
    """
    Scale every non-intercept column in place with training mean and std.
    Zero-variance columns are only centered.
    """
    means = np.zeros(X_train.cols)
    stds = np.ones(X_train.cols)
    for c in range(1, X_train.cols):
        col = X_train[X_train.column(c)]
        mu = col.mean() if col.size else 0.0
        dev = col.std() if col.size else 1.0
        if dev == 0:
            dev = 1.0
        means[c], stds[c] = mu, dev

        X_train[X_train.column(c)] = (col - mu) / dev
        X_test[X_test.column(c)] = (X_test[X_test.column(c)] - mu) / dev
    return means, stds


def build_design_matrices(X_train: pd.DataFrame, X_test: pd.DataFrame):
    """
    Intercept-augmented, standardized training and test matrices.
    """
    if list(X_train.columns) != list(X_test.columns):
        raise ValueError("Training and test features differ")

    design_train = add_intercept(X_train)
    design_test = add_intercept(X_test)
    means, stds = standardize_columns(design_train, design_test)

    meta = {
        "feature_names": ["intercept", *X_train.columns],
        "mean": means,
        "std": stds,
        "train_shape": design_train.shape,
        "test_shape": design_test.shape,
    }
    logger.debug(
        "Design matrices: train %s, test %s", design_train.shape, design_test.shape
    )
    return design_train, design_test, meta
