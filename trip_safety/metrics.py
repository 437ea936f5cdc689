from __future__ import annotations

"""
Metric helpers for held-out evaluation (classification summaries and coef dumps).
"""

import numpy as np
import pandas as pd
from sklearn import metrics

from .constants import DEFAULT_EVENT_THRESHOLD


def binarize_labels(y) -> np.ndarray:
    """Event counts -> 0/1 (any event counts as one)."""
    return (np.asarray(y, dtype=float) > 0).astype(int)


def compute_classification_metrics(
    y_true: np.ndarray | pd.Series,
    probs: np.ndarray,
    threshold: float = DEFAULT_EVENT_THRESHOLD,
):
    """
    Score predicted event probabilities against raw event counts.

    A trip is flagged when its probability reaches `threshold`. Besides the
    usual binary metrics the result carries the observed event rate and the
    share of flagged trips, which matter on a rare-event dataset.
    """
    events = binarize_labels(y_true)
    probs = np.asarray(probs, dtype=float)
    flagged = (probs >= threshold).astype(int)
    precision, recall, f1, _ = metrics.precision_recall_fscore_support(
        events, flagged, average="binary", zero_division=0
    )
    try:
        roc_auc = metrics.roc_auc_score(events, probs)
    except ValueError:
        roc_auc = float("nan")

    return {
        "accuracy": metrics.accuracy_score(events, flagged),
        "precision": precision,
        "recall": recall,
        "f1": f1,
        "roc_auc": roc_auc,
        "confusion_matrix": metrics.confusion_matrix(events, flagged, labels=[0, 1]),
        "event_rate": float(events.mean()) if events.size else float("nan"),
        "flagged_rate": float(flagged.mean()) if flagged.size else float("nan"),
    }


def majority_baseline(y_train: np.ndarray | pd.Series, y_test: np.ndarray | pd.Series):
    """
    Predicts the training event rate for every test row.
    """
    prob = float(np.mean(binarize_labels(y_train)))
    probs = np.full(len(y_test), prob, dtype=float)
    return compute_classification_metrics(y_test, probs)


def summarize_coefficients(
    theta: np.ndarray, feature_names: list[str], top_k: int = 8
) -> dict[str, pd.Series]:
    # theta[0] is the intercept
    coef_series = pd.Series(np.asarray(theta)[1:], index=feature_names[1:])
    coef_sorted = coef_series.sort_values()
    return {
        "positive": coef_sorted.tail(top_k)[::-1],
        "negative": coef_sorted.head(top_k),
    }
