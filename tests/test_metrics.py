"""Unit tests for evaluation helpers."""

from __future__ import annotations

import math

import numpy as np

from trip_safety.constants import DEFAULT_EVENT_THRESHOLD
from trip_safety.metrics import (
    binarize_labels,
    compute_classification_metrics,
    majority_baseline,
    summarize_coefficients,
)


class TestClassificationMetrics:
    """Tests for compute_classification_metrics."""

    def test_perfect_ranking(self) -> None:
        """Event counts are binarized before scoring."""
        y = np.array([0, 3, 0, 1])
        probs = np.array([0.1, 0.9, 0.2, 0.7])

        result = compute_classification_metrics(y, probs)

        assert result["accuracy"] == 1.0
        assert result["roc_auc"] == 1.0
        assert result["confusion_matrix"].tolist() == [[2, 0], [0, 2]]

    def test_single_class_gives_nan_auc(self) -> None:
        """ROC AUC is undefined without both classes."""
        result = compute_classification_metrics(np.zeros(3), np.array([0.1, 0.2, 0.3]))

        assert math.isnan(result["roc_auc"])

    def test_majority_baseline_uses_training_rate(self) -> None:
        """Constant predictions below 0.5 never flag a trip."""
        result = majority_baseline([0, 0, 0, 2], [0, 1])

        assert result["recall"] == 0.0
        assert result["confusion_matrix"].tolist() == [[1, 0], [1, 0]]

    def test_binarize(self) -> None:
        """Any event count above zero is one."""
        assert binarize_labels([0, 0.5, 2]).tolist() == [0, 1, 1]

    def test_event_and_flagged_rates(self) -> None:
        """Rates count trips with events and trips at or above the threshold."""
        y = np.array([0, 0, 0, 2])
        probs = np.array([0.1, 0.5, 0.2, 0.8])

        result = compute_classification_metrics(y, probs)

        assert result["event_rate"] == 0.25
        assert result["flagged_rate"] == 0.5
        assert result["confusion_matrix"].tolist() == [[2, 1], [0, 1]]

    def test_default_threshold(self) -> None:
        """The default flagging threshold is the shared event threshold."""
        y = np.array([0, 1, 1])
        probs = np.array([0.2, 0.4, 0.9])

        default = compute_classification_metrics(y, probs)
        explicit = compute_classification_metrics(y, probs, DEFAULT_EVENT_THRESHOLD)
        lowered = compute_classification_metrics(y, probs, threshold=0.3)

        assert DEFAULT_EVENT_THRESHOLD == 0.5
        assert default["recall"] == explicit["recall"] == 0.5
        assert lowered["recall"] == 1.0


class TestSummarizeCoefficients:
    """Tests for summarize_coefficients."""

    def test_skips_intercept(self) -> None:
        """theta[0] never shows up among the features."""
        theta = np.array([10.0, 0.5, -2.0, 1.5])
        names = ["intercept", "a", "b", "c"]

        top = summarize_coefficients(theta, names, top_k=2)

        assert top["positive"].index.tolist() == ["c", "a"]
        assert top["negative"].index.tolist() == ["b", "a"]
