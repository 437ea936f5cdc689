from __future__ import annotations

"""
Diagnostic plots: minimizer convergence and ROC curve on held-out trips.
"""

from pathlib import Path
from typing import Sequence

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
from sklearn.metrics import auc, roc_curve

from .metrics import binarize_labels


def plot_cost_history(costs: Sequence[float], filename: Path | str) -> Path:
    plt.figure(figsize=(8, 6))
    plt.plot(np.arange(1, len(costs) + 1), costs, color="darkorange", lw=2)
    plt.xlabel("Line search")
    plt.ylabel("Cost")
    plt.title("Conjugate gradient convergence")
    plt.grid(True)
    plt.tight_layout()
    plt.savefig(filename)
    plt.close()
    return Path(filename)


def plot_roc(y_true, y_probs, filename: Path | str) -> Path:
    """ROC curve with the chance diagonal; event counts are binarized first."""
    fpr, tpr, _ = roc_curve(binarize_labels(y_true), np.asarray(y_probs, dtype=float))
    roc_auc = auc(fpr, tpr)

    plt.figure(figsize=(8, 6))
    plt.plot(fpr, tpr, color="darkorange", lw=2, label=f"ROC curve (area = {roc_auc:.3f})")
    plt.plot([0, 1], [0, 1], color="navy", lw=2, linestyle="--")
    plt.xlim([0.0, 1.0])
    plt.ylim([0.0, 1.05])
    plt.xlabel("False Positive Rate")
    plt.ylabel("True Positive Rate")
    plt.title("ROC Curve: trip events")
    plt.legend(loc="lower right")
    plt.grid(True)
    plt.tight_layout()
    plt.savefig(filename)
    plt.close()
    return Path(filename)
