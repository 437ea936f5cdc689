from __future__ import annotations

"""
Risk ranking of predicted trips: highest predicted probability first.
"""

from typing import Sequence

import numpy as np
import pandas as pd


def rank_order(scores: Sequence[float] | np.ndarray) -> list[int]:
    """
    1-based row ids sorted by descending score. The sort is stable, so rows
    with equal scores keep their original relative order.
    """
    scores = np.asarray(scores, dtype=float)
    order = np.argsort(-scores, kind="stable")
    return [int(idx) + 1 for idx in order]


def rank_positions(scores: Sequence[float] | np.ndarray) -> list[int]:
    """For each row (in input order), its 1-based rank; 1 is the riskiest."""
    order = rank_order(scores)
    positions = [0] * len(order)
    for rank, row_id in enumerate(order, start=1):
        positions[row_id - 1] = rank
    return positions


def ranking_table(scores: Sequence[float] | np.ndarray, index=None) -> pd.DataFrame:
    """
    Ranked view of the scores with the row id, the optional original index
    label and the score.
    """
    scores = np.asarray(scores, dtype=float)
    order = rank_order(scores)
    labels = list(index) if index is not None else list(range(1, len(scores) + 1))
    return pd.DataFrame(
        {
            "rank": range(1, len(order) + 1),
            "row": order,
            "label": [labels[row - 1] for row in order],
            "score": [scores[row - 1] for row in order],
        }
    )
