from __future__ import annotations

"""
Logistic function.
"""

import numpy as np


def sigmoid(z):
    """1 / (1 + exp(-z)); scalars give a float, sequences an array."""
    with np.errstate(over="ignore"):
        result = 1.0 / (1.0 + np.exp(-np.asarray(z, dtype=float)))
    if result.ndim == 0:
        return float(result)
    return result
