from __future__ import annotations

"""
Error kinds raised by the matrix, cost and model layers.
"""


class TripSafetyError(ValueError):
    """Base class for all errors raised by trip_safety."""


class ShapeMismatch(TripSafetyError):
    """Assigned sequence length differs from the number of addressed elements."""


class IndexOutOfRange(TripSafetyError, IndexError):
    """Row or column index falls outside the matrix bounds."""


class DimensionMismatch(TripSafetyError):
    """Parameter vector or labels do not line up with the design matrix."""
