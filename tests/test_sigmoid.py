"""Unit tests for the logistic function."""

from __future__ import annotations

import warnings

import numpy as np

from trip_safety.sigmoid import sigmoid


class TestSigmoid:
    """Tests for sigmoid."""

    def test_zero_is_one_half(self) -> None:
        """sigmoid(0) is exactly 0.5."""
        assert sigmoid(0) == 0.5
        assert isinstance(sigmoid(0.0), float)

    def test_elementwise_increasing_and_bounded(self) -> None:
        """Strictly increasing and inside (0, 1) for moderate inputs."""
        z = np.linspace(-30, 30, 61)
        h = sigmoid(z)

        assert h.shape == z.shape
        assert np.all(np.diff(h) > 0)
        assert np.all((h > 0) & (h < 1))

    def test_saturates_without_warnings(self) -> None:
        """Huge inputs give 0.0 and 1.0 quietly."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            h = sigmoid([-1000.0, 1000.0])

        np.testing.assert_array_equal(h, [0.0, 1.0])
