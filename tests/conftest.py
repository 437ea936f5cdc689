"""Shared fixtures: synthetic trip CSV rows."""

from __future__ import annotations

import numpy as np
import pytest

from trip_safety.constants import TEST_NCOLS, TRAIN_COLUMNS


def _trip_line(rng: np.random.Generator, trip_id: int, with_labels: bool) -> str:
    values: list[str] = [str(trip_id)]
    risk = float(rng.uniform(0, 1))
    for name in TRAIN_COLUMNS[1:TEST_NCOLS]:
        if name == "START_TIME":
            values.append(f"{int(rng.integers(0, 24))}:{int(rng.integers(0, 60)):02d}")
        elif name == "ROUTE_RISK_1":
            values.append(f"{risk * 10:.3f}")
        elif name == "WEATHER":
            values.append(str(int(rng.integers(0, 4))))
        else:
            values.append(f"{rng.normal(5, 2):.3f}")
    if with_labels:
        events = int(rng.uniform(0, 1) < risk) * int(rng.integers(1, 4))
        values.extend(["0", "0", "0", "0", str(events)])
    return ",".join(values)


@pytest.fixture
def make_trip_lines():
    """Return a factory for deterministic trip CSV lines."""

    def factory(n_rows: int = 40, with_labels: bool = True, seed: int = 0) -> list[str]:
        rng = np.random.default_rng(seed)
        return [_trip_line(rng, i + 1, with_labels) for i in range(n_rows)]

    return factory
