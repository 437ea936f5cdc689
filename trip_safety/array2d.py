from __future__ import annotations

"""
A small numpy-backed 2-D array with row, column and column-range views.

The data lives in a flat row-major buffer. Views are plain index descriptors
(start/size/stride), so they stay valid however the buffer is replaced and
never hold a reference into it. Reading through a view returns a fresh array,
assigning through a view scatters into the buffer in place.
"""

import operator
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

import numpy as np

from .errors import IndexOutOfRange, ShapeMismatch

Shape = tuple[int, int]


class Axis(Enum):
    ROW = "row"
    COLUMN = "column"


@dataclass(frozen=True)
class Slice:
    """`size` elements starting at `start`, `stride` apart."""

    start: int
    size: int
    stride: int

    def indices(self) -> np.ndarray:
        return self.start + self.stride * np.arange(self.size, dtype=np.intp)


@dataclass(frozen=True)
class GSlice:
    """Generalized slice: one (size, stride) pair per dimension, outermost first."""

    start: int
    sizes: tuple[int, ...]
    strides: tuple[int, ...]

    @property
    def size(self) -> int:
        return int(np.prod(self.sizes, dtype=np.intp))

    def indices(self) -> np.ndarray:
        idx = np.array([self.start], dtype=np.intp)
        for size, stride in zip(self.sizes, self.strides):
            step = stride * np.arange(size, dtype=np.intp)
            idx = (idx[:, None] + step[None, :]).ravel()
        return idx


View = Slice | GSlice


class Array2D:
    """
    Dense row-major matrix of float64 values.

    >>> a = zeros((2, 3))
    >>> a[a.row(1)] = [1, 2, 3]
    >>> a[a.column(2)]
    array([0., 3.])
    """

    def __init__(self, shape: Shape, initializer: float = 0.0):
        rows, cols = (operator.index(n) for n in shape)
        if rows < 0 or cols < 0:
            raise IndexOutOfRange(f"Negative dimension in shape {shape}")
        self._shape: Shape = (rows, cols)
        self._store = np.full(rows * cols, initializer, dtype=float)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]] | np.ndarray) -> "Array2D":
        """Build a matrix from a nested sequence or a 2-D array."""
        data = np.asarray(rows, dtype=float)
        if data.ndim == 1 and data.size == 0:
            data = data.reshape(0, 0)
        if data.ndim != 2:
            raise ShapeMismatch(f"Expected 2-D data, got {data.ndim} dimension(s)")
        result = cls(data.shape)
        result._store[:] = data.ravel()
        return result

    @property
    def shape(self) -> Shape:
        return self._shape

    @property
    def rows(self) -> int:
        return self._shape[0]

    @property
    def cols(self) -> int:
        return self._shape[1]

    def _check(self, n: int, bound: int, what: str) -> int:
        n = operator.index(n)
        if not 0 <= n < bound:
            raise IndexOutOfRange(f"{what} index {n} out of range [0, {bound})")
        return n

    def row(self, n: int) -> Slice:
        n = self._check(n, self.rows, "Row")
        return Slice(n * self.cols, self.cols, 1)

    def column(self, n: int) -> Slice:
        n = self._check(n, self.cols, "Column")
        return Slice(n, self.rows, self.cols)

    def stripe(self, n: int, axis: Axis) -> Slice:
        return self.row(n) if axis is Axis.ROW else self.column(n)

    def columns(self, p: int, q: int) -> GSlice:
        """All rows of columns p..q inclusive; negative bounds count from the end."""
        p, q = operator.index(p), operator.index(q)
        if p < 0:
            p += self.cols
        if q < 0:
            q += self.cols
        p = self._check(p, self.cols, "Column")
        q = self._check(q, self.cols, "Column")
        if p > q:
            raise IndexOutOfRange(f"Empty column range {p}..{q}")
        return GSlice(p, (self.rows, q - p + 1), (self.cols, 1))

    def _indices(self, view: View) -> np.ndarray:
        idx = view.indices()
        if idx.size and (idx.min() < 0 or idx.max() >= self._store.size):
            raise IndexOutOfRange(
                f"View addresses [{idx.min()}, {idx.max()}], store holds {self._store.size}"
            )
        return idx

    def __getitem__(self, view: View) -> np.ndarray:
        # fancy indexing always copies
        return self._store[self._indices(view)]

    def __setitem__(self, view: View, values) -> None:
        arr = np.asarray(values, dtype=float).ravel()
        if arr.size != view.size:
            raise ShapeMismatch(
                f"Cannot assign {arr.size} value(s) to a view of {view.size} element(s)"
            )
        self._store[self._indices(view)] = arr

    def matvec(self, vector) -> np.ndarray:
        """Row-wise dot products with `vector` (length must equal cols)."""
        return self._store.reshape(self._shape) @ np.asarray(vector, dtype=float)

    def rmatvec(self, vector) -> np.ndarray:
        """Column-wise dot products with `vector` (length must equal rows)."""
        return np.asarray(vector, dtype=float) @ self._store.reshape(self._shape)

    def to_numpy(self) -> np.ndarray:
        return self._store.reshape(self._shape).copy()

    def copy(self) -> "Array2D":
        result = Array2D(self._shape)
        result._store[:] = self._store
        return result

    def __len__(self) -> int:
        return self.rows

    def __repr__(self) -> str:
        return f"Array2D(shape={self._shape})"


def zeros(shape: Shape) -> Array2D:
    return Array2D(shape, 0.0)


def ones(shape: Shape) -> Array2D:
    return Array2D(shape, 1.0)
