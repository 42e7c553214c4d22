# lss/core/storage.py
from __future__ import annotations
from typing import Sequence, Tuple

import numpy as np

from lss.core.exceptions import DimensionError, LSSError
from lss.core.index import IndexPair
from lss.inout.types import DenseData, SparseData


class DenseStorage:
    """
    Dense matrix/array held in one contiguous 1D buffer.

    The logical shape is (rows, cols); the orientation (row- or
    column-major buffer layout) is fixed at construction. The shape only
    changes through resize() or clear().
    """
    __slots__ = ("dtype", "row_oriented", "_buf", "_shape")

    def __init__(self, dtype=np.float64, row_oriented: bool = True):
        self.dtype = np.dtype(dtype)
        self.row_oriented = row_oriented
        self._buf = np.empty(0, dtype=self.dtype)
        self._shape: Tuple[int, int] = (0, 0)

    @property
    def order(self) -> str:
        return "C" if self.row_oriented else "F"

    @property
    def shape(self) -> Tuple[int, int]:
        return self._shape

    @property
    def size(self) -> IndexPair:
        return IndexPair(*self._shape)

    @property
    def buffer(self) -> np.ndarray:
        """The underlying flat buffer (shared, not a copy)."""
        return self._buf

    @property
    def array(self) -> np.ndarray:
        """2D view of the buffer in the logical (rows, cols) shape."""
        return self._buf.reshape(self._shape, order=self.order)

    def is_empty(self) -> bool:
        return self._buf.size == 0

    def resize(self, rows: int, cols: int, value=0) -> "DenseStorage":
        """Reallocate to (rows, cols), discarding content, filled with `value`."""
        if rows < 0 or cols < 0:
            raise DimensionError(f"negative storage size ({rows}, {cols})", (rows, cols))
        self._buf = np.full(rows * cols, value, dtype=self.dtype)
        self._shape = (int(rows), int(cols))
        return self

    def clear(self) -> "DenseStorage":
        return self.resize(0, 0)

    def __getitem__(self, key):
        return self.array[key]

    def __setitem__(self, key, value):
        self.array[key] = value

    def assign(self, grid) -> "DenseStorage":
        """Copy a 2D array given in the logical (rows, cols) shape."""
        grid = np.asarray(grid)
        if grid.shape != self._shape:
            raise DimensionError(
                f"cannot assign {grid.shape} values to storage of size {self._shape}", self.size)
        self.array[...] = grid
        return self

    def assign_values(self, values: Sequence) -> "DenseStorage":
        """Copy a flat sequence listed in row-major logical order."""
        values = np.asarray(values, dtype=self.dtype).ravel()
        if values.size != self._buf.size:
            raise DimensionError(
                f"expected {self._buf.size} values for storage of size {self._shape}, "
                f"got {values.size}", self.size)
        self.array[...] = values.reshape(self._shape)
        return self

    def assign_dense(self, data: DenseData, row_oriented: bool) -> "DenseStorage":
        """Copy the grid of a dense read made with the given orientation."""
        return self.assign(data.grid if row_oriented else data.grid.T)

    def assign_sparse(self, data: SparseData) -> "DenseStorage":
        """Zero the storage and scatter the entries of a sparse read."""
        if data.size.as_tuple() != self._shape:
            raise DimensionError(
                f"cannot assign {data.size.as_tuple()} entries to storage of size {self._shape}",
                self.size)
        self._buf[:] = 0
        self.array[data.row_indices - data.base, data.col_indices - data.base] = data.values
        return self

    def fortran_copy(self) -> np.ndarray:
        """Column-major 2D copy, the layout LAPACK routines work on."""
        return np.array(self.array, dtype=self.dtype, order="F", copy=True)

    def swap(self, other: "DenseStorage") -> None:
        """Exchange contents with another storage of the same dtype and orientation."""
        if other.dtype != self.dtype or other.row_oriented != self.row_oriented:
            raise LSSError("Can only swap storages of identical dtype and orientation.")
        self._buf, other._buf = other._buf, self._buf
        self._shape, other._shape = other._shape, self._shape

    def __repr__(self) -> str:
        return f"DenseStorage(shape={self._shape}, dtype={self.dtype}, order='{self.order}')"
