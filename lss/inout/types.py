# lss/inout/types.py
from dataclasses import dataclass

import numpy as np

from lss.core.index import IndexPair


@dataclass
class DenseData:
    """
    Result of a dense read.

    Attributes:
        size: Matrix size (rows, cols).
        grid: 2D array shaped (rows, cols) when read row oriented,
              (cols, rows) otherwise.
    """
    size: IndexPair
    grid: np.ndarray


@dataclass
class SparseData:
    """
    Result of a sparse read: parallel arrays of values and coordinates.

    Attributes:
        size: Matrix size (rows, cols).
        values: Entry values.
        row_indices: Row coordinate of each value, in index base `base`.
        col_indices: Column coordinate of each value, in index base `base`.
        base: Index base of the coordinates (0 or 1).
    """
    size: IndexPair
    values: np.ndarray
    row_indices: np.ndarray
    col_indices: np.ndarray
    base: int = 0

    @property
    def nnz(self) -> int:
        return int(self.values.size)
