# lss/core/index.py
"""
Index primitives shared by every other LSS module: the (row, col) index
pair, coordinate matrix entries, and the small key/predicate/conversion
callables used to sort, filter and re-type them.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Tuple

import numpy as np

# Largest unsigned 64-bit value; marks an index as unbounded/invalid.
INDEX_MAX: int = int(np.iinfo(np.uint64).max)


@dataclass(order=True)
class IndexPair:
    """
    Index pair, the fundamental dereferencing type.

    Compares lexicographically, row first. Used either as a position or as a
    size; only sizes are required to satisfy is_valid_size().
    """
    i: int = INDEX_MAX
    j: int = INDEX_MAX

    def __post_init__(self):
        self.i = int(self.i)
        self.j = int(self.j)

    @property
    def row(self) -> int:
        return self.i

    @property
    def col(self) -> int:
        return self.j

    def invalidate(self) -> "IndexPair":
        self.i = self.j = INDEX_MAX
        return self

    def is_valid_size(self) -> bool:
        return 0 < self.i < INDEX_MAX and 0 < self.j < INDEX_MAX

    def is_square_size(self) -> bool:
        return self.i == self.j

    def is_diagonal(self) -> bool:
        return self.is_square_size()

    def as_tuple(self) -> Tuple[int, int]:
        return (self.i, self.j)


@dataclass
class CoordEntry:
    """Coordinate matrix entry: a position and its value."""
    position: IndexPair
    value: float

    @property
    def i(self) -> int:
        return self.position.i

    @property
    def j(self) -> int:
        return self.position.j


# -- ordering keys (for sorted()/list.sort()) --------------------------------

def by_row(entry: CoordEntry) -> Tuple[int, int]:
    return (entry.i, entry.j)


def by_column(entry: CoordEntry) -> Tuple[int, int]:
    return (entry.j, entry.i)


# -- predicates (for filter()/row or column compression) ---------------------

def row_equal_to(i: int) -> Callable[[CoordEntry], bool]:
    return lambda entry: entry.i == i


def column_equal_to(j: int) -> Callable[[CoordEntry], bool]:
    return lambda entry: entry.j == j


# -- conversions -------------------------------------------------------------

def base_conversion(delta: int) -> Callable[[int], int]:
    """Index base conversion: shift a single index by a signed delta."""
    return lambda v: int(v) + delta


def storage_conversion(dtype) -> Callable[[np.ndarray], np.ndarray]:
    """
    Storage type conversion from float64 to `dtype`.

    Narrowing is silent; integral targets truncate toward zero.
    """
    target = np.dtype(dtype)
    return lambda values: np.asarray(values, dtype=np.float64).astype(target)
