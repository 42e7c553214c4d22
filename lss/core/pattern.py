# lss/core/pattern.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List

import numpy as np

from lss.core.exceptions import DimensionError
from lss.core.index import CoordEntry, IndexPair, by_column, by_row
from lss.core.transforms import (
    VECTOR_SORTED,
    VECTOR_SORTED_DIAGONAL_FIRST,
    offset_shift,
    sort_unique,
)


@dataclass
class SparsityPattern:
    """
    Compressed sparsity pattern: CSR when row oriented, CSC otherwise.

    `ptr` has one entry per major line plus one; `idx` holds the minor
    indices of each line in ptr[k]:ptr[k+1] (both in index base `base`).
    The pattern depends only on entry positions, never on their values.
    """
    ptr: np.ndarray           # int64
    idx: np.ndarray           # int64
    size: IndexPair
    row_oriented: bool = True
    base: int = 0

    @property
    def nnz(self) -> int:
        return int(self.idx.size)

    def line(self, k: int) -> np.ndarray:
        """Minor indices (in `base`) of major line k (0-based)."""
        lo, hi = self.ptr[k] - self.base, self.ptr[k + 1] - self.base
        return self.idx[lo:hi]


def build_pattern(
    entries: Iterable[CoordEntry],
    size: IndexPair,
    row_oriented: bool = True,
    diagonal_first: bool = False,
    base: int = 0,
) -> SparsityPattern:
    """
    Build the compressed pattern of `entries` for a matrix of `size`.

    Every major line whose index is also a valid minor index lists its
    diagonal position, even when no entry sits there; with `diagonal_first`
    that position comes first in the line.
    """
    if not size.is_valid_size():
        raise DimensionError(f"invalid pattern size {size.as_tuple()}", size)

    n_major, n_minor = (size.i, size.j) if row_oriented else (size.j, size.i)
    chain = VECTOR_SORTED_DIAGONAL_FIRST if diagonal_first else VECTOR_SORTED

    lines: Dict[int, List[int]] = {}
    for e in sorted(entries, key=by_row if row_oriented else by_column):
        if e.i >= size.i or e.j >= size.j:
            raise DimensionError(
                f"entry {e.position.as_tuple()} outside matrix of size {size.as_tuple()}", size)
        major, minor = (e.i, e.j) if row_oriented else (e.j, e.i)
        lines.setdefault(major, []).append(minor)

    ptr = [0]
    idx: List[int] = []
    for k in range(n_major):
        v = lines.get(k, [])
        if k < n_minor:
            chain.apply(v, k)
        else:
            sort_unique(v)
        idx.extend(v)
        ptr.append(len(idx))

    if base:
        offset_shift(ptr, base)
        offset_shift(idx, base)

    return SparsityPattern(
        ptr=np.asarray(ptr, dtype=np.int64),
        idx=np.asarray(idx, dtype=np.int64),
        size=IndexPair(size.i, size.j),
        row_oriented=row_oriented,
        base=base,
    )
