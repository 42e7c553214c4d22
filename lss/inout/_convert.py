# lss/inout/_convert.py
"""
Shared conversion of a parsed matrix (dense ndarray or scipy.sparse) into the
DenseData/SparseData structures every format backend returns.
"""
from __future__ import annotations

import numpy as np
import scipy.sparse as sp

from lss.core.index import IndexPair
from lss.core.transforms import offset_shift
from lss.inout.types import DenseData, SparseData


def check_real(M) -> None:
    data = M.data if sp.issparse(M) else np.asarray(M)
    if np.iscomplexobj(data):
        raise ValueError("complex-valued matrices are not supported")


def to_dense(M, row_oriented: bool) -> DenseData:
    """Materialise M (absent entries become 0.0) in the requested orientation."""
    check_real(M)
    A = M.toarray() if sp.issparse(M) else np.asarray(M)
    A = np.asarray(A, dtype=np.float64)
    if A.ndim == 1:
        A = A.reshape(-1, 1)
    grid = np.ascontiguousarray(A if row_oriented else A.T)
    return DenseData(size=IndexPair(*A.shape), grid=grid)


def to_sparse(M, row_oriented: bool, base: int) -> SparseData:
    """
    Coordinate arrays of M, ordered row-major when row oriented and
    column-major otherwise, with indices shifted to `base`.
    """
    check_real(M)
    if sp.issparse(M):
        coo = sp.coo_matrix(M)
        coo.sum_duplicates()
        coo.eliminate_zeros()
        rows, cols, vals = coo.row, coo.col, coo.data
        shape = coo.shape
    else:
        A = np.asarray(M)
        if A.ndim == 1:
            A = A.reshape(-1, 1)
        rows, cols = np.nonzero(A)
        vals = A[rows, cols]
        shape = A.shape

    # np.lexsort sorts by the last key first
    order = np.lexsort((cols, rows)) if row_oriented else np.lexsort((rows, cols))
    row_list = rows[order].tolist()
    col_list = cols[order].tolist()
    if base:
        offset_shift(row_list, base)
        offset_shift(col_list, base)

    return SparseData(
        size=IndexPair(*shape),
        values=np.asarray(vals, dtype=np.float64)[order],
        row_indices=np.asarray(row_list, dtype=np.int64),
        col_indices=np.asarray(col_list, dtype=np.int64),
        base=base,
    )
