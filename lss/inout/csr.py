# lss/inout/csr.py
"""
CSR (.csr) backend: a compressed-row text format in the Matrix Market style.

Expected file format (lines starting with '%' are comments):
  nrows ncols nnz
  <nrows + 1 row pointers>
  <nnz column indices>
  <nnz values>

Pointers and column indices are 1-based. After the size line, tokens are
whitespace separated and may be broken across lines freely.
"""
from typing import Optional, Tuple

import numpy as np
import scipy.sparse as sp

from lss.inout._convert import to_dense, to_sparse
from lss.inout.types import DenseData, SparseData
from lss.utils.logging_config import get_logger

logger = get_logger(__name__)

EXTENSION = ".csr"


def parse_csr_file(filename: str) -> sp.csr_matrix:
    """
    Parse a .csr file into a scipy CSR matrix.

    Raises:
        ValueError: If the header or the compressed arrays are malformed.
    """
    tokens = []
    with open(filename) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("%"):
                continue
            tokens.extend(line.split())
    if len(tokens) < 3:
        raise ValueError("missing 'nrows ncols nnz' size line")

    try:
        nrows, ncols, nnz = (int(t) for t in tokens[:3])
    except ValueError as e:
        raise ValueError(f"invalid size line: {e}")
    if nrows <= 0 or ncols <= 0 or nnz < 0:
        raise ValueError(f"invalid size {nrows} x {ncols} with {nnz} entries")

    body = tokens[3:]
    expected = (nrows + 1) + 2 * nnz
    if len(body) != expected:
        raise ValueError(f"expected {expected} tokens after the size line, found {len(body)}")

    ptr, idx, vals = _split_body(body, nrows, nnz)
    if ptr[0] != 1 or ptr[-1] != nnz + 1 or np.any(np.diff(ptr) < 0):
        raise ValueError("row pointers must start at 1, not decrease, and end at nnz + 1")
    if nnz and (idx.min() < 1 or idx.max() > ncols):
        raise ValueError(f"column index out of range [1, {ncols}]")

    return sp.csr_matrix((vals, idx - 1, ptr - 1), shape=(nrows, ncols))


def _split_body(body, nrows: int, nnz: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    try:
        ptr = np.array([int(t) for t in body[:nrows + 1]], dtype=np.int64)
        idx = np.array([int(t) for t in body[nrows + 1:nrows + 1 + nnz]], dtype=np.int64)
        vals = np.array([float(t) for t in body[nrows + 1 + nnz:]], dtype=np.float64)
    except ValueError as e:
        raise ValueError(f"invalid compressed data: {e}")
    return ptr, idx, vals


def read_dense(filename: str, row_oriented: bool = True) -> Optional[DenseData]:
    try:
        data = to_dense(parse_csr_file(filename), row_oriented)
    except (OSError, ValueError) as e:
        logger.warning("CSR: cannot read '%s': %s", filename, e)
        return None
    logger.debug("CSR: read dense %s from '%s'", data.size.as_tuple(), filename)
    return data


def read_sparse(filename: str, row_oriented: bool = True, base: int = 0) -> Optional[SparseData]:
    try:
        data = to_sparse(parse_csr_file(filename), row_oriented, base)
    except (OSError, ValueError) as e:
        logger.warning("CSR: cannot read '%s': %s", filename, e)
        return None
    logger.debug("CSR: read %d entries %s from '%s'",
                 data.nnz, data.size.as_tuple(), filename)
    return data
