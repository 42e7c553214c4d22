# lss/inout/matrix_market.py
"""
Matrix Market (.mtx) backend, both `array` and `coordinate` layouts.
"""
from typing import Optional

from scipy.io import mmread

from lss.inout._convert import to_dense, to_sparse
from lss.inout.types import DenseData, SparseData
from lss.utils.logging_config import get_logger

logger = get_logger(__name__)

EXTENSION = ".mtx"


def _load(filename: str):
    return mmread(filename)


def read_dense(filename: str, row_oriented: bool = True) -> Optional[DenseData]:
    """
    Read a Matrix Market file into a dense grid.

    Returns:
        DenseData on success, None if the file cannot be parsed.
    """
    try:
        data = to_dense(_load(filename), row_oriented)
    except Exception as e:
        logger.warning("MatrixMarket: cannot read '%s': %s", filename, e)
        return None
    logger.debug("MatrixMarket: read dense %s from '%s'", data.size.as_tuple(), filename)
    return data


def read_sparse(filename: str, row_oriented: bool = True, base: int = 0) -> Optional[SparseData]:
    """
    Read a Matrix Market file into coordinate arrays.

    Returns:
        SparseData on success, None if the file cannot be parsed.
    """
    try:
        data = to_sparse(_load(filename), row_oriented, base)
    except Exception as e:
        logger.warning("MatrixMarket: cannot read '%s': %s", filename, e)
        return None
    logger.debug("MatrixMarket: read %d entries %s from '%s'",
                 data.nnz, data.size.as_tuple(), filename)
    return data
