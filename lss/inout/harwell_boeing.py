# lss/inout/harwell_boeing.py
"""
Harwell-Boeing (.rua, real unsymmetric assembled) backend.
"""
from typing import Optional

from scipy.io import hb_read

from lss.inout._convert import to_dense, to_sparse
from lss.inout.types import DenseData, SparseData
from lss.utils.logging_config import get_logger

logger = get_logger(__name__)

EXTENSION = ".rua"


def read_dense(filename: str, row_oriented: bool = True) -> Optional[DenseData]:
    try:
        data = to_dense(hb_read(filename), row_oriented)
    except Exception as e:
        logger.warning("HarwellBoeing: cannot read '%s': %s", filename, e)
        return None
    logger.debug("HarwellBoeing: read dense %s from '%s'", data.size.as_tuple(), filename)
    return data


def read_sparse(filename: str, row_oriented: bool = True, base: int = 0) -> Optional[SparseData]:
    try:
        data = to_sparse(hb_read(filename), row_oriented, base)
    except Exception as e:
        logger.warning("HarwellBoeing: cannot read '%s': %s", filename, e)
        return None
    logger.debug("HarwellBoeing: read %d entries %s from '%s'",
                 data.nnz, data.size.as_tuple(), filename)
    return data
