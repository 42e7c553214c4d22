# lss/inout/reader.py
"""
Generic read dispatch: picks a format backend from the filename extension
and converts the float64 result to the caller's dtype.
"""
import os
from types import ModuleType
from typing import Dict, Optional

import numpy as np

from lss.core.exceptions import FormatDetectionError, LSSError
from lss.core.index import storage_conversion
from lss.inout import csr, harwell_boeing, matrix_market
from lss.inout.types import DenseData, SparseData
from lss.utils.logging_config import get_logger

logger = get_logger(__name__)

# extension (case-sensitive) -> backend exposing read_dense/read_sparse
_format_registry: Dict[str, ModuleType] = {
    matrix_market.EXTENSION: matrix_market,
    harwell_boeing.EXTENSION: harwell_boeing,
    csr.EXTENSION: csr,
}


def detect_format(filename) -> ModuleType:
    """
    Return the backend for `filename`.

    Raises:
        FormatDetectionError: If the extension is missing or not registered.
    """
    filename = os.fspath(filename)
    ext = os.path.splitext(filename)[1]
    backend = _format_registry.get(ext)
    if backend is None:
        logger.error("file format not detected for '%s'", filename)
        raise FormatDetectionError(filename)
    return backend


def register_format(extension: str, backend) -> None:
    if not isinstance(extension, str) or not extension.startswith("."):
        raise LSSError("Format extension must be a string starting with '.'.")
    if not (callable(getattr(backend, "read_dense", None))
            and callable(getattr(backend, "read_sparse", None))):
        raise LSSError("Registered format backend must provide read_dense and read_sparse.")
    _format_registry[extension] = backend


def _needs_conversion(dtype) -> bool:
    return np.dtype(dtype) != np.float64


def read_dense(filename, row_oriented: bool = True, dtype=np.float64) -> Optional[DenseData]:
    """
    Read any supported file format into a dense grid of `dtype`.

    Args:
        filename: Path to a .mtx, .rua or .csr file.
        row_oriented: Grid shaped (rows, cols) if True, (cols, rows) otherwise.
        dtype: Target numeric type; reading itself always happens in float64.

    Returns:
        DenseData, or None if the backend could not parse the file.

    Raises:
        FormatDetectionError: If the extension is not recognised.
    """
    backend = detect_format(filename)
    data = backend.read_dense(os.fspath(filename), row_oriented)
    if data is None:
        return None
    if _needs_conversion(dtype):
        data = DenseData(size=data.size, grid=storage_conversion(dtype)(data.grid))
    return data


def read_sparse(filename, row_oriented: bool = True, base: int = 0,
                dtype=np.float64) -> Optional[SparseData]:
    """
    Read any supported file format into coordinate arrays of `dtype`.

    Returns:
        SparseData with coordinates in index base `base`, or None if the
        backend could not parse the file.

    Raises:
        FormatDetectionError: If the extension is not recognised.
    """
    backend = detect_format(filename)
    data = backend.read_sparse(os.fspath(filename), row_oriented, base)
    if data is None:
        return None
    if _needs_conversion(dtype):
        data = SparseData(size=data.size,
                          values=storage_conversion(dtype)(data.values),
                          row_indices=data.row_indices,
                          col_indices=data.col_indices,
                          base=data.base)
    return data
