# lss/solvers/lapack.py
"""
Dense general solver through LAPACK ?gesv (LU with partial pivoting).
Only square matrices in single or double precision are supported.
"""
from typing import Callable, Dict, Optional

import numpy as np
from scipy.linalg import lapack

from lss.core.exceptions import (
    DimensionError,
    NativeArgumentError,
    SingularMatrixError,
    UnsupportedPrecisionError,
)
from lss.solvers.base import Solver
from lss.utils.logging_config import get_logger

logger = get_logger(__name__)

# dtype -> native routine: (a, b, overwrite_a, overwrite_b) -> (lu, piv, x, info)
NATIVE_ROUTINES: Dict[np.dtype, Callable] = {
    np.dtype(np.float64): lapack.dgesv,
    np.dtype(np.float32): lapack.sgesv,
}


def check_status(info: int, routine: str = "dgesv_()/sgesv_()") -> None:
    """
    Translate a ?gesv status code into an exception.

    info < 0: argument number -info was invalid.
    info > 0: U(info, info) is exactly zero.
    """
    info = int(info)
    if info < 0:
        msg = f"LAPACK: invalid {-info}'th argument to {routine}"
        logger.error(msg)
        raise NativeArgumentError(msg, position=-info)
    if info > 0:
        msg = (f"LAPACK: triangular factor matrix U({info},{info}) is zero, "
               f"so A is singular (not invertible)")
        logger.error(msg)
        raise SingularMatrixError(msg, position=info)


class LapackSolver(Solver):
    """
    Example linear system solver using LAPACK.

    A is handed to the native routine as a column-major copy so it is left
    untouched; on success the right-hand side buffer becomes the solution
    and b is cleared.
    """
    type_name = "lapack"
    supported_dtypes = frozenset(NATIVE_ROUTINES)
    row_oriented = False

    def __init__(self):
        self.last_pivots: Optional[np.ndarray] = None

    def solve(self, system) -> None:
        A, b, x = system.A, system.b, system.x
        size = A.size
        if not (size.is_valid_size() and size.is_square_size()):
            msg = "LAPACK: system matrix size must be square"
            logger.error("%s, got %s", msg, size.as_tuple())
            raise DimensionError(msg, size)

        n = size.i
        nrhs = b.shape[1]
        pivots = np.zeros(n, dtype=np.int32)

        routine = NATIVE_ROUTINES.get(np.dtype(system.dtype))
        if routine is None:
            msg = f"LAPACK: precision not implemented: {np.dtype(system.dtype).name}"
            logger.error(msg)
            raise UnsupportedPrecisionError(msg, system.dtype)

        name = getattr(routine, "__name__", "gesv")
        logger.info("LAPACK: solving n=%d, nrhs=%d with %s", n, nrhs, name)
        _, piv, solution, info = routine(A.fortran_copy(), b.array,
                                         overwrite_a=True, overwrite_b=True)
        check_status(info)

        pivots[:] = np.asarray(piv)[:n]
        self.last_pivots = pivots

        # solution takes the place of b, then swaps into x (A square: size b == size x)
        b.assign(np.asarray(solution).reshape(n, nrhs))
        b.swap(x)
        b.clear()
