# lss/core/system.py
"""
Linear system A·x = b: owns the matrix, right-hand side and solution
storages and delegates solving to a solver chosen at construction.
"""
from __future__ import annotations
import math
import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Union

import numpy as np

from lss.core.exceptions import (
    DimensionError,
    ErrorKind,
    LSSError,
    ParseError,
    UnsupportedPrecisionError,
)
from lss.core.index import IndexPair
from lss.core.storage import DenseStorage
from lss.inout.reader import read_dense
from lss.inout.types import DenseData
from lss.solvers.factory import get_solver_class
from lss.utils.logging_config import get_logger

logger = get_logger(__name__)

Source = Union[str, "os.PathLike[str]", Sequence[float], np.ndarray]


class SystemState(Enum):
    EMPTY = "empty"
    SIZED = "sized"
    POPULATED = "populated"
    SOLVED = "solved"


@dataclass
class SolveResult:
    """
    Outcome of LinearSystem.try_solve().

    Attributes:
        ok: True when the solution was committed into x.
        error: The fatal condition that aborted the solve, if any.
    """
    ok: bool
    error: Optional[LSSError] = None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error is not None else None


def _is_path(source) -> bool:
    return isinstance(source, (str, os.PathLike))


class LinearSystem:
    """
    Dense linear system in single or double precision.

    Sizes follow A (i x j), b (i x k), x (j x k), where k is the number of
    right-hand sides. rows(A) == rows(b) holds after every resize/initialize.
    """

    def __init__(self, dtype=np.float64, solver: str = "lapack"):
        self.solver = get_solver_class(solver)()
        if not self.solver.supports(dtype):
            msg = f"{self.solver.type_name}: precision not implemented: {np.dtype(dtype).name}"
            logger.error(msg)
            raise UnsupportedPrecisionError(msg, dtype)
        self.dtype = np.dtype(dtype)
        orientation = self.solver.row_oriented
        self._A = DenseStorage(self.dtype, orientation)
        self._b = DenseStorage(self.dtype, orientation)
        self._x = DenseStorage(self.dtype, orientation)
        self._state = SystemState.EMPTY

    # ------------------------------------------------------------------
    # Storage access
    # ------------------------------------------------------------------
    @property
    def A(self) -> DenseStorage:
        return self._A

    @property
    def b(self) -> DenseStorage:
        return self._b

    @property
    def x(self) -> DenseStorage:
        return self._x

    @property
    def state(self) -> SystemState:
        return self._state

    def size(self, d: Optional[int] = None):
        """
        size() -> IndexPair of A; size(0) rows of A, size(1) columns of A,
        size(2) number of right-hand sides.
        """
        if d is None:
            return self._A.size
        if d == 0:
            return self._A.shape[0]
        if d == 1:
            return self._A.shape[1]
        if d == 2:
            # b is cleared by a solve; x keeps the right-hand side count
            return self._b.shape[1] if not self._b.is_empty() else self._x.shape[1]
        raise ValueError(f"size dimension must be 0, 1 or 2, got {d}")

    # ------------------------------------------------------------------
    # Sizing and population
    # ------------------------------------------------------------------
    def resize(self, size_i: int, size_j: int, size_k: int = 1, value=0) -> "LinearSystem":
        """Consistently resize A, b and x, discarding their content."""
        if not (IndexPair(size_i, size_j).is_valid_size() and IndexPair(size_i, size_k).is_valid_size()):
            raise DimensionError(
                f"invalid linear system size ({size_i}, {size_j}, {size_k})",
                (size_i, size_j, size_k))
        self._A.resize(size_i, size_j, value)
        self._b.resize(size_i, size_k, value)
        self._x.resize(size_j, size_k, value)
        self._state = SystemState.SIZED
        logger.debug("resized system to A %s, nrhs %d", (size_i, size_j), size_k)
        return self

    def initialize(self, A: Source, b: Optional[Source] = None,
                   x: Optional[Source] = None) -> "LinearSystem":
        """
        Populate the system from files and/or flat value sequences.

        A file for A defines the system size; flat values for A must match
        the current size, or form an n x n matrix when the system is empty.
        b and x default to the content left by resize. Value sequences are
        listed in row-major order.

        Raises:
            FormatDetectionError, ParseError, DimensionError
        """
        b_data = self._read(b) if _is_path(b) else None

        if _is_path(A):
            a_data = self._read(A)
            rows, cols = a_data.size.as_tuple()
            self.resize(rows, cols, self._nrhs_for(rows, b, b_data))
            self._A.assign_dense(a_data, self._A.row_oriented)
        else:
            values = np.asarray(A, dtype=self.dtype).ravel()
            if self._state is SystemState.EMPTY:
                n = math.isqrt(values.size)
                if n == 0 or n * n != values.size:
                    raise DimensionError(
                        f"cannot infer a square size from {values.size} values", values.size)
                self.resize(n, n, self._nrhs_for(n, b, b_data))
            elif b is not None:
                rows = self.size(0)
                k = self._nrhs_for(rows, b, b_data)
                if k != self._b.shape[1]:
                    self.resize(rows, self.size(1), k)
            elif self._b.is_empty():
                # solved system: restore b/x storage for the current shape
                self.resize(self.size(0), self.size(1), max(self._x.shape[1], 1))
            self._A.assign_values(values)

        if b is not None:
            self._assign(self._b, b, b_data)
        if x is not None:
            self._assign(self._x, x, self._read(x) if _is_path(x) else None)

        self._state = SystemState.POPULATED
        return self

    def set_rhs(self, b: Source) -> "LinearSystem":
        """Supply a fresh right-hand side, keeping A (e.g. after a solve)."""
        if self._state is SystemState.EMPTY:
            raise DimensionError("cannot set a right-hand side on an empty system", self.size())
        b_data = self._read(b) if _is_path(b) else None
        rows = self.size(0)
        k = self._nrhs_for(rows, b, b_data)
        self._b.resize(rows, k)
        self._x.resize(self.size(1), k)
        self._assign(self._b, b, b_data)
        self._state = SystemState.POPULATED
        return self

    def _read(self, path) -> DenseData:
        data = read_dense(path, row_oriented=self._A.row_oriented, dtype=self.dtype)
        if data is None:
            raise ParseError(os.fspath(path))
        return data

    def _nrhs_for(self, rows: int, b: Optional[Source], b_data: Optional[DenseData]) -> int:
        if b_data is not None:
            if b_data.size.i != rows:
                raise DimensionError(
                    f"right-hand side has {b_data.size.i} rows, matrix has {rows}", b_data.size)
            return b_data.size.j
        if b is not None:
            count = np.asarray(b).size
            if count == 0 or count % rows:
                raise DimensionError(
                    f"{count} right-hand side values do not fit {rows} rows", count)
            return count // rows
        return 1

    def _assign(self, storage: DenseStorage, source: Source, data: Optional[DenseData]) -> None:
        if data is not None:
            if data.size.as_tuple() != storage.shape:
                raise DimensionError(
                    f"file data of size {data.size.as_tuple()} does not fit {storage.shape}",
                    data.size)
            storage.assign_dense(data, storage.row_oriented)
        else:
            storage.assign_values(source)

    # ------------------------------------------------------------------
    # Solving
    # ------------------------------------------------------------------
    def solve(self) -> "LinearSystem":
        """
        Solve the system; on success x holds the solution and b is empty.

        Raises:
            DimensionError, NativeArgumentError, SingularMatrixError,
            UnsupportedPrecisionError
        """
        if self._b.is_empty():
            raise DimensionError("right-hand side is empty; populate b before solving",
                                 self._b.size)
        if self._state is not SystemState.POPULATED:
            raise DimensionError(
                f"system is {self._state.value}, not populated; initialize it before solving",
                self._A.size)
        self.solver.solve(self)
        self._state = SystemState.SOLVED
        return self

    def try_solve(self) -> SolveResult:
        """Like solve(), but report a fatal condition as a value."""
        try:
            self.solve()
        except LSSError as e:
            return SolveResult(ok=False, error=e)
        return SolveResult(ok=True)

    def solution(self) -> np.ndarray:
        """Copy of x; a 1D array for a single right-hand side."""
        x = np.array(self._x.array)
        return x[:, 0] if x.ndim == 2 and x.shape[1] == 1 else x

    def __repr__(self) -> str:
        return (f"LinearSystem(dtype={self.dtype.name}, A={self._A.shape}, "
                f"b={self._b.shape}, x={self._x.shape}, state={self._state.value})")
