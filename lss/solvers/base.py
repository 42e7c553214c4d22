# lss/solvers/base.py
"""
Base solver API for LSS.
A solver declares the numeric types it binds natively and the storage
orientation it works on, and commits a solution into a LinearSystem.
"""
from abc import ABC, abstractmethod
from typing import FrozenSet

import numpy as np


class Solver(ABC):
    """
    Abstract base class for linear system solvers.
    """
    type_name: str = ""
    supported_dtypes: FrozenSet[np.dtype] = frozenset()
    row_oriented: bool = True

    def supports(self, dtype) -> bool:
        return np.dtype(dtype) in self.supported_dtypes

    @abstractmethod
    def solve(self, system) -> None:
        """
        Solve A·x = b held by `system`, leaving the solution in system.x.

        Raises:
            LSSError subclasses for every fatal condition.
        """
        pass
