# lss/solvers/factory.py
from typing import Dict, Type

import numpy as np

from lss.core.exceptions import LSSError, UnsupportedPrecisionError
from lss.solvers.base import Solver
from lss.solvers.lapack import LapackSolver

# Numeric types a linear system may be built with
SUPPORTED_PRECISIONS = frozenset({np.dtype(np.float32), np.dtype(np.float64)})

_solver_registry: Dict[str, Type[Solver]] = {
    LapackSolver.type_name: LapackSolver,
}


def get_solver_class(type_name: str) -> Type[Solver]:
    if not isinstance(type_name, str):
        raise LSSError("Solver type name must be a string.")
    solver_class = _solver_registry.get(type_name.lower())
    if solver_class is None:
        raise LSSError(f"Unknown solver type: {type_name}")
    return solver_class


def register_solver(type_name: str, solver_class: Type[Solver]) -> None:
    """
    Register a solver under `type_name` (case-insensitive).

    Raises:
        LSSError: If the name is not a string or the class is not a Solver.
        UnsupportedPrecisionError: If the solver binds no precision, or one
            outside single/double.
    """
    if not isinstance(type_name, str):
        raise LSSError("Solver type name must be a string.")
    if not (isinstance(solver_class, type) and issubclass(solver_class, Solver)):
        raise LSSError("Registered solver must be a subclass of Solver.")
    dtypes = {np.dtype(d) for d in solver_class.supported_dtypes}
    if not dtypes:
        raise UnsupportedPrecisionError(
            f"Solver '{type_name}' declares no supported precision.", None)
    unsupported = dtypes - SUPPORTED_PRECISIONS
    if unsupported:
        names = ", ".join(sorted(d.name for d in unsupported))
        raise UnsupportedPrecisionError(
            f"Solver '{type_name}' declares unsupported precision: {names}", unsupported)
    _solver_registry[type_name.lower()] = solver_class
