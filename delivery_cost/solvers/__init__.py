"""
Route Solvers Package
=====================
Contains all route solver implementations following the Strategy Pattern.

Usage:
    from delivery_cost.solvers import get_solver

    solver = get_solver(SolverType.EXHAUSTIVE, network)
    plan = solver.solve({"C1", "C3"})
"""

from typing import Dict, Type, Union

from ..models import SolverType
from ..network import DeliveryNetwork
from .base import BaseRouteSolver
from .exhaustive import ExhaustiveSolver


# Registry of available solvers
SOLVER_REGISTRY: Dict[SolverType, Type[BaseRouteSolver]] = {
    SolverType.EXHAUSTIVE: ExhaustiveSolver,
}


def get_solver(solver_type: Union[SolverType, str], network: DeliveryNetwork) -> BaseRouteSolver:
    """
    Factory function to get a solver instance by type.

    Args:
        solver_type: The type of solver to instantiate, or its name.
        network: The delivery network the solver routes over.

    Returns:
        An instance of the requested solver.

    Raises:
        ValueError: If solver type is not supported.
    """
    try:
        solver_type = SolverType(solver_type)
    except ValueError:
        raise ValueError(f"Unknown solver type: {solver_type}") from None

    solver_class = SOLVER_REGISTRY.get(solver_type)

    if solver_class is None:
        raise ValueError(f"Unknown solver type: {solver_type}")

    return solver_class(network)


def list_available_solvers() -> list[SolverType]:
    """Return list of available solver types."""
    return list(SOLVER_REGISTRY.keys())


__all__ = [
    'BaseRouteSolver',
    'ExhaustiveSolver',
    'get_solver',
    'list_available_solvers',
    'SOLVER_REGISTRY',
]
