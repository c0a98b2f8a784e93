"""
Route Solvers - Abstract Base Class
===================================
Defines the interface that all route solver implementations must follow.
This enables the Strategy Pattern for easy algorithm switching.

Version: 2.0.0
"""

from abc import ABC, abstractmethod
from typing import AbstractSet, Sequence
import logging
import math

from ..models import RoutePlan, SolverType
from ..network import DeliveryNetwork, Location

logger = logging.getLogger(__name__)


class BaseRouteSolver(ABC):
    """
    Abstract base class for route solver implementations.

    A solver is bound to one immutable ``DeliveryNetwork`` and is safe to
    share between concurrent requests. Subclasses implement
    ``find_optimal_route`` for a fixed start; ``solve`` tries every center
    of the network as the start and keeps the cheapest plan.

    Example:
        class MyCustomSolver(BaseRouteSolver):
            @property
            def solver_type(self) -> SolverType:
                return SolverType.EXHAUSTIVE

            def find_optimal_route(self, start, centers_needed) -> RoutePlan:
                # Implementation here
                pass
    """

    def __init__(self, network: DeliveryNetwork):
        self.network = network

    @property
    @abstractmethod
    def solver_type(self) -> SolverType:
        """Return the solver type identifier."""
        pass

    @abstractmethod
    def find_optimal_route(self, start: Location, centers_needed: AbstractSet[Location]) -> RoutePlan:
        """
        Find the cheapest route from ``start`` through every needed center to the hub.

        Args:
            start: Center the trip starts from. Need not be in ``centers_needed``.
            centers_needed: Centers that must each be visited at least once.

        Returns:
            The best RoutePlan, or an unroutable plan if none exists.
        """
        pass

    def solve(self, centers_needed: AbstractSet[Location]) -> RoutePlan:
        """
        Find the cheapest route over every possible starting center.

        Args:
            centers_needed: Non-empty set of centers to visit.

        Returns:
            The overall best RoutePlan; unroutable if no start works.
        """
        best = None
        for start in self.network.centers:
            plan = self.find_optimal_route(start, centers_needed)
            logger.debug(f"[{self.solver_type.value}] start={start} cost={plan.cost}")
            if best is None or plan.cost < best.cost:
                best = plan

        if best is None or not best.is_routable:
            return RoutePlan.unroutable(self.network.centers[0])
        return best

    def route_cost(self, route: Sequence[Location]) -> float:
        """
        Cost of travelling ``route`` in order.

        Any leg missing from the distance table makes the whole route
        cost ``inf``.
        """
        if len(route) < 2:
            return 0.0

        total = 0.0
        for origin, destination in zip(route, route[1:]):
            distance = self.network.distances.distance(origin, destination)
            if math.isinf(distance):
                return math.inf
            total += distance * self.network.unit_cost
        return total
