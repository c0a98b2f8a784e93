"""
Route Solver - Exhaustive Implementation
========================================
Exact solver that enumerates every visiting order of the required centers
together with every way of passing through the hub between them.

The networks served here have a handful of centers, so the n! * 2^n
candidates per start stay trivially small.

Version: 2.0.0
"""

import itertools
import logging
from typing import AbstractSet, Iterator, List, Sequence

from ..models import RoutePlan, SolverType
from ..network import Location
from .base import BaseRouteSolver

logger = logging.getLogger(__name__)


class ExhaustiveSolver(BaseRouteSolver):
    """
    Brute-force route solver.

    Algorithm, for a given start:
    1. Drop the start from the centers to visit (it is visited first)
    2. For every permutation of the remaining centers
    3. For every bitmask over the permutation, insert the hub before
       each center whose bit is set
    4. Finish at the hub and keep the cheapest candidate

    Guarantees:
    - Optimal under the "visit each center once, hub any number of times" model
    - Deterministic: ties keep the first candidate in sorted enumeration order
    """

    @property
    def solver_type(self) -> SolverType:
        return SolverType.EXHAUSTIVE

    def find_optimal_route(self, start: Location, centers_needed: AbstractSet[Location]) -> RoutePlan:
        hub = self.network.hub
        to_visit = sorted(center for center in centers_needed if center != start)

        if not to_visit:
            if start in centers_needed:
                stops = [start, hub]
                return RoutePlan(start=start, stops=stops, cost=self.route_cost(stops))
            return RoutePlan.unroutable(start)

        best = RoutePlan.unroutable(start)
        for candidate in self._candidate_routes(start, to_visit):
            cost = self.route_cost(candidate)
            if cost < best.cost:
                best = RoutePlan(start=start, stops=candidate, cost=cost)

        return best

    def _candidate_routes(self, start: Location, to_visit: Sequence[Location]) -> Iterator[List[Location]]:
        """Yield every permutation of ``to_visit`` under every hub-insertion mask."""
        hub = self.network.hub
        n = len(to_visit)

        for permutation in itertools.permutations(to_visit):
            for mask in range(1 << n):
                route = [start]
                for i, center in enumerate(permutation):
                    if (mask >> i) & 1:
                        route.append(hub)
                    route.append(center)

                if route[-1] != hub:
                    route.append(hub)
                yield route
