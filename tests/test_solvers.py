import math

import pytest

from delivery_cost.models import SolverType
from delivery_cost.solvers import (
    ExhaustiveSolver, get_solver, list_available_solvers
)


def test_route_cost_sums_legs_times_unit_cost(standard_network):
    solver = ExhaustiveSolver(standard_network)
    assert solver.route_cost(["C1", "C3", "L1"]) == (3 + 2) * 3
    assert solver.route_cost(["C1", "L1", "C2", "L1"]) == (3 + 2.5 + 2.5) * 3


def test_route_cost_unreachable_leg_is_infinite(hub_transit_network):
    solver = ExhaustiveSolver(hub_transit_network)
    assert math.isinf(solver.route_cost(["C1", "C2", "L1"]))


def test_route_cost_short_route_is_free(standard_network):
    solver = ExhaustiveSolver(standard_network)
    assert solver.route_cost(["C1"]) == 0


def test_single_required_start_goes_straight_to_hub(standard_network):
    plan = ExhaustiveSolver(standard_network).find_optimal_route("C1", {"C1"})
    assert plan.stops == ["C1", "L1"]
    assert plan.cost == 9


def test_start_not_required_and_nothing_to_visit_is_unroutable(standard_network):
    plan = ExhaustiveSolver(standard_network).find_optimal_route("C2", set())
    assert not plan.is_routable
    assert math.isinf(plan.cost)
    assert plan.stops == []


def test_unrequired_start_still_visits_required_centers(standard_network):
    plan = ExhaustiveSolver(standard_network).find_optimal_route("C2", {"C1"})
    assert plan.stops[0] == "C2"
    assert plan.stops[-1] == "L1"
    assert "C1" in plan.stops
    assert plan.cost == (4 + 3) * 3


@pytest.mark.parametrize(
    "centers, expected_cost, expected_stops",
    [
        ({"C1"}, 9, ["C1", "L1"]),
        ({"C1", "C3"}, 15, ["C1", "C3", "L1"]),
        ({"C1", "C2"}, 19.5, ["C1", "C2", "L1"]),
        ({"C1", "C2", "C3"}, 25.5, ["C1", "C3", "C2", "L1"]),
    ],
)
def test_exhaustive_standard_network(standard_network, centers, expected_cost, expected_stops):
    plan = ExhaustiveSolver(standard_network).solve(centers)
    assert plan.cost == pytest.approx(expected_cost)
    assert plan.stops == expected_stops


def test_exhaustive_long_haul_picks_best_start(long_haul_network):
    plan = ExhaustiveSolver(long_haul_network).solve({"C1", "C2"})
    assert plan.start == "C2"
    assert plan.stops == ["C2", "C1", "L1"]
    assert plan.cost == (30 + 13) * 3


def test_exhaustive_routes_through_hub_when_direct_leg_missing(hub_transit_network):
    plan = ExhaustiveSolver(hub_transit_network).solve({"C1", "C2"})
    assert plan.stops == ["C1", "L1", "C2", "L1"]
    assert plan.cost == 3


def test_every_required_center_is_visited(standard_network):
    centers = {"C1", "C2", "C3"}
    plan = ExhaustiveSolver(standard_network).solve(centers)
    assert centers <= set(plan.stops)
    assert plan.stops[-1] == standard_network.hub


def test_exhaustive_is_deterministic(standard_network):
    solver = ExhaustiveSolver(standard_network)
    first = solver.solve({"C1", "C2", "C3"})
    second = solver.solve({"C3", "C2", "C1"})
    assert first.cost == second.cost
    assert first.stops == second.stops


def test_isolated_center_is_unroutable(isolated_center_network):
    plan = ExhaustiveSolver(isolated_center_network).solve({"C2"})
    assert not plan.is_routable


def test_get_solver_by_name(standard_network):
    assert isinstance(get_solver("exhaustive", standard_network), ExhaustiveSolver)
    assert isinstance(get_solver(SolverType.EXHAUSTIVE, standard_network), ExhaustiveSolver)


@pytest.mark.parametrize("name", ["greedy", "simulated_annealing"])
def test_get_solver_unknown(standard_network, name):
    with pytest.raises(ValueError, match="Unknown solver type"):
        get_solver(name, standard_network)


def test_list_available_solvers():
    assert list_available_solvers() == [SolverType.EXHAUSTIVE]
