import pytest

from delivery_cost.config import PricingConfig
from delivery_cost.models import SolverType
from delivery_cost.orders import InvalidOrderError
from delivery_cost.pricing import calculate_delivery_quote, calculate_min_delivery_cost
from delivery_cost.solvers import ExhaustiveSolver


@pytest.mark.parametrize(
    "order",
    [{}, {"A": 0}, {"A": -1, "D": "none"}, {"Z": 3}],
)
def test_orders_without_stocked_products_cost_nothing(standard_network, order):
    assert calculate_min_delivery_cost(order, standard_network) == 0


def test_single_center_order_uses_direct_route(standard_network):
    quote = calculate_delivery_quote({"A": 1, "B": 1, "C": 1}, standard_network)
    assert quote.minimum_delivery_cost == 9
    assert quote.centers_needed == ["C1"]
    assert quote.route.stops == ["C1", "L1"]


def test_long_haul_single_center_order(long_haul_network):
    assert calculate_min_delivery_cost({"A": 2}, long_haul_network) == 39


@pytest.mark.parametrize(
    "order, expected",
    [
        ({"A": 1, "G": 1, "H": 1, "I": 3}, 15),
        ({"A": 1, "B": 1, "C": 1, "G": 1, "H": 1, "I": 1}, 15),
        ({"A": 1, "B": 1, "C": 1, "D": 1}, 19.5),
        ({"A": 1, "D": 1, "G": 1}, 25.5),
    ],
)
def test_multi_center_orders(standard_network, order, expected):
    assert calculate_min_delivery_cost(order, standard_network) == expected


def test_extra_product_from_required_center_keeps_cost(standard_network):
    base = calculate_min_delivery_cost({"A": 1, "G": 1}, standard_network)
    more = calculate_min_delivery_cost({"A": 1, "G": 1, "H": 2, "B": 5}, standard_network)
    assert base == more


def test_quantities_do_not_affect_cost(standard_network):
    assert (
        calculate_min_delivery_cost({"D": 1}, standard_network)
        == calculate_min_delivery_cost({"D": "40"}, standard_network)
    )


def test_unknown_products_are_ignored(standard_network):
    assert calculate_min_delivery_cost({"A": 1, "Z": 9}, standard_network) == 9


def test_cost_scale_and_rounding(standard_network):
    config = PricingConfig(cost_scale=13, cost_decimals=0)
    assert calculate_min_delivery_cost({"A": 1}, standard_network, config) == 117


def test_rounding_to_decimals(standard_network):
    config = PricingConfig(cost_scale=1 / 3, cost_decimals=2)
    assert calculate_min_delivery_cost({"A": 1, "D": 1}, standard_network, config) == 6.5


def test_unroutable_order_has_no_cost(isolated_center_network):
    quote = calculate_delivery_quote({"B": 1}, isolated_center_network)
    assert quote.minimum_delivery_cost is None
    assert not quote.is_routable
    assert quote.centers_needed == ["C2"]


def test_explicit_solver_is_used(hub_transit_network):
    quote = calculate_delivery_quote(
        {"A": 1, "B": 1}, hub_transit_network, solver=ExhaustiveSolver(hub_transit_network)
    )
    assert quote.minimum_delivery_cost == 3
    assert quote.route.stops == ["C1", "L1", "C2", "L1"]


def test_hub_transit_order_is_routable_with_default_solver(hub_transit_network):
    config = PricingConfig(default_solver=SolverType.EXHAUSTIVE)
    assert calculate_min_delivery_cost({"A": 1, "B": 1}, hub_transit_network, config) == 3


def test_non_object_order_raises(standard_network):
    with pytest.raises(InvalidOrderError):
        calculate_delivery_quote(["A", "B"], standard_network)
