import pytest
from fastapi.testclient import TestClient

from delivery_cost.config import PricingConfig
from delivery_cost.main import create_app
from delivery_cost.network import (
    DeliveryNetwork, DistanceTable, LONG_HAUL_NETWORK, ProductCatalog, STANDARD_NETWORK
)


@pytest.fixture
def standard_network() -> DeliveryNetwork:
    return STANDARD_NETWORK


@pytest.fixture
def long_haul_network() -> DeliveryNetwork:
    return LONG_HAUL_NETWORK


@pytest.fixture
def hub_transit_network() -> DeliveryNetwork:
    """C1 and C2 are only connected through the hub, in one direction."""
    return DeliveryNetwork(
        hub="L1",
        centers=("C1", "C2"),
        distances=DistanceTable({
            ("C1", "L1"): 1,
            ("L1", "C2"): 1,
            ("C2", "L1"): 1,
        }),
        catalog=ProductCatalog.from_center_products({"C1": ["A"], "C2": ["B"]}),
        unit_cost=1,
    )


@pytest.fixture
def isolated_center_network() -> DeliveryNetwork:
    """C2 has no distance entries at all."""
    return DeliveryNetwork(
        hub="L1",
        centers=("C1", "C2"),
        distances=DistanceTable.symmetric({("C1", "L1"): 2}),
        catalog=ProductCatalog.from_center_products({"C1": ["A"], "C2": ["B"]}),
        unit_cost=5,
    )


@pytest.fixture
def api_client(standard_network):
    app = create_app(network=standard_network, pricing=PricingConfig())
    with TestClient(app) as client:
        yield client
