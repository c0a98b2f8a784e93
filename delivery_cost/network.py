"""
Delivery Cost - Network Definition
==================================
Static description of the delivery network: supply centers, the hub,
directed distances between them and which center stocks which product.

A network is loaded once at startup and shared read-only by every request.

Version: 2.0.0
"""

import json
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

Location = str


@dataclass(frozen=True)
class DistanceTable:
    """
    Directed distances between named locations.

    Pairs that are not in the table are unreachable and report ``math.inf``.
    ``distance(a, b)`` and ``distance(b, a)`` are independent entries.
    """
    entries: Mapping[Tuple[Location, Location], float] = field(default_factory=dict)

    def __post_init__(self):
        for (origin, destination), value in self.entries.items():
            if value < 0 or math.isnan(value):
                raise ValueError(
                    f"Distance {origin}->{destination} must be non-negative, got {value}"
                )
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    @classmethod
    def symmetric(cls, pairs: Mapping[Tuple[Location, Location], float]) -> "DistanceTable":
        """Build a table where every pair is reachable in both directions."""
        entries: Dict[Tuple[Location, Location], float] = {}
        for (a, b), value in pairs.items():
            entries[(a, b)] = float(value)
            entries[(b, a)] = float(value)
        return cls(entries)

    def distance(self, origin: Location, destination: Location) -> float:
        return self.entries.get((origin, destination), math.inf)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class ProductCatalog:
    """Maps each product identifier to the single center that stocks it."""
    owners: Mapping[str, Location] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "owners", MappingProxyType(dict(self.owners)))

    @classmethod
    def from_center_products(cls, center_products: Mapping[Location, Iterable[str]]) -> "ProductCatalog":
        """
        Build a catalog from a ``center -> products`` listing.

        Raises:
            ValueError: If a product is listed under more than one center.
        """
        owners: Dict[str, Location] = {}
        for center, products in center_products.items():
            for product in products:
                if product in owners and owners[product] != center:
                    raise ValueError(
                        f"Product {product!r} is stocked by both {owners[product]} and {center}"
                    )
                owners[product] = center
        return cls(owners)

    def center_for(self, product: str) -> Optional[Location]:
        return self.owners.get(product)

    def products_by_center(self) -> Dict[Location, List[str]]:
        grouped: Dict[Location, List[str]] = {}
        for product, center in sorted(self.owners.items()):
            grouped.setdefault(center, []).append(product)
        return grouped

    def __contains__(self, product: object) -> bool:
        return product in self.owners


@dataclass(frozen=True)
class DeliveryNetwork:
    """
    Complete static configuration of the delivery network.

    Attributes:
        hub: Location every route must finish at.
        centers: Supply centers, in the order they are tried as route starts.
        distances: Directed distance table covering centers and hub.
        catalog: Product to center ownership.
        unit_cost: Monetary cost per unit of distance.
    """
    hub: Location
    centers: Tuple[Location, ...]
    distances: DistanceTable
    catalog: ProductCatalog
    unit_cost: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "centers", tuple(self.centers))
        if not self.centers:
            raise ValueError("Network must declare at least one center")
        if self.hub in self.centers:
            raise ValueError(f"Hub {self.hub} cannot also be a center")
        unknown = set(self.catalog.owners.values()) - set(self.centers)
        if unknown:
            raise ValueError(f"Catalog references undeclared centers: {sorted(unknown)}")
        if self.unit_cost < 0 or not math.isfinite(self.unit_cost):
            raise ValueError(f"Unit cost must be a non-negative number, got {self.unit_cost}")

    @property
    def locations(self) -> Tuple[Location, ...]:
        return self.centers + (self.hub,)

    def with_unit_cost(self, unit_cost: float) -> "DeliveryNetwork":
        return DeliveryNetwork(
            hub=self.hub,
            centers=self.centers,
            distances=self.distances,
            catalog=self.catalog,
            unit_cost=unit_cost,
        )

    def summary(self) -> Dict[str, Any]:
        """Serializable description used by the ``/network`` endpoint."""
        return {
            "hub": self.hub,
            "centers": list(self.centers),
            "unit_cost": self.unit_cost,
            "products": self.catalog.products_by_center(),
            "distance_entries": len(self.distances),
        }


# ============================================
# PRESETS
# ============================================

CENTER_PRODUCTS = {
    "C1": ["A", "B", "C"],
    "C2": ["D", "E", "F"],
    "C3": ["G", "H", "I"],
}

STANDARD_NETWORK = DeliveryNetwork(
    hub="L1",
    centers=("C1", "C2", "C3"),
    distances=DistanceTable.symmetric({
        ("C1", "L1"): 3,
        ("C2", "L1"): 2.5,
        ("C3", "L1"): 2,
        ("C1", "C2"): 4,
        ("C1", "C3"): 3,
        ("C2", "C3"): 3,
    }),
    catalog=ProductCatalog.from_center_products(CENTER_PRODUCTS),
    unit_cost=3,
)

LONG_HAUL_NETWORK = DeliveryNetwork(
    hub="L1",
    centers=("C1", "C2", "C3"),
    distances=DistanceTable.symmetric({
        ("C1", "L1"): 13,
        ("C2", "L1"): 39,
        ("C3", "L1"): 18,
        ("C1", "C2"): 30,
        ("C1", "C3"): 40,
        ("C2", "C3"): 20,
    }),
    catalog=ProductCatalog.from_center_products(CENTER_PRODUCTS),
    unit_cost=3,
)

NETWORK_PRESETS: Dict[str, DeliveryNetwork] = {
    "standard": STANDARD_NETWORK,
    "long_haul": LONG_HAUL_NETWORK,
}


# ============================================
# LOADING
# ============================================

def network_from_dict(data: Mapping[str, Any]) -> DeliveryNetwork:
    """
    Build a network from its JSON form.

    Expected shape::

        {
            "hub": "L1",
            "unit_cost": 3,
            "symmetric": true,
            "centers": {"C1": ["A", "B"], "C2": ["D"]},
            "distances": [["C1", "L1", 3], ["C2", "L1", 2.5], ["C1", "C2", 4]]
        }

    With ``symmetric`` set, every listed distance applies in both directions.
    """
    try:
        hub = data["hub"]
        center_products = data["centers"]
        rows = data["distances"]
    except KeyError as e:
        raise ValueError(f"Network definition is missing key {e}") from e

    if not isinstance(center_products, Mapping):
        raise ValueError("'centers' must map center names to product lists")

    pairs: Dict[Tuple[Location, Location], float] = {}
    for row in rows:
        if len(row) != 3:
            raise ValueError(f"Distance row must be [from, to, distance], got {row!r}")
        origin, destination, value = row
        pairs[(str(origin), str(destination))] = float(value)

    if data.get("symmetric", False):
        distances = DistanceTable.symmetric(pairs)
    else:
        distances = DistanceTable(pairs)

    return DeliveryNetwork(
        hub=str(hub),
        centers=tuple(center_products.keys()),
        distances=distances,
        catalog=ProductCatalog.from_center_products(center_products),
        unit_cost=float(data.get("unit_cost", 1.0)),
    )


def load_network_file(path: Path) -> DeliveryNetwork:
    """Read a network definition from a JSON file."""
    path = Path(path)
    logger.info(f"Loading delivery network from {path}")
    with path.open(encoding="utf-8") as handle:
        try:
            data = json.load(handle)
        except json.JSONDecodeError as e:
            raise ValueError(f"Network file {path} is not valid JSON: {e}") from e
    return network_from_dict(data)
