"""
Delivery Cost - Order Handling
==============================
Turns a raw JSON order into a clean ``product -> quantity`` mapping and
works out which centers have to be visited to fulfil it.

Version: 2.0.0
"""

import logging
import math
from typing import Any, Dict, FrozenSet, Mapping, Optional, Union

from .network import Location, ProductCatalog

logger = logging.getLogger(__name__)

Quantity = Union[int, float]


class InvalidOrderError(ValueError):
    """Raised when an order payload is not a product -> quantity object."""


def _coerce_quantity(value: Any) -> Optional[Quantity]:
    """Return ``value`` as a number, or None if it is not numeric."""
    # bool is an int subclass, but true/false are not quantities
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        # float() also takes digit separators ("1_000"), which are not quantities
        if "_" in value:
            return None
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None

    if isinstance(number, int):
        return number
    if not math.isfinite(number):
        return None
    if number.is_integer():
        return int(number)
    return number


def normalize_order(raw: Any) -> Dict[str, Quantity]:
    """
    Filter a raw order down to its valid entries.

    An entry survives when its key is a non-empty string and its value is a
    number, or a numeric string, strictly greater than zero. Everything else
    is dropped without error.

    Raises:
        InvalidOrderError: If ``raw`` is not a mapping.
    """
    if not isinstance(raw, Mapping):
        raise InvalidOrderError(
            f"Order must be a JSON object of product quantities, got {type(raw).__name__}"
        )

    order: Dict[str, Quantity] = {}
    for product, value in raw.items():
        if not isinstance(product, str) or not product:
            continue
        quantity = _coerce_quantity(value)
        if quantity is None or quantity <= 0:
            continue
        order[product] = quantity

    dropped = len(raw) - len(order)
    if dropped:
        logger.debug(f"Dropped {dropped} invalid order entries")
    return order


def resolve_centers(order: Mapping[str, Quantity], catalog: ProductCatalog) -> FrozenSet[Location]:
    """Return the distinct centers stocking the ordered products."""
    centers = set()
    for product in order:
        center = catalog.center_for(product)
        if center is None:
            logger.debug(f"Ignoring unknown product {product!r}")
            continue
        centers.add(center)
    return frozenset(centers)
