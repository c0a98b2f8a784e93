"""
Delivery Cost - Pricing
=======================
Top-level flow that prices an order:
normalize -> resolve centers -> optimize route -> scale and round.

Version: 2.0.0
"""

import logging
from typing import Any, Optional

from .config import PricingConfig
from .models import DeliveryQuote
from .network import DeliveryNetwork
from .orders import normalize_order, resolve_centers
from .solvers import BaseRouteSolver, get_solver

logger = logging.getLogger(__name__)


def calculate_delivery_quote(
    raw_order: Any,
    network: DeliveryNetwork,
    config: PricingConfig = PricingConfig(),
    solver: Optional[BaseRouteSolver] = None,
) -> DeliveryQuote:
    """
    Price a raw order.

    Args:
        raw_order: Decoded JSON body, expected to map products to quantities.
        network: Delivery network to route over.
        config: Scaling, rounding and default solver settings.
        solver: Solver to use; defaults to ``config.default_solver``.

    Returns:
        A DeliveryQuote. ``minimum_delivery_cost`` is 0 when no center is
        needed and None when the needed centers cannot be routed.

    Raises:
        InvalidOrderError: If ``raw_order`` is not a JSON object.
    """
    order = normalize_order(raw_order)
    if not order:
        return DeliveryQuote(order=order, minimum_delivery_cost=0)

    centers_needed = resolve_centers(order, network.catalog)
    if not centers_needed:
        logger.info("Order contains no stocked products, nothing to deliver")
        return DeliveryQuote(order=order, minimum_delivery_cost=0)

    if solver is None:
        solver = get_solver(config.default_solver, network)

    plan = solver.solve(centers_needed)

    if plan.is_routable:
        cost = round(plan.cost * config.cost_scale, config.cost_decimals)
    else:
        logger.warning(f"No feasible route for centers {sorted(centers_needed)}")
        cost = None

    return DeliveryQuote(
        order=order,
        centers_needed=sorted(centers_needed),
        minimum_delivery_cost=cost,
        route=plan,
    )


def calculate_min_delivery_cost(
    raw_order: Any,
    network: DeliveryNetwork,
    config: PricingConfig = PricingConfig(),
) -> Optional[float]:
    """Convenience wrapper returning only the quoted cost."""
    return calculate_delivery_quote(raw_order, network, config).minimum_delivery_cost
