"""
Delivery Cost - Configuration
=============================
Centralizes configuration for the Delivery Cost service.
Values come from environment variables, with a local .env file loaded first.

Version: 2.0.0
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .models import SolverType
from .network import DeliveryNetwork, NETWORK_PRESETS, load_network_file

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PricingConfig:
    """
    Configuration for turning route costs into quoted prices.

    Attributes:
        default_solver: Algorithm to use when the request does not pick one.
        cost_scale: Multiplier applied to the optimizer's raw cost.
        cost_decimals: Decimal places the quoted cost is rounded to.
        request_timeout_seconds: Upper bound on computing a single quote.
    """
    default_solver: SolverType = SolverType.EXHAUSTIVE
    cost_scale: float = 1.0
    cost_decimals: int = 2
    request_timeout_seconds: float = 5.0


@dataclass(frozen=True)
class ServerConfig:
    """
    Configuration for the HTTP server.
    """
    host: str = "0.0.0.0"
    port: int = 3000
    debug: bool = False


def get_pricing_config() -> PricingConfig:
    """Load pricing configuration from environment variables."""
    solver_type_str = os.getenv("DELIVERY_SOLVER_TYPE", "exhaustive").lower()

    try:
        solver_type = SolverType(solver_type_str)
    except ValueError:
        logger.warning(f"Unknown DELIVERY_SOLVER_TYPE {solver_type_str!r}, using exhaustive")
        solver_type = SolverType.EXHAUSTIVE

    return PricingConfig(
        default_solver=solver_type,
        cost_scale=float(os.getenv("DELIVERY_COST_SCALE", "1")),
        cost_decimals=int(os.getenv("DELIVERY_COST_DECIMALS", "2")),
        request_timeout_seconds=float(os.getenv("DELIVERY_REQUEST_TIMEOUT", "5")),
    )


def get_server_config() -> ServerConfig:
    """Load server configuration from environment variables."""
    return ServerConfig(
        host=os.getenv("DELIVERY_HOST", "0.0.0.0"),
        port=int(os.getenv("DELIVERY_PORT") or os.getenv("PORT", "3000")),
        debug=os.getenv("DELIVERY_DEBUG", "false").lower() == "true",
    )


def load_network(
    network_file: Optional[str] = None,
    preset: Optional[str] = None,
    unit_cost: Optional[str] = None,
) -> DeliveryNetwork:
    """
    Load the delivery network.

    A network file (``DELIVERY_NETWORK_FILE``) wins over a named preset
    (``DELIVERY_NETWORK_PRESET``). ``DELIVERY_UNIT_COST`` overrides the
    unit cost of whichever network was loaded.

    Raises:
        ValueError: If the preset is unknown or the network file is invalid.
    """
    network_file = network_file if network_file is not None else os.getenv("DELIVERY_NETWORK_FILE")
    preset = preset if preset is not None else os.getenv("DELIVERY_NETWORK_PRESET", "standard")
    unit_cost = unit_cost if unit_cost is not None else os.getenv("DELIVERY_UNIT_COST")

    if network_file:
        network = load_network_file(Path(network_file).expanduser())
    else:
        try:
            network = NETWORK_PRESETS[preset.lower()]
        except KeyError:
            raise ValueError(
                f"Unknown network preset {preset!r}; expected one of {sorted(NETWORK_PRESETS)}"
            ) from None

    if unit_cost:
        network = network.with_unit_cost(float(unit_cost))

    return network


# Singleton instances
PRICING_CONFIG = get_pricing_config()
SERVER_CONFIG = get_server_config()
