"""
Delivery Cost - Pydantic Models
===============================
Defines the result and response contracts for the Delivery Cost API.
Uses Pydantic for validation and automatic OpenAPI documentation.

Version: 2.0.0
"""

import math
from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field


# ============================================
# ENUMS
# ============================================

class SolverType(str, Enum):
    """Available route optimization algorithms."""
    EXHAUSTIVE = "exhaustive"


# ============================================
# RESULT MODELS
# ============================================

class RoutePlan(BaseModel):
    """
    A single delivery trip and its cost.

    Attributes:
        start: Center the trip starts from.
        stops: Ordered locations visited, ending at the hub. Empty when no route exists.
        cost: Distance times unit cost; ``inf`` when no route exists.
    """
    start: str = Field(..., description="Starting center")
    stops: List[str] = Field(default=[], description="Ordered locations, ending at the hub")
    cost: float = Field(default=math.inf, ge=0, description="Route cost before scaling")

    @property
    def is_routable(self) -> bool:
        return bool(self.stops) and math.isfinite(self.cost)

    @classmethod
    def unroutable(cls, start: str) -> "RoutePlan":
        return cls(start=start, stops=[], cost=math.inf)


class DeliveryQuote(BaseModel):
    """
    Outcome of pricing one order.

    Attributes:
        order: The normalized order that was priced.
        centers_needed: Centers that stock at least one ordered product.
        minimum_delivery_cost: Scaled and rounded cost, or None if no route exists.
        route: Best route found, when any center had to be visited.
    """
    order: Dict[str, Union[int, float]] = Field(default={})
    centers_needed: List[str] = Field(default=[])
    minimum_delivery_cost: Optional[float] = Field(default=0)
    route: Optional[RoutePlan] = Field(default=None)

    @property
    def is_routable(self) -> bool:
        return self.minimum_delivery_cost is not None


# ============================================
# RESPONSE MODELS
# ============================================

class RouteDetail(BaseModel):
    """Route description returned when ``include_route`` is requested."""
    start: str
    stops: List[str]
    cost: float


class DeliveryCostResponse(BaseModel):
    """Response payload of ``POST /calculate-delivery-cost``."""
    minimum_delivery_cost: float = Field(..., ge=0, description="Minimum delivery cost")
    centers_needed: Optional[List[str]] = Field(default=None, description="Centers visited")
    route: Optional[RouteDetail] = Field(default=None, description="Cheapest route")


class NetworkResponse(BaseModel):
    """Summary of the configured delivery network."""
    hub: str
    centers: List[str]
    unit_cost: float
    products: Dict[str, List[str]]
    distance_entries: int


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = Field(default="ok")
    service: str = Field(default="Delivery Cost")
    version: str = Field(default="2.0.0")
    solver_available: List[SolverType] = Field(default=[])


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(default=None, description="Additional details")
