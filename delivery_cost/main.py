"""
Delivery Cost - FastAPI Application
===================================
Minimum delivery cost service for a small network of supply centers and a hub.

This service provides:
- Minimum-cost delivery quotes for product orders
- Exact route optimization over every visiting order and hub stop
- Health checks for service monitoring
- OpenAPI documentation at /docs

Version: 2.0.0
"""

import asyncio
import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import PRICING_CONFIG, SERVER_CONFIG, PricingConfig, load_network
from .models import (
    DeliveryCostResponse, ErrorResponse, HealthResponse, NetworkResponse,
    RouteDetail, SolverType
)
from .network import DeliveryNetwork
from .pricing import calculate_delivery_quote
from .solvers import get_solver, list_available_solvers

# ============================================
# LOGGING SETUP
# ============================================

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)

VERSION = "2.0.0"


def _error_response(status_code: int, error: str, detail: Optional[str] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error, detail=detail).model_dump(exclude_none=True),
    )


# ============================================
# LIFESPAN (Startup/Shutdown)
# ============================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle manager."""
    network: DeliveryNetwork = app.state.network
    pricing: PricingConfig = app.state.pricing

    # Startup
    logger.info("=" * 60)
    logger.info("DELIVERY COST SERVICE - Starting")
    logger.info(f"Version: {VERSION}")
    logger.info(f"Default Solver: {pricing.default_solver.value}")
    logger.info(f"Hub: {network.hub}, Centers: {list(network.centers)}, Unit cost: {network.unit_cost}")
    logger.info(f"Cost scale: {pricing.cost_scale}, decimals: {pricing.cost_decimals}")
    logger.info(f"API endpoint: http://localhost:{SERVER_CONFIG.port}/calculate-delivery-cost")
    logger.info("=" * 60)

    yield

    # Shutdown
    logger.info("Delivery Cost Service shutting down...")


# ============================================
# ENDPOINTS
# ============================================

router = APIRouter()


@router.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """
    Health check endpoint for service monitoring.

    Returns service status and available solvers.
    """
    return HealthResponse(
        status="ok",
        service="Delivery Cost",
        version=VERSION,
        solver_available=list_available_solvers()
    )


@router.post(
    "/calculate-delivery-cost",
    response_model=DeliveryCostResponse,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse, "description": "Malformed order or processing error"},
        422: {"model": ErrorResponse, "description": "No feasible route"},
    },
    tags=["Pricing"]
)
async def calculate_delivery_cost(
    request: Request,
    include_route: bool = Query(default=False, description="Include the cheapest route"),
):
    """
    Calculate the minimum delivery cost for an order.

    The body is a JSON object mapping product identifiers to quantities.
    Entries with non-positive or non-numeric quantities are ignored, as are
    products no center stocks. An order that needs no center costs 0.
    """
    start_time = time.time()
    network: DeliveryNetwork = request.app.state.network
    pricing: PricingConfig = request.app.state.pricing

    try:
        raw_order = await request.json()
    except ValueError as e:
        logger.warning(f"Rejected malformed body: {e}")
        return _error_response(400, "Request body must be valid JSON", str(e))

    try:
        route_solver = get_solver(pricing.default_solver, network)
        quote = await asyncio.wait_for(
            asyncio.to_thread(calculate_delivery_quote, raw_order, network, pricing, route_solver),
            timeout=pricing.request_timeout_seconds,
        )
    except asyncio.TimeoutError:
        logger.warning(f"Quote timed out after {pricing.request_timeout_seconds}s")
        return _error_response(400, "Delivery cost calculation timed out")
    except ValueError as e:
        logger.warning(f"Invalid delivery request: {e}")
        return _error_response(400, str(e))
    except Exception as e:
        logger.exception(f"Pricing error: {e}")
        return _error_response(400, f"Pricing error: {str(e)}")

    elapsed_ms = int((time.time() - start_time) * 1000)

    if not quote.is_routable:
        return _error_response(
            422,
            "No feasible route",
            f"Centers {quote.centers_needed} cannot all be reached on the way to {network.hub}",
        )

    logger.info(
        f"Quoted order: products={len(quote.order)}, "
        f"centers={quote.centers_needed}, "
        f"solver={route_solver.solver_type.value}, "
        f"cost={quote.minimum_delivery_cost}, "
        f"time={elapsed_ms}ms"
    )

    response = DeliveryCostResponse(minimum_delivery_cost=quote.minimum_delivery_cost)
    if include_route:
        response.centers_needed = quote.centers_needed
        if quote.route is not None:
            response.route = RouteDetail(
                start=quote.route.start,
                stops=quote.route.stops,
                cost=quote.route.cost,
            )
    return response


@router.get("/solvers", response_model=list[SolverType], tags=["Info"])
async def list_solvers():
    """
    List available solver algorithms.
    """
    return list_available_solvers()


@router.get("/network", response_model=NetworkResponse, tags=["Info"])
async def describe_network(request: Request):
    """
    Describe the configured hub, centers, unit cost and product ownership.
    """
    return request.app.state.network.summary()


# ============================================
# FASTAPI APP
# ============================================

def create_app(
    network: Optional[DeliveryNetwork] = None,
    pricing: Optional[PricingConfig] = None,
) -> FastAPI:
    """
    Build the application around an immutable network and pricing config.

    Both default to what the environment configures.
    """
    app = FastAPI(
        title="Delivery Cost Service",
        description="Minimum delivery cost across supply centers and a hub",
        version=VERSION,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.network = network if network is not None else load_network()
    app.state.pricing = pricing if pricing is not None else PRICING_CONFIG

    # CORS Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(Exception)
    async def general_exception_handler(request, exc: Exception):
        """Handle unexpected errors."""
        logger.exception(f"Unexpected error: {exc}")
        return _error_response(400, str(exc))

    app.include_router(router)
    return app


app = create_app()


# ============================================
# MAIN ENTRY POINT
# ============================================

def main():
    """Run the server with Uvicorn."""
    import uvicorn

    uvicorn.run(
        "delivery_cost.main:app",
        host=SERVER_CONFIG.host,
        port=SERVER_CONFIG.port,
        reload=SERVER_CONFIG.debug,
        log_level="info"
    )


if __name__ == "__main__":
    main()
