"""
Delivery Cost Application Package
=================================
Minimum delivery cost service using FastAPI.

To run:
    uvicorn delivery_cost.main:app --host 0.0.0.0 --port 3000 --reload

Or programmatically:
    from delivery_cost.main import app
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=3000)
"""

from .models import DeliveryQuote, RoutePlan, SolverType
from .network import DeliveryNetwork, DistanceTable, ProductCatalog
from .pricing import calculate_delivery_quote, calculate_min_delivery_cost

__all__ = [
    'DeliveryNetwork',
    'DeliveryQuote',
    'DistanceTable',
    'ProductCatalog',
    'RoutePlan',
    'SolverType',
    'calculate_delivery_quote',
    'calculate_min_delivery_cost',
]

__version__ = "2.0.0"
