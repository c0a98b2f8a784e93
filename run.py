"""
Delivery Cost Server - Entry Point
==================================
Simple entry point to run the Delivery Cost service.

Usage:
    python run.py

Or with uvicorn directly:
    uvicorn delivery_cost.main:app --host 0.0.0.0 --port 3000 --reload
"""

import uvicorn

from delivery_cost.config import SERVER_CONFIG

if __name__ == "__main__":
    print("=" * 60)
    print("DELIVERY COST SERVICE")
    print(f"Starting on http://{SERVER_CONFIG.host}:{SERVER_CONFIG.port}")
    print(f"Docs: http://localhost:{SERVER_CONFIG.port}/docs")
    print("=" * 60)

    uvicorn.run(
        "delivery_cost.main:app",
        host=SERVER_CONFIG.host,
        port=SERVER_CONFIG.port,
        reload=SERVER_CONFIG.debug,
        log_level="info"
    )
