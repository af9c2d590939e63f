# ============================================================================
# API MODULE
# ============================================================================
# EPOCH: 1 - VERSION TRACKING
# STATUS: Core - FastAPI routes
# PURPOSE: HTTP API for the version dashboard
# CREATED: 19 OCT 2026
# ============================================================================
"""
API Module

FastAPI routes for the version monitor.
"""

from .routes import router, set_services
from .health_routes import router as health_router, set_backend_client
from .schemas import (
    StatusRequest,
    StatusResponse,
    CompareRequest,
    CompareResponse,
    DashboardResponse,
    ErrorResponse,
)

__all__ = [
    "router",
    "health_router",
    "set_services",
    "set_backend_client",
    "StatusRequest",
    "StatusResponse",
    "CompareRequest",
    "CompareResponse",
    "DashboardResponse",
    "ErrorResponse",
]
