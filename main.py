# ============================================================================
# OVERSEER VERSION MONITOR - MAIN APPLICATION
# ============================================================================
# EPOCH: 1 - VERSION TRACKING
# STATUS: Core - FastAPI application entry point
# PURPOSE: Wire backend client, dashboard service and routes
# CREATED: 19 OCT 2026
# ============================================================================
"""
Overseer Version Monitor Main Application

FastAPI application that:
1. Serves the application x environment version matrix
2. Evaluates version pairs on demand
3. Probes the version backend for readiness

Usage:
    uvicorn main:app --host 0.0.0.0 --port 8000
"""

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from __version__ import __version__, BUILD_DATE, EPOCH
from api import router, health_router, set_services, set_backend_client
from core.config import get_defaults
from services import BackendClient, DashboardService

# Configure logging using our structured logging system
from core.logging import configure_logging, get_logger

configure_logging(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    json_output=os.environ.get("LOG_FORMAT", "").lower() == "json",
)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Initializes services on startup.
    """
    logger.info(f"Starting Overseer Version Monitor v{__version__} (Epoch {EPOCH}, Build {BUILD_DATE})")

    defaults = get_defaults()
    client = BackendClient(defaults.backend)
    dashboard_service = DashboardService(client, defaults.status, defaults.dashboard)

    set_services(dashboard_service=dashboard_service)
    set_backend_client(client)

    logger.info(
        f"Backend at {client.base_url}, thresholds "
        f"{defaults.status.warning_hours}h/{defaults.status.critical_hours}h, "
        f"refresh every {defaults.dashboard.refresh_interval_seconds}s"
    )

    yield

    logger.info("Overseer Version Monitor stopped")


# Create FastAPI app
app = FastAPI(
    title="Overseer Version Monitor",
    description="Tracks deployed versions across environments and flags outdated deployments",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.environ.get("CORS_ORIGINS", "*").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Health probes (no prefix - /livez, /readyz)
app.include_router(health_router)

# API routes
app.include_router(router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": "Overseer Version Monitor",
        "version": __version__,
        "epoch": EPOCH,
        "build_date": BUILD_DATE,
        "status": "running",
        "docs": "/docs",
    }


# ============================================================================
# MAIN ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", "8000"))

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=os.environ.get("RELOAD", "false").lower() == "true",
    )
