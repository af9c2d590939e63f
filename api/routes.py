# ============================================================================
# API ROUTES
# ============================================================================
# EPOCH: 1 - VERSION TRACKING
# STATUS: Core - FastAPI route definitions
# PURPOSE: HTTP endpoints for the dashboard matrix and version evaluation
# CREATED: 19 OCT 2026
# ============================================================================
"""
API Routes

FastAPI routes for the version monitor.

Backend failures map to:
    BackendUnavailableError -> 502
    BackendResponseError    -> 502
    BackendTimeoutError     -> 504
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse

from core.models import TrackingSnapshot
from engine import classify, compare
from services import (
    BackendError,
    BackendTimeoutError,
    DashboardService,
)
from .schemas import (
    ClassifyResponse,
    CompareRequest,
    CompareResponse,
    DashboardResponse,
    ErrorResponse,
    StatusRequest,
    StatusResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


# ============================================================================
# DEPENDENCY INJECTION
# ============================================================================
# Set by the main app at startup

_dashboard_service = None


def set_services(dashboard_service):
    """Set service instances for dependency injection."""
    global _dashboard_service
    _dashboard_service = dashboard_service


def get_dashboard_service() -> DashboardService:
    if _dashboard_service is None:
        raise HTTPException(500, "Services not initialized")
    return _dashboard_service


def _backend_error_response(e: BackendError) -> JSONResponse:
    """Translate a backend failure into a gateway error."""
    if isinstance(e, BackendTimeoutError):
        status_code, error = 504, "Backend timeout"
    else:
        status_code, error = 502, "Backend error"

    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error, detail=str(e), path=e.path).model_dump(),
    )


def _dashboard_response(matrix, service: DashboardService) -> DashboardResponse:
    return DashboardResponse(
        matrix=matrix,
        generated_at=datetime.now(timezone.utc),
        refresh_interval_seconds=service.refresh_interval_seconds,
    )


# ============================================================================
# DASHBOARD
# ============================================================================

@router.get(
    "/dashboard",
    response_model=DashboardResponse,
    responses={502: {"model": ErrorResponse}, 504: {"model": ErrorResponse}},
    tags=["Dashboard"],
)
async def get_dashboard(service: DashboardService = Depends(get_dashboard_service)):
    """
    Fetch a fresh snapshot from the backend and return the version matrix.

    Nothing is cached; poll on refresh_interval_seconds.
    """
    try:
        matrix = await service.get_dashboard()
    except BackendError as e:
        logger.error(f"Dashboard refresh failed: {e}")
        return _backend_error_response(e)

    return _dashboard_response(matrix, service)


@router.post("/dashboard/evaluate", response_model=DashboardResponse, tags=["Dashboard"])
async def evaluate_dashboard(
    snapshot: TrackingSnapshot,
    service: DashboardService = Depends(get_dashboard_service),
):
    """Build the version matrix for a caller-supplied snapshot (no backend call)."""
    matrix = service.evaluate_snapshot(snapshot)
    return _dashboard_response(matrix, service)


# ============================================================================
# VERSIONS
# ============================================================================

@router.post("/versions/status", response_model=StatusResponse, tags=["Versions"])
async def version_status(
    request: StatusRequest,
    service: DashboardService = Depends(get_dashboard_service),
):
    """Evaluate a deployed version against the latest version."""
    return StatusResponse(
        current=request.current,
        latest=request.latest,
        current_type=classify(request.current),
        latest_type=classify(request.latest),
        status=service.evaluate_pair(request.current, request.latest),
    )


@router.post("/versions/compare", response_model=CompareResponse, tags=["Versions"])
async def version_compare(request: CompareRequest):
    """Order two version strings (0 when their schemes differ)."""
    a_type, b_type = classify(request.a), classify(request.b)
    return CompareResponse(
        a=request.a,
        b=request.b,
        a_type=a_type,
        b_type=b_type,
        comparable=a_type == b_type,
        result=compare(request.a, request.b),
    )


@router.get("/versions/classify", response_model=ClassifyResponse, tags=["Versions"])
async def version_classify(version: str = Query(..., max_length=256)):
    """Infer the scheme of a version string."""
    return ClassifyResponse(version=version, version_type=classify(version))
