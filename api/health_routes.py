# ============================================================================
# HEALTH ROUTES
# ============================================================================
# EPOCH: 1 - VERSION TRACKING
# STATUS: Infrastructure - Liveness and readiness probes
# PURPOSE: Kubernetes-style /livez and /readyz endpoints
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health Routes

/livez   process is up (never touches the backend)
/readyz  backend answers; 503 otherwise
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from __version__ import __version__

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_backend_client = None


def set_backend_client(client):
    """Set the backend client used by the readiness probe."""
    global _backend_client
    _backend_client = client


@router.get("/livez")
async def livez():
    """Liveness probe."""
    return {"status": "alive", "version": __version__}


@router.get("/readyz")
async def readyz():
    """Readiness probe - requires a reachable backend."""
    if _backend_client is None:
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "reason": "Backend client not initialized"},
        )

    if not await _backend_client.ping():
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "reason": "Backend unreachable"},
        )

    return {"status": "ready", "backend": _backend_client.base_url}
