# ============================================================================
# SERVICES MODULE
# ============================================================================
# EPOCH: 1 - VERSION TRACKING
# STATUS: Core - Service layer
# PURPOSE: Backend access and dashboard assembly
# CREATED: 19 OCT 2026
# ============================================================================
"""
Services Module

Services coordinate between the version backend and the engine.

Usage:
    from services import BackendClient, DashboardService

    service = DashboardService(BackendClient())
    matrix = await service.get_dashboard()
"""

from .backend_client import (
    BackendClient,
    BackendError,
    BackendUnavailableError,
    BackendTimeoutError,
    BackendResponseError,
)
from .dashboard_service import DashboardService

__all__ = [
    "BackendClient",
    "BackendError",
    "BackendUnavailableError",
    "BackendTimeoutError",
    "BackendResponseError",
    "DashboardService",
]
