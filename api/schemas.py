# ============================================================================
# API SCHEMAS
# ============================================================================
# EPOCH: 1 - VERSION TRACKING
# STATUS: Core - Request/Response schemas
# PURPOSE: Pydantic models for API validation
# CREATED: 19 OCT 2026
# ============================================================================
"""
API Schemas

Request and response models for the API.
Snapshot and matrix bodies reuse the core models directly.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from core.contracts import VersionType
from core.models import VersionMatrix, VersionStatus


# ============================================================================
# REQUEST SCHEMAS
# ============================================================================

class StatusRequest(BaseModel):
    """Request to evaluate one deployed version against a latest version."""
    current: str = Field(..., max_length=256, description="Deployed version")
    latest: str = Field(..., max_length=256, description="Latest (target) version")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"current": "v1.4.2", "latest": "v2.0.0"},
                {"current": "2024-01-01T00:00:00", "latest": "1704672000"},
            ]
        }
    }


class CompareRequest(BaseModel):
    """Request to order two version strings."""
    a: str = Field(..., max_length=256)
    b: str = Field(..., max_length=256)


# ============================================================================
# RESPONSE SCHEMAS
# ============================================================================

class StatusResponse(BaseModel):
    """Verdict for one version pair, with the inferred schemes."""
    current: str
    latest: str
    current_type: VersionType
    latest_type: VersionType
    status: VersionStatus


class CompareResponse(BaseModel):
    """Comparison result. result is 0 when comparable is False."""
    a: str
    b: str
    a_type: VersionType
    b_type: VersionType
    comparable: bool
    result: int


class ClassifyResponse(BaseModel):
    """Inferred scheme of one version string."""
    version: str
    version_type: VersionType


class DashboardResponse(BaseModel):
    """Dashboard matrix with refresh metadata."""
    matrix: VersionMatrix
    generated_at: datetime
    refresh_interval_seconds: int


class ErrorResponse(BaseModel):
    """Error response."""
    error: str
    detail: Optional[str] = None
    path: Optional[str] = None
