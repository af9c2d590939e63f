# ============================================================================
# CORE MODULE
# ============================================================================
# EPOCH: 1 - VERSION TRACKING
# STATUS: Core module initialization
# PURPOSE: Export core contracts and models
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================

from core.contracts import (
    VersionType,
    VersionState,
    Severity,
    RiskLevel,
    CellState,
    EnvironmentCategory,
)
from core.models import (
    Application,
    Environment,
    Instance,
    Deployment,
    VersionCell,
    LatestVersion,
    TrackingSnapshot,
    VersionStatus,
    EnvironmentRisk,
    VersionMatrix,
)

__all__ = [
    # Enums
    "VersionType",
    "VersionState",
    "Severity",
    "RiskLevel",
    "CellState",
    "EnvironmentCategory",
    # Models
    "Application",
    "Environment",
    "Instance",
    "Deployment",
    "VersionCell",
    "LatestVersion",
    "TrackingSnapshot",
    "VersionStatus",
    "EnvironmentRisk",
    "VersionMatrix",
]
