# ============================================================================
# MODELS MODULE
# ============================================================================
# EPOCH: 1 - VERSION TRACKING
# STATUS: Model exports
# PURPOSE: Central export point for all Pydantic models
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================
"""
Models Module - Central Export Point

Input records (read from the version backend):
    Application, Environment, Instance, Deployment, VersionCell,
    LatestVersion, TrackingSnapshot

Derived values (produced by the engine):
    VersionStatus, EnvironmentRisk, MatrixCell, MatrixRow,
    CriticalApplication, VersionMatrix
"""

from core.models.application import Application, Environment
from core.models.tracking import (
    Instance,
    Deployment,
    VersionCell,
    LatestVersion,
    TrackingSnapshot,
)
from core.models.status import VersionStatus, EnvironmentRisk
from core.models.matrix import (
    MatrixCell,
    MatrixRow,
    CriticalApplication,
    VersionMatrix,
)

__all__ = [
    # Records
    "Application",
    "Environment",
    "Instance",
    "Deployment",
    "VersionCell",
    "LatestVersion",
    "TrackingSnapshot",
    # Derived
    "VersionStatus",
    "EnvironmentRisk",
    "MatrixCell",
    "MatrixRow",
    "CriticalApplication",
    "VersionMatrix",
]
