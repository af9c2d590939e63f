# ============================================================================
# STATUS MODELS
# ============================================================================
# EPOCH: 1 - VERSION TRACKING
# STATUS: Core model - Derived verdicts
# PURPOSE: Per-cell version status and per-application risk
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: VersionStatus, EnvironmentRisk
# DEPENDENCIES: pydantic
# ============================================================================
"""
Derived status models.

Never persisted. Produced fresh by the engine on every evaluation.
"""

from pydantic import BaseModel, ConfigDict, Field

from core.contracts import RiskLevel, Severity, VersionState


class VersionStatus(BaseModel):
    """Verdict for one (current, latest) version pair."""

    model_config = ConfigDict(frozen=True)

    status: VersionState
    severity: Severity
    message: str

    @property
    def is_current(self) -> bool:
        return self.status == VersionState.CURRENT


class EnvironmentRisk(BaseModel):
    """Worst-case severity across one application's environments."""

    model_config = ConfigDict(frozen=True)

    level: RiskLevel
    message: str
    critical_count: int = Field(default=0, ge=0)
    warning_count: int = Field(default=0, ge=0)


__all__ = ["VersionStatus", "EnvironmentRisk"]
