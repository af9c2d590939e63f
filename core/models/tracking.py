# ============================================================================
# TRACKING MODELS
# ============================================================================
# EPOCH: 1 - VERSION TRACKING
# STATUS: Core model - Instances, deployments and latest versions
# PURPOSE: Wire records describing what is deployed where
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: Instance, Deployment, VersionCell, LatestVersion, TrackingSnapshot
# DEPENDENCIES: pydantic
# ============================================================================
"""
Tracking Models

Key concept:
- Instance = "application X is tracked in environment Y"
  Primary key: (environment_id, application_id)
- Deployment = the version currently observed for an Instance (optional)
- VersionCell = Instance + optional Deployment, as returned by the backend

A VersionCell without a deployment means "tracked, not deployed".
A pair with no VersionCell at all means "not tracked".
"""

from datetime import datetime
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from core.models.application import Application, Environment


class Instance(BaseModel):
    """Tracked pairing of one application with one environment."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    id: str
    environment_id: str
    application_id: str
    name: Optional[str] = None

    @property
    def pair(self) -> Tuple[str, str]:
        """(environment_id, application_id) key."""
        return (self.environment_id, self.application_id)


class Deployment(BaseModel):
    """Version currently observed for an instance."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    version: str
    deployed_at: Optional[datetime] = None


class VersionCell(BaseModel):
    """One tracked instance and its deployment, if any."""

    model_config = ConfigDict(frozen=True)

    instance: Instance
    deployment: Optional[Deployment] = None

    @property
    def is_deployed(self) -> bool:
        return self.deployment is not None


class LatestVersion(BaseModel):
    """Authoritative target version for an application."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    application_id: str
    version: str


class TrackingSnapshot(BaseModel):
    """
    Every record needed for one dashboard build.

    Fetched fresh from the backend on each refresh; never cached.
    """

    model_config = ConfigDict(frozen=True)

    applications: List[Application] = Field(default_factory=list)
    environments: List[Environment] = Field(default_factory=list)
    cells: List[VersionCell] = Field(default_factory=list)
    latest: List[LatestVersion] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.applications or not self.environments


__all__ = [
    "Instance",
    "Deployment",
    "VersionCell",
    "LatestVersion",
    "TrackingSnapshot",
]
