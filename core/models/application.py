# ============================================================================
# APPLICATION & ENVIRONMENT MODELS
# ============================================================================
# EPOCH: 1 - VERSION TRACKING
# STATUS: Core model - Tracked applications and deployment environments
# PURPOSE: Snapshot records read from the version backend
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: Application, Environment
# DEPENDENCIES: pydantic
# ============================================================================
"""
Application and Environment Models

Both are owned by the version backend and read here as immutable snapshots.
The backend may send integer ids; they are coerced to strings so ids compare
consistently across applications, environments and instances.

`order` is the persisted display position. Values need not be contiguous or
unique; sorting is stable so ties keep backend order.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.contracts import EnvironmentCategory, VersionType


class Application(BaseModel):
    """
    An application whose deployments are tracked.

    version_type is an advisory label only. The engine always infers the
    scheme from each observed version string.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    id: str
    name: str
    description: Optional[str] = None
    version_type: Optional[VersionType] = Field(default=None, alias="versionType")
    order: Optional[int] = Field(
        default=None,
        description="Display position; when any application lacks one the "
                    "dashboard sorts by risk instead",
    )

    @field_validator("version_type", mode="before")
    @classmethod
    def _parse_version_type(cls, value: Any) -> Optional[VersionType]:
        if isinstance(value, VersionType):
            return value
        return VersionType.from_label(value)


class Environment(BaseModel):
    """A deployment environment (column of the dashboard)."""

    model_config = ConfigDict(
        frozen=True,
        coerce_numbers_to_str=True,
    )

    id: str
    name: str
    description: Optional[str] = None
    category: Optional[EnvironmentCategory] = None
    order: int = 0

    @field_validator("category", mode="before")
    @classmethod
    def _parse_category(cls, value: Any) -> Optional[EnvironmentCategory]:
        if value is None or isinstance(value, EnvironmentCategory):
            return value
        try:
            return EnvironmentCategory(str(value).strip().lower())
        except ValueError:
            return None

    @property
    def is_production(self) -> bool:
        return self.category == EnvironmentCategory.PRODUCTION


__all__ = ["Application", "Environment"]
