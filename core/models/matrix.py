# ============================================================================
# VERSION MATRIX MODELS
# ============================================================================
# EPOCH: 1 - VERSION TRACKING
# STATUS: Core model - Application x environment grid
# PURPOSE: Ordered dashboard grid produced by the matrix builder
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: MatrixCell, MatrixRow, CriticalApplication, VersionMatrix
# DEPENDENCIES: pydantic
# ============================================================================
"""
Version Matrix Models

Layout:
    VersionMatrix
      environments  -> ordered columns
      rows          -> ordered MatrixRow per application
        cells       -> one MatrixCell per column, same order as environments

Every row has exactly one cell per environment. Cells are never omitted;
untracked pairs carry CellState.NOT_TRACKED.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from core.contracts import CellState, Severity, VersionState, VersionType
from core.models.application import Environment
from core.models.status import EnvironmentRisk, VersionStatus


class MatrixCell(BaseModel):
    """One application x environment cell."""

    model_config = ConfigDict(frozen=True)

    environment_id: str
    state: CellState = CellState.NOT_TRACKED
    instance_id: Optional[str] = None
    version: Optional[str] = None
    deployed_at: Optional[datetime] = None
    status: Optional[VersionStatus] = Field(
        default=None,
        description="Set for tracked cells (NOT_DEPLOYED cells are judged as version \"\")",
    )

    @property
    def is_tracked(self) -> bool:
        return self.state != CellState.NOT_TRACKED

    @property
    def is_deployed(self) -> bool:
        return self.state == CellState.DEPLOYED

    @property
    def severity(self) -> Severity:
        return self.status.severity if self.status else Severity.NONE


class MatrixRow(BaseModel):
    """One application with its ordered cells."""

    model_config = ConfigDict(frozen=True)

    application_id: str
    name: str
    description: Optional[str] = None
    version_type: Optional[VersionType] = None
    order: Optional[int] = None
    latest_version: str
    is_outdated: bool = False
    risk: EnvironmentRisk
    cells: List[MatrixCell] = Field(default_factory=list)

    def cell(self, environment_id: str) -> Optional[MatrixCell]:
        """Find the cell for an environment."""
        for cell in self.cells:
            if cell.environment_id == environment_id:
                return cell
        return None

    def cells_with_severity(self, severity: Severity) -> List[MatrixCell]:
        return [c for c in self.cells if c.severity == severity]


class CriticalApplication(BaseModel):
    """Application with at least one critical environment (alert banner)."""

    model_config = ConfigDict(frozen=True)

    application_id: str
    name: str
    environment_ids: List[str] = Field(default_factory=list)
    environment_names: List[str] = Field(default_factory=list)


class VersionMatrix(BaseModel):
    """Ordered application x environment grid."""

    model_config = ConfigDict(frozen=True)

    environments: List[Environment] = Field(default_factory=list)
    rows: List[MatrixRow] = Field(default_factory=list)
    critical_applications: List[CriticalApplication] = Field(default_factory=list)

    @computed_field
    @property
    def application_count(self) -> int:
        return len(self.rows)

    @computed_field
    @property
    def environment_count(self) -> int:
        return len(self.environments)

    @computed_field
    @property
    def critical_count(self) -> int:
        return len(self.critical_applications)

    @computed_field
    @property
    def outdated_count(self) -> int:
        return sum(1 for row in self.rows if row.is_outdated)

    def row(self, application_id: str) -> Optional[MatrixRow]:
        """Find the row for an application."""
        for row in self.rows:
            if row.application_id == application_id:
                return row
        return None

    def statuses(self, state: VersionState) -> List[MatrixCell]:
        """All evaluated cells in a given state, in display order."""
        return [
            cell
            for row in self.rows
            for cell in row.cells
            if cell.status is not None and cell.status.status == state
        ]


__all__ = [
    "MatrixCell",
    "MatrixRow",
    "CriticalApplication",
    "VersionMatrix",
]
