# ============================================================================
# MATRIX BUILDER
# ============================================================================
# EPOCH: 1 - VERSION TRACKING
# STATUS: Engine - Dashboard grid assembly
# PURPOSE: Build the ordered application x environment version matrix
# CREATED: 19 OCT 2026
# ============================================================================
"""
Matrix Builder

Assembles the dashboard grid from one snapshot of backend records.

Steps:
1. Every (application, environment) cell starts NOT_TRACKED
2. Instances with a deployment become DEPLOYED cells, instances without
   one become NOT_DEPLOYED cells
3. Latest version per application (first record wins, "unknown" if absent)
4. Tracked cells are evaluated against the latest version; NOT_DEPLOYED
   cells are evaluated as the empty version "". A row is outdated when any
   tracked cell is not CURRENT
5. Rows carry the aggregated risk of their tracked cells
6. Ordering:
   - environments: ascending `order`, stable
   - applications: ascending `order` when every application has one,
     otherwise by risk (critical, warning, good), stable

The builder is stateless - it takes records as input and returns a fresh
VersionMatrix. Nothing is cached between builds, and no configuration is
read from the environment; callers pass thresholds and the sentinel.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from core.config import DashboardDefaults, StatusThresholds
from core.contracts import CellState, Severity
from core.logging import log_context
from core.models import (
    Application,
    CriticalApplication,
    Environment,
    LatestVersion,
    MatrixCell,
    MatrixRow,
    TrackingSnapshot,
    VersionCell,
    VersionMatrix,
    VersionStatus,
)
from engine.classifier import classify
from engine.risk import aggregate_risk
from engine.status import evaluate

logger = logging.getLogger(__name__)

# Version evaluated for an instance with no recorded deployment
NOT_DEPLOYED_VERSION = ""


# ============================================================================
# ORDERING
# ============================================================================

def order_environments(environments: Iterable[Environment]) -> List[Environment]:
    """Ascending by order; ties keep input order."""
    return sorted(environments, key=lambda env: env.order)


def order_rows(rows: Sequence[MatrixRow]) -> List[MatrixRow]:
    """
    Explicit order when every row has one, otherwise risk order.

    Both sorts are stable.
    """
    if all(row.order is not None for row in rows):
        return sorted(rows, key=lambda row: row.order)
    return sorted(rows, key=lambda row: row.risk.level.sort_rank)


# ============================================================================
# MATRIX BUILDER
# ============================================================================

class MatrixBuilder:
    """Builds a VersionMatrix from backend records."""

    def __init__(
        self,
        thresholds: Optional[StatusThresholds] = None,
        unknown_latest_version: Optional[str] = None,
    ):
        self.thresholds = thresholds or StatusThresholds()
        self.unknown_latest_version = (
            unknown_latest_version or DashboardDefaults().unknown_latest_version
        )

    def build(
        self,
        applications: Iterable[Application],
        environments: Iterable[Environment],
        cells: Iterable[VersionCell],
        latest_versions: Iterable[LatestVersion],
    ) -> VersionMatrix:
        """
        Build the ordered grid.

        Args:
            applications: Tracked applications (rows)
            environments: Deployment environments (columns)
            cells: Instances with optional deployments
            latest_versions: Target version per application

        Returns:
            VersionMatrix with ordered environments, rows and critical summary
        """
        applications = list(applications)
        ordered_environments = order_environments(environments)

        placed = self._place_cells(
            cells,
            environment_ids={env.id for env in ordered_environments},
            application_ids={app.id for app in applications},
        )
        latest = self._resolve_latest(latest_versions)

        rows = [
            self._build_row(
                app,
                ordered_environments,
                placed.get(app.id, {}),
                latest.get(app.id, self.unknown_latest_version),
            )
            for app in applications
        ]
        rows = order_rows(rows)

        matrix = VersionMatrix(
            environments=ordered_environments,
            rows=rows,
            critical_applications=self._critical_applications(rows, ordered_environments),
        )

        logger.debug(
            f"Built matrix: {matrix.application_count} applications x "
            f"{matrix.environment_count} environments, "
            f"{matrix.critical_count} critical, {matrix.outdated_count} outdated"
        )
        return matrix

    def _place_cells(
        self,
        cells: Iterable[VersionCell],
        environment_ids: set,
        application_ids: set,
    ) -> Dict[str, Dict[str, MatrixCell]]:
        """Map application_id -> environment_id -> tracked cell (last record wins)."""
        placed: Dict[str, Dict[str, MatrixCell]] = {}

        for cell in cells:
            instance = cell.instance
            if instance.environment_id not in environment_ids or \
               instance.application_id not in application_ids:
                logger.debug(
                    f"Ignoring instance {instance.id}: unknown environment "
                    f"{instance.environment_id} or application {instance.application_id}"
                )
                continue

            if cell.deployment is not None:
                matrix_cell = MatrixCell(
                    environment_id=instance.environment_id,
                    state=CellState.DEPLOYED,
                    instance_id=instance.id,
                    version=cell.deployment.version,
                    deployed_at=cell.deployment.deployed_at,
                )
            else:
                matrix_cell = MatrixCell(
                    environment_id=instance.environment_id,
                    state=CellState.NOT_DEPLOYED,
                    instance_id=instance.id,
                )

            placed.setdefault(instance.application_id, {})[instance.environment_id] = matrix_cell

        return placed

    def _resolve_latest(self, latest_versions: Iterable[LatestVersion]) -> Dict[str, str]:
        """First record per application wins; empty versions fall back to the sentinel."""
        latest: Dict[str, str] = {}
        for record in latest_versions:
            if record.application_id not in latest:
                latest[record.application_id] = record.version or self.unknown_latest_version
        return latest

    def _build_row(
        self,
        app: Application,
        environments: List[Environment],
        tracked: Dict[str, MatrixCell],
        latest_version: str,
    ) -> MatrixRow:
        cells: List[MatrixCell] = []
        statuses: Dict[str, VersionStatus] = {}

        with log_context(application_id=app.id):
            for env in environments:
                cell = tracked.get(env.id) or MatrixCell(environment_id=env.id)

                if cell.is_tracked:
                    with log_context(environment_id=env.id):
                        cell = self._evaluate_cell(app, cell, latest_version)
                    statuses[env.id] = cell.status

                cells.append(cell)

        return MatrixRow(
            application_id=app.id,
            name=app.name,
            description=app.description,
            version_type=app.version_type,
            order=app.order,
            latest_version=latest_version,
            is_outdated=any(not status.is_current for status in statuses.values()),
            risk=aggregate_risk(statuses),
            cells=cells,
        )

    def _evaluate_cell(self, app: Application, cell: MatrixCell, latest_version: str) -> MatrixCell:
        """Attach a status; NOT_DEPLOYED cells are judged as the empty version."""
        version = cell.version if cell.is_deployed else NOT_DEPLOYED_VERSION
        status = evaluate(version, latest_version, self.thresholds)

        if cell.is_deployed and app.version_type is not None and classify(version) != app.version_type:
            logger.debug(f"Version {version!r} does not look like {app.version_type.value}")

        return cell.model_copy(update={"status": status})

    def _critical_applications(
        self,
        rows: List[MatrixRow],
        environments: List[Environment],
    ) -> List[CriticalApplication]:
        """Rows with at least one critical cell, in display order."""
        names = {env.id: env.name for env in environments}
        critical: List[CriticalApplication] = []

        for row in rows:
            env_ids = [cell.environment_id for cell in row.cells_with_severity(Severity.CRITICAL)]
            if env_ids:
                critical.append(CriticalApplication(
                    application_id=row.application_id,
                    name=row.name,
                    environment_ids=env_ids,
                    environment_names=[names[env_id] for env_id in env_ids],
                ))

        return critical


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

def build_matrix(
    applications: Iterable[Application],
    environments: Iterable[Environment],
    cells: Iterable[VersionCell],
    latest_versions: Iterable[LatestVersion],
    thresholds: Optional[StatusThresholds] = None,
) -> VersionMatrix:
    """
    Convenience function to build a matrix.

    Thresholds default to the fixed 168h / 24h bands.
    """
    return MatrixBuilder(thresholds=thresholds).build(
        applications, environments, cells, latest_versions
    )


def build_from_snapshot(
    snapshot: TrackingSnapshot,
    thresholds: Optional[StatusThresholds] = None,
) -> VersionMatrix:
    """Build a matrix from a fetched snapshot."""
    return build_matrix(
        snapshot.applications,
        snapshot.environments,
        snapshot.cells,
        snapshot.latest,
        thresholds=thresholds,
    )


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "MatrixBuilder",
    "NOT_DEPLOYED_VERSION",
    "order_environments",
    "order_rows",
    "build_matrix",
    "build_from_snapshot",
]
