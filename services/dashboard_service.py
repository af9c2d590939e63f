# ============================================================================
# DASHBOARD SERVICE
# ============================================================================
# EPOCH: 1 - VERSION TRACKING
# STATUS: Service - Snapshot fetch + matrix build
# PURPOSE: Produce a fresh version matrix for each dashboard request
# CREATED: 19 OCT 2026
# ============================================================================
"""
Dashboard Service

Coordinates the backend client and the engine:

    BackendClient.fetch_snapshot() -> MatrixBuilder.build() -> VersionMatrix

Every call fetches and recomputes; nothing is cached between calls.
Clients poll on DashboardDefaults.refresh_interval_seconds.
Backend failures propagate as BackendError.
"""

import uuid
from typing import Optional

from core.config import DashboardDefaults, StatusThresholds, get_defaults
from core.logging import get_logger, log_checkpoint, log_context, ComponentType
from core.models import TrackingSnapshot, VersionMatrix, VersionStatus
from engine import MatrixBuilder, classify, evaluate
from .backend_client import BackendClient

logger = get_logger(__name__, ComponentType.SERVICE)


class DashboardService:
    """Builds dashboard matrices from backend snapshots."""

    def __init__(
        self,
        client: BackendClient,
        thresholds: Optional[StatusThresholds] = None,
        dashboard: Optional[DashboardDefaults] = None,
    ):
        defaults = get_defaults()
        self.client = client
        self.thresholds = thresholds or defaults.status
        self.dashboard = dashboard or defaults.dashboard

    @property
    def refresh_interval_seconds(self) -> int:
        return self.dashboard.refresh_interval_seconds

    def _builder(self) -> MatrixBuilder:
        return MatrixBuilder(
            thresholds=self.thresholds,
            unknown_latest_version=self.dashboard.unknown_latest_version,
        )

    async def get_dashboard(self) -> VersionMatrix:
        """
        Fetch a snapshot from the backend and build the matrix.

        Raises:
            BackendError: snapshot could not be fetched
        """
        with log_context(correlation_id=uuid.uuid4().hex[:12], operation="dashboard"):
            snapshot = await self.client.fetch_snapshot()
            log_checkpoint("snapshot_fetched", {
                "applications": len(snapshot.applications),
                "environments": len(snapshot.environments),
                "cells": len(snapshot.cells),
                "latest": len(snapshot.latest),
            })
            return self.evaluate_snapshot(snapshot)

    def evaluate_snapshot(self, snapshot: TrackingSnapshot) -> VersionMatrix:
        """Build the matrix for an already-fetched snapshot."""
        if snapshot.is_empty:
            logger.warning(
                f"Snapshot has {len(snapshot.applications)} applications and "
                f"{len(snapshot.environments)} environments"
            )

        matrix = self._builder().build(
            snapshot.applications,
            snapshot.environments,
            snapshot.cells,
            snapshot.latest,
        )

        log_checkpoint("matrix_built", {
            "applications": matrix.application_count,
            "environments": matrix.environment_count,
            "critical": matrix.critical_count,
            "outdated": matrix.outdated_count,
        })
        if matrix.critical_applications:
            logger.info(
                "Critical updates needed: "
                + ", ".join(app.name for app in matrix.critical_applications)
            )
        return matrix

    def evaluate_pair(self, current: str, latest: str) -> VersionStatus:
        """Evaluate one deployed version against a latest version."""
        status = evaluate(current, latest, self.thresholds)
        logger.debug(
            f"evaluate {current!r} ({classify(current).value}) vs "
            f"{latest!r} ({classify(latest).value}) -> {status.status.value}"
        )
        return status


__all__ = ["DashboardService"]
