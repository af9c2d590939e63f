# ============================================================================
# RISK AGGREGATOR
# ============================================================================
# EPOCH: 1 - VERSION TRACKING
# STATUS: Engine - Per-application risk
# PURPOSE: Fold per-environment verdicts into one risk level
# CREATED: 19 OCT 2026
# ============================================================================
"""
Risk Aggregator

Worst case wins:
    any CRITICAL cell            -> RiskLevel.CRITICAL
    else any WARNING cell        -> RiskLevel.WARNING
    else (INFO / NONE / no cells) -> RiskLevel.GOOD

Only counts are used, so the result does not depend on cell order.
"""

from typing import Iterable, Mapping, Optional, Union

from core.config import StatusThresholds
from core.contracts import RiskLevel, Severity
from core.models import EnvironmentRisk, VersionStatus
from engine.status import evaluate


def aggregate_risk(
    statuses: Union[Mapping[str, VersionStatus], Iterable[VersionStatus]],
) -> EnvironmentRisk:
    """
    Collapse cell verdicts into an application risk level.

    Args:
        statuses: environment_id -> VersionStatus mapping, or bare statuses

    Returns:
        EnvironmentRisk with level, message and counts
    """
    values = statuses.values() if isinstance(statuses, Mapping) else statuses

    critical_count = 0
    warning_count = 0
    for status in values:
        if status.severity == Severity.CRITICAL:
            critical_count += 1
        elif status.severity == Severity.WARNING:
            warning_count += 1

    if critical_count > 0:
        return EnvironmentRisk(
            level=RiskLevel.CRITICAL,
            message=f"{critical_count} environment(s) with critical updates needed",
            critical_count=critical_count,
            warning_count=warning_count,
        )

    if warning_count > 0:
        return EnvironmentRisk(
            level=RiskLevel.WARNING,
            message=f"{warning_count} environment(s) with updates available",
            warning_count=warning_count,
        )

    return EnvironmentRisk(
        level=RiskLevel.GOOD,
        message="All environments up to date",
    )


def assess_environments(
    versions: Mapping[str, str],
    latest_version: str,
    thresholds: Optional[StatusThresholds] = None,
) -> EnvironmentRisk:
    """
    Evaluate each environment's deployed version, then aggregate.

    Args:
        versions: environment_id -> deployed version
        latest_version: Application's latest version
        thresholds: Timestamp severity bands (168h / 24h when omitted)
    """
    return aggregate_risk({
        environment_id: evaluate(version, latest_version, thresholds)
        for environment_id, version in versions.items()
    })


__all__ = ["aggregate_risk", "assess_environments"]
