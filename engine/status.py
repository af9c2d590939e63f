# ============================================================================
# STATUS EVALUATOR
# ============================================================================
# EPOCH: 1 - VERSION TRACKING
# STATUS: Engine - Per-cell verdict
# PURPOSE: Combine classification and comparison into status + severity
# CREATED: 19 OCT 2026
# ============================================================================
"""
Status Evaluator

evaluate(current, latest) -> VersionStatus

Decision table:
    schemes differ             -> UNKNOWN  / INFO
    identical strings          -> CURRENT  / NONE
    unusable timestamp         -> UNKNOWN  / INFO
    compare == 0               -> CURRENT  / NONE
    compare  < 0  (behind)     -> OUTDATED / per-scheme rule below
    compare  > 0  (ahead)      -> AHEAD    / WARNING

Behind rules:
    semver     major behind -> CRITICAL, minor behind -> WARNING, else INFO
    timestamp  > critical_hours -> CRITICAL, > warning_hours -> WARNING,
               else INFO (bounds are exclusive: exactly 24h is INFO);
               messages name the configured bands ("Over a week behind"
               at 168h, "Over 3 days behind" at 72h)
    commit     always WARNING

The evaluator is stateless and never raises.
"""

from typing import Callable, Dict, Optional

from core.config import StatusThresholds
from core.contracts import Severity, VersionState, VersionType
from core.models import VersionStatus
from engine.classifier import classify
from engine.comparator import compare, parse_semver, timestamp_to_millis

_MILLIS_PER_HOUR = 60 * 60 * 1000
_HOURS_PER_DAY = 24
_HOURS_PER_WEEK = 7 * _HOURS_PER_DAY


# ============================================================================
# FIXED VERDICTS
# ============================================================================

DIFFERENT_FORMAT = VersionStatus(
    status=VersionState.UNKNOWN,
    severity=Severity.INFO,
    message="Different version format",
)

UNPARSEABLE_TIMESTAMP = VersionStatus(
    status=VersionState.UNKNOWN,
    severity=Severity.INFO,
    message="Unparseable timestamp",
)

UP_TO_DATE = VersionStatus(
    status=VersionState.CURRENT,
    severity=Severity.NONE,
    message="Up to date",
)

AHEAD_OF_LATEST = VersionStatus(
    status=VersionState.AHEAD,
    severity=Severity.WARNING,
    message="Ahead of latest",
)


def _outdated(severity: Severity, message: str) -> VersionStatus:
    return VersionStatus(status=VersionState.OUTDATED, severity=severity, message=message)


# ============================================================================
# BEHIND RULES
# ============================================================================

def _semver_behind(current: str, latest: str, thresholds: StatusThresholds) -> VersionStatus:
    have, want = parse_semver(current), parse_semver(latest)

    if have.major < want.major:
        return _outdated(Severity.CRITICAL, "Major version behind")

    if have.minor < want.minor:
        return _outdated(Severity.WARNING, "Minor version behind")

    return _outdated(Severity.INFO, "Patch version behind")


def _describe_hours(hours: float) -> str:
    """Human span for a threshold: 168 -> "a week", 48 -> "2 days", 6 -> "6 hours"."""
    for unit, name in ((_HOURS_PER_WEEK, "week"), (_HOURS_PER_DAY, "day"), (1, "hour")):
        if hours > 0 and hours % unit == 0:
            count = hours / unit
            if count == 1:
                return f"an {name}" if name == "hour" else f"a {name}"
            return f"{count:g} {name}s"
    return f"{hours:g} hours"


def _timestamp_behind(current: str, latest: str, thresholds: StatusThresholds) -> VersionStatus:
    # Both parse, checked by evaluate() before dispatch
    gap_hours = (timestamp_to_millis(latest) - timestamp_to_millis(current)) / _MILLIS_PER_HOUR

    if gap_hours > thresholds.critical_hours:
        return _outdated(Severity.CRITICAL, f"Over {_describe_hours(thresholds.critical_hours)} behind")

    if gap_hours > thresholds.warning_hours:
        return _outdated(Severity.WARNING, f"Over {_describe_hours(thresholds.warning_hours)} behind")

    return _outdated(Severity.INFO, "Behind latest")


def _commit_behind(current: str, latest: str, thresholds: StatusThresholds) -> VersionStatus:
    return _outdated(Severity.WARNING, "Different commit")


_BEHIND_RULES: Dict[VersionType, Callable[[str, str, StatusThresholds], VersionStatus]] = {
    VersionType.SEMVER: _semver_behind,
    VersionType.TIMESTAMP: _timestamp_behind,
    VersionType.COMMIT: _commit_behind,
}


# ============================================================================
# EVALUATOR
# ============================================================================

def evaluate(
    current: str,
    latest: str,
    thresholds: Optional[StatusThresholds] = None,
) -> VersionStatus:
    """
    Judge a deployed version against the latest version.

    Args:
        current: Deployed version string
        latest: Latest (target) version string
        thresholds: Timestamp severity bands (168h / 24h when omitted)

    Returns:
        VersionStatus with status, severity and message
    """
    if thresholds is None:
        thresholds = StatusThresholds()

    current_type, latest_type = classify(current), classify(latest)
    if current_type != latest_type:
        return DIFFERENT_FORMAT

    if current == latest:
        return UP_TO_DATE

    if current_type == VersionType.TIMESTAMP and (
        timestamp_to_millis(current) is None or timestamp_to_millis(latest) is None
    ):
        return UNPARSEABLE_TIMESTAMP

    comparison = compare(current, latest)

    if comparison == 0:
        return UP_TO_DATE

    if comparison < 0:
        return _BEHIND_RULES[current_type](current, latest, thresholds)

    return AHEAD_OF_LATEST


__all__ = [
    "evaluate",
    "DIFFERENT_FORMAT",
    "UNPARSEABLE_TIMESTAMP",
    "UP_TO_DATE",
    "AHEAD_OF_LATEST",
]
