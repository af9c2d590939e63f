# ============================================================================
# BASE CONTRACTS & ENUMS
# ============================================================================
# EPOCH: 1 - VERSION TRACKING
# STATUS: Foundation - Core enums shared by engine, services and API
# PURPOSE: Define version schemes, status, severity and risk vocabularies
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: VersionType, VersionState, Severity, RiskLevel, CellState,
#          EnvironmentCategory
# DEPENDENCIES: enum
# ============================================================================
"""
Base contracts for the version monitor.

These enums cross every boundary:
- Backend records (JSON from the version backend)
- Engine (classification, evaluation, aggregation)
- API responses

All are ``str, Enum`` so they serialize as their plain value.
"""

from enum import Enum
from typing import Iterable, Optional


# ============================================================================
# VERSION SCHEMES
# ============================================================================

class VersionType(str, Enum):
    """
    Version string schemes understood by the engine.

    Detection order matters because formats overlap
    (a 10-digit epoch is also valid hex).
    """
    SEMVER = "semver"            # 1.2.3 / v1.2.3
    TIMESTAMP = "timestamp"      # 2024-01-01T00:00:00 / 1704067200
    COMMIT = "commit"            # abc1234 (also the fallback)

    @classmethod
    def from_label(cls, label: Optional[str]) -> Optional["VersionType"]:
        """
        Resolve a backend label to a VersionType.

        Accepts the legacy "semantic" label used by older frontends.
        Returns None for empty or unrecognized labels.
        """
        if not label:
            return None
        normalized = str(label).strip().lower()
        if normalized == "semantic":
            return cls.SEMVER
        try:
            return cls(normalized)
        except ValueError:
            return None


# ============================================================================
# STATUS / SEVERITY
# ============================================================================

class VersionState(str, Enum):
    """Where a deployed version stands relative to the latest version."""
    CURRENT = "current"          # Same as latest
    OUTDATED = "outdated"        # Behind latest
    AHEAD = "ahead"              # Newer than latest
    UNKNOWN = "unknown"          # Formats differ, cannot compare


class Severity(str, Enum):
    """
    Urgency of a single cell's staleness.

    Strict total order (worst wins):
        NONE < INFO < WARNING < CRITICAL
    """
    NONE = "none"
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        """Numeric rank, higher is more urgent."""
        return _SEVERITY_RANK[self]

    def __lt__(self, other: "Severity") -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: "Severity") -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: "Severity") -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: "Severity") -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def worst(cls, severities: Iterable["Severity"]) -> "Severity":
        """Highest severity in the iterable (NONE when empty)."""
        return max(severities, default=cls.NONE)


_SEVERITY_RANK = {
    Severity.NONE: 0,
    Severity.INFO: 1,
    Severity.WARNING: 2,
    Severity.CRITICAL: 3,
}


class RiskLevel(str, Enum):
    """
    Per-application risk, the worst cell severity collapsed to three buckets.

    INFO and NONE severities both map to GOOD.
    """
    GOOD = "good"
    WARNING = "warning"
    CRITICAL = "critical"

    @property
    def sort_rank(self) -> int:
        """Display order when sorting by risk (critical first)."""
        return {
            RiskLevel.CRITICAL: 0,
            RiskLevel.WARNING: 1,
            RiskLevel.GOOD: 2,
        }[self]


# ============================================================================
# MATRIX / ENVIRONMENT
# ============================================================================

class CellState(str, Enum):
    """
    State of one application x environment cell.

    NOT_TRACKED:  no Instance exists for the pair
    NOT_DEPLOYED: Instance exists, no Deployment recorded
    DEPLOYED:     Instance with a Deployment (version available)
    """
    NOT_TRACKED = "not_tracked"
    NOT_DEPLOYED = "not_deployed"
    DEPLOYED = "deployed"


class EnvironmentCategory(str, Enum):
    """Environment grouping used by the dashboard."""
    PRODUCTION = "production"
    TEST = "test"


__all__ = [
    "VersionType",
    "VersionState",
    "Severity",
    "RiskLevel",
    "CellState",
    "EnvironmentCategory",
]
