# ============================================================================
# RISK AGGREGATOR TESTS
# ============================================================================
# EPOCH: 1 - VERSION TRACKING
# STATUS: Tests - Per-application risk
# PURPOSE: Verify worst-case aggregation and its messages
# CREATED: 19 OCT 2026
# ============================================================================
"""
Risk Aggregator Tests

Run with:
    pytest tests/test_risk.py -v
"""

from itertools import permutations

import pytest

from core.config import StatusThresholds
from core.contracts import RiskLevel, Severity, VersionState
from core.models import VersionStatus
from engine.risk import aggregate_risk, assess_environments


def _status(severity: Severity) -> VersionStatus:
    state = VersionState.CURRENT if severity == Severity.NONE else VersionState.OUTDATED
    return VersionStatus(status=state, severity=severity, message=severity.value)


# ============================================================================
# AGGREGATION
# ============================================================================

class TestAggregateRisk:
    def test_empty_is_good(self):
        risk = aggregate_risk({})
        assert risk.level == RiskLevel.GOOD
        assert risk.message == "All environments up to date"

    def test_info_and_none_are_good(self):
        risk = aggregate_risk([_status(Severity.INFO), _status(Severity.NONE)])
        assert risk.level == RiskLevel.GOOD
        assert risk.critical_count == 0
        assert risk.warning_count == 0

    def test_warning(self):
        risk = aggregate_risk({
            "dev": _status(Severity.WARNING),
            "qa": _status(Severity.WARNING),
            "prod": _status(Severity.INFO),
        })
        assert risk.level == RiskLevel.WARNING
        assert risk.message == "2 environment(s) with updates available"
        assert risk.warning_count == 2

    def test_critical_beats_warning(self):
        risk = aggregate_risk({
            "dev": _status(Severity.WARNING),
            "prod": _status(Severity.CRITICAL),
        })
        assert risk.level == RiskLevel.CRITICAL
        assert risk.message == "1 environment(s) with critical updates needed"
        assert risk.critical_count == 1
        assert risk.warning_count == 1

    def test_mapping_and_iterable_agree(self):
        statuses = {
            "a": _status(Severity.CRITICAL),
            "b": _status(Severity.CRITICAL),
            "c": _status(Severity.NONE),
        }
        assert aggregate_risk(statuses) == aggregate_risk(list(statuses.values()))

    def test_order_independent(self):
        severities = [Severity.NONE, Severity.INFO, Severity.WARNING, Severity.CRITICAL]
        results = {
            aggregate_risk([_status(s) for s in ordering])
            for ordering in permutations(severities)
        }
        assert len(results) == 1

    def test_accepts_generator(self):
        risk = aggregate_risk(_status(s) for s in [Severity.WARNING])
        assert risk.level == RiskLevel.WARNING


# ============================================================================
# ASSESS ENVIRONMENTS
# ============================================================================

class TestAssessEnvironments:
    def test_all_current(self):
        risk = assess_environments({"dev": "1.2.3", "prod": "v1.2.3"}, "1.2.3")
        assert risk.level == RiskLevel.GOOD

    def test_major_behind_in_one_environment(self):
        risk = assess_environments(
            {"dev": "2.0.0", "qa": "1.9.0", "prod": "1.0.0"},
            "2.0.0",
        )
        assert risk.level == RiskLevel.CRITICAL
        assert risk.critical_count == 2

    def test_patch_behind_is_good(self):
        risk = assess_environments({"prod": "1.2.2"}, "1.2.3")
        assert risk.level == RiskLevel.GOOD

    def test_different_format_is_good(self):
        risk = assess_environments({"prod": "abc1234"}, "1.2.3")
        assert risk.level == RiskLevel.GOOD

    @pytest.mark.parametrize("deployed,level", [
        ("2024-01-01T00:00:00", RiskLevel.CRITICAL),
        ("2024-01-06T00:00:00", RiskLevel.WARNING),
        ("2024-01-08T00:00:00", RiskLevel.GOOD),
    ])
    def test_thresholds_passed_through(self, deployed, level):
        thresholds = StatusThresholds(critical_hours=168, warning_hours=24)
        risk = assess_environments({"prod": deployed}, "2024-01-09T00:00:00", thresholds)
        assert risk.level == level
