# ============================================================================
# MODEL AND CONTRACT TESTS
# ============================================================================
# EPOCH: 1 - VERSION TRACKING
# STATUS: Tests - Enums and backend record parsing
# PURPOSE: Verify enum ordering and lenient parsing of backend records
# CREATED: 19 OCT 2026
# ============================================================================
"""
Model and Contract Tests

Run with:
    pytest tests/test_models.py -v
"""

import pytest
from pydantic import ValidationError

from core.contracts import (
    CellState,
    EnvironmentCategory,
    RiskLevel,
    Severity,
    VersionState,
    VersionType,
)
from core.models import (
    Application,
    Environment,
    EnvironmentRisk,
    MatrixCell,
    VersionCell,
    VersionStatus,
)


# ============================================================================
# CONTRACTS
# ============================================================================

class TestSeverity:
    def test_total_order(self):
        assert Severity.NONE < Severity.INFO < Severity.WARNING < Severity.CRITICAL
        assert Severity.CRITICAL >= Severity.CRITICAL
        assert Severity.INFO <= Severity.WARNING

    def test_worst(self):
        assert Severity.worst([Severity.INFO, Severity.CRITICAL, Severity.NONE]) == Severity.CRITICAL
        assert Severity.worst([]) == Severity.NONE

    def test_sort(self):
        ordered = sorted([Severity.CRITICAL, Severity.NONE, Severity.WARNING, Severity.INFO])
        assert ordered == [Severity.NONE, Severity.INFO, Severity.WARNING, Severity.CRITICAL]


class TestEnumValues:
    def test_wire_values(self):
        assert [v.value for v in VersionType] == ["semver", "timestamp", "commit"]
        assert [v.value for v in VersionState] == ["current", "outdated", "ahead", "unknown"]
        assert [v.value for v in RiskLevel] == ["good", "warning", "critical"]
        assert CellState.NOT_TRACKED.value == "not_tracked"

    def test_risk_sort_rank(self):
        ordered = sorted(RiskLevel, key=lambda level: level.sort_rank)
        assert ordered == [RiskLevel.CRITICAL, RiskLevel.WARNING, RiskLevel.GOOD]

    @pytest.mark.parametrize("label,expected", [
        ("semver", VersionType.SEMVER),
        ("semantic", VersionType.SEMVER),
        ("Timestamp", VersionType.TIMESTAMP),
        (" commit ", VersionType.COMMIT),
        ("calver", None),
        ("", None),
        (None, None),
    ])
    def test_version_type_labels(self, label, expected):
        assert VersionType.from_label(label) == expected


# ============================================================================
# BACKEND RECORDS
# ============================================================================

class TestApplication:
    def test_camel_case_version_type(self):
        app = Application.model_validate({"id": 1, "name": "api", "versionType": "semantic"})
        assert app.id == "1"
        assert app.version_type == VersionType.SEMVER
        assert app.order is None

    def test_unknown_version_type_is_none(self):
        app = Application.model_validate({"id": "a", "name": "api", "versionType": "calver"})
        assert app.version_type is None

    def test_missing_name_rejected(self):
        with pytest.raises(ValidationError):
            Application.model_validate({"id": "a"})

    def test_long_names_and_ids_accepted(self):
        """Display fields carry no length limit, so one long record cannot sink a snapshot."""
        app = Application.model_validate({"id": "x" * 200, "name": "n" * 1000})
        assert len(app.name) == 1000

        cell = VersionCell.model_validate({
            "instance": {"id": "i" * 100, "environment_id": "e" * 100, "application_id": "x" * 200},
        })
        assert cell.instance.application_id == app.id

    def test_frozen(self):
        app = Application(id="a", name="api")
        with pytest.raises(ValidationError):
            app.name = "other"


class TestEnvironment:
    def test_defaults(self):
        env = Environment.model_validate({"id": 7, "name": "prod"})
        assert env.id == "7"
        assert env.order == 0
        assert env.category is None
        assert not env.is_production

    def test_category_case_insensitive(self):
        env = Environment.model_validate({"id": "p", "name": "prod", "category": "PRODUCTION"})
        assert env.category == EnvironmentCategory.PRODUCTION
        assert env.is_production

    def test_unknown_category_is_none(self):
        env = Environment.model_validate({"id": "s", "name": "sandbox", "category": "sandbox"})
        assert env.category is None


class TestVersionCell:
    def test_nested_parse_with_numeric_ids(self):
        cell = VersionCell.model_validate({
            "instance": {"id": 10, "environment_id": 2, "application_id": 3},
            "deployment": {"version": "1.2.3", "deployed_at": "2024-01-01T00:00:00Z"},
        })
        assert cell.instance.pair == ("2", "3")
        assert cell.is_deployed
        assert cell.deployment.deployed_at.year == 2024

    def test_null_deployment(self):
        cell = VersionCell.model_validate({
            "instance": {"id": "i", "environment_id": "e", "application_id": "a"},
            "deployment": None,
        })
        assert not cell.is_deployed


class TestDerivedModels:
    def test_matrix_cell_severity(self):
        assert MatrixCell(environment_id="e").severity == Severity.NONE

        status = VersionStatus(status=VersionState.OUTDATED, severity=Severity.WARNING, message="x")
        cell = MatrixCell(environment_id="e", state=CellState.DEPLOYED, version="1", status=status)
        assert cell.severity == Severity.WARNING
        assert cell.is_deployed

    def test_risk_counts_non_negative(self):
        with pytest.raises(ValidationError):
            EnvironmentRisk(level=RiskLevel.GOOD, message="x", critical_count=-1)
