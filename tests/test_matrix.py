# ============================================================================
# MATRIX BUILDER TESTS
# ============================================================================
# EPOCH: 1 - VERSION TRACKING
# STATUS: Tests - Dashboard grid assembly
# PURPOSE: Verify cell states, latest resolution, ordering and critical summary
# CREATED: 19 OCT 2026
# ============================================================================
"""
Matrix Builder Tests

Run with:
    pytest tests/test_matrix.py -v
"""

import logging

from core.config import StatusThresholds
from core.contracts import CellState, RiskLevel, Severity, VersionState, VersionType
from core.logging import HumanFormatter, get_current_context
from core.models import (
    Application,
    Deployment,
    Environment,
    Instance,
    LatestVersion,
    TrackingSnapshot,
    VersionCell,
)
from engine.matrix import MatrixBuilder, build_from_snapshot, build_matrix, order_environments


# ============================================================================
# HELPERS
# ============================================================================

def _app(app_id, order=None, version_type=None):
    return Application(id=app_id, name=f"app-{app_id}", order=order, version_type=version_type)


def _env(env_id, order=0):
    return Environment(id=env_id, name=env_id.upper(), order=order)


def _cell(app_id, env_id, version=None):
    instance = Instance(id=f"{app_id}-{env_id}", environment_id=env_id, application_id=app_id)
    deployment = Deployment(version=version) if version is not None else None
    return VersionCell(instance=instance, deployment=deployment)


def _latest(app_id, version):
    return LatestVersion(application_id=app_id, version=version)


ENVIRONMENTS = [_env("dev", 1), _env("qa", 2), _env("prod", 3)]


# ============================================================================
# CELL STATES
# ============================================================================

class TestCellStates:
    def test_every_row_has_one_cell_per_environment(self):
        matrix = build_matrix([_app("a"), _app("b")], ENVIRONMENTS, [], [])

        assert matrix.application_count == 2
        assert matrix.environment_count == 3
        for row in matrix.rows:
            assert [c.environment_id for c in row.cells] == ["dev", "qa", "prod"]
            assert all(c.state == CellState.NOT_TRACKED for c in row.cells)

    def test_not_tracked_not_deployed_deployed(self):
        matrix = build_matrix(
            [_app("a")],
            ENVIRONMENTS,
            [_cell("a", "dev", "1.0.0"), _cell("a", "qa")],
            [_latest("a", "1.0.0")],
        )
        row = matrix.row("a")

        assert row.cell("dev").state == CellState.DEPLOYED
        assert row.cell("dev").status.status == VersionState.CURRENT
        assert row.cell("qa").state == CellState.NOT_DEPLOYED
        assert row.cell("qa").instance_id == "a-qa"
        assert row.cell("qa").version is None
        assert row.cell("qa").status.message == "Different version format"
        assert row.cell("prod").state == CellState.NOT_TRACKED
        assert row.cell("prod").status is None
        assert not row.cell("prod").is_tracked

    def test_not_deployed_counts_as_outdated(self):
        """An undeployed instance is judged as version "" against the latest."""
        matrix = build_matrix([_app("a")], ENVIRONMENTS, [_cell("a", "prod")], [_latest("a", "1.0.0")])
        row = matrix.row("a")
        cell = row.cell("prod")

        assert cell.state == CellState.NOT_DEPLOYED
        assert cell.status.status == VersionState.UNKNOWN
        assert cell.status.severity == Severity.INFO
        assert row.is_outdated
        assert row.risk.level == RiskLevel.GOOD
        assert matrix.outdated_count == 1

    def test_not_deployed_against_commit_latest_is_warning(self):
        matrix = build_matrix([_app("a")], ENVIRONMENTS, [_cell("a", "prod")], [_latest("a", "abc1234")])
        row = matrix.row("a")

        assert row.cell("prod").status.message == "Different commit"
        assert row.risk.level == RiskLevel.WARNING

    def test_not_tracked_is_never_evaluated(self):
        matrix = build_matrix([_app("a")], ENVIRONMENTS, [], [_latest("a", "abc1234")])
        row = matrix.row("a")

        assert all(cell.status is None for cell in row.cells)
        assert not row.is_outdated

    def test_last_instance_record_wins(self):
        matrix = build_matrix(
            [_app("a")],
            ENVIRONMENTS,
            [_cell("a", "dev", "1.0.0"), _cell("a", "dev", "2.0.0")],
            [_latest("a", "2.0.0")],
        )
        assert matrix.row("a").cell("dev").version == "2.0.0"

    def test_unknown_ids_ignored(self):
        matrix = build_matrix(
            [_app("a")],
            ENVIRONMENTS,
            [_cell("a", "staging", "1.0.0"), _cell("ghost", "dev", "1.0.0")],
            [],
        )
        assert matrix.application_count == 1
        assert all(not c.is_tracked for c in matrix.row("a").cells)


# ============================================================================
# LATEST VERSIONS
# ============================================================================

class TestLatestVersion:
    def test_missing_latest_is_unknown(self):
        matrix = build_matrix([_app("a")], ENVIRONMENTS, [_cell("a", "dev", "1.0.0")], [])
        row = matrix.row("a")

        assert row.latest_version == "unknown"
        assert row.cell("dev").status.message == "Different version format"
        assert row.is_outdated

    def test_commit_against_unknown_is_warning(self):
        matrix = build_matrix([_app("a")], ENVIRONMENTS, [_cell("a", "dev", "abc1234")], [])
        assert matrix.row("a").risk.level == RiskLevel.WARNING

    def test_first_latest_record_wins(self):
        matrix = build_matrix(
            [_app("a")], ENVIRONMENTS, [],
            [_latest("a", "1.0.0"), _latest("a", "9.9.9")],
        )
        assert matrix.row("a").latest_version == "1.0.0"

    def test_empty_latest_is_unknown(self):
        matrix = build_matrix([_app("a")], ENVIRONMENTS, [], [_latest("a", "")])
        assert matrix.row("a").latest_version == "unknown"

    def test_custom_sentinel(self):
        matrix = MatrixBuilder(unknown_latest_version="n/a").build([_app("a")], ENVIRONMENTS, [], [])
        assert matrix.row("a").latest_version == "n/a"


# ============================================================================
# OUTDATED / RISK
# ============================================================================

class TestRowRisk:
    def test_outdated_when_any_deployed_cell_not_current(self):
        matrix = build_matrix(
            [_app("a")],
            ENVIRONMENTS,
            [_cell("a", "dev", "1.2.0"), _cell("a", "prod", "1.1.0")],
            [_latest("a", "1.2.0")],
        )
        row = matrix.row("a")
        assert row.is_outdated
        assert row.risk.level == RiskLevel.WARNING
        assert matrix.outdated_count == 1

    def test_ahead_is_outdated_and_warning(self):
        matrix = build_matrix(
            [_app("a")], ENVIRONMENTS,
            [_cell("a", "dev", "1.3.0")],
            [_latest("a", "1.2.0")],
        )
        row = matrix.row("a")
        assert row.cell("dev").status.status == VersionState.AHEAD
        assert row.is_outdated
        assert row.risk.level == RiskLevel.WARNING

    def test_thresholds_applied_to_timestamps(self):
        cells = [_cell("a", "prod", "2024-01-01T00:00:00")]
        latest = [_latest("a", "2024-01-01T05:00:00")]

        relaxed = build_matrix([_app("a")], ENVIRONMENTS, cells, latest)
        strict = build_matrix(
            [_app("a")], ENVIRONMENTS, cells, latest,
            thresholds=StatusThresholds(critical_hours=4, warning_hours=1),
        )

        assert relaxed.row("a").risk.level == RiskLevel.GOOD
        assert strict.row("a").risk.level == RiskLevel.CRITICAL

    def test_statuses_filter(self):
        matrix = build_matrix(
            [_app("a"), _app("b")],
            ENVIRONMENTS,
            [_cell("a", "dev", "1.0.0"), _cell("b", "dev", "0.9.0"), _cell("b", "qa")],
            [_latest("a", "1.0.0"), _latest("b", "1.0.0")],
        )
        assert [c.instance_id for c in matrix.statuses(VersionState.CURRENT)] == ["a-dev"]
        assert [c.instance_id for c in matrix.statuses(VersionState.OUTDATED)] == ["b-dev"]


# ============================================================================
# ORDERING
# ============================================================================

class TestOrdering:
    def test_environments_by_order_stable(self):
        envs = [_env("z", 2), _env("a", 1), _env("m", 2), _env("b", 1)]
        assert [e.id for e in order_environments(envs)] == ["a", "b", "z", "m"]

    def test_environment_columns_follow_order(self):
        matrix = build_matrix([_app("a")], [_env("prod", 3), _env("dev", 1)], [], [])
        assert [e.id for e in matrix.environments] == ["dev", "prod"]
        assert [c.environment_id for c in matrix.rows[0].cells] == ["dev", "prod"]

    def test_explicit_application_order(self):
        apps = [_app("a", order=3), _app("b", order=1), _app("c", order=2)]
        cells = [_cell("a", "prod", "1.0.0")]
        latest = [_latest("a", "2.0.0")]

        matrix = build_matrix(apps, ENVIRONMENTS, cells, latest)
        # Critical risk on "a" does not override explicit order
        assert [r.application_id for r in matrix.rows] == ["b", "c", "a"]

    def test_risk_order_when_any_order_missing(self):
        apps = [_app("good", order=1), _app("warn"), _app("crit", order=2)]
        cells = [
            _cell("good", "prod", "1.0.0"),
            _cell("warn", "prod", "1.0.0"),
            _cell("crit", "prod", "1.0.0"),
        ]
        latest = [
            _latest("good", "1.0.0"),
            _latest("warn", "1.1.0"),
            _latest("crit", "2.0.0"),
        ]

        matrix = build_matrix(apps, ENVIRONMENTS, cells, latest)
        assert [r.application_id for r in matrix.rows] == ["crit", "warn", "good"]

    def test_risk_order_ties_keep_input_order(self):
        apps = [_app("x"), _app("y"), _app("z")]
        matrix = build_matrix(apps, ENVIRONMENTS, [], [])
        assert [r.application_id for r in matrix.rows] == ["x", "y", "z"]


# ============================================================================
# CRITICAL SUMMARY
# ============================================================================

class TestCriticalApplications:
    def test_lists_critical_environments(self):
        apps = [_app("a"), _app("b")]
        cells = [
            _cell("a", "dev", "1.0.0"),
            _cell("a", "prod", "1.0.0"),
            _cell("a", "qa", "2.0.0"),
            _cell("b", "prod", "1.9.0"),
        ]
        latest = [_latest("a", "2.0.0"), _latest("b", "2.0.0")]

        matrix = build_matrix(apps, ENVIRONMENTS, cells, latest)

        assert matrix.critical_count == 2
        critical_a = matrix.critical_applications[0]
        assert critical_a.application_id == "a"
        assert critical_a.environment_ids == ["dev", "prod"]
        assert critical_a.environment_names == ["DEV", "PROD"]

    def test_no_critical(self):
        matrix = build_matrix([_app("a")], ENVIRONMENTS, [_cell("a", "dev", "1.0.0")], [_latest("a", "1.1.0")])
        assert matrix.critical_applications == []
        assert matrix.row("a").cells_with_severity(Severity.WARNING)[0].environment_id == "dev"


# ============================================================================
# SNAPSHOT / SERIALIZATION
# ============================================================================

class TestSnapshot:
    def test_build_from_snapshot(self):
        snapshot = TrackingSnapshot(
            applications=[_app("a")],
            environments=ENVIRONMENTS,
            cells=[_cell("a", "dev", "1.0.0")],
            latest=[_latest("a", "1.0.0")],
        )
        matrix = build_from_snapshot(snapshot)
        assert matrix.row("a").cell("dev").status.status == VersionState.CURRENT

    def test_empty_snapshot(self):
        matrix = build_from_snapshot(TrackingSnapshot())
        assert matrix.rows == []
        assert matrix.environments == []

    def test_dump_includes_counts(self):
        matrix = build_matrix([_app("a")], ENVIRONMENTS, [_cell("a", "dev", "0.1.0")], [_latest("a", "1.0.0")])
        data = matrix.model_dump(mode="json")

        assert data["application_count"] == 1
        assert data["critical_count"] == 1
        assert data["rows"][0]["cells"][0]["state"] == "deployed"
        assert data["rows"][0]["cells"][0]["status"]["severity"] == "critical"
        assert data["rows"][0]["risk"]["level"] == "critical"


# ============================================================================
# LOG CONTEXT
# ============================================================================

class _CapturingHandler(logging.Handler):
    """Formats records at emit time, while the log context is still active."""

    def __init__(self):
        super().__init__(logging.DEBUG)
        self.setFormatter(HumanFormatter())
        self.lines = []

    def emit(self, record):
        self.lines.append(self.format(record))


class TestLogContext:
    def test_cell_logs_carry_application_and_environment(self):
        handler = _CapturingHandler()
        engine_logger = logging.getLogger("engine.matrix")
        previous_level = engine_logger.level
        engine_logger.addHandler(handler)
        engine_logger.setLevel(logging.DEBUG)
        try:
            build_matrix(
                [_app("a", version_type=VersionType.SEMVER)],
                ENVIRONMENTS,
                [_cell("a", "qa", "abc1234")],
                [_latest("a", "1.0.0")],
            )
        finally:
            engine_logger.removeHandler(handler)
            engine_logger.setLevel(previous_level)

        mismatch = [line for line in handler.lines if "does not look like semver" in line]
        assert len(mismatch) == 1
        assert "[app=a, env=qa]" in mismatch[0]

    def test_context_cleared_after_build(self):
        build_matrix([_app("a")], ENVIRONMENTS, [_cell("a", "dev", "1.0.0")], [])
        context = get_current_context()
        assert context.application_id is None
        assert context.environment_id is None
