# ============================================================================
# CONFIGURATION TESTS
# ============================================================================
# EPOCH: 1 - VERSION TRACKING
# STATUS: Tests - Defaults and environment overrides
# PURPOSE: Verify from_env() overrides and the cached defaults instance
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Tests

Run with:
    pytest tests/test_config.py -v
"""

import dataclasses

import pytest

from core.config import (
    BackendDefaults,
    DashboardDefaults,
    Defaults,
    StatusThresholds,
    get_defaults,
    reset_defaults,
)


@pytest.fixture(autouse=True)
def _fresh_defaults():
    reset_defaults()
    yield
    reset_defaults()


class TestStatusThresholds:
    def test_defaults(self):
        thresholds = StatusThresholds()
        assert thresholds.critical_hours == 168.0
        assert thresholds.warning_hours == 24.0

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("STATUS_CRITICAL_HOURS", "72")
        monkeypatch.setenv("STATUS_WARNING_HOURS", "6.5")
        thresholds = StatusThresholds.from_env()
        assert thresholds.critical_hours == 72.0
        assert thresholds.warning_hours == 6.5

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            StatusThresholds().critical_hours = 1


class TestBackendDefaults:
    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("BACKEND_URL", "http://backend:9000")
        monkeypatch.setenv("BACKEND_READ_TIMEOUT", "3")
        monkeypatch.setenv("BACKEND_VERSIONS_PATH", "/api/versions")

        backend = BackendDefaults.from_env()
        assert backend.base_url == "http://backend:9000"
        assert backend.read_timeout == 3.0
        assert backend.connect_timeout == 5.0
        assert backend.versions_path == "/api/versions"
        assert backend.applications_path == "/applications"


class TestDashboardDefaults:
    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("DASHBOARD_REFRESH_SECONDS", "10")
        dashboard = DashboardDefaults.from_env()
        assert dashboard.refresh_interval_seconds == 10
        assert dashboard.unknown_latest_version == "unknown"


class TestGlobalDefaults:
    def test_cached_until_reset(self, monkeypatch):
        first = get_defaults()
        assert get_defaults() is first

        monkeypatch.setenv("STATUS_WARNING_HOURS", "12")
        assert get_defaults().status.warning_hours == 24.0

        reset_defaults()
        assert get_defaults().status.warning_hours == 12.0

    def test_container(self):
        defaults = Defaults()
        assert defaults.backend.base_url == "http://localhost:8080"
        assert defaults.dashboard.refresh_interval_seconds == 30
