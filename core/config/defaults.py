# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# EPOCH: 1 - VERSION TRACKING
# STATUS: Core - Default configuration values
# PURPOSE: Centralized defaults for severity bands, backend access, dashboard
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Defaults

Provides sensible defaults for status evaluation and backend access.
These can be overridden via environment variables.

Design:
- Immutable dataclasses for defaults
- Environment variable overrides
- Type-safe access
"""

import os
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class StatusThresholds:
    """
    Severity bands for timestamp-versioned deployments.

    A deployment strictly older than critical_hours is CRITICAL,
    strictly older than warning_hours is WARNING, otherwise INFO.
    """
    critical_hours: float = 168.0  # one week
    warning_hours: float = 24.0    # one day

    @classmethod
    def from_env(cls) -> "StatusThresholds":
        """Create from environment variables."""
        return cls(
            critical_hours=float(os.getenv("STATUS_CRITICAL_HOURS", 168)),
            warning_hours=float(os.getenv("STATUS_WARNING_HOURS", 24)),
        )


@dataclass(frozen=True)
class BackendDefaults:
    """
    Access settings for the version backend.

    The backend owns applications, environments, instances and deployments.
    """
    base_url: str = "http://localhost:8080"

    # Timeouts (seconds)
    connect_timeout: float = 5.0
    read_timeout: float = 15.0

    # List endpoints
    applications_path: str = "/applications"
    environments_path: str = "/environments"
    versions_path: str = "/versions"

    @classmethod
    def from_env(cls) -> "BackendDefaults":
        """Create from environment variables."""
        return cls(
            base_url=os.getenv("BACKEND_URL", "http://localhost:8080"),
            connect_timeout=float(os.getenv("BACKEND_CONNECT_TIMEOUT", 5.0)),
            read_timeout=float(os.getenv("BACKEND_READ_TIMEOUT", 15.0)),
            applications_path=os.getenv("BACKEND_APPLICATIONS_PATH", "/applications"),
            environments_path=os.getenv("BACKEND_ENVIRONMENTS_PATH", "/environments"),
            versions_path=os.getenv("BACKEND_VERSIONS_PATH", "/versions"),
        )


@dataclass(frozen=True)
class DashboardDefaults:
    """Defaults for the dashboard view."""
    # Clients re-fetch the dashboard on this interval; the service never caches
    refresh_interval_seconds: int = 30

    # Latest version reported when the backend has none for an application
    unknown_latest_version: str = "unknown"

    @classmethod
    def from_env(cls) -> "DashboardDefaults":
        """Create from environment variables."""
        return cls(
            refresh_interval_seconds=int(os.getenv("DASHBOARD_REFRESH_SECONDS", 30)),
        )


# ============================================================================
# GLOBAL DEFAULTS INSTANCE
# ============================================================================

@dataclass
class Defaults:
    """Container for all default configurations."""
    status: StatusThresholds = field(default_factory=StatusThresholds)
    backend: BackendDefaults = field(default_factory=BackendDefaults)
    dashboard: DashboardDefaults = field(default_factory=DashboardDefaults)

    @classmethod
    def from_env(cls) -> "Defaults":
        """Create all defaults from environment variables."""
        return cls(
            status=StatusThresholds.from_env(),
            backend=BackendDefaults.from_env(),
            dashboard=DashboardDefaults.from_env(),
        )


_defaults: Optional[Defaults] = None


def get_defaults() -> Defaults:
    """Get global defaults instance."""
    global _defaults
    if _defaults is None:
        _defaults = Defaults.from_env()
    return _defaults


def reset_defaults() -> None:
    """Reset defaults (for testing)."""
    global _defaults
    _defaults = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "StatusThresholds",
    "BackendDefaults",
    "DashboardDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
]
