# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# EPOCH: 1 - VERSION TRACKING
# STATUS: Core - Configuration and defaults
# PURPOSE: Centralized configuration management
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Module

Provides centralized configuration and defaults for the version monitor.
"""

from core.config.defaults import (
    StatusThresholds,
    BackendDefaults,
    DashboardDefaults,
    Defaults,
    get_defaults,
    reset_defaults,
)

__all__ = [
    "StatusThresholds",
    "BackendDefaults",
    "DashboardDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
]
