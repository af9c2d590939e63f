# ============================================================================
# VERSION CLASSIFIER
# ============================================================================
# EPOCH: 1 - VERSION TRACKING
# STATUS: Engine - Version scheme detection
# PURPOSE: Infer semver / timestamp / commit from a raw version string
# CREATED: 19 OCT 2026
# ============================================================================
"""
Version Classifier

Detects which scheme a version string uses. Checks run in a fixed order
because the formats overlap:

1. semver     v1.2.3, 1.2.3-rc1      (prefix match, qualifiers ignored)
2. timestamp  2024-01-01T00:00:00... (ISO prefix) or 10-13 digit epoch
3. commit     7-40 hex characters
4. anything else falls back to commit

Classification is total: it never raises.
"""

import re
from typing import Any

from core.contracts import VersionType

SEMVER_PATTERN = re.compile(r"^v?\d+\.\d+\.\d+", re.ASCII)
ISO_DATETIME_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}", re.ASCII)
# Whole-string patterns, applied with fullmatch
EPOCH_PATTERN = re.compile(r"\d{10,13}", re.ASCII)
COMMIT_PATTERN = re.compile(r"[a-f0-9]{7,40}", re.ASCII | re.IGNORECASE)


def is_semver(version: str) -> bool:
    return bool(SEMVER_PATTERN.match(version))


def is_iso_datetime(version: str) -> bool:
    return bool(ISO_DATETIME_PATTERN.match(version))


def is_epoch(version: str) -> bool:
    """Purely numeric string of 10 (seconds) to 13 (milliseconds) digits."""
    return bool(EPOCH_PATTERN.fullmatch(version))


def is_timestamp(version: str) -> bool:
    return is_iso_datetime(version) or is_epoch(version)


def is_commit_hash(version: str) -> bool:
    return bool(COMMIT_PATTERN.fullmatch(version))


def classify(version: Any) -> VersionType:
    """
    Infer the version scheme of a raw version string.

    Args:
        version: Raw version as reported by a deployment

    Returns:
        VersionType (COMMIT when nothing else matches)
    """
    if not isinstance(version, str):
        return VersionType.COMMIT

    if is_semver(version):
        return VersionType.SEMVER

    if is_timestamp(version):
        return VersionType.TIMESTAMP

    # Hex hashes and unrecognized strings both land here
    return VersionType.COMMIT


__all__ = [
    "classify",
    "is_semver",
    "is_iso_datetime",
    "is_epoch",
    "is_timestamp",
    "is_commit_hash",
]
