# ============================================================================
# VERSION COMPARATOR
# ============================================================================
# EPOCH: 1 - VERSION TRACKING
# STATUS: Engine - Ordering of two version strings
# PURPOSE: Compare semver, timestamp and commit versions
# CREATED: 19 OCT 2026
# ============================================================================
"""
Version Comparator

compare(a, b) returns:
    < 0  a precedes b (a is behind)
    0    equal, or incomparable (different schemes)
    > 0  a follows b (a is ahead)

A zero result does not imply equality. Callers that need to tell
"equal" from "incomparable" must check the schemes first, as the
status evaluator does.

Scheme rules:
- semver:    (major, minor, patch) integer tuple, missing or non-numeric
             components count as 0
- timestamp: epoch milliseconds; 10-digit strings are seconds, other digit
             strings are milliseconds, ISO strings are calendar date-times
             (naive values read as UTC)
- commit:    identical strings are equal, any two different hashes compare
             as "a is behind" in both directions (no commit graph available)
"""

import logging
import re
from datetime import datetime, timezone
from typing import NamedTuple, Optional

from core.contracts import VersionType
from engine.classifier import classify, is_epoch, is_iso_datetime

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_DIGITS = re.compile(r"\d+", re.ASCII)

# Length of the YYYY-MM-DDThh:mm:ss prefix
_ISO_PREFIX_LENGTH = 19


# ============================================================================
# PARSING
# ============================================================================

class SemVer(NamedTuple):
    """Numeric semver components. Ordering is tuple ordering."""
    major: int
    minor: int
    patch: int


def parse_semver(version: str) -> SemVer:
    """
    Parse up to three dotted integer components.

    Examples:
        "v1.2.3"     -> (1, 2, 3)
        "1.0"        -> (1, 0, 0)
        "1.2.3-rc1"  -> (1, 2, 0)   non-numeric component
    """
    clean = version[1:] if version.startswith("v") else version
    parts = clean.split(".")

    components = []
    for index in range(3):
        part = parts[index] if index < len(parts) else ""
        components.append(int(part) if _DIGITS.fullmatch(part) else 0)

    return SemVer(*components)


def _iso_to_millis(version: str) -> Optional[int]:
    """Parse an ISO date-time, falling back to its seconds-precision prefix."""
    for candidate in (version, version[:_ISO_PREFIX_LENGTH]):
        try:
            parsed = datetime.fromisoformat(candidate)
        except ValueError:
            continue
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        delta = parsed - _EPOCH
        return delta.days * 86_400_000 + delta.seconds * 1000 + delta.microseconds // 1000

    logger.debug(f"Unparseable ISO timestamp: {version!r}")
    return None


def timestamp_to_millis(version: str) -> Optional[int]:
    """
    Convert a timestamp version to epoch milliseconds.

    Returns None when the string is not a usable timestamp
    (e.g. an ISO prefix with an impossible month).
    """
    if is_epoch(version):
        value = int(version)
        return value * 1000 if len(version) == 10 else value

    if is_iso_datetime(version):
        return _iso_to_millis(version)

    return None


# ============================================================================
# COMPARISON
# ============================================================================

def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _compare_semver(a: str, b: str) -> int:
    left, right = parse_semver(a), parse_semver(b)
    if left == right:
        return 0
    return -1 if left < right else 1


def _compare_timestamps(a: str, b: str) -> int:
    left, right = timestamp_to_millis(a), timestamp_to_millis(b)
    if left is None or right is None:
        return 0
    return _sign(left - right)


def _compare_commits(a: str, b: str) -> int:
    # Without history a different hash can only be reported as "behind"
    return 0 if a == b else -1


_COMPARATORS = {
    VersionType.SEMVER: _compare_semver,
    VersionType.TIMESTAMP: _compare_timestamps,
    VersionType.COMMIT: _compare_commits,
}


def compare(a: str, b: str) -> int:
    """
    Order two version strings of the same scheme.

    Args:
        a: Version being judged (typically the deployed version)
        b: Reference version (typically the latest version)

    Returns:
        -1, 0 or 1 (0 also when the schemes differ)
    """
    type_a, type_b = classify(a), classify(b)
    if type_a != type_b:
        return 0
    return _COMPARATORS[type_a](a, b)


__all__ = [
    "SemVer",
    "parse_semver",
    "timestamp_to_millis",
    "compare",
]
