# ============================================================================
# VERSION ENGINE
# ============================================================================
# EPOCH: 1 - VERSION TRACKING
# STATUS: Core - Engine components
# PURPOSE: Classification, comparison, status, risk and matrix assembly
# CREATED: 19 OCT 2026
# ============================================================================
"""
Version Engine Components

Data flows one way:
    classifier / comparator -> status (per cell) -> risk (per application)
    -> matrix (whole grid, ordering)

- classifier: infer semver / timestamp / commit
- comparator: order two versions of the same scheme
- status: status + severity verdict for one pair
- risk: worst-case fold of an application's verdicts
- matrix: ordered application x environment grid

Every component is pure and synchronous; none performs I/O.
"""

from engine.classifier import (
    classify,
    is_semver,
    is_timestamp,
    is_commit_hash,
)
from engine.comparator import (
    SemVer,
    parse_semver,
    timestamp_to_millis,
    compare,
)
from engine.status import evaluate
from engine.risk import aggregate_risk, assess_environments
from engine.matrix import (
    MatrixBuilder,
    build_matrix,
    build_from_snapshot,
    order_environments,
    order_rows,
)

__all__ = [
    # Classifier
    "classify",
    "is_semver",
    "is_timestamp",
    "is_commit_hash",
    # Comparator
    "SemVer",
    "parse_semver",
    "timestamp_to_millis",
    "compare",
    # Status
    "evaluate",
    # Risk
    "aggregate_risk",
    "assess_environments",
    # Matrix
    "MatrixBuilder",
    "build_matrix",
    "build_from_snapshot",
    "order_environments",
    "order_rows",
]
