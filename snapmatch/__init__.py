"""Snapshot matching with tolerance for dynamic attributes, ordering and text noise."""

from snapmatch.assertions import assert_match_snapshot
from snapmatch.core.matcher import MatchOutcome, SnapshotMatcher, match_snapshot
from snapmatch.core.options import ComparisonOptions, SnapshotFormat
from snapmatch.errors import (
    MalformedInputError,
    NotFoundError,
    SnapshotError,
    SnapshotMismatchError,
    ValidationError,
)
from snapmatch.infrastructure.snapshot_store import FileSnapshotStore, InMemorySnapshotStore
from snapmatch.settings import SnapshotConfig, load_settings

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "assert_match_snapshot",
    "match_snapshot",
    "MatchOutcome",
    "SnapshotMatcher",
    "ComparisonOptions",
    "SnapshotFormat",
    "SnapshotConfig",
    "load_settings",
    "FileSnapshotStore",
    "InMemorySnapshotStore",
    "SnapshotError",
    "MalformedInputError",
    "NotFoundError",
    "SnapshotMismatchError",
    "ValidationError",
]
