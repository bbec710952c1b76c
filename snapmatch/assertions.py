"""Assertion helper for snapshot tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from snapmatch.core.matcher import MatchOutcome, SnapshotMatcher
from snapmatch.errors import SnapshotMismatchError
from snapmatch.infrastructure.snapshot_store import FileSnapshotStore, SnapshotStore
from snapmatch.settings import SnapshotConfig


def assert_match_snapshot(
    actual: Any,
    name: str,
    *,
    store: Optional[SnapshotStore] = None,
    config: Optional[SnapshotConfig] = None,
    **overrides: Any,
) -> MatchOutcome:
    """Assert that actual matches the named snapshot, creating it if absent.

    Without an explicit store, snapshots live under ``config.snapshots_dir``
    relative to the current working directory.

    Raises:
        SnapshotMismatchError: stored snapshot exists and differs
    """
    config = config or SnapshotConfig()
    if store is None:
        store = FileSnapshotStore(Path.cwd() / config.snapshots_dir)
    outcome = SnapshotMatcher(store, config).attempt(actual, name, **overrides)
    if outcome is MatchOutcome.MISMATCHED:
        raise SnapshotMismatchError(name)
    return outcome
