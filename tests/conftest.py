"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from snapmatch.core.matcher import SnapshotMatcher
from snapmatch.infrastructure.snapshot_store import FileSnapshotStore
from snapmatch.settings import SnapshotConfig
from tests.helpers.snapshots import copy_snapshot_fixtures


@pytest.fixture
def snapshot_root(tmp_path: Path) -> Path:
    """Golden snapshots copied into a per-test directory."""
    return copy_snapshot_fixtures(tmp_path / "snapshots")


@pytest.fixture
def store(snapshot_root: Path) -> FileSnapshotStore:
    return FileSnapshotStore(snapshot_root)


@pytest.fixture
def config() -> SnapshotConfig:
    return SnapshotConfig()


@pytest.fixture
def matcher(store: FileSnapshotStore, config: SnapshotConfig) -> SnapshotMatcher:
    return SnapshotMatcher(store, config)


@pytest.fixture
def matcher_factory(store: FileSnapshotStore):
    """Factory for matchers sharing the fixture store with a custom config."""
    def _build(**changes) -> SnapshotMatcher:
        return SnapshotMatcher(store, SnapshotConfig().with_overrides(**changes))

    return _build
