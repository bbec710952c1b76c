"""Test helper utilities."""

from .snapshots import FIXTURES_ROOT, SAMPLE_TEXT, copy_snapshot_fixtures

__all__ = [
    "FIXTURES_ROOT",
    "SAMPLE_TEXT",
    "copy_snapshot_fixtures",
]
