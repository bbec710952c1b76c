"""Snapshot matching: resolve, create or compare.

One attempt runs through these states:

    start -> CREATED                  (no stored snapshot; actual is written)
    start -> resolved -> MATCHED      (stored and actual compare equal)
    start -> resolved -> MISMATCHED   (they differ; storage is left untouched)

CREATED counts as a pass. Options are resolved once at the start of an
attempt and do not change while it runs.

Two attempts racing on the same absent name may both write; callers that run
attempts in parallel must serialize them by name.
"""

from __future__ import annotations

from enum import Enum
import logging
from typing import Any, Optional

from snapmatch.core.handlers import handler_for
from snapmatch.core.options import ComparisonOptions, resolve_options
from snapmatch.core.validation import validate_snapshot_name
from snapmatch.infrastructure.snapshot_store import SnapshotStore
from snapmatch.settings import SnapshotConfig


logger = logging.getLogger(__name__)


class MatchOutcome(str, Enum):
    """Terminal state of a match attempt."""

    CREATED = "CREATED"
    MATCHED = "MATCHED"
    MISMATCHED = "MISMATCHED"

    @property
    def passed(self) -> bool:
        return self is not MatchOutcome.MISMATCHED


class SnapshotMatcher:
    """Compares actual values against named snapshots in a store."""

    def __init__(self, store: SnapshotStore, config: Optional[SnapshotConfig] = None) -> None:
        self.store = store
        self.config = config or SnapshotConfig()

    def options_for(self, **overrides: Any) -> ComparisonOptions:
        return resolve_options(self.config, **overrides)

    def attempt(self, actual: Any, name: str, **overrides: Any) -> MatchOutcome:
        """Run one match attempt and return its terminal state.

        Args:
            actual: Raw actual value (JSON text, bytes, a JSON-able structure,
                or plain text for the text format)
            name: Snapshot name such as ``api/file``
            **overrides: dynamic_attributes, ignore_order, excluding, format

        Raises:
            MalformedInputError: actual or stored content cannot be parsed
            ValidationError: invalid name or option
        """
        validate_snapshot_name(name)
        options = self.options_for(**overrides)
        handler = handler_for(options)
        key = f"{name}.{handler.extension}"

        if not self.store.exists(key):
            content = handler.writable(actual)
            self.store.write(key, content)
            logger.info("Created snapshot %s", key)
            return MatchOutcome.CREATED

        expected = handler.comparable(self.store.read(key), source="snapshot")
        current = handler.comparable(actual, source="actual")
        if handler.compare(current, expected):
            logger.debug("Snapshot %s matched", key)
            return MatchOutcome.MATCHED
        logger.warning("Snapshot %s did not match actual value", key)
        return MatchOutcome.MISMATCHED

    def match(self, actual: Any, name: str, **overrides: Any) -> bool:
        return self.attempt(actual, name, **overrides).passed


def match_snapshot(
    actual: Any,
    name: str,
    *,
    store: SnapshotStore,
    config: Optional[SnapshotConfig] = None,
    **overrides: Any,
) -> bool:
    """Return True when actual matches (or newly creates) the named snapshot."""
    return SnapshotMatcher(store, config).match(actual, name, **overrides)
