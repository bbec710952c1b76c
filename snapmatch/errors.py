"""Error taxonomy for snapshot matching."""

from __future__ import annotations


class SnapshotError(Exception):
    """Base error for snapshot matching failures."""


class ValidationError(SnapshotError, ValueError):
    """Invalid snapshot name, option, or configuration value."""


class MalformedInputError(SnapshotError, ValueError):
    """Input cannot be parsed under the selected format."""

    def __init__(self, message: str, *, source: str = "actual") -> None:
        super().__init__(message)
        self.source = source


class NotFoundError(SnapshotError, KeyError):
    """Snapshot does not exist in the store."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Snapshot not found: {self.name}"


class SnapshotMismatchError(SnapshotError, AssertionError):
    """Actual value does not match the stored snapshot."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Value does not match snapshot: {name}")
        self.name = name
