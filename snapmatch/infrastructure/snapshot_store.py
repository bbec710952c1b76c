"""Name-keyed storage for snapshot content."""

from __future__ import annotations

import logging
from pathlib import Path
from threading import Lock
from typing import Optional, Protocol

from snapmatch.core.validation import validate_snapshot_name
from snapmatch.errors import NotFoundError, ValidationError


logger = logging.getLogger(__name__)


class SnapshotStore(Protocol):
    """Storage used by the matcher.

    Names are slash-separated relative paths including the file extension,
    e.g. ``api/file.json``.
    """

    def exists(self, name: str) -> bool:
        ...

    def read(self, name: str) -> str:
        """Return stored content, raising NotFoundError when absent."""
        ...

    def write(self, name: str, content: str) -> None:
        """Persist content, creating parent segments as needed."""
        ...


class FileSnapshotStore:
    """Filesystem store rooted at a snapshot directory."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def path_for(self, name: str) -> Path:
        validate_snapshot_name(name)
        path = self.root / name
        root = self.root.resolve()
        resolved = path.resolve()
        if root != resolved and root not in resolved.parents:
            raise ValidationError(f"Path outside snapshot root: {name}")
        return path

    def exists(self, name: str) -> bool:
        return self.path_for(name).is_file()

    def read(self, name: str) -> str:
        path = self.path_for(name)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise NotFoundError(name) from None

    def write(self, name: str, content: str) -> None:
        path = self.path_for(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        logger.debug("Wrote snapshot %s (%d chars)", path, len(content))


class InMemorySnapshotStore:
    """Dict-backed store, mainly for tests and embedding."""

    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self._lock = Lock()
        self._data: dict[str, str] = {}
        for name, content in (initial or {}).items():
            self.write(name, content)

    def exists(self, name: str) -> bool:
        validate_snapshot_name(name)
        with self._lock:
            return name in self._data

    def read(self, name: str) -> str:
        validate_snapshot_name(name)
        with self._lock:
            try:
                return self._data[name]
            except KeyError:
                raise NotFoundError(name) from None

    def write(self, name: str, content: str) -> None:
        validate_snapshot_name(name)
        with self._lock:
            self._data[name] = content

    def contents(self) -> dict[str, str]:
        with self._lock:
            return dict(self._data)
