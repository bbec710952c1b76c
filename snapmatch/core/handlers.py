"""Format handlers for snapshot content.

Each handler turns raw content into a comparable form, compares two
comparable forms, and decides what text gets written to storage:

- StructuredHandler: JSON parsed and normalized (dynamic attributes,
  ignore-order fields); the original text is what gets stored.
- TextHandler: exclusion patterns masked; the raw text is stored.

Normalization only ever applies to comparison, never to stored content.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import json
from typing import Any

from snapmatch.core.mask import mask_text
from snapmatch.core.normalize import normalize, tree_equal
from snapmatch.core.options import ComparisonOptions, SnapshotFormat
from snapmatch.errors import MalformedInputError, ValidationError


class FormatHandler(ABC):
    """Base class for format-specific comparison."""

    extension: str = ""

    def __init__(self, options: ComparisonOptions) -> None:
        self.options = options

    @abstractmethod
    def comparable(self, raw: Any, *, source: str = "actual") -> Any:
        """Return the normalized form of raw content."""

    @abstractmethod
    def compare(self, actual: Any, expected: Any) -> bool:
        """Return True when two normalized forms are equal."""

    @abstractmethod
    def writable(self, raw: Any) -> str:
        """Return the text persisted for a new snapshot."""


class StructuredHandler(FormatHandler):
    extension = "json"

    def comparable(self, raw: Any, *, source: str = "actual") -> Any:
        parsed = _parse_json(_as_json_text(raw, source), source)
        return normalize(parsed, self.options.dynamic_attributes, self.options.ignore_order)

    def compare(self, actual: Any, expected: Any) -> bool:
        return tree_equal(actual, expected)

    def writable(self, raw: Any) -> str:
        text = _as_json_text(raw, "actual")
        _parse_json(text, "actual")
        return text


class TextHandler(FormatHandler):
    extension = "txt"

    def comparable(self, raw: Any, *, source: str = "actual") -> str:
        return mask_text(_text_input(raw, source), self.options.excluding)

    def compare(self, actual: Any, expected: Any) -> bool:
        return actual == expected

    def writable(self, raw: Any) -> str:
        return _text_input(raw, "actual")


_HANDLERS: dict[SnapshotFormat, type[FormatHandler]] = {
    SnapshotFormat.STRUCTURED: StructuredHandler,
    SnapshotFormat.TEXT: TextHandler,
}


def handler_for(options: ComparisonOptions) -> FormatHandler:
    """Instantiate the handler for the resolved format."""
    return _HANDLERS[options.format](options)


def _text_input(raw: Any, source: str) -> str:
    # text has no parse step; unusable input is a caller error
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (bytes, bytearray)):
        try:
            return bytes(raw).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValidationError(f"Invalid UTF-8 in {source} text: {exc}") from exc
    raise ValidationError(f"Invalid {source} text: expected str or bytes, got {type(raw).__name__}")


def _as_json_text(raw: Any, source: str) -> str:
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (bytes, bytearray)):
        try:
            return bytes(raw).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedInputError(f"Invalid UTF-8 in {source} content: {exc}", source=source) from exc
    try:
        return json.dumps(raw, indent=2, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise MalformedInputError(f"Invalid {source} content: {exc}", source=source) from exc


def _parse_json(text: str, source: str) -> Any:
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise MalformedInputError(f"Invalid JSON in {source} content: {exc}", source=source) from exc


def _reject_constant(name: str) -> Any:
    # NaN never equals itself, so a snapshot holding it could never match
    raise json.JSONDecodeError(f"Unsupported JSON constant {name}", name, 0)
