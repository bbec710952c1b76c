"""Per-attempt comparison options."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
import re
from typing import Iterable, Optional, Union

from snapmatch.core.mask import PatternLike, coerce_patterns, merge_patterns
from snapmatch.errors import ValidationError
from snapmatch.settings import SnapshotConfig


logger = logging.getLogger(__name__)


class SnapshotFormat(str, Enum):
    """Serialized form of snapshot content."""

    STRUCTURED = "json"
    TEXT = "text"


@dataclass(frozen=True)
class ComparisonOptions:
    """Immutable settings for a single match attempt."""

    dynamic_attributes: frozenset[str] = frozenset()
    ignore_order: frozenset[str] = frozenset()
    excluding: tuple[re.Pattern, ...] = ()
    format: SnapshotFormat = SnapshotFormat.STRUCTURED


def parse_format(value: Union[str, SnapshotFormat]) -> SnapshotFormat:
    """Resolve a format name ("json", "structured", "text") to SnapshotFormat."""
    if isinstance(value, SnapshotFormat):
        return value
    if value == "structured":
        return SnapshotFormat.STRUCTURED
    try:
        return SnapshotFormat(value)
    except ValueError:
        raise ValidationError(f"Unsupported snapshot format: {value}") from None


def resolve_options(
    config: SnapshotConfig,
    *,
    dynamic_attributes: Optional[Iterable[str]] = None,
    ignore_order: Optional[Iterable[str]] = None,
    excluding: Optional[Union[PatternLike, Iterable[PatternLike]]] = None,
    format: Optional[Union[str, SnapshotFormat]] = None,
) -> ComparisonOptions:
    """Merge configured defaults with per-call overrides.

    Per-call ``dynamic_attributes`` and ``ignore_order`` replace the configured
    lists. Per-call ``excluding`` patterns are added to the configured text
    exclusions. ``format`` overrides the configured default format.
    """
    options = ComparisonOptions(
        dynamic_attributes=_name_set(
            config.dynamic_attributes if dynamic_attributes is None else dynamic_attributes,
            "dynamic_attributes",
        ),
        ignore_order=_name_set(
            config.ignore_order if ignore_order is None else ignore_order,
            "ignore_order",
        ),
        excluding=merge_patterns(
            coerce_patterns(config.text_excluding),
            coerce_patterns(excluding),
        ),
        format=parse_format(config.default_format if format is None else format),
    )
    logger.debug(
        "Resolved options: format=%s dynamic=%s ignore_order=%s excluding=%d",
        options.format.value,
        sorted(options.dynamic_attributes),
        sorted(options.ignore_order),
        len(options.excluding),
    )
    return options


def _name_set(value: Union[str, Iterable[str]], name: str) -> frozenset[str]:
    if isinstance(value, str):
        return frozenset((value,))
    names = frozenset(value)
    for item in names:
        if not isinstance(item, str):
            raise ValidationError(f"Invalid {name} entry: expected str, got {item!r}")
    return names
