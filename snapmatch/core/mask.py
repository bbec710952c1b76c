"""Pattern exclusion for text snapshots.

Matches of each exclusion pattern are replaced with a fixed token before two
texts are compared. Patterns run in order against the output of the previous
one, so a later pattern may match text that already contains the token.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional, Union

from snapmatch.errors import ValidationError


EXCLUDED_TOKEN = "===EXCLUDED==="

PatternLike = Union[str, re.Pattern]


def mask_text(text: str, patterns: Iterable[re.Pattern]) -> str:
    """Replace every match of each pattern with EXCLUDED_TOKEN.

    A pattern that matches nothing leaves the text unchanged.

    Examples:
        >>> mask_text("id=42 ok", [re.compile(r"\\d+")])
        'id====EXCLUDED=== ok'
    """
    masked = text
    for pattern in patterns:
        masked = pattern.sub(EXCLUDED_TOKEN, masked)
    return masked


def coerce_patterns(value: Optional[Union[PatternLike, Iterable[PatternLike]]]) -> tuple[re.Pattern, ...]:
    """Normalize a pattern option into a tuple of compiled patterns.

    Accepts None, a single string or compiled pattern, or an iterable of them.
    Strings are compiled as regular expressions.
    """
    if value is None:
        return ()
    if isinstance(value, (str, re.Pattern)):
        return (_compile(value),)
    try:
        items = list(value)
    except TypeError:
        raise ValidationError(f"Invalid exclusion pattern: {value!r}") from None
    return tuple(_compile(item) for item in items)


def merge_patterns(*groups: Iterable[re.Pattern]) -> tuple[re.Pattern, ...]:
    """Ordered union of pattern groups; first occurrence wins."""
    seen: set[tuple[str, int]] = set()
    merged: list[re.Pattern] = []
    for group in groups:
        for pattern in group:
            key = (pattern.pattern, pattern.flags)
            if key in seen:
                continue
            seen.add(key)
            merged.append(pattern)
    return tuple(merged)


def _compile(item: object) -> re.Pattern:
    if isinstance(item, re.Pattern):
        return item
    if not isinstance(item, str):
        raise ValidationError(f"Invalid exclusion pattern: {item!r}")
    try:
        return re.compile(item)
    except re.error as exc:
        raise ValidationError(f"Invalid exclusion pattern {item!r}: {exc}") from exc
