"""Input validation for snapshot names."""

from __future__ import annotations

import re

from snapmatch.errors import ValidationError


SEGMENT_PATTERN = re.compile(r"^[A-Za-z0-9._-]{1,128}$")


def validate_snapshot_name(name: str) -> None:
    """Reject names that are empty, absolute, or escape the snapshot root.

    Names are slash-separated relative paths such as ``api/users/list``.
    """
    if not isinstance(name, str) or not name:
        raise ValidationError(f"Invalid snapshot name: {name!r}")
    if name.startswith("/") or "\\" in name:
        raise ValidationError(f"Invalid snapshot name: {name}")
    parts = name.split("/")
    if ".." in parts:
        raise ValidationError(f"Path traversal not allowed: {name}")
    for part in parts:
        if part == "." or not SEGMENT_PATTERN.match(part):
            raise ValidationError(f"Invalid snapshot name segment {part!r} in {name}")
