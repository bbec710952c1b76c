"""Snapshot configuration defaults and loading."""

from __future__ import annotations

from dataclasses import dataclass, replace
import json
import os
from pathlib import Path
import re
from typing import Any, Mapping, Optional, Union

from dotenv import dotenv_values

from snapmatch.errors import ValidationError


_DEFAULT_SNAPSHOTS_DIR = "tests/fixtures/snapshots"
_DEFAULT_DYNAMIC_ATTRIBUTES = ("id", "created_at", "updated_at")
_DEFAULT_FORMAT = "json"
_ALLOWED_FORMATS = {"json", "structured", "text"}

PatternLike = Union[str, re.Pattern]


@dataclass(frozen=True)
class SnapshotConfig:
    snapshots_dir: str = _DEFAULT_SNAPSHOTS_DIR
    dynamic_attributes: tuple[str, ...] = _DEFAULT_DYNAMIC_ATTRIBUTES
    ignore_order: tuple[str, ...] = ()
    default_format: str = _DEFAULT_FORMAT
    text_excluding: tuple[PatternLike, ...] = ()

    def __post_init__(self) -> None:
        if self.default_format not in _ALLOWED_FORMATS:
            raise ValidationError(f"Unsupported snapshot format: {self.default_format}")

    def with_overrides(self, **changes: Any) -> "SnapshotConfig":
        """Return a copy with the given fields replaced."""
        for key in ("dynamic_attributes", "ignore_order", "text_excluding"):
            if key in changes and changes[key] is not None:
                changes[key] = _as_tuple(changes[key])
        return replace(self, **changes)


def load_settings(path: Optional[Path], *, env_file: Optional[Path] = None) -> SnapshotConfig:
    """Load snapshot configuration from a JSON file, with environment overrides.

    Priority order:
    1. Process environment variables
    2. Variables from env_file (a .env file; os.environ is not modified)
    3. JSON config file
    4. Defaults

    List-valued variables are comma-separated.

    Args:
        path: Path to JSON config file, or None to use defaults only
        env_file: Optional .env file with SNAPMATCH_* variables

    Returns:
        SnapshotConfig with resolved values
    """
    json_settings: dict[str, Any] = {}
    if path and path.exists():
        try:
            json_settings = json.loads(path.read_text())
        except json.JSONDecodeError as exc:
            raise ValidationError(f"Invalid snapshot settings file {path}: {exc}") from exc
        if not isinstance(json_settings, dict):
            raise ValidationError(f"Invalid snapshot settings file {path}: expected object")

    env = _environment(env_file)

    snapshots_dir = env.get("SNAPMATCH_SNAPSHOTS_DIR") or json_settings.get(
        "snapshots_dir", _DEFAULT_SNAPSHOTS_DIR
    )
    default_format = env.get("SNAPMATCH_DEFAULT_FORMAT") or json_settings.get(
        "default_format", _DEFAULT_FORMAT
    )
    if default_format not in _ALLOWED_FORMATS:
        raise ValidationError(f"Unsupported snapshot format: {default_format}")

    dynamic_attributes = _env_list(env, "SNAPMATCH_DYNAMIC_ATTRIBUTES")
    if dynamic_attributes is None:
        dynamic_attributes = _as_tuple(
            json_settings.get("dynamic_attributes", _DEFAULT_DYNAMIC_ATTRIBUTES)
        )
    ignore_order = _env_list(env, "SNAPMATCH_IGNORE_ORDER")
    if ignore_order is None:
        ignore_order = _as_tuple(json_settings.get("ignore_order", ()))
    text_excluding = _env_list(env, "SNAPMATCH_TEXT_EXCLUDING")
    if text_excluding is None:
        text_excluding = _as_tuple(json_settings.get("text_excluding", ()))

    return SnapshotConfig(
        snapshots_dir=snapshots_dir,
        dynamic_attributes=dynamic_attributes,
        ignore_order=ignore_order,
        default_format=default_format,
        text_excluding=text_excluding,
    )


def default_config_path() -> Path:
    return Path.home() / ".config" / "snapmatch" / "settings.json"


def _environment(env_file: Optional[Path]) -> dict[str, str]:
    values: dict[str, str] = {}
    if env_file and env_file.exists():
        values.update({k: v for k, v in dotenv_values(env_file).items() if v is not None})
    values.update(os.environ)
    return values


def _env_list(env: Mapping[str, str], name: str) -> Optional[tuple[str, ...]]:
    raw = env.get(name)
    if raw is None:
        return None
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def _as_tuple(value: Any) -> tuple[Any, ...]:
    if isinstance(value, (str, re.Pattern)):
        return (value,)
    if not isinstance(value, (list, tuple, set, frozenset)):
        raise ValidationError(f"Expected a list of values, got {type(value).__name__}")
    return tuple(value)
