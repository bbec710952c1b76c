"""Unit tests for snapshot configuration loading."""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

from snapmatch.errors import ValidationError
from snapmatch.settings import SnapshotConfig, default_config_path, load_settings


_ENV_VARS = (
    "SNAPMATCH_SNAPSHOTS_DIR",
    "SNAPMATCH_DEFAULT_FORMAT",
    "SNAPMATCH_DYNAMIC_ATTRIBUTES",
    "SNAPMATCH_IGNORE_ORDER",
    "SNAPMATCH_TEXT_EXCLUDING",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_config_file() -> None:
    config = load_settings(None)
    assert config == SnapshotConfig()
    assert config.snapshots_dir == "tests/fixtures/snapshots"
    assert config.dynamic_attributes == ("id", "created_at", "updated_at")
    assert config.default_format == "json"


def test_missing_config_file_uses_defaults(tmp_path: Path) -> None:
    assert load_settings(tmp_path / "missing.json") == SnapshotConfig()


def test_json_config_file(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps(
            {
                "snapshots_dir": "snap",
                "dynamic_attributes": ["uuid"],
                "ignore_order": ["tags"],
                "default_format": "text",
                "text_excluding": ["\\d+"],
            }
        )
    )
    config = load_settings(path)
    assert config.snapshots_dir == "snap"
    assert config.dynamic_attributes == ("uuid",)
    assert config.ignore_order == ("tags",)
    assert config.default_format == "text"
    assert config.text_excluding == ("\\d+",)


def test_env_overrides_config_file(tmp_path: Path, monkeypatch) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"ignore_order": ["tags"], "default_format": "json"}))
    monkeypatch.setenv("SNAPMATCH_IGNORE_ORDER", "a, b,,c")
    monkeypatch.setenv("SNAPMATCH_DEFAULT_FORMAT", "text")
    config = load_settings(path)
    assert config.ignore_order == ("a", "b", "c")
    assert config.default_format == "text"


def test_env_file_is_read_without_touching_environ(tmp_path: Path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("SNAPMATCH_SNAPSHOTS_DIR=from-dotenv\nSNAPMATCH_DYNAMIC_ATTRIBUTES=uid\n")
    config = load_settings(None, env_file=env_file)
    assert config.snapshots_dir == "from-dotenv"
    assert config.dynamic_attributes == ("uid",)
    assert "SNAPMATCH_SNAPSHOTS_DIR" not in os.environ


def test_process_env_beats_env_file(tmp_path: Path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("SNAPMATCH_SNAPSHOTS_DIR=from-dotenv\n")
    monkeypatch.setenv("SNAPMATCH_SNAPSHOTS_DIR", "from-process")
    assert load_settings(None, env_file=env_file).snapshots_dir == "from-process"


def test_unsupported_format_rejected(monkeypatch) -> None:
    monkeypatch.setenv("SNAPMATCH_DEFAULT_FORMAT", "yaml")
    with pytest.raises(ValidationError, match="Unsupported snapshot format"):
        load_settings(None)


def test_invalid_config_file_rejected(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("[1, 2]")
    with pytest.raises(ValidationError, match="expected object"):
        load_settings(path)
    path.write_text("{broken")
    with pytest.raises(ValidationError, match="Invalid snapshot settings file"):
        load_settings(path)


def test_with_overrides_returns_new_config() -> None:
    base = SnapshotConfig()
    changed = base.with_overrides(ignore_order=["unordered"], default_format="text")
    assert changed.ignore_order == ("unordered",)
    assert changed.default_format == "text"
    assert base.ignore_order == ()
    assert base.default_format == "json"


def test_config_rejects_unknown_format() -> None:
    with pytest.raises(ValidationError):
        SnapshotConfig(default_format="xml")


def test_default_config_path_is_deterministic(monkeypatch) -> None:
    monkeypatch.setenv("HOME", "/tmp/snapmatch-home")
    assert default_config_path() == Path("/tmp/snapmatch-home/.config/snapmatch/settings.json")
