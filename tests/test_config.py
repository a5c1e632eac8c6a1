"""Tests for config models and file helpers."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from reacto.config import (
    AppConfig,
    CueConfig,
    deep_merge_config,
    read_config_data,
    update_config_file,
    write_config_data,
)
from reacto.errors import ConfigError

# -- AppConfig defaults --


def test_app_config_defaults() -> None:
    cfg = AppConfig()
    assert cfg.log_level == "INFO"
    assert cfg.language == "fi"
    assert cfg.reacto_home == "~/.reacto"


def test_session_defaults() -> None:
    cfg = AppConfig()
    assert cfg.session.duration_seconds == 60
    assert cfg.session.min_interval_seconds == 2
    assert cfg.session.max_interval_seconds == 5


def test_cue_defaults() -> None:
    cfg = AppConfig()
    assert cfg.cue.pulse_ms == 250
    assert cfg.cue.sound_asset == "sounds/gunshot.mp3"
    assert cfg.cue.player == "mpg123"
    assert cfg.cue.volume_percent == 80
    assert cfg.cue.seed is None


def test_cue_rejects_out_of_range_volume() -> None:
    with pytest.raises(ValidationError, match="volume_percent"):
        CueConfig(volume_percent=150)


def test_cue_rejects_non_positive_pulse() -> None:
    with pytest.raises(ValidationError, match="pulse_ms"):
        CueConfig(pulse_ms=0)


def test_app_config_rejects_invalid_types() -> None:
    with pytest.raises(ValidationError, match="duration_seconds"):
        AppConfig.model_validate({"session": {"duration_seconds": "long"}})


# -- deep_merge_config --


def test_deep_merge_adds_new_keys() -> None:
    user: dict[str, object] = {"language": "en"}
    defaults: dict[str, object] = {"language": "fi", "log_level": "INFO"}
    merged, changed = deep_merge_config(user, defaults)
    assert merged["language"] == "en"
    assert merged["log_level"] == "INFO"
    assert changed is True


def test_deep_merge_preserves_user_values() -> None:
    user: dict[str, object] = {"language": "en", "log_level": "DEBUG"}
    defaults: dict[str, object] = {"language": "fi", "log_level": "INFO"}
    merged, changed = deep_merge_config(user, defaults)
    assert merged == user
    assert changed is False


def test_deep_merge_nested() -> None:
    user: dict[str, object] = {"cue": {"player": "bell"}}
    defaults: dict[str, object] = {"cue": {"player": "mpg123", "pulse_ms": 250}}
    merged, changed = deep_merge_config(user, defaults)
    cue = merged["cue"]
    assert isinstance(cue, dict)
    assert cue["player"] == "bell"
    assert cue["pulse_ms"] == 250
    assert changed is True


# -- file helpers --


def test_write_and_read_roundtrip(tmp_path: Path) -> None:
    path = tmp_path / "config" / "config.json"
    write_config_data(path, {"language": "en"})
    assert path.read_text(encoding="utf-8").endswith("\n")
    assert read_config_data(path) == {"language": "en"}


def test_read_malformed_raises(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError, match="Cannot read config"):
        read_config_data(path)


def test_read_non_object_raises(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ConfigError, match="not a JSON object"):
        read_config_data(path)


def test_update_config_file_keeps_other_keys(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"language": "fi", "log_level": "DEBUG"}), encoding="utf-8")
    update_config_file(path, language="en")
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data == {"language": "en", "log_level": "DEBUG"}


def test_update_config_file_creates_missing(tmp_path: Path) -> None:
    path = tmp_path / "new" / "config.json"
    update_config_file(path, language="en")
    assert json.loads(path.read_text(encoding="utf-8")) == {"language": "en"}
