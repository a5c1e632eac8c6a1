"""Application configuration: pydantic models + JSON file helpers."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field

from reacto.errors import ConfigError

logger = logging.getLogger(__name__)


class SessionDefaultsConfig(BaseModel):
    """Last-used session parameters, prefilled in the configuration view."""

    duration_seconds: int = 60
    min_interval_seconds: int = 2
    max_interval_seconds: int = 5


class CueConfig(BaseModel):
    """Settings for the audio + visual cue."""

    pulse_ms: int = Field(default=250, gt=0)
    sound_asset: str = "sounds/gunshot.mp3"
    player: str = "mpg123"
    volume_percent: int = Field(default=80, ge=0, le=100)
    seed: int | None = None


class AppConfig(BaseModel):
    """Top-level configuration loaded from config.json."""

    log_level: str = "INFO"
    reacto_home: str = "~/.reacto"
    language: str = "fi"
    session: SessionDefaultsConfig = Field(default_factory=SessionDefaultsConfig)
    cue: CueConfig = Field(default_factory=CueConfig)


def deep_merge_config(
    user: dict[str, object],
    defaults: dict[str, object],
) -> tuple[dict[str, object], bool]:
    """Recursively merge *defaults* into *user*, preserving user values.

    Returns ``(merged_dict, changed)`` where *changed* is True when new keys were added.
    """
    result: dict[str, object] = dict(user)
    changed = False
    new_keys = 0
    for key, default_val in defaults.items():
        if key not in result:
            result[key] = default_val
            changed = True
            new_keys += 1
        elif isinstance(default_val, dict) and isinstance(result[key], dict):
            sub_merged, sub_changed = deep_merge_config(
                result[key],  # type: ignore[arg-type]
                default_val,
            )
            result[key] = sub_merged
            changed = changed or sub_changed
    if new_keys:
        logger.info("Config deep-merge: %d new keys added", new_keys)
    return result, changed


def write_config_data(config_path: Path, data: dict[str, object]) -> None:
    """Write *data* as pretty JSON, creating the config directory if needed."""
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(
            json.dumps(data, indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
    except OSError as exc:
        msg = f"Cannot write config at {config_path}: {exc}"
        raise ConfigError(msg) from exc


def read_config_data(config_path: Path) -> dict[str, object]:
    """Read config.json. Raises ConfigError when missing or malformed."""
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        msg = f"Cannot read config at {config_path}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(data, dict):
        msg = f"Config at {config_path} is not a JSON object"
        raise ConfigError(msg)
    return data


def update_config_file(config_path: Path, **updates: object) -> None:
    """Update specific keys in config.json without overwriting other user settings."""
    data = read_config_data(config_path) if config_path.exists() else {}
    data.update(updates)
    write_config_data(config_path, data)
    logger.info("Persisted config update: %s", ", ".join(f"{k}={v}" for k, v in updates.items()))
