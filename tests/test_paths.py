"""Tests for path resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from reacto.paths import ReactoPaths, resolve_paths


def test_derived_paths(tmp_path: Path) -> None:
    paths = ReactoPaths(reacto_home=tmp_path)
    assert paths.config_dir == tmp_path / "config"
    assert paths.config_path == tmp_path / "config" / "config.json"
    assert paths.logs_dir == tmp_path / "logs"
    assert paths.sounds_dir == tmp_path / "sounds"


def test_resolve_relative_asset(tmp_path: Path) -> None:
    paths = ReactoPaths(reacto_home=tmp_path)
    assert paths.resolve_asset("sounds/gunshot.mp3") == tmp_path / "sounds" / "gunshot.mp3"


def test_resolve_absolute_asset(tmp_path: Path) -> None:
    paths = ReactoPaths(reacto_home=tmp_path / "home")
    absolute = tmp_path / "elsewhere" / "beep.mp3"
    assert paths.resolve_asset(str(absolute)) == absolute


def test_env_overrides_argument(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REACTO_HOME", str(tmp_path / "env"))
    paths = resolve_paths(tmp_path / "arg")
    assert paths.reacto_home == (tmp_path / "env").resolve()


def test_argument_used_without_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("REACTO_HOME", raising=False)
    paths = resolve_paths(tmp_path / "arg")
    assert paths.reacto_home == (tmp_path / "arg").resolve()


def test_default_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("REACTO_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    paths = resolve_paths()
    assert paths.reacto_home == (tmp_path / ".reacto").resolve()
