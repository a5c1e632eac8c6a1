"""Central path resolution for the application home.

This module is the SINGLE SOURCE OF TRUTH for all on-disk locations.
Every path the application needs is either a field or property of ``ReactoPaths``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_HOME = "~/.reacto"


@dataclass(frozen=True)
class ReactoPaths:
    """Resolved, immutable paths derived from ``reacto_home`` (default ``~/.reacto``)."""

    reacto_home: Path

    @property
    def config_dir(self) -> Path:
        return self.reacto_home / "config"

    @property
    def config_path(self) -> Path:
        return self.config_dir / "config.json"

    @property
    def logs_dir(self) -> Path:
        return self.reacto_home / "logs"

    @property
    def sounds_dir(self) -> Path:
        return self.reacto_home / "sounds"

    def resolve_asset(self, reference: str) -> Path:
        """Resolve a sound asset reference relative to the home directory.

        Absolute references are returned unchanged.
        """
        candidate = Path(reference).expanduser()
        if candidate.is_absolute():
            return candidate
        return self.reacto_home / candidate


def resolve_paths(reacto_home: str | Path | None = None) -> ReactoPaths:
    """Build ReactoPaths from environment / defaults."""
    env_home = os.environ.get("REACTO_HOME")
    home = Path(env_home or reacto_home or DEFAULT_HOME).expanduser().resolve()
    return ReactoPaths(reacto_home=home)
