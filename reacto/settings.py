"""Persistence of the last-used session parameters and the language preference."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from reacto.config import SessionDefaultsConfig, update_config_file
from reacto.i18n import Language, parse_language

if TYPE_CHECKING:
    from pathlib import Path

    from reacto.config import AppConfig
    from reacto.session.params import SessionParameters

logger = logging.getLogger(__name__)


def load_last_parameters(config: AppConfig) -> tuple[int, int, int]:
    """Return ``(duration, min_interval, max_interval)`` to prefill the form.

    Falls back to the defaults when any stored value is not a positive integer.
    """
    stored = config.session
    values = (stored.duration_seconds, stored.min_interval_seconds, stored.max_interval_seconds)
    if all(v > 0 for v in values):
        return values
    defaults = SessionDefaultsConfig()
    logger.warning("Stored session parameters %s are invalid, using defaults", values)
    return (
        defaults.duration_seconds,
        defaults.min_interval_seconds,
        defaults.max_interval_seconds,
    )


def save_last_parameters(config_path: Path, params: SessionParameters) -> None:
    session = SessionDefaultsConfig(
        duration_seconds=params.duration_seconds,
        min_interval_seconds=params.min_interval_seconds,
        max_interval_seconds=params.max_interval_seconds,
    )
    update_config_file(config_path, session=session.model_dump(mode="json"))


def load_language(config: AppConfig) -> Language:
    return parse_language(config.language)


def save_language(config_path: Path, language: Language) -> None:
    update_config_file(config_path, language=language.value)
