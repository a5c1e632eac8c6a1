"""Interactive configuration view: questionary prompts validated by reacto.form."""

from __future__ import annotations

import logging
from collections.abc import Callable

import questionary

from reacto.form import (
    parse_int,
    validate_duration,
    validate_form,
    validate_max_interval,
    validate_min_interval,
)
from reacto.i18n import Language, translate
from reacto.session.params import SessionParameters

logger = logging.getLogger(__name__)


def make_validator(
    check: Callable[[int], str | None],
    language: Language,
) -> Callable[[str], bool | str]:
    """Wrap a form check as a questionary validator returning translated errors."""

    def _validate(text: str) -> bool | str:
        value = parse_int(text)
        if value is None:
            return translate("notANumber", language)
        error = check(value)
        if error is not None:
            return translate(error, language)
        return True

    return _validate


def _ask_int(
    message: str,
    default: int,
    check: Callable[[int], str | None],
    language: Language,
) -> int | None:
    raw: str | None = questionary.text(
        message,
        default=str(default),
        validate=make_validator(check, language),
    ).ask()
    if raw is None:
        return None
    return parse_int(raw)


def ask_parameters(
    defaults: tuple[int, int, int],
    language: Language,
) -> SessionParameters | None:
    """Prompt for duration / min / max. Returns None if the user aborts."""
    duration_default, min_default, max_default = defaults
    duration = _ask_int(
        f"{translate('sessionDuration', language)} ({translate('durationHelp', language)})",
        duration_default,
        validate_duration,
        language,
    )
    if duration is None:
        return None
    min_interval = _ask_int(
        translate("minimumInterval", language),
        min_default,
        validate_min_interval,
        language,
    )
    if min_interval is None:
        return None
    max_interval = _ask_int(
        translate("maximumInterval", language),
        max(max_default, min_interval + 1),
        lambda value: validate_max_interval(min_interval, value),
        language,
    )
    if max_interval is None:
        return None
    return validate_form(duration, min_interval, max_interval).to_parameters()


def ask_language(current: Language) -> Language | None:
    """Language picker. Returns None if the user aborts."""
    choices = [
        questionary.Choice(translate("finnish", current), value=Language.FI.value),
        questionary.Choice(translate("english", current), value=Language.EN.value),
    ]
    selected: str | None = questionary.select(
        f"{translate('language', current)}:",
        choices=choices,
        default=current.value,
    ).ask()
    if selected is None:
        return None
    return Language(selected)
