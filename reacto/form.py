"""Session parameter form: field validation with translatable error keys."""

from __future__ import annotations

from dataclasses import dataclass, field

from reacto.errors import SessionParametersError
from reacto.session.params import SessionParameters

DURATION_MIN_SECONDS = 30
DURATION_MAX_SECONDS = 3600


def parse_int(text: str | None) -> int | None:
    """Parse a whole number from user input, or None."""
    if text is None:
        return None
    try:
        return int(text.strip())
    except ValueError:
        return None


def validate_duration(value: int) -> str | None:
    if value < DURATION_MIN_SECONDS:
        return "durationMin"
    if value > DURATION_MAX_SECONDS:
        return "durationMax"
    return None


def validate_min_interval(value: int) -> str | None:
    if value <= 0:
        return "minIntervalPositive"
    return None


def validate_max_interval(min_interval: int, max_interval: int) -> str | None:
    if max_interval <= min_interval:
        return "maxIntervalGreater"
    return None


@dataclass(frozen=True)
class FormResult:
    """Validated form input. ``errors`` maps field name to translation key."""

    duration_seconds: int
    min_interval_seconds: int
    max_interval_seconds: int
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_parameters(self) -> SessionParameters:
        if not self.ok:
            fields = ", ".join(f"{k}={v}" for k, v in sorted(self.errors.items()))
            msg = f"Form has errors: {fields}"
            raise SessionParametersError(msg)
        return SessionParameters(
            duration_seconds=self.duration_seconds,
            min_interval_seconds=self.min_interval_seconds,
            max_interval_seconds=self.max_interval_seconds,
        )


def validate_form(duration: int, min_interval: int, max_interval: int) -> FormResult:
    """Validate all three fields at once, collecting every error."""
    errors: dict[str, str] = {}
    checks = (
        ("duration", validate_duration(duration)),
        ("min_interval", validate_min_interval(min_interval)),
        ("max_interval", validate_max_interval(min_interval, max_interval)),
    )
    for name, error in checks:
        if error is not None:
            errors[name] = error
    return FormResult(
        duration_seconds=duration,
        min_interval_seconds=min_interval,
        max_interval_seconds=max_interval,
        errors=errors,
    )
