"""Session parameters supplied by the configuration collaborator."""

from __future__ import annotations

from dataclasses import dataclass

from reacto.errors import SessionParametersError


def _require_positive_int(name: str, value: object) -> None:
    # bool is an int subclass; True would silently mean 1 second.
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an integer, got {type(value).__name__}"
        raise SessionParametersError(msg)
    if value <= 0:
        msg = f"{name} must be positive, got {value}"
        raise SessionParametersError(msg)


@dataclass(frozen=True, slots=True)
class SessionParameters:
    """Immutable inputs for one training session, all in whole seconds.

    The random gap between cues is drawn from the inclusive range
    ``[min_interval_seconds, max_interval_seconds]``.
    """

    duration_seconds: int
    min_interval_seconds: int
    max_interval_seconds: int

    def __post_init__(self) -> None:
        _require_positive_int("duration_seconds", self.duration_seconds)
        _require_positive_int("min_interval_seconds", self.min_interval_seconds)
        _require_positive_int("max_interval_seconds", self.max_interval_seconds)
        if self.max_interval_seconds < self.min_interval_seconds:
            msg = (
                f"max_interval_seconds ({self.max_interval_seconds}) is below "
                f"min_interval_seconds ({self.min_interval_seconds})"
            )
            raise SessionParametersError(msg)
