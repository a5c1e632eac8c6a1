"""Mutable session state and the immutable snapshot handed to the UI."""

from __future__ import annotations

from dataclasses import dataclass

from reacto.session.countdown import format_remaining


@dataclass(slots=True)
class SessionState:
    """State owned by the lifecycle owner; mutated only from its callbacks."""

    remaining_seconds: int = 0
    is_pulse_active: bool = False
    active: bool = False
    cues_fired: int = 0

    def snapshot(self) -> SessionView:
        return SessionView(
            remaining_seconds=self.remaining_seconds,
            is_pulse_active=self.is_pulse_active,
            active=self.active,
            cues_fired=self.cues_fired,
        )


@dataclass(frozen=True, slots=True)
class SessionView:
    """Point-in-time view of a session for rendering."""

    remaining_seconds: int
    is_pulse_active: bool
    active: bool
    cues_fired: int = 0

    @property
    def remaining_formatted(self) -> str:
        return format_remaining(self.remaining_seconds)
