"""Countdown process: one tick per second until the session time is used up."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from reacto.session.state import SessionState
    from reacto.session.timers import TimerSlots

logger = logging.getLogger(__name__)

TICK_SECONDS = 1.0


def format_remaining(seconds: int) -> str:
    """Render *seconds* as ``MM:SS``.

    Minutes are zero-padded but never wrapped into hours, so 4500 renders
    as ``75:00``. Negative values render as ``00:00``.
    """
    minutes, secs = divmod(max(seconds, 0), 60)
    return f"{minutes:02d}:{secs:02d}"


class CountdownPhase(StrEnum):
    RUNNING = "running"
    EXPIRED = "expired"


class Countdown:
    """Decrements ``remaining_seconds`` once per second and reports expiry.

    Ticks are anchored to the start time rather than chained, so a late
    callback does not push every later tick back.
    """

    def __init__(
        self,
        state: SessionState,
        slots: TimerSlots,
        *,
        on_tick: Callable[[], None],
        on_expired: Callable[[], None],
    ) -> None:
        self._state = state
        self._slots = slots
        self._on_tick = on_tick
        self._on_expired = on_expired
        self._phase = CountdownPhase.RUNNING
        self._started_at = 0.0
        self._ticks = 0

    @property
    def phase(self) -> CountdownPhase:
        return self._phase

    def start(self) -> None:
        self._phase = CountdownPhase.RUNNING
        self._started_at = self._slots.now()
        self._ticks = 0
        self._schedule_next()

    def _schedule_next(self) -> None:
        due = self._started_at + (self._ticks + 1) * TICK_SECONDS
        self._slots.arm("tick", due - self._slots.now(), self._tick)

    def _tick(self) -> None:
        if not self._state.active or self._phase is CountdownPhase.EXPIRED:
            logger.debug("Stale countdown tick ignored")
            return
        self._ticks += 1
        if self._state.remaining_seconds <= 1:
            self._state.remaining_seconds = 0
            self._phase = CountdownPhase.EXPIRED
            logger.debug("Countdown expired after %d ticks", self._ticks)
            self._on_expired()
            return
        self._state.remaining_seconds -= 1
        self._on_tick()
        self._schedule_next()
