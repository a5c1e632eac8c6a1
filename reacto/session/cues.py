"""Cue process: fires audio + visual cues at uniformly random intervals."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

from reacto.errors import PlaybackError

if TYPE_CHECKING:
    from reacto.audio.player import CueSound
    from reacto.session.params import SessionParameters
    from reacto.session.state import SessionState
    from reacto.session.timers import TimerSlots

logger = logging.getLogger(__name__)

DEFAULT_PULSE_MS = 250


class RandomSource(Protocol):
    """Draws a sample in ``[a, b]`` seconds; ``random.Random`` qualifies.

    The delay is ``int(sample * 1000)`` ms, so sources returning fractional
    seconds are honoured to the millisecond.
    """

    def randint(self, a: int, b: int) -> float: ...


class CueGenerator:
    """Self-rescheduling cue generator.

    Every firing plays the cue sound, raises the visual pulse for
    ``pulse_ms`` and arms exactly one next firing. The generator never ends
    by itself; it stops when the owner closes the timer slots.
    """

    def __init__(  # noqa: PLR0913
        self,
        params: SessionParameters,
        state: SessionState,
        slots: TimerSlots,
        sound: CueSound,
        *,
        rng: RandomSource,
        pulse_ms: int = DEFAULT_PULSE_MS,
        on_change: Callable[[], None],
    ) -> None:
        self._params = params
        self._state = state
        self._slots = slots
        self._sound = sound
        self._rng = rng
        self._pulse_seconds = pulse_ms / 1000.0
        self._on_change = on_change

    def next_delay_ms(self) -> int:
        """Draw the gap to the next cue, in milliseconds."""
        sample = self._rng.randint(
            self._params.min_interval_seconds,
            self._params.max_interval_seconds,
        )
        return int(sample * 1000)

    def start(self) -> None:
        """Arm the first cue one random interval from now (never at t=0)."""
        delay_ms = self._schedule_next()
        logger.debug("First cue in %dms", delay_ms)

    def fire(self) -> None:
        if not self._state.active:
            logger.debug("Stale cue ignored")
            return
        self._play_sound()
        self._state.is_pulse_active = True
        self._state.cues_fired += 1
        self._slots.cancel("pulse")
        self._slots.arm("pulse", self._pulse_seconds, self._clear_pulse)
        self._on_change()
        delay_ms = self._schedule_next()
        logger.debug("Cue #%d fired, next in %dms", self._state.cues_fired, delay_ms)

    def _schedule_next(self) -> int:
        delay_ms = self.next_delay_ms()
        self._slots.arm("cue", delay_ms / 1000.0, self.fire)
        return delay_ms

    def _clear_pulse(self) -> None:
        if not self._state.active:
            logger.debug("Stale pulse clear ignored")
            return
        self._state.is_pulse_active = False
        self._on_change()

    def _play_sound(self) -> None:
        try:
            self._sound.rewind()
            self._sound.play()
        except PlaybackError as exc:
            logger.warning("Cue playback rejected: %s", exc)
        except Exception:
            logger.exception("Cue playback failed (continuing)")
