"""Session lifecycle owner: starts the countdown and cue processes, tears them down once."""

from __future__ import annotations

import asyncio
import logging
import random
import secrets
from collections.abc import Callable
from typing import TYPE_CHECKING

from reacto.errors import SessionError, SessionParametersError
from reacto.log_context import set_log_context
from reacto.session.countdown import Countdown
from reacto.session.cues import DEFAULT_PULSE_MS, CueGenerator, RandomSource
from reacto.session.params import SessionParameters
from reacto.session.state import SessionState, SessionView
from reacto.session.timers import TimerLoop, TimerSlots

if TYPE_CHECKING:
    from reacto.audio.player import CueSound

logger = logging.getLogger(__name__)

SessionChangeHandler = Callable[[SessionView], None]


class TrainingSession:
    """Runs one training session at a time on a single event loop.

    ``start()`` arms the countdown tick and the first cue; ``stop()`` (or the
    countdown reaching zero) closes every timer slot, silences the cue sound
    and calls ``on_stopped`` exactly once. All mutation happens inside loop
    callbacks, so the ``active`` flag is the only guard needed.
    """

    def __init__(
        self,
        sound: CueSound,
        *,
        loop: TimerLoop | None = None,
        rng: RandomSource | None = None,
        pulse_ms: int = DEFAULT_PULSE_MS,
    ) -> None:
        self._sound = sound
        self._loop = loop
        self._rng: RandomSource = rng or random.Random()  # noqa: S311
        self._pulse_ms = pulse_ms
        self._state = SessionState()
        self._slots: TimerSlots | None = None
        self._countdown: Countdown | None = None
        self._cues: CueGenerator | None = None
        self._params: SessionParameters | None = None
        self._on_stopped: Callable[[], None] | None = None
        self._on_change: SessionChangeHandler | None = None
        self._session_id = ""

    # -- Presentation ---------------------------------------------------------

    def set_change_handler(self, handler: SessionChangeHandler | None) -> None:
        """Set the callback that receives a SessionView after every state change."""
        self._on_change = handler

    def view(self) -> SessionView:
        return self._state.snapshot()

    @property
    def active(self) -> bool:
        return self._state.active

    @property
    def remaining_seconds(self) -> int:
        return self._state.remaining_seconds

    @property
    def remaining_formatted(self) -> str:
        return self.view().remaining_formatted

    @property
    def is_pulse_active(self) -> bool:
        return self._state.is_pulse_active

    @property
    def params(self) -> SessionParameters | None:
        return self._params

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def cues(self) -> CueGenerator | None:
        return self._cues

    def pending_timers(self) -> int:
        """Number of timer handles still outstanding (0 once stopped)."""
        return self._slots.outstanding() if self._slots is not None else 0

    # -- Lifecycle ------------------------------------------------------------

    def start(self, params: SessionParameters, on_stopped: Callable[[], None]) -> None:
        """Begin a session. Raises SessionError if one is already running."""
        if not isinstance(params, SessionParameters):
            msg = f"Expected SessionParameters, got {type(params).__name__}"
            raise SessionParametersError(msg)
        if self._state.active:
            msg = f"Session {self._session_id} is already active"
            raise SessionError(msg)

        loop = self._loop or asyncio.get_running_loop()
        self._session_id = secrets.token_hex(4)
        set_log_context(operation="session", session_id=self._session_id)

        self._params = params
        self._on_stopped = on_stopped
        self._state = SessionState(remaining_seconds=params.duration_seconds, active=True)
        self._slots = TimerSlots(loop)
        self._countdown = Countdown(
            self._state,
            self._slots,
            on_tick=self._publish,
            on_expired=self._expire,
        )
        self._cues = CueGenerator(
            params,
            self._state,
            self._slots,
            self._sound,
            rng=self._rng,
            pulse_ms=self._pulse_ms,
            on_change=self._publish,
        )
        logger.info(
            "Session started (duration=%ds, interval=%d-%ds)",
            params.duration_seconds,
            params.min_interval_seconds,
            params.max_interval_seconds,
        )
        self._countdown.start()
        self._cues.start()
        self._publish()

    def stop(self) -> None:
        """End the session on request. No-op if it already ended."""
        self._teardown("requested")

    def _expire(self) -> None:
        self._teardown("timeout")

    def _teardown(self, reason: str) -> None:
        if not self._state.active:
            logger.debug("Stop ignored (reason=%s): session not active", reason)
            return
        self._state.active = False
        self._state.is_pulse_active = False
        cancelled = self._slots.close() if self._slots is not None else 0
        try:
            self._sound.stop()
        except Exception:
            logger.exception("Failed to stop cue sound")
        logger.info(
            "Session stopped (reason=%s, remaining=%ds, cues=%d, cancelled_timers=%d)",
            reason,
            self._state.remaining_seconds,
            self._state.cues_fired,
            cancelled,
        )
        self._publish()
        on_stopped, self._on_stopped = self._on_stopped, None
        if on_stopped is not None:
            on_stopped()

    def _publish(self) -> None:
        if self._on_change is None:
            return
        try:
            self._on_change(self._state.snapshot())
        except Exception:
            logger.exception("Session change handler failed")
