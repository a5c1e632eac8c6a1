"""Timer slot registry: one nullable, cancellable handle per timer kind."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Literal, Protocol

logger = logging.getLogger(__name__)

SlotKind = Literal["tick", "cue", "pulse"]
SLOT_KINDS: tuple[SlotKind, ...] = ("tick", "cue", "pulse")


class Cancellable(Protocol):
    """Opaque handle to scheduled work (``asyncio.TimerHandle`` satisfies it)."""

    def cancel(self) -> None: ...


class TimerLoop(Protocol):
    """The slice of ``asyncio.AbstractEventLoop`` the session scheduler needs."""

    def time(self) -> float: ...

    def call_later(
        self, delay: float, callback: Callable[..., object], *args: Any
    ) -> Cancellable: ...


class TimerSlots:
    """Owns every pending timer handle of one session.

    Each slot is cancelled before it is re-armed and nulled when its callback
    runs, so at most one handle per kind is outstanding. After ``close()`` the
    registry refuses new work and ``outstanding()`` stays at zero.
    """

    def __init__(self, loop: TimerLoop) -> None:
        self._loop = loop
        self._handles: dict[SlotKind, Cancellable | None] = dict.fromkeys(SLOT_KINDS)
        self._generation: dict[SlotKind, int] = dict.fromkeys(SLOT_KINDS, 0)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def now(self) -> float:
        """Current time of the underlying loop, in seconds."""
        return self._loop.time()

    def arm(self, kind: SlotKind, delay_seconds: float, callback: Callable[[], None]) -> bool:
        """Schedule *callback* in slot *kind*, replacing any pending handle.

        Returns False (and schedules nothing) once the registry is closed.
        """
        if self._closed:
            logger.debug("Refusing to arm %s timer: slots closed", kind)
            return False
        self.cancel(kind)
        generation = self._generation[kind] + 1
        self._generation[kind] = generation
        self._handles[kind] = self._loop.call_later(
            max(delay_seconds, 0.0), self._fired, kind, generation, callback
        )
        return True

    def cancel(self, kind: SlotKind) -> bool:
        """Cancel and null slot *kind*. Returns True if a handle was pending."""
        handle = self._handles[kind]
        if handle is None:
            return False
        self._handles[kind] = None
        handle.cancel()
        return True

    def close(self) -> int:
        """Cancel every slot and refuse further scheduling. Returns count cancelled."""
        self._closed = True
        return sum(self.cancel(kind) for kind in SLOT_KINDS)

    def is_armed(self, kind: SlotKind) -> bool:
        return self._handles[kind] is not None

    def outstanding(self) -> int:
        return sum(1 for handle in self._handles.values() if handle is not None)

    def _fired(self, kind: SlotKind, generation: int, callback: Callable[[], None]) -> None:
        # Only the newest handle of a slot owns it; an older one that slipped
        # through after being replaced must not null its successor.
        if self._generation[kind] == generation:
            self._handles[kind] = None
        callback()
