"""Shared test fixtures."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from reacto.paths import ReactoPaths

_EPSILON = 1e-9


class FakeHandle:
    """Cancellable handle with the ``asyncio.TimerHandle`` surface the code uses."""

    def __init__(self, when: float, callback: Callable[..., object], args: tuple[Any, ...]) -> None:
        self.when = when
        self._callback = callback
        self._args = args
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    def run(self) -> None:
        self._callback(*self._args)


class FakeLoop:
    """Virtual-clock loop: ``call_later`` queues work, ``advance`` runs it in deadline order."""

    def __init__(self) -> None:
        self._now = 0.0
        self._queue: list[tuple[float, int, FakeHandle]] = []
        self._seq = itertools.count()

    def time(self) -> float:
        return self._now

    def call_later(self, delay: float, callback: Callable[..., object], *args: Any) -> FakeHandle:
        handle = FakeHandle(self._now + delay, callback, args)
        heapq.heappush(self._queue, (handle.when, next(self._seq), handle))
        return handle

    def advance(self, seconds: float) -> None:
        target = self._now + seconds
        while self._queue and self._queue[0][0] <= target + _EPSILON:
            when, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self._now = max(self._now, when)
            handle.run()
        self._now = max(self._now, target)

    def pending(self) -> int:
        return sum(1 for _, _, h in self._queue if not h.cancelled)


@pytest.fixture
def fake_loop() -> FakeLoop:
    return FakeLoop()


@pytest.fixture
def tmp_reacto_home(tmp_path: Path) -> Path:
    """Temporary ~/.reacto equivalent."""
    home = tmp_path / ".reacto"
    home.mkdir()
    return home


@pytest.fixture
def paths(tmp_reacto_home: Path) -> ReactoPaths:
    return ReactoPaths(reacto_home=tmp_reacto_home)
