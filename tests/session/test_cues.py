"""Tests for the cue generator: random delays, pulse timing, playback failures."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING
from unittest.mock import MagicMock

import pytest

from reacto.errors import PlaybackError
from reacto.session.cues import CueGenerator
from reacto.session.params import SessionParameters
from reacto.session.state import SessionState
from reacto.session.timers import TimerSlots

if TYPE_CHECKING:
    from conftest import FakeLoop


class _FixedRandom:
    def __init__(self, value: float) -> None:
        self.value = value
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> float:
        self.calls.append((a, b))
        return self.value


class _MidpointRandom:
    def randint(self, a: int, b: int) -> float:
        return (a + b) / 2


def _make(
    fake_loop: FakeLoop,
    *,
    rng: object,
    min_interval: int = 2,
    max_interval: int = 5,
    sound: MagicMock | None = None,
) -> tuple[CueGenerator, SessionState, MagicMock, list[bool]]:
    params = SessionParameters(
        duration_seconds=600,
        min_interval_seconds=min_interval,
        max_interval_seconds=max_interval,
    )
    state = SessionState(remaining_seconds=600, active=True)
    sound = sound or MagicMock()
    changes: list[bool] = []
    gen = CueGenerator(
        params,
        state,
        TimerSlots(fake_loop),
        sound,
        rng=rng,  # type: ignore[arg-type]
        pulse_ms=250,
        on_change=lambda: changes.append(state.is_pulse_active),
    )
    return gen, state, sound, changes


def test_next_delay_uses_inclusive_bounds(fake_loop: FakeLoop) -> None:
    rng = _FixedRandom(4)
    gen, *_ = _make(fake_loop, rng=rng)
    assert gen.next_delay_ms() == 4000
    assert rng.calls == [(2, 5)]


def test_next_delay_midpoint_source(fake_loop: FakeLoop) -> None:
    gen, *_ = _make(fake_loop, rng=_MidpointRandom())
    assert gen.next_delay_ms() == 3500


def test_fractional_sample_truncates_to_milliseconds(fake_loop: FakeLoop) -> None:
    gen, *_ = _make(fake_loop, rng=_FixedRandom(2.2505))
    assert gen.next_delay_ms() == 2250


def test_next_delay_stays_in_range_and_covers_every_value(fake_loop: FakeLoop) -> None:
    gen, *_ = _make(fake_loop, rng=random.Random(1234))
    delays = {gen.next_delay_ms() for _ in range(500)}
    assert delays == {2000, 3000, 4000, 5000}


def test_first_cue_is_not_immediate(fake_loop: FakeLoop) -> None:
    gen, state, sound, _ = _make(fake_loop, rng=_FixedRandom(3))
    gen.start()

    fake_loop.advance(0.0)
    fake_loop.advance(2.999)
    sound.play.assert_not_called()
    assert state.cues_fired == 0

    fake_loop.advance(0.001)
    sound.play.assert_called_once()
    assert state.cues_fired == 1


def test_fire_rewinds_before_playing(fake_loop: FakeLoop) -> None:
    gen, _, sound, _ = _make(fake_loop, rng=_FixedRandom(2))
    gen.fire()
    assert [c[0] for c in sound.method_calls] == ["rewind", "play"]


def test_pulse_lasts_exactly_250ms(fake_loop: FakeLoop) -> None:
    gen, state, _, changes = _make(fake_loop, rng=_FixedRandom(3))
    gen.start()

    fake_loop.advance(3.0)
    assert state.is_pulse_active is True

    fake_loop.advance(0.249)
    assert state.is_pulse_active is True

    fake_loop.advance(0.001)
    assert state.is_pulse_active is False
    assert changes == [True, False]


def test_cue_reschedules_itself(fake_loop: FakeLoop) -> None:
    gen, state, sound, _ = _make(fake_loop, rng=_FixedRandom(2))
    gen.start()
    fake_loop.advance(10.0)
    assert state.cues_fired == 5
    assert sound.play.call_count == 5


def test_refire_extends_pulse(fake_loop: FakeLoop) -> None:
    gen, state, _, _ = _make(fake_loop, rng=_FixedRandom(5))
    gen.fire()
    fake_loop.advance(0.2)
    gen.fire()
    fake_loop.advance(0.2)
    # First pulse-clear (at 0.25) was cancelled by the second fire.
    assert state.is_pulse_active is True
    fake_loop.advance(0.05)
    assert state.is_pulse_active is False


def test_playback_rejection_is_not_fatal(
    fake_loop: FakeLoop, caplog: pytest.LogCaptureFixture
) -> None:
    sound = MagicMock()
    sound.play.side_effect = PlaybackError("device refused")
    gen, state, _, _ = _make(fake_loop, rng=_FixedRandom(2), sound=sound)
    gen.start()

    with caplog.at_level(logging.WARNING):
        fake_loop.advance(4.0)

    assert state.cues_fired == 2
    assert "Cue playback rejected" in caplog.text


def test_unexpected_playback_error_is_not_fatal(
    fake_loop: FakeLoop, caplog: pytest.LogCaptureFixture
) -> None:
    sound = MagicMock()
    sound.rewind.side_effect = RuntimeError("boom")
    gen, state, _, _ = _make(fake_loop, rng=_FixedRandom(2), sound=sound)
    gen.start()

    with caplog.at_level(logging.ERROR):
        fake_loop.advance(2.0)

    assert state.is_pulse_active is True
    assert "Cue playback failed" in caplog.text


def test_inactive_state_makes_fire_a_noop(fake_loop: FakeLoop) -> None:
    gen, state, sound, changes = _make(fake_loop, rng=_FixedRandom(2))
    state.active = False
    gen.fire()
    sound.play.assert_not_called()
    assert state.is_pulse_active is False
    assert state.cues_fired == 0
    assert changes == []
