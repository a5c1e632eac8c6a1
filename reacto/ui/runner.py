"""Active-session view: runs a TrainingSession under a rich Live display."""

from __future__ import annotations

import asyncio
import contextlib
import logging
import random
import signal
import sys
from collections.abc import Iterator
from typing import TYPE_CHECKING

from rich.live import Live

from reacto.audio.player import CueSound, create_cue_sound
from reacto.log_context import set_log_context
from reacto.session.core import TrainingSession
from reacto.session.state import SessionView
from reacto.ui.render import render_session

if TYPE_CHECKING:
    from rich.console import Console

    from reacto.config import AppConfig
    from reacto.i18n import Language
    from reacto.paths import ReactoPaths
    from reacto.session.params import SessionParameters

logger = logging.getLogger(__name__)

_REFRESH_PER_SECOND = 20
_IS_WINDOWS = sys.platform == "win32"


@contextlib.contextmanager
def stop_triggers(loop: asyncio.AbstractEventLoop, session: TrainingSession) -> Iterator[None]:
    """Route SIGINT/SIGTERM and an Enter keypress to ``session.stop()``."""
    installed_signals: list[signal.Signals] = []
    reader_fd: int | None = None

    if not _IS_WINDOWS:
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(sig, session.stop)
            installed_signals.append(sig)

    stdin = sys.stdin
    if stdin is not None and stdin.isatty():

        def _on_input() -> None:
            stdin.readline()
            logger.debug("Stop requested from keyboard")
            session.stop()

        try:
            loop.add_reader(stdin.fileno(), _on_input)
            reader_fd = stdin.fileno()
        except NotImplementedError:
            logger.debug("Loop has no reader support, keyboard stop disabled")

    try:
        yield
    finally:
        if reader_fd is not None:
            loop.remove_reader(reader_fd)
        for sig in installed_signals:
            loop.remove_signal_handler(sig)


async def run_session(  # noqa: PLR0913
    params: SessionParameters,
    config: AppConfig,
    paths: ReactoPaths,
    console: Console,
    *,
    language: Language,
    sound: CueSound | None = None,
) -> SessionView:
    """Run one session to completion and return its final view."""
    set_log_context(operation="ui")
    loop = asyncio.get_running_loop()
    cue_sound = sound or create_cue_sound(config.cue, paths, console)
    session = TrainingSession(
        cue_sound,
        loop=loop,
        rng=random.Random(config.cue.seed),  # noqa: S311
        pulse_ms=config.cue.pulse_ms,
    )
    stopped = asyncio.Event()
    initial = SessionView(
        remaining_seconds=params.duration_seconds,
        is_pulse_active=False,
        active=True,
    )

    with Live(
        render_session(initial, language),
        console=console,
        refresh_per_second=_REFRESH_PER_SECOND,
        transient=True,
    ) as live:
        session.set_change_handler(lambda view: live.update(render_session(view, language)))
        session.start(params, stopped.set)
        try:
            with stop_triggers(loop, session):
                await stopped.wait()
        finally:
            # Covers cancellation of this coroutine (e.g. KeyboardInterrupt on Windows).
            session.stop()
            session.set_change_handler(None)

    if sound is None:
        await asyncio.to_thread(cue_sound.close)
    return session.view()
