"""Audio cue side effect: an mpg123 clip player and a terminal-bell fallback."""

from __future__ import annotations

import logging
import shutil
import subprocess
import time
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from reacto.errors import PlaybackError

if TYPE_CHECKING:
    from rich.console import Console

    from reacto.config import CueConfig
    from reacto.paths import ReactoPaths

logger = logging.getLogger(__name__)

MPG123_BINARY = "mpg123"
_MPG123_FULL_SCALE = 32768
_TERMINATE_TIMEOUT = 1.0


class CueSound(Protocol):
    """Opaque cue sound: rewind to the start, play, stop.

    ``rewind``, ``play`` and ``stop`` run inside event loop callbacks and must
    not block. ``close`` may block and is called off the loop once the session
    is over.
    """

    def rewind(self) -> None: ...

    def play(self) -> None: ...

    def stop(self) -> None: ...

    def close(self) -> None: ...


def volume_to_mpg123_scale(percent: int) -> int:
    """Convert 0-100% to the mpg123 ``-f`` scale (0-32768), linearly."""
    percent = max(0, min(100, percent))
    return int(_MPG123_FULL_SCALE * (percent / 100.0))


class Mpg123CueSound:
    """Plays one clip per cue as a fire-and-forget ``mpg123`` subprocess.

    A clip still playing when the next cue arrives is terminated first, so
    every cue starts from the beginning of the asset. None of ``rewind``,
    ``play`` or ``stop`` waits on a child: terminated players are polled on
    later calls, killed once they outlive the grace period, and reaped by
    ``close()`` at the end of the program.
    """

    def __init__(self, asset_path: Path, volume_percent: int = 80) -> None:
        self._asset_path = asset_path
        self._volume_percent = volume_percent
        self._process: subprocess.Popen[bytes] | None = None
        self._exiting: list[tuple[subprocess.Popen[bytes], float]] = []

    @property
    def asset_path(self) -> Path:
        return self._asset_path

    def command(self) -> list[str]:
        return [
            MPG123_BINARY,
            "-q",
            "-f",
            str(volume_to_mpg123_scale(self._volume_percent)),
            str(self._asset_path),
        ]

    def pending_exits(self) -> int:
        """Terminated players that have not been reaped yet."""
        return len(self._exiting)

    def rewind(self) -> None:
        self._terminate()
        self._reap()

    def play(self) -> None:
        if not self._asset_path.is_file():
            msg = f"Cue asset not found: {self._asset_path}"
            raise PlaybackError(msg)
        try:
            self._process = subprocess.Popen(  # noqa: S603
                self.command(),
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as exc:
            msg = f"Cannot start {MPG123_BINARY}: {exc}"
            raise PlaybackError(msg) from exc

    def stop(self) -> None:
        self._terminate()
        self._reap()

    def close(self) -> None:
        """Block until every player has exited. Run it off the event loop."""
        self._terminate()
        exiting, self._exiting = self._exiting, []
        for proc, _ in exiting:
            try:
                proc.wait(timeout=_TERMINATE_TIMEOUT)
            except subprocess.TimeoutExpired:
                logger.warning("%s did not exit, killing pid=%d", MPG123_BINARY, proc.pid)
                proc.kill()
                proc.wait()

    def _terminate(self) -> None:
        proc, self._process = self._process, None
        if proc is None or proc.poll() is not None:
            return
        proc.terminate()
        self._exiting.append((proc, time.monotonic() + _TERMINATE_TIMEOUT))

    def _reap(self) -> None:
        now = time.monotonic()
        still_running: list[tuple[subprocess.Popen[bytes], float]] = []
        for proc, deadline in self._exiting:
            if proc.poll() is not None:
                continue
            if now >= deadline:
                logger.warning("%s ignored SIGTERM, killing pid=%d", MPG123_BINARY, proc.pid)
                proc.kill()
            still_running.append((proc, deadline))
        self._exiting = still_running


class BellCueSound:
    """Rings the terminal bell. There is nothing to rewind, stop or close."""

    def __init__(self, console: Console) -> None:
        self._console = console

    def rewind(self) -> None:
        return

    def play(self) -> None:
        self._console.bell()

    def stop(self) -> None:
        return

    def close(self) -> None:
        return


def create_cue_sound(config: CueConfig, paths: ReactoPaths, console: Console) -> CueSound:
    """Pick the cue sound implementation configured in ``cue.player``."""
    if config.player == "bell":
        return BellCueSound(console)
    if config.player != "mpg123":
        logger.warning("Unknown cue player '%s', falling back to bell", config.player)
        return BellCueSound(console)
    if shutil.which(MPG123_BINARY) is None:
        logger.warning("%s not found on PATH, falling back to bell", MPG123_BINARY)
        return BellCueSound(console)
    return Mpg123CueSound(
        paths.resolve_asset(config.sound_asset),
        volume_percent=config.volume_percent,
    )
