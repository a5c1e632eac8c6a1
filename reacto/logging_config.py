"""Logging for reacto: always to ``logs/reacto.log``, to the terminal only with ``-v``.

The file sink sits behind a queue so that session callbacks never wait on disk.
Terminal output goes through the same rich Console the live session panel
draws on, which keeps log lines above the panel instead of tearing it.
"""

from __future__ import annotations

import atexit
import logging
import queue
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from typing import TYPE_CHECKING

from rich.logging import RichHandler

from reacto.log_context import ContextFilter

if TYPE_CHECKING:
    from pathlib import Path

    from rich.console import Console

LOG_FILE_NAME = "reacto.log"
MAX_BYTES = 1024 * 1024
BACKUP_COUNT = 2
FILE_FMT = "%(asctime)s [%(levelname)s] %(name)s: %(ctx)s%(message)s"
FILE_DATE_FMT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(__name__)

_file_listener: QueueListener | None = None


def shutdown_logging() -> None:
    """Flush and stop the file sink. Safe to call more than once."""
    global _file_listener  # noqa: PLW0603
    listener, _file_listener = _file_listener, None
    if listener is not None:
        listener.stop()


atexit.register(shutdown_logging)


def setup_logging(
    log_dir: Path | None,
    *,
    level: int = logging.INFO,
    console: Console | None = None,
) -> None:
    """Install reacto's handlers on the root logger, replacing any earlier ones.

    Records at *level* and above go to ``log_dir / reacto.log`` and, when a
    *console* is given, to the terminal as well.
    """
    shutdown_logging()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    ctx_filter = ContextFilter()

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / LOG_FILE_NAME,
            maxBytes=MAX_BYTES,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(FILE_FMT, datefmt=FILE_DATE_FMT))
        log_queue: queue.Queue[logging.LogRecord] = queue.Queue()
        queue_handler = QueueHandler(log_queue)
        queue_handler.addFilter(ctx_filter)
        root.addHandler(queue_handler)

        global _file_listener  # noqa: PLW0603
        _file_listener = QueueListener(log_queue, file_handler)
        _file_listener.start()

    if console is not None:
        rich_handler = RichHandler(console=console, show_path=False, log_time_format="%H:%M:%S")
        rich_handler.addFilter(ctx_filter)
        rich_handler.setFormatter(logging.Formatter("%(ctx)s%(message)s"))
        root.addHandler(rich_handler)

    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logger.debug("Logging ready (level=%s)", logging.getLevelName(level))


def set_log_level(name: str) -> None:
    """Apply a configured level name such as ``"DEBUG"``; unknown names mean INFO."""
    level = logging.getLevelNamesMapping().get(name.upper(), logging.INFO)
    logging.getLogger().setLevel(level)
