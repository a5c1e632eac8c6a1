"""Logging context: ContextVar-based log enrichment for session callbacks.

Every log record is automatically enriched with a ``[op:sid]`` prefix
via a `ContextFilter` attached to the root logger handlers.

Operation codes: ``session`` (set by the lifecycle owner, inherited by every
tick and cue callback) and ``ui`` (terminal front end).
"""

from __future__ import annotations

import logging
from contextvars import ContextVar

ctx_session_id: ContextVar[str | None] = ContextVar("ctx_session_id", default=None)
ctx_operation: ContextVar[str | None] = ContextVar("ctx_operation", default=None)


class ContextFilter(logging.Filter):
    """Inject ContextVar values into every LogRecord as ``record.ctx``."""

    def filter(self, record: logging.LogRecord) -> bool:
        sid = ctx_session_id.get(None)
        op = ctx_operation.get(None)
        parts: list[str] = []
        if op:
            parts.append(op)
        if sid:
            parts.append(sid[:8])
        record.ctx = f"[{':'.join(parts)}] " if parts else ""
        return True


def set_log_context(
    *,
    operation: str | None = None,
    session_id: str | None = None,
) -> None:
    """Set logging context for the current callback or task.

    Loop callbacks run in a copy of the context captured when they were
    scheduled, so values set in ``start()`` follow every tick and cue.
    """
    if operation is not None:
        ctx_operation.set(operation)
    if session_id is not None:
        ctx_session_id.set(session_id)
