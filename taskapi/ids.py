"""Time-ordered task id generation (UUIDv7)."""

from __future__ import annotations

from uuid6 import uuid7


class TaskIDError(RuntimeError):
    """Raised when a fresh task id cannot be generated."""


def new_task_id() -> str:
    """Return a new UUIDv7 string. Later ids sort after earlier ones."""
    try:
        return str(uuid7())
    except (OSError, ValueError) as e:
        raise TaskIDError(str(e)) from e
