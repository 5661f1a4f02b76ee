"""
TaskLogger — Logs all operations. Pure observation, never modifies data.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with one stderr handler.

    Call once at startup, before the server starts. Calling again
    replaces the handler instead of stacking a duplicate.
    """
    numeric = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(numeric)
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)

    # uvicorn installs its own handlers; only align the level
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(numeric)


class TaskLogger:
    """Witnesses task actions and writes them to the log."""

    def __init__(self, name: str = "taskapi.actions"):
        self._logger = logging.getLogger(name)

    def log_action(self, action: str, details: dict) -> None:
        """Record one completed action; ``details`` is only read."""
        fields = " ".join(f"{k}={details[k]!r}" for k in sorted(details))
        self._logger.info("%s %s", action, fields)

    def log_rejected(self, action: str, status: int, reason: str) -> None:
        self._logger.warning("%s rejected status=%d reason=%r", action, status, reason)
