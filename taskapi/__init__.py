"""
Task List API — in-memory task records over HTTP
==================================================
List, create, fetch and delete tasks through four REST endpoints.

Layout:
    models     — Task record, request payload shape, fixture tasks
    ids        — Time-ordered (UUIDv7) id generation
    store      — Lock-guarded id → Task collection
    server     — FastAPI application and handlers
    config     — ServerConfig from environment
    tasklogger — Logging setup and the action witness
    cli        — Command-line entry point
"""

__version__ = "0.1.0"

from taskapi.models import Task, TaskPayload, FIXTURE_TASKS
from taskapi.store import (
    TaskStore, TaskStoreError, TaskNotFoundError, TaskConflictError, TaskDeleteError,
)

__all__ = [
    "Task", "TaskPayload", "FIXTURE_TASKS",
    "TaskStore", "TaskStoreError", "TaskNotFoundError", "TaskConflictError",
    "TaskDeleteError",
]
