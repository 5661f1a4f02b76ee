"""
TaskStore — In-memory task collection
=======================================
Keyed id → Task map shared by every request handler.

All reads and writes go through one lock, held only for the dictionary
access itself. The raw dict never leaves this class; callers get copies.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable

from taskapi.models import Task

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────
#  Errors
# ─────────────────────────────────────────────────────────────

class TaskStoreError(Exception):
    """Base class for store failures."""

    def __init__(self, task_id: str, message: str):
        super().__init__(message)
        self.task_id = task_id


class TaskNotFoundError(TaskStoreError):
    def __init__(self, task_id: str):
        super().__init__(task_id, f"No task found with id = [{task_id}].")


class TaskConflictError(TaskStoreError):
    def __init__(self, task_id: str):
        super().__init__(
            task_id,
            f"Cant create task. ID conflict, task with ID = [{task_id}] already exists.",
        )


class TaskDeleteError(TaskStoreError):
    """Key still present after removal."""

    def __init__(self, task_id: str):
        super().__init__(
            task_id,
            f"Something goes wrong when we try to delete task with id = [{task_id}].",
        )


# ─────────────────────────────────────────────────────────────
#  Store
# ─────────────────────────────────────────────────────────────

def _copy(task: Task) -> Task:
    return Task(
        id=task.id,
        description=task.description,
        note=task.note,
        applications=list(task.applications),
    )


class TaskStore:
    """Thread-safe id → Task collection.

    Operations:
        list_tasks() — snapshot of every task
        get()        — one task by id
        insert()     — insert-if-absent, never overwrites
        delete()     — remove and verify absence
    """

    def __init__(self, tasks: Iterable[Task] = ()):
        self._lock = threading.Lock()
        self._tasks: dict[str, Task] = {}
        self.seed(tasks)

    def seed(self, tasks: Iterable[Task]) -> int:
        """Load tasks, skipping ids already present. Returns how many were added."""
        added = 0
        with self._lock:
            for task in tasks:
                if task.id in self._tasks:
                    continue
                self._tasks[task.id] = _copy(task)
                added += 1
        if added:
            logger.debug("Seeded %d task(s)", added)
        return added

    def list_tasks(self) -> dict[str, Task]:
        with self._lock:
            return {task_id: _copy(t) for task_id, t in self._tasks.items()}

    def get(self, task_id: str) -> Task:
        with self._lock:
            task = self._tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return _copy(task)

    def insert(self, task: Task) -> Task:
        """Insert a task under its id. Raises TaskConflictError if the id is taken."""
        stored = _copy(task)
        with self._lock:
            if stored.id in self._tasks:
                raise TaskConflictError(stored.id)
            self._tasks[stored.id] = stored
        return _copy(stored)

    def delete(self, task_id: str) -> Task:
        """Remove a task and return it.

        The key is re-checked under the same lock after removal; if it is
        somehow still there, TaskDeleteError is raised.
        """
        with self._lock:
            removed = self._tasks.pop(task_id, None)
            if removed is None:
                raise TaskNotFoundError(task_id)
            if task_id in self._tasks:
                raise TaskDeleteError(task_id)
        return removed

    def __contains__(self, task_id: object) -> bool:
        with self._lock:
            return task_id in self._tasks

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)
