"""
Task Models — Records and Request Shapes
==========================================
Data layer for the task list API.

Components:
    Task          — The canonical stored record (always fully populated)
    TaskPayload   — Loose decoding shape for POST bodies (every field optional)
    FIXTURE_TASKS — Tasks seeded into a fresh store at startup
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, model_validator


# ─────────────────────────────────────────────────────────────
#  Task Record
# ─────────────────────────────────────────────────────────────

@dataclass
class Task:
    """A unit of work with the applications used to do it."""

    id: str
    description: str = ""
    note: str = ""
    applications: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Serialize to dict. Key order is id, description, note, applications."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> Task:
        """Deserialize from dict, ignoring unknown keys."""
        return cls(**{k: v for k, v in data.items()
                      if k in cls.__dataclass_fields__})


# ─────────────────────────────────────────────────────────────
#  Request Shape
# ─────────────────────────────────────────────────────────────

class TaskPayload(BaseModel):
    """Body of POST /tasks.

    Every field is optional and unknown fields are ignored. Keys match
    case-insensitively (``ID``, ``Description`` ...); when two spellings
    of one key appear, the later one wins. A bare ``null`` body, a field
    sent as ``null`` and a ``null`` application entry all read as empty.
    Wrong JSON types still fail validation.
    """

    model_config = ConfigDict(extra="ignore", strict=True)

    id: Optional[str] = None
    description: Optional[str] = None
    note: Optional[str] = None
    applications: Optional[list[str]] = None

    @model_validator(mode="before")
    @classmethod
    def _fold_input(cls, data: Any) -> Any:
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data

        folded = {}
        for key, value in data.items():
            folded[key.lower() if isinstance(key, str) else key] = value

        apps = folded.get("applications")
        if isinstance(apps, list):
            folded["applications"] = ["" if a is None else a for a in apps]
        return folded

    def to_task(self) -> Task:
        """Build the canonical Task with empty defaults applied."""
        return Task(
            id=self.id or "",
            description=self.description or "",
            note=self.note or "",
            applications=list(self.applications or []),
        )


# ─────────────────────────────────────────────────────────────
#  Fixtures
# ─────────────────────────────────────────────────────────────

FIXTURE_TASKS: tuple[Task, ...] = (
    Task(
        id="1",
        description="Сделать финальное задание темы REST API",
        note="Если сегодня сделаю, то завтра будет свободный день. Ура!",
        applications=["VS Code", "Terminal", "git"],
    ),
    Task(
        id="2",
        description="Протестировать финальное задание с помощью Postmen",
        note=(
            "Лучше это делать в процессе разработки, каждый раз, когда "
            "запускаешь сервер и проверяешь хендлер"
        ),
        applications=["VS Code", "Terminal", "git", "Postman"],
    ),
)


def fixture_tasks() -> list[Task]:
    """Fresh copies of the fixture tasks (safe to mutate)."""
    return [Task.from_dict(t.to_dict()) for t in FIXTURE_TASKS]
