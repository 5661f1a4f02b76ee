"""
Task List Server — REST API over the in-memory TaskStore
==========================================================
FastAPI application exposing four endpoints.

Launch:
    python -m taskapi serve         # Via CLI
    python -m taskapi.server        # Direct

Endpoints:
    GET    /tasks           → All tasks, JSON object keyed by id
    POST   /tasks           → Create a task (201, empty body)
    GET    /tasks/{id}      → One task as JSON
    DELETE /tasks/{id}      → Remove a task (200, empty body)

Errors are plain-text bodies. A missing task is 400, not 404.
"""

from __future__ import annotations

import json
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from fastapi.responses import PlainTextResponse, Response
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskapi import __version__
from taskapi.config import ServerConfig
from taskapi.ids import TaskIDError, new_task_id
from taskapi.models import TaskPayload, fixture_tasks
from taskapi.store import (
    TaskConflictError, TaskDeleteError, TaskNotFoundError, TaskStore,
)
from taskapi.tasklogger import TaskLogger, setup_logging

JSON_MEDIA_TYPE = "application/json"

witness = TaskLogger()
router = APIRouter()


# ─────────────────────────────────────────────────────────────
#  Helpers
# ─────────────────────────────────────────────────────────────

def get_store(request: Request) -> TaskStore:
    """The TaskStore attached to the running application."""
    return request.app.state.store


def _marshal(payload: dict) -> str:
    return json.dumps(payload, ensure_ascii=False)


def _json(body: str = "", status_code: int = 200) -> Response:
    return Response(content=body, status_code=status_code, media_type=JSON_MEDIA_TYPE)


def _reject(action: str, status_code: int, detail: str) -> HTTPException:
    witness.log_rejected(action, status_code, detail)
    return HTTPException(status_code=status_code, detail=detail)


async def _plain_text_error(request: Request, exc: StarletteHTTPException) -> Response:
    return PlainTextResponse(
        str(exc.detail), status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


# ─────────────────────────────────────────────────────────────
#  Routes
# ─────────────────────────────────────────────────────────────

@router.get("/tasks")
def list_tasks(store: TaskStore = Depends(get_store)) -> Response:
    """Return every task, keyed by id."""
    tasks = store.list_tasks()
    try:
        body = _marshal({task_id: tasks[task_id].to_dict() for task_id in sorted(tasks)})
    except (TypeError, ValueError) as e:
        raise _reject("list", 500, str(e))
    return _json(body)


@router.post("/tasks")
async def create_task(request: Request, store: TaskStore = Depends(get_store)) -> Response:
    """Create a task from the JSON body.

    Order of checks:
        1. body decodes into TaskPayload
        2. empty id → fresh UUIDv7
        3. empty applications → [User-Agent], which must be present
        4. id must not already exist
    """
    raw = await request.body()
    try:
        task = TaskPayload.model_validate_json(raw).to_task()
    except ValidationError as e:
        raise _reject("create", 400, str(e))

    if not task.id:
        try:
            task.id = new_task_id()
        except TaskIDError:
            raise _reject("create", 400, "Cant create ID.")

    if not task.applications:
        user_agent = request.headers.get("user-agent", "")
        if not user_agent:
            raise _reject(
                "create", 400,
                "No Applications data in request, and cant get data from User-Agent Header",
            )
        task.applications = [user_agent]

    try:
        store.insert(task)
    except TaskConflictError as e:
        raise _reject("create", 400, str(e))

    witness.log_action("create", {"id": task.id, "applications": task.applications})
    return _json(status_code=201)


@router.get("/tasks/{task_id}")
def get_task(task_id: str, store: TaskStore = Depends(get_store)) -> Response:
    """Return one task by id."""
    try:
        task = store.get(task_id)
    except TaskNotFoundError as e:
        raise _reject("get", 400, f"{e} Nothing to show.")

    try:
        body = _marshal(task.to_dict())
    except (TypeError, ValueError) as e:
        # 400 here, unlike list's 500; kept for client compatibility
        raise _reject("get", 400, str(e))
    return _json(body)


@router.delete("/tasks/{task_id}")
def delete_task(task_id: str, store: TaskStore = Depends(get_store)) -> Response:
    """Remove one task by id."""
    try:
        store.delete(task_id)
    except TaskNotFoundError as e:
        raise _reject("delete", 400, f"{e} Nothing to delete.")
    except TaskDeleteError as e:
        raise _reject("delete", 400, str(e))

    witness.log_action("delete", {"id": task_id})
    return _json()


# ─────────────────────────────────────────────────────────────
#  App Setup
# ─────────────────────────────────────────────────────────────

def create_app(store: Optional[TaskStore] = None, seed: bool = True) -> FastAPI:
    """Build the application around a store.

    Without an explicit store, a fresh one is created and (unless
    ``seed`` is False) loaded with the fixture tasks.
    """
    if store is None:
        store = TaskStore(fixture_tasks() if seed else ())

    app = FastAPI(title="Task List API", version=__version__)
    app.state.store = store
    app.add_exception_handler(StarletteHTTPException, _plain_text_error)
    app.include_router(router)
    return app


app = create_app()


def run_server(config: Optional[ServerConfig] = None):
    """Launch the task API server."""
    import uvicorn

    config = config or ServerConfig.from_env()
    setup_logging(config.log_level)
    server_app = create_app(seed=config.seed)

    print(f"\n◬ ─── Task List API ───")
    print(f"  http://{config.host}:{config.port}/tasks")
    print(f"  {len(server_app.state.store)} task(s) loaded")
    print(f"  Press Ctrl+C to stop\n")

    uvicorn.run(server_app, host=config.host, port=config.port,
                log_level=config.log_level.lower())


if __name__ == "__main__":
    run_server()
