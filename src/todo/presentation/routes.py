from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, Query, Request, Response, status

from src.setup.api_config import get_api_settings
from src.todo.application.services import TaskService
from src.todo.domain.exceptions import EmptyTextError, TaskNotFoundError
from src.todo.domain.models import Task
from src.todo.domain.models.task import MAX_TASK_ID
from src.todo.presentation.schemas import (
    EmbeddedTasks,
    TaskCollection,
    TaskRequest,
    TaskResource,
)

router = APIRouter(prefix="/tasks", tags=["tasks"])
logger = logging.getLogger(__name__)

# Instantiate services once (simple DI)
_settings = get_api_settings()
_task_service = TaskService()

TaskId = Annotated[int, Path(ge=1, le=MAX_TASK_ID, description="Task identifier")]


def _to_resource(request: Request, task: Task) -> TaskResource:
    href = str(request.url_for("get_task", task_id=task.id))
    return TaskResource.from_task(task, href)


@router.get(
    "",
    response_model=TaskCollection,
    summary="List tasks",
    description="Returns stored tasks ordered by id, embedded under `_embedded.tasks`.",
)
async def list_tasks(
    request: Request,
    limit: int = Query(50, ge=1, le=_settings.MAX_PAGE_SIZE, description="Page size"),
    offset: int = Query(0, ge=0, description="Number of tasks to skip"),
):
    tasks = await _task_service.list_tasks(limit=limit, offset=offset)
    return TaskCollection(
        embedded=EmbeddedTasks(tasks=[_to_resource(request, task) for task in tasks])
    )


@router.post(
    "",
    response_model=TaskResource,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task",
    responses={400: {"description": "Task text is empty or missing."}},
)
async def create_task(request: Request, body: TaskRequest):
    try:
        task = await _task_service.create_task(body.text)
    except EmptyTextError as exc:
        logger.warning("Rejected task with empty text")
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return _to_resource(request, task)


@router.get(
    "/{task_id}",
    response_model=TaskResource,
    summary="Get a task",
    responses={404: {"description": "Task not found."}},
)
async def get_task(request: Request, task_id: TaskId):
    try:
        task = await _task_service.get_task(task_id)
    except TaskNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _to_resource(request, task)


@router.put(
    "/{task_id}",
    response_model=TaskResource,
    summary="Replace task text",
    responses={
        400: {"description": "Task text is empty or missing."},
        404: {"description": "Task not found."},
    },
)
async def update_task(request: Request, task_id: TaskId, body: TaskRequest):
    try:
        task = await _task_service.update_task(task_id, body.text)
    except EmptyTextError as exc:
        logger.warning("Rejected update with empty text", extra={"task_id": task_id})
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except TaskNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _to_resource(request, task)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a task",
    responses={404: {"description": "Task not found."}},
)
async def delete_task(task_id: TaskId) -> Response:
    try:
        await _task_service.delete_task(task_id)
    except TaskNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
