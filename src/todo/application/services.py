import logging
from typing import cast

import inject

from src.todo.domain.models import Task
from src.todo.domain.repositories import TaskRepository
from src.todo.domain.validation import validate_task

logger = logging.getLogger(__name__)


class TaskService:
    """Runs the validation gate and hands tasks to the task repository."""

    def __init__(self) -> None:
        self._storage = cast(TaskRepository, inject.instance(TaskRepository))

    async def create_task(self, text: str | None) -> Task:
        """
        Validate a new task and persist it.

        Raises ``EmptyTextError`` without touching storage when ``text`` is empty.
        """
        task = Task.new(text)
        validate_task(task)
        created = await self._storage.create_task(task)
        logger.info("Task created", extra={"task_id": created.id})
        return created

    async def get_task(self, task_id: int) -> Task:
        """Return the task identified by ``task_id``."""
        return await self._storage.get_task(task_id)

    async def list_tasks(self, limit: int = 50, offset: int = 0) -> list[Task]:
        return await self._storage.list_tasks(limit=limit, offset=offset)

    async def update_task(self, task_id: int, text: str | None) -> Task:
        """Replace the text of the task identified by ``task_id``."""
        task = Task(id=task_id, text=text)
        validate_task(task)
        updated = await self._storage.update_task(task)
        logger.info("Task updated", extra={"task_id": task_id})
        return updated

    async def delete_task(self, task_id: int) -> None:
        await self._storage.delete_task(task_id)
        logger.info("Task deleted", extra={"task_id": task_id})
