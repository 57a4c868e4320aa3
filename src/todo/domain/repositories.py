from __future__ import annotations

from typing import Protocol

from src.todo.domain.models.task import Task


class TaskRepository(Protocol):
    """Repository contract for persisting todo tasks."""

    async def create_task(self, task: Task) -> Task:
        """Persist an unsaved task and return it with its assigned id."""

    async def get_task(self, task_id: int) -> Task:
        """Fetch the task identified by ``task_id``."""

    async def list_tasks(self, *, limit: int = 50, offset: int = 0) -> list[Task]:
        """List stored tasks ordered by id."""

    async def update_task(self, task: Task) -> Task:
        """Replace the text of an already persisted task."""

    async def delete_task(self, task_id: int) -> None:
        """Remove the task identified by ``task_id``."""
