from __future__ import annotations

import logging

from sqlalchemy import select

from src.todo.domain.exceptions import TaskNotFoundError
from src.todo.domain.models.task import MAX_TASK_ID, Task
from src.todo.domain.repositories import TaskRepository
from src.todo.infrastructure.postgres.mappers import OrmMapper
from src.todo.infrastructure.postgres.orm import PostgresOrm, TaskRow

logger = logging.getLogger(__name__)


class PostgresTaskRepository(TaskRepository):
    """SQL-backed task storage using SQLAlchemy async sessions."""

    def __init__(self, orm: PostgresOrm) -> None:
        self._orm = orm

    async def create_task(self, task: Task) -> Task:
        """Persist a new task and return it with the id assigned by the database."""
        if task.is_persisted:
            raise ValueError(f"Task already has id '{task.id}'; use update_task instead.")

        task_row = OrmMapper.to_task_row(task)
        async with self._orm.session_factory() as session:
            async with session.begin():
                session.add(task_row)
                # Flush so the identity column is populated before commit.
                await session.flush()

        logger.info("Task row inserted", extra={"task_id": task_row.id})
        return OrmMapper.to_domain_task(task_row)

    async def get_task(self, task_id: int) -> Task:
        """Fetch a task by id."""
        self._check_id(task_id)
        async with self._orm.session_factory() as session:
            task_row = await session.get(TaskRow, task_id)

        if task_row is None:
            raise TaskNotFoundError(task_id)
        return OrmMapper.to_domain_task(task_row)

    async def list_tasks(self, *, limit: int = 50, offset: int = 0) -> list[Task]:
        """List tasks ordered by id."""
        statement = select(TaskRow).order_by(TaskRow.id).limit(limit).offset(offset)

        async with self._orm.session_factory() as session:
            result = await session.execute(statement)
            rows = result.scalars().all()

        return [OrmMapper.to_domain_task(row) for row in rows]

    async def update_task(self, task: Task) -> Task:
        """Replace the text of an existing task."""
        if task.id is None:
            raise ValueError("Task id is required to update a task.")
        if task.text is None:
            raise ValueError("Task text is required to update a task.")
        self._check_id(task.id)

        async with self._orm.session_factory() as session:
            async with session.begin():
                task_row = await session.get(TaskRow, task.id)
                if task_row is None:
                    raise TaskNotFoundError(task.id)
                task_row.text = task.text

        logger.info("Task row updated", extra={"task_id": task_row.id})
        return OrmMapper.to_domain_task(task_row)

    async def delete_task(self, task_id: int) -> None:
        """Delete a task by id."""
        self._check_id(task_id)
        async with self._orm.session_factory() as session:
            async with session.begin():
                task_row = await session.get(TaskRow, task_id)
                if task_row is None:
                    raise TaskNotFoundError(task_id)
                await session.delete(task_row)

        logger.info("Task row deleted", extra={"task_id": task_id})

    @staticmethod
    def _check_id(task_id: int) -> None:
        # Ids outside the column range cannot be bound as query parameters.
        if not 1 <= task_id <= MAX_TASK_ID:
            raise TaskNotFoundError(task_id)
