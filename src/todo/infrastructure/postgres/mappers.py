from __future__ import annotations

from src.todo.domain.models.task import Task
from src.todo.infrastructure.postgres.orm import TaskRow


class OrmMapper:
    @staticmethod
    def to_task_row(task: Task) -> TaskRow:
        if task.text is None:
            raise ValueError("Task text is required to persist TaskRow.")
        task_row = TaskRow(text=task.text)
        # Unsaved tasks leave the id to the database identity column.
        if task.id is not None:
            task_row.id = task.id
        return task_row

    @staticmethod
    def to_domain_task(row: TaskRow) -> Task:
        return Task(id=row.id, text=row.text)
