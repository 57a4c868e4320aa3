from src.todo.domain.models.task import Task

__all__ = [
    "Task",
]
