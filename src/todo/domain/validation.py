from src.todo.domain.exceptions import EmptyTextError
from src.todo.domain.models.task import Task


def validate_task(task: Task) -> None:
    """
    Check ``task`` before it is handed to storage.

    Text is not stripped, so whitespace-only text is accepted.
    """
    if not task.text:
        raise EmptyTextError(task.id)
