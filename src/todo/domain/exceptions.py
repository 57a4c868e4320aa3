class TaskNotFoundError(Exception):
    """Raised when a task identifier does not exist in the task store."""
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task with id '{task_id}' was not found.")
        self.task_id = task_id


class TaskValidationError(Exception):
    """Base class for tasks rejected by the validation gate."""


class EmptyTextError(TaskValidationError):
    """Raised when a task has no text or an empty one."""

    def __init__(self, task_id: int | None = None) -> None:
        super().__init__("Task text must not be empty.")
        self.task_id = task_id
