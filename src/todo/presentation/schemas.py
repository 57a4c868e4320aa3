from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from src.todo.domain.models.task import Task


class TaskRequest(BaseModel):
    text: str | None = Field(default=None, description="Text of the todo item.")


class Link(BaseModel):
    href: str


class TaskLinks(BaseModel):
    self: Link


class TaskResource(BaseModel):
    """Task representation with a hypermedia self link."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(description="Task identifier.")
    text: str = Field(description="Text of the todo item.")
    links: TaskLinks = Field(alias="_links")

    @classmethod
    def from_task(cls, task: Task, self_href: str) -> TaskResource:
        return cls(id=task.id, text=task.text, links=TaskLinks(self=Link(href=self_href)))


class EmbeddedTasks(BaseModel):
    tasks: list[TaskResource]


class TaskCollection(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    embedded: EmbeddedTasks = Field(alias="_embedded")
