from __future__ import annotations

from pydantic import BaseModel, Field

# Ids are stored in a signed 64-bit column.
MAX_TASK_ID = 2**63 - 1


class Task(BaseModel):
    id: int | None = Field(
        default=None, description="Surrogate key assigned by storage on first save."
    )
    text: str | None = Field(default=None, description="Text of the todo item.")

    @classmethod
    def new(cls, text: str | None) -> Task:
        """Build an unsaved task holding ``text``."""
        return cls(text=text)

    @property
    def is_persisted(self) -> bool:
        return self.id is not None
