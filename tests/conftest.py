from __future__ import annotations

import importlib
from collections.abc import Callable

import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.todo.domain.exceptions import TaskNotFoundError
from src.todo.domain.models.task import Task
from src.todo.domain.repositories import TaskRepository
from src.todo.infrastructure.postgres.orm import PostgresOrm


class StubTaskRepository(TaskRepository):
    """Simple in-memory TaskRepository replacement for tests."""

    def __init__(self) -> None:
        self.tasks_by_id: dict[int, Task] = {}
        self.create_calls: list[Task] = []
        self._counter = 0

    async def create_task(self, task: Task) -> Task:
        if task.id is not None:
            raise ValueError("Task already has an id.")
        self.create_calls.append(task)
        self._counter += 1
        stored = task.model_copy(update={"id": self._counter})
        self.tasks_by_id[stored.id] = stored
        return stored

    async def get_task(self, task_id: int) -> Task:
        if task_id not in self.tasks_by_id:
            raise TaskNotFoundError(task_id)
        return self.tasks_by_id[task_id]

    async def list_tasks(self, *, limit: int = 50, offset: int = 0) -> list[Task]:
        ordered = [self.tasks_by_id[key] for key in sorted(self.tasks_by_id)]
        return ordered[offset : offset + limit]

    async def update_task(self, task: Task) -> Task:
        if task.id not in self.tasks_by_id:
            raise TaskNotFoundError(task.id)
        self.tasks_by_id[task.id] = task
        return task

    async def delete_task(self, task_id: int) -> None:
        if task_id not in self.tasks_by_id:
            raise TaskNotFoundError(task_id)
        del self.tasks_by_id[task_id]


@pytest.fixture
def env_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Provide environment variables for ApiSettings."""
    monkeypatch.setenv("APP_NAME", "Test API")
    monkeypatch.setenv("APP_VERSION", "0.1.0")
    monkeypatch.setenv("MAX_PAGE_SIZE", "10")


def _patch_inject_instance(
    monkeypatch: pytest.MonkeyPatch,
    storage_stub: StubTaskRepository,
) -> Callable[[object], object]:
    """Patch `inject.instance` to always return the stub repository."""
    import inject

    def fake_instance(interface: object) -> object:
        if interface is TaskRepository:
            return storage_stub
        raise RuntimeError(f"Unexpected dependency request: {interface}")

    monkeypatch.setattr(inject, "instance", fake_instance)
    return fake_instance


@pytest.fixture
def stubbed_services(env_settings: None, monkeypatch: pytest.MonkeyPatch):
    """Reload service module with stubbed repository injection."""
    storage_stub = StubTaskRepository()
    _patch_inject_instance(monkeypatch, storage_stub)

    services_module = importlib.reload(importlib.import_module("src.todo.application.services"))
    return services_module, storage_stub


@pytest.fixture
def api_client(env_settings: None, monkeypatch: pytest.MonkeyPatch):
    """FastAPI test client with services wired to the stub repository."""
    storage_stub = StubTaskRepository()
    _patch_inject_instance(monkeypatch, storage_stub)

    # Reload modules so module-level singletons pick up the patched injector.
    services_module = importlib.reload(importlib.import_module("src.todo.application.services"))  # noqa: F841
    routes_module = importlib.reload(importlib.import_module("src.todo.presentation.routes"))

    app = FastAPI()
    app.include_router(routes_module.router)
    client = TestClient(app)
    return client, storage_stub


@pytest_asyncio.fixture
async def orm(tmp_path):
    """File-backed SQLite ORM with the schema created."""
    orm = PostgresOrm(f"sqlite+aiosqlite:///{tmp_path / 'todo.db'}")
    await orm.create_schema()
    yield orm
    await orm.dispose()
