import inject

from src.setup.db_config import DatabaseSettings, get_database_settings
from src.todo.domain.repositories import TaskRepository
from src.todo.infrastructure.postgres.orm import PostgresOrm
from src.todo.infrastructure.postgres.repositories import PostgresTaskRepository


def configure_di(settings: DatabaseSettings | None = None) -> None:
    """Bind the ORM holder and task repository into the DI container once per process."""
    if inject.is_configured():
        return
    if settings is None:
        settings = get_database_settings()

    orm = PostgresOrm(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

    def _config(binder: inject.Binder) -> None:
        binder.bind(PostgresOrm, orm)
        binder.bind(TaskRepository, PostgresTaskRepository(orm))

    inject.configure(_config)
