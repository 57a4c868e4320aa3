import logging
from contextlib import asynccontextmanager

import inject
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.setup.api_config import get_api_settings
from src.setup.app_config import configure_di
from src.setup.db_config import get_database_settings
from src.todo.infrastructure.postgres.orm import PostgresOrm

# Configure DI once at process start
settings = get_api_settings()
db_settings = get_database_settings()
logging.basicConfig(level=settings.LOG_LEVEL)
# basicConfig is a no-op once the root logger has handlers.
logging.getLogger("src.todo").setLevel(settings.LOG_LEVEL)
configure_di(db_settings)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    orm = inject.instance(PostgresOrm)
    if db_settings.AUTO_CREATE_SCHEMA:
        logger.info("Creating database schema")
        await orm.create_schema()
    yield
    await orm.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Todo list API",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

from src.todo.presentation.routes import router as api_router  # noqa: E402

app.include_router(api_router, prefix="")
