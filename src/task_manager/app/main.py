import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from task_manager.app.middleware.access_log import AccessLogMiddleware
from task_manager.app.routes import tasks
from task_manager.config import Settings, get_settings
from task_manager.domain.errors import TaskNotFoundError
from task_manager.infra.db.sqlite import make_sqlite_url, make_engine, make_sessionmaker
from task_manager.infra.db.task_repo_memory import InMemoryTaskRepo
from task_manager.infra.db.task_repo_sqlite import SQLiteTaskRepo, create_schema
from task_manager.observability.logging import setup_logging
from task_manager.services.task_service import TaskService

logger = logging.getLogger("taskmanager.system")
tasks_logger = logging.getLogger("taskmanager.tasks")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_dir)
    logger.info(
        "system.start",
        extra={"category": "system", "event": "system.start", "repo_backend": settings.repo_backend},
    )

    engine = None
    if settings.repo_backend == "memory":
        repo = InMemoryTaskRepo()
    elif settings.repo_backend == "sqlite":
        # --- SQLite wiring ---
        engine = make_engine(make_sqlite_url(settings.db_path))
        repo = SQLiteTaskRepo(make_sessionmaker(engine))
    else:
        raise ValueError(f"Unknown task repository backend: {settings.repo_backend!r}")

    svc = TaskService(repo)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if engine is not None:
            await create_schema(engine)
            logger.info(
                "db.ready",
                extra={"category": "system", "event": "db.ready", "db_path": settings.db_path},
            )
        yield
        if engine is not None:
            await engine.dispose()

    app = FastAPI(title="Task Manager", lifespan=lifespan)
    app.state.task_service = svc
    app.add_middleware(AccessLogMiddleware)

    @app.exception_handler(TaskNotFoundError)
    async def task_not_found(request: Request, exc: TaskNotFoundError):
        tasks_logger.warning(
            "task.not_found",
            extra={"category": "tasks", "event": "task.not_found", "task_id": exc.task_id},
        )
        return JSONResponse(status_code=404, content={"detail": str(exc), "task_id": exc.task_id})

    app.include_router(tasks.router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app
