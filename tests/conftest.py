# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from task_manager.app.main import create_app
from task_manager.config import Settings
from task_manager.infra.db.sqlite import make_engine, make_sessionmaker, make_sqlite_url
from task_manager.infra.db.task_repo_memory import InMemoryTaskRepo
from task_manager.infra.db.task_repo_sqlite import SQLiteTaskRepo, create_schema
from task_manager.observability.logging import JsonFormatter


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Drop the JSON handlers create_app/setup_logging install on the root logger."""
    root = logging.getLogger()
    saved_level = root.level
    yield
    for h in root.handlers[:]:
        if isinstance(h.formatter, JsonFormatter):
            root.removeHandler(h)
            h.close()
    root.setLevel(saved_level)


@pytest.fixture(params=["memory", "sqlite"])
def settings(request, tmp_path: Path) -> Settings:
    """Isolated settings per backend; no log file, DB under tmp_path."""
    return Settings(
        repo_backend=request.param,
        db_path=str(tmp_path / "tasks.db"),
        log_level="WARNING",
        log_dir=None,
    )


@pytest.fixture()
def app(settings: Settings):
    return create_app(settings)


@pytest.fixture()
def client(app):
    # context manager runs the lifespan (schema creation)
    with TestClient(app) as c:
        yield c


@pytest_asyncio.fixture(params=["memory", "sqlite"])
async def repo(request, tmp_path: Path):
    if request.param == "memory":
        yield InMemoryTaskRepo()
        return

    engine = make_engine(make_sqlite_url(str(tmp_path / "repo.db")))
    await create_schema(engine)
    yield SQLiteTaskRepo(make_sessionmaker(engine))
    await engine.dispose()
