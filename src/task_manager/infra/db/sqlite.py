from __future__ import annotations
from pathlib import Path

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine


def make_sqlite_url(db_path: str) -> str:
    """aiosqlite URL for DB_PATH; the parent directory is created if missing."""
    p = Path(db_path).expanduser().resolve()
    p.parent.mkdir(parents=True, exist_ok=True)
    return f"sqlite+aiosqlite:///{p.as_posix()}"


def make_engine(sqlite_url: str) -> AsyncEngine:
    return create_async_engine(sqlite_url)


def make_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # rows are converted to Task after commit, so keep them loaded
    return async_sessionmaker(engine, expire_on_commit=False)
