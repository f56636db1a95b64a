"""Settings loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

REPO_BACKENDS = ("sqlite", "memory")


@dataclass(frozen=True)
class Settings:
    repo_backend: str = "sqlite"
    db_path: str = "./data/tasks.db"
    log_level: str = "INFO"
    # None disables the JSONL file handler
    log_dir: Optional[str] = "./logs"
    host: str = "127.0.0.1"
    port: int = 8000


def _env(name: str, default: str) -> str:
    v = os.getenv(name)
    return default if v is None else v.strip()


def get_settings() -> Settings:
    backend = _env("TASKS_REPO", "sqlite").lower()
    if backend not in REPO_BACKENDS:
        raise ValueError(f"TASKS_REPO must be one of {REPO_BACKENDS}, got {backend!r}")

    log_dir = _env("LOG_DIR", "./logs")
    return Settings(
        repo_backend=backend,
        db_path=_env("DB_PATH", "./data/tasks.db"),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
        log_dir=log_dir or None,
        host=_env("HOST", "127.0.0.1"),
        port=int(_env("PORT", "8000")),
    )
