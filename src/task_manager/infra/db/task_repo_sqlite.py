from __future__ import annotations
from typing import Optional, List

from sqlalchemy import Integer, String, Text, delete, select
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from task_manager.domain.task_models import TASK_ID_MAX, TASK_ID_MIN, Task


class Base(DeclarativeBase):
    pass


class TaskRow(Base):
    __tablename__ = "tasks"
    # AUTOINCREMENT keeps ids of deleted rows from being reused
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    @classmethod
    def from_domain(cls, task: Task) -> "TaskRow":
        return cls(id=task.id, title=task.title, description=task.description)

    def to_domain(self) -> Task:
        return Task(id=self.id, title=self.title, description=self.description)


class SQLiteTaskRepo:
    def __init__(self, sessionmaker):
        self.sessionmaker = sessionmaker

    async def find_all(self) -> List[Task]:
        async with self.sessionmaker() as session:
            res = await session.execute(select(TaskRow).order_by(TaskRow.id))
            rows = res.scalars().all()
            return [r.to_domain() for r in rows]

    async def find_by_id(self, task_id: int) -> Optional[Task]:
        if not _storable(task_id):
            return None
        async with self.sessionmaker() as session:
            row = await session.get(TaskRow, task_id)
            return row.to_domain() if row else None

    async def save(self, task: Task) -> Task:
        row = TaskRow.from_domain(task)
        async with self.sessionmaker() as session:
            if task.id is None:
                session.add(row)
            else:
                # full replacement; inserts under the given id if unknown
                row = await session.merge(row)
            await session.commit()
            return row.to_domain()

    async def delete_by_id(self, task_id: int) -> None:
        if not _storable(task_id):
            return
        async with self.sessionmaker() as session:
            await session.execute(delete(TaskRow).where(TaskRow.id == task_id))
            await session.commit()


def _storable(task_id: int) -> bool:
    # out-of-range ints overflow the driver; no such row can exist
    return TASK_ID_MIN <= task_id <= TASK_ID_MAX


async def create_schema(engine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
