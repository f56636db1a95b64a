# tests/test_task_service.py

from __future__ import annotations

import logging

import pytest

from task_manager.domain.errors import TaskNotFoundError
from task_manager.domain.task_models import Task
from task_manager.services.task_service import TaskService


@pytest.fixture()
def svc(repo) -> TaskService:
    return TaskService(repo)


@pytest.mark.asyncio
async def test_add_then_get_returns_equal_record(svc: TaskService) -> None:
    added = await svc.add_task(Task(title="buy milk", description="2 litres"))

    assert added.id is not None
    assert await svc.get_task_by_id(added.id) == added


@pytest.mark.asyncio
async def test_get_missing_raises_not_found_with_id(svc: TaskService) -> None:
    with pytest.raises(TaskNotFoundError) as ei:
        await svc.get_task_by_id(99)

    assert ei.value.task_id == 99
    assert "99" in str(ei.value)


@pytest.mark.asyncio
async def test_delete_then_get_raises_not_found(svc: TaskService) -> None:
    added = await svc.add_task(Task(title="temp"))

    await svc.delete_task(added.id)
    with pytest.raises(TaskNotFoundError):
        await svc.get_task_by_id(added.id)

    # never existed
    await svc.delete_task(500)
    with pytest.raises(TaskNotFoundError) as ei:
        await svc.get_task_by_id(500)
    assert ei.value.task_id == 500


@pytest.mark.asyncio
async def test_delete_twice_is_silent(svc: TaskService) -> None:
    added = await svc.add_task(Task(title="once"))

    await svc.delete_task(added.id)
    await svc.delete_task(added.id)


@pytest.mark.asyncio
async def test_get_all_matches_stored_set(svc: TaskService) -> None:
    a = await svc.add_task(Task(title="a"))
    b = await svc.add_task(Task(title="b"))
    c = await svc.add_task(Task(title="c"))
    await svc.delete_task(b.id)

    ids = {t.id for t in await svc.get_all_tasks()}
    assert ids == {a.id, c.id}


class StubRepo:
    def __init__(self) -> None:
        self.calls: list[tuple] = []

    async def find_all(self):
        self.calls.append(("find_all",))
        return []

    async def find_by_id(self, task_id):
        self.calls.append(("find_by_id", task_id))
        return None

    async def save(self, task):
        self.calls.append(("save", task))
        return task.model_copy(update={"id": 1})

    async def delete_by_id(self, task_id):
        self.calls.append(("delete_by_id", task_id))


@pytest.mark.asyncio
async def test_service_forwards_to_repository() -> None:
    stub = StubRepo()
    svc = TaskService(stub)
    task = Task(title="t")

    await svc.get_all_tasks()
    await svc.add_task(task)
    await svc.delete_task(3)

    assert stub.calls == [("find_all",), ("save", task), ("delete_by_id", 3)]


@pytest.mark.asyncio
async def test_writes_emit_one_info_record_each(svc: TaskService, caplog) -> None:
    caplog.set_level(logging.INFO, logger="taskmanager.tasks")

    added = await svc.add_task(Task(title="logged"))
    await svc.get_task_by_id(added.id)
    await svc.get_all_tasks()
    await svc.delete_task(added.id)

    records = [r for r in caplog.records if r.name == "taskmanager.tasks"]
    assert [(r.levelno, r.getMessage()) for r in records] == [
        (logging.INFO, "task.save"),
        (logging.INFO, "task.delete"),
    ]
    assert records[0].task_id == added.id
    assert records[1].task_id == added.id
