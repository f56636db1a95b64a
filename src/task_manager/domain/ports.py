from __future__ import annotations
from typing import List, Optional, Protocol

from task_manager.domain.task_models import Task


class TaskRepository(Protocol):
    """
    Storage capability used by TaskService.
    Absence is reported as None, never as an error.
    """

    async def find_all(self) -> List[Task]: ...

    async def find_by_id(self, task_id: int) -> Optional[Task]: ...

    async def save(self, task: Task) -> Task: ...

    async def delete_by_id(self, task_id: int) -> None: ...
