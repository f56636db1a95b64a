from __future__ import annotations
from typing import Dict, List, Optional

from task_manager.domain.task_models import Task

class InMemoryTaskRepo:
    """
    Dict-backed store, mostly for tests and TASKS_REPO=memory.
    No awaits between read and write, so each call is atomic on the loop.
    """
    def __init__(self):
        self._tasks: Dict[int, Task] = {}
        self._last_id = 0

    async def find_all(self) -> List[Task]:
        return [self._tasks[k] for k in sorted(self._tasks)]

    async def find_by_id(self, task_id: int) -> Optional[Task]:
        return self._tasks.get(task_id)

    async def save(self, task: Task) -> Task:
        if task.id is None:
            self._last_id += 1
            stored = task.model_copy(update={"id": self._last_id})
        else:
            # explicit ids must never be handed out again
            self._last_id = max(self._last_id, task.id)
            stored = task.model_copy()
        self._tasks[stored.id] = stored
        return stored

    async def delete_by_id(self, task_id: int) -> None:
        self._tasks.pop(task_id, None)
