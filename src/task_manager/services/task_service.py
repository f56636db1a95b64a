import logging
from typing import List
from task_manager.domain.errors import TaskNotFoundError
from task_manager.domain.ports import TaskRepository
from task_manager.domain.task_models import Task

logger = logging.getLogger("taskmanager.tasks")

class TaskService:
    def __init__(self, repo: TaskRepository):
        self.repo = repo

    async def get_all_tasks(self) -> List[Task]:
        return await self.repo.find_all()

    async def get_task_by_id(self, task_id: int) -> Task:
        task = await self.repo.find_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    async def add_task(self, task: Task) -> Task:
        saved = await self.repo.save(task)
        logger.info(
            "task.save",
            extra={"category": "tasks", "event": "task.save", "task_id": saved.id, "title": saved.title},
        )
        return saved

    async def delete_task(self, task_id: int) -> None:
        logger.info("task.delete", extra={"category": "tasks", "event": "task.delete", "task_id": task_id})
        await self.repo.delete_by_id(task_id)
