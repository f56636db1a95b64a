class TaskNotFoundError(Exception):
    """Raised when a lookup by identifier has no stored task."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id
