from __future__ import annotations

from app.domain.value_objects import TaskId


class TaskNotFoundError(Exception):
    def __init__(self, task_id: TaskId) -> None:
        super().__init__("Task not found")
        self.task_id = task_id
