from __future__ import annotations

from app.domain.repositories.task_repository import TaskRepository
from app.domain.task import Task
from app.domain.value_objects import TaskId
from app.presentation.usecases.errors import TaskNotFoundError


async def get_task_usecase(repo: TaskRepository, task_id: TaskId) -> Task:
    task = await repo.find_by_id(task_id)
    if task is None:
        raise TaskNotFoundError(task_id)
    return task
