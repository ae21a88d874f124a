from __future__ import annotations

from app.domain.repositories.task_repository import TaskRepository
from app.domain.value_objects import TaskId
from app.presentation.usecases.errors import TaskNotFoundError


async def delete_task_usecase(repo: TaskRepository, task_id: TaskId) -> None:
    if not await repo.delete(task_id):
        raise TaskNotFoundError(task_id)
