from __future__ import annotations

from typing import Optional

from app.domain.repositories.task_repository import TaskRepository
from app.domain.task import Task, TaskChanges
from app.domain.value_objects import TaskId
from app.presentation.usecases.errors import TaskNotFoundError


async def update_task_usecase(
    repo: TaskRepository,
    task_id: TaskId,
    title: Optional[str] = None,
    content: Optional[str] = None,
) -> Task:
    """
    Changes only the supplied fields. The store applies the change in one
    statement, so there is no read-then-write window for concurrent updates.
    """
    task = await repo.update(task_id, TaskChanges(title=title, content=content))
    if task is None:
        raise TaskNotFoundError(task_id)
    return task
