from __future__ import annotations

from app.domain.repositories.task_repository import TaskRepository
from app.domain.task import NewTask, Task


async def create_task_usecase(
    repo: TaskRepository,
    title: str,
    content: str,
) -> Task:
    """
    Stores a new task and returns it with the id and timestamps the store
    assigned. Empty strings are accepted as is.
    """
    return await repo.create(NewTask(title=title, content=content))
