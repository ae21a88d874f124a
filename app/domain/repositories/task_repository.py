from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.task import NewTask, Task, TaskChanges
from app.domain.value_objects import TaskId


class TaskRepository(ABC):
    """
    Abstraction over the task store.
    """

    @abstractmethod
    async def create(self, new_task: NewTask) -> Task:
        """
        Persist a new task and return it as stored (with id and timestamps).
        """
        raise NotImplementedError

    @abstractmethod
    async def find_page(self, limit: int, offset: int) -> List[Task]:
        """
        Return up to `limit` tasks ordered by id, skipping `offset`.
        """
        raise NotImplementedError

    @abstractmethod
    async def find_by_id(self, task_id: TaskId) -> Optional[Task]:
        """
        Return task entity by id or None if not found.
        """
        raise NotImplementedError

    @abstractmethod
    async def update(self, task_id: TaskId, changes: TaskChanges) -> Optional[Task]:
        """
        Apply the supplied fields and return the updated task, or None if
        no task has this id.
        """
        raise NotImplementedError

    @abstractmethod
    async def delete(self, task_id: TaskId) -> bool:
        """
        Remove the task. Returns False when nothing matched.
        """
        raise NotImplementedError
