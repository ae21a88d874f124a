from __future__ import annotations

from typing import List, Optional

from asyncpg import Record

from app.domain.task import NewTask, Task, TaskChanges
from app.domain.value_objects import TaskId
from app.domain.repositories.task_repository import TaskRepository
from app.infrastructure.db.postgres import PostgresDatabase, affected_rows


_COLUMNS = "id, title, content, created_at, updated_at"


class TaskPostgresRepository(TaskRepository):
    """
    PostgreSQL-based implementation of TaskRepository.
    """

    def __init__(self, db: PostgresDatabase) -> None:
        self._db = db

    async def create(self, new_task: NewTask) -> Task:
        """
        Inserts a new task; id and timestamps come from column defaults.
        """
        sql = f"""
        INSERT INTO tasks (title, content)
        VALUES ($1, $2)
        RETURNING {_COLUMNS};
        """
        row = await self._db.fetchrow(sql, new_task.title, new_task.content)
        return self._map_row_to_task(row)

    async def find_page(self, limit: int, offset: int) -> List[Task]:
        sql = f"""
        SELECT {_COLUMNS}
        FROM tasks
        ORDER BY id
        LIMIT $1 OFFSET $2;
        """
        rows = await self._db.fetch(sql, limit, offset)
        return [self._map_row_to_task(row) for row in rows]

    async def find_by_id(self, task_id: TaskId) -> Optional[Task]:
        sql = f"""
        SELECT {_COLUMNS}
        FROM tasks
        WHERE id = $1;
        """
        row = await self._db.fetchrow(sql, task_id)
        return None if row is None else self._map_row_to_task(row)

    async def update(self, task_id: TaskId, changes: TaskChanges) -> Optional[Task]:
        """
        Single-statement partial update: absent fields keep the stored value.
        """
        sql = f"""
        UPDATE tasks
        SET title      = COALESCE($1, title),
            content    = COALESCE($2, content),
            updated_at = NOW()
        WHERE id = $3
        RETURNING {_COLUMNS};
        """
        row = await self._db.fetchrow(sql, changes.title, changes.content, task_id)
        return None if row is None else self._map_row_to_task(row)

    async def delete(self, task_id: TaskId) -> bool:
        status = await self._db.execute("DELETE FROM tasks WHERE id = $1;", task_id)
        return affected_rows(status) > 0

    @staticmethod
    def _map_row_to_task(row: Record) -> Task:
        """
        Maps DB row to Task domain model.
        """
        return Task(
            id=TaskId(row["id"]),
            title=row["title"],
            content=row["content"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
