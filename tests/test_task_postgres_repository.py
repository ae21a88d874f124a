from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from app.domain.task import NewTask, TaskChanges
from app.domain.value_objects import TaskId
from app.infrastructure.db.postgres import DatabaseError
from app.infrastructure.repositories.task_postgres_repository import (
    TaskPostgresRepository,
)

from .fakes import FakeDatabase


def _row(title: str = "t", content: str = "c") -> dict:
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return {
        "id": uuid4(),
        "title": title,
        "content": content,
        "created_at": now,
        "updated_at": now,
    }


async def test_create_inserts_and_maps_returned_row():
    row = _row("t", "c")
    db = FakeDatabase(row=row)

    task = await TaskPostgresRepository(db).create(NewTask(title="t", content="c"))

    method, sql, args = db.calls[0]
    assert method == "fetchrow"
    assert sql.startswith("INSERT INTO tasks (title, content) VALUES ($1, $2) RETURNING")
    assert args == ("t", "c")
    assert task.id == row["id"]
    assert task.created_at == row["created_at"]


async def test_find_page_orders_by_id_with_limit_and_offset():
    db = FakeDatabase(rows=[_row("a"), _row("b")])

    tasks = await TaskPostgresRepository(db).find_page(limit=2, offset=4)

    method, sql, args = db.calls[0]
    assert method == "fetch"
    assert "ORDER BY id LIMIT $1 OFFSET $2" in sql
    assert args == (2, 4)
    assert [t.title for t in tasks] == ["a", "b"]


async def test_find_by_id_returns_none_for_missing_row():
    db = FakeDatabase(row=None)
    assert await TaskPostgresRepository(db).find_by_id(TaskId(uuid4())) is None


async def test_update_is_a_single_coalesce_statement():
    row = _row("A", "Z")
    db = FakeDatabase(row=row)
    task_id = TaskId(row["id"])

    task = await TaskPostgresRepository(db).update(task_id, TaskChanges(content="Z"))

    assert len(db.calls) == 1
    _, sql, args = db.calls[0]
    assert "title = COALESCE($1, title)" in sql
    assert "content = COALESCE($2, content)" in sql
    assert "updated_at = NOW()" in sql
    assert args == (None, "Z", task_id)
    assert task.content == "Z"


async def test_update_missing_row_returns_none():
    db = FakeDatabase(row=None)
    result = await TaskPostgresRepository(db).update(TaskId(uuid4()), TaskChanges(title="x"))
    assert result is None


@pytest.mark.parametrize("status, expected", [("DELETE 1", True), ("DELETE 0", False)])
async def test_delete_checks_affected_rows(status, expected):
    db = FakeDatabase(status=status)
    assert await TaskPostgresRepository(db).delete(TaskId(uuid4())) is expected


async def test_database_errors_propagate():
    db = FakeDatabase(error=DatabaseError("fetch"))
    with pytest.raises(DatabaseError):
        await TaskPostgresRepository(db).find_page(limit=10, offset=0)
