from __future__ import annotations

from fastapi import Depends, Request

from app.domain.repositories.task_repository import TaskRepository
from app.infrastructure.db.postgres import PostgresDatabase
from app.infrastructure.repositories.task_postgres_repository import (
    TaskPostgresRepository,
)


def get_database(request: Request) -> PostgresDatabase:
    """
    The pool created by the application lifespan.
    """
    return request.app.state.db


def get_task_repository(
    db: PostgresDatabase = Depends(get_database),
) -> TaskRepository:
    return TaskPostgresRepository(db)
