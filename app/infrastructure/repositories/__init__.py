from .task_postgres_repository import TaskPostgresRepository

__all__ = [
    "TaskPostgresRepository",
]
