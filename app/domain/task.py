from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .value_objects import TaskId


@dataclass(frozen=True)
class Task:
    """
    The task entity as stored in the `tasks` table.

    id: generated by the store on insert, never changes
    title: short non-empty text
    content: free text, may be empty
    created_at: set by the store on insert
    updated_at: set by the store on insert and on every update
    """
    id: TaskId
    title: str
    content: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class NewTask:
    title: str
    content: str


@dataclass(frozen=True)
class TaskChanges:
    """
    Partial update: a field left as None keeps its stored value.
    """
    title: Optional[str] = None
    content: Optional[str] = None


@dataclass(frozen=True)
class PageRequest:
    page: int = 1
    limit: int = 10

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit
