from __future__ import annotations

from typing import List, Optional

from app.config import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_OFFSET, MAX_PAGE_LIMIT
from app.domain.repositories.task_repository import TaskRepository
from app.domain.task import PageRequest, Task


def build_page_request(
    page: Optional[int],
    limit: Optional[int],
    max_limit: int = MAX_PAGE_LIMIT,
) -> PageRequest:
    """
    Fill in defaults and clamp the page size to `max_limit`.
    """
    page = DEFAULT_PAGE if page is None else page
    limit = DEFAULT_LIMIT if limit is None else limit
    return PageRequest(page=page, limit=min(limit, max_limit))


async def list_tasks_usecase(
    repo: TaskRepository,
    page: Optional[int] = None,
    limit: Optional[int] = None,
) -> List[Task]:
    """
    One page of tasks in ascending id order. An empty page is not an error.
    """
    request = build_page_request(page, limit)
    if request.offset > MAX_OFFSET:
        # No table holds that many rows.
        return []
    return await repo.find_page(limit=request.limit, offset=request.offset)
