from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Literal, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, Field

from app.config import API_PREFIX
from app.domain.repositories.task_repository import TaskRepository
from app.domain.task import Task
from app.domain.value_objects import TaskId
from app.infrastructure.db.postgres import DatabaseError
from app.presentation.http.dependencies import get_task_repository
from app.presentation.http.errors import error_response
from app.presentation.usecases.errors import TaskNotFoundError
from app.presentation.usecases.task_create import create_task_usecase
from app.presentation.usecases.task_delete import delete_task_usecase
from app.presentation.usecases.task_get import get_task_usecase
from app.presentation.usecases.task_list import list_tasks_usecase
from app.presentation.usecases.task_update import update_task_usecase

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix=API_PREFIX,
    tags=["tasks"],
)

NOT_FOUND_MESSAGE = "Task not found"


# ---------- Schemas ----------


class CreateTaskRequest(BaseModel):
    title: str = Field(
        ...,
        description="Task title",
        examples=["Buy milk"],
    )
    content: str = Field(
        ...,
        description="Task body, may be empty",
        examples=["2 liters, skimmed"],
    )


class UpdateTaskRequest(BaseModel):
    title: Optional[str] = Field(
        None,
        description="New title; omitted keeps the current one",
    )
    content: Optional[str] = Field(
        None,
        description="New content; omitted keeps the current one",
    )


class TaskResponse(BaseModel):
    id: UUID
    title: str
    content: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TaskCreatedEnvelope(BaseModel):
    status: Literal["success"] = "success"
    data: TaskResponse


class TaskEnvelope(BaseModel):
    status: Literal["success"] = "success"
    task: TaskResponse


class TaskListEnvelope(BaseModel):
    status: Literal["success"] = "success"
    result: int = Field(..., description="Number of tasks in this page")
    tasks: List[TaskResponse]


class ErrorEnvelope(BaseModel):
    status: Literal["error"] = "error"
    message: str


_NOT_FOUND = {404: {"model": ErrorEnvelope}}
_STORE_FAILURE = {500: {"model": ErrorEnvelope}}


def _to_response(task: Task) -> TaskResponse:
    return TaskResponse(
        id=task.id,
        title=task.title,
        content=task.content,
        created_at=task.created_at,
        updated_at=task.updated_at,
    )


def _store_failure(message: str, operation: str, task_id: Optional[UUID] = None):
    extra = {"operation": operation, "task_id": task_id}
    if task_id is None:
        logger.exception(message, extra=extra)
    else:
        logger.exception("%s: %s", message, task_id, extra=extra)
    return error_response(500, message)


# ---------- Endpoints ----------


@router.post(
    "/tasks",
    response_model=TaskCreatedEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses=_STORE_FAILURE,
    summary="Create a task",
)
async def create_task(
    payload: CreateTaskRequest,
    repo: TaskRepository = Depends(get_task_repository),
):
    try:
        task = await create_task_usecase(
            repo,
            title=payload.title,
            content=payload.content,
        )
    except DatabaseError:
        return _store_failure("Failed to create task", "create")

    return TaskCreatedEnvelope(data=_to_response(task))


@router.get(
    "/tasks",
    response_model=TaskListEnvelope,
    responses=_STORE_FAILURE,
    summary="List tasks",
    description=(
        "Returns one page of tasks ordered by id. "
        "`limit` above the configured maximum is clamped."
    ),
)
async def list_tasks(
    page: Optional[int] = Query(None, ge=1, description="Page number, from 1"),
    limit: Optional[int] = Query(None, ge=1, description="Page size"),
    repo: TaskRepository = Depends(get_task_repository),
):
    try:
        tasks = await list_tasks_usecase(repo, page=page, limit=limit)
    except DatabaseError:
        return _store_failure("Failed to fetch tasks", "list")

    return TaskListEnvelope(
        result=len(tasks),
        tasks=[_to_response(task) for task in tasks],
    )


@router.get(
    "/tasks/{task_id}",
    response_model=TaskEnvelope,
    responses={**_NOT_FOUND, **_STORE_FAILURE},
    summary="Get a task",
)
async def get_task(
    task_id: UUID,
    repo: TaskRepository = Depends(get_task_repository),
):
    try:
        task = await get_task_usecase(repo, TaskId(task_id))
    except TaskNotFoundError:
        return error_response(404, NOT_FOUND_MESSAGE)
    except DatabaseError:
        return _store_failure("Failed to fetch task", "get", task_id)

    return TaskEnvelope(task=_to_response(task))


@router.patch(
    "/tasks/{task_id}",
    response_model=TaskEnvelope,
    responses={**_NOT_FOUND, **_STORE_FAILURE},
    summary="Update a task",
    description="Only the fields present in the body are changed.",
)
async def update_task(
    task_id: UUID,
    payload: UpdateTaskRequest,
    repo: TaskRepository = Depends(get_task_repository),
):
    try:
        task = await update_task_usecase(
            repo,
            TaskId(task_id),
            title=payload.title,
            content=payload.content,
        )
    except TaskNotFoundError:
        return error_response(404, NOT_FOUND_MESSAGE)
    except DatabaseError:
        return _store_failure("Failed to update task", "update", task_id)

    return TaskEnvelope(task=_to_response(task))


@router.delete(
    "/tasks/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**_NOT_FOUND, **_STORE_FAILURE},
    summary="Delete a task",
)
async def delete_task(
    task_id: UUID,
    repo: TaskRepository = Depends(get_task_repository),
):
    try:
        await delete_task_usecase(repo, TaskId(task_id))
    except TaskNotFoundError:
        return error_response(404, NOT_FOUND_MESSAGE)
    except DatabaseError:
        return _store_failure("Failed to delete task", "delete", task_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
