"""
FastAPI router for the task lifecycle.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status

from todoapp.application.tasks.cancel_task import CancelTaskUseCase
from todoapp.application.tasks.create_task import CreateTaskUseCase
from todoapp.application.tasks.dtos import CreateTaskCommand
from todoapp.application.tasks.get_task import GetTaskUseCase
from todoapp.application.tasks.list_active_tasks import ListActiveTasksUseCase
from todoapp.application.tasks.toggle_task_status import ToggleTaskStatusUseCase
from todoapp.core.config import settings
from todoapp.domain.tasks.errors import TaskNotFoundError
from todoapp.interfaces.tasks.dependencies import (
    get_cancel_task_use_case,
    get_create_task_use_case,
    get_list_active_tasks_use_case,
    get_task_use_case,
    get_toggle_task_status_use_case,
)
from todoapp.interfaces.tasks.schemas import (
    CreateTaskRequest,
    ErrorResponse,
    TaskResponse,
    ValidationErrorResponse,
)
from todoapp.shared.security.rate_limiting import limiter

router = APIRouter(prefix="/tasks", tags=["tasks"])

NOT_FOUND = {404: {"model": ErrorResponse}}


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ValidationErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Create a task",
    description="Create a task for an existing user and category, with optional tags.",
)
@limiter.limit(settings.rate_limit_write)
def create_task(
    request: Request,
    payload: CreateTaskRequest,
    use_case: CreateTaskUseCase = Depends(get_create_task_use_case),
) -> TaskResponse:
    """Create a task and return its projection."""
    command = CreateTaskCommand(
        title=payload.title,
        description=payload.description,
        user_id=payload.user_id,
        category_id=payload.category_id,
        tag_ids=payload.tag_ids,
        location=payload.location.to_data() if payload.location else None,
    )
    return TaskResponse.from_result(use_case.execute(command))


@router.get(
    "",
    response_model=list[TaskResponse],
    responses=NOT_FOUND,
    summary="List active tasks",
    description="List tasks that have not been cancelled, optionally for one user.",
)
def list_active_tasks(
    user_id: Optional[int] = Query(default=None, gt=0),
    use_case: ListActiveTasksUseCase = Depends(get_list_active_tasks_use_case),
) -> list[TaskResponse]:
    return [TaskResponse.from_result(r) for r in use_case.execute(user_id=user_id)]


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    responses=NOT_FOUND,
    summary="Get a task",
)
def get_task(
    task_id: int,
    use_case: GetTaskUseCase = Depends(get_task_use_case),
) -> TaskResponse:
    """Return a task projection, or 404 when the task does not exist."""
    result = use_case.execute(task_id)
    if result is None:
        raise TaskNotFoundError(task_id)
    return TaskResponse.from_result(result)


@router.patch(
    "/{task_id}/toggle",
    response_model=TaskResponse,
    responses=NOT_FOUND,
    summary="Toggle task completion",
)
def toggle_task_status(
    task_id: int,
    use_case: ToggleTaskStatusUseCase = Depends(get_toggle_task_status_use_case),
) -> TaskResponse:
    return TaskResponse.from_result(use_case.execute(task_id))


@router.patch(
    "/{task_id}/cancel",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
    summary="Cancel a task",
    description="Stamp the cancellation time. Repeated calls keep the first timestamp.",
)
def cancel_task(
    task_id: int,
    use_case: CancelTaskUseCase = Depends(get_cancel_task_use_case),
) -> Response:
    use_case.execute(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
