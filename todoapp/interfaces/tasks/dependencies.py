"""
Dependency injection for the tasks bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the tasks context; tests override
the repository providers with in-memory fakes.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.engine import Engine

from todoapp.application.tasks.cancel_task import CancelTaskUseCase
from todoapp.application.tasks.create_category import CreateCategoryUseCase
from todoapp.application.tasks.create_tag import CreateTagUseCase
from todoapp.application.tasks.create_task import CreateTaskUseCase
from todoapp.application.tasks.create_user import CreateUserUseCase
from todoapp.application.tasks.get_task import GetTaskUseCase
from todoapp.application.tasks.get_user import GetUserUseCase
from todoapp.application.tasks.list_active_tasks import ListActiveTasksUseCase
from todoapp.application.tasks.toggle_task_status import ToggleTaskStatusUseCase
from todoapp.core.config import settings
from todoapp.domain.tasks.ports import (
    CategoryRepository,
    TagRepository,
    TaskRepository,
    UserRepository,
)
from todoapp.infrastructure.tasks.reference_repositories import (
    CategoryRepositoryAdapter,
    TagRepositoryAdapter,
    UserRepositoryAdapter,
)
from todoapp.infrastructure.tasks.schema import build_engine
from todoapp.infrastructure.tasks.task_repository import TaskRepositoryAdapter


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Build the process-wide SQLAlchemy engine from application settings."""
    return build_engine(settings.database_url, echo=settings.database_echo)


def get_user_repository() -> UserRepository:
    return UserRepositoryAdapter(engine=get_engine())


def get_category_repository() -> CategoryRepository:
    return CategoryRepositoryAdapter(engine=get_engine())


def get_tag_repository() -> TagRepository:
    return TagRepositoryAdapter(engine=get_engine())


def get_task_repository() -> TaskRepository:
    return TaskRepositoryAdapter(engine=get_engine())


def get_create_task_use_case(
    task_repo: TaskRepository = Depends(get_task_repository),
    user_repo: UserRepository = Depends(get_user_repository),
    category_repo: CategoryRepository = Depends(get_category_repository),
    tag_repo: TagRepository = Depends(get_tag_repository),
) -> CreateTaskUseCase:
    """Build CreateTaskUseCase with its infrastructure dependencies."""
    return CreateTaskUseCase(
        task_repo=task_repo,
        user_repo=user_repo,
        category_repo=category_repo,
        tag_repo=tag_repo,
    )


def get_task_use_case(
    task_repo: TaskRepository = Depends(get_task_repository),
) -> GetTaskUseCase:
    """Build GetTaskUseCase with its infrastructure dependencies."""
    return GetTaskUseCase(task_repo=task_repo)


def get_toggle_task_status_use_case(
    task_repo: TaskRepository = Depends(get_task_repository),
) -> ToggleTaskStatusUseCase:
    """Build ToggleTaskStatusUseCase with its infrastructure dependencies."""
    return ToggleTaskStatusUseCase(task_repo=task_repo)


def get_cancel_task_use_case(
    task_repo: TaskRepository = Depends(get_task_repository),
) -> CancelTaskUseCase:
    """Build CancelTaskUseCase with its infrastructure dependencies."""
    return CancelTaskUseCase(task_repo=task_repo)


def get_list_active_tasks_use_case(
    task_repo: TaskRepository = Depends(get_task_repository),
    user_repo: UserRepository = Depends(get_user_repository),
) -> ListActiveTasksUseCase:
    """Build ListActiveTasksUseCase with its infrastructure dependencies."""
    return ListActiveTasksUseCase(task_repo=task_repo, user_repo=user_repo)


def get_create_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> CreateUserUseCase:
    return CreateUserUseCase(user_repo=user_repo)


def get_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> GetUserUseCase:
    return GetUserUseCase(user_repo=user_repo)


def get_create_category_use_case(
    category_repo: CategoryRepository = Depends(get_category_repository),
    user_repo: UserRepository = Depends(get_user_repository),
) -> CreateCategoryUseCase:
    return CreateCategoryUseCase(category_repo=category_repo, user_repo=user_repo)


def get_create_tag_use_case(
    tag_repo: TagRepository = Depends(get_tag_repository),
    user_repo: UserRepository = Depends(get_user_repository),
) -> CreateTagUseCase:
    return CreateTagUseCase(tag_repo=tag_repo, user_repo=user_repo)
