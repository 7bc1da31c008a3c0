"""
Shared fixtures: in-memory repositories, seeded reference entities,
use cases wired to the fakes, and an HTTP client using the same fakes.
"""

import os

# Must be set before todoapp.core.config is imported.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from types import SimpleNamespace  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from todoapp.application.tasks.cancel_task import CancelTaskUseCase  # noqa: E402
from todoapp.application.tasks.create_task import CreateTaskUseCase  # noqa: E402
from todoapp.application.tasks.get_task import GetTaskUseCase  # noqa: E402
from todoapp.application.tasks.list_active_tasks import ListActiveTasksUseCase  # noqa: E402
from todoapp.application.tasks.toggle_task_status import ToggleTaskStatusUseCase  # noqa: E402
from todoapp.domain.tasks.entities import Category, Tag, User  # noqa: E402

from .fakes import (  # noqa: E402
    FakeClock,
    InMemoryCategoryRepository,
    InMemoryTagRepository,
    InMemoryTaskRepository,
    InMemoryUserRepository,
)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def repos() -> SimpleNamespace:
    """One fresh in-memory repository per port."""
    return SimpleNamespace(
        users=InMemoryUserRepository(),
        categories=InMemoryCategoryRepository(),
        tags=InMemoryTagRepository(),
        tasks=InMemoryTaskRepository(),
    )


@pytest.fixture
def seeded(repos: SimpleNamespace) -> SimpleNamespace:
    """A user with one category and two tags, the usual preconditions for a task."""
    user = repos.users.save(User(id=None, name="Test User", email="testuser@example.com"))
    category = repos.categories.save(Category(id=None, name="Groceries", user_id=user.id))
    urgent = repos.tags.save(Tag(id=None, name="urgent", user_id=user.id))
    home = repos.tags.save(Tag(id=None, name="home", user_id=user.id))
    return SimpleNamespace(user=user, category=category, urgent=urgent, home=home)


@pytest.fixture
def use_cases(repos: SimpleNamespace, clock: FakeClock) -> SimpleNamespace:
    return SimpleNamespace(
        create=CreateTaskUseCase(
            task_repo=repos.tasks,
            user_repo=repos.users,
            category_repo=repos.categories,
            tag_repo=repos.tags,
            clock=clock,
        ),
        get=GetTaskUseCase(task_repo=repos.tasks),
        toggle=ToggleTaskStatusUseCase(task_repo=repos.tasks),
        cancel=CancelTaskUseCase(task_repo=repos.tasks, clock=clock),
        list_active=ListActiveTasksUseCase(task_repo=repos.tasks, user_repo=repos.users),
    )


@pytest.fixture
def client(repos: SimpleNamespace):
    """TestClient whose repositories are the in-memory fakes."""
    from todoapp.interfaces.tasks import dependencies
    from todoapp.main import app

    app.dependency_overrides[dependencies.get_user_repository] = lambda: repos.users
    app.dependency_overrides[dependencies.get_category_repository] = lambda: repos.categories
    app.dependency_overrides[dependencies.get_tag_repository] = lambda: repos.tags
    app.dependency_overrides[dependencies.get_task_repository] = lambda: repos.tasks
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()
