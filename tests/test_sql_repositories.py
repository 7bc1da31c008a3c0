"""
Tests for the SQLAlchemy repository adapters.

Each test gets its own SQLite database file under ``tmp_path``.
"""

from datetime import datetime, timezone

import pytest

from todoapp.application.tasks.create_task import CreateTaskUseCase
from todoapp.application.tasks.dtos import CreateTaskCommand
from todoapp.domain.tasks.entities import Category, Location, Tag, Task, User
from todoapp.domain.tasks.errors import ReferenceNotFoundError
from todoapp.infrastructure.tasks.reference_repositories import (
    CategoryRepositoryAdapter,
    TagRepositoryAdapter,
    UserRepositoryAdapter,
)
from todoapp.infrastructure.tasks.schema import build_engine, create_schema
from todoapp.infrastructure.tasks.task_repository import TaskRepositoryAdapter

CREATED = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'todoapp.db'}")
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def adapters(engine):
    users = UserRepositoryAdapter(engine)
    categories = CategoryRepositoryAdapter(engine)
    tags = TagRepositoryAdapter(engine)
    tasks = TaskRepositoryAdapter(engine)
    return users, categories, tags, tasks


@pytest.fixture
def owner(adapters):
    users, categories, tags, _ = adapters
    user = users.save(User(id=None, name="Test User", email="test@example.com"))
    category = categories.save(Category(id=None, name="Home", user_id=user.id))
    urgent = tags.save(Tag(id=None, name="urgent", user_id=user.id))
    home = tags.save(Tag(id=None, name="home", user_id=user.id))
    return user, category, urgent, home


class TestReferenceRepositories:
    """Tests for the user, category and tag adapters."""

    def test_save_assigns_ids_and_round_trips(self, adapters, owner) -> None:
        users, categories, tags, _ = adapters
        user, category, urgent, _ = owner

        assert user.id > 0
        assert users.get_by_id(user.id) == user
        assert categories.get_by_id(category.id) == category
        assert tags.get_by_id(urgent.id) == urgent

    def test_missing_ids_return_none(self, adapters) -> None:
        users, categories, tags, tasks = adapters
        assert users.get_by_id(999) is None
        assert categories.get_by_id(999) is None
        assert tags.get_by_id(999) is None
        assert tasks.get_by_id(999) is None

    def test_delete_all(self, adapters, owner) -> None:
        users, categories, tags, tasks = adapters
        tasks.delete_all()
        tags.delete_all()
        categories.delete_all()
        users.delete_all()
        assert users.get_by_id(owner[0].id) is None
        assert tags.get_by_id(owner[2].id) is None


class TestTaskRepositoryAdapter:
    """Tests for the task adapter."""

    def test_insert_round_trips_tags_in_order_and_location(self, adapters, owner) -> None:
        _, _, _, tasks = adapters
        user, category, urgent, home = owner
        task = Task(
            title="Buy milk",
            description="Two litres",
            user_id=user.id,
            category_id=category.id,
            created_at=CREATED,
            tags=[home, urgent],
            location=Location(latitude=38.72, longitude=-9.14, name="Market"),
        )

        saved = tasks.save(task)
        loaded = tasks.get_by_id(saved.id)

        assert loaded.id == saved.id
        assert loaded.title == "Buy milk"
        assert loaded.description == "Two litres"
        assert loaded.tag_names == ["home", "urgent"]
        assert loaded.location == Location(latitude=38.72, longitude=-9.14, name="Market")
        assert loaded.done is False
        assert loaded.canceled_at is None
        assert loaded.created_at == CREATED

    def test_task_without_location_loads_none(self, adapters, owner) -> None:
        _, _, _, tasks = adapters
        user, category, _, _ = owner
        saved = tasks.save(
            Task(title="Call", user_id=user.id, category_id=category.id, created_at=CREATED)
        )
        assert tasks.get_by_id(saved.id).location is None

    def test_update_persists_done_and_cancellation(self, adapters, owner) -> None:
        _, _, _, tasks = adapters
        user, category, urgent, _ = owner
        saved = tasks.save(
            Task(
                title="Buy milk",
                user_id=user.id,
                category_id=category.id,
                created_at=CREATED,
                tags=[urgent],
            )
        )
        cancelled_at = datetime(2024, 5, 2, 18, 30, tzinfo=timezone.utc)

        saved.toggle_done()
        saved.cancel(cancelled_at)
        tasks.save(saved)
        loaded = tasks.get_by_id(saved.id)

        assert loaded.done is True
        assert loaded.canceled_at == cancelled_at
        assert loaded.tag_names == ["urgent"]

    def test_list_active_skips_cancelled_and_filters_user(self, adapters, owner) -> None:
        users, categories, _, tasks = adapters
        user, category, _, _ = owner
        other = users.save(User(id=None, name="Other", email="other@example.com"))
        other_category = categories.save(Category(id=None, name="Work", user_id=other.id))

        first = tasks.save(Task(title="A", user_id=user.id, category_id=category.id, created_at=CREATED))
        second = tasks.save(Task(title="B", user_id=user.id, category_id=category.id, created_at=CREATED))
        theirs = tasks.save(
            Task(title="C", user_id=other.id, category_id=other_category.id, created_at=CREATED)
        )
        second.cancel(CREATED)
        tasks.save(second)

        assert [t.id for t in tasks.list_active()] == [first.id, theirs.id]
        assert [t.id for t in tasks.list_active(user_id=user.id)] == [first.id]


class TestCreateTaskAgainstDatabase:
    """The create use case wired to real adapters."""

    def test_missing_tag_leaves_no_row(self, adapters, owner) -> None:
        users, categories, tags, tasks = adapters
        user, category, urgent, _ = owner
        use_case = CreateTaskUseCase(tasks, users, categories, tags)

        with pytest.raises(ReferenceNotFoundError):
            use_case.execute(
                CreateTaskCommand(
                    title="Buy milk",
                    user_id=user.id,
                    category_id=category.id,
                    tag_ids=[urgent.id, 999],
                )
            )

        assert tasks.list_active() == []

    def test_created_task_is_readable(self, adapters, owner) -> None:
        users, categories, tags, tasks = adapters
        user, category, urgent, home = owner
        use_case = CreateTaskUseCase(tasks, users, categories, tags)

        result = use_case.execute(
            CreateTaskCommand(
                title="Buy milk",
                user_id=user.id,
                category_id=category.id,
                tag_ids=[urgent.id, home.id],
            )
        )

        assert tasks.get_by_id(result.id).tag_names == ["urgent", "home"]
        assert result.tags == ["urgent", "home"]

    def test_repeated_tag_ids_are_linked_once(self, adapters, owner) -> None:
        users, categories, tags, tasks = adapters
        user, category, urgent, home = owner
        use_case = CreateTaskUseCase(tasks, users, categories, tags)

        result = use_case.execute(
            CreateTaskCommand(
                title="Buy milk",
                user_id=user.id,
                category_id=category.id,
                tag_ids=[urgent.id, urgent.id, home.id, urgent.id],
            )
        )

        assert result.tags == ["urgent", "home"]
        assert tasks.get_by_id(result.id).tag_names == ["urgent", "home"]
