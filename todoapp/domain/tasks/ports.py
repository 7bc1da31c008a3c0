"""
Port interfaces (ABCs) for the tasks bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from todoapp.domain.tasks.entities import Category, Tag, Task, User


class UserRepository(ABC):
    """Port for persisting and retrieving users."""

    @abstractmethod
    def get_by_id(self, user_id: int) -> Optional[User]:
        """Return a user by its ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def save(self, user: User) -> User:
        """Persist a user and return it with its assigned ID."""
        raise NotImplementedError

    @abstractmethod
    def delete_all(self) -> None:
        """Remove every user."""
        raise NotImplementedError


class CategoryRepository(ABC):
    """Port for persisting and retrieving categories."""

    @abstractmethod
    def get_by_id(self, category_id: int) -> Optional[Category]:
        """Return a category by its ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def save(self, category: Category) -> Category:
        """Persist a category and return it with its assigned ID."""
        raise NotImplementedError

    @abstractmethod
    def delete_all(self) -> None:
        """Remove every category."""
        raise NotImplementedError


class TagRepository(ABC):
    """Port for persisting and retrieving tags."""

    @abstractmethod
    def get_by_id(self, tag_id: int) -> Optional[Tag]:
        """Return a tag by its ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def save(self, tag: Tag) -> Tag:
        """Persist a tag and return it with its assigned ID."""
        raise NotImplementedError

    @abstractmethod
    def delete_all(self) -> None:
        """Remove every tag."""
        raise NotImplementedError


class TaskRepository(ABC):
    """Port for persisting and retrieving tasks together with their tags."""

    @abstractmethod
    def get_by_id(self, task_id: int) -> Optional[Task]:
        """Return a task by its ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def save(self, task: Task) -> Task:
        """Insert a new task or update an existing one.

        A task without an ID is inserted and returned with its assigned ID.
        A task with an ID overwrites the stored row (last write wins).
        """
        raise NotImplementedError

    @abstractmethod
    def list_active(self, user_id: Optional[int] = None) -> list[Task]:
        """Return tasks that are not cancelled, ordered by ID.

        Args:
            user_id: Optional filter by owning user.
        """
        raise NotImplementedError

    @abstractmethod
    def delete_all(self) -> None:
        """Remove every task and its tag links."""
        raise NotImplementedError
