"""
Data Transfer Objects for the tasks application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior beyond mapping helpers.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from todoapp.domain.tasks.entities import Category, Location, Tag, Task, User


@dataclass(frozen=True)
class LocationData:
    """Location fields as supplied by or returned to callers."""

    latitude: Optional[float] = None
    longitude: Optional[float] = None
    name: Optional[str] = None
    description: Optional[str] = None

    def to_entity(self) -> Optional[Location]:
        """Return the domain value object, or None when every field is empty."""
        location = Location(
            latitude=self.latitude,
            longitude=self.longitude,
            name=self.name,
            description=self.description,
        )
        return None if location.is_empty else location

    @classmethod
    def from_entity(cls, location: Optional[Location]) -> Optional["LocationData"]:
        if location is None:
            return None
        return cls(
            latitude=location.latitude,
            longitude=location.longitude,
            name=location.name,
            description=location.description,
        )


@dataclass(frozen=True)
class CreateTaskCommand:
    """Input DTO for creating a task.

    Attributes:
        title: Task title. Must not be blank.
        user_id: ID of the owning user. Must exist.
        category_id: ID of the task category. Must exist.
        description: Optional free-text description.
        tag_ids: Optional tag IDs, kept in the supplied order.
        location: Optional location data.
    """

    title: Optional[str]
    user_id: int
    category_id: int
    description: Optional[str] = None
    tag_ids: Optional[list[int]] = None
    location: Optional[LocationData] = None


@dataclass(frozen=True)
class TaskResult:
    """Output DTO: the externally visible projection of a task.

    Attributes:
        id: Task ID.
        title: Task title.
        done: Completion flag.
        canceled_at: Cancellation timestamp, or None while active.
        tags: Tag names in the order they were attached.
        description: Optional description.
        user_id: Owning user ID.
        category_id: Category ID.
        created_at: Creation timestamp.
        location: Optional location data.
    """

    id: int
    title: str
    done: bool
    canceled_at: Optional[datetime]
    tags: list[str] = field(default_factory=list)
    description: Optional[str] = None
    user_id: Optional[int] = None
    category_id: Optional[int] = None
    created_at: Optional[datetime] = None
    location: Optional[LocationData] = None

    @classmethod
    def from_entity(cls, task: Task) -> "TaskResult":
        return cls(
            id=task.id,
            title=task.title,
            done=task.done,
            canceled_at=task.canceled_at,
            tags=task.tag_names,
            description=task.description,
            user_id=task.user_id,
            category_id=task.category_id,
            created_at=task.created_at,
            location=LocationData.from_entity(task.location),
        )


@dataclass(frozen=True)
class CreateUserCommand:
    """Input DTO for creating a user."""

    name: Optional[str]
    email: Optional[str]


@dataclass(frozen=True)
class UserResult:
    """Output DTO for a user."""

    id: int
    name: str
    email: str

    @classmethod
    def from_entity(cls, user: User) -> "UserResult":
        return cls(id=user.id, name=user.name, email=user.email)


@dataclass(frozen=True)
class CreateCategoryCommand:
    """Input DTO for creating a category owned by a user."""

    name: Optional[str]
    user_id: int


@dataclass(frozen=True)
class CategoryResult:
    """Output DTO for a category."""

    id: int
    name: str
    user_id: int

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryResult":
        return cls(id=category.id, name=category.name, user_id=category.user_id)


@dataclass(frozen=True)
class CreateTagCommand:
    """Input DTO for creating a tag owned by a user."""

    name: Optional[str]
    user_id: int


@dataclass(frozen=True)
class TagResult:
    """Output DTO for a tag."""

    id: int
    name: str
    user_id: int

    @classmethod
    def from_entity(cls, tag: Tag) -> "TagResult":
        return cls(id=tag.id, name=tag.name, user_id=tag.user_id)
