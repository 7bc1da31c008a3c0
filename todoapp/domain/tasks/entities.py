"""
Domain entities for the tasks bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

TITLE_MAX_LENGTH = 255


@dataclass(frozen=True)
class User:
    """Owner of categories, tags and tasks."""

    id: Optional[int]
    name: str
    email: str


@dataclass(frozen=True)
class Category:
    """A user-owned grouping that every task belongs to."""

    id: Optional[int]
    name: str
    user_id: int


@dataclass(frozen=True)
class Tag:
    """A user-owned label that can be attached to many tasks."""

    id: Optional[int]
    name: str
    user_id: int


@dataclass(frozen=True)
class Location:
    """Optional place attached to a task."""

    latitude: Optional[float] = None
    longitude: Optional[float] = None
    name: Optional[str] = None
    description: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        """Return True when no location field carries a value."""
        return (
            self.latitude is None
            and self.longitude is None
            and not self.name
            and not self.description
        )


@dataclass
class Task:
    """A to-do item owned by exactly one user.

    ``done`` and ``canceled_at`` are independent: cancelling a task leaves
    its completion flag untouched, and toggling a cancelled task is allowed.
    ``canceled_at`` is set at most once.
    """

    title: str
    user_id: int
    category_id: int
    created_at: datetime
    description: Optional[str] = None
    tags: list[Tag] = field(default_factory=list)
    location: Optional[Location] = None
    done: bool = False
    canceled_at: Optional[datetime] = None
    id: Optional[int] = None

    @property
    def is_canceled(self) -> bool:
        """Return True once the task has been cancelled."""
        return self.canceled_at is not None

    @property
    def tag_names(self) -> list[str]:
        """Return tag names in attachment order."""
        return [tag.name for tag in self.tags]

    def toggle_done(self) -> None:
        """Flip the completion flag."""
        self.done = not self.done

    def cancel(self, now: datetime) -> bool:
        """Mark the task as cancelled.

        Args:
            now: Timestamp to record as the cancellation time.

        Returns:
            True if the task was cancelled by this call, False if it
            was already cancelled (the original timestamp is kept).
        """
        if self.is_canceled:
            return False
        self.canceled_at = now
        return True
