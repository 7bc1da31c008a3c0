"""
Pydantic schemas for the tasks API request/response validation.

These schemas enforce structural input validation and define the API
contract. Business rules (blank titles, missing references) are checked
by the use cases. No business logic belongs here.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from todoapp.application.tasks.dtos import (
    CategoryResult,
    LocationData,
    TagResult,
    TaskResult,
    UserResult,
)
from todoapp.domain.tasks.entities import TITLE_MAX_LENGTH

NAME_MAX_LEN = 255


class LocationSchema(BaseModel):
    """Optional place attached to a task."""

    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    name: Optional[str] = Field(default=None, max_length=NAME_MAX_LEN)
    description: Optional[str] = None

    def to_data(self) -> LocationData:
        return LocationData(
            latitude=self.latitude,
            longitude=self.longitude,
            name=self.name,
            description=self.description,
        )

    @classmethod
    def from_data(cls, data: Optional[LocationData]) -> Optional["LocationSchema"]:
        if data is None:
            return None
        return cls(
            latitude=data.latitude,
            longitude=data.longitude,
            name=data.name,
            description=data.description,
        )


class CreateTaskRequest(BaseModel):
    """Request schema for task creation.

    Attributes:
        title: Task title (1-255 chars, must not be blank).
        description: Optional free-text description.
        user_id: ID of the owning user.
        category_id: ID of the task category.
        tag_ids: Optional tag IDs, applied in the given order.
        location: Optional location.
    """

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH, description="Task title")
    description: Optional[str] = Field(default=None, description="Task description")
    user_id: int = Field(..., gt=0, description="Owning user ID")
    category_id: int = Field(..., gt=0, description="Category ID")
    tag_ids: Optional[list[int]] = Field(default=None, description="Tag IDs in display order")
    location: Optional[LocationSchema] = None


class TaskResponse(BaseModel):
    """Response schema for a task projection."""

    id: int
    title: str
    description: Optional[str] = None
    done: bool
    canceled_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    user_id: Optional[int] = None
    category_id: Optional[int] = None
    tags: list[str]
    location: Optional[LocationSchema] = None

    @classmethod
    def from_result(cls, result: TaskResult) -> "TaskResponse":
        return cls(
            id=result.id,
            title=result.title,
            description=result.description,
            done=result.done,
            canceled_at=result.canceled_at,
            created_at=result.created_at,
            user_id=result.user_id,
            category_id=result.category_id,
            tags=list(result.tags),
            location=LocationSchema.from_data(result.location),
        )


class CreateUserRequest(BaseModel):
    """Request schema for user creation."""

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    email: str = Field(..., min_length=3, max_length=NAME_MAX_LEN, pattern=r"^[^@\s]+@[^@\s]+$")


class UserResponse(BaseModel):
    """Response schema for a user."""

    id: int
    name: str
    email: str

    @classmethod
    def from_result(cls, result: UserResult) -> "UserResponse":
        return cls(id=result.id, name=result.name, email=result.email)


class CreateOwnedEntityRequest(BaseModel):
    """Request schema shared by category and tag creation."""

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    user_id: int = Field(..., gt=0, description="Owning user ID")


class OwnedEntityResponse(BaseModel):
    """Response schema shared by categories and tags."""

    id: int
    name: str
    user_id: int

    @classmethod
    def from_result(cls, result: CategoryResult | TagResult) -> "OwnedEntityResponse":
        return cls(id=result.id, name=result.name, user_id=result.user_id)


class ErrorResponse(BaseModel):
    """Body of a single-message error response."""

    error: str


class ValidationErrorResponse(BaseModel):
    """Body of a field-level validation error response."""

    errors: list[str]


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str
