"""
Domain-specific errors for the tasks bounded context.

All errors raised from the domain and application layers are defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class TaskDomainError(Exception):
    """Base error for all tasks domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class EntityNotFoundError(TaskDomainError):
    """Base for errors signalling that a stored entity does not exist."""


class InvalidArgumentError(TaskDomainError):
    """Base for errors signalling invalid input or a broken business rule."""


class ReferenceNotFoundError(EntityNotFoundError):
    """Raised when a referenced user, category or tag does not exist."""

    def __init__(self, entity: str, entity_id: int) -> None:
        super().__init__(f"{entity} not found: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class TaskNotFoundError(EntityNotFoundError):
    """Raised when the task targeted by an operation does not exist."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id


class InvalidTaskError(InvalidArgumentError):
    """Raised when task data breaks a business rule (e.g. blank title)."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"Invalid task {field}: {reason}")
        self.field = field
        self.reason = reason


class InvalidEntityError(InvalidArgumentError):
    """Raised when user, category or tag data breaks a business rule."""

    def __init__(self, entity: str, field: str, reason: str) -> None:
        super().__init__(f"Invalid {entity} {field}: {reason}")
        self.entity = entity
        self.field = field
        self.reason = reason
