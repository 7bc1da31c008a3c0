"""
Use case: Create a user.

Input: CreateUserCommand (name, email)
Output: UserResult
Side effects: One write to the user store.
Failure cases: InvalidEntityError.
"""

import logging

from todoapp.application.tasks.dtos import CreateUserCommand, UserResult
from todoapp.domain.tasks.entities import User
from todoapp.domain.tasks.errors import InvalidEntityError
from todoapp.domain.tasks.ports import UserRepository

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Validates and persists a new user."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, command: CreateUserCommand) -> UserResult:
        """Run the create-user use case.

        Raises:
            InvalidEntityError: If the name or email is missing or blank.
        """
        if command.name is None or not command.name.strip():
            raise InvalidEntityError("user", "name", "must not be blank")
        if command.email is None or not command.email.strip():
            raise InvalidEntityError("user", "email", "must not be blank")

        saved = self._user_repo.save(
            User(id=None, name=command.name.strip(), email=command.email.strip())
        )
        logger.info("Created user id=%s", saved.id)
        return UserResult.from_entity(saved)
