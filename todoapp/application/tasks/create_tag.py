"""
Use case: Create a tag owned by a user.

Input: CreateTagCommand (name, user_id)
Output: TagResult
Side effects: One write to the tag store.
Failure cases: InvalidEntityError, ReferenceNotFoundError.
"""

import logging

from todoapp.application.tasks.dtos import CreateTagCommand, TagResult
from todoapp.domain.tasks.entities import Tag
from todoapp.domain.tasks.errors import InvalidEntityError, ReferenceNotFoundError
from todoapp.domain.tasks.ports import TagRepository, UserRepository

logger = logging.getLogger(__name__)


class CreateTagUseCase:
    """Validates the owner and persists a new tag."""

    def __init__(self, tag_repo: TagRepository, user_repo: UserRepository) -> None:
        self._tag_repo = tag_repo
        self._user_repo = user_repo

    def execute(self, command: CreateTagCommand) -> TagResult:
        """Run the create-tag use case.

        Raises:
            InvalidEntityError: If the name is missing or blank.
            ReferenceNotFoundError: If the owning user does not exist.
        """
        if command.name is None or not command.name.strip():
            raise InvalidEntityError("tag", "name", "must not be blank")
        if self._user_repo.get_by_id(command.user_id) is None:
            raise ReferenceNotFoundError("User", command.user_id)

        saved = self._tag_repo.save(
            Tag(id=None, name=command.name.strip(), user_id=command.user_id)
        )
        logger.info("Created tag id=%s for user=%s", saved.id, saved.user_id)
        return TagResult.from_entity(saved)
