"""
Use case: Create a category owned by a user.

Input: CreateCategoryCommand (name, user_id)
Output: CategoryResult
Side effects: One write to the category store.
Failure cases: InvalidEntityError, ReferenceNotFoundError.
"""

import logging

from todoapp.application.tasks.dtos import CategoryResult, CreateCategoryCommand
from todoapp.domain.tasks.entities import Category
from todoapp.domain.tasks.errors import InvalidEntityError, ReferenceNotFoundError
from todoapp.domain.tasks.ports import CategoryRepository, UserRepository

logger = logging.getLogger(__name__)


class CreateCategoryUseCase:
    """Validates the owner and persists a new category."""

    def __init__(
        self,
        category_repo: CategoryRepository,
        user_repo: UserRepository,
    ) -> None:
        self._category_repo = category_repo
        self._user_repo = user_repo

    def execute(self, command: CreateCategoryCommand) -> CategoryResult:
        """Run the create-category use case.

        Raises:
            InvalidEntityError: If the name is missing or blank.
            ReferenceNotFoundError: If the owning user does not exist.
        """
        if command.name is None or not command.name.strip():
            raise InvalidEntityError("category", "name", "must not be blank")
        if self._user_repo.get_by_id(command.user_id) is None:
            raise ReferenceNotFoundError("User", command.user_id)

        saved = self._category_repo.save(
            Category(id=None, name=command.name.strip(), user_id=command.user_id)
        )
        logger.info("Created category id=%s for user=%s", saved.id, saved.user_id)
        return CategoryResult.from_entity(saved)
