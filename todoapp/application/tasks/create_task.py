"""
Use case: Create a task for an existing user and category.

Input: CreateTaskCommand (title, user_id, category_id, description, tag_ids, location)
Output: TaskResult
Side effects: One write to the task store (task row plus tag links).
Failure cases: InvalidTaskError, ReferenceNotFoundError.

Checks run in a fixed order and stop at the first failure:
title, then user, then category, then each tag in the supplied order.
Repeated tag IDs are attached once, at their first position.
Nothing is persisted unless every check passes.
"""

import logging

from todoapp.application.tasks.clock import Clock, utc_now
from todoapp.application.tasks.dtos import CreateTaskCommand, TaskResult
from todoapp.domain.tasks.entities import TITLE_MAX_LENGTH, Tag, Task
from todoapp.domain.tasks.errors import InvalidTaskError, ReferenceNotFoundError
from todoapp.domain.tasks.ports import (
    CategoryRepository,
    TagRepository,
    TaskRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)


class CreateTaskUseCase:
    """Orchestrates task creation.

    Validates the title and every referenced entity before building
    the Task and handing it to the TaskRepository.
    """

    def __init__(
        self,
        task_repo: TaskRepository,
        user_repo: UserRepository,
        category_repo: CategoryRepository,
        tag_repo: TagRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._task_repo = task_repo
        self._user_repo = user_repo
        self._category_repo = category_repo
        self._tag_repo = tag_repo
        self._clock = clock

    def execute(self, command: CreateTaskCommand) -> TaskResult:
        """Run the create-task use case.

        Args:
            command: The task data and the IDs of referenced entities.

        Returns:
            Projection of the newly persisted task.

        Raises:
            InvalidTaskError: If the title is missing, blank or too long.
            ReferenceNotFoundError: If the user, category or a tag does not exist.
        """
        logger.info(
            "Creating task for user=%s, category=%s, tags=%d",
            command.user_id,
            command.category_id,
            len(command.tag_ids or []),
        )

        if command.title is None or not command.title.strip():
            raise InvalidTaskError("title", "must not be blank")
        if len(command.title) > TITLE_MAX_LENGTH:
            raise InvalidTaskError("title", f"must be at most {TITLE_MAX_LENGTH} characters")

        if self._user_repo.get_by_id(command.user_id) is None:
            raise ReferenceNotFoundError("User", command.user_id)

        if self._category_repo.get_by_id(command.category_id) is None:
            raise ReferenceNotFoundError("Category", command.category_id)

        tags = self._resolve_tags(command.tag_ids or [])

        task = Task(
            title=command.title,
            description=command.description,
            user_id=command.user_id,
            category_id=command.category_id,
            tags=tags,
            location=command.location.to_entity() if command.location else None,
            created_at=self._clock(),
        )
        saved = self._task_repo.save(task)

        logger.info("Created task id=%s", saved.id)
        return TaskResult.from_entity(saved)

    def _resolve_tags(self, tag_ids: list[int]) -> list[Tag]:
        tags = []
        for tag_id in dict.fromkeys(tag_ids):
            tag = self._tag_repo.get_by_id(tag_id)
            if tag is None:
                raise ReferenceNotFoundError("Tag", tag_id)
            tags.append(tag)
        return tags
