"""
Use case: List tasks that have not been cancelled.

Input: optional user ID
Output: list of TaskResult ordered by task ID
Side effects: None.
Failure cases: ReferenceNotFoundError when a user filter names an unknown user.
"""

import logging
from typing import Optional

from todoapp.application.tasks.dtos import TaskResult
from todoapp.domain.tasks.errors import ReferenceNotFoundError
from todoapp.domain.tasks.ports import TaskRepository, UserRepository

logger = logging.getLogger(__name__)


class ListActiveTasksUseCase:
    """Returns active (non-cancelled) tasks, optionally for one user."""

    def __init__(self, task_repo: TaskRepository, user_repo: UserRepository) -> None:
        self._task_repo = task_repo
        self._user_repo = user_repo

    def execute(self, user_id: Optional[int] = None) -> list[TaskResult]:
        """Run the list-active-tasks use case.

        Args:
            user_id: Optional owning user to filter by.

        Returns:
            Projections of active tasks.

        Raises:
            ReferenceNotFoundError: If ``user_id`` is given and does not exist.
        """
        if user_id is not None and self._user_repo.get_by_id(user_id) is None:
            raise ReferenceNotFoundError("User", user_id)

        tasks = self._task_repo.list_active(user_id=user_id)
        logger.info("Listed %d active tasks (user=%s)", len(tasks), user_id)
        return [TaskResult.from_entity(task) for task in tasks]
