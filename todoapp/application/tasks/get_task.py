"""
Use case: Look up a single task by ID.

Input: task ID
Output: TaskResult, or None when no such task exists
Side effects: None.
Failure cases: None. Absence is a valid outcome, not an error.
"""

import logging
from typing import Optional

from todoapp.application.tasks.dtos import TaskResult
from todoapp.domain.tasks.ports import TaskRepository

logger = logging.getLogger(__name__)


class GetTaskUseCase:
    """Returns the projection of a task if it exists."""

    def __init__(self, task_repo: TaskRepository) -> None:
        self._task_repo = task_repo

    def execute(self, task_id: int) -> Optional[TaskResult]:
        """Run the get-task use case.

        Args:
            task_id: ID of the task to fetch.

        Returns:
            The task projection, or None if not found.
        """
        logger.info("Fetching task id=%s", task_id)
        task = self._task_repo.get_by_id(task_id)
        if task is None:
            return None
        return TaskResult.from_entity(task)
