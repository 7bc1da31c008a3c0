"""
Use case: Toggle the completion flag of a task.

Input: task ID
Output: TaskResult with the flipped ``done`` flag
Side effects: One write to the task store.
Failure cases: TaskNotFoundError.

Cancelled tasks can still be toggled.
"""

import logging

from todoapp.application.tasks.dtos import TaskResult
from todoapp.domain.tasks.errors import TaskNotFoundError
from todoapp.domain.tasks.ports import TaskRepository

logger = logging.getLogger(__name__)


class ToggleTaskStatusUseCase:
    """Flips ``done`` on an existing task and persists it."""

    def __init__(self, task_repo: TaskRepository) -> None:
        self._task_repo = task_repo

    def execute(self, task_id: int) -> TaskResult:
        """Run the toggle-status use case.

        Args:
            task_id: ID of the task to toggle.

        Returns:
            Projection of the updated task.

        Raises:
            TaskNotFoundError: If the task does not exist.
        """
        task = self._task_repo.get_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)

        task.toggle_done()
        saved = self._task_repo.save(task)

        logger.info("Task id=%s done=%s", task_id, saved.done)
        return TaskResult.from_entity(saved)
