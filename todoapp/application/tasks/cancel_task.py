"""
Use case: Cancel a task.

Input: task ID
Output: None
Side effects: Sets ``canceled_at`` on the first call; later calls write nothing.
Failure cases: TaskNotFoundError.
"""

import logging

from todoapp.application.tasks.clock import Clock, utc_now
from todoapp.domain.tasks.errors import TaskNotFoundError
from todoapp.domain.tasks.ports import TaskRepository

logger = logging.getLogger(__name__)


class CancelTaskUseCase:
    """Soft-deletes a task by stamping its cancellation time.

    The completion flag is left untouched.
    """

    def __init__(self, task_repo: TaskRepository, clock: Clock = utc_now) -> None:
        self._task_repo = task_repo
        self._clock = clock

    def execute(self, task_id: int) -> None:
        """Run the cancel-task use case.

        Args:
            task_id: ID of the task to cancel.

        Raises:
            TaskNotFoundError: If the task does not exist.
        """
        task = self._task_repo.get_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)

        if not task.cancel(self._clock()):
            logger.info("Task id=%s already cancelled at %s", task_id, task.canceled_at)
            return

        self._task_repo.save(task)
        logger.info("Cancelled task id=%s", task_id)
