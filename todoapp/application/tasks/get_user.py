"""
Use case: Look up a user by ID.

Input: user ID
Output: UserResult, or None when no such user exists
Side effects: None.
"""

from typing import Optional

from todoapp.application.tasks.dtos import UserResult
from todoapp.domain.tasks.ports import UserRepository


class GetUserUseCase:
    """Returns a user if it exists."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, user_id: int) -> Optional[UserResult]:
        user = self._user_repo.get_by_id(user_id)
        return UserResult.from_entity(user) if user is not None else None
