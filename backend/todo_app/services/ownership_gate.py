"""Ownership Gate — existence and ownership preconditions for task and user lookups.

Invariants:
    - A task id is never checked without its owner's user id
    - Checks run strictly before any read-for-update or delete
    - Existence is decided by lookup, never by comparing against a row count
    - Ids outside 1..MAX_STORED_ID are missing: no row can hold them, so the
      lookup is skipped and the driver never sees an out-of-range parameter

Design Decisions:
    - Depends on lookup Protocols, not repositories: the gate is testable with fakes
"""

from todo_app.core.domain_types import MAX_STORED_ID, TaskId, UserId
from todo_app.core.errors import ErrorContext, TaskNotFoundError, UserNotFoundError
from todo_app.core.repository_protocols import TaskLookup, UserLookup


def _storable(value: int) -> bool:
    return 0 < value <= MAX_STORED_ID


class OwnershipGate:
    """Raises NotFoundError subclasses when a lookup misses."""

    def __init__(self, tasks: TaskLookup, users: UserLookup):
        self._tasks = tasks
        self._users = users

    async def validate_task_ownership(self, task_id: TaskId, user_id: UserId) -> None:
        if not _storable(task_id) or not await self._tasks.exists(task_id, user_id):
            raise TaskNotFoundError(ErrorContext(user_id=user_id, task_id=task_id))

    async def validate_user_id(self, user_id: UserId) -> None:
        if not _storable(user_id) or not await self._users.exists(user_id):
            raise UserNotFoundError(context=ErrorContext(user_id=user_id))
