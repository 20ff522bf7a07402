"""Boundary Protocols — contracts between the ownership gate and the storage adapter.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - Existence checks are scoped: a task lookup always carries its owner id

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO; the gate awaits them and raises
      on a miss, so services never see a bare bool
"""

from typing import Protocol

from todo_app.core.domain_types import TaskId, UserId


class TaskLookup(Protocol):
    """Contract for task existence checks: implemented by TaskRepository."""
    async def exists(self, task_id: TaskId, user_id: UserId) -> bool: ...


class UserLookup(Protocol):
    """Contract for user existence checks: implemented by UserRepository."""
    async def exists(self, user_id: UserId) -> bool: ...
