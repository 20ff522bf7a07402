"""Task Service — validate, then persist, for every task operation of one owner.

Invariants:
    - Every mutation calls its validator first and aborts before any write on failure
    - update_task checks ownership BEFORE field validation
    - All operations are scoped to the owner id passed in (the authenticated caller)
    - The service holds no state between calls; one instance per request/session

Design Decisions:
    - create_task returns the allocated id so the route can build the Location header
    - Per-owner ids come from a monotonic counter: deleted ids are never handed out again
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.core.domain_types import TaskId, UserId
from todo_app.core.enforce_fields import validate_task_fields
from todo_app.models.task import Task
from todo_app.repositories.task_repository import TaskRepository
from todo_app.repositories.user_repository import UserRepository
from todo_app.services.ownership_gate import OwnershipGate

logger = logging.getLogger(__name__)


class TaskService:
    """Task operations for a single authenticated owner."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.tasks = TaskRepository(db)
        self.gate = OwnershipGate(self.tasks, UserRepository(db))

    async def create_task(
        self, title: str | None, description: str | None, owner_id: UserId,
    ) -> TaskId:
        validate_task_fields(title, description)
        task_id = await self.tasks.allocate_id(owner_id)
        await self.tasks.add(task_id, owner_id, title, description)
        await self.db.commit()
        logger.info(
            "Task created", extra={"user_id": owner_id, "task_id": task_id},
        )
        return task_id

    async def get_task(self, task_id: TaskId, owner_id: UserId) -> Task:
        await self.gate.validate_task_ownership(task_id, owner_id)
        return await self.tasks.get(task_id, owner_id)

    async def update_task(
        self,
        task_id: TaskId,
        owner_id: UserId,
        title: str | None,
        description: str | None,
    ) -> None:
        await self.gate.validate_task_ownership(task_id, owner_id)
        validate_task_fields(title, description)
        await self.tasks.update(task_id, owner_id, title, description)
        await self.db.commit()

    async def delete_task(self, task_id: TaskId, owner_id: UserId) -> Task:
        """Delete and return the task as it was before deletion."""
        await self.gate.validate_task_ownership(task_id, owner_id)
        task = await self.tasks.get(task_id, owner_id)
        await self.tasks.delete(task_id, owner_id)
        await self.db.commit()
        logger.info(
            "Task deleted", extra={"user_id": owner_id, "task_id": task_id},
        )
        return task

    async def list_tasks(self, owner_id: UserId) -> list[Task]:
        return await self.tasks.list_for_owner(owner_id)
