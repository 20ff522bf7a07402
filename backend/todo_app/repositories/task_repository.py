"""Task Repository — owner-scoped persistence for tasks.

Invariants:
    - Every read, update and delete is keyed by (task_id, user_id)
    - allocate_id() is the only writer of users.task_seq

Design Decisions:
    - allocate_id uses UPDATE ... RETURNING: increment and read happen in one
      statement, under the row lock of the owner's users row
"""

from sqlalchemy import select, update, delete, func
from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.core.domain_types import TaskId, UserId
from todo_app.models.task import Task
from todo_app.models.user import User


class TaskRepository:
    """SQLAlchemy-backed task storage."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def allocate_id(self, user_id: UserId) -> TaskId:
        """Advance the owner's task counter and return the new id."""
        result = await self.db.execute(
            update(User)
            .where(User.id == user_id)
            .values(task_seq=User.task_seq + 1)
            .returning(User.task_seq)
            .execution_options(synchronize_session=False),
        )
        return TaskId(result.scalar_one())

    async def add(
        self, task_id: TaskId, user_id: UserId, title: str, description: str,
    ) -> Task:
        task = Task(
            id=task_id, user_id=user_id, title=title, description=description,
        )
        self.db.add(task)
        await self.db.flush()
        return task

    async def get(self, task_id: TaskId, user_id: UserId) -> Task | None:
        result = await self.db.execute(
            select(Task)
            .where(Task.id == task_id)
            .where(Task.user_id == user_id),
        )
        return result.scalar_one_or_none()

    async def exists(self, task_id: TaskId, user_id: UserId) -> bool:
        result = await self.db.execute(
            select(func.count())
            .select_from(Task)
            .where(Task.id == task_id)
            .where(Task.user_id == user_id),
        )
        return result.scalar_one() > 0

    async def update(
        self, task_id: TaskId, user_id: UserId, title: str, description: str,
    ) -> None:
        await self.db.execute(
            update(Task)
            .where(Task.id == task_id)
            .where(Task.user_id == user_id)
            .values(title=title, description=description)
            .execution_options(synchronize_session="fetch"),
        )

    async def delete(self, task_id: TaskId, user_id: UserId) -> None:
        await self.db.execute(
            delete(Task)
            .where(Task.id == task_id)
            .where(Task.user_id == user_id)
            .execution_options(synchronize_session="fetch"),
        )

    async def list_for_owner(self, user_id: UserId) -> list[Task]:
        result = await self.db.execute(
            select(Task)
            .where(Task.user_id == user_id)
            .order_by(Task.id),
        )
        return list(result.scalars().all())
