"""User Repository — persistence for users and their authorities.

Invariants:
    - add() flushes so the database-assigned id is available before commit
    - Deleting a user cascades to its tasks and authorities (ORM + FK ondelete)
"""

from sqlalchemy import select, update, func
from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.core.domain_types import Role, UserId
from todo_app.models.authority import Authority
from todo_app.models.user import User


class UserRepository:
    """SQLAlchemy-backed user storage."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def add(self, username: str, email: str, password_hash: str) -> User:
        user = User(username=username, email=email, password=password_hash)
        self.db.add(user)
        await self.db.flush()
        return user

    async def add_authority(self, user: User, role: Role) -> Authority:
        authority = Authority(
            username=user.username, role=role.value, user_id=user.id,
        )
        self.db.add(authority)
        await self.db.flush()
        return authority

    async def get(self, user_id: UserId) -> User | None:
        result = await self.db.execute(
            select(User).where(User.id == user_id),
        )
        return result.scalar_one_or_none()

    async def find_by_username(self, username: str) -> User | None:
        result = await self.db.execute(
            select(User).where(User.username == username),
        )
        return result.scalar_one_or_none()

    async def find_id_by_username(self, username: str) -> UserId | None:
        result = await self.db.execute(
            select(User.id).where(User.username == username),
        )
        user_id = result.scalar_one_or_none()
        return UserId(user_id) if user_id is not None else None

    async def exists(self, user_id: UserId) -> bool:
        result = await self.db.execute(
            select(func.count()).select_from(User).where(User.id == user_id),
        )
        return result.scalar_one() > 0

    async def list_all(self) -> list[User]:
        result = await self.db.execute(select(User).order_by(User.id))
        return list(result.scalars().all())

    async def roles_of(self, user_id: UserId) -> frozenset[Role]:
        result = await self.db.execute(
            select(Authority.role).where(Authority.user_id == user_id),
        )
        return frozenset(Role(role) for role in result.scalars().all())

    async def update_password(self, user_id: UserId, password_hash: str) -> None:
        await self.db.execute(
            update(User)
            .where(User.id == user_id)
            .values(password=password_hash)
            .execution_options(synchronize_session="fetch"),
        )

    async def delete(self, user: User) -> None:
        await self.db.delete(user)
        await self.db.flush()
