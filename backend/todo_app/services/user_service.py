"""User Service — registration, lookup and deletion of accounts.

Invariants:
    - create_user validates all three fields before hashing or writing anything
    - The raw password never reaches storage or logs: only its bcrypt hash
    - Every registered user gets exactly one USER authority in the same transaction
    - A taken username is a 409 whether caught by the lookup or by the unique constraint
    - Lookups by id go through the ownership gate (existence check first)
"""

import logging

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.core.domain_types import Role, UserId
from todo_app.core.enforce_fields import validate_user_fields, validate_username
from todo_app.core.errors import ErrorContext, UserNotFoundError, UsernameTakenError
from todo_app.infrastructure.password_hasher import PasswordHasher
from todo_app.models.user import User
from todo_app.repositories.task_repository import TaskRepository
from todo_app.repositories.user_repository import UserRepository
from todo_app.services.ownership_gate import OwnershipGate

logger = logging.getLogger(__name__)


class UserService:
    """User operations: registration is anonymous, the rest are admin-only."""

    def __init__(self, db: AsyncSession, hasher: PasswordHasher):
        self.db = db
        self.hasher = hasher
        self.users = UserRepository(db)
        self.gate = OwnershipGate(TaskRepository(db), self.users)

    async def create_user(
        self, username: str | None, email: str | None, raw_password: str | None,
    ) -> User:
        validate_user_fields(username, email, raw_password)
        if await self.users.find_id_by_username(username) is not None:
            raise UsernameTakenError(ErrorContext(username=username))
        password_hash = await run_in_threadpool(self.hasher.hash, raw_password)
        try:
            user = await self.users.add(username, email, password_hash)
        except IntegrityError:
            # concurrent registration of the same name won
            await self.db.rollback()
            raise UsernameTakenError(ErrorContext(username=username)) from None
        await self.users.add_authority(user, Role.USER)
        await self.db.commit()
        logger.info(
            "User registered", extra={"user_id": user.id, "username": username},
        )
        return user

    async def get_user(self, user_id: UserId) -> User:
        await self.gate.validate_user_id(user_id)
        return await self.users.get(user_id)

    async def get_user_id_by_username(self, username: str | None) -> UserId:
        validate_username(username)
        user_id = await self.users.find_id_by_username(username)
        if user_id is None:
            raise UserNotFoundError(
                "Invalid username.", ErrorContext(username=username),
            )
        return user_id

    async def delete_user(self, user_id: UserId) -> User:
        """Delete the user (and everything it owns); return its prior state."""
        await self.gate.validate_user_id(user_id)
        user = await self.users.get(user_id)
        await self.users.delete(user)
        await self.db.commit()
        logger.info("User deleted", extra={"user_id": user_id})
        return user

    async def list_users(self) -> list[User]:
        return await self.users.list_all()
