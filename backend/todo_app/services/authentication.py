"""Authenticator — resolves basic-auth credentials into a Principal.

Invariants:
    - Unknown username and wrong password fail identically (no user enumeration)
    - Roles are read from the authorities table on every request
    - bcrypt runs on the threadpool: the event loop keeps serving other requests
"""

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.core.domain_types import Principal, UserId
from todo_app.core.errors import AuthenticationError
from todo_app.infrastructure.password_hasher import PasswordHasher
from todo_app.repositories.user_repository import UserRepository


class Authenticator:
    """Verifies credentials against stored bcrypt hashes."""

    def __init__(self, db: AsyncSession, hasher: PasswordHasher):
        self.users = UserRepository(db)
        self.hasher = hasher

    async def authenticate(self, username: str, password: str) -> Principal:
        user = await self.users.find_by_username(username)
        if user is None or not await run_in_threadpool(
            self.hasher.verify, password, user.password,
        ):
            raise AuthenticationError("Bad credentials.")
        user_id = UserId(user.id)
        return Principal(
            user_id=user_id,
            username=user.username,
            roles=await self.users.roles_of(user_id),
        )
