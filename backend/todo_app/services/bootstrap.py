"""Startup Bootstrap — admin seeding and one-time legacy password migration.

Invariants:
    - seed_admin is idempotent: running it twice never creates a second user or role
    - rehash_legacy_passwords only touches values that are not already bcrypt hashes
    - Both commit their own work; neither raises on an empty database

Design Decisions:
    - Admin comes from settings (env), never hardcoded: no route can grant ADMIN
"""

import logging

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.config import Settings
from todo_app.core.domain_types import Role, UserId
from todo_app.infrastructure.password_hasher import PasswordHasher
from todo_app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


async def seed_admin(
    db: AsyncSession, settings: Settings, hasher: PasswordHasher,
) -> None:
    """Ensure the configured admin exists with USER and ADMIN roles."""
    if not (settings.admin_username and settings.admin_password):
        return

    users = UserRepository(db)
    admin = await users.find_by_username(settings.admin_username)
    if admin is None:
        admin = await users.add(
            settings.admin_username,
            settings.admin_email,
            await run_in_threadpool(hasher.hash, settings.admin_password),
        )
        logger.info(
            "Seeded admin user", extra={"username": settings.admin_username},
        )

    granted = await users.roles_of(UserId(admin.id))
    for role in (Role.USER, Role.ADMIN):
        if role not in granted:
            await users.add_authority(admin, role)
    await db.commit()


async def rehash_legacy_passwords(db: AsyncSession, hasher: PasswordHasher) -> int:
    """Hash every stored password that is still plaintext. Returns rows rewritten."""
    users = UserRepository(db)
    rehashed = 0
    for user in await users.list_all():
        if hasher.is_hash(user.password):
            continue
        password_hash = await run_in_threadpool(hasher.hash, user.password)
        await users.update_password(UserId(user.id), password_hash)
        rehashed += 1
    await db.commit()
    if rehashed:
        logger.info("Re-hashed legacy passwords", extra={"rehashed": rehashed})
    return rehashed


async def run_bootstrap(
    db: AsyncSession, settings: Settings, hasher: PasswordHasher,
) -> None:
    if settings.rehash_legacy_passwords:
        await rehash_legacy_passwords(db, hasher)
    await seed_admin(db, settings, hasher)
