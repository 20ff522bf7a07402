"""Request Dependencies — access-policy interceptor and per-request service wiring.

Invariants:
    - authorize_request runs before every guarded handler (router-level dependency)
    - Role check happens only after credentials are verified (401 before 403)
    - Services are built per request on the request's own AsyncSession
    - FastAPI caches dependencies per request: the handler's Principal is the
      one the interceptor resolved

Design Decisions:
    - Static policy table (core/access_policy.py) + one dependency: no per-route
      role decorators to keep in sync
"""

from functools import lru_cache

from fastapi import Depends, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.config import get_settings
from todo_app.core.access_policy import check_role, is_anonymous_allowed, resolve_rule
from todo_app.core.domain_types import Principal
from todo_app.core.errors import AuthenticationError
from todo_app.infrastructure.database import get_db
from todo_app.infrastructure.password_hasher import PasswordHasher
from todo_app.services.authentication import Authenticator
from todo_app.services.task_service import TaskService
from todo_app.services.user_service import UserService

basic_auth = HTTPBasic(auto_error=False, realm="todo")


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=get_settings().bcrypt_rounds)


async def authorize_request(
    request: Request,
    credentials: HTTPBasicCredentials | None = Depends(basic_auth),
    db: AsyncSession = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> Principal | None:
    """Resolve the caller and enforce the route's required role."""
    rule = resolve_rule(request.method, request.url.path)
    if is_anonymous_allowed(rule):
        return None
    if credentials is None:
        raise AuthenticationError()
    principal = await Authenticator(db, hasher).authenticate(
        credentials.username, credentials.password,
    )
    check_role(principal, rule)
    return principal


async def get_principal(
    principal: Principal | None = Depends(authorize_request),
) -> Principal:
    """Principal for handlers behind an authenticated rule."""
    if principal is None:
        raise AuthenticationError()
    return principal


def get_task_service(db: AsyncSession = Depends(get_db)) -> TaskService:
    return TaskService(db)


def get_user_service(
    db: AsyncSession = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> UserService:
    return UserService(db, hasher)
