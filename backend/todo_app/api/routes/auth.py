"""Registration — anonymous sign-up endpoint.

Invariants:
    - POST /todo/app/register is the only route open to anonymous callers
    - Success is 201 with a Location header pointing at the new user resource
    - No response body (the password never echoes back)
"""

from fastapi import APIRouter, Depends, Response, status

from todo_app.api.dependencies import authorize_request, get_user_service
from todo_app.core.domain_types import API_PREFIX
from todo_app.schemas.user import UserRegistration
from todo_app.services.user_service import UserService

router = APIRouter(
    prefix=API_PREFIX, tags=["auth"],
    dependencies=[Depends(authorize_request)],
)


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register_user(
    body: UserRegistration,
    users: UserService = Depends(get_user_service),
):
    """Register a new user with the USER role."""
    await users.create_user(body.username, body.email, body.password)
    user_id = await users.get_user_id_by_username(body.username)
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": f"{API_PREFIX}/users/{user_id}"},
    )
