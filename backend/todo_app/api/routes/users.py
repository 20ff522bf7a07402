"""User Routes — admin-only listing, detail and deletion of any user.

Invariants:
    - Requires the ADMIN role (enforced by the router-level access interceptor)
    - Any ADMIN may act on any user id (no row-level scoping)
    - Bodies out are {id, username, email} projections: never the password
"""

from fastapi import APIRouter, Depends, Response, status

from todo_app.api.dependencies import authorize_request, get_user_service
from todo_app.core.domain_types import API_PREFIX, UserId
from todo_app.schemas.user import UserView, project_user
from todo_app.services.user_service import UserService

router = APIRouter(
    prefix=f"{API_PREFIX}/users", tags=["users"],
    dependencies=[Depends(authorize_request)],
)


@router.get("/{user_id}", response_model=UserView)
async def get_user(
    user_id: int, users: UserService = Depends(get_user_service),
):
    return project_user(await users.get_user(UserId(user_id)))


@router.get("/", response_model=list[UserView])
async def list_users(users: UserService = Depends(get_user_service)):
    return [project_user(u) for u in await users.list_users()]


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int, users: UserService = Depends(get_user_service),
):
    await users.delete_user(UserId(user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
