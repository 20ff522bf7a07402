"""User Schemas — registration body and the password-free response projection."""

from pydantic import BaseModel

from todo_app.models.user import User


class UserRegistration(BaseModel):
    """Registration body: presence checked by UserService, not here."""
    username: str | None = None
    email: str | None = None
    password: str | None = None


class UserView(BaseModel):
    """Public user shape. Never carries the password hash."""
    id: int
    username: str
    email: str


def project_user(user: User) -> UserView:
    return UserView(id=user.id, username=user.username, email=user.email)
