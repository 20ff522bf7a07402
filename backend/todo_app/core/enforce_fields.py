"""Field Enforcement — presence checks gating every task and user mutation.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Raise a FieldValidationError subclass on violation, return None on success
    - "Empty" means None or zero length; whitespace-only strings are valid
    - No length limits, no content rules beyond presence

Design Decisions:
    - Raise (not return error dicts): services abort before any write, so the
      failure path never reaches the storage adapter
"""

from todo_app.core.errors import InvalidTaskDataError, InvalidUserDataError


def is_present(value: str | None) -> bool:
    """True when value is neither None nor the empty string."""
    return value is not None and len(value) > 0


def validate_task_fields(title: str | None, description: str | None) -> None:
    """Title and description must both be present."""
    if not (is_present(title) and is_present(description)):
        raise InvalidTaskDataError()


def validate_user_fields(
    username: str | None, email: str | None, password: str | None,
) -> None:
    """Username, email and raw password must all be present."""
    if not (is_present(username) and is_present(email) and is_present(password)):
        raise InvalidUserDataError()


def validate_username(username: str | None) -> None:
    """Checked before translating a username into a user id."""
    if not is_present(username):
        raise InvalidUserDataError("Invalid username.")
