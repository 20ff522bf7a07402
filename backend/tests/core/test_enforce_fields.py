"""Field Enforcement — tests for pure presence validation.

Tests cover:
    - validate_task_fields rejects None/empty title or description
    - validate_user_fields rejects any None/empty field
    - validate_username rejects None/empty
    - whitespace-only values pass (no trimming)
"""

import pytest

from todo_app.core.enforce_fields import (
    is_present,
    validate_task_fields,
    validate_user_fields,
    validate_username,
)
from todo_app.core.errors import (
    FieldValidationError, InvalidTaskDataError, InvalidUserDataError,
)


# ─── is_present ──────────────────────────────────────────────────

@pytest.mark.parametrize("value,expected", [
    (None, False),
    ("", False),
    (" ", True),
    ("x", True),
])
def test_is_present(value, expected):
    assert is_present(value) is expected


# ─── validate_task_fields ────────────────────────────────────────

def test_validate_task_fields_accepts_present_values():
    assert validate_task_fields("Title", "Description") is None


@pytest.mark.parametrize("title,description", [
    (None, "d"), ("", "d"), ("t", None), ("t", ""), (None, None), ("", None),
])
def test_validate_task_fields_rejects_missing(title, description):
    with pytest.raises(InvalidTaskDataError) as exc:
        validate_task_fields(title, description)
    assert isinstance(exc.value, FieldValidationError)
    assert exc.value.http_status == 400


def test_validate_task_fields_accepts_whitespace():
    validate_task_fields("   ", "\n")


# ─── validate_user_fields ────────────────────────────────────────

def test_validate_user_fields_accepts_present_values():
    validate_user_fields("alice", "alice@example.com", "pw")


@pytest.mark.parametrize("username,email,password", [
    (None, "e", "p"), ("", "e", "p"),
    ("u", None, "p"), ("u", "", "p"),
    ("u", "e", None), ("u", "e", ""),
])
def test_validate_user_fields_rejects_missing(username, email, password):
    with pytest.raises(InvalidUserDataError) as exc:
        validate_user_fields(username, email, password)
    assert exc.value.message == "User attributes cannot be either null or empty."


# ─── validate_username ───────────────────────────────────────────

@pytest.mark.parametrize("username", [None, ""])
def test_validate_username_rejects_missing(username):
    with pytest.raises(InvalidUserDataError) as exc:
        validate_username(username)
    assert exc.value.message == "Invalid username."


def test_validate_username_accepts_whitespace():
    validate_username(" ")
