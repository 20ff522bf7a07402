"""Error Hierarchy — typed, categorized exceptions for all to-do failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error carries the HTTP status it surfaces as
    - message is the exact text returned to the caller (plain-text body)
    - Storage failures are NOT part of this hierarchy: they propagate untranslated

Design Decisions:
    - Single hierarchy with TodoError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context surfaced in logs when the error is handled."""
    user_id: int | None = None
    task_id: int | None = None
    username: str | None = None

    def as_log_extra(self) -> dict:
        return {
            key: value
            for key, value in (
                ("user_id", self.user_id),
                ("task_id", self.task_id),
                ("username", self.username),
            )
            if value is not None
        }


class TodoError(Exception):
    """Base exception for all to-do service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status


# ─── Validation Errors (400) ────────────────────────────────────

class FieldValidationError(TodoError):
    """A required field is missing or empty."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class InvalidTaskDataError(FieldValidationError):
    """Task title or description missing."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid task attributes. Title and description cannot be empty or null.",
            context,
        )


class InvalidUserDataError(FieldValidationError):
    """Username, email or password missing."""
    def __init__(
        self,
        message: str = "User attributes cannot be either null or empty.",
        context: ErrorContext | None = None,
    ):
        super().__init__(message, context)


# ─── Lookup Errors (404) ────────────────────────────────────────

class NotFoundError(TodoError):
    """Requested record does not exist (or is not owned by the caller)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )


class TaskNotFoundError(NotFoundError):
    """No task with this id under this owner."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__("Invalid task ID.", context)


class UserNotFoundError(NotFoundError):
    """No user with this id or username."""
    def __init__(
        self, message: str = "Invalid user ID.", context: ErrorContext | None = None,
    ):
        super().__init__(message, context)


# ─── Access Errors (401 / 403) ──────────────────────────────────

class AuthenticationError(TodoError):
    """Missing or invalid credentials."""
    def __init__(
        self,
        message: str = "Full authentication is required to access this resource.",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "AUTHENTICATION_REQUIRED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class AuthorizationError(TodoError):
    """Authenticated caller lacks the role the route requires."""
    def __init__(self, required_role: str, context: ErrorContext | None = None):
        super().__init__(
            f"Access denied. Role {required_role} required.",
            "ACCESS_DENIED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )
        self.required_role = required_role


# ─── Conflict Errors (409) ──────────────────────────────────────

class UsernameTakenError(TodoError):
    """Registration attempted with an existing username."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Username already exists.",
            "USERNAME_TAKEN", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )
