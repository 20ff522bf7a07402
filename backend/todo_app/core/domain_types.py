"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId and TaskId wrap ints: a TaskId is only meaningful next to its owner's UserId
    - Roles encoded as an Enum: no raw string matching
    - Principal is immutable once resolved for a request

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON/DB without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
TaskId = NewType("TaskId", int)   # unique per owner, not globally


# ─── Constants ───────────────────────────────────────────────────

API_PREFIX = "/todo/app"
MAX_STORED_ID = 2**31 - 1   # signed 32-bit INTEGER column


# ─── Enums ───────────────────────────────────────────────────────

class Role(str, Enum):
    """Authority labels stored in the authorities table."""
    USER = "USER"
    ADMIN = "ADMIN"


# ─── Principal ───────────────────────────────────────────────────

@dataclass(frozen=True)
class Principal:
    """Identity resolved from verified basic-auth credentials."""
    user_id: UserId
    username: str
    roles: frozenset[Role]

    def has_role(self, role: Role) -> bool:
        return role in self.roles
