"""Access Policy — static route → role table consulted before every guarded handler.

Invariants:
    - All functions are PURE: no IO, no async, no DB
    - First matching rule wins; rules are ordered most-specific first
    - A rule with role=None admits anonymous callers
    - No matching rule means "any authenticated caller"
    - Role membership only: an ADMIN may act on any user id

Design Decisions:
    - Prefix table over per-route decorators: the whole policy is readable in one place
    - Task routes carry no user id in the path: handlers scope by the principal
"""

from dataclasses import dataclass

from todo_app.core.domain_types import API_PREFIX, Principal, Role
from todo_app.core.errors import AuthorizationError


@dataclass(frozen=True)
class AccessRule:
    """One row of the access table."""
    method: str | None      # None matches any method
    prefix: str
    role: Role | None       # None admits anonymous callers

    def matches(self, method: str, path: str) -> bool:
        if self.method is not None and self.method != method.upper():
            return False
        return path == self.prefix or path.startswith(self.prefix + "/")


ACCESS_RULES: tuple[AccessRule, ...] = (
    AccessRule("POST", f"{API_PREFIX}/register", None),
    AccessRule(None, f"{API_PREFIX}/tasks", Role.USER),
    AccessRule(None, f"{API_PREFIX}/users", Role.ADMIN),
)


def resolve_rule(method: str, path: str) -> AccessRule | None:
    """Return the first rule matching the request, or None."""
    for rule in ACCESS_RULES:
        if rule.matches(method, path):
            return rule
    return None


def is_anonymous_allowed(rule: AccessRule | None) -> bool:
    return rule is not None and rule.role is None


def check_role(principal: Principal, rule: AccessRule | None) -> None:
    """Raise AuthorizationError when the principal lacks the rule's role."""
    if rule is None or rule.role is None:
        return
    if not principal.has_role(rule.role):
        raise AuthorizationError(rule.role.value)
