"""Password Hashing — bcrypt wrapper used by registration, login and the legacy re-hash pass.

Invariants:
    - hash() never returns the raw password
    - verify() never raises on malformed stored values (returns False)
    - is_hash() recognizes every bcrypt prefix ($2a$, $2b$, $2y$)
"""

import bcrypt

_BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")


class PasswordHasher:
    """Adaptive one-way hashing with a configurable work factor."""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        if not self.is_hash(password_hash):
            return False
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8"),
            )
        except ValueError:
            return False

    @staticmethod
    def is_hash(value: str | None) -> bool:
        return bool(value) and value.startswith(_BCRYPT_PREFIXES)
