"""Root conftest — shared test configuration."""

import os

# Never point tests at a real database; keep bcrypt cheap
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("BCRYPT_ROUNDS", "4")
