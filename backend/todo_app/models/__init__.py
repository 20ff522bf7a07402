"""ORM Models — SQLAlchemy declarative models for users, tasks and authorities.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is the aggregate root; tasks and authorities are scoped by user_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from todo_app.models.user import User  # noqa: F401
from todo_app.models.task import Task  # noqa: F401
from todo_app.models.authority import Authority  # noqa: F401
