"""User ORM — persists registered accounts and their per-owner task counter.

Invariants:
    - id is an integer primary key assigned by the database
    - username is unique and non-nullable
    - password holds a bcrypt hash (legacy rows may hold plaintext until re-hashed)
    - task_seq is the last task id handed out to this owner; it only grows

Design Decisions:
    - task_seq on the user row: allocating a task id is a single-row UPDATE,
      so concurrent creations for one owner serialize on that row
    - cascade delete for tasks and authorities: deleting a user removes everything it owns
    - tasks load lazily: authenticating or listing users never pulls task rows
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from todo_app.db.base import Base


class User(Base):
    """User aggregate root: owns tasks and authorities."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    task_seq: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Relationships
    tasks: Mapped[list["Task"]] = relationship(
        "Task", back_populates="user",
        cascade="all, delete-orphan",
    )
    authorities: Mapped[list["Authority"]] = relationship(
        "Authority", back_populates="user",
        cascade="all, delete-orphan", lazy="selectin",
    )
