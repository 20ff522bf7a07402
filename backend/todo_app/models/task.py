"""Task ORM — persists to-do items scoped to their owner.

Invariants:
    - Primary key is (user_id, id): id is unique only within one owner
    - title and description are non-nullable text
    - Ownership is never transferred (user_id is never updated)

Design Decisions:
    - Composite key over a global surrogate id: keeps the small per-owner
      numbering that the /tasks/{id} URLs expose
"""

from sqlalchemy import Integer, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from todo_app.db.base import Base


class Task(Base):
    """Task entity: a to-do item belonging to one user."""
    __tablename__ = "tasks"

    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True, autoincrement=False,
    )
    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="tasks")
