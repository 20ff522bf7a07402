"""Authority ORM — role labels consumed by the access policy.

Invariants:
    - Always belongs to a User (user_id FK, cascade on delete)
    - (user_id, role) is unique
    - role is one of Role (USER, ADMIN)

Design Decisions:
    - username denormalized: mirrors the classic users/authorities schema
"""

from sqlalchemy import Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from todo_app.db.base import Base


class Authority(Base):
    """Authority entity: one role granted to one user."""
    __tablename__ = "authorities"
    __table_args__ = (
        UniqueConstraint("user_id", "role", name="uq_authorities_user_role"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(50), nullable=False)
    role: Mapped[str] = mapped_column(String(20), nullable=False)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="authorities")
