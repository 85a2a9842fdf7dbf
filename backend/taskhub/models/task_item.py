"""TaskItem ORM — persists a unit of work owned by one user.

Invariants:
    - Always belongs to a User (user_id FK, ON DELETE CASCADE)
    - user_id is set at creation and never reassigned
    - identifier is the external UUID text, unique, assigned once at creation
    - task_item_status stores a TaskItemStatus integer (1-4)

Design Decisions:
    - user loaded with a join: every projection needs the owner's identifier
"""

from sqlalchemy import Integer, String, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taskhub.db.base import Base


class TaskItem(Base):
    """Task item entity — scoped to its owning user."""
    __tablename__ = "task_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    identifier: Mapped[str] = mapped_column(
        String(36), nullable=False, unique=True, index=True,
    )
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    name: Mapped[str | None] = mapped_column(Text, nullable=True)
    description: Mapped[str | None] = mapped_column(
        Text, nullable=True, default="",
    )
    task_item_status: Mapped[int] = mapped_column(Integer, nullable=False)

    # Relationships
    user: Mapped["User"] = relationship(
        "User", back_populates="task_items", lazy="joined",
    )
