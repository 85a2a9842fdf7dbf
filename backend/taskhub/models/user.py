"""User ORM — persists the owner of task items.

Invariants:
    - id is the integer surrogate key, never exposed over the API
    - identifier is the external UUID text, unique, assigned once at creation
    - email is non-nullable; uniqueness enforced by UserService validation
    - deleting a user deletes its task items

Design Decisions:
    - cascade delete for task_items at the ORM level, mirrored by ON DELETE CASCADE on the FK
    - task_items loaded with selectin: async sessions cannot lazy-load on attribute access
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taskhub.db.base import Base


class User(Base):
    """User aggregate root — owns task items."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    identifier: Mapped[str] = mapped_column(
        String(36), nullable=False, unique=True, index=True,
    )
    email: Mapped[str] = mapped_column(
        String(320), nullable=False, default="", index=True,
    )

    # Relationships
    task_items: Mapped[list["TaskItem"]] = relationship(
        "TaskItem", back_populates="user",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="TaskItem.id",
    )
