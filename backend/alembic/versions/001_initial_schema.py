"""Initial schema — users and task_items with cascading owner FK.

Revision ID: 001_initial
Revises: None
Create Date: 2025-08-24

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("identifier", sa.String(36), nullable=False),
        sa.Column("email", sa.String(320), nullable=False, server_default=""),
    )
    op.create_index("ix_users_identifier", "users", ["identifier"], unique=True)
    op.create_index("ix_users_email", "users", ["email"])

    op.create_table(
        "task_items",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("identifier", sa.String(36), nullable=False),
        sa.Column(
            "user_id", sa.Integer,
            sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("name", sa.Text, nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("task_item_status", sa.Integer, nullable=False),
    )
    op.create_index(
        "ix_task_items_identifier", "task_items", ["identifier"], unique=True,
    )
    op.create_index("ix_task_items_user_id", "task_items", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_task_items_user_id", table_name="task_items")
    op.drop_index("ix_task_items_identifier", table_name="task_items")
    op.drop_table("task_items")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_index("ix_users_identifier", table_name="users")
    op.drop_table("users")
