"""Seed demo users and task items.

Revision ID: 002_seed_initial_data
Revises: 001_initial
Create Date: 2025-08-24

Fixed identifiers so the web client and manual API calls can rely on them.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "002_seed_initial_data"
down_revision: Union[str, None] = "001_initial"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


_USERS = [
    (1, "f47ac10b-58cc-4372-a567-0e02b2c3d479", "alice.borderland@testmail.com"),
    (2, "c9bf9e57-1685-4c89-bafb-ff5af830be8a", "frodo.smith@testmail.com"),
    (3, "7c9e6679-7425-40de-944b-e07fc1f90ae7", "charlie.shane@testmail.com"),
]

# (id, identifier, user_id, name, description, task_item_status)
_TASK_ITEMS = [
    (1, "86c53f64-6f9a-40c9-acce-766c8a88ae35", 1, "Task 1.1", "", 1),
    (2, "e1d82661-3c50-4ba2-9c77-5521df64a6f8", 1, "Task 1.2", "", 2),
    (3, "3311ff50-45f5-43a3-8a8b-0e9b6cbaf45f", 1, "Task 1.3", "", 3),
    (4, "554fa5ed-5c60-4c01-985b-1292fcfd9cdd", 1, "Task 1.4", "Task 1.4 Cancelled..", 4),
    (5, "7e09726a-6037-432e-941e-80cf3fa93137", 2, "Task A (001)", "Completed Before Time", 3),
    (6, "687f5642-57db-4bdf-a8cf-12c7d441c7b7", 2, "Task B (001)", "", 4),
    (7, "19ae216c-fbb7-4c56-b6da-aab9bbb58830", 2, "Task B (002)", "", 4),
]

_users_table = sa.table(
    "users",
    sa.column("id", sa.Integer),
    sa.column("identifier", sa.String),
    sa.column("email", sa.String),
)
_task_items_table = sa.table(
    "task_items",
    sa.column("id", sa.Integer),
    sa.column("identifier", sa.String),
    sa.column("user_id", sa.Integer),
    sa.column("name", sa.Text),
    sa.column("description", sa.Text),
    sa.column("task_item_status", sa.Integer),
)


def upgrade() -> None:
    op.bulk_insert(_users_table, [
        {"id": i, "identifier": ident, "email": email}
        for i, ident, email in _USERS
    ])
    op.bulk_insert(_task_items_table, [
        {
            "id": i, "identifier": ident, "user_id": user_id,
            "name": name, "description": description,
            "task_item_status": status,
        }
        for i, ident, user_id, name, description, status in _TASK_ITEMS
    ])
    # Explicit ids bypass the Postgres sequences; move them past the seed rows
    if op.get_bind().dialect.name == "postgresql":
        op.execute(
            "SELECT setval(pg_get_serial_sequence('users', 'id'), "
            "(SELECT MAX(id) FROM users))"
        )
        op.execute(
            "SELECT setval(pg_get_serial_sequence('task_items', 'id'), "
            "(SELECT MAX(id) FROM task_items))"
        )


def downgrade() -> None:
    op.execute(
        _task_items_table.delete().where(
            _task_items_table.c.id.in_([row[0] for row in _TASK_ITEMS]),
        )
    )
    op.execute(
        _users_table.delete().where(
            _users_table.c.id.in_([row[0] for row in _USERS]),
        )
    )
