"""ORM Models — SQLAlchemy declarative models for users and task items.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is the aggregate root; task items are scoped by user_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from taskhub.models.user import User  # noqa: F401
from taskhub.models.task_item import TaskItem  # noqa: F401
