"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserIdentifier, TaskItemIdentifier wrap the external UUID text — never the surrogate int key
    - TaskItemStatus values are fixed: 1..4, persisted as integers
    - ProjectionShape is the only way to ask for a view model

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - IntEnum for TaskItemStatus: the integer value is the wire and storage format
"""

from enum import Enum, IntEnum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserIdentifier = NewType("UserIdentifier", str)
TaskItemIdentifier = NewType("TaskItemIdentifier", str)


# ─── Enums ───────────────────────────────────────────────────────

class TaskItemStatus(IntEnum):
    """Task item lifecycle states — maps to DB `task_item_status` column."""
    PENDING = 1
    IN_PROGRESS = 2
    COMPLETED = 3
    CANCELLED = 4

    @property
    def display_name(self) -> str:
        """PascalCase label, e.g. IN_PROGRESS -> 'InProgress'."""
        return self.name.title().replace("_", "")

    @classmethod
    def is_defined(cls, value: int) -> bool:
        try:
            cls(value)
        except ValueError:
            return False
        return True


class ProjectionShape(str, Enum):
    """View model selector for get_by_identifier.

    ENTITY exists so callers can name the raw row; requesting it is rejected.
    """
    FORM = "form"
    LIST = "list"
    ENTITY = "entity"


class EntityType(str, Enum):
    """Entity names used in error messages and log extras."""
    USER = "User"
    TASK_ITEM = "TaskItem"
