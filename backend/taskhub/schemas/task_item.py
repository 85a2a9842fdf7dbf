"""TaskItem Schemas — edit-form and list view models for task items.

Invariants:
    - TaskItemFormItem.user is the owner's identifier string
    - TaskItemListItem.user embeds the owner as a UserListItem
    - task_item_status_text is derived: "<int> = <Name>" or "N/a"
    - A boolean taskItemStatus is rejected at the boundary, never coerced to 1/0
"""

from pydantic import BaseModel, ConfigDict, computed_field, field_validator
from pydantic.alias_generators import to_camel

from taskhub.core.domain_types import TaskItemStatus
from taskhub.schemas.user import UserListItem


class TaskItemFormItem(BaseModel):
    """Create/update payload and edit template for a task item."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user: str | None = None
    identifier: str | None = None
    name: str | None = None
    description: str | None = None
    # int, not TaskItemStatus: out-of-range values must reach save validation
    task_item_status: int | None = None

    @field_validator("task_item_status", mode="before")
    @classmethod
    def reject_boolean_status(cls, v):
        # lax int coercion would turn true/false into 1/0
        if isinstance(v, bool):
            raise ValueError("TaskItemStatus must be an integer, not a boolean")
        return v


class TaskItemListItem(BaseModel):
    """Read-only task item view with the owner embedded."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user: UserListItem | None = None
    identifier: str | None = None
    name: str | None = None
    description: str | None = None
    task_item_status: int | None = None

    @computed_field(alias="taskItemStatusText")
    @property
    def task_item_status_text(self) -> str:
        if self.task_item_status is None:
            return "N/a"
        if not TaskItemStatus.is_defined(self.task_item_status):
            return f"{self.task_item_status} = {self.task_item_status}"
        status = TaskItemStatus(self.task_item_status)
        return f"{status.value} = {status.display_name}"
