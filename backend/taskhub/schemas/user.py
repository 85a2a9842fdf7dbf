"""User Schemas — edit-form and list view models for users.

Invariants:
    - UserFormItem and UserListItem are structurally identical but kept distinct
    - identifier empty/None on a form means "create"
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UserFormItem(BaseModel):
    """Create/update payload and edit template for a user."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    identifier: str | None = None
    email: str | None = None


class UserListItem(BaseModel):
    """Read-only user view, also embedded as the owner of task items."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    identifier: str | None = None
    email: str | None = None
