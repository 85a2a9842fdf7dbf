"""Entity Projection — explicit conversions and shape dispatch.

Invariants:
    - FORM and LIST dispatch to their conversions; ENTITY is rejected
    - Task item form shape needs a loaded owner
"""

import pytest

from taskhub.core.domain_types import EntityType, ProjectionShape
from taskhub.core.errors import InvalidRequestError
from taskhub.models.task_item import TaskItem
from taskhub.models.user import User
from taskhub.schemas.task_item import TaskItemFormItem, TaskItemListItem
from taskhub.schemas.user import UserFormItem, UserListItem
from taskhub.services.project_entities import (
    blank_task_item_form,
    blank_user_form,
    ensure_projection_shape,
    project_task_item,
    project_user,
)
from taskhub.services.resolve_user_scope import UserScope


def _user() -> User:
    return User(id=1, identifier="user-1", email="one@testmail.com")


def _task_item(owner: User | None) -> TaskItem:
    return TaskItem(
        id=10, identifier="task-10", user_id=1, user=owner,
        name="Write tests", description="", task_item_status=4,
    )


def test_project_user_shapes():
    user = _user()
    assert project_user(user, ProjectionShape.FORM) == UserFormItem(
        identifier="user-1", email="one@testmail.com",
    )
    assert isinstance(project_user(user, ProjectionShape.LIST), UserListItem)


def test_project_user_entity_rejected():
    with pytest.raises(InvalidRequestError):
        project_user(_user(), ProjectionShape.ENTITY)


def test_project_task_item_form():
    form = project_task_item(_task_item(_user()), ProjectionShape.FORM)
    assert isinstance(form, TaskItemFormItem)
    assert form.user == "user-1"
    assert form.task_item_status == 4


def test_project_task_item_list():
    item = project_task_item(_task_item(_user()), ProjectionShape.LIST)
    assert isinstance(item, TaskItemListItem)
    assert item.user == UserListItem(identifier="user-1", email="one@testmail.com")
    assert item.task_item_status_text == "4 = Cancelled"


def test_task_item_form_requires_owner():
    with pytest.raises(InvalidRequestError):
        project_task_item(_task_item(None), ProjectionShape.FORM)


def test_task_item_list_tolerates_missing_owner():
    item = project_task_item(_task_item(None), ProjectionShape.LIST)
    assert item.user is None


def test_task_item_entity_rejected():
    with pytest.raises(InvalidRequestError) as exc_info:
        project_task_item(_task_item(_user()), ProjectionShape.ENTITY)
    assert "projection type" in exc_info.value.message


def test_ensure_projection_shape():
    ensure_projection_shape(ProjectionShape.FORM, EntityType.USER)
    ensure_projection_shape(ProjectionShape.LIST, EntityType.USER)
    with pytest.raises(InvalidRequestError):
        ensure_projection_shape(ProjectionShape.ENTITY, EntityType.USER)


def test_blank_templates():
    assert blank_user_form() == UserFormItem(identifier="", email="")
    form = blank_task_item_form(UserScope(user=_user()))
    assert form.user == "user-1"
    assert form.identifier == ""
    assert form.task_item_status is None
