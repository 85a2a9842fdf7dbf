"""Domain Types — verifies enum values and identity wrappers.

Tests:
    - TaskItemStatus has exactly the four persisted values 1..4
    - display_name yields the PascalCase label used in status text
    - is_defined rejects values outside the enum
    - ProjectionShape exposes FORM, LIST and ENTITY
"""

from taskhub.core.domain_types import (
    EntityType, ProjectionShape, TaskItemIdentifier, TaskItemStatus,
    UserIdentifier,
)


def test_identity_types_wrap_str():
    assert UserIdentifier("abc") == "abc"
    assert TaskItemIdentifier("def") == "def"


def test_task_item_status_values():
    assert [s.value for s in TaskItemStatus] == [1, 2, 3, 4]
    assert TaskItemStatus.PENDING == 1
    assert TaskItemStatus.CANCELLED == 4


def test_display_name_is_pascal_case():
    assert TaskItemStatus.PENDING.display_name == "Pending"
    assert TaskItemStatus.IN_PROGRESS.display_name == "InProgress"
    assert TaskItemStatus.COMPLETED.display_name == "Completed"
    assert TaskItemStatus.CANCELLED.display_name == "Cancelled"


def test_is_defined():
    assert TaskItemStatus.is_defined(1)
    assert TaskItemStatus.is_defined(4)
    assert not TaskItemStatus.is_defined(0)
    assert not TaskItemStatus.is_defined(5)
    assert not TaskItemStatus.is_defined(-1)


def test_projection_shape_members():
    assert set(ProjectionShape) == {
        ProjectionShape.FORM, ProjectionShape.LIST, ProjectionShape.ENTITY,
    }
    assert ProjectionShape("list") is ProjectionShape.LIST


def test_entity_type_names():
    assert EntityType.USER.value == "User"
    assert EntityType.TASK_ITEM.value == "TaskItem"
