"""Entity Projection — explicit conversions from ORM rows to view models.

Invariants:
    - One function per (entity, shape) pair; dispatch by ProjectionShape
    - ProjectionShape.ENTITY is always rejected with InvalidRequestError
    - A task item form needs its owner loaded (form carries the owner's identifier)
"""

from taskhub.core.domain_types import EntityType, ProjectionShape
from taskhub.core.errors import ErrorContext, InvalidRequestError
from taskhub.models.task_item import TaskItem
from taskhub.models.user import User
from taskhub.schemas.task_item import TaskItemFormItem, TaskItemListItem
from taskhub.schemas.user import UserFormItem, UserListItem
from taskhub.services.resolve_user_scope import UserScope


# ─── User ────────────────────────────────────────────────────────

def to_user_form(user: User) -> UserFormItem:
    return UserFormItem(identifier=user.identifier, email=user.email)


def to_user_list(user: User) -> UserListItem:
    return UserListItem(identifier=user.identifier, email=user.email)


def project_user(
    user: User, shape: ProjectionShape,
) -> UserFormItem | UserListItem:
    """Project a user into the requested view model."""
    if shape == ProjectionShape.FORM:
        return to_user_form(user)
    if shape == ProjectionShape.LIST:
        return to_user_list(user)
    raise _entity_shape_rejected(EntityType.USER)


# ─── TaskItem ────────────────────────────────────────────────────

def to_task_item_form(task_item: TaskItem) -> TaskItemFormItem:
    if task_item.user is None:
        raise InvalidRequestError(
            "TaskItem owner is not loaded; cannot build the form shape",
            ErrorContext(
                entity_type=EntityType.TASK_ITEM.value,
                identifier=task_item.identifier,
            ),
        )
    return TaskItemFormItem(
        user=task_item.user.identifier,
        identifier=task_item.identifier,
        name=task_item.name,
        description=task_item.description,
        task_item_status=task_item.task_item_status,
    )


def to_task_item_list(task_item: TaskItem) -> TaskItemListItem:
    owner = task_item.user
    return TaskItemListItem(
        user=to_user_list(owner) if owner is not None else None,
        identifier=task_item.identifier,
        name=task_item.name,
        description=task_item.description,
        task_item_status=task_item.task_item_status,
    )


def project_task_item(
    task_item: TaskItem, shape: ProjectionShape,
) -> TaskItemFormItem | TaskItemListItem:
    """Project a task item into the requested view model."""
    if shape == ProjectionShape.FORM:
        return to_task_item_form(task_item)
    if shape == ProjectionShape.LIST:
        return to_task_item_list(task_item)
    raise _entity_shape_rejected(EntityType.TASK_ITEM)


# ─── Templates ───────────────────────────────────────────────────

def blank_user_form() -> UserFormItem:
    """Empty create form for a new user."""
    return UserFormItem(identifier="", email="")


def blank_task_item_form(scope: UserScope) -> TaskItemFormItem:
    """Empty create form pre-bound to the scope's user."""
    return TaskItemFormItem(
        user=scope.user_identifier,
        identifier="",
        name="",
        description="",
        task_item_status=None,
    )


def ensure_projection_shape(shape: ProjectionShape, entity_type: EntityType) -> None:
    """Fail fast when a caller asks for the raw entity instead of a view model."""
    if shape not in (ProjectionShape.FORM, ProjectionShape.LIST):
        raise _entity_shape_rejected(entity_type)


def _entity_shape_rejected(entity_type: EntityType) -> InvalidRequestError:
    return InvalidRequestError(
        f"Cannot return the {entity_type.value} entity itself; use a projection type",
        ErrorContext(entity_type=entity_type.value),
    )
