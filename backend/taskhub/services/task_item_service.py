"""Task Item Service — validated, user-scoped CRUD for task items.

Invariants:
    - Every lookup filters by identifier AND scope.user_id
    - A row owned by another user is reported exactly like a missing row (NotFoundError)
    - Validation runs first and collects all violations; a failed save mutates nothing
    - Create assigns a fresh UUID4 identifier and binds the owner; update never touches either
    - Each save/delete commits once

Design Decisions:
    - UserScope passed into every call instead of held on the instance: the service
      is just the session plus behaviour
    - Returns ORM entities from save; the route decides the projection
"""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.core.domain_types import (
    EntityType, ProjectionShape, TaskItemIdentifier,
)
from taskhub.core.errors import (
    ArgumentError, ErrorContext, NotFoundError, ValidationError,
)
from taskhub.core.validate_save import validate_task_item_save
from taskhub.models.task_item import TaskItem
from taskhub.schemas.task_item import (
    TaskItemFormItem, TaskItemListItem,
)
from taskhub.services.project_entities import (
    ensure_projection_shape, project_task_item, to_task_item_list,
)
from taskhub.services.resolve_user_scope import UserScope

logger = logging.getLogger(__name__)


class TaskItemService:
    """CRUD orchestration for the task items of one resolved user."""

    def __init__(self, db: AsyncSession):
        if db is None:
            raise ArgumentError("db")
        self.db = db

    async def list_for_user(self, scope: UserScope) -> list[TaskItemListItem]:
        """All task items owned by the scope's user, in insertion order."""
        result = await self.db.execute(
            select(TaskItem)
            .where(TaskItem.user_id == scope.user_id)
            .order_by(TaskItem.id)
        )
        return [to_task_item_list(t) for t in result.scalars().all()]

    async def get_by_identifier(
        self, scope: UserScope, identifier: TaskItemIdentifier,
        shape: ProjectionShape,
    ) -> TaskItemFormItem | TaskItemListItem:
        """Fetch one task item as a view model."""
        ensure_projection_shape(shape, EntityType.TASK_ITEM)
        entity = await self._get_owned_or_raise(scope, identifier)
        return project_task_item(entity, shape)

    async def save(self, scope: UserScope, form: TaskItemFormItem) -> TaskItem:
        """Create (empty identifier) or update (existing identifier) a task item."""
        errors = validate_task_item_save(form.name, form.task_item_status)
        if errors:
            raise ValidationError(
                errors,
                ErrorContext(
                    entity_type=EntityType.TASK_ITEM.value,
                    identifier=form.identifier,
                    user_identifier=scope.user_identifier,
                ),
            )

        is_create = not form.identifier
        if is_create:
            entity = TaskItem(
                identifier=str(uuid.uuid4()),
                user_id=scope.user_id,
                user=scope.user,
            )
        else:
            entity = await self._get_owned_or_raise(
                scope, TaskItemIdentifier(form.identifier),
            )

        entity.name = form.name
        entity.description = form.description or ""
        entity.task_item_status = form.task_item_status

        if is_create:
            self.db.add(entity)
        await self.db.commit()

        logger.info(
            f"TaskItem {'created' if is_create else 'updated'}",
            extra={
                "task_item_identifier": entity.identifier,
                "user_identifier": scope.user_identifier,
            },
        )
        return entity

    async def delete(
        self, scope: UserScope, identifier: TaskItemIdentifier,
    ) -> bool:
        """Remove one owned task item."""
        entity = await self._get_owned_or_raise(scope, identifier)
        await self.db.delete(entity)
        await self.db.commit()

        logger.info(
            "TaskItem deleted",
            extra={
                "task_item_identifier": identifier,
                "user_identifier": scope.user_identifier,
            },
        )
        return True

    async def _get_owned_or_raise(
        self, scope: UserScope, identifier: TaskItemIdentifier,
    ) -> TaskItem:
        result = await self.db.execute(
            select(TaskItem)
            .where(TaskItem.identifier == identifier)
            .where(TaskItem.user_id == scope.user_id)
        )
        entity = result.scalar_one_or_none()
        if entity is None:
            raise NotFoundError(
                EntityType.TASK_ITEM.value, identifier,
                ErrorContext(user_identifier=scope.user_identifier),
            )
        return entity
