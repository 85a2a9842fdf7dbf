"""User Service — validated CRUD for users (unscoped).

Invariants:
    - Email is required and unique among users with a different identifier
    - Validation runs before any mutation; a failed save changes nothing
    - Create assigns a fresh UUID4 identifier; update only overwrites email
    - Deleting a user removes its task items through the ORM/FK cascade (one delete issued)
"""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.core.domain_types import (
    EntityType, ProjectionShape, UserIdentifier,
)
from taskhub.core.errors import (
    ArgumentError, ErrorContext, NotFoundError, ValidationError,
)
from taskhub.core.validate_save import check_email_present, validate_user_save
from taskhub.models.user import User
from taskhub.schemas.user import UserFormItem, UserListItem
from taskhub.services.project_entities import (
    ensure_projection_shape, project_user, to_user_list,
)

logger = logging.getLogger(__name__)


class UserService:
    """CRUD orchestration for users."""

    def __init__(self, db: AsyncSession):
        if db is None:
            raise ArgumentError("db")
        self.db = db

    async def list_all(self) -> list[UserListItem]:
        result = await self.db.execute(select(User).order_by(User.id))
        return [to_user_list(u) for u in result.scalars().all()]

    async def get_by_identifier(
        self, identifier: UserIdentifier, shape: ProjectionShape,
    ) -> UserFormItem | UserListItem:
        """Fetch one user as a view model."""
        ensure_projection_shape(shape, EntityType.USER)
        entity = await self._get_or_raise(identifier)
        return project_user(entity, shape)

    async def save(self, form: UserFormItem) -> User:
        """Create (empty identifier) or update (existing identifier) a user."""
        email_taken = False
        if check_email_present(form.email) is None:
            email_taken = await self._email_taken_by_other(
                form.email, UserIdentifier(form.identifier or ""),
            )
        errors = validate_user_save(form.email, email_taken)
        if errors:
            raise ValidationError(
                errors,
                ErrorContext(
                    entity_type=EntityType.USER.value,
                    identifier=form.identifier,
                ),
            )

        is_create = not form.identifier
        if is_create:
            entity = User(identifier=str(uuid.uuid4()))
        else:
            entity = await self._get_or_raise(UserIdentifier(form.identifier))

        entity.email = form.email

        if is_create:
            self.db.add(entity)
        await self.db.commit()

        logger.info(
            f"User {'created' if is_create else 'updated'}",
            extra={"user_identifier": entity.identifier},
        )
        return entity

    async def delete(self, identifier: UserIdentifier) -> bool:
        """Remove a user and, by cascade, its task items."""
        entity = await self._get_or_raise(identifier)
        await self.db.delete(entity)
        await self.db.commit()

        logger.info("User deleted", extra={"user_identifier": identifier})
        return True

    async def _email_taken_by_other(
        self, email: str, identifier: UserIdentifier,
    ) -> bool:
        result = await self.db.execute(
            select(User.id)
            .where(User.identifier != identifier)
            .where(User.email == email)
            .limit(1)
        )
        return result.first() is not None

    async def _get_or_raise(self, identifier: UserIdentifier) -> User:
        result = await self.db.execute(
            select(User).where(User.identifier == identifier),
        )
        entity = result.scalar_one_or_none()
        if entity is None:
            raise NotFoundError(EntityType.USER.value, identifier)
        return entity
