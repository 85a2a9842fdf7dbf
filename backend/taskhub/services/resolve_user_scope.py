"""User Scope Resolution — turns a user reference into the scope every task item call runs in.

Invariants:
    - Read-only: resolution never mutates the store
    - Missing collaborators (db, user, identifier) raise ArgumentError
    - Unknown users raise NotFoundError; the empty identifier never matches
    - UserScope is frozen: one scope per request, passed explicitly to each operation
"""

import logging
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.core.domain_types import EntityType, UserIdentifier
from taskhub.core.errors import ArgumentError, NotFoundError
from taskhub.models.user import User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserScope:
    """The resolved current user that task item operations are filtered by."""
    user: User

    @property
    def user_id(self) -> int:
        return self.user.id

    @property
    def user_identifier(self) -> UserIdentifier:
        return UserIdentifier(self.user.identifier)


async def resolve_scope_for_user(db: AsyncSession, user: User) -> UserScope:
    """Build a scope from a user object, confirming its row still exists."""
    if db is None:
        raise ArgumentError("db")
    if user is None:
        raise ArgumentError("user")

    result = await db.execute(select(User).where(User.id == user.id))
    resolved = result.scalar_one_or_none()
    if resolved is None:
        logger.warning(
            f"Scope resolution failed for user id {user.id}",
            extra={"user_identifier": user.identifier},
        )
        raise NotFoundError(EntityType.USER.value, user.identifier)
    return UserScope(user=resolved)


async def resolve_scope_for_identifier(
    db: AsyncSession, identifier: UserIdentifier,
) -> UserScope:
    """Build a scope from a user's external identifier."""
    if db is None:
        raise ArgumentError("db")
    if identifier is None:
        raise ArgumentError("identifier")

    resolved = None
    if identifier:
        result = await db.execute(
            select(User).where(User.identifier == identifier),
        )
        resolved = result.scalar_one_or_none()
    if resolved is None:
        logger.warning(
            "Scope resolution failed for unknown user",
            extra={"user_identifier": identifier},
        )
        raise NotFoundError(EntityType.USER.value, identifier)
    return UserScope(user=resolved)
