"""Users — CRUD endpoints for users.

Invariants:
    - Write endpoints accept and return UserFormItem
    - Reads return UserListItem; delete returns {"deleted": true}
    - Literal paths (/create, /update/...) registered before /{identifier}
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.core.domain_types import ProjectionShape
from taskhub.infrastructure.database import get_db
from taskhub.schemas.user import UserFormItem, UserListItem
from taskhub.services.project_entities import blank_user_form, to_user_form
from taskhub.services.user_service import UserService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=list[UserListItem])
async def list_users(db: AsyncSession = Depends(get_db)):
    """List all users."""
    return await UserService(db).list_all()


@router.get("/create", response_model=UserFormItem)
async def create_template():
    """Blank form for creating a user."""
    return blank_user_form()


@router.post("/create", response_model=UserFormItem)
async def create_user(
    body: UserFormItem, db: AsyncSession = Depends(get_db),
):
    """Create a user. A non-empty identifier in the body updates instead."""
    user = await UserService(db).save(body)
    return to_user_form(user)


@router.get("/update/{identifier}", response_model=UserFormItem)
async def update_template(
    identifier: str, db: AsyncSession = Depends(get_db),
):
    """Pre-filled form for editing an existing user."""
    return await UserService(db).get_by_identifier(
        identifier, ProjectionShape.FORM,
    )


@router.put("/update", response_model=UserFormItem)
async def update_user(
    body: UserFormItem, db: AsyncSession = Depends(get_db),
):
    """Update a user's email."""
    user = await UserService(db).save(body)
    return to_user_form(user)


@router.get("/{identifier}", response_model=UserListItem)
async def get_user(identifier: str, db: AsyncSession = Depends(get_db)):
    """Get a single user."""
    return await UserService(db).get_by_identifier(
        identifier, ProjectionShape.LIST,
    )


@router.delete("/{identifier}")
async def delete_user(identifier: str, db: AsyncSession = Depends(get_db)):
    """Delete a user together with all of its task items."""
    deleted = await UserService(db).delete(identifier)
    return {"deleted": deleted}
