"""Task Items — user-scoped CRUD endpoints for task items.

Invariants:
    - Every endpoint resolves a UserScope first; unknown users → 404
    - Write endpoints take the owner from the form's `user` field (missing → empty → 404)
    - Literal paths (/create/..., /update/...) registered before /{user_identifier}/{identifier}
"""

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.core.domain_types import ProjectionShape
from taskhub.infrastructure.database import get_db
from taskhub.schemas.task_item import TaskItemFormItem, TaskItemListItem
from taskhub.services.project_entities import (
    blank_task_item_form, to_task_item_form,
)
from taskhub.services.resolve_user_scope import resolve_scope_for_identifier
from taskhub.services.task_item_service import TaskItemService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/taskitems", tags=["taskitems"])


@router.get("", response_model=list[TaskItemListItem])
async def list_task_items(
    user_identifier: str = Query("", alias="userIdentifier"),
    db: AsyncSession = Depends(get_db),
):
    """List the task items of one user."""
    scope = await resolve_scope_for_identifier(db, user_identifier)
    return await TaskItemService(db).list_for_user(scope)


@router.get("/create/{user_identifier}", response_model=TaskItemFormItem)
async def create_template(
    user_identifier: str, db: AsyncSession = Depends(get_db),
):
    """Blank form for a new task item owned by the given user."""
    scope = await resolve_scope_for_identifier(db, user_identifier)
    return blank_task_item_form(scope)


@router.post("/create", response_model=TaskItemFormItem)
async def create_task_item(
    body: TaskItemFormItem, db: AsyncSession = Depends(get_db),
):
    """Create a task item for the user named in the form."""
    scope = await resolve_scope_for_identifier(db, body.user or "")
    task_item = await TaskItemService(db).save(scope, body)
    return to_task_item_form(task_item)


@router.get(
    "/update/{user_identifier}/{identifier}",
    response_model=TaskItemFormItem,
)
async def update_template(
    user_identifier: str, identifier: str,
    db: AsyncSession = Depends(get_db),
):
    """Pre-filled form for editing an existing task item."""
    scope = await resolve_scope_for_identifier(db, user_identifier)
    return await TaskItemService(db).get_by_identifier(
        scope, identifier, ProjectionShape.FORM,
    )


@router.put("/update", response_model=TaskItemFormItem)
async def update_task_item(
    body: TaskItemFormItem, db: AsyncSession = Depends(get_db),
):
    """Update a task item owned by the user named in the form."""
    scope = await resolve_scope_for_identifier(db, body.user or "")
    task_item = await TaskItemService(db).save(scope, body)
    return to_task_item_form(task_item)


@router.get(
    "/{user_identifier}/{identifier}", response_model=TaskItemListItem,
)
async def get_task_item(
    user_identifier: str, identifier: str,
    db: AsyncSession = Depends(get_db),
):
    """Get a single task item of a user."""
    scope = await resolve_scope_for_identifier(db, user_identifier)
    return await TaskItemService(db).get_by_identifier(
        scope, identifier, ProjectionShape.LIST,
    )


@router.delete("/{user_identifier}/{identifier}")
async def delete_task_item(
    user_identifier: str, identifier: str,
    db: AsyncSession = Depends(get_db),
):
    """Delete a task item of a user."""
    scope = await resolve_scope_for_identifier(db, user_identifier)
    deleted = await TaskItemService(db).delete(scope, identifier)
    return {"deleted": deleted}
