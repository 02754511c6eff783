"""User endpoints."""

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, status

from outcome_envelope.core.deps import PageParams, get_page_params, get_user_service
from outcome_envelope.models.enums import UserRole
from outcome_envelope.schemas.outcome import build_paginated, build_success
from outcome_envelope.schemas.user import UserCreate, UserRead, UserUpdate
from outcome_envelope.services.user import UserService

router = APIRouter(prefix="/users", tags=["users"])


def _read(user: UserRead) -> dict:
    return user.model_dump(mode="json")


@router.get("", response_model=dict)
async def list_users(
    svc: Annotated[UserService, Depends(get_user_service)],
    paging: Annotated[PageParams, Depends(get_page_params)],
    search: str | None = None,
    role: UserRole | None = None,
):
    """List users with pagination and filters."""
    users, total = await svc.list_users(
        page=paging.page, limit=paging.limit, search=search, role=role,
    )
    return build_paginated(
        [_read(u) for u in users],
        page=paging.page,
        limit=paging.limit,
        total=total,
    ).to_body()


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
async def create_user(
    data: UserCreate,
    svc: Annotated[UserService, Depends(get_user_service)],
):
    user = await svc.create_user(data)
    return build_success(_read(user), "User created.").to_body()


@router.get("/{user_id}", response_model=dict)
async def get_user(
    user_id: uuid.UUID,
    svc: Annotated[UserService, Depends(get_user_service)],
):
    """Get a user by ID."""
    user = await svc.get_user(user_id)
    return build_success(_read(user)).to_body()


@router.patch("/{user_id}", response_model=dict)
async def update_user(
    user_id: uuid.UUID,
    data: UserUpdate,
    svc: Annotated[UserService, Depends(get_user_service)],
):
    user = await svc.update_user(user_id, data)
    return build_success(_read(user), "User updated.").to_body()


@router.delete("/{user_id}", response_model=dict)
async def delete_user(
    user_id: uuid.UUID,
    svc: Annotated[UserService, Depends(get_user_service)],
):
    """Delete a user. The envelope carries no data."""
    await svc.delete_user(user_id)
    return build_success(message="User deleted.").to_body()
