"""
Space API endpoints.

Browsing is public; everything that changes a space needs its owner.
"""

from fastapi import APIRouter, Depends, File, Query, UploadFile
from typing import Optional

from api.middleware.auth import get_current_user
from api.dependencies import get_space_service
from shared.models import AuthenticatedUser

from .interfaces import ISpaceService
from .models import (
    CreateSpaceRequest,
    OwnedSpace,
    SetActiveRequest,
    Space,
    UpdateSpaceRequest,
)

router = APIRouter()


@router.get("", response_model=list[Space])
async def list_spaces(
    search: Optional[str] = Query(default=None, max_length=200, description="Match title or address"),
    service: ISpaceService = Depends(get_space_service),
) -> list[Space]:
    """Browse listed spaces, newest first."""
    return await service.list_active(search)


@router.post("", response_model=Space, status_code=201)
async def create_space(
    request: CreateSpaceRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISpaceService = Depends(get_space_service),
) -> Space:
    """List a new space (landowners only)."""
    return await service.create_space(user.id, request)


@router.get("/mine", response_model=list[OwnedSpace])
async def list_my_spaces(
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISpaceService = Depends(get_space_service),
) -> list[OwnedSpace]:
    """List the caller's spaces with pending request counts."""
    return await service.list_owned(user.id)


@router.get("/{space_id}", response_model=Space)
async def get_space(
    space_id: str,
    service: ISpaceService = Depends(get_space_service),
) -> Space:
    return await service.get_space(space_id)


@router.put("/{space_id}", response_model=Space)
async def update_space(
    space_id: str,
    request: UpdateSpaceRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISpaceService = Depends(get_space_service),
) -> Space:
    return await service.update_space(space_id, user.id, request)


@router.patch("/{space_id}/active", response_model=Space)
async def set_space_active(
    space_id: str,
    request: SetActiveRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISpaceService = Depends(get_space_service),
) -> Space:
    """Hide or re-list a space without deleting it."""
    return await service.set_active(space_id, user.id, request.is_active)


@router.delete("/{space_id}", status_code=204)
async def delete_space(
    space_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISpaceService = Depends(get_space_service),
) -> None:
    """
    Delete a space permanently.

    Its requests and their chat history are deleted with it.
    """
    await service.delete_space(space_id, user.id)


@router.post("/{space_id}/image", response_model=Space)
async def upload_space_image(
    space_id: str,
    file: UploadFile = File(...),
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISpaceService = Depends(get_space_service),
) -> Space:
    content = await file.read()
    return await service.upload_image(
        space_id,
        user.id,
        file.filename or "image",
        content,
        file.content_type,
    )
