"""
Profile API endpoints.
"""

from fastapi import APIRouter, Depends, File, UploadFile

from api.middleware.auth import get_current_user
from api.dependencies import get_profile_service
from shared.models import AuthenticatedUser

from .interfaces import IProfileService
from .models import Profile, UpdateProfileRequest

router = APIRouter()


@router.get("/me", response_model=Profile)
async def get_my_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    return await service.get_profile(user.id)


@router.put("/me", response_model=Profile)
async def update_my_profile(
    request: UpdateProfileRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    """Create or replace the caller's name and location."""
    return await service.update_profile(user.id, request)


@router.post("/me/avatar", response_model=Profile)
async def upload_my_avatar(
    file: UploadFile = File(...),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    """
    Upload a new avatar image.

    Files over the avatar size limit are rejected with 400 before anything
    is stored.
    """
    content = await file.read()
    return await service.upload_avatar(
        user.id,
        file.filename or "avatar",
        content,
        file.content_type,
    )


@router.get("/{user_id}", response_model=Profile)
async def get_profile(
    user_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    return await service.get_profile(user_id)
