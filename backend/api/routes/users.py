"""
User-related endpoints.

Combines the JWT identity, the marketplace role and the profile into one
view of the signed-in user.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from typing import Optional

from shared.models import AuthenticatedUser
from modules.auth.interfaces import IAuthService
from modules.auth.models import UserRole
from modules.profiles.interfaces import IProfileService
from modules.profiles.exceptions import ProfileNotFoundError
from ..middleware.auth import get_current_user
from ..dependencies import get_auth_service, get_profile_service

router = APIRouter()


class CurrentUserResponse(BaseModel):
    """Signed-in user response model."""

    id: str
    email: str
    email_verified: bool
    role: Optional[UserRole] = None
    name: Optional[str] = None
    location: Optional[str] = None
    avatar_url: Optional[str] = None


@router.get("/me", response_model=CurrentUserResponse)
async def get_current_user_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    auth: IAuthService = Depends(get_auth_service),
    profiles: IProfileService = Depends(get_profile_service),
) -> CurrentUserResponse:
    """
    Get the current user with role and profile.

    A user who signed up but has no role row gets ``role: null``; the
    client sends them to finish registration.
    """
    role = await auth.get_role(user.id)
    try:
        profile = await profiles.get_profile(user.id)
    except ProfileNotFoundError:
        profile = None

    return CurrentUserResponse(
        id=user.id,
        email=user.email,
        email_verified=user.email_verified,
        role=role,
        name=profile.name if profile else user.name,
        location=profile.location if profile else None,
        avatar_url=profile.avatar_url if profile else None,
    )
