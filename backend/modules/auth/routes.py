"""
Auth API endpoints.

Sign-up and sign-in go through Supabase Auth; the marketplace role lives
in the user_roles table.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from typing import Optional

from api.middleware.auth import get_access_token, get_current_user
from api.dependencies import get_auth_service
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import AuthSession, SignInRequest, SignUpRequest, SignUpResult, UserRole

router = APIRouter()


class RoleResponse(BaseModel):
    """The caller's marketplace role (null until assigned)."""

    user_id: str
    role: Optional[UserRole] = None


@router.post("/signup", response_model=SignUpResult, status_code=201)
async def sign_up(
    request: SignUpRequest,
    auth: IAuthService = Depends(get_auth_service),
) -> SignUpResult:
    """
    Register a landowner or gardener.

    When email confirmation is on, no session is returned.
    """
    return await auth.sign_up(request)


@router.post("/signin", response_model=AuthSession)
async def sign_in(
    request: SignInRequest,
    auth: IAuthService = Depends(get_auth_service),
) -> AuthSession:
    return await auth.sign_in(request.email, request.password)


@router.post("/signout", status_code=204)
async def sign_out(
    token: str = Depends(get_access_token),
    auth: IAuthService = Depends(get_auth_service),
) -> None:
    await auth.sign_out(token)


@router.get("/role", response_model=RoleResponse)
async def get_role(
    user: AuthenticatedUser = Depends(get_current_user),
    auth: IAuthService = Depends(get_auth_service),
) -> RoleResponse:
    return RoleResponse(user_id=user.id, role=await auth.get_role(user.id))
