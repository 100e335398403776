"""
Access API endpoints.

Verification is public: whoever scans the QR code at the gate is not
necessarily signed in.
"""

from fastapi import APIRouter, Depends, Query

from api.middleware.auth import get_current_user
from api.dependencies import get_access_service
from shared.models import AuthenticatedUser

from .interfaces import IAccessService
from .models import AccessCredential, AccessVerification

router = APIRouter()


@router.get("/verify", response_model=AccessVerification)
async def verify_token(
    token: str = Query(default="", description="Token from the scanned QR code"),
    service: IAccessService = Depends(get_access_service),
) -> AccessVerification:
    """
    Check an access token.

    Always 200; the body says valid or invalid.
    """
    return await service.verify(token)


@router.get("/credentials/{request_id}", response_model=AccessCredential)
async def get_credential(
    request_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAccessService = Depends(get_access_service),
) -> AccessCredential:
    """Get the QR credential for one of the current gardener's requests."""
    return await service.get_credential(request_id, user.id)
