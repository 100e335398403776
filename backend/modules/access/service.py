"""
Access token verifier.
"""

import logging
from urllib.parse import urlencode

from shared.config import get_settings
from modules.profiles.repository import ProfileRepository
from modules.space_requests.exceptions import RequestAccessDeniedError, SpaceRequestNotFoundError
from modules.space_requests.models import RequestStatus
from modules.space_requests.repository import SpaceRequestRepository

from .interfaces import IAccessService
from .models import AccessCredential, AccessResult, AccessVerification

logger = logging.getLogger(__name__)

# The only statuses that grant entry
ENTRY_STATUSES = frozenset({RequestStatus.APPROVED, RequestStatus.ACTIVE})

UNKNOWN_GARDENER = "Unknown"


class AccessService(IAccessService):
    """Fail-closed token verification and credential lookup."""

    def __init__(self, requests: SpaceRequestRepository, profiles: ProfileRepository):
        self._requests = requests
        self._profiles = profiles
        self._settings = get_settings()

    async def verify(self, token: str) -> AccessVerification:
        token = (token or "").strip()
        if not token:
            logger.info("Access check: blank token")
            return AccessVerification.invalid()

        request = self._requests.get_by_token(token)
        if request is None:
            logger.info("Access check: unknown token")
            return AccessVerification.invalid()

        if request.status not in ENTRY_STATUSES or request.space is None:
            logger.info("Access check: request %s is %s", request.id, request.status.value)
            return AccessVerification.invalid()

        profile = self._profiles.get_by_id(request.gardener_id)
        logger.info("Access check: request %s valid", request.id)
        return AccessVerification(
            result=AccessResult.VALID,
            gardener_name=(profile.name if profile else None) or UNKNOWN_GARDENER,
            space_title=request.space.title,
            space_address=request.space.address,
        )

    async def get_credential(self, request_id: str, caller_id: str) -> AccessCredential:
        request = self._requests.get_by_id(request_id)
        if request is None:
            raise SpaceRequestNotFoundError(request_id)
        if request.gardener_id != caller_id:
            raise RequestAccessDeniedError(request_id, caller_id)

        if request.status not in ENTRY_STATUSES or not request.qr_code_token:
            return AccessCredential(request_id=request.id, status=request.status)

        return AccessCredential(
            request_id=request.id,
            status=request.status,
            token=request.qr_code_token,
            verify_url=self.verify_url(request.id, request.qr_code_token),
        )

    def verify_url(self, request_id: str, token: str) -> str:
        base = self._settings.frontend_url.rstrip("/")
        return f"{base}/requests/{request_id}/qr?{urlencode({'token': token})}"
