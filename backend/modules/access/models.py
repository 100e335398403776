"""
Access module data models.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from modules.space_requests.models import RequestStatus


class AccessResult(str, Enum):
    """Outcome of checking an access token."""

    VALID = "valid"
    INVALID = "invalid"


class AccessVerification(BaseModel):
    """
    Result of verifying a scanned token.

    Only a valid result carries any detail. An invalid one never says why,
    so a holder cannot tell an unknown token from a finished request.
    """

    result: AccessResult
    gardener_name: Optional[str] = None
    space_title: Optional[str] = None
    space_address: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.result == AccessResult.VALID

    @classmethod
    def invalid(cls) -> "AccessVerification":
        return cls(result=AccessResult.INVALID)


class AccessCredential(BaseModel):
    """What the gardener's QR page shows."""

    request_id: str = Field(..., description="Request ID")
    status: RequestStatus = Field(..., description="Current request status")
    token: Optional[str] = Field(None, description="Access token, while entry is allowed")
    verify_url: Optional[str] = Field(None, description="URL encoded into the QR code")
