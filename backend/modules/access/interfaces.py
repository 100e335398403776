"""
Access module interface.
"""

from typing import Protocol, runtime_checkable

from .models import AccessCredential, AccessVerification


@runtime_checkable
class IAccessService(Protocol):
    """Interface for issuing and checking entry credentials."""

    async def verify(self, token: str) -> AccessVerification:
        """
        Check a scanned token.

        Valid only while the request is approved or active. Every other case
        (blank, unknown, pending, rejected, completed) is the same INVALID
        result. Never raises for a bad token.
        """
        ...

    async def get_credential(self, request_id: str, caller_id: str) -> AccessCredential:
        """
        Get the token and verification URL for the caller's own request.

        Raises:
            SpaceRequestNotFoundError: If the request does not exist
            RequestAccessDeniedError: If the caller is not the requesting gardener
        """
        ...
