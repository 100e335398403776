"""
Space requests module interface.
"""

from datetime import datetime
from typing import Protocol, Optional, runtime_checkable

from .models import Decision, RequestProgress, RequestStatus, SpaceRequest


@runtime_checkable
class ISpaceRequestService(Protocol):
    """
    Interface for the request lifecycle.

    Every status change is a single conditional write: if two callers race
    on the same request, exactly one succeeds and the other gets
    InvalidStatusTransitionError.
    """

    async def create_request(
        self,
        space_id: str,
        gardener_id: str,
        message: Optional[str] = None,
    ) -> SpaceRequest:
        """
        Ask to use a space. The new request is pending.

        Raises:
            RoleNotAssignedError / InsufficientPermissionsError: If the caller is not a gardener
            SpaceNotFoundError: If the space does not exist or is not listed
            OwnSpaceRequestError: If the caller owns the space
            SpaceOccupiedError: If another gardener is using the space
            DuplicateRequestError: If the caller already has an open request for it
        """
        ...

    async def decide(self, request_id: str, caller_id: str, outcome: Decision) -> SpaceRequest:
        """
        Approve or reject a pending request. Owner only.

        Raises:
            SpaceRequestNotFoundError: If the request does not exist
            TransitionNotPermittedError: If the caller does not own the space
            InvalidStatusTransitionError: If the request is not pending
            SpaceOccupiedError: On approval, if another gardener is using the space
        """
        ...

    async def start(self, request_id: str, caller_id: str) -> SpaceRequest:
        """
        Begin using an approved space. Requesting gardener only.

        Raises:
            SpaceRequestNotFoundError: If the request does not exist
            TransitionNotPermittedError: If the caller is not the gardener
            InvalidStatusTransitionError: If the request is not approved
            SpaceOccupiedError: If another gardener is using the space
        """
        ...

    async def complete(self, request_id: str, caller_id: str) -> SpaceRequest:
        """
        End an active use. Either party may complete.

        Raises:
            SpaceRequestNotFoundError: If the request does not exist
            TransitionNotPermittedError: If the caller is neither party
            InvalidStatusTransitionError: If the request is not active
        """
        ...

    async def get_request(self, request_id: str, caller_id: str) -> SpaceRequest:
        """
        Get a request the caller is a party to.

        Raises:
            SpaceRequestNotFoundError: If the request does not exist
            RequestAccessDeniedError: If the caller is neither party
        """
        ...

    async def list_for_gardener(self, gardener_id: str) -> list[SpaceRequest]:
        """List the caller's own requests, newest first."""
        ...

    async def list_incoming(
        self,
        owner_id: str,
        status: Optional[RequestStatus] = None,
    ) -> list[SpaceRequest]:
        """List requests on the caller's spaces with gardener names, newest first."""
        ...

    async def get_progress(
        self,
        request_id: str,
        caller_id: str,
        now: Optional[datetime] = None,
    ) -> RequestProgress:
        """Report how far the request's period has run."""
        ...
