"""
Space request API endpoints.

Lifecycle failures surface through the app-level FarmShareError handler:
unknown request 404, wrong party 403, wrong status 409, occupied 409.
"""

from fastapi import APIRouter, Depends, Query
from typing import Optional

from api.middleware.auth import get_current_user
from api.dependencies import get_space_request_service
from shared.models import AuthenticatedUser

from .interfaces import ISpaceRequestService
from .models import (
    DecisionRequest,
    RequestProgress,
    RequestStatus,
    SpaceRequest,
    SubmitSpaceRequest,
)

router = APIRouter()


@router.post("", response_model=SpaceRequest, status_code=201)
async def create_request(
    request: SubmitSpaceRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISpaceRequestService = Depends(get_space_request_service),
) -> SpaceRequest:
    """
    Ask to use a space.

    The request starts out pending until the landowner decides.
    """
    return await service.create_request(request.space_id, user.id, request.message)


@router.get("/mine", response_model=list[SpaceRequest])
async def list_my_requests(
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISpaceRequestService = Depends(get_space_request_service),
) -> list[SpaceRequest]:
    """List the current gardener's requests, newest first."""
    return await service.list_for_gardener(user.id)


@router.get("/incoming", response_model=list[SpaceRequest])
async def list_incoming_requests(
    status: Optional[RequestStatus] = Query(default=None, description="Filter by status"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISpaceRequestService = Depends(get_space_request_service),
) -> list[SpaceRequest]:
    """List requests on the current landowner's spaces."""
    return await service.list_incoming(user.id, status)


@router.get("/{request_id}", response_model=SpaceRequest)
async def get_request(
    request_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISpaceRequestService = Depends(get_space_request_service),
) -> SpaceRequest:
    return await service.get_request(request_id, user.id)


@router.post("/{request_id}/decision", response_model=SpaceRequest)
async def decide_request(
    request_id: str,
    decision: DecisionRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISpaceRequestService = Depends(get_space_request_service),
) -> SpaceRequest:
    """
    Approve or reject a pending request.

    Only the owner of the requested space may decide.
    """
    return await service.decide(request_id, user.id, decision.outcome)


@router.post("/{request_id}/start", response_model=SpaceRequest)
async def start_request(
    request_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISpaceRequestService = Depends(get_space_request_service),
) -> SpaceRequest:
    """Begin using an approved space (requesting gardener only)."""
    return await service.start(request_id, user.id)


@router.post("/{request_id}/complete", response_model=SpaceRequest)
async def complete_request(
    request_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISpaceRequestService = Depends(get_space_request_service),
) -> SpaceRequest:
    """End an active use. Either party may complete."""
    return await service.complete(request_id, user.id)


@router.get("/{request_id}/progress", response_model=RequestProgress)
async def get_request_progress(
    request_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISpaceRequestService = Depends(get_space_request_service),
) -> RequestProgress:
    return await service.get_progress(request_id, user.id)
