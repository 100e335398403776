"""
Space request service implementation.

Owns the request lifecycle. All status writes go through _apply(), which
checks authority and adjacency first and then performs one conditional
update keyed on the status the request was read in.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, Any

from shared.config import get_settings
from shared.exceptions import ExternalServiceError
from modules.auth.interfaces import IAuthService
from modules.auth.models import UserRole
from modules.profiles.repository import ProfileRepository
from modules.spaces.exceptions import SpaceNotFoundError
from modules.spaces.repository import SpaceRepository

from .interfaces import ISpaceRequestService
from .lifecycle import Party, authorize_transition, parties_of
from .models import Decision, RequestProgress, RequestStatus, SpaceRequest, SpaceSummary
from .exceptions import (
    DuplicateRequestError,
    InvalidStatusTransitionError,
    OwnSpaceRequestError,
    RequestAccessDeniedError,
    SpaceOccupiedError,
    SpaceRequestNotFoundError,
)
from .occupancy import OccupancyRule
from .progress import compute_progress
from .repository import SpaceRequestRepository
from .tokens import generate_access_token

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"
UNKNOWN_GARDENER = "Unknown"


def _is_unique_violation(error: ExternalServiceError) -> bool:
    return error.details.get("remote_code") == UNIQUE_VIOLATION


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class SpaceRequestService(ISpaceRequestService):
    """Request lifecycle with occupancy enforcement."""

    def __init__(
        self,
        repository: SpaceRequestRepository,
        spaces: SpaceRepository,
        profiles: ProfileRepository,
        auth: IAuthService,
    ):
        self._repo = repository
        self._spaces = spaces
        self._profiles = profiles
        self._auth = auth
        self._occupancy = OccupancyRule(repository)
        self._settings = get_settings()

    async def create_request(
        self,
        space_id: str,
        gardener_id: str,
        message: Optional[str] = None,
    ) -> SpaceRequest:
        await self._auth.require_role(gardener_id, UserRole.GARDENER)

        space = self._spaces.get_by_id(space_id)
        if space is None or not space.is_active:
            raise SpaceNotFoundError(space_id)
        if space.owner_id == gardener_id:
            raise OwnSpaceRequestError(space_id, gardener_id)

        self._occupancy.ensure_available(space_id, gardener_id)

        existing = self._repo.find_open_for_pair(space_id, gardener_id)
        if existing is not None:
            raise DuplicateRequestError(space_id, gardener_id, existing.id)

        data: dict[str, Any] = {
            "space_id": space_id,
            "gardener_id": gardener_id,
            "message": (message or "").strip() or None,
            "status": RequestStatus.PENDING.value,
        }
        if self._settings.access_token_policy == "on_create":
            data["qr_code_token"] = generate_access_token()

        try:
            request = self._repo.create(data)
        except ExternalServiceError as e:
            # Lost a race with a concurrent submit for the same pair
            if _is_unique_violation(e):
                raise DuplicateRequestError(space_id, gardener_id) from e
            raise

        logger.info("Gardener %s requested space %s (request %s)", gardener_id, space_id, request.id)
        return request.model_copy(update={
            "space": SpaceSummary(
                id=space.id,
                title=space.title,
                address=space.address,
                owner_id=space.owner_id,
                available_to=space.available_to,
            ),
        })

    async def decide(self, request_id: str, caller_id: str, outcome: Decision) -> SpaceRequest:
        request = self._load(request_id)
        fields: dict[str, Any] = {}
        if outcome == Decision.APPROVED and not request.qr_code_token:
            fields["qr_code_token"] = generate_access_token()
        return self._apply(request, caller_id, outcome.status, fields)

    async def start(self, request_id: str, caller_id: str) -> SpaceRequest:
        request = self._load(request_id)
        return self._apply(request, caller_id, RequestStatus.ACTIVE, {"started_at": _now()})

    async def complete(self, request_id: str, caller_id: str) -> SpaceRequest:
        request = self._load(request_id)
        return self._apply(request, caller_id, RequestStatus.COMPLETED, {"completed_at": _now()})

    async def get_request(self, request_id: str, caller_id: str) -> SpaceRequest:
        request = self._load(request_id)
        self._require_party(request, caller_id)
        return request

    async def list_for_gardener(self, gardener_id: str) -> list[SpaceRequest]:
        return self._repo.list_for_gardener(gardener_id)

    async def list_incoming(
        self,
        owner_id: str,
        status: Optional[RequestStatus] = None,
    ) -> list[SpaceRequest]:
        spaces = self._spaces.list_by_owner(owner_id)
        requests = self._repo.list_for_spaces([s.id for s in spaces], status)

        names = self._profiles.get_names(r.gardener_id for r in requests)
        return [
            r.model_copy(update={"gardener_name": names.get(r.gardener_id) or UNKNOWN_GARDENER})
            for r in requests
        ]

    async def get_progress(
        self,
        request_id: str,
        caller_id: str,
        now: Optional[datetime] = None,
    ) -> RequestProgress:
        request = await self.get_request(request_id, caller_id)
        return compute_progress(request, now)

    def _load(self, request_id: str) -> SpaceRequest:
        request = self._repo.get_by_id(request_id)
        if request is None:
            raise SpaceRequestNotFoundError(request_id)
        return request

    def _owner_of(self, request: SpaceRequest) -> Optional[str]:
        if request.space is not None:
            return request.space.owner_id
        space = self._spaces.get_by_id(request.space_id)
        return space.owner_id if space else None

    def _require_party(self, request: SpaceRequest, caller_id: str) -> frozenset[Party]:
        parties = parties_of(caller_id, request.gardener_id, self._owner_of(request))
        if not parties:
            raise RequestAccessDeniedError(request.id, caller_id)
        return parties

    def _apply(
        self,
        request: SpaceRequest,
        caller_id: str,
        target: RequestStatus,
        fields: dict[str, Any],
    ) -> SpaceRequest:
        parties = parties_of(caller_id, request.gardener_id, self._owner_of(request))
        transition = authorize_transition(request.id, caller_id, parties, request.status, target)

        if target in (RequestStatus.APPROVED, RequestStatus.ACTIVE):
            self._occupancy.ensure_available(request.space_id, request.gardener_id)

        try:
            updated = self._repo.transition(request.id, request.status, target, fields)
        except ExternalServiceError as e:
            # One active request per space is also enforced by a unique index
            if target == RequestStatus.ACTIVE and _is_unique_violation(e):
                raise SpaceOccupiedError(request.space_id) from e
            raise

        if updated is None:
            # Someone else moved it between our read and our write
            current = self._repo.get_by_id(request.id)
            if current is None:
                raise SpaceRequestNotFoundError(request.id)
            logger.info(
                "Request %s: %s lost to concurrent change (now %s)",
                request.id,
                transition.action,
                current.status.value,
            )
            raise InvalidStatusTransitionError(request.id, current.status.value, target.value)

        logger.info(
            "Request %s: %s -> %s by %s",
            request.id,
            request.status.value,
            target.value,
            caller_id,
        )
        return updated.model_copy(update={"space": request.space})
