"""
Space requests module.

The request lifecycle (pending -> approved -> active -> completed, or
pending -> rejected) and the one-active-request-per-space rule.

Public API:
- ISpaceRequestService: Interface for lifecycle operations
- SpaceRequestRepository: also read by the access and chat modules
- SpaceRequest, RequestStatus, Decision, RequestProgress
"""

from .interfaces import ISpaceRequestService
from .models import (
    Decision,
    DecisionRequest,
    RequestProgress,
    RequestStatus,
    SpaceRequest,
    SpaceSummary,
    SubmitSpaceRequest,
)
from .lifecycle import Party, TRANSITIONS, allowed_targets, authorize_transition, parties_of
from .repository import SpaceRequestRepository
from .exceptions import (
    DuplicateRequestError,
    InvalidStatusTransitionError,
    OwnSpaceRequestError,
    RequestAccessDeniedError,
    SpaceOccupiedError,
    SpaceRequestNotFoundError,
    TransitionNotPermittedError,
)

__all__ = [
    "ISpaceRequestService",
    "Decision",
    "DecisionRequest",
    "RequestProgress",
    "RequestStatus",
    "SpaceRequest",
    "SpaceSummary",
    "SubmitSpaceRequest",
    "Party",
    "TRANSITIONS",
    "allowed_targets",
    "authorize_transition",
    "parties_of",
    "SpaceRequestRepository",
    "DuplicateRequestError",
    "InvalidStatusTransitionError",
    "OwnSpaceRequestError",
    "RequestAccessDeniedError",
    "SpaceOccupiedError",
    "SpaceRequestNotFoundError",
    "TransitionNotPermittedError",
]
