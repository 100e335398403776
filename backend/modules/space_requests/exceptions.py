"""
Space request module exceptions.
"""

from shared.exceptions import (
    AuthorizationError,
    ConflictError,
    InvalidTransitionError,
    NotFoundError,
)


class SpaceRequestNotFoundError(NotFoundError):
    """Raised when a request does not exist."""

    def __init__(self, request_id: str):
        super().__init__(
            f"Request not found: {request_id}",
            code="REQUEST_NOT_FOUND",
            details={"request_id": request_id},
        )


class RequestAccessDeniedError(AuthorizationError):
    """Raised when someone other than the two parties reads a request."""

    def __init__(self, request_id: str, user_id: str):
        super().__init__(
            f"Access denied to request: {request_id}",
            code="REQUEST_ACCESS_DENIED",
            details={"request_id": request_id, "user_id": user_id},
        )


class TransitionNotPermittedError(AuthorizationError):
    """Raised when the caller has no authority for a lifecycle edge."""

    def __init__(self, request_id: str, user_id: str, action: str):
        super().__init__(
            f"Not allowed to {action} request: {request_id}",
            code="TRANSITION_NOT_PERMITTED",
            details={"request_id": request_id, "user_id": user_id, "action": action},
        )


class InvalidStatusTransitionError(InvalidTransitionError):
    """Raised when the requested status is not adjacent to the current one."""

    def __init__(self, request_id: str, current: str, target: str):
        super().__init__(
            f"Cannot move request from {current} to {target}",
            code="INVALID_TRANSITION",
            details={"request_id": request_id, "current": current, "target": target},
        )


class SpaceOccupiedError(ConflictError):
    """Raised when another gardener's request is active on the space."""

    def __init__(self, space_id: str):
        super().__init__(
            f"Space is currently in use: {space_id}",
            code="SPACE_OCCUPIED",
            details={"space_id": space_id},
        )


class DuplicateRequestError(ConflictError):
    """Raised when the gardener already has an open request for the space."""

    def __init__(self, space_id: str, gardener_id: str, existing_request_id: str = ""):
        super().__init__(
            "You already have an open request for this space",
            code="DUPLICATE_REQUEST",
            details={
                "space_id": space_id,
                "gardener_id": gardener_id,
                "existing_request_id": existing_request_id,
            },
        )


class OwnSpaceRequestError(AuthorizationError):
    """Raised when an owner asks to use their own space."""

    def __init__(self, space_id: str, user_id: str):
        super().__init__(
            "You cannot request your own space",
            code="OWN_SPACE_REQUEST",
            details={"space_id": space_id, "user_id": user_id},
        )
