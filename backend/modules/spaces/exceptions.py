"""
Spaces module exceptions.
"""

from shared.exceptions import NotFoundError, AuthorizationError


class SpaceNotFoundError(NotFoundError):
    """Raised when a space does not exist (or is not listed, where that matters)."""

    def __init__(self, space_id: str):
        super().__init__(
            f"Space not found: {space_id}",
            code="SPACE_NOT_FOUND",
            details={"space_id": space_id},
        )


class SpaceAccessDeniedError(AuthorizationError):
    """Raised when someone other than the owner tries to change a space."""

    def __init__(self, space_id: str, user_id: str):
        super().__init__(
            f"Only the owner can modify space: {space_id}",
            code="SPACE_ACCESS_DENIED",
            details={"space_id": space_id, "user_id": user_id},
        )
