"""
Spaces module interface.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import (
    CreateSpaceRequest,
    OwnedSpace,
    Space,
    UpdateSpaceRequest,
)


@runtime_checkable
class ISpaceService(Protocol):
    """
    Interface for space listing operations.

    Only landowners create spaces; only a space's owner may change it.
    """

    async def create_space(self, owner_id: str, request: CreateSpaceRequest) -> Space:
        """
        List a new space.

        Raises:
            RoleNotAssignedError / InsufficientPermissionsError: If the caller is not a landowner
        """
        ...

    async def update_space(self, space_id: str, owner_id: str, request: UpdateSpaceRequest) -> Space:
        """
        Replace the listing fields of a space.

        Raises:
            SpaceNotFoundError: If the space does not exist
            SpaceAccessDeniedError: If the caller is not the owner
        """
        ...

    async def get_space(self, space_id: str) -> Space:
        """
        Get a space with its owner's name and location.

        Raises:
            SpaceNotFoundError: If the space does not exist
        """
        ...

    async def list_active(self, search: Optional[str] = None) -> list[Space]:
        """
        Browse listed spaces, newest first.

        Args:
            search: Case-insensitive substring matched against title or address
        """
        ...

    async def list_owned(self, owner_id: str) -> list[OwnedSpace]:
        """List an owner's spaces with their pending request counts."""
        ...

    async def set_active(self, space_id: str, owner_id: str, is_active: bool) -> Space:
        """Show or hide a listing (soft removal)."""
        ...

    async def delete_space(self, space_id: str, owner_id: str) -> None:
        """Delete a space and its history."""
        ...

    async def upload_image(
        self,
        space_id: str,
        owner_id: str,
        filename: str,
        content: bytes,
        content_type: Optional[str],
    ) -> Space:
        """Store a listing image and point the space at it."""
        ...
