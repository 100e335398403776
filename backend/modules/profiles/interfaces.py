"""
Profiles module interface.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import Profile, UpdateProfileRequest


@runtime_checkable
class IProfileService(Protocol):
    """Interface for profile operations. A user only ever writes their own profile."""

    async def get_profile(self, user_id: str) -> Profile:
        """
        Get a user's profile.

        Raises:
            ProfileNotFoundError: If the user has no profile row
        """
        ...

    async def update_profile(self, user_id: str, request: UpdateProfileRequest) -> Profile:
        """Upsert name and location of the caller's own profile."""
        ...

    async def upload_avatar(
        self,
        user_id: str,
        filename: str,
        content: bytes,
        content_type: Optional[str],
    ) -> Profile:
        """
        Store a new avatar image and point the profile at it.

        Raises:
            FileTooLargeError: If the image exceeds the avatar size limit
        """
        ...
