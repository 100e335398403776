"""
Profile service implementation.
"""

from typing import Optional

from shared.config import get_settings
from shared.storage import BlobStore

from .interfaces import IProfileService
from .models import Profile, UpdateProfileRequest
from .exceptions import ProfileNotFoundError
from .repository import ProfileRepository


class ProfileService(IProfileService):
    """Profile reads, upserts and avatar uploads."""

    def __init__(self, repository: ProfileRepository, blobs: BlobStore):
        self._repo = repository
        self._blobs = blobs
        self._settings = get_settings()

    async def get_profile(self, user_id: str) -> Profile:
        profile = self._repo.get_by_id(user_id)
        if profile is None:
            raise ProfileNotFoundError(user_id)
        return profile

    async def update_profile(self, user_id: str, request: UpdateProfileRequest) -> Profile:
        return self._repo.upsert(
            user_id,
            {
                "name": request.name.strip(),
                "location": (request.location or "").strip() or None,
            },
        )

    async def upload_avatar(
        self,
        user_id: str,
        filename: str,
        content: bytes,
        content_type: Optional[str],
    ) -> Profile:
        url = self._blobs.upload(
            self._settings.avatar_bucket,
            user_id,
            filename,
            content,
            content_type,
            max_bytes=self._settings.avatar_max_bytes,
        )
        return self._repo.upsert(user_id, {"avatar_url": url})
