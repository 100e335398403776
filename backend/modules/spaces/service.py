"""
Space service implementation.
"""

import logging
from typing import Optional, TYPE_CHECKING

from shared.config import get_settings
from shared.storage import BlobStore
from modules.auth.interfaces import IAuthService
from modules.auth.models import UserRole
from modules.profiles.repository import ProfileRepository

from .interfaces import ISpaceService
from .models import (
    CreateSpaceRequest,
    OwnedSpace,
    Space,
    UpdateSpaceRequest,
)
from .exceptions import SpaceNotFoundError, SpaceAccessDeniedError
from .repository import SpaceRepository

if TYPE_CHECKING:
    from modules.space_requests.repository import SpaceRequestRepository

logger = logging.getLogger(__name__)

UNKNOWN_OWNER = "Unknown"


class SpaceService(ISpaceService):
    """Space listings with owner-only mutation."""

    def __init__(
        self,
        repository: SpaceRepository,
        profiles: ProfileRepository,
        requests: "SpaceRequestRepository",
        blobs: BlobStore,
        auth: IAuthService,
    ):
        self._repo = repository
        self._profiles = profiles
        self._requests = requests
        self._blobs = blobs
        self._auth = auth
        self._settings = get_settings()

    async def create_space(self, owner_id: str, request: CreateSpaceRequest) -> Space:
        await self._auth.require_role(owner_id, UserRole.LANDOWNER)
        space = self._repo.create(owner_id, request)
        logger.info("Landowner %s listed space %s", owner_id, space.id)
        return space

    async def update_space(self, space_id: str, owner_id: str, request: UpdateSpaceRequest) -> Space:
        self._get_owned(space_id, owner_id)
        return self._repo.update_fields(space_id, request)

    async def get_space(self, space_id: str) -> Space:
        space = self._repo.get_by_id(space_id)
        if space is None:
            raise SpaceNotFoundError(space_id)

        profile = self._profiles.get_by_id(space.owner_id)
        return space.model_copy(update={
            "owner_name": profile.name if profile else None,
            "owner_location": profile.location if profile else None,
        })

    async def list_active(self, search: Optional[str] = None) -> list[Space]:
        spaces = self._repo.list_active()

        if search and search.strip():
            needle = search.strip().lower()
            spaces = [
                s for s in spaces
                if needle in s.title.lower() or needle in s.address.lower()
            ]

        names = self._profiles.get_names(s.owner_id for s in spaces)
        return [
            s.model_copy(update={"owner_name": names.get(s.owner_id) or UNKNOWN_OWNER})
            for s in spaces
        ]

    async def list_owned(self, owner_id: str) -> list[OwnedSpace]:
        spaces = self._repo.list_by_owner(owner_id)
        counts = self._requests.count_pending_by_space([s.id for s in spaces])
        return [
            OwnedSpace(**s.model_dump(), pending_requests=counts.get(s.id, 0))
            for s in spaces
        ]

    async def set_active(self, space_id: str, owner_id: str, is_active: bool) -> Space:
        self._get_owned(space_id, owner_id)
        space = self._repo.set_active(space_id, is_active)
        logger.info("Space %s is_active=%s", space_id, is_active)
        return space

    async def delete_space(self, space_id: str, owner_id: str) -> None:
        self._get_owned(space_id, owner_id)
        self._repo.delete(space_id)
        logger.info("Space %s deleted by owner %s", space_id, owner_id)

    async def upload_image(
        self,
        space_id: str,
        owner_id: str,
        filename: str,
        content: bytes,
        content_type: Optional[str],
    ) -> Space:
        self._get_owned(space_id, owner_id)
        url = self._blobs.upload(
            self._settings.space_image_bucket,
            owner_id,
            filename,
            content,
            content_type,
            max_bytes=self._settings.space_image_max_bytes,
        )
        return self._repo.set_image(space_id, url)

    def _get_owned(self, space_id: str, user_id: str) -> Space:
        space = self._repo.get_by_id(space_id)
        if space is None:
            raise SpaceNotFoundError(space_id)
        if space.owner_id != user_id:
            raise SpaceAccessDeniedError(space_id, user_id)
        return space
